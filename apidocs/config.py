"""
Configuration management.
Loads environment variables (optionally from a .env file) and provides
the settings used by the command line.
"""
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_TITLE = "API Documentation"
DEFAULT_LOG_LEVEL = "WARNING"

# Searches the current directory and its parents; existing variables win.
load_dotenv()


@dataclass(frozen=True)
class Settings:
    """Runtime settings for rendering and export."""

    title: str = DEFAULT_TITLE
    output_dir: Path = Path(".")
    log_level: str = DEFAULT_LOG_LEVEL


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Build settings from the environment.

    Args:
        environ: Mapping to read instead of ``os.environ``.

    Returns:
        Settings with APIDOCS_TITLE, APIDOCS_OUTPUT_DIR and
        APIDOCS_LOG_LEVEL applied over the defaults.
    """
    env = os.environ if environ is None else environ

    log_level = env.get("APIDOCS_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
    if not isinstance(logging.getLevelName(log_level), int):
        logger.warning(f"Unknown APIDOCS_LOG_LEVEL '{log_level}', using {DEFAULT_LOG_LEVEL}")
        log_level = DEFAULT_LOG_LEVEL

    return Settings(
        title=env.get("APIDOCS_TITLE") or DEFAULT_TITLE,
        output_dir=Path(env.get("APIDOCS_OUTPUT_DIR") or "."),
        log_level=log_level,
    )
