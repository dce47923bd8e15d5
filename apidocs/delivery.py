"""Delivery of assembled documents to files.

Writes the content produced by :func:`apidocs.exports.build_export`.
Word documents get a UTF-8 byte-order mark so word processors detect
the encoding of the HTML they import.  A failure is reported once as
:class:`~apidocs.errors.DeliveryError`; nothing is retried.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

from .choice import FormatChoice
from .errors import DeliveryError, ExportCancelled
from .exports import ExportDocument, ExportFormat, build_export

logger = logging.getLogger(__name__)

BOM = "\ufeff"


def content_type(export_format: ExportFormat) -> str:
    """Return the MIME type to declare for ``export_format``."""
    return f"{export_format.mime_type};charset=utf-8"


def encode_document(document: ExportDocument) -> bytes:
    """Encode ``document`` as UTF-8, adding the BOM where the format needs it."""
    content = document.content
    if not content:
        raise DeliveryError("Content is required")
    if document.format.bom:
        content = BOM + content
    return content.encode("utf-8")


def write_document(
    document: ExportDocument,
    directory: Union[str, Path],
    filename: Optional[str] = None,
) -> Path:
    """Write ``document`` into ``directory`` and return the path written.

    Args:
        document: The assembled export.
        directory: Output directory, created if missing.
        filename: Overrides the format's standard filename.

    Raises:
        DeliveryError: If the file cannot be written.
    """
    path = Path(directory) / (filename or document.format.filename)

    data = encode_document(document)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)
    except OSError as exc:
        raise DeliveryError(f"Failed to write {path}: {exc.strerror or exc}") from exc

    logger.info("Wrote %s (%s, %d bytes)", path, content_type(document.format), len(data))
    return path


def export_with_choice(
    records,
    choice: FormatChoice,
    directory: Union[str, Path],
    title: Optional[str] = None,
    timeout: Optional[float] = None,
) -> Optional[Path]:
    """Wait for ``choice``, then build and write the export.

    Returns:
        The written path, or ``None`` if the choice was dismissed.  A
        dismissed choice writes nothing and is not an error.
    """
    try:
        format_id = choice.wait(timeout=timeout)
    except ExportCancelled:
        logger.info("Export cancelled, no file written")
        return None

    document = build_export(list(records), format_id, title=title)
    return write_document(document, directory)
