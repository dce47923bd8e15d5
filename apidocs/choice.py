"""One-shot export format choice.

The export action has to wait for the user to pick a format before
anything is assembled.  :class:`FormatChoice` models that decision as a
single :class:`concurrent.futures.Future`: the front end either
resolves it with a format key or cancels it, and the export side waits
on it.  Cancellation surfaces as :class:`~apidocs.errors.ExportCancelled`.
"""

from __future__ import annotations

import logging
from concurrent.futures import CancelledError, Future
from typing import Callable, Iterable, Optional

from .errors import ExportCancelled, UnknownFormatError
from .exports import EXPORT_FORMATS

logger = logging.getLogger(__name__)


class FormatChoice:
    """A pending choice of export format.

    Only the first resolution counts: choosing after a cancel (or a
    second choice) is ignored and reported as ``False``.
    """

    def __init__(self, formats: Optional[Iterable[str]] = None) -> None:
        self.formats = list(formats) if formats is not None else list(EXPORT_FORMATS)
        self._future: Future = Future()

    def choose(self, key: str) -> bool:
        """Resolve the choice with ``key``.

        Raises:
            UnknownFormatError: If ``key`` is not one of the offered formats.
        """
        if key not in self.formats:
            available = ", ".join(self.formats)
            raise UnknownFormatError(f"Invalid export format '{key}'. Available: {available}")
        if self._future.done():
            return False
        self._future.set_result(key)
        return True

    def cancel(self) -> bool:
        """Dismiss the choice without selecting a format."""
        cancelled = self._future.cancel()
        if cancelled:
            logger.info("Export format choice dismissed")
        return cancelled

    def done(self) -> bool:
        return self._future.done()

    def cancelled(self) -> bool:
        return self._future.cancelled()

    def wait(self, timeout: Optional[float] = None) -> str:
        """Block until a format is chosen and return its key.

        Raises:
            ExportCancelled: If the choice was dismissed.
            concurrent.futures.TimeoutError: If ``timeout`` expires first.
        """
        try:
            return self._future.result(timeout=timeout)
        except CancelledError:
            raise ExportCancelled("Export cancelled") from None


def prompt_format_choice(
    choice: FormatChoice,
    ask: Optional[Callable[[str], str]] = None,
) -> FormatChoice:
    """Resolve ``choice`` from an interactive prompt.

    An empty answer, end of input or Ctrl-C dismisses the choice.  The
    prompt repeats until a valid key is given.
    """
    if ask is None:
        ask = input
    options = ", ".join(
        f"{key} ({EXPORT_FORMATS[key].label})" if key in EXPORT_FORMATS else key
        for key in choice.formats
    )
    while not choice.done():
        try:
            answer = ask(f"Choose export format [{options}]: ").strip()
        except (EOFError, KeyboardInterrupt):
            choice.cancel()
            break
        if not answer:
            choice.cancel()
            break
        try:
            choice.choose(answer)
        except UnknownFormatError as exc:
            logger.warning("%s", exc)
    return choice
