"""Exception hierarchy for the documentation renderer.

All errors raised by :mod:`apidocs` derive from :class:`ApiDocsError`
so callers (the command line in particular) can report them uniformly.
Malformed example payloads are deliberately absent from this list: the
value formatter degrades to raw text instead of raising.
"""

from __future__ import annotations


class ApiDocsError(Exception):
    """Base class for all documentation errors."""


class ValidationError(ApiDocsError):
    """Raised when render input is missing a required value.

    Covers records without a ``method`` or ``path`` and input documents
    whose top-level shape cannot be turned into records.
    """


class UnknownFormatError(ApiDocsError, KeyError):
    """Raised when a format id is not registered."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the message readable.
        return str(self.args[0]) if self.args else ""


class ExportCancelled(ApiDocsError):
    """Raised when the export format choice is dismissed.

    This is an expected outcome, not a failure, and is never shown to
    the user as an error.
    """


class DeliveryError(ApiDocsError):
    """Raised when an assembled document cannot be written out."""
