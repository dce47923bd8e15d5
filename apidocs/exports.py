"""Document assembly and export formats.

:func:`assemble` is the single entry point that turns a sequence of
records into a complete document for one renderer format.  JSON is not a
renderer: :func:`export_json` serializes the records themselves.

``EXPORT_FORMATS`` describes what the export action offers: the file
name, MIME type and whether the delivery layer must prefix a byte-order
mark.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Sequence

from .errors import UnknownFormatError, ValidationError
from .formatting import to_json
from .model import DocumentationRecord
from .renderers import renderer_registry

logger = logging.getLogger(__name__)

JSON_FORMAT = "json"
NOTHING_TO_EXPORT = "No documentation to export. Please generate documentation first."


@dataclass(frozen=True)
class ExportFormat:
    """A file format offered by the export action."""

    key: str
    label: str
    icon: str
    filename: str
    mime_type: str
    bom: bool = False


EXPORT_FORMATS: Dict[str, ExportFormat] = {
    fmt.key: fmt
    for fmt in (
        ExportFormat("html", "HTML Document", "📄", "api-documentation.html", "text/html"),
        ExportFormat("md", "Markdown", "📝", "api-documentation.md", "text/markdown"),
        ExportFormat("json", "JSON", "{ }", "api-documentation.json", "application/json"),
        ExportFormat(
            "word", "Word Document", "📰", "api-documentation.doc",
            "application/msword", bom=True,
        ),
    )
}


@dataclass(frozen=True)
class ExportDocument:
    """An assembled document ready for the delivery layer."""

    format: ExportFormat
    content: str


def render_formats() -> List[str]:
    """Return every format id :func:`render` accepts."""
    return renderer_registry.keys() + [JSON_FORMAT]


def get_export_format(key: str) -> ExportFormat:
    try:
        return EXPORT_FORMATS[key]
    except KeyError:
        available = ", ".join(EXPORT_FORMATS)
        raise UnknownFormatError(
            f"Invalid export format '{key}'. Available: {available}"
        ) from None


def export_json(records: Iterable[DocumentationRecord]) -> str:
    """Serialize the raw records as a JSON array with 2-space indentation."""
    return to_json([record.to_dict() for record in records])


def assemble(
    records: Iterable[DocumentationRecord],
    format_id: str,
    title: Optional[str] = None,
) -> str:
    """Render ``records`` into a complete document.

    Args:
        records: Records in the order they should appear.
        format_id: A registered renderer (``preview``, ``html``, ``md``,
            ``word``).
        title: Document title; the renderer default when omitted.

    Returns:
        The document text.  An empty sequence yields the document shell.

    Raises:
        UnknownFormatError: If ``format_id`` is not registered.
    """
    records = list(records)
    renderer = renderer_registry.create(format_id, title=title)
    logger.debug("Assembling %d endpoint(s) as %s", len(records), format_id)
    return renderer.render_document(records)


def render(
    records: Iterable[DocumentationRecord],
    format_id: str,
    title: Optional[str] = None,
) -> str:
    """Like :func:`assemble`, but also accepts ``json``."""
    if format_id == JSON_FORMAT:
        return export_json(records)
    return assemble(records, format_id, title=title)


def build_export(
    records: Sequence[DocumentationRecord],
    format_id: str,
    title: Optional[str] = None,
) -> ExportDocument:
    """Build the export file content for ``format_id``.

    Raises:
        ValidationError: If there is nothing to export.
        UnknownFormatError: If ``format_id`` is not an export format.
    """
    export_format = get_export_format(format_id)
    if not records:
        raise ValidationError(NOTHING_TO_EXPORT)
    content = render(records, export_format.key, title=title)
    return ExportDocument(format=export_format, content=content)
