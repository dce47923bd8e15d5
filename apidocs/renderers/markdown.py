"""Markdown renderer.

Renders records as GitHub Flavoured Markdown: a ``##`` heading per
endpoint, pipe tables for parameters and response fields, and fenced
JSON blocks for examples.  Endpoints are separated by a horizontal
rule.  Response field tables leave out the Required column.
"""

from __future__ import annotations

from typing import Iterable, List

from ..formatting import format_value
from ..model import DocumentationRecord, FieldDescriptor, ReturnsDescriptor
from .base import FIELD_COLUMNS, EndpointRenderer, renderer_registry

RESPONSE_COLUMNS = tuple(c for c in FIELD_COLUMNS if c.key != "required")


def _single_line(text: str) -> str:
    """Collapse line breaks so ``text`` fits inside a table cell."""
    return " ".join(part.strip() for part in text.splitlines() if part.strip())


@renderer_registry.register("md")
class MarkdownRenderer(EndpointRenderer):
    """Render records in GitHub Flavoured Markdown format."""

    response_columns = RESPONSE_COLUMNS

    def render_document(self, records: Iterable[DocumentationRecord]) -> str:
        parts = [f"# {self.title}\n\n"]
        for endpoint in self.render_endpoints(records):
            parts.append(f"{endpoint}\n---\n\n")
        return "".join(parts)

    # -- markup ---------------------------------------------------------

    def text(self, value: object) -> str:
        if value is None:
            return ""
        return _single_line(str(value)).replace("|", "\\|")

    def code(self, value: object) -> str:
        text = self.text(value)
        if not text:
            return "-"
        if "`" in text:
            return f"`` {text} ``"
        return f"`{text}`"

    def wrap_endpoint(self, record: DocumentationRecord, sections: List[str]) -> str:
        parts = [f"## {record.method} {record.path}"]
        if record.description:
            parts.append(record.description)
        parts.extend(sections)
        return "\n\n".join(parts) + "\n"

    def render_section(self, title: str, body: str, css_class: str = "") -> str:
        return f"### {title}\n\n{body}"

    def render_notes(self, notes: List[str]) -> str:
        bullets = "\n".join(f"- {note}" for note in notes)
        return self.render_section(self.notes_title, bullets)

    def render_example(self, title: str, example: object) -> str:
        formatted = format_value(example, "object")
        return self.render_section(title, f"```json\n{formatted}\n```")

    def render_returns(self, returns: ReturnsDescriptor) -> str:
        parts = []
        if returns.description:
            parts.append(f"**Description:** {returns.description}")
        table = self.render_field_table(returns.fields, self.response_columns)
        if table:
            parts.append(f"#### Response Fields\n\n{table}")
        return self.render_section("Response", "\n\n".join(parts))

    def render_table(self, headers: List[str], rows: List[List[str]]) -> str:
        lines = [
            "| " + " | ".join(headers) + " |",
            "|" + "|".join("-" * (len(h) + 2) for h in headers) + "|",
        ]
        for row in rows:
            lines.append("| " + " | ".join(row) + " |")
        return "\n".join(lines)

    def render_example_cell(self, field: FieldDescriptor) -> str:
        return self.code(format_value(field.example, field.type))
