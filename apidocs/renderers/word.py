"""Word-compatible HTML renderer.

Word processors import HTML when it carries Office namespaces and a
``<w:WordDocument>`` block inside an ``[if gte mso 9]`` conditional
comment.  Styling is inlined where Word ignores class selectors.

The UTF-8 byte-order mark Word needs to detect the encoding is added by
:mod:`apidocs.delivery` when the file is written, not here.
"""

from __future__ import annotations

from typing import List

from ..formatting import escape_html, format_value, method_color
from ..model import DocumentationRecord, FieldDescriptor, ReturnsDescriptor
from .base import Column, YES_NO_MARKERS, renderer_registry
from .html import HtmlRenderer

WORD_COLUMNS = (
    Column("name", "Name"),
    Column("type", "Type"),
    Column("description", "Description"),
    Column("required", "Required"),
    Column("example", "Example"),
    Column("notes", "Notes"),
)

COLUMN_WIDTHS = {
    "Name": "15%",
    "Type": "15%",
    "Description": "25%",
    "Required": "10%",
    "Example": "20%",
    "Notes": "15%",
}

HEADING_STYLE = "margin-top: 15pt; margin-bottom: 5pt"
MONOSPACE = "font-family: 'Courier New', monospace"


@renderer_registry.register("word")
class WordHtmlRenderer(HtmlRenderer):
    """Render records as an HTML document Word opens as a formatted file."""

    template_name = "word.html.jinja2"
    stylesheet_name = "word.css"
    param_columns = WORD_COLUMNS
    response_columns = WORD_COLUMNS
    required_markers = YES_NO_MARKERS
    notes_title = "Notes:"

    def code(self, value: object) -> str:
        return f'<span style="{MONOSPACE}">{escape_html(value)}</span>'

    def render_heading(self, record: DocumentationRecord) -> str:
        badge = (
            f"background-color: {method_color(record.method)}; color: white; "
            "padding: 5pt 10pt; font-weight: bold"
        )
        return (
            '<h2 style="margin-top: 20pt; margin-bottom: 10pt">'
            f'<span style="{badge}">{escape_html(record.method)}</span>'
            f'<span style="margin-left: 10pt">{escape_html(record.path)}</span></h2>'
        )

    def wrap_endpoint(self, record: DocumentationRecord, sections: List[str]) -> str:
        parts = [self.render_heading(record)]
        if record.description:
            parts.append(
                f'<p style="margin-bottom: 10pt">{escape_html(record.description)}</p>'
            )
        parts.extend(sections)
        body = "\n".join(parts)
        return (
            '<div class="endpoint" style="margin-bottom: 30pt; page-break-inside: avoid">\n'
            f"{body}\n</div>"
        )

    def render_section(self, title: str, body: str, css_class: str = "") -> str:
        return f'<h3 style="{HEADING_STYLE}">{escape_html(title)}</h3>\n{body}'

    def render_example(self, title: str, example: object) -> str:
        formatted = format_value(example, "object", escape=True)
        block = (
            f'<div style="{MONOSPACE}; background-color: #f5f5f5; padding: 10pt; '
            f'white-space: pre-wrap"><pre>{formatted}</pre></div>'
        )
        return self.render_section(title, block)

    def render_returns(self, returns: ReturnsDescriptor) -> str:
        parts = []
        if returns.description:
            parts.append(f"<p>{escape_html(returns.description)}</p>")
        table = self.render_field_table(returns.fields, self.response_columns)
        if table:
            parts.append(table)
        return self.render_section("Response", "\n".join(parts))

    def render_table(self, headers: List[str], rows: List[List[str]]) -> str:
        head = "".join(
            f'<th style="width: {COLUMN_WIDTHS.get(h, "auto")}">{escape_html(h)}</th>'
            for h in headers
        )
        body = "\n".join(
            "<tr>" + "".join(f"<td>{cell}</td>" for cell in row) + "</tr>"
            for row in rows
        )
        return f"<table>\n<tr>{head}</tr>\n{body}\n</table>"

    def render_cell(self, field: FieldDescriptor, key: str) -> str:
        # Word tables show names as plain text.
        if key == "name":
            return self.text(field.name)
        return super().render_cell(field, key)

    def render_notes_cell(self, notes: str) -> str:
        return escape_html(notes)
