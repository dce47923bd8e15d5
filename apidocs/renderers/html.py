"""HTML renderers.

Two registered formats share the markup defined here:

* ``preview`` renders an HTML fragment (stylesheet plus endpoint
  blocks) meant to be embedded into a live page.
* ``html`` renders a standalone document with its own stylesheet, as
  written by the export action.

Every piece of user-supplied text passes through
:func:`~apidocs.formatting.escape_html`; only the fixed template markup
is emitted unescaped.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List

from jinja2 import Environment, FileSystemLoader

from ..formatting import escape_html, format_value, method_class
from ..model import DocumentationRecord, FieldDescriptor, ReturnsDescriptor
from .base import EndpointRenderer, YES_NO_MARKERS, renderer_registry

# Template directory
TEMPLATES_DIR = Path(__file__).parent.parent / "templates"


class HtmlRenderer(EndpointRenderer):
    """Markup shared by the HTML family of formats.

    Subclasses pick the page template and stylesheet through
    ``template_name`` and ``stylesheet_name``.
    """

    template_name = ""
    stylesheet_name = ""

    def __init__(self, title=None):
        """Initialize renderer with Jinja2 environment."""
        super().__init__(title)
        self._env = Environment(
            loader=FileSystemLoader(TEMPLATES_DIR),
            autoescape=False,
            keep_trailing_newline=True,
        )
        self._css = None

    @property
    def css(self) -> str:
        """Load and cache the stylesheet from the template directory."""
        if self._css is None:
            self._css = (TEMPLATES_DIR / self.stylesheet_name).read_text(encoding="utf-8")
        return self._css

    def render_document(self, records: Iterable[DocumentationRecord]) -> str:
        template = self._env.get_template(self.template_name)
        return template.render(
            title=escape_html(self.title),
            css=self.css,
            endpoints=self.render_endpoints(records),
        )

    # -- markup ---------------------------------------------------------

    def text(self, value: object) -> str:
        return escape_html(value)

    def code(self, value: object) -> str:
        return f"<code>{escape_html(value)}</code>"

    def render_heading(self, record: DocumentationRecord) -> str:
        return (
            f'<h3><span class="method {method_class(record.method)}">'
            f"{escape_html(record.method)}</span> "
            f"<code>{escape_html(record.path)}</code></h3>"
        )

    def wrap_endpoint(self, record: DocumentationRecord, sections: List[str]) -> str:
        parts = [self.render_heading(record)]
        if record.description:
            parts.append(f'<div class="description">{escape_html(record.description)}</div>')
        parts.extend(sections)
        body = "\n".join(parts)
        return f'<div class="endpoint">\n{body}\n</div>'

    def render_section(self, title: str, body: str, css_class: str = "") -> str:
        return f'<div class="{css_class}">\n<h4>{escape_html(title)}</h4>\n{body}\n</div>'

    def render_notes(self, notes: List[str]) -> str:
        items = "\n".join(f"<li>{escape_html(note)}</li>" for note in notes)
        return self.render_section(self.notes_title, f"<ul>\n{items}\n</ul>", "notes")

    def render_example(self, title: str, example: object) -> str:
        formatted = format_value(example, "object", escape=True)
        return self.render_section(title, f"<pre><code>{formatted}</code></pre>", "example")

    def render_returns(self, returns: ReturnsDescriptor) -> str:
        parts = []
        if returns.description:
            parts.append(
                f"<p><strong>Description:</strong> {escape_html(returns.description)}</p>"
            )
        table = self.render_field_table(returns.fields, self.response_columns)
        if table:
            parts.append(self.render_section("Response Fields", table, "response-fields"))
        return self.render_section("Response", "\n".join(parts), "returns")

    def render_table(self, headers: List[str], rows: List[List[str]]) -> str:
        head = "".join(f"<th>{escape_html(h)}</th>" for h in headers)
        body = "\n".join(
            "<tr>" + "".join(f"<td>{cell}</td>" for cell in row) + "</tr>"
            for row in rows
        )
        return (
            '<table class="param-table">\n'
            f"<thead>\n<tr>{head}</tr>\n</thead>\n"
            f"<tbody>\n{body}\n</tbody>\n"
            "</table>"
        )

    def render_example_cell(self, field: FieldDescriptor) -> str:
        formatted = format_value(field.example, field.type, escape=True)
        if not formatted:
            return ""
        return f"<pre>{formatted}</pre>"

    def render_notes_cell(self, notes: str) -> str:
        return f"<small>{escape_html(notes)}</small>"


@renderer_registry.register("preview")
class HtmlPreviewRenderer(HtmlRenderer):
    """Inline HTML fragment for a live preview pane."""

    template_name = "preview.html.jinja2"
    stylesheet_name = "preview.css"


@renderer_registry.register("html")
class HtmlExportRenderer(HtmlRenderer):
    """Self-contained HTML document for file export."""

    template_name = "export.html.jinja2"
    stylesheet_name = "export.css"
    required_markers = YES_NO_MARKERS
