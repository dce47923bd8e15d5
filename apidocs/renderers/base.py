"""Base renderer class and registry.

This module defines the abstract :class:`EndpointRenderer` and the
``renderer_registry`` concrete formats register with.

The base class owns everything the formats have in common: the order
in which an endpoint's sections are emitted, the rule that a section
without data is left out, and the walk over field descriptors that
produces table rows.  Subclasses only supply markup (how a table, a
heading or a code span looks) and the document shell around the
rendered endpoints.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple

from ..config import DEFAULT_TITLE
from ..formatting import has_value, required_marker, split_notes
from ..model import DocumentationRecord, FieldDescriptor, ReturnsDescriptor
from ..registry import Registry

# Registry for renderer implementations
renderer_registry = Registry("renderer")


@dataclass(frozen=True)
class Column:
    """A table column: the descriptor attribute it shows and its header."""

    key: str
    title: str


FIELD_COLUMNS: Tuple[Column, ...] = (
    Column("name", "Field"),
    Column("type", "Type"),
    Column("required", "Required"),
    Column("description", "Description"),
    Column("example", "Example"),
    Column("notes", "Notes"),
)

CHECK_MARKERS = ("✓", "✗")
YES_NO_MARKERS = ("Yes", "No")


class EndpointRenderer(ABC):
    """Abstract base class for rendering documentation records.

    Class attributes configure a format:

    * ``param_columns`` / ``response_columns``: columns of the request
      parameter and response field tables.
    * ``required_markers``: ``(yes, no)`` text for the required column.
    * ``notes_title``: heading above the notes list.
    """

    format_id = ""
    param_columns: Sequence[Column] = FIELD_COLUMNS
    response_columns: Sequence[Column] = FIELD_COLUMNS
    required_markers: Tuple[str, str] = CHECK_MARKERS
    notes_title = "Additional Notes"

    def __init__(self, title: Optional[str] = None) -> None:
        """Initialize the renderer.

        Args:
            title: Document title.  Defaults to ``"API Documentation"``.
        """
        self.title = title or DEFAULT_TITLE

    # -- document -------------------------------------------------------

    @abstractmethod
    def render_document(self, records: Iterable[DocumentationRecord]) -> str:
        """Render a complete document for ``records``.

        An empty sequence yields the document shell with no endpoints.
        """
        raise NotImplementedError

    def render_endpoints(self, records: Iterable[DocumentationRecord]) -> List[str]:
        return [self.render_endpoint(record) for record in records]

    # -- endpoint -------------------------------------------------------

    def render_endpoint(self, record: DocumentationRecord) -> str:
        """Render one endpoint.

        Sections follow a fixed order: notes, request parameters,
        request example, response, response example.  The heading and
        description are added by :meth:`wrap_endpoint`.
        """
        sections: List[str] = []

        notes = split_notes(record.notes)
        if notes:
            sections.append(self.render_notes(notes))

        params = self.render_field_table(record.params, self.param_columns)
        if params:
            sections.append(self.render_section("Request Parameters", params, "params"))

        if has_value(record.request_example):
            sections.append(self.render_example("Request Example", record.request_example))

        returns = record.returns
        if returns is not None and (returns.description or returns.fields):
            sections.append(self.render_returns(returns))

        if has_value(record.response_example):
            sections.append(self.render_example("Response Example", record.response_example))

        return self.wrap_endpoint(record, sections)

    @abstractmethod
    def wrap_endpoint(self, record: DocumentationRecord, sections: List[str]) -> str:
        """Add the method/path heading and description around ``sections``."""
        raise NotImplementedError

    @abstractmethod
    def render_section(self, title: str, body: str, css_class: str = "") -> str:
        raise NotImplementedError

    @abstractmethod
    def render_notes(self, notes: List[str]) -> str:
        raise NotImplementedError

    @abstractmethod
    def render_example(self, title: str, example: object) -> str:
        raise NotImplementedError

    @abstractmethod
    def render_returns(self, returns: ReturnsDescriptor) -> str:
        raise NotImplementedError

    # -- tables ---------------------------------------------------------

    def render_field_table(
        self,
        fields: Optional[Iterable[FieldDescriptor]],
        columns: Sequence[Column],
    ) -> str:
        """Render ``fields`` as a table with the given columns.

        Returns an empty string for an empty or absent sequence so the
        caller can drop the whole section.  Rows keep the order in which
        fields were supplied.
        """
        fields_list = list(fields or ())
        if not fields_list:
            return ""

        headers = [column.title for column in columns]
        rows = [
            [self.render_cell(field, column.key) for column in columns]
            for field in fields_list
        ]
        return self.render_table(headers, rows)

    def render_cell(self, field: FieldDescriptor, key: str) -> str:
        """Render the ``key`` attribute of ``field`` as cell content."""
        if key == "name":
            return self.code(field.name)
        if key == "type":
            return self.code(field.type)
        if key == "required":
            return required_marker(field.required, self.required_markers)
        if key == "description":
            return self.text(field.description)
        if key == "example":
            return self.render_example_cell(field)
        if key == "notes":
            return self.render_notes_cell(field.notes or "-")
        raise KeyError(f"unknown column '{key}'")

    @abstractmethod
    def render_table(self, headers: List[str], rows: List[List[str]]) -> str:
        raise NotImplementedError

    @abstractmethod
    def render_example_cell(self, field: FieldDescriptor) -> str:
        raise NotImplementedError

    def render_notes_cell(self, notes: str) -> str:
        return self.text(notes)

    # -- inline markup --------------------------------------------------

    @abstractmethod
    def text(self, value: object) -> str:
        """Make user-supplied text safe for this format."""
        raise NotImplementedError

    @abstractmethod
    def code(self, value: object) -> str:
        """Render ``value`` as a monospaced code span."""
        raise NotImplementedError
