"""Data model for endpoint documentation.

The classes here describe what gets rendered: a
:class:`DocumentationRecord` per endpoint, holding its request
parameters and an optional :class:`ReturnsDescriptor` for the response.
Both parameters and response fields are :class:`FieldDescriptor`
instances.

Instances are immutable.  They are built from user input or canned
example data right before a render pass and discarded afterwards, so
ordered collections are stored as tuples and the order in which fields
were supplied is the order in which they are rendered.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from .errors import ValidationError


@dataclass(frozen=True)
class FieldDescriptor:
    """A single request parameter or response field.

    ``type`` is a free-form tag such as ``string`` or ``array<object>``.
    Only ``object`` and ``array<object>`` change how ``example`` is
    displayed (see :func:`apidocs.formatting.format_value`).
    """

    name: str
    type: str = "string"
    description: str = ""
    required: bool = False
    example: Any = None
    notes: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "name": self.name,
            "type": self.type,
            "description": self.description,
            "required": self.required,
        }
        if self.example is not None:
            data["example"] = self.example
        if self.notes:
            data["notes"] = self.notes
        return data


@dataclass(frozen=True)
class ReturnsDescriptor:
    """Description of an endpoint's response and its fields."""

    description: str = ""
    fields: Tuple[FieldDescriptor, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "fields", tuple(self.fields))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "description": self.description,
            "fields": [f.to_dict() for f in self.fields],
        }


@dataclass(frozen=True)
class DocumentationRecord:
    """One documented API endpoint.

    ``method`` and ``path`` must be non-empty strings; everything else is
    optional.  A record that violates this raises
    :class:`~apidocs.errors.ValidationError` at construction time, so no
    renderer ever sees a record without a heading.

    ``notes`` is newline separated text.  Lines may carry a leading
    ``"- "`` bullet which renderers strip before emitting their own list
    markup.
    """

    method: str
    path: str
    description: str = ""
    notes: Optional[str] = None
    params: Tuple[FieldDescriptor, ...] = ()
    returns: Optional[ReturnsDescriptor] = None
    request_example: Any = None
    response_example: Any = None

    def __post_init__(self) -> None:
        for attr in ("method", "path"):
            value = getattr(self, attr)
            if not isinstance(value, str) or not value.strip():
                raise ValidationError(
                    f"Documentation record is missing required '{attr}'"
                )
        object.__setattr__(self, "params", tuple(self.params))

    @property
    def title(self) -> str:
        """``METHOD path`` as shown in headings and log messages."""
        return f"{self.method} {self.path}"

    def to_dict(self) -> Dict[str, Any]:
        """Return the record as plain JSON-compatible data.

        Keys follow the camelCase names used by exported JSON documents
        and accepted by :func:`apidocs.loader.record_from_dict`.  Absent
        optional values are left out.
        """
        data: Dict[str, Any] = {
            "path": self.path,
            "method": self.method,
            "description": self.description,
        }
        if self.notes:
            data["notes"] = self.notes
        data["params"] = [p.to_dict() for p in self.params]
        if self.returns is not None:
            data["returns"] = self.returns.to_dict()
        if self.request_example is not None:
            data["requestExample"] = self.request_example
        if self.response_example is not None:
            data["responseExample"] = self.response_example
        return data
