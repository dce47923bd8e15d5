"""Building a documentation record from example payloads.

Given an example request body and an example response body, every
top-level key becomes a field descriptor whose type is inferred from
its JSON value and whose example is the value itself.  The payloads are
also kept as the record's request and response examples.
"""

from __future__ import annotations

import logging
from typing import Any, List, Mapping, Optional

from .model import DocumentationRecord, FieldDescriptor, ReturnsDescriptor

logger = logging.getLogger(__name__)

DEFAULT_RESPONSE_DESCRIPTION = "Successful response"


def infer_type(value: Any) -> str:
    """Return the type tag for a JSON value.

    Arrays are tagged by their first element (``array<object>``,
    ``array<string>``, ...); an empty array is plain ``array``.
    """
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, int):
        return "integer"
    if isinstance(value, float):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, Mapping):
        return "object"
    if isinstance(value, (list, tuple)):
        if not value:
            return "array"
        return f"array<{infer_type(value[0])}>"
    return type(value).__name__


def infer_fields(payload: Any) -> List[FieldDescriptor]:
    """Describe each top-level key of ``payload``, in payload order.

    Non-object payloads have no named fields and yield an empty list.
    """
    if not isinstance(payload, Mapping):
        if payload not in (None, ""):
            logger.debug("Payload of type %s has no top-level fields", type(payload).__name__)
        return []
    return [
        FieldDescriptor(name=str(key), type=infer_type(value), required=True, example=value)
        for key, value in payload.items()
    ]


def infer_record(
    method: str,
    path: str,
    description: str = "",
    request: Any = None,
    response: Any = None,
    notes: Optional[str] = None,
    response_description: str = DEFAULT_RESPONSE_DESCRIPTION,
) -> DocumentationRecord:
    """Build a record for ``method path`` from its example payloads.

    A response section is only produced when a response payload is
    given.  Empty payloads (``{}``) contribute no fields and no example.
    """
    returns = None
    if response not in (None, "", {}):
        returns = ReturnsDescriptor(
            description=response_description,
            fields=infer_fields(response),
        )
    return DocumentationRecord(
        method=method,
        path=path,
        description=description,
        notes=notes or None,
        params=infer_fields(request),
        returns=returns,
        request_example=request if request not in (None, "", {}) else None,
        response_example=response if response not in (None, "", {}) else None,
    )
