"""Loading documentation records from JSON or YAML files.

Accepted document shapes:

* a list of record objects (what the JSON export writes),
* a single record object,
* an object with a ``docs`` or ``endpoints`` list.

Record keys use the camelCase spelling of the JSON export
(``requestExample``); snake_case spellings are accepted as well.
"""

import json
import logging
from pathlib import Path
from typing import Any, List, Mapping, Optional

import yaml

from .errors import ValidationError
from .model import DocumentationRecord, FieldDescriptor, ReturnsDescriptor

logger = logging.getLogger(__name__)

LIST_KEYS = ("docs", "endpoints")
TRUE_STRINGS = ("true", "yes", "1")
FALSE_STRINGS = ("false", "no", "0", "")


def load_records(file_path: Path) -> List[DocumentationRecord]:
    """Load records from a ``.json``, ``.yaml`` or ``.yml`` file."""
    file_path = Path(file_path)
    try:
        text = file_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ValidationError(f"Cannot read {file_path}: {exc.strerror or exc}") from exc
    return parse_records(text, json_only=file_path.suffix.lower() == ".json")


def parse_records(text: str, json_only: bool = False) -> List[DocumentationRecord]:
    """Parse records from JSON (or YAML) text."""
    try:
        data = json.loads(text) if json_only else yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise ValidationError(f"Invalid documentation file: {exc}") from exc
    return records_from_data(data)


def records_from_data(data: Any) -> List[DocumentationRecord]:
    """Build records from already parsed data."""
    if data is None:
        return []
    if isinstance(data, Mapping):
        for key in LIST_KEYS:
            if key in data:
                data = data[key]
                break
        else:
            data = [data]
    if not isinstance(data, list):
        raise ValidationError(
            "Documentation must be a list of records or an object with a 'docs' list"
        )

    records = []
    for index, item in enumerate(data):
        if not isinstance(item, Mapping):
            raise ValidationError(f"Record #{index + 1} is not an object")
        records.append(record_from_dict(item))
    logger.debug("Loaded %d record(s)", len(records))
    return records


def _get(data: Mapping[str, Any], *keys: str, default: Any = None) -> Any:
    for key in keys:
        if key in data:
            return data[key]
    return default


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def _flag(value: Any, context: str) -> bool:
    """Read a required flag; YAML and form input may spell it as text."""
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        text = value.strip().lower()
        if text in TRUE_STRINGS:
            return True
        if text in FALSE_STRINGS:
            return False
    elif value is None or isinstance(value, int):
        return bool(value)
    logger.warning(f"Treating unrecognised required flag {value!r} of {context} as false")
    return False


def _fields(items: Any, context: str) -> List[FieldDescriptor]:
    if not items:
        return []
    if not isinstance(items, list):
        logger.warning(f"Ignoring {context}: expected a list")
        return []
    fields = []
    for item in items:
        if not isinstance(item, Mapping):
            logger.warning(f"Skipping malformed entry in {context}: {item!r}")
            continue
        fields.append(field_from_dict(item))
    return fields


def field_from_dict(data: Mapping[str, Any]) -> FieldDescriptor:
    name = _text(_get(data, "name", default=""))
    notes = _get(data, "notes")
    return FieldDescriptor(
        name=name,
        type=_text(_get(data, "type", "param_type", default="string")) or "string",
        description=_text(_get(data, "description", default="")),
        required=_flag(_get(data, "required", default=False), f"field {name!r}"),
        example=_get(data, "example"),
        notes=_text(notes) if notes else None,
    )


def _returns(data: Any, context: str) -> Optional[ReturnsDescriptor]:
    if data is None:
        return None
    if not isinstance(data, Mapping):
        logger.warning(f"Ignoring returns of {context}: expected an object")
        return None
    return ReturnsDescriptor(
        description=_text(data.get("description", "")),
        fields=_fields(data.get("fields"), f"response fields of {context}"),
    )


def record_from_dict(data: Mapping[str, Any]) -> DocumentationRecord:
    """Build a record from a mapping.

    Raises:
        ValidationError: If ``method`` or ``path`` is missing or empty.
    """
    method = _get(data, "method")
    path = _get(data, "path")
    context = f"{method} {path}"
    notes = _get(data, "notes")
    return DocumentationRecord(
        method=method.strip() if isinstance(method, str) else method,
        path=path.strip() if isinstance(path, str) else path,
        description=_text(_get(data, "description", default="")),
        notes=_text(notes) if notes else None,
        params=_fields(_get(data, "params", "parameters"), f"params of {context}"),
        returns=_returns(_get(data, "returns"), context),
        request_example=_get(data, "requestExample", "request_example"),
        response_example=_get(data, "responseExample", "response_example"),
    )
