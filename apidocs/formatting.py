"""Value formatting shared by every output format.

:func:`format_value` turns an example value and its declared type tag
into display text.  Example payloads arrive either as JSON text typed
into a form or as already-parsed objects from example data; both end up
as the same pretty-printed string.  The function never raises.

:func:`escape_html` is the single escaping routine used by the HTML
family of renderers.
"""

from __future__ import annotations

import json
import logging
from typing import Any, List, Optional

logger = logging.getLogger(__name__)

# Type tags whose examples are shown as indented JSON.
STRUCTURED_TYPES = frozenset({"object", "array<object>"})

METHOD_COLORS = {
    "get": "#61affe",
    "post": "#49cc90",
    "put": "#fca130",
    "delete": "#f93e3e",
    "patch": "#50e3c2",
}
DEFAULT_METHOD_CLASS = "get"

JSON_INDENT = 2

_HTML_ESCAPES = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&#039;"),
)


def escape_html(text: Any) -> str:
    """Escape HTML special characters in ``text``.

    ``None`` becomes an empty string; any other value is converted with
    :func:`str` first.  ``&`` is replaced first so existing entities are
    escaped exactly once.
    """
    if text is None:
        return ""
    result = str(text)
    for char, entity in _HTML_ESCAPES:
        result = result.replace(char, entity)
    return result


def has_value(value: Any) -> bool:
    """Return ``True`` unless ``value`` is absent or an empty string."""
    if value is None:
        return False
    if isinstance(value, str):
        return value != ""
    return True


def is_structured_type(type_tag: Optional[str]) -> bool:
    if not type_tag:
        return False
    return type_tag.strip().lower() in STRUCTURED_TYPES


def to_json(value: Any) -> str:
    """Serialize ``value`` as JSON with the document indentation."""
    return json.dumps(value, indent=JSON_INDENT, ensure_ascii=False)


def _plain(value: Any) -> str:
    if isinstance(value, str):
        return value
    if value is None or isinstance(value, (bool, dict, list, tuple)):
        # Keep JSON spelling (true/null/[...]) for values taken from payloads.
        try:
            return json.dumps(value, ensure_ascii=False)
        except (TypeError, ValueError):
            return str(value)
    return str(value)


def format_value(value: Any, type_tag: Optional[str] = None, escape: bool = False) -> str:
    """Format an example value for display.

    Args:
        value: The raw example.  ``None`` and ``""`` produce ``""``.
        type_tag: Declared field type.  ``object`` and ``array<object>``
            pretty-print the value as JSON: text is parsed first and
            re-serialized, structured values are serialized directly.
            Text that is not valid JSON is returned unchanged.  Any other
            tag yields the plain string form of the value.
        escape: HTML-escape the result.

    Returns:
        The display string.  Parse or serialization failures fall back to
        the stringified input rather than raising.
    """
    if not has_value(value):
        return ""

    if is_structured_type(type_tag):
        if isinstance(value, str):
            try:
                text = to_json(json.loads(value))
            except ValueError:
                logger.debug("Example is not valid JSON, showing raw text: %.40r", value)
                text = value
        else:
            try:
                text = to_json(value)
            except (TypeError, ValueError):
                logger.debug("Example of type %s is not JSON serializable", type(value).__name__)
                text = str(value)
    else:
        text = _plain(value)

    return escape_html(text) if escape else text


def method_class(method: Optional[str]) -> str:
    """Return the CSS class for an HTTP method, matched case-insensitively.

    Unknown verbs get the GET class so every heading is styled.
    """
    key = (method or "").strip().lower()
    return key if key in METHOD_COLORS else DEFAULT_METHOD_CLASS


def method_color(method: Optional[str]) -> str:
    return METHOD_COLORS[method_class(method)]


def required_marker(required: bool, markers: tuple = ("✓", "✗")) -> str:
    """Map a required flag to its ``(yes, no)`` marker."""
    return markers[0] if required else markers[1]


def split_notes(notes: Optional[str]) -> List[str]:
    """Split newline separated notes into list items.

    A leading ``-`` bullet and the whitespace after it are removed;
    blank lines are dropped.
    """
    if not notes:
        return []
    items = []
    for line in notes.splitlines():
        line = line.strip()
        if line.startswith("-"):
            line = line[1:].lstrip()
        if line:
            items.append(line)
    return items
