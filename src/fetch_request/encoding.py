"""
Percent-encoding and body encoding helpers.
"""
import json
import math
from typing import Any, Mapping
from urllib.parse import quote

# Characters encodeURIComponent leaves untouched besides ASCII letters and digits
URI_COMPONENT_SAFE = "-_.!~*'()"

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"
JSON_CONTENT_TYPE = "application/json"


def stringify(value: Any) -> str:
    """Convert a value to text the way JavaScript's toString does for primitives."""
    if value is True:
        return "true"
    if value is False:
        return "false"
    if value is None:
        return "null"
    if isinstance(value, float):
        return _format_number(value)
    if isinstance(value, bytes):
        return value.decode("utf-8")
    return str(value)


def _format_number(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    # JavaScript prints integral numbers below 1e21 without a fraction
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return str(value)


def encode_uri_component(value: Any) -> str:
    return quote(stringify(value), safe=URI_COMPONENT_SAFE)


def encode_pair(key: Any, value: Any) -> str:
    """Encode a single ``key=value`` pair for a query string or form body."""
    return f"{encode_uri_component(key)}={encode_uri_component(value)}"


def encode_form(form: Mapping[Any, Any]) -> str:
    """
    Build an application/x-www-form-urlencoded body.

    Pairs keep the mapping's iteration order.
    """
    return "&".join(encode_pair(key, value) for key, value in form.items())


def serialize_json(value: Any) -> str:
    """Serialize to compact JSON text, keeping non-ASCII characters as is."""
    return json.dumps(_finite(value), separators=(",", ":"), ensure_ascii=False)


def _finite(value: Any) -> Any:
    """Replace NaN and infinities with None, as JSON.stringify writes them as null."""
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, Mapping):
        return {key: _finite(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_finite(item) for item in value]
    return value


def is_json_content_type(content_type: str) -> bool:
    return "json" in (content_type or "").lower()
