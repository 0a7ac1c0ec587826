import json
from types import SimpleNamespace
from typing import Any


def _to_namespace(obj: dict[str, Any]) -> SimpleNamespace:
    return SimpleNamespace(**obj)


def decode_body(text: str, as_mapping: bool = False) -> Any:
    """Decode a JSON response body.

    Objects become plain dicts when ``as_mapping`` is true and
    ``SimpleNamespace`` records otherwise; arrays stay lists either way.
    An empty body (e.g. ``204 No Content``) decodes to ``None``.

    Raises:
        json.JSONDecodeError: If the body is not valid JSON.
    """
    if not text or not text.strip():
        return None
    if as_mapping:
        return json.loads(text)
    return json.loads(text, object_hook=_to_namespace)


def decode_error_body(text: str) -> Any:
    """Decode an error response body as plain mappings, ``None`` if it cannot be decoded.

    Never raises: a body too deeply nested for the decoder counts as undecodable.
    """
    try:
        return decode_body(text, as_mapping=True)
    except Exception:
        return None
