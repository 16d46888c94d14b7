"""Projection of a secret response down to fields that are safe to show."""
import copy
from typing import Any, Dict, Iterable, Mapping

from .models import NAME, SECRET_BINARY, SECRET_STRING, VERSION_ID

DEFAULT_SAFE_FIELDS = (NAME, VERSION_ID)

# Never included, whatever the caller allow-lists
ALWAYS_REDACTED = frozenset((SECRET_BINARY, SECRET_STRING))


def to_safe_fields(
    response: Mapping[str, Any],
    fields: Iterable[str] = DEFAULT_SAFE_FIELDS,
) -> Dict[str, Any]:
    """
    Pick the allow-listed fields that are set on a GetSecretValue response.

    Args:
        response: Raw response mapping
        fields: Field names allowed into diagnostics

    Returns:
        New dict holding copies of the allowed, present fields. The payload
        fields are dropped even when listed in ``fields``.
    """
    safe = {}
    for field in fields:
        if field in ALWAYS_REDACTED:
            continue
        value = response.get(field)
        if value is not None:
            safe[field] = copy.deepcopy(value)
    return safe
