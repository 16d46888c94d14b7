"""Typed, redacting wrapper around a single GetSecretValue response."""
import copy
import json
import logging
from datetime import datetime
from typing import Any, Dict, List, Mapping, Optional, Sequence

from .errors import InvalidSecretError, SecretParseError, UnsupportedOperationError
from .models import (
    ARN,
    CREATED_DATE,
    NAME,
    STAGE_CURRENT,
    STAGE_PENDING,
    STAGE_PREVIOUS,
    VERSION_ID,
    VERSION_STAGES,
    BinaryContent,
    TextContent,
)
from .safe_fields import DEFAULT_SAFE_FIELDS, to_safe_fields
from .secret_content import classify_secret_content
from .secret_copier import copy_secret_response

logger = logging.getLogger(__name__)

_UNPARSEABLE = object()


def _read_field(snapshot: Mapping[str, Any], field: str, types: tuple, safe_fields: Dict[str, Any]) -> Any:
    """Return ``snapshot[field]`` if it is set and of one of ``types``."""
    value = snapshot.get(field)
    if value is None:
        raise InvalidSecretError(f"Missing {field} in response", safe_fields)
    if not isinstance(value, types):
        raise InvalidSecretError(f"Invalid {field} in response", safe_fields)
    return value


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Out of range float value {name}")


def _parse_json(text: str) -> Any:
    # Decode errors keep the whole document on ``err.doc``; the caller raises
    # outside this frame so nothing chains back to the payload.
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except (ValueError, RecursionError):
        return _UNPARSEABLE


class SecretValue:
    """
    A fetched secret with validated accessors and a redacted representation.

    The response is copied on construction and every accessor returning a
    mutable structure returns a fresh copy. ``repr()`` and ``str()`` show the
    payload type and the safe fields only. Errors raised by the accessors
    carry the safe fields as their details, never the payload.

    Args:
        response: Raw GetSecretValue response
        safe_fields: Field names allowed into diagnostics
            (default: Name and VersionId)

    Raises:
        InvalidSecretError: If both SecretString and SecretBinary are set
    """

    __slots__ = ("__snapshot", "__content", "__safe_fields")

    def __init__(self, response: Mapping[str, Any], safe_fields: Optional[Sequence[str]] = None):
        snapshot = copy_secret_response(response)
        redacted = to_safe_fields(snapshot, DEFAULT_SAFE_FIELDS if safe_fields is None else safe_fields)
        object.__setattr__(self, "_SecretValue__snapshot", snapshot)
        object.__setattr__(self, "_SecretValue__safe_fields", redacted)
        object.__setattr__(self, "_SecretValue__content", classify_secret_content(snapshot))
        logger.debug(f"Loaded {self!r}")

    def __setattr__(self, name, value):
        raise AttributeError("SecretValue is immutable")

    def __delattr__(self, name):
        raise AttributeError("SecretValue is immutable")

    def __reduce_ex__(self, protocol):
        raise TypeError("SecretValue cannot be serialized")

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    def __repr__(self) -> str:
        return f"SecretValue({self._type_tag()}) {self.__safe_fields!r}"

    __str__ = __repr__

    def _type_tag(self) -> str:
        if isinstance(self.__content, (TextContent, BinaryContent)):
            return self.__content.payload_type
        return "unknown"

    @property
    def safe_fields(self) -> Dict[str, Any]:
        """Copy of the redacted fields used for diagnostics."""
        return copy.deepcopy(self.__safe_fields)

    @property
    def arn(self) -> str:
        """The ARN of the secret."""
        return _read_field(self.__snapshot, ARN, (str,), self.__safe_fields)

    @property
    def name(self) -> str:
        """The friendly name of the secret."""
        return _read_field(self.__snapshot, NAME, (str,), self.__safe_fields)

    @property
    def version_id(self) -> str:
        """The unique identifier of this secret version."""
        return _read_field(self.__snapshot, VERSION_ID, (str,), self.__safe_fields)

    @property
    def version_stages(self) -> List[str]:
        """Copy of the version stages attached to this version."""
        return list(_read_field(self.__snapshot, VERSION_STAGES, (list, tuple), self.__safe_fields))

    @property
    def created_date(self) -> datetime:
        """When this secret version was created."""
        return _read_field(self.__snapshot, CREATED_DATE, (datetime,), self.__safe_fields)

    def has_version_stage(self, stage: str) -> bool:
        stages = self.__snapshot.get(VERSION_STAGES)
        if not isinstance(stages, (list, tuple)):
            return False
        return stage in stages

    def is_current(self) -> bool:
        return self.has_version_stage(STAGE_CURRENT)

    def is_pending(self) -> bool:
        return self.has_version_stage(STAGE_PENDING)

    def is_previous(self) -> bool:
        return self.has_version_stage(STAGE_PREVIOUS)

    @property
    def payload_type(self) -> str:
        """
        Whether the payload arrived as SecretString ("text") or SecretBinary ("binary").

        Raises:
            InvalidSecretError: If the response has no usable payload
        """
        content = self.__content
        if isinstance(content, (TextContent, BinaryContent)):
            return content.payload_type
        raise InvalidSecretError("Invalid content payload", self.__safe_fields)

    def text(self) -> str:
        """
        Return the SecretString payload.

        Raises:
            UnsupportedOperationError: If the payload is binary
            InvalidSecretError: If the response has no usable payload
        """
        content = self.__content
        if isinstance(content, TextContent):
            return content.text
        if isinstance(content, BinaryContent):
            raise UnsupportedOperationError("Cannot convert binary secrets to text", self.__safe_fields)
        raise InvalidSecretError("Invalid content payload", self.__safe_fields)

    def json(self) -> Any:
        """
        Parse the SecretString payload as JSON.

        The payload is parsed again on every call, so callers never share the
        returned object.

        Raises:
            UnsupportedOperationError: If the payload is not SecretString
            SecretParseError: If the payload is not valid JSON
        """
        content = self.__content
        if not isinstance(content, TextContent):
            raise UnsupportedOperationError("Cannot parse non-text secrets as JSON", self.__safe_fields)

        parsed = _parse_json(content.text)
        if parsed is _UNPARSEABLE:
            raise SecretParseError("Could not parse secret as JSON", self.__safe_fields)
        return parsed

    def raw(self) -> Dict[str, Any]:
        """Return a deep copy of the full response, payload included."""
        return copy_secret_response(self.__snapshot)

    def bytes(self) -> bytes:
        """
        Return the payload as bytes: SecretString encoded as UTF-8, or SecretBinary as-is.

        Lone surrogates in SecretString are encoded as-is instead of failing.

        Raises:
            InvalidSecretError: If the response has no usable payload
        """
        content = self.__content
        if isinstance(content, TextContent):
            return content.text.encode("utf-8", "surrogatepass")
        if isinstance(content, BinaryContent):
            return content.data
        raise InvalidSecretError("Invalid content payload", self.__safe_fields)
