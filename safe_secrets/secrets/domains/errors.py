"""Errors raised while reading a fetched secret.

Every error carries a message and a ``details`` mapping built from the
redacted safe fields of the secret. They never hold the raw response or the
payload, so they can be logged or shown to an operator as-is.
"""
import copy
from typing import Any, Dict, Optional


class SecretError(Exception):
    """Base class for errors about a specific secret."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = copy.deepcopy(dict(details)) if details else {}

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r}, details={self.details!r})"

    def __reduce__(self):
        return (type(self), (self.message, self.details))


class InvalidSecretError(SecretError):
    """The response or a requested field is structurally wrong."""


class SecretParseError(InvalidSecretError):
    """The SecretString payload could not be parsed as JSON."""


class UnsupportedOperationError(InvalidSecretError):
    """The operation does not apply to the secret's payload type."""
