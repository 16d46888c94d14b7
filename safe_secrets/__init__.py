"""Redacting accessors for secrets fetched from a remote secret store."""
from .secrets.domains.errors import (
    InvalidSecretError,
    SecretError,
    SecretParseError,
    UnsupportedOperationError,
)
from .secrets.domains.safe_fields import ALWAYS_REDACTED, DEFAULT_SAFE_FIELDS, to_safe_fields
from .secrets.domains.secret_value import SecretValue
from .secrets.workflows.fetcher import SecretsFetcher

__version__ = "0.1.0"

__all__ = [
    "ALWAYS_REDACTED",
    "DEFAULT_SAFE_FIELDS",
    "InvalidSecretError",
    "SecretError",
    "SecretParseError",
    "SecretValue",
    "SecretsFetcher",
    "UnsupportedOperationError",
    "to_safe_fields",
]
