"""Domain models for fetched secrets."""
from dataclasses import dataclass
from typing import Union

# Keys of a GetSecretValue response
ARN = "ARN"
NAME = "Name"
VERSION_ID = "VersionId"
VERSION_STAGES = "VersionStages"
CREATED_DATE = "CreatedDate"
SECRET_STRING = "SecretString"
SECRET_BINARY = "SecretBinary"
RESPONSE_METADATA = "ResponseMetadata"

# Reserved rotation stages
STAGE_CURRENT = "AWSCURRENT"
STAGE_PENDING = "AWSPENDING"
STAGE_PREVIOUS = "AWSPREVIOUS"

PAYLOAD_TEXT = "text"
PAYLOAD_BINARY = "binary"


@dataclass(frozen=True, repr=False)
class TextContent:
    """Secret payload delivered as SecretString."""
    text: str

    @property
    def payload_type(self) -> str:
        return PAYLOAD_TEXT

    def __repr__(self) -> str:
        return "TextContent(<redacted>)"


@dataclass(frozen=True, repr=False)
class BinaryContent:
    """Secret payload delivered as SecretBinary."""
    data: bytes

    @property
    def payload_type(self) -> str:
        return PAYLOAD_BINARY

    def __repr__(self) -> str:
        return "BinaryContent(<redacted>)"


@dataclass(frozen=True)
class NoContent:
    """Marker for a response carrying neither payload field."""


NO_CONTENT = NoContent()

SecretContent = Union[TextContent, BinaryContent]
