"""Classification of a response payload as text or binary."""
from typing import Any, Mapping, Union

from .errors import InvalidSecretError
from .models import (
    ARN,
    NO_CONTENT,
    SECRET_BINARY,
    SECRET_STRING,
    BinaryContent,
    NoContent,
    SecretContent,
    TextContent,
)


def classify_secret_content(response: Mapping[str, Any]) -> Union[SecretContent, NoContent]:
    """
    Convert the payload fields of a response into a content union.

    Args:
        response: Raw GetSecretValue response

    Returns:
        TextContent, BinaryContent, or NO_CONTENT when no usable payload is set

    Raises:
        InvalidSecretError: If both SecretString and SecretBinary are set
    """
    text = response.get(SECRET_STRING)
    binary = response.get(SECRET_BINARY)

    if text is not None and binary is not None:
        details = {}
        if isinstance(response.get(ARN), str):
            details[ARN] = response[ARN]
        raise InvalidSecretError("Both SecretString and SecretBinary defined", details)

    if isinstance(text, str):
        return TextContent(text)
    if isinstance(binary, (bytes, bytearray, memoryview)):
        return BinaryContent(bytes(binary))
    return NO_CONTENT
