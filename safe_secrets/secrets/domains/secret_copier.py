"""Deep copies of GetSecretValue responses."""
import copy
from typing import Any, Dict, Mapping

from .models import SECRET_BINARY


def copy_secret_response(response: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Copy a response so that no mutable part is shared with the source.

    SecretBinary is copied to immutable ``bytes`` (boto3 may hand back a
    bytearray or memoryview from custom transports); every other field is
    deep-copied.
    """
    result = {}
    for key, value in response.items():
        if key == SECRET_BINARY and isinstance(value, (bytearray, memoryview)):
            result[key] = bytes(value)
        else:
            result[key] = copy.deepcopy(value)
    return result
