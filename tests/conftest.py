"""Shared fixtures: GetSecretValue-shaped responses and a fake client."""
import json
import uuid
from datetime import datetime, timezone

import pytest

EXAMPLE_JSON = {
    "str": "hello world",
    "flt": 0.12345,
    "int": 9876,
    "bool": False,
    "arr": ["hello", 0.12345, 9876, False, {"obj": True}],
    "obj": {"deeply": {"nested": True}},
}
EXAMPLE_JSON_STRING = json.dumps(EXAMPLE_JSON)

EXAMPLE_STRING = "example string"
EXAMPLE_STRING_BYTES = EXAMPLE_STRING.encode("utf-8")

CREATED_DATE = datetime(2022, 1, 23, 12, 34, 56, tzinfo=timezone.utc)


def _base_response(name):
    return {
        "ARN": f"arn:aws:secretsmanager:us-east-1:01234567890:secret:{name}-1a2b3c",
        "Name": name,
        "VersionId": "1a2b3c",
        "VersionStages": ["AWSCURRENT"],
        "CreatedDate": CREATED_DATE,
        "ResponseMetadata": {
            "HTTPStatusCode": 200,
            "RequestId": str(uuid.uuid4()),
        },
    }


def to_secret_response(name, content):
    response = _base_response(name)
    response["SecretString"] = content
    return response


def to_binary_secret_response(name, content):
    response = _base_response(name)
    response["SecretBinary"] = content
    return response


class SecretNotFound(Exception):
    """Stands in for the remote store's not-found error."""


class FakeSecretsManager:
    """In-memory client exposing get_secret_value like boto3's secretsmanager client."""

    def __init__(self, responses=None):
        self.responses = dict(responses or {})
        self.calls = []

    def get_secret_value(self, **kwargs):
        self.calls.append(kwargs)
        secret_id = kwargs["SecretId"]
        if secret_id not in self.responses:
            raise SecretNotFound(f"Secrets Manager can't find the specified secret: {secret_id}")
        return self.responses[secret_id]


@pytest.fixture
def string_response():
    return to_secret_response("secrets/test/secret_string", EXAMPLE_STRING)


@pytest.fixture
def json_response():
    return to_secret_response("secrets/test/json_string", EXAMPLE_JSON_STRING)


@pytest.fixture
def binary_response():
    return to_binary_secret_response("secrets/test/string_buffer", EXAMPLE_STRING_BYTES)


@pytest.fixture
def fake_client(string_response, json_response, binary_response):
    return FakeSecretsManager({
        string_response["ARN"]: string_response,
        json_response["ARN"]: json_response,
        binary_response["ARN"]: binary_response,
    })
