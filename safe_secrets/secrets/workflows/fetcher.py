"""Workflow for fetching secrets into SecretValue wrappers."""
import logging
from typing import Any, Optional, Sequence

from ..domains.secret_value import SecretValue

logger = logging.getLogger(__name__)


class SecretsFetcher:
    """
    Fetch secrets through a GetSecretValue-style client.

    Args:
        client: Object exposing ``get_secret_value(SecretId=..., **selector)``,
            e.g. a boto3 secretsmanager client, AWSSecretsClient or GCPSecretClient
        safe_fields: Field names allowed into diagnostics of the returned
            SecretValues (default: Name and VersionId)

    Behavior:
        - No caching and no retries: every call hits the client once
        - Errors raised by the client propagate unchanged
    """

    def __init__(self, client: Any, safe_fields: Optional[Sequence[str]] = None):
        self.client = client
        self.safe_fields = tuple(safe_fields) if safe_fields is not None else None

    def fetch(self, secret_id: str, **version_selector: Any) -> SecretValue:
        """
        Fetch a secret.

        Args:
            secret_id: Secret name or ARN
            **version_selector: Passed through verbatim, e.g. VersionId or VersionStage

        Returns:
            SecretValue wrapping the response
        """
        logger.debug(f"Fetching secret {secret_id} (selector: {version_selector})")
        response = self.client.get_secret_value(**version_selector, SecretId=secret_id)
        return SecretValue(response, self.safe_fields)

    def fetch_string(self, secret_id: str, **version_selector: Any) -> str:
        """Shorthand for ``fetch(...).text()``."""
        return self.fetch(secret_id, **version_selector).text()

    def fetch_json(self, secret_id: str, **version_selector: Any) -> Any:
        """Shorthand for ``fetch(...).json()``."""
        return self.fetch(secret_id, **version_selector).json()
