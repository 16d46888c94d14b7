"""AWS Secrets Manager client wrapper."""
import logging
from typing import Any, Dict, Optional

import boto3

logger = logging.getLogger(__name__)


class AWSSecretsClient:
    """Wrapper around a boto3 Secrets Manager client."""

    def __init__(
        self,
        region_name: Optional[str] = None,
        endpoint_url: Optional[str] = None,
        profile_name: Optional[str] = None,
    ):
        self.region_name = region_name
        self.endpoint_url = endpoint_url
        self.profile_name = profile_name
        self._client = None

    @property
    def client(self):
        """Lazy-initialize client."""
        if self._client is None:
            session = boto3.Session(profile_name=self.profile_name)
            self._client = session.client(
                "secretsmanager",
                region_name=self.region_name,
                endpoint_url=self.endpoint_url,
            )
            logger.debug(f"Created secretsmanager client (region={self.region_name}, endpoint={self.endpoint_url})")
        return self._client

    def get_secret_value(self, **kwargs: Any) -> Dict[str, Any]:
        """
        Call GetSecretValue.

        Args:
            **kwargs: SecretId plus optional VersionId / VersionStage

        Returns:
            The GetSecretValue response dict

        Raises:
            botocore.exceptions.ClientError: Propagated unchanged
                (e.g. ResourceNotFoundException, AccessDeniedException)
        """
        return self.client.get_secret_value(**kwargs)
