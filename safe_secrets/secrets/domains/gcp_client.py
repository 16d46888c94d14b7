"""GCP Secret Manager client wrapper.

Presents GCP's ``access_secret_version`` through the same
``get_secret_value`` call as the AWS client, returning a response shaped
like GetSecretValue so the rest of the package treats both alike.
"""
import os
import logging
from typing import Any, Dict, Optional
from google.cloud import secretmanager

from .models import (
    ARN,
    NAME,
    SECRET_BINARY,
    SECRET_STRING,
    STAGE_CURRENT,
    VERSION_ID,
    VERSION_STAGES,
)

logger = logging.getLogger(__name__)

LATEST_VERSION = "latest"


class GCPSecretClient:
    """Wrapper around GCP Secret Manager client."""

    def __init__(self, project_id: Optional[str] = None, decode_text: bool = True):
        self.project_id = project_id
        self.decode_text = decode_text
        self._client = None

    @property
    def client(self) -> secretmanager.SecretManagerServiceClient:
        """Lazy-initialize client."""
        if self._client is None:
            self._client = secretmanager.SecretManagerServiceClient()
        return self._client

    def get_project_id(self) -> Optional[str]:
        """
        Get GCP project ID.

        Priority order:
        1. GCP_PROJECT environment variable (allows override)
        2. project_id given at construction

        Returns:
            Project ID string, or None if not found
        """
        gcp_project_env = os.getenv("GCP_PROJECT")
        if gcp_project_env:
            logger.debug(f"Using GCP_PROJECT from environment: {gcp_project_env}")
            return gcp_project_env
        return self.project_id

    def _version_name(self, secret_id: str, version: str) -> str:
        if secret_id.startswith("projects/"):
            return f"{secret_id}/versions/{version}"

        project_id = self.get_project_id()
        if not project_id:
            raise ValueError(
                "Project ID not found. Please set GCP_PROJECT environment variable "
                "or configure gcp.project_id in config file"
            )
        return f"projects/{project_id}/secrets/{secret_id}/versions/{version}"

    def get_secret_value(
        self,
        SecretId: str,
        VersionId: Optional[str] = None,
        VersionStage: Optional[str] = None,
    ) -> Dict[str, Any]:
        """
        Fetch a secret version and convert it to a GetSecretValue-shaped dict.

        Args:
            SecretId: Short secret name or full ``projects/.../secrets/...`` path
            VersionId: Version number to access
            VersionStage: Version alias to access (used when VersionId is not given)

        Returns:
            Dict with ARN (resource name), Name, VersionId, and either
            SecretString or SecretBinary

        Raises:
            google.api_core.exceptions.GoogleAPICallError: Propagated unchanged
                (e.g. NotFound, PermissionDenied)
        """
        version = VersionId or VersionStage or LATEST_VERSION
        name = self._version_name(SecretId, version)
        logger.debug(f"Accessing GCP secret version {name}")

        response = self.client.access_secret_version(request={"name": name})

        # projects/<project>/secrets/<secret>/versions/<number>
        parts = response.name.split("/")
        result = {
            ARN: response.name,
            NAME: parts[3] if len(parts) >= 6 else SecretId,
            VERSION_ID: parts[-1],
        }
        if version == LATEST_VERSION:
            result[VERSION_STAGES] = [STAGE_CURRENT]

        data = bytes(response.payload.data)
        if self.decode_text:
            try:
                result[SECRET_STRING] = data.decode("UTF-8")
                return result
            except UnicodeDecodeError:
                logger.debug(f"Payload of {response.name} is not UTF-8, keeping it binary")
        result[SECRET_BINARY] = data
        return result
