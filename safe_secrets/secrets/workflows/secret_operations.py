"""Build fetchers from configuration."""
import os
import logging
from typing import Any, Dict, Optional

from ..domains.aws_client import AWSSecretsClient
from ..domains.config_loader import load_config
from ..domains.gcp_client import GCPSecretClient
from .fetcher import SecretsFetcher

logger = logging.getLogger(__name__)


def build_client(config: Dict[str, Any]):
    """
    Create the GetSecretValue-style client for the configured backend.

    Args:
        config: Validated configuration (see load_config)

    Returns:
        AWSSecretsClient or GCPSecretClient
    """
    if config['backend'] == 'gcp':
        gcp = config.get('gcp') or {}
        service_account_path = gcp.get('service_account_path')
        if service_account_path:
            os.environ['GOOGLE_APPLICATION_CREDENTIALS'] = service_account_path
            logger.info(f"Set GOOGLE_APPLICATION_CREDENTIALS from config: {service_account_path}")
        return GCPSecretClient(
            project_id=gcp.get('project_id'),
            decode_text=gcp.get('decode_text', True),
        )

    aws = config.get('aws') or {}
    return AWSSecretsClient(
        region_name=aws.get('region_name'),
        endpoint_url=aws.get('endpoint_url'),
        profile_name=aws.get('profile_name'),
    )


def build_fetcher(config: Optional[Dict[str, Any]] = None) -> SecretsFetcher:
    """
    Create a SecretsFetcher for the configured backend.

    Args:
        config: Configuration dict (loaded from the config file if not provided)

    Returns:
        SecretsFetcher using the configured safe fields

    Raises:
        ConfigError: If the config file is invalid
        FileNotFoundError: If no config file can be located
    """
    if config is None:
        config = load_config()

    return SecretsFetcher(build_client(config), safe_fields=config.get('safe_fields'))
