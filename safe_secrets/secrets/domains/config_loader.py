"""Configuration loader for safe-secrets."""
import os
import logging
from pathlib import Path
from typing import Dict, Any, Optional
import yaml

from . import preferences
from .safe_fields import ALWAYS_REDACTED

logger = logging.getLogger(__name__)

SUPPORTED_BACKENDS = ("aws", "gcp")
BACKEND_ENV_VAR = "SAFE_SECRETS_BACKEND"


class ConfigError(Exception):
    """Configuration error exception."""
    pass


def default_config_path() -> Path:
    return Path.home() / ".config" / "safe-secrets" / "config.yml"


def _get_config_path() -> str:
    """
    Get config file path using XDG Base Directory standard.

    Priority order:
    1. User preference (stored in ~/.config/safe-secrets/preferences.json)
    2. Default location: ~/.config/safe-secrets/config.yml

    Returns:
        Absolute path to config file

    Raises:
        FileNotFoundError: If config file doesn't exist in any location
    """
    config_path_pref = preferences.get_config_path()
    if config_path_pref:
        config_path = Path(config_path_pref)
        if config_path.exists():
            logger.info(f"Using config from preference: {config_path}")
            return str(config_path)
        logger.warning(f"Config path from preference doesn't exist: {config_path}")

    default_config = default_config_path()
    if default_config.exists():
        logger.info(f"Using default config location: {default_config}")
        return str(default_config)

    raise FileNotFoundError(
        "Configuration file not found. Please set up your config file using one of these methods:\n\n"
        "1. Use the default location:\n"
        f"   mkdir -p {default_config.parent}\n"
        f"   cp /path/to/your/config.yml {default_config}\n\n"
        "2. Point to an existing config file:\n"
        "   safe-secrets config set-path /path/to/your/config.yml\n"
    )


def _validate_safe_fields(config: Dict[str, Any], config_path: str) -> None:
    safe_fields = config.get('safe_fields')
    if safe_fields is None:
        return

    if not isinstance(safe_fields, list) or not all(isinstance(f, str) for f in safe_fields):
        raise ConfigError(f"'safe_fields' in {config_path} must be a list of field names")

    redacted = sorted(ALWAYS_REDACTED.intersection(safe_fields))
    if redacted:
        # Still dropped at redaction time; warn so the config gets fixed
        logger.warning(f"Ignoring always-redacted fields in 'safe_fields': {', '.join(redacted)}")


def _validate_gcp_section(config: Dict[str, Any], config_path: str) -> None:
    gcp = config.get('gcp') or {}
    if not isinstance(gcp, dict):
        raise ConfigError(f"'gcp' section in {config_path} must be a mapping")

    if not gcp.get('project_id') and not os.getenv("GCP_PROJECT"):
        raise ConfigError(
            f"Missing 'gcp.project_id' in config at {config_path}\n"
            f"Required format:\n"
            f"gcp:\n"
            f"  project_id: your-project-id\n"
            f"Alternatively set the GCP_PROJECT environment variable."
        )

    service_account_path = gcp.get('service_account_path')
    if service_account_path is None:
        return

    if not os.path.exists(service_account_path):
        raise ConfigError(
            f"Service account file not found at: {service_account_path}\n"
            f"Please ensure the file exists or update the path in {config_path}"
        )

    if not os.path.isfile(service_account_path):
        raise ConfigError(
            f"Service account path is not a file: {service_account_path}"
        )


def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load and validate configuration from YAML file.

    Args:
        config_path: Explicit config path (resolved from preferences/default if not provided)

    Returns:
        Dict containing configuration with keys:
        - backend: "aws" or "gcp"
        - safe_fields: optional list of field names allowed into diagnostics
        - aws: optional dict with region_name, endpoint_url, profile_name
        - gcp: dict with project_id, optional service_account_path and decode_text

    Raises:
        FileNotFoundError: If no config file can be located
        ConfigError: If config file is invalid
    """
    # Resolved on every call, so preference changes apply without a restart
    if config_path is None:
        config_path = _get_config_path()

    if not os.path.exists(config_path):
        raise ConfigError(
            f"Configuration file not found at: {config_path}\n"
            f"Please create the config file with a 'backend' setting."
        )

    try:
        with open(config_path, 'r') as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Failed to parse YAML config at {config_path}: {e}")
    except OSError as e:
        raise ConfigError(f"Failed to read config file at {config_path}: {e}")

    if not config:
        raise ConfigError(f"Config file at {config_path} is empty")

    if not isinstance(config, dict):
        raise ConfigError(f"Config file at {config_path} must contain a mapping")

    backend_env = os.getenv(BACKEND_ENV_VAR)
    if backend_env:
        logger.debug(f"Using {BACKEND_ENV_VAR} from environment: {backend_env}")
        config['backend'] = backend_env

    if 'backend' not in config:
        raise ConfigError(
            f"Missing 'backend' in config at {config_path}\n"
            f"Required format:\n"
            f"backend: aws  # or gcp"
        )

    if config['backend'] not in SUPPORTED_BACKENDS:
        raise ConfigError(
            f"Unsupported backend: {config['backend']}\n"
            f"Supported backends: {', '.join(SUPPORTED_BACKENDS)}"
        )

    _validate_safe_fields(config, config_path)

    if 'aws' in config and not isinstance(config['aws'], dict):
        raise ConfigError(f"'aws' section in {config_path} must be a mapping")

    if config['backend'] == 'gcp':
        _validate_gcp_section(config, config_path)

    logger.info(f"Configuration loaded successfully from {config_path}")
    logger.debug(f"Using backend: {config['backend']}")

    return config
