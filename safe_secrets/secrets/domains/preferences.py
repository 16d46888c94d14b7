"""Preferences manager for safe-secrets.

Stores the user's config file location in the XDG Base Directory standard
location: ~/.config/safe-secrets/preferences.json
"""
import json
from pathlib import Path
from typing import Optional, Dict, Any
import logging

logger = logging.getLogger(__name__)

PREFERENCES_DIR = Path.home() / ".config" / "safe-secrets"
PREFERENCES_FILE = PREFERENCES_DIR / "preferences.json"

CONFIG_PATH_KEY = "config_path"


def _load_preferences() -> Dict[str, Any]:
    """
    Load preferences from JSON file.

    Returns:
        Dictionary of preferences, or empty dict if the file is missing or unreadable
    """
    if not PREFERENCES_FILE.exists():
        return {}

    try:
        with open(PREFERENCES_FILE, 'r') as f:
            preferences = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.error(f"Failed to read preferences file {PREFERENCES_FILE}: {e}")
        return {}

    if not isinstance(preferences, dict):
        logger.error(f"Ignoring preferences file {PREFERENCES_FILE}: expected a JSON object")
        return {}
    return preferences


def _save_preferences(preferences: Dict[str, Any]) -> None:
    PREFERENCES_DIR.mkdir(parents=True, exist_ok=True)
    with open(PREFERENCES_FILE, 'w') as f:
        json.dump(preferences, f, indent=2)


def get_config_path() -> Optional[str]:
    """Return the stored config file path, or None if unset."""
    return _load_preferences().get(CONFIG_PATH_KEY)


def set_config_path(path: str) -> None:
    """
    Store the config file path.

    Args:
        path: Absolute path to the config file
    """
    preferences = _load_preferences()
    preferences[CONFIG_PATH_KEY] = path
    _save_preferences(preferences)
    logger.info(f"Config path preference set to: {path}")


def clear_config_path() -> bool:
    """
    Remove the stored config file path.

    Returns:
        True if a stored path was removed
    """
    preferences = _load_preferences()
    if CONFIG_PATH_KEY not in preferences:
        logger.debug("Config path preference not set, nothing to clear")
        return False

    del preferences[CONFIG_PATH_KEY]
    _save_preferences(preferences)
    logger.info("Config path preference cleared")
    return True
