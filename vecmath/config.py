"""
Configuration for registering the script functions with a host.
"""
import json

from .logger import get_logger

log = get_logger(__name__)

DEFAULT_CONFIG = {
    "prefix": "",         # prepended to every script name
    "overwrite": False,   # allow replacing names already in the namespace
    "log_level": "INFO",
}


def load_config(path: str = "vecmath.json") -> dict:
    """
    Load JSON configuration and return it merged over DEFAULT_CONFIG.
    A missing, unreadable or malformed file gives the defaults.
    """
    config = dict(DEFAULT_CONFIG)
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except FileNotFoundError:
        return config
    except (OSError, ValueError) as e:
        # ValueError covers JSONDecodeError and UnicodeDecodeError
        log.warning(f"Ignoring unreadable config {path}: {e}")
        return config
    if not isinstance(data, dict):
        log.warning(f"Ignoring config {path}: expected a JSON object")
        return config
    config.update(data)
    return config
