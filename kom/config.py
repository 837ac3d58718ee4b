"""User configuration for the pager.

Settings are read from a JSON file in the user's config directory and can
be overridden with environment variables. A broken settings file never
stops the pager from starting: bad entries are logged and the defaults are
kept.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import platformdirs

from .constants import PagerConstants

logger = logging.getLogger(__name__)


@dataclass
class PagerConfig:
    """Effective pager settings."""
    log_level: str = PagerConstants.DEFAULT_LOG_LEVEL
    log_file: Optional[str] = None
    mouse: bool = True
    mouse_query_timeout: float = PagerConstants.MOUSE_QUERY_TIMEOUT


def default_config_path() -> Path:
    """Location of the settings file for this platform."""
    config_dir = Path(platformdirs.user_config_dir(PagerConstants.APP_NAME))
    return config_dir / PagerConstants.SETTINGS_FILENAME


def _read_settings_file(path: Path) -> Dict[str, Any]:
    """Load the raw settings dictionary.

    Returns:
        Dictionary from the file. Empty dict if the file doesn't exist or
        can't be read.
    """
    if not path.exists():
        return {}
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except (json.JSONDecodeError, OSError) as e:
        logger.warning(f"Could not load settings from {path}: {e}")
        return {}
    if not isinstance(data, dict):
        logger.warning("Settings file has invalid format (not a dict), ignoring")
        return {}
    return data


def validate_setting(key: str, value: Any) -> bool:
    """Check the type of a single setting value."""
    if key in ('log_level', 'log_file'):
        return isinstance(value, str)
    if key == 'mouse':
        return isinstance(value, bool)
    if key == 'mouse_query_timeout':
        return isinstance(value, (int, float)) and not isinstance(value, bool) and value >= 0
    # Unknown settings are ignored (forward compatibility)
    return False


def _parse_bool(value: str) -> Optional[bool]:
    lowered = value.strip().lower()
    if lowered in ('1', 'true', 'yes', 'on'):
        return True
    if lowered in ('0', 'false', 'no', 'off'):
        return False
    return None


def load_config(path: Optional[Path] = None,
                environ: Optional[Mapping[str, str]] = None) -> PagerConfig:
    """Build the effective configuration.

    Args:
        path: Settings file; defaults to :func:`default_config_path`
        environ: Environment mapping; defaults to ``os.environ``

    Returns:
        PagerConfig with file values applied, then environment overrides
    """
    if path is None:
        path = default_config_path()
    if environ is None:
        environ = os.environ

    config = PagerConfig()
    for key, value in _read_settings_file(path).items():
        if validate_setting(key, value):
            setattr(config, key, value)
        else:
            logger.warning(f"Ignoring invalid setting {key}={value!r} in {path}")

    level = environ.get(PagerConstants.LOG_LEVEL_ENV)
    if level:
        config.log_level = level
    log_file = environ.get(PagerConstants.LOG_FILE_ENV)
    if log_file:
        config.log_file = log_file
    mouse = environ.get(PagerConstants.MOUSE_ENV)
    if mouse is not None:
        parsed = _parse_bool(mouse)
        if parsed is None:
            logger.warning(f"Ignoring invalid {PagerConstants.MOUSE_ENV}={mouse!r}")
        else:
            config.mouse = parsed
    return config
