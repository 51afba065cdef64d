"""
Configuration Loader

Loads YAML configuration files and builds FetchSettings from them.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from .settings import DEFAULT_HEADERS, FetchSettings

logger = logging.getLogger(__name__)

FETCH_SETTINGS_FILE = 'fetch_settings.yaml'


def _get_config_dir() -> Path:
    """Get the config directory path."""
    # Try relative to this file first
    module_dir = Path(__file__).parent.parent.parent
    config_dir = module_dir / 'config'

    if config_dir.exists():
        return config_dir

    # Try current working directory
    cwd_config = Path.cwd() / 'config'
    if cwd_config.exists():
        return cwd_config

    raise FileNotFoundError(
        f"Config directory not found. Tried: {config_dir}, {cwd_config}"
    )


def load_config(filename: str, config_dir: Optional[Path] = None) -> Dict[str, Any]:
    """
    Load a YAML configuration file.

    Args:
        filename: Name of the config file (e.g., 'fetch_settings.yaml')
        config_dir: Directory to read from (default: project config/ directory)

    Returns:
        Parsed YAML content as dictionary (empty dict for an empty file)

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValueError: If the file does not contain a mapping
    """
    config_path = (config_dir or _get_config_dir()) / filename

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, 'r', encoding='utf-8') as f:
        data = yaml.safe_load(f)

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Expected a mapping in {config_path}, got {type(data).__name__}")
    return data


def build_fetch_settings(config: Dict[str, Any]) -> FetchSettings:
    """
    Build FetchSettings from a parsed config mapping.

    Missing keys keep their defaults. Configured headers are merged over
    the default browser headers; a configured user_agent wins over both.

    Example config:
        fetch:
          timeout_seconds: 8
          max_redirects: 5
          user_agent: "Mozilla/5.0 ..."
          headers:
            Accept-Language: "en-GB,en;q=0.9"
        bot_detection:
          max_body_length: 10000
          markers: ["captcha", "Robot Check"]
    """
    defaults = FetchSettings()
    fetch = config.get('fetch') or {}
    bot = config.get('bot_detection') or {}

    headers = dict(DEFAULT_HEADERS)
    headers.update({str(k): str(v) for k, v in (fetch.get('headers') or {}).items()})
    if fetch.get('user_agent'):
        headers['User-Agent'] = str(fetch['user_agent'])

    markers = bot.get('markers')

    return FetchSettings(
        timeout=float(fetch.get('timeout_seconds', defaults.timeout)),
        max_redirects=int(fetch.get('max_redirects', defaults.max_redirects)),
        headers=headers,
        bot_check_max_length=int(bot.get('max_body_length', defaults.bot_check_max_length)),
        bot_markers=tuple(str(m) for m in markers) if markers else defaults.bot_markers,
    )


def load_fetch_settings(config_path: Union[str, Path, None] = None) -> FetchSettings:
    """
    Load fetch settings from YAML.

    Args:
        config_path: Explicit YAML file; defaults to config/fetch_settings.yaml

    Returns:
        FetchSettings built from the file
    """
    if config_path is not None:
        path = Path(config_path)
        config = load_config(path.name, path.parent)
    else:
        config = load_config(FETCH_SETTINGS_FILE)

    settings = build_fetch_settings(config)
    logger.debug("Loaded fetch settings: timeout=%ss, max_redirects=%d",
                 settings.timeout, settings.max_redirects)
    return settings
