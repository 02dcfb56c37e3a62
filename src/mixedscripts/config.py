# -*- coding: ascii -*-
"""
Configuration loader.

Reads settings from a YAML file (default: .mixedscripts.yaml in the working
directory) and merges them over built-in defaults:

    scripts: [Latin, Common]
    marker: mixedscripts
    workers: 1
    exclude_dirs: [.git, build]
    extensions: [.py, .md]
"""

import logging
import yaml
from pathlib import Path
from typing import Dict, Any, Optional

from .directives import split_script_list
from .errors import ConfigurationError
from .schema import CONFIG_FILENAME, DEFAULT_MARKER, DEFAULT_SCRIPTS

LOG = logging.getLogger(__name__)

KNOWN_KEYS = ('scripts', 'marker', 'workers', 'exclude_dirs', 'extensions')


def default_config() -> Dict[str, Any]:
    """Return default configuration when no config file is available."""
    return {
        'scripts': list(DEFAULT_SCRIPTS),
        'marker': DEFAULT_MARKER,
        'workers': 1,
        'exclude_dirs': None,
        'extensions': None,
    }


def _as_list(key: str, value) -> Optional[list]:
    if value is None:
        return None
    if isinstance(value, str):
        return list(split_script_list(value))
    if isinstance(value, (list, tuple)) and all(isinstance(v, str) for v in value):
        return list(value)
    raise ConfigurationError(f"Config key '{key}' must be a list of strings, got {value!r}")


def load_config(config_path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Load configuration, falling back to defaults.

    Args:
        config_path: Optional path to a YAML file; when omitted,
            .mixedscripts.yaml in the working directory is used if present

    Returns:
        Configuration dict with keys scripts, marker, workers, exclude_dirs, extensions

    Raises:
        ConfigurationError: if an explicit config file is missing, unreadable or malformed
    """
    config = default_config()

    explicit = config_path is not None
    if config_path is None:
        config_path = Path.cwd() / CONFIG_FILENAME
    config_path = Path(config_path)

    if not config_path.exists():
        if explicit:
            raise ConfigurationError(f"Config file not found: {config_path}")
        LOG.debug(f"No {CONFIG_FILENAME} found, using defaults")
        return config

    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise ConfigurationError(f"Failed to load config from {config_path}: {e}") from e

    if data is None:
        LOG.warning(f"Config file {config_path} is empty, using defaults")
        return config
    if not isinstance(data, dict):
        raise ConfigurationError(f"Config file {config_path} must contain a mapping")

    for key in data:
        if key not in KNOWN_KEYS:
            LOG.warning(f"Ignoring unknown config key '{key}' in {config_path}")

    if 'scripts' in data:
        scripts = _as_list('scripts', data['scripts'])
        # An empty list means "use the defaults"
        config['scripts'] = scripts or list(DEFAULT_SCRIPTS)
    if 'marker' in data:
        marker = data['marker']
        if not isinstance(marker, str) or not marker.strip():
            raise ConfigurationError(f"Config key 'marker' must be a non-empty string, got {marker!r}")
        config['marker'] = marker.strip()
    if 'workers' in data:
        workers = data['workers']
        if not isinstance(workers, int) or isinstance(workers, bool) or workers < 1:
            raise ConfigurationError(f"Config key 'workers' must be a positive integer, got {workers!r}")
        config['workers'] = workers
    for key in ('exclude_dirs', 'extensions'):
        if key in data:
            config[key] = _as_list(key, data[key])

    LOG.info(
        f"Loaded config from {config_path}: scripts={','.join(config['scripts'])}, "
        f"marker={config['marker']}, workers={config['workers']}"
    )
    return config
