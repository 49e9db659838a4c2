import copy
import logging
import sys
from argparse import Namespace
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "config/application.yml"

DEFAULT_CONFIG: Dict[str, Any] = {
    "build_log": {
        "default_path": "output.txt",
        "file_extension": "swift",
    },
    "patching": {
        "dry_run": False,
    },
    "ui": {
        "type": "rich",
        "progress_style": "spinner",
        "enhanced_logging": True,
    },
    "logging": {
        "level": "WARNING",
        "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        "log_file": None,
    },
}

# Sections read with item access after loading
REQUIRED_SECTIONS = ("build_log", "patching", "ui", "logging")


def load_and_resolve_config(base_dir: Path, config_path: Optional[str] = None) -> dict:
    """
    Loads YAML configuration over the built-in defaults and resolves relative paths.

    A missing default config file is not an error; a missing file that was
    asked for explicitly is.
    """
    explicit = config_path is not None
    absolute_config_path = base_dir / (config_path or DEFAULT_CONFIG_PATH)
    logger.debug(f"Attempting to load configuration from: {absolute_config_path}")

    if not absolute_config_path.is_file():
        if explicit:
            logger.critical(f"Configuration file not found at {absolute_config_path}")
            sys.exit(1)
        logger.debug("No configuration file found, using defaults.")
        loaded = {}
    else:
        try:
            with open(absolute_config_path, 'r', encoding='utf-8') as f:
                loaded = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as err:
            logger.critical(f"Error loading configuration from {absolute_config_path}: {err}", exc_info=True)
            sys.exit(1)
        if not isinstance(loaded, dict):
            logger.critical(f"Configuration in {absolute_config_path} must be a mapping.")
            sys.exit(1)

    config_data = merge_config(copy.deepcopy(DEFAULT_CONFIG), loaded)

    for section in REQUIRED_SECTIONS:
        if not isinstance(config_data.get(section), dict):
            logger.critical(f"Configuration section '{section}' in {absolute_config_path} must be a mapping.")
            sys.exit(1)

    resolve_path(config_data, base_dir, ['build_log', 'default_path'])
    resolve_path(config_data, base_dir, ['logging', 'log_file'])  # Optional

    logger.debug(f"Configuration resolved from {absolute_config_path if loaded else 'defaults'}")
    return config_data


def merge_config(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively merges `override` into `base` and returns `base`."""
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            merge_config(base[key], value)
        else:
            base[key] = value
    return base


def resolve_path(config: dict, root: Path, keys: List[str]):
    """Helper to get, resolve, and update a path in the config dict."""
    current = config
    for key in keys[:-1]:
        current = current.get(key)
        if not isinstance(current, dict):
            logger.warning(f"Config path {'->'.join(keys)} structure invalid; leaving it unresolved.")
            return

    last_key = keys[-1]
    relative_path = current.get(last_key)
    if relative_path:
        resolved_path = str((root / relative_path).resolve())
        current[last_key] = resolved_path
        logger.debug(f"Resolved config path '{'.'.join(keys)}': {relative_path} -> {resolved_path}")


def apply_cli_overrides(config: dict, args: Namespace, base_dir: Path) -> dict:
    """Applies command line flags on top of the loaded configuration."""
    if getattr(args, 'build_file', None):
        config['build_log']['build_file'] = str((base_dir / args.build_file).resolve())
    else:
        config['build_log']['build_file'] = config['build_log']['default_path']
    if getattr(args, 'extension', None):
        config['build_log']['file_extension'] = args.extension.lstrip('.')
    if getattr(args, 'dry_run', False):
        config['patching']['dry_run'] = True
    if getattr(args, 'log_level', None):
        config['logging']['level'] = args.log_level
    return config


def ensure_app_directories(config: dict):
    """Creates the log file directory if file logging is configured."""
    log_file = config.get('logging', {}).get('log_file')
    if not log_file:
        return
    target_dir = Path(log_file).parent
    try:
        target_dir.mkdir(parents=True, exist_ok=True)
        logger.debug(f"Ensured directory exists: {target_dir}")
    except OSError as e:
        logger.error(f"Failed to create directory {target_dir}: {e}", exc_info=True)
