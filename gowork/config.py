#!/usr/bin/env python3

import os
import json
import logging
import tomllib
from pathlib import Path
from typing import Mapping, Optional

import toml
import yaml

logger = logging.getLogger(__name__)
_root_logger = logging.getLogger("gowork")

DEFAULT_FORMAT = "%(levelname)s: %(message)s"
DEBUG_FORMAT = "%(asctime)s %(name)s.%(funcName)s > %(levelname)s %(message)s (%(pathname)s:%(lineno)d)"


def setup_logging(verbose: bool = False, config: Optional[dict] = None) -> None:
    """
    Configure the ``gowork`` logger.

    Verbose mode logs everything at DEBUG with the caller's location;
    otherwise only warnings and errors are shown. Logs always go to stderr
    so stdout stays clean for data.
    """
    log_config = (config or {}).get("logging", {})
    if verbose:
        level = logging.DEBUG
        fmt = DEBUG_FORMAT
    else:
        level = getattr(logging, str(log_config.get("level", "WARNING")).upper(), logging.WARNING)
        fmt = log_config.get("format", DEFAULT_FORMAT)

    handler = logging.StreamHandler()  # stderr
    handler.setFormatter(logging.Formatter(fmt))

    _root_logger.handlers.clear()
    _root_logger.addHandler(handler)
    _root_logger.setLevel(level)


def get_config_path():
    """Get the path to the configuration file.

    Checks in order:
    1. GOWORK_CONFIG environment variable
    2. ~/.gowork/ directory
    """
    if 'GOWORK_CONFIG' in os.environ:
        path = Path(os.environ['GOWORK_CONFIG'])
        if path.exists():
            return path

    gowork_dir = Path.home() / '.gowork'
    for filename in ['config.json', 'config.toml', 'config.yaml', 'config.yml']:
        path = gowork_dir / filename
        if path.exists() and path.stat().st_size > 0:
            return path

    # If no file exists, return default path for saving
    return gowork_dir / 'config.json'


def load_config(config_path=None):
    """Load configuration from file."""
    config_path = Path(config_path) if config_path else get_config_path()

    # Start with default config
    config = get_default_config()

    if config_path.exists():
        try:
            if config_path.suffix.lower() in ['.toml']:
                with open(config_path, 'rb') as f:
                    file_config = tomllib.load(f)
            elif config_path.suffix.lower() in ['.yaml', '.yml']:
                with open(config_path, 'r') as f:
                    file_config = yaml.safe_load(f) or {}
            else:
                with open(config_path, 'r') as f:
                    file_config = json.load(f)

            config = merge_configs(config, file_config)
        except Exception as e:
            logger.error(f"Error loading config from {config_path}: {e}")

    config = apply_env_overrides(config)

    return config


def save_config(config, config_path=None):
    """Save configuration to file."""
    config_path = Path(config_path) if config_path else get_config_path()

    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)

        if config_path.suffix.lower() in ['.toml']:
            # tomllib is read-only, writing needs the toml package
            with open(config_path, "w") as f:
                toml.dump(config, f)
        elif config_path.suffix.lower() in ['.yaml', '.yml']:
            with open(config_path, 'w') as f:
                yaml.safe_dump(config, f, default_flow_style=False)
        else:
            with open(config_path, 'w') as f:
                json.dump(config, f, indent=2)

        logger.info(f"Configuration saved to {config_path}")
    except OSError as e:
        logger.error(f"Error saving config to {config_path}: {e}")
        raise

    return config_path


def get_default_config():
    """Get default configuration."""
    return {
        "general": {
            "root": "",             # Workspace root; distributors live in <root>/src
            "root_env": "GOPATH",   # Environment variable consulted when root is empty
        },
        "search": {
            "substring": True,
        },
        "output": {
            "format": "jsonl",
        },
        "logging": {
            "level": "WARNING",
            "format": DEFAULT_FORMAT,
        },
    }


def merge_configs(base_config, override_config):
    """
    Recursively merge two configuration dictionaries.

    Args:
        base_config (dict): Base configuration
        override_config (dict): Configuration to merge/override with

    Returns:
        dict: Merged configuration
    """
    merged = base_config.copy()

    for key, value in override_config.items():
        if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
            merged[key] = merge_configs(merged[key], value)
        else:
            merged[key] = value

    return merged


def apply_env_overrides(config, environ: Optional[Mapping[str, str]] = None):
    """
    Apply environment variable overrides to configuration.
    Environment variables follow the pattern: GOWORK_SECTION_KEY
    For example: GOWORK_SEARCH_SUBSTRING=false or GOWORK_GENERAL_ROOT_ENV=GOWORK_HOME
    """
    env_prefix = "GOWORK_"
    environ = os.environ if environ is None else environ

    for env_key, value in environ.items():
        if not env_key.startswith(env_prefix) or env_key == "GOWORK_CONFIG":
            continue

        key_parts = env_key[len(env_prefix):].lower().split('_')

        if value.lower() in ('true', '1', 'yes', 'on'):
            typed_value = True
        elif value.lower() in ('false', '0', 'no', 'off'):
            typed_value = False
        elif value.isdigit():
            typed_value = int(value)
        else:
            typed_value = value

        current_level = config
        i = 0
        while i < len(key_parts):
            # Find the longest key in current_level that is a prefix of the remaining key_parts
            best_match_len = 0
            matched_key = None

            for config_key in current_level.keys():
                config_key_parts = config_key.split('_')
                if key_parts[i:i + len(config_key_parts)] == config_key_parts:
                    if len(config_key_parts) > best_match_len:
                        best_match_len = len(config_key_parts)
                        matched_key = config_key

            if matched_key is None:
                break

            if i + best_match_len == len(key_parts):
                current_level[matched_key] = typed_value
                break

            if isinstance(current_level[matched_key], dict):
                current_level = current_level[matched_key]
                i += best_match_len
            else:
                # env var is longer but we found a non-dict value
                break

    return config


def resolve_root(config, environ: Optional[Mapping[str, str]] = None) -> str:
    """
    Resolve the workspace root.

    ``general.root`` wins; otherwise the first entry of the environment
    variable named by ``general.root_env`` (a path list, like GOPATH);
    otherwise ``~/go``.
    """
    environ = os.environ if environ is None else environ
    general = config.get("general", {})

    root = general.get("root") or ""
    if not root:
        env_name = general.get("root_env") or "GOPATH"
        entries = [p for p in environ.get(env_name, "").split(os.pathsep) if p]
        if entries:
            root = entries[0]
            logger.debug(f"Using root from ${env_name}: {root}")
        else:
            root = "~/go"

    return os.path.abspath(os.path.expanduser(str(root)))
