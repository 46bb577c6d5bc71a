# File: chained_hashmap/utils/config_utils.py
# Description: Utility functions for loading and validating the YAML configuration that sizes hash tables
# and sets up logging.

import logging  # For reporting fallbacks to default configuration
import os  # For checking that configuration files exist
from pathlib import Path  # For OS-independent file paths
from typing import Optional, Union

import yaml  # Import PyYAML for reading and parsing YAML files

from chained_hashmap.config.table_config import DEFAULT_CAPACITY, DEFAULT_LOAD_FACTOR, TableSettings

logger = logging.getLogger(__name__)

# Configuration file shipped with the package
DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent.parent / "config" / "hash_table_config.yaml"

# Keyword arguments accepted by configure_logger() from the 'logging' section
LOGGING_SETTING_KEYS = {"log_dir", "log_file", "level", "max_bytes", "backup_count", "output"}


class ConfigLoaderError(Exception):
    """
    Custom exception for errors encountered during configuration loading or validation.
    """
    pass


def load_config(config_file_path: Union[str, Path], default_config: dict = None) -> dict:
    """
    Load the configuration from a YAML file.

    Args:
        config_file_path (Union[str, Path]): Path to the YAML configuration file.
        default_config (dict, optional): Default configuration to use if loading fails.

    Returns:
        dict: Parsed configuration dictionary.

    Raises:
        ConfigLoaderError: If the configuration file does not exist, fails to parse or is not a mapping.
    """
    # Step 1: Check if the YAML file exists at the specified path
    if not os.path.exists(config_file_path):
        # If a default configuration is provided, return it with a warning
        if default_config is not None:
            logger.warning(f"Config file '{config_file_path}' not found. Using default configuration.")
            return default_config
        # If no default is provided, raise a custom error
        raise ConfigLoaderError(f"Config file '{config_file_path}' not found.")

    # Step 2: Attempt to load the YAML file
    try:
        with open(config_file_path, "r") as config_file:
            # Use safe_load to parse the YAML content into a dictionary
            config = yaml.safe_load(config_file)
    # Step 3: Catch read errors (a directory, missing permissions) and YAML parsing errors
    except OSError as e:
        raise ConfigLoaderError(f"Could not read config file '{config_file_path}': {e}") from e
    except yaml.YAMLError as e:
        if default_config is not None:
            logger.warning(f"Error parsing YAML file '{config_file_path}': {e}. Using default configuration.")
            return default_config
        raise ConfigLoaderError(f"Error parsing YAML file '{config_file_path}': {e}") from e

    # Step 4: An empty file parses to None; anything else must be a mapping
    if config is None:
        config = {}
    if not isinstance(config, dict):
        raise ConfigLoaderError(f"Config file '{config_file_path}' must contain a mapping at the top level.")
    return config


def validate_config(config: dict, required_keys: list) -> None:
    """
    Validate that required keys are present in the configuration dictionary.

    Args:
        config (dict): The configuration dictionary to validate.
        required_keys (list): A list of keys that must be present in the configuration.

    Raises:
        ConfigLoaderError: If any required keys are missing.
    """
    missing_keys = [key for key in required_keys if key not in config]
    if missing_keys:
        raise ConfigLoaderError(f"Missing required keys in configuration: {missing_keys}")


def _load_section(config_file_path: Optional[Union[str, Path]], section: str) -> dict:
    # Read one top-level mapping from the given file, or from the packaged defaults
    path = DEFAULT_CONFIG_PATH if config_file_path is None else config_file_path
    config = load_config(path)
    validate_config(config, [section])

    values = config[section]
    if values is None:
        return {}
    if not isinstance(values, dict):
        raise ConfigLoaderError(f"Section '{section}' in '{path}' must be a mapping.")
    return values


def load_table_settings(config_file_path: Optional[Union[str, Path]] = None) -> TableSettings:
    """
    Build validated TableSettings from the 'hash_table' section of a YAML file.

    Keys missing from the section fall back to DEFAULT_CAPACITY and DEFAULT_LOAD_FACTOR.

    Args:
        config_file_path (Optional[Union[str, Path]]): Path to the YAML file; the packaged file when None.

    Returns:
        TableSettings: The validated settings.

    Raises:
        ConfigLoaderError: If the file cannot be read or has no 'hash_table' section.
        InvalidConfigurationError: If the capacity or load factor is out of range.
    """
    section = _load_section(config_file_path, "hash_table")
    settings = TableSettings(
        capacity=section.get("capacity", DEFAULT_CAPACITY),
        load_factor=section.get("load_factor", DEFAULT_LOAD_FACTOR),
    )
    return settings.validate()


def load_logging_settings(config_file_path: Optional[Union[str, Path]] = None) -> dict:
    """
    Return the 'logging' section of a YAML file as keyword arguments for configure_logger().

    The 'level' entry may be given by name (e.g. "DEBUG") and is converted to the numeric level.
    Raises ConfigLoaderError for keys configure_logger() does not accept or an unknown level name.
    """
    settings = dict(_load_section(config_file_path, "logging"))
    unknown_keys = sorted(str(key) for key in settings if key not in LOGGING_SETTING_KEYS)
    if unknown_keys:
        raise ConfigLoaderError(f"Unknown logging settings: {unknown_keys}")

    level = settings.get("level")
    if isinstance(level, str):
        numeric_level = logging.getLevelName(level.upper())
        if not isinstance(numeric_level, int):
            raise ConfigLoaderError(f"Unknown logging level: {level}")
        settings["level"] = numeric_level
    return settings
