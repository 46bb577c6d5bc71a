# File: chained_hashmap/config/logger_config.py
# This file provides a centralized configuration for logging in applications that use the hash table package.
# It defines functions that configure a logger with a log level, output format and log file rotation,
# either from explicit arguments or from the 'logging' section of the YAML configuration.

import logging  # Provides logging functionality
import os  # For handling file system paths and directories
from logging.handlers import RotatingFileHandler  # For managing rotating log files
from pathlib import Path  # For accepting path objects as config locations
from typing import Optional, Union  # For optional type hinting

from chained_hashmap.utils.config_utils import load_logging_settings

# Valid destinations for log records
OUTPUT_TARGETS = {"file", "console", "both"}


def configure_logger(
    name: Optional[str] = "chained_hashmap",  # The name of the logger; None selects the root logger
    log_dir: str = "./logs",  # Directory where log files will be stored
    log_file: str = "hash_table.log",  # Name of the log file
    level: int = logging.INFO,  # Logging level (e.g., DEBUG, INFO, WARNING, ERROR)
    max_bytes: int = 10 * 1024 * 1024,  # Maximum size of a log file before rotation (default: 10 MB)
    backup_count: int = 5,  # Number of backup files to keep during log rotation
    output: str = "console",  # Where to output logs: "file", "console", or "both"
) -> logging.Logger:
    """
    Configures and returns a logger instance.

    Handlers are attached only the first time a given logger is configured, so
    repeated calls never duplicate log records.

    Args:
        name (Optional[str]): Name of the logger. Defaults to the package logger.
        log_dir (str): Directory to store log files; created when file output is requested.
        log_file (str): Name of the log file.
        level (int): Logging level (e.g., logging.INFO, logging.DEBUG).
        max_bytes (int): Maximum size of the log file before rotation.
        backup_count (int): Number of backup files to keep during rotation.
        output (str): Where to send logs: "file", "console", or "both".

    Returns:
        logging.Logger: Configured logger instance.

    Raises:
        ValueError: If output is not one of "file", "console" or "both".
        RuntimeError: If a handler or the log directory cannot be set up.
    """
    if output not in OUTPUT_TARGETS:
        raise ValueError(f"Invalid log output '{output}'; expected one of {sorted(OUTPUT_TARGETS)}")

    try:
        # Create or retrieve the logger instance with the specified name
        logger = logging.getLogger(name)

        # Set the logging level for the logger
        logger.setLevel(level)

        # Check if the logger already has handlers to prevent duplicate logs
        if not logger.handlers:
            # Define the log message format, including timestamp, logger name, level, and message
            formatter = logging.Formatter(
                fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )

            # If output includes file logging, configure a rotating file handler
            if output in {"file", "both"}:
                # Ensure the logs directory exists; create it if it does not
                os.makedirs(log_dir, exist_ok=True)
                log_path = os.path.join(log_dir, log_file)
                try:
                    file_handler = RotatingFileHandler(
                        log_path, maxBytes=max_bytes, backupCount=backup_count
                    )
                    file_handler.setLevel(level)
                    file_handler.setFormatter(formatter)
                    logger.addHandler(file_handler)
                except OSError as e:
                    raise RuntimeError(
                        f"Failed to configure file handler for logger: {e}"
                    ) from e

            # If output includes console logging, configure a stream handler
            if output in {"console", "both"}:
                console_handler = logging.StreamHandler()
                console_handler.setLevel(level)
                console_handler.setFormatter(formatter)
                logger.addHandler(console_handler)

        return logger

    except OSError as e:  # Handle issues with creating log directories
        raise RuntimeError(
            f"Failed to create or access log directory: {e}"
        ) from e


def configure_logger_from_config(
    config_file_path: Optional[Union[str, Path]] = None,  # YAML file; the packaged defaults when None
    name: Optional[str] = "chained_hashmap",  # The name of the logger to configure
) -> logging.Logger:
    """
    Configure a logger from the 'logging' section of a YAML file (the packaged defaults when None).
    """
    settings = load_logging_settings(config_file_path)
    return configure_logger(name=name, **settings)
