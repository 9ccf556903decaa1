"""
Configuration management for the CPE candidates CLI.

Loads settings from a config.json file or environment variables.
"""

import json
import logging
import os
from pathlib import Path

from .constants import DEFAULT_LOG_LEVEL, DEFAULT_MAX_RESULTS, ENV_LOG_LEVEL, ENV_MAX_RESULTS

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def load_config() -> dict:
    """
    Load configuration from config.json file or environment variables.

    Priority:
    1. Environment variables (highest priority)
    2. config.json file
    3. Default values

    Returns:
        Dictionary with configuration values
    """
    config = {"log_level": DEFAULT_LOG_LEVEL, "max_results": DEFAULT_MAX_RESULTS}

    # Try to load from config.json
    config_file = Path(__file__).parent.parent / "config.json"
    if config_file.exists():
        try:
            with open(config_file) as f:
                file_config = json.load(f)
                config.update(file_config)
        except (OSError, json.JSONDecodeError) as e:
            logging.warning(f"Could not load config.json: {e}")

    # Environment variables override file config
    log_level = os.getenv(ENV_LOG_LEVEL)
    if log_level:
        config["log_level"] = log_level

    max_results = os.getenv(ENV_MAX_RESULTS)
    if max_results:
        config["max_results"] = max_results

    return config


def get_log_level() -> str:
    """Get the log level name from config, falling back to WARNING."""
    config = load_config()
    level = str(config.get("log_level") or "").strip().upper()
    if level not in VALID_LOG_LEVELS:
        if level:
            logging.warning(f"Unknown log level {level!r}, using {DEFAULT_LOG_LEVEL}")
        return DEFAULT_LOG_LEVEL
    return level


def get_max_results() -> int:
    """Get the display limit from config (0 means unlimited)."""
    config = load_config()
    try:
        max_results = int(config.get("max_results") or DEFAULT_MAX_RESULTS)
    except (TypeError, ValueError):
        logging.warning(f"Invalid max_results {config.get('max_results')!r}, showing all results")
        return DEFAULT_MAX_RESULTS
    return max(max_results, 0)
