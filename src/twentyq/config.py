# Area: Shared
"""
twentyq.config — Server configuration
=====================================

Configuration is a plain dict built in three layers:

1. DEFAULT_CONFIG
2. an optional JSON config file
3. environment variables (``.env`` is loaded first via python-dotenv)

A relative ``answers_file`` given in the config file is resolved against
that file's directory; from the environment or CLI it is resolved
against the working directory.

Missing oracle or ledger credentials are not errors: the matching
endpoints answer 503 instead.
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import load_dotenv

logger = logging.getLogger("twentyq.config")

DEFAULT_CONFIG: Dict[str, Any] = {
    "oracle_api_key": None,
    "oracle_model": "claude-3-5-haiku-latest",
    "oracle_timeout_seconds": 20,
    "ledger_url": None,
    "answers_file": "answers.json",
    "host": "0.0.0.0",
    "port": 3000,
    "session_max_age_seconds": 3600,
    "eviction_interval_minutes": 15,
    "enricher_timeout_seconds": 10,
    "log_file": "twentyq.log",
    "log_level": "INFO",
}

ENV_MAPPINGS = {
    "ANTHROPIC_API_KEY": "oracle_api_key",
    "ORACLE_MODEL": "oracle_model",
    "ORACLE_TIMEOUT_SECONDS": "oracle_timeout_seconds",
    "LEDGER_DATABASE_URL": "ledger_url",
    "ANSWERS_FILE": "answers_file",
    "HOST": "host",
    "PORT": "port",
    "SESSION_MAX_AGE_SECONDS": "session_max_age_seconds",
    "EVICTION_INTERVAL_MINUTES": "eviction_interval_minutes",
    "ENRICHER_TIMEOUT_SECONDS": "enricher_timeout_seconds",
    "LOG_FILE": "log_file",
    "LOG_LEVEL": "log_level",
}

INT_KEYS = {
    "oracle_timeout_seconds",
    "port",
    "session_max_age_seconds",
    "eviction_interval_minutes",
    "enricher_timeout_seconds",
}


def load_config(config_path: Optional[str] = None, use_dotenv: bool = True) -> Dict[str, Any]:
    """Load config from defaults, an optional JSON file, and the environment."""
    if use_dotenv:
        load_dotenv()

    config: Dict[str, Any] = dict(DEFAULT_CONFIG)

    if config_path:
        path = Path(config_path)
        if path.exists():
            with open(path, encoding="utf-8") as f:
                file_config = json.load(f)
            answers = file_config.get("answers_file")
            if answers and not Path(answers).is_absolute():
                # relative to the config file, not the working directory
                file_config["answers_file"] = str(path.parent / answers)
            config.update(file_config)
        else:
            logger.warning(f"Config file not found: {config_path}")

    for env_key, config_key in ENV_MAPPINGS.items():
        if env_key in os.environ:
            config[config_key] = os.environ[env_key]

    for key in INT_KEYS:
        value = config.get(key)
        if isinstance(value, str) and value.strip().lstrip("-").isdigit():
            config[key] = int(value)

    validate_config(config)
    return config


def validate_config(config: Dict[str, Any]) -> None:
    """
    Validate numeric configuration values.

    Raises:
        ValueError: If any integer setting is missing, non-numeric or not positive
    """
    bad = [
        k for k in sorted(INT_KEYS)
        if isinstance(config.get(k), bool)
        or not isinstance(config.get(k), int)
        or config[k] <= 0
    ]
    if bad:
        raise ValueError(f"Invalid config values (positive integers required): {bad}")
