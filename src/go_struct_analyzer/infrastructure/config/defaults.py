#!/usr/bin/env python3

"""Default settings and environment overrides for the analyzer."""

import os

ENV_PREFIX = "GOSA_"

# Default configuration values
DEFAULT_CONFIG: dict[str, str | int | bool] = {
    # Target platform
    "ARCHITECTURE": "amd64",
    "WORD_SIZE": 0,  # 0 derives the word size from ARCHITECTURE

    # Output
    "VERBOSE": False,
    "LOG_DIR": "",

    # Feature flags
    "SHOW_INLINE_ANNOTATIONS": True,
    "ENABLE_OPTIMIZATION_WARNINGS": True,
    "EXPAND_MULTI_NAME_FIELDS": False,
}


def get_config() -> dict[str, str | int | bool]:
    """Get configuration with environment variable overrides.

    Each key can be overridden by ``GOSA_<KEY>``. Values are converted to the
    type of the default; integers that fail to parse keep the default.

    Returns:
        Configuration dictionary
    """
    config = DEFAULT_CONFIG.copy()

    for key in config:
        env_value = os.getenv(f"{ENV_PREFIX}{key}")
        if env_value is None:
            continue
        if isinstance(config[key], bool):
            config[key] = env_value.strip().lower() in ("true", "1", "yes", "on")
        elif isinstance(config[key], int):
            try:
                config[key] = int(env_value)
            except ValueError:
                pass
        else:
            config[key] = env_value.strip()

    return config
