"""Configuration module tests."""

from .test_config import (
    test_config_defaults,
    test_config_env_file_loading,
    test_config_env_overrides,
    test_config_from_args_overrides_env,
    test_config_from_env_defaults,
    test_config_validation_unknown_architecture,
)

__all__ = [
    "test_config_defaults",
    "test_config_env_file_loading",
    "test_config_env_overrides",
    "test_config_from_args_overrides_env",
    "test_config_from_env_defaults",
    "test_config_validation_unknown_architecture",
]
