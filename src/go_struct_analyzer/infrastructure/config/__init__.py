"""Infrastructure configuration module."""

from .analyzer_config import Config
from .defaults import DEFAULT_CONFIG, get_config

__all__ = ["Config", "DEFAULT_CONFIG", "get_config"]
