"""Configuration management for the Go struct analyzer."""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from ...domain.models.go import (
    ARCHITECTURE_WORD_SIZES,
    DEFAULT_ARCHITECTURE,
    DEFAULT_WORD_SIZE,
    SUPPORTED_WORD_SIZES,
)
from .defaults import get_config


@dataclass
class Config:
    """Configuration for the Go struct analyzer."""

    architecture: str = DEFAULT_ARCHITECTURE
    word_size: int = DEFAULT_WORD_SIZE
    verbose: bool = False
    log_dir: Optional[Path] = None
    show_inline_annotations: bool = True
    enable_optimization_warnings: bool = True
    expand_multi_name_fields: bool = False

    @classmethod
    def for_architecture(cls, architecture: str) -> "Config":
        """
        Build a default configuration targeting a GOARCH value.

        Unknown architectures keep the default word size; validate() reports them.
        """
        word_size = ARCHITECTURE_WORD_SIZES.get(architecture, DEFAULT_WORD_SIZE)
        return cls(architecture=architecture, word_size=word_size)

    @classmethod
    def from_env(cls, env_path: Optional[Path] = None) -> "Config":
        """
        Load configuration from environment variables or .env file.

        Args:
            env_path: Optional path to .env file (defaults to .env in current directory)

        Returns:
            Config object
        """
        if env_path is None:
            env_path = Path.cwd() / ".env"

        if env_path.exists():
            load_dotenv(env_path)

        settings = get_config()

        architecture = str(settings["ARCHITECTURE"]) or DEFAULT_ARCHITECTURE
        config = cls.for_architecture(architecture)
        if settings["WORD_SIZE"]:
            config.word_size = int(settings["WORD_SIZE"])

        log_dir = str(settings["LOG_DIR"])
        config.log_dir = Path(log_dir) if log_dir else None
        config.verbose = bool(settings["VERBOSE"])
        config.show_inline_annotations = bool(settings["SHOW_INLINE_ANNOTATIONS"])
        config.enable_optimization_warnings = bool(settings["ENABLE_OPTIMIZATION_WARNINGS"])
        config.expand_multi_name_fields = bool(settings["EXPAND_MULTI_NAME_FIELDS"])

        return config

    @classmethod
    def from_args(
        cls,
        architecture: Optional[str] = None,
        word_size: Optional[int] = None,
        verbose: Optional[bool] = None,
        log_dir: Optional[Path] = None,
        expand_multi_name_fields: Optional[bool] = None,
        env_path: Optional[Path] = None,
    ) -> "Config":
        """
        Create configuration from explicit arguments, falling back to environment.

        An explicit architecture resets the word size to that architecture's
        pointer width unless a word size is given as well.

        Returns:
            Config object
        """
        config = cls.from_env(env_path)

        if architecture is not None:
            config.architecture = architecture
            config.word_size = ARCHITECTURE_WORD_SIZES.get(architecture, config.word_size)
        if word_size is not None:
            config.word_size = word_size
        if verbose is not None:
            config.verbose = verbose
        if log_dir is not None:
            config.log_dir = log_dir
        if expand_multi_name_fields is not None:
            config.expand_multi_name_fields = expand_multi_name_fields

        return config

    def validate(self) -> None:
        """
        Validate the configuration.

        Raises:
            ValueError: If configuration is invalid
        """
        if self.architecture not in ARCHITECTURE_WORD_SIZES:
            known = ", ".join(sorted(ARCHITECTURE_WORD_SIZES))
            raise ValueError(f"Unknown architecture: {self.architecture} (known: {known})")

        if self.word_size not in SUPPORTED_WORD_SIZES:
            raise ValueError(f"Unsupported word size: {self.word_size} (expected 4 or 8)")
