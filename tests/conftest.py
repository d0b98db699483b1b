"""Pytest configuration and shared fixtures."""

import sys
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

# Add src directory to path for imports
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from go_struct_analyzer.application import StructAnalyzer
from go_struct_analyzer.domain.models.go import Field, RecordDeclaration, SourceLocation, SourceSpan
from go_struct_analyzer.infrastructure.config import Config
from go_struct_analyzer.infrastructure.logging import LoggerSetup


@pytest.fixture(scope="session")
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture(scope="session")
def sample_go_file(project_root: Path) -> Path:
    """Return path to the sample Go source used by integration tests."""
    path = project_root / "tests" / "resources" / "sample_structs.go"
    if not path.exists():
        pytest.skip(f"Sample Go file not found at {path}")
    return path


@pytest.fixture(scope="session")
def sample_source(sample_go_file: Path) -> str:
    """Text of the sample Go file."""
    return sample_go_file.read_text(encoding="utf-8")


@pytest.fixture
def config() -> Config:
    """Default amd64 configuration, independent of the environment."""
    return Config()


@pytest.fixture
def config_386() -> Config:
    """32-bit configuration."""
    return Config.for_architecture("386")


@pytest.fixture
def analyzer(config: Config) -> StructAnalyzer:
    """Analyzer for 8-byte words."""
    return StructAnalyzer(config)


@pytest.fixture
def make_declaration() -> Callable[..., RecordDeclaration]:
    """
    Factory for declarations built directly from (name, type) pairs.

    Each field is placed on its own line so positions stay distinct.
    """

    def factory(name: str, fields: list[tuple[str, str]]) -> RecordDeclaration:
        return RecordDeclaration(
            name=name,
            fields=tuple(
                Field(field_name, type_expression, SourceLocation(i + 1, 1, 1 + len(field_name)))
                for i, (field_name, type_expression) in enumerate(fields)
            ),
            source_span=SourceSpan(0, 0, len(fields) + 1, 1),
            name_location=SourceLocation(0, 5, 5 + len(name)),
        )

    return factory


@pytest.fixture
def clean_logging() -> Iterator[None]:
    """Reset LoggerSetup before and after a test that initializes logging."""
    LoggerSetup.reset()
    yield
    LoggerSetup.reset()
