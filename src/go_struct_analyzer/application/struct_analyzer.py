#!/usr/bin/env python3

"""Struct analysis orchestrator (Application Layer).

Wires the declaration parser and the layout engine together for one
configuration and offers the position lookups editor-style consumers need:
which struct contains a position, and which field name sits under it.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from ..domain.models.go import (
    Field,
    FieldLayout,
    OptimalityReport,
    RecordDeclaration,
    RecordLayout,
)
from ..domain.services.layout import LayoutEngine
from ..domain.services.parsing import DeclarationParser
from ..infrastructure.config import Config
from ..infrastructure.logging import ProgressTracker, get_logger, log_timing

logger = get_logger(__name__)


@dataclass(frozen=True)
class StructAnalysis:
    """Everything computed for one struct declaration."""

    declaration: RecordDeclaration
    layout: RecordLayout
    optimality: OptimalityReport

    @property
    def name(self) -> str:
        return self.declaration.name

    def field_layout_for(self, field: Field) -> FieldLayout | None:
        """Layout entry of a field of this struct, matched by position."""
        for candidate, field_layout in zip(self.declaration.fields, self.layout.fields):
            if candidate is field:
                return field_layout
        return None


class StructAnalyzer:
    """Parses Go source and computes layouts for every struct in it.

    The analyzer holds no per-document state; the parser and the layout
    engine are built once from the configuration and reused.
    """

    def __init__(self, config: Config | None = None, tracker: ProgressTracker | None = None):
        """Initialize analyzer.

        Args:
            config: Analyzer configuration (defaults to amd64 settings)
            tracker: Optional progress tracker for counting analyzed structs
        """
        self.config = config if config is not None else Config()
        self.parser = DeclarationParser(self.config.expand_multi_name_fields)
        self.engine = LayoutEngine(self.config.word_size)
        self.tracker = tracker

    @property
    def word_size(self) -> int:
        return self.engine.word_size

    def analyze_declaration(self, declaration: RecordDeclaration) -> StructAnalysis:
        """Compute layout and optimality for one declaration."""
        layout = self.engine.compute_layout(declaration)
        optimality = self.engine.compute_optimality(declaration, layout)
        if self.tracker is not None:
            self.tracker.count_declaration(len(declaration.fields))
        return StructAnalysis(declaration, layout, optimality)

    def analyze_source(self, source_text: str) -> list[StructAnalysis]:
        """Analyze every struct declared in a document.

        Args:
            source_text: Full Go source text

        Returns:
            One StructAnalysis per declaration, in source order
        """
        declarations = self.parser.parse(source_text)
        analyses = [self.analyze_declaration(declaration) for declaration in declarations]
        logger.debug(f"Analyzed {len(analyses)} structs for {self.word_size}-byte words")
        return analyses

    @log_timing
    def analyze_file(self, path: Path) -> list[StructAnalysis]:
        """Read a Go file and analyze it.

        Raises:
            OSError: If the file cannot be read
            UnicodeDecodeError: If the file is not valid UTF-8
        """
        source_text = path.read_text(encoding="utf-8")
        if self.tracker is None:
            return self.analyze_source(source_text)

        with self.tracker.track_document(str(path)):
            return self.analyze_source(source_text)

    def optimizable(self, analyses: Iterable[StructAnalysis]) -> list[StructAnalysis]:
        """Structs that would shrink if reordered.

        Empty when optimization warnings are disabled in the configuration.
        """
        if not self.config.enable_optimization_warnings:
            return []
        return [analysis for analysis in analyses if analysis.optimality.is_optimizable]


def find_struct_at(
    analyses: Iterable[StructAnalysis], line: int, column: int
) -> StructAnalysis | None:
    """Find the struct whose declaration span contains a position."""
    for analysis in analyses:
        if analysis.declaration.source_span.contains(line, column):
            return analysis
    return None


def find_field_at(analysis: StructAnalysis, line: int, column: int) -> Field | None:
    """Find the field whose name lies under a position."""
    for field in analysis.declaration.fields:
        if field.source_location.contains(line, column):
            return field
    return None


def find_struct_by_name(analyses: Iterable[StructAnalysis], name: str) -> StructAnalysis | None:
    """Find the first struct declared with the given name."""
    for analysis in analyses:
        if analysis.name == name:
            return analysis
    return None
