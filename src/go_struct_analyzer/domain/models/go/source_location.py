#!/usr/bin/env python3

"""Source position models for parsed Go declarations."""

from dataclasses import dataclass


@dataclass(frozen=True)
class SourceLocation:
    """Span of a single identifier on one line (zero-based, end exclusive)."""

    line: int
    start_column: int
    end_column: int

    def contains(self, line: int, column: int) -> bool:
        """Check whether a position falls on this identifier."""
        return line == self.line and self.start_column <= column <= self.end_column


@dataclass(frozen=True)
class SourceSpan:
    """Multi-line region of a document (zero-based lines and columns)."""

    start_line: int
    start_column: int
    end_line: int
    end_column: int

    def contains(self, line: int, column: int) -> bool:
        """Check whether a position falls inside this span."""
        if line < self.start_line or line > self.end_line:
            return False
        if line == self.start_line and column < self.start_column:
            return False
        if line == self.end_line and column > self.end_column:
            return False
        return True
