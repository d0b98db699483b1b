#!/usr/bin/env python3

"""Struct declaration models produced by the declaration parser."""

from dataclasses import dataclass

from .source_location import SourceLocation, SourceSpan


@dataclass(frozen=True)
class Field:
    """A single struct field as written in the source."""

    name: str
    type_expression: str
    source_location: SourceLocation

    @property
    def line(self) -> int:
        """Line the field name appears on."""
        return self.source_location.line


@dataclass(frozen=True)
class RecordDeclaration:
    """A named struct declaration with its fields in declared order."""

    name: str
    fields: tuple[Field, ...]
    source_span: SourceSpan
    name_location: SourceLocation
    is_terminated: bool = True
    """False when the closing brace was missing and the span was clamped."""

    @property
    def line(self) -> int:
        """Header line of the declaration."""
        return self.source_span.start_line
