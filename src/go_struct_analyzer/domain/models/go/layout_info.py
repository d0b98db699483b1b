#!/usr/bin/env python3

"""Memory layout models computed by the layout engine."""

from dataclasses import dataclass


@dataclass(frozen=True)
class TypeInfo:
    """Size and alignment of a type for one word size."""

    byte_size: int
    byte_alignment: int


@dataclass(frozen=True)
class FieldLayout:
    """Placement of one field inside its struct."""

    field_name: str
    type_expression: str
    size: int
    alignment: int
    offset: int
    padding_before: int

    @property
    def end_offset(self) -> int:
        """First byte after this field."""
        return self.offset + self.size


@dataclass(frozen=True)
class RecordLayout:
    """Complete layout of a struct in declaration order."""

    record_name: str
    fields: tuple[FieldLayout, ...]
    total_size: int
    record_alignment: int

    @property
    def data_size(self) -> int:
        """Bytes occupied by field values, excluding padding."""
        return sum(f.size for f in self.fields)

    @property
    def trailing_padding(self) -> int:
        """Padding appended after the last field."""
        end = self.fields[-1].end_offset if self.fields else 0
        return self.total_size - end

    @property
    def total_padding(self) -> int:
        """All padding bytes, between fields and at the tail."""
        return self.total_size - self.data_size

    def field(self, name: str) -> FieldLayout | None:
        """Look up the first field layout with the given name."""
        for field_layout in self.fields:
            if field_layout.field_name == name:
                return field_layout
        return None


@dataclass(frozen=True)
class OptimalityReport:
    """Comparison of the declared layout with the best field ordering."""

    record_name: str
    current_size: int
    optimal_size: int
    optimal_field_order: tuple[str, ...] = ()

    @property
    def is_optimizable(self) -> bool:
        return self.optimal_size < self.current_size

    @property
    def savings(self) -> int:
        return self.current_size - self.optimal_size
