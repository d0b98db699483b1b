#!/usr/bin/env python3

"""Struct layout computation and reordering analysis.

Fields are placed in declaration order, each at the next offset that
satisfies its own alignment; the struct size is then rounded up to the
largest field alignment. The same packing pass is reused on a reordered
field list to find the smallest achievable size.
"""

from collections.abc import Sequence

from ...models.go import (
    DEFAULT_WORD_SIZE,
    Field,
    FieldLayout,
    OptimalityReport,
    RecordDeclaration,
    RecordLayout,
    TypeInfo,
)
from ....infrastructure.logging import get_logger
from .type_sizer import TypeSizeTable

logger = get_logger(__name__)


def calculate_padding(offset: int, alignment: int) -> int:
    """Bytes needed to move an offset up to the next multiple of alignment."""
    return (alignment - offset % alignment) % alignment


class LayoutEngine:
    """Computes struct layouts for one target word size.

    Attributes:
        word_size: Pointer width of the target in bytes
        type_table: Type resolution table for that word size
    """

    def __init__(self, word_size: int = DEFAULT_WORD_SIZE):
        self.word_size = word_size
        self.type_table = TypeSizeTable(word_size)

    def compute_layout(self, declaration: RecordDeclaration) -> RecordLayout:
        """Lay out a struct in its declared field order.

        Args:
            declaration: Parsed struct declaration

        Returns:
            RecordLayout with per-field offsets and padding
        """
        resolved = [(field, self.type_table.resolve(field.type_expression)) for field in declaration.fields]
        layout = _pack(declaration.name, resolved)
        logger.debug(
            f"Layout of {declaration.name}: {layout.total_size} bytes, "
            f"align {layout.record_alignment}, padding {layout.total_padding}"
        )
        return layout

    def optimal_field_order(self, declaration: RecordDeclaration) -> list[Field]:
        """Order fields by descending alignment, then descending size.

        With power-of-two alignments this ordering leaves no padding between
        fields, so it yields the minimal struct size. The sort is stable, so
        equal fields keep their declared relative order.
        """
        return [field for field, _ in self._sorted_for_packing(declaration.fields)]

    def compute_optimality(
        self, declaration: RecordDeclaration, layout: RecordLayout | None = None
    ) -> OptimalityReport:
        """Compare the declared layout with the best field ordering.

        Args:
            declaration: Parsed struct declaration
            layout: Already computed layout of the declaration, if available

        Returns:
            OptimalityReport; neither the declaration nor the layout is changed
        """
        if layout is None:
            layout = self.compute_layout(declaration)

        reordered = self._sorted_for_packing(declaration.fields)
        optimal = _pack(declaration.name, reordered)

        report = OptimalityReport(
            record_name=declaration.name,
            current_size=layout.total_size,
            optimal_size=optimal.total_size,
            optimal_field_order=tuple(field.name for field, _ in reordered),
        )
        if report.is_optimizable:
            logger.debug(
                f"{declaration.name} can shrink from {report.current_size} "
                f"to {report.optimal_size} bytes"
            )
        return report

    def _sorted_for_packing(self, fields: Sequence[Field]) -> list[tuple[Field, TypeInfo]]:
        resolved = [(field, self.type_table.resolve(field.type_expression)) for field in fields]
        return sorted(resolved, key=lambda item: (-item[1].byte_alignment, -item[1].byte_size))


def _pack(record_name: str, resolved_fields: Sequence[tuple[Field, TypeInfo]]) -> RecordLayout:
    """Place fields sequentially, padding each to its alignment."""
    field_layouts: list[FieldLayout] = []
    offset = 0
    max_alignment = 1

    for field, info in resolved_fields:
        max_alignment = max(max_alignment, info.byte_alignment)
        padding = calculate_padding(offset, info.byte_alignment)
        offset += padding

        field_layouts.append(
            FieldLayout(
                field_name=field.name,
                type_expression=field.type_expression,
                size=info.byte_size,
                alignment=info.byte_alignment,
                offset=offset,
                padding_before=padding,
            )
        )
        offset += info.byte_size

    total_size = offset + calculate_padding(offset, max_alignment)

    return RecordLayout(
        record_name=record_name,
        fields=tuple(field_layouts),
        total_size=total_size,
        record_alignment=max_alignment,
    )


def compute_layout(
    declaration: RecordDeclaration, word_size: int = DEFAULT_WORD_SIZE
) -> RecordLayout:
    """Lay out a struct for the given word size."""
    return LayoutEngine(word_size).compute_layout(declaration)


def compute_optimality(
    declaration: RecordDeclaration, word_size: int = DEFAULT_WORD_SIZE
) -> OptimalityReport:
    """Report the minimal size a struct could have after reordering its fields."""
    return LayoutEngine(word_size).compute_optimality(declaration)
