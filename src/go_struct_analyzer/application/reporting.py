#!/usr/bin/env python3

"""Human-readable and JSON renderings of struct analyses.

These are the texts an editor integration shows: the short per-field
annotation, the field tooltip, the struct summary with its memory map, and
the reordering warning.
"""

from typing import Any

from ..domain.models.go import FieldLayout, OptimalityReport, RecordLayout
from .struct_analyzer import StructAnalysis

OPTIMIZATION_DIAGNOSTIC_CODE = "struct-layout-optimization"


def format_field_annotation(field_layout: FieldLayout) -> str:
    """Short inline label such as ``8B (+7B padding)``."""
    title = f"{field_layout.size}B"
    if field_layout.padding_before > 0:
        title += f" (+{field_layout.padding_before}B padding)"
    return title


def format_field_tooltip(field_layout: FieldLayout) -> str:
    """Multi-line size, alignment and offset details for one field."""
    lines = [
        f"Size: {field_layout.size} bytes",
        f"Alignment: {field_layout.alignment} bytes",
        f"Offset: {field_layout.offset} bytes",
    ]
    if field_layout.padding_before > 0:
        lines.append(f"Padding before: {field_layout.padding_before} bytes")
    return "\n".join(lines)


def format_struct_summary(layout: RecordLayout) -> str:
    """Total size, alignment and field count of a struct."""
    return "\n".join(
        [
            f"struct {layout.record_name}",
            f"Total size: {layout.total_size} bytes",
            f"Alignment: {layout.record_alignment} bytes",
            f"Fields: {len(layout.fields)}",
        ]
    )


def format_memory_layout(layout: RecordLayout) -> str:
    """Byte map of a struct, one line per field or padding region.

    Example::

        [00-00] A (1 bytes)
        [01] padding (7 bytes)
        [08-15] B (8 bytes)
    """
    lines: list[str] = []
    current_offset = 0

    for field_layout in layout.fields:
        if field_layout.padding_before > 0:
            lines.append(f"[{current_offset:02d}] padding ({field_layout.padding_before} bytes)")
            current_offset += field_layout.padding_before

        if field_layout.size > 0:
            offset_end = current_offset + field_layout.size - 1
            lines.append(
                f"[{current_offset:02d}-{offset_end:02d}] {field_layout.field_name} "
                f"({field_layout.size} bytes)"
            )
        else:
            lines.append(f"[{current_offset:02d}] {field_layout.field_name} (0 bytes)")
        current_offset += field_layout.size

    if current_offset < layout.total_size:
        final_padding = layout.total_size - current_offset
        lines.append(f"[{current_offset:02d}] final padding ({final_padding} bytes)")

    return "\n".join(lines)


def format_optimization_warning(report: OptimalityReport) -> str:
    """Warning message for a struct that would shrink if reordered."""
    return (
        f"Struct layout can be optimized: {report.current_size} bytes → "
        f"{report.optimal_size} bytes (saves {report.savings} bytes)"
    )


def format_analysis(
    analysis: StructAnalysis,
    show_annotations: bool = True,
    show_warnings: bool = True,
) -> str:
    """Full plain-text report for one struct."""
    declaration = analysis.declaration
    layout = analysis.layout
    lines = [
        f"{declaration.name} (line {declaration.line + 1}): "
        f"{layout.total_size} bytes, align {layout.record_alignment}"
    ]

    if show_annotations:
        name_width = max((len(f.name) for f in declaration.fields), default=0)
        for field, field_layout in zip(declaration.fields, layout.fields):
            lines.append(
                f"  {field.name:<{name_width}}  {field.type_expression}  "
                f"@{field_layout.offset}  {format_field_annotation(field_layout)}"
            )

    memory_layout = format_memory_layout(layout)
    if memory_layout:
        lines.extend(f"    {line}" for line in memory_layout.split("\n"))

    if show_warnings and analysis.optimality.is_optimizable:
        warning = format_optimization_warning(analysis.optimality)
        lines.append(f"  warning[{OPTIMIZATION_DIAGNOSTIC_CODE}]: {warning}")
        lines.append(f"  suggested order: {', '.join(analysis.optimality.optimal_field_order)}")

    return "\n".join(lines)


def analysis_to_dict(analysis: StructAnalysis) -> dict[str, Any]:
    """JSON-serializable form of a struct analysis."""
    declaration = analysis.declaration
    layout = analysis.layout
    report = analysis.optimality
    span = declaration.source_span

    return {
        "name": declaration.name,
        "span": {
            "start_line": span.start_line,
            "start_column": span.start_column,
            "end_line": span.end_line,
            "end_column": span.end_column,
        },
        "terminated": declaration.is_terminated,
        "total_size": layout.total_size,
        "alignment": layout.record_alignment,
        "total_padding": layout.total_padding,
        "fields": [
            {
                "name": field_layout.field_name,
                "type": field_layout.type_expression,
                "line": field.source_location.line,
                "column": field.source_location.start_column,
                "size": field_layout.size,
                "alignment": field_layout.alignment,
                "offset": field_layout.offset,
                "padding_before": field_layout.padding_before,
            }
            for field, field_layout in zip(declaration.fields, layout.fields)
        ],
        "optimality": {
            "current_size": report.current_size,
            "optimal_size": report.optimal_size,
            "is_optimizable": report.is_optimizable,
            "savings": report.savings,
            "optimal_field_order": list(report.optimal_field_order),
        },
    }
