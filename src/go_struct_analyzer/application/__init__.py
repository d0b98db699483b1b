#!/usr/bin/env python3

"""Application layer: analysis orchestration and report rendering."""

from .reporting import (
    OPTIMIZATION_DIAGNOSTIC_CODE,
    analysis_to_dict,
    format_analysis,
    format_field_annotation,
    format_field_tooltip,
    format_memory_layout,
    format_optimization_warning,
    format_struct_summary,
)
from .struct_analyzer import (
    StructAnalysis,
    StructAnalyzer,
    find_field_at,
    find_struct_at,
    find_struct_by_name,
)

__all__ = [
    "OPTIMIZATION_DIAGNOSTIC_CODE",
    "StructAnalysis",
    "StructAnalyzer",
    "analysis_to_dict",
    "find_field_at",
    "find_struct_at",
    "find_struct_by_name",
    "format_analysis",
    "format_field_annotation",
    "format_field_tooltip",
    "format_memory_layout",
    "format_optimization_warning",
    "format_struct_summary",
]
