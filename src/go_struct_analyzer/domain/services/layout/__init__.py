#!/usr/bin/env python3

"""Layout services: type sizing, struct packing and reordering analysis."""

from .layout_engine import (
    LayoutEngine,
    calculate_padding,
    compute_layout,
    compute_optimality,
)
from .type_sizer import TypeSizeTable, resolve_type_info

__all__ = [
    "LayoutEngine",
    "TypeSizeTable",
    "calculate_padding",
    "compute_layout",
    "compute_optimality",
    "resolve_type_info",
]
