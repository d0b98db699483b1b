#!/usr/bin/env python3

"""Go struct domain models."""

from .layout_info import FieldLayout, OptimalityReport, RecordLayout, TypeInfo
from .record_declaration import Field, RecordDeclaration
from .source_location import SourceLocation, SourceSpan
from .type_constants import (
    ARCHITECTURE_WORD_SIZES,
    DEFAULT_ARCHITECTURE,
    DEFAULT_WORD_SIZE,
    FIXED_SIZE_TYPES,
    INTERFACE_TYPE_NAMES,
    SUPPORTED_WORD_SIZES,
    WORD_SIZED_TYPES,
)

__all__ = [
    "ARCHITECTURE_WORD_SIZES",
    "DEFAULT_ARCHITECTURE",
    "DEFAULT_WORD_SIZE",
    "FIXED_SIZE_TYPES",
    "Field",
    "FieldLayout",
    "INTERFACE_TYPE_NAMES",
    "OptimalityReport",
    "RecordDeclaration",
    "RecordLayout",
    "SUPPORTED_WORD_SIZES",
    "SourceLocation",
    "SourceSpan",
    "TypeInfo",
    "WORD_SIZED_TYPES",
]
