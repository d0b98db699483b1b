"""Go Struct Analyzer - memory layout and padding analysis for Go struct declarations."""

from .application import StructAnalysis, StructAnalyzer
from .domain.models.go import (
    Field,
    FieldLayout,
    OptimalityReport,
    RecordDeclaration,
    RecordLayout,
    SourceLocation,
    SourceSpan,
    TypeInfo,
)
from .domain.services.layout import (
    LayoutEngine,
    TypeSizeTable,
    compute_layout,
    compute_optimality,
    resolve_type_info,
)
from .domain.services.parsing import DeclarationParser, parse_declarations
from .infrastructure.config import Config

__version__ = "0.1.0"

__all__ = [
    "Config",
    "DeclarationParser",
    "Field",
    "FieldLayout",
    "LayoutEngine",
    "OptimalityReport",
    "RecordDeclaration",
    "RecordLayout",
    "SourceLocation",
    "SourceSpan",
    "StructAnalysis",
    "StructAnalyzer",
    "TypeInfo",
    "TypeSizeTable",
    "compute_layout",
    "compute_optimality",
    "parse_declarations",
    "resolve_type_info",
]
