#!/usr/bin/env python3

"""Parsing services for Go struct declarations."""

from .declaration_parser import DeclarationParser, parse_declarations
from .field_line_classifier import FieldLineMatch, FieldShape, classify_field_line, strip_struct_tag
from .source_scanner import scan_braces, scan_parens, split_field_segments, strip_comments

__all__ = [
    "DeclarationParser",
    "FieldLineMatch",
    "FieldShape",
    "classify_field_line",
    "parse_declarations",
    "scan_braces",
    "scan_parens",
    "split_field_segments",
    "strip_comments",
    "strip_struct_tag",
]
