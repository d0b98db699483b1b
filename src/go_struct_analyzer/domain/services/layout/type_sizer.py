#!/usr/bin/env python3

"""Size and alignment resolution for Go type expressions.

This module maps the textual type of a struct field to the size and
alignment the gc compiler uses for it on a target with the given word size:

- predeclared fixed-width types come from a table
- word-sized integers, strings and interface values scale with the word size
- pointers, maps, channels and funcs are a single word
- slices are three words (pointer, length, capacity)
- fixed-length arrays are resolved recursively from their element type

User-defined named types are not resolved; they fall back to a single word.
"""

import re

from ...models.go import (
    DEFAULT_WORD_SIZE,
    FIXED_SIZE_TYPES,
    INTERFACE_TYPE_NAMES,
    SUPPORTED_WORD_SIZES,
    WORD_SIZED_TYPES,
    TypeInfo,
)
from ....infrastructure.logging import get_logger

logger = get_logger(__name__)

_SLICE_PATTERN = re.compile(r"^\[\s*\]")
# Array lengths are Go integer literals: decimal, 0x, 0o, 0b or legacy 0-prefixed octal
_ARRAY_PATTERN = re.compile(r"^\[\s*(0[xXoObB][0-9a-fA-F_]+|[0-9][0-9_]*)\s*\]\s*(\S.*)$")
_MAP_PATTERN = re.compile(r"^map\s*\[")
_CHAN_PATTERN = re.compile(r"^(?:<-\s*chan\b|chan\b)")
_INTERFACE_PATTERN = re.compile(r"^interface\s*\{")
_FUNC_PATTERN = re.compile(r"^func\s*\(")


class TypeSizeTable:
    """Resolves type expressions to TypeInfo for one word size.

    The table of named types is built once in the constructor and never
    modified afterwards, so one instance can be shared freely.

    Attributes:
        word_size: Pointer width of the target in bytes (4 or 8)
    """

    def __init__(self, word_size: int = DEFAULT_WORD_SIZE):
        """Build the type table.

        Args:
            word_size: Pointer width in bytes

        Raises:
            ValueError: If the word size is not 4 or 8
        """
        if word_size not in SUPPORTED_WORD_SIZES:
            raise ValueError(f"Unsupported word size: {word_size} (expected 4 or 8)")

        self.word_size = word_size
        self._word = TypeInfo(word_size, word_size)
        self._named_types = self._build_named_types()

    def _build_named_types(self) -> dict[str, TypeInfo]:
        word_size = self.word_size
        named_types = {
            name: TypeInfo(size, alignment) for name, (size, alignment) in FIXED_SIZE_TYPES.items()
        }
        for name in WORD_SIZED_TYPES:
            named_types[name] = self._word

        # Data pointer + length
        named_types["string"] = TypeInfo(2 * word_size, word_size)

        # Type descriptor + data pointer
        for name in INTERFACE_TYPE_NAMES:
            named_types[name] = TypeInfo(2 * word_size, word_size)

        return named_types

    def resolve(self, type_expression: str) -> TypeInfo:
        """Resolve a type expression to its size and alignment.

        Never fails: anything unrecognized is treated as one machine word.

        Args:
            type_expression: Field type as written in the source

        Returns:
            TypeInfo for the expression
        """
        expr = type_expression.strip()
        while expr.startswith("(") and expr.endswith(")"):
            expr = expr[1:-1].strip()

        if expr.startswith("*"):
            return self._word

        if _SLICE_PATTERN.match(expr):
            return TypeInfo(3 * self.word_size, self.word_size)

        array = _ARRAY_PATTERN.match(expr)
        if array:
            length = _parse_array_length(array.group(1))
            if length is not None:
                element = self.resolve(array.group(2))
                return TypeInfo(length * element.byte_size, element.byte_alignment)
            logger.debug(f"Invalid array length in {expr!r}")

        if _MAP_PATTERN.match(expr) or _CHAN_PATTERN.match(expr) or _FUNC_PATTERN.match(expr):
            return self._word

        if _INTERFACE_PATTERN.match(expr):
            return TypeInfo(2 * self.word_size, self.word_size)

        info = self._named_types.get(expr)
        if info is not None:
            return info

        logger.debug(f"Unresolved type {expr!r}, assuming {self.word_size}-byte word")
        return self._word

    def __contains__(self, type_name: str) -> bool:
        """Check whether a name is a known predeclared type."""
        return type_name in self._named_types


def _parse_array_length(literal: str) -> int | None:
    """Value of an integer literal used as an array length, or None if malformed."""
    digits = literal.replace("_", "")
    try:
        if len(digits) > 1 and digits[0] == "0" and digits[1:].isdigit():
            return int(digits, 8)
        return int(digits, 0)
    except ValueError:
        return None

def resolve_type_info(type_expression: str, word_size: int = DEFAULT_WORD_SIZE) -> TypeInfo:
    """Resolve a type expression for the given word size.

    Args:
        type_expression: Field type as written in the source
        word_size: Pointer width in bytes

    Returns:
        TypeInfo for the expression
    """
    return TypeSizeTable(word_size).resolve(type_expression)
