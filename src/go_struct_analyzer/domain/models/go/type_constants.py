#!/usr/bin/env python3

"""Go builtin type constants and target architecture classification.

Sizes follow the Go compiler (gc) rules for the predeclared types. Types
whose size depends on the target are listed separately and are resolved
against the configured word size.
"""

# Word sizes (pointer widths in bytes) a layout can be computed for
SUPPORTED_WORD_SIZES = frozenset({4, 8})

DEFAULT_WORD_SIZE = 8

# Fixed-width predeclared types: name -> (size, alignment)
FIXED_SIZE_TYPES: dict[str, tuple[int, int]] = {
    "bool": (1, 1),
    "int8": (1, 1),
    "uint8": (1, 1),
    "byte": (1, 1),  # alias for uint8
    "int16": (2, 2),
    "uint16": (2, 2),
    "int32": (4, 4),
    "uint32": (4, 4),
    "rune": (4, 4),  # alias for int32
    "int64": (8, 8),
    "uint64": (8, 8),
    "float32": (4, 4),
    "float64": (8, 8),
    # Complex numbers align like their float components
    "complex64": (8, 4),
    "complex128": (16, 8),
}

# Integers as wide as a machine word
WORD_SIZED_TYPES = frozenset(
    {
        "int",
        "uint",
        "uintptr",
    }
)

# Predeclared identifiers that denote interface types (type word + data word)
INTERFACE_TYPE_NAMES = frozenset(
    {
        "any",
        "error",
    }
)

# GOARCH values and their pointer width
ARCHITECTURE_WORD_SIZES: dict[str, int] = {
    # 64-bit targets
    "amd64": 8,
    "arm64": 8,
    "ppc64": 8,
    "ppc64le": 8,
    "mips64": 8,
    "mips64le": 8,
    "riscv64": 8,
    "s390x": 8,
    "loong64": 8,
    "wasm": 8,
    # 32-bit targets
    "386": 4,
    "arm": 4,
    "mips": 4,
    "mipsle": 4,
}

DEFAULT_ARCHITECTURE = "amd64"
