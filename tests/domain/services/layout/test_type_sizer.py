#!/usr/bin/env python3

"""Unit tests for Go type size and alignment resolution."""

import pytest

from go_struct_analyzer.domain.models.go import TypeInfo
from go_struct_analyzer.domain.services.layout import TypeSizeTable, resolve_type_info


class TestTypeSizeTable:
    """Test suite for TypeSizeTable."""

    @pytest.fixture
    def table(self) -> TypeSizeTable:
        return TypeSizeTable(8)

    @pytest.fixture
    def table_32(self) -> TypeSizeTable:
        return TypeSizeTable(4)

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "type_expression, size, alignment",
        [
            ("bool", 1, 1),
            ("int8", 1, 1),
            ("uint8", 1, 1),
            ("byte", 1, 1),
            ("int16", 2, 2),
            ("uint16", 2, 2),
            ("int32", 4, 4),
            ("uint32", 4, 4),
            ("rune", 4, 4),
            ("float32", 4, 4),
            ("int64", 8, 8),
            ("uint64", 8, 8),
            ("float64", 8, 8),
            ("complex64", 8, 4),
            ("complex128", 16, 8),
        ],
    )
    def test_fixed_size_types(self, table, table_32, type_expression, size, alignment):
        """Fixed-width types are the same on every target."""
        expected = TypeInfo(size, alignment)

        assert table.resolve(type_expression) == expected
        assert table_32.resolve(type_expression) == expected

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "type_expression, words",
        [
            ("int", 1),
            ("uint", 1),
            ("uintptr", 1),
            ("string", 2),
            ("*int8", 1),
            ("**Node", 1),
            ("[]byte", 3),
            ("[]*Node", 3),
            ("map[string]int", 1),
            ("chan int", 1),
            ("<-chan struct{}", 1),
            ("func() error", 1),
            ("func(a, b int) (int, error)", 1),
            ("interface{}", 2),
            ("interface{ Read() }", 2),
            ("any", 2),
            ("error", 2),
        ],
    )
    def test_word_scaled_types(self, table, table_32, type_expression, words):
        """Word-dependent types scale with the configured pointer width."""
        assert table.resolve(type_expression) == TypeInfo(8 * words, 8)
        assert table_32.resolve(type_expression) == TypeInfo(4 * words, 4)

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "type_expression, expected",
        [
            ("[3]int32", TypeInfo(12, 4)),
            ("[10]int32", TypeInfo(40, 4)),
            ("[16]byte", TypeInfo(16, 1)),
            ("[0]int64", TypeInfo(0, 8)),
            ("[3][3]int", TypeInfo(72, 8)),
            ("[2]string", TypeInfo(32, 8)),
            ("[ 4 ]uint16", TypeInfo(8, 2)),
            ("[2][]int", TypeInfo(48, 8)),
        ],
    )
    def test_arrays(self, table, type_expression, expected):
        """Arrays multiply the element size and keep the element alignment."""
        assert table.resolve(type_expression) == expected

    @pytest.mark.unit
    def test_arrays_on_32_bit(self, table_32):
        assert table_32.resolve("[3][3]int") == TypeInfo(36, 4)

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "type_expression, expected",
        [
            ("[0x10]byte", TypeInfo(16, 1)),
            ("[0X1_0]byte", TypeInfo(16, 1)),
            ("[1_000]byte", TypeInfo(1000, 1)),
            ("[0o10]int32", TypeInfo(32, 4)),
            ("[0b101]uint16", TypeInfo(10, 2)),
            ("[010]byte", TypeInfo(8, 1)),
            ("[0]byte", TypeInfo(0, 1)),
        ],
    )
    def test_array_length_literals(self, table, type_expression, expected):
        """Hex, octal, binary and underscore-separated lengths are all counted."""
        assert table.resolve(type_expression) == expected

    @pytest.mark.unit
    @pytest.mark.parametrize("type_expression", ["[09]byte", "[0xZ]byte", "[Size]byte"])
    def test_unusable_array_length_falls_back_to_word(self, table, type_expression):
        assert table.resolve(type_expression) == TypeInfo(8, 8)

    @pytest.mark.unit
    @pytest.mark.parametrize("type_expression", ["MyType", "pkg.Type", "time.Time", "List[int]", "struct {", "T"])
    def test_unknown_types_fall_back_to_word(self, table, type_expression):
        """Named and unrecognized types are assumed to be one word."""
        assert table.resolve(type_expression) == TypeInfo(8, 8)

    @pytest.mark.unit
    def test_surrounding_whitespace_and_parentheses(self, table):
        assert table.resolve("  int32 ") == TypeInfo(4, 4)
        assert table.resolve("(string)") == TypeInfo(16, 8)

    @pytest.mark.unit
    def test_contains(self, table):
        assert "int64" in table
        assert "error" in table
        assert "MyType" not in table

    @pytest.mark.unit
    @pytest.mark.parametrize("word_size", [0, 2, 16, -8])
    def test_unsupported_word_size(self, word_size):
        with pytest.raises(ValueError, match="Unsupported word size"):
            TypeSizeTable(word_size)

    @pytest.mark.unit
    def test_resolve_type_info_function(self):
        assert resolve_type_info("string") == TypeInfo(16, 8)
        assert resolve_type_info("string", word_size=4) == TypeInfo(8, 4)
