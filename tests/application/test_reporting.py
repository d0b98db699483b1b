#!/usr/bin/env python3

"""Tests for text and JSON renderings of struct analyses."""

import json

import pytest

from go_struct_analyzer.application import (
    OPTIMIZATION_DIAGNOSTIC_CODE,
    analysis_to_dict,
    format_analysis,
    format_field_annotation,
    format_field_tooltip,
    format_memory_layout,
    format_optimization_warning,
    format_struct_summary,
)
from go_struct_analyzer.domain.models.go import FieldLayout, OptimalityReport


@pytest.fixture
def padded_analysis(analyzer, make_declaration):
    """Analysis of (int8, int64, int8) on amd64."""
    return analyzer.analyze_declaration(make_declaration("S", [("a", "int8"), ("b", "int64"), ("c", "int8")]))


class TestFieldFormatting:
    """Test suite for per-field texts."""

    @pytest.mark.unit
    def test_annotation_without_padding(self):
        assert format_field_annotation(FieldLayout("a", "int8", 1, 1, 0, 0)) == "1B"

    @pytest.mark.unit
    def test_annotation_with_padding(self):
        assert format_field_annotation(FieldLayout("b", "int64", 8, 8, 8, 7)) == "8B (+7B padding)"

    @pytest.mark.unit
    def test_tooltip(self):
        tooltip = format_field_tooltip(FieldLayout("b", "int64", 8, 8, 8, 7))

        assert tooltip.split("\n") == [
            "Size: 8 bytes",
            "Alignment: 8 bytes",
            "Offset: 8 bytes",
            "Padding before: 7 bytes",
        ]

    @pytest.mark.unit
    def test_tooltip_without_padding(self):
        tooltip = format_field_tooltip(FieldLayout("a", "int8", 1, 1, 0, 0))

        assert "Padding" not in tooltip


class TestStructFormatting:
    """Test suite for struct-level texts."""

    @pytest.mark.unit
    def test_summary(self, padded_analysis):
        assert format_struct_summary(padded_analysis.layout).split("\n") == [
            "struct S",
            "Total size: 24 bytes",
            "Alignment: 8 bytes",
            "Fields: 3",
        ]

    @pytest.mark.unit
    def test_memory_layout(self, padded_analysis):
        assert format_memory_layout(padded_analysis.layout).split("\n") == [
            "[00-00] a (1 bytes)",
            "[01] padding (7 bytes)",
            "[08-15] b (8 bytes)",
            "[16-16] c (1 bytes)",
            "[17] final padding (7 bytes)",
        ]

    @pytest.mark.unit
    def test_memory_layout_zero_size_field(self, analyzer, make_declaration):
        analysis = analyzer.analyze_declaration(make_declaration("Z", [("a", "byte"), ("z", "[0]int8")]))

        assert format_memory_layout(analysis.layout).split("\n") == [
            "[00-00] a (1 bytes)",
            "[01] z (0 bytes)",
        ]

    @pytest.mark.unit
    def test_memory_layout_empty_struct(self, analyzer, make_declaration):
        analysis = analyzer.analyze_declaration(make_declaration("E", []))

        assert format_memory_layout(analysis.layout) == ""

    @pytest.mark.unit
    def test_optimization_warning(self):
        report = OptimalityReport("S", current_size=40, optimal_size=24)

        assert format_optimization_warning(report) == (
            "Struct layout can be optimized: 40 bytes → 24 bytes (saves 16 bytes)"
        )

    @pytest.mark.unit
    def test_format_analysis(self, padded_analysis):
        text = format_analysis(padded_analysis)
        lines = text.split("\n")

        assert lines[0] == "S (line 1): 24 bytes, align 8"
        assert "  a  int8  @0  1B" in lines
        assert "  b  int64  @8  8B (+7B padding)" in lines
        assert "    [01] padding (7 bytes)" in lines
        assert f"warning[{OPTIMIZATION_DIAGNOSTIC_CODE}]" in text
        assert lines[-1] == "  suggested order: b, a, c"

    @pytest.mark.unit
    def test_format_analysis_without_annotations_or_warnings(self, padded_analysis):
        text = format_analysis(padded_analysis, show_annotations=False, show_warnings=False)

        assert "@8" not in text
        assert "warning" not in text
        assert "[08-15] b (8 bytes)" in text

    @pytest.mark.unit
    def test_format_analysis_optimal_struct_has_no_warning(self, analyzer, make_declaration):
        analysis = analyzer.analyze_declaration(make_declaration("G", [("b", "int64"), ("a", "int8")]))

        assert "warning" not in format_analysis(analysis)


class TestAnalysisToDict:
    """Test suite for JSON conversion."""

    @pytest.mark.unit
    def test_dict_contents(self, padded_analysis):
        data = analysis_to_dict(padded_analysis)

        assert data["name"] == "S"
        assert data["terminated"] is True
        assert data["total_size"] == 24
        assert data["alignment"] == 8
        assert data["total_padding"] == 14
        assert data["span"] == {"start_line": 0, "start_column": 0, "end_line": 4, "end_column": 1}
        assert data["fields"][1] == {
            "name": "b",
            "type": "int64",
            "line": 2,
            "column": 1,
            "size": 8,
            "alignment": 8,
            "offset": 8,
            "padding_before": 7,
        }
        assert data["optimality"] == {
            "current_size": 24,
            "optimal_size": 16,
            "is_optimizable": True,
            "savings": 8,
            "optimal_field_order": ["b", "a", "c"],
        }

    @pytest.mark.unit
    def test_dict_is_json_serializable(self, analyzer, sample_source):
        payload = [analysis_to_dict(a) for a in analyzer.analyze_source(sample_source)]

        assert json.loads(json.dumps(payload)) == payload
