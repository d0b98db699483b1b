#!/usr/bin/env python3

"""Struct declaration parsing for Go source text.

The parser is a two-phase scanner over lines rather than a grammar:

- a header finder that looks for ``type Name struct`` (also inside grouped
  ``type ( ... )`` blocks and with type parameter lists), and
- a body reader that tracks brace depth from the opening brace and hands
  every depth-1 line to the field line classifier.

Field types may span several lines while a ``(`` or ``[`` is open; those
continuation lines are appended to the field they belong to.

It never raises on malformed input. Lines it does not understand are skipped,
so the result is a best-effort list of declarations in source order.
"""

import re
from dataclasses import dataclass

from ...models.go import Field, RecordDeclaration, SourceLocation, SourceSpan
from ....infrastructure.logging import get_logger
from .field_line_classifier import classify_field_line
from .source_scanner import scan_braces, scan_parens, split_field_segments, strip_comments

logger = get_logger(__name__)

_TYPE_PARAMS = r"(?:\s*\[.*\])?"

_HEADER_PATTERN = re.compile(rf"\btype\s+([^\W\d]\w*){_TYPE_PARAMS}\s+struct\b")
_GROUPED_HEADER_PATTERN = re.compile(rf"^\s*([^\W\d]\w*){_TYPE_PARAMS}\s+struct\b")
_TYPE_GROUP_OPEN_PATTERN = re.compile(r"^\s*type\s*\(\s*$")
_LEADING_HEADER_PATTERN = re.compile(rf"^\s*type\s+([^\W\d]\w*){_TYPE_PARAMS}\s+struct\b")


class DeclarationParser:
    """Extracts struct declarations from Go source text.

    Attributes:
        expand_multi_name_fields: Record every name of ``a, b T`` fields instead
            of only the first one
    """

    def __init__(self, expand_multi_name_fields: bool = False):
        self.expand_multi_name_fields = expand_multi_name_fields

    def parse(self, source_text: str) -> list[RecordDeclaration]:
        """Parse all top-level struct declarations.

        Args:
            source_text: Full document text

        Returns:
            Declarations in source order (possibly empty)
        """
        lines = [line.rstrip("\r") for line in source_text.split("\n")]
        declarations: list[RecordDeclaration] = []

        in_block_comment = False
        # Open parentheses of a type ( ... ) group; 0 outside of one
        group_depth = 0
        index = 0

        while index < len(lines):
            code, in_block_comment = strip_comments(lines[index], in_block_comment)

            header = _HEADER_PATTERN.search(code)
            if header is None and group_depth == 1:
                header = _GROUPED_HEADER_PATTERN.match(code)

            if header is None:
                if group_depth > 0:
                    group_depth = scan_parens(code, group_depth)
                elif _TYPE_GROUP_OPEN_PATTERN.match(code):
                    group_depth = 1
                index += 1
                continue

            declaration, next_index, in_block_comment = self._parse_declaration(
                lines, index, code, header, in_block_comment
            )
            if declaration is not None:
                declarations.append(declaration)
            index = next_index

        logger.debug(f"Parsed {len(declarations)} struct declarations from {len(lines)} lines")
        return declarations

    def _parse_declaration(
        self,
        lines: list[str],
        header_index: int,
        header_code: str,
        header: re.Match[str],
        in_block_comment: bool,
    ) -> tuple[RecordDeclaration | None, int, bool]:
        """Read one declaration starting at its header line.

        Returns:
            Tuple of (declaration or None if discarded, index to resume at,
            block comment state after the declaration)
        """
        name = header.group(1)
        name_location = SourceLocation(header_index, header.start(1), header.end(1))

        # Locate the opening brace, possibly on a later line
        line_index = header_index
        code = header_code
        brace_column = code.find("{", header.end())
        while brace_column == -1:
            line_index += 1
            if line_index >= len(lines):
                logger.debug(f"Discarding struct {name}: no opening brace before end of input")
                return None, header_index + 1, False
            code, in_block_comment = strip_comments(lines[line_index], in_block_comment)
            brace_column = code.find("{")

        collector = _FieldCollector(self.expand_multi_name_fields)
        depth = 1
        column_offset = brace_column + 1
        segment = code[column_offset:]
        terminated = False

        while True:
            depth_before = depth
            depth, close_column = scan_braces(segment, depth)
            body = segment if close_column is None else segment[:close_column]

            if depth_before == 1:
                collector.feed(lines[line_index], line_index, body, column_offset)

            if close_column is not None:
                terminated = True
                break

            if line_index + 1 >= len(lines):
                logger.debug(f"Struct {name} is not terminated; clamping to end of input")
                break

            next_code, next_in_block = strip_comments(lines[line_index + 1], in_block_comment)
            if depth == 1 and _LEADING_HEADER_PATTERN.match(next_code):
                logger.debug(
                    f"Struct {name} is not terminated; stopping before the declaration "
                    f"on line {line_index + 2}"
                )
                break

            line_index += 1
            segment, in_block_comment = next_code, next_in_block
            column_offset = 0

        end_line = min(line_index, len(lines) - 1)
        fields = collector.finish()
        declaration = RecordDeclaration(
            name=name,
            fields=fields,
            source_span=SourceSpan(header_index, 0, end_line, len(lines[end_line])),
            name_location=name_location,
            is_terminated=terminated,
        )
        logger.debug(
            f"Found struct {name} at lines {header_index + 1}-{end_line + 1} "
            f"with {len(fields)} fields"
        )
        return declaration, end_line + 1, in_block_comment


@dataclass
class _PendingField:
    """A field whose type is still open at the end of its line."""

    raw_line: str
    line_index: int
    column: int
    parts: list[str]


class _FieldCollector:
    """Turns the depth-1 text of a struct body into fields, line by line."""

    def __init__(self, expand_multi_name_fields: bool):
        self.expand_multi_name_fields = expand_multi_name_fields
        self.fields: list[Field] = []
        self._nesting = 0
        self._pending: _PendingField | None = None

    def feed(self, raw_line: str, line_index: int, body: str, column_offset: int) -> None:
        """Consume the depth-1 text of one body line."""
        segments, nesting = split_field_segments(body, self._nesting)
        positioned = [(column_offset + start, text) for start, text in segments]

        # The first segment continues a field opened on an earlier line
        if self._pending is not None:
            _, text = positioned.pop(0)
            self._pending.parts.append(text)
            if positioned or nesting == 0:
                self._flush()

        opened = None
        if nesting > 0 and positioned:
            column, text = positioned.pop()
            opened = _PendingField(raw_line, line_index, column, [text])

        for column, text in positioned:
            self._add(raw_line, line_index, column, text)

        if opened is not None:
            self._pending = opened
        self._nesting = nesting

    def finish(self) -> tuple[Field, ...]:
        """Return the collected fields, including one left open at the end."""
        if self._pending is not None:
            self._flush()
        return tuple(self.fields)

    def _flush(self) -> None:
        pending = self._pending
        self._pending = None
        text = " ".join(part.strip() for part in pending.parts if part.strip())
        self._add(pending.raw_line, pending.line_index, pending.column, text)

    def _add(self, raw_line: str, line_index: int, column: int, text: str) -> None:
        if not text.strip():
            return

        match = classify_field_line(text)
        if match is None:
            logger.debug(f"Skipping line {line_index + 1}: {text.strip()!r}")
            return

        # Multi-name fields keep only their first name unless expansion is on
        names = match.names if self.expand_multi_name_fields else match.names[:1]
        search_from = column
        for field_name in names:
            start = _locate_name(raw_line, field_name, search_from)
            self.fields.append(
                Field(
                    name=field_name,
                    type_expression=match.type_expression,
                    source_location=SourceLocation(line_index, start, start + len(field_name)),
                )
            )
            search_from = start + len(field_name)


def _locate_name(line: str, name: str, start: int) -> int:
    """Find the column of the first whole-word occurrence of a name."""
    match = re.compile(rf"(?<!\w){re.escape(name)}(?!\w)").search(line, start)
    if match:
        return match.start()
    column = line.find(name, start)
    return column if column != -1 else start


def parse_declarations(
    source_text: str, expand_multi_name_fields: bool = False
) -> list[RecordDeclaration]:
    """Parse struct declarations from Go source text.

    Args:
        source_text: Full document text
        expand_multi_name_fields: Record all names of ``a, b T`` fields

    Returns:
        Declarations in source order
    """
    return DeclarationParser(expand_multi_name_fields).parse(source_text)
