#!/usr/bin/env python3

"""Lexical helpers for line-oriented Go source scanning.

These helpers know just enough about Go lexical structure (comments, string
and rune literals, braces) to let the declaration parser work line by line
without a real tokenizer. Column positions are preserved: removed comment
text is either truncated at the end of a line or replaced with spaces.
"""

QUOTE_CHARS = "\"'`"


def strip_comments(line: str, in_block_comment: bool = False) -> tuple[str, bool]:
    """Remove comments from one source line.

    Args:
        line: Raw source line without its newline
        in_block_comment: True if a ``/*`` comment is still open from a previous line

    Returns:
        Tuple of (code with comments removed, block comment still open)
    """
    out: list[str] = []
    quote: str | None = None
    i = 0
    n = len(line)

    while i < n:
        if in_block_comment:
            end = line.find("*/", i)
            if end == -1:
                return "".join(out), True
            out.append(" " * (end + 2 - i))
            i = end + 2
            in_block_comment = False
            continue

        ch = line[i]

        if quote is not None:
            out.append(ch)
            if ch == "\\" and quote != "`" and i + 1 < n:
                out.append(line[i + 1])
                i += 2
                continue
            if ch == quote:
                quote = None
            i += 1
            continue

        if ch in QUOTE_CHARS:
            quote = ch
        elif line.startswith("//", i):
            break
        elif line.startswith("/*", i):
            in_block_comment = True
            out.append("  ")
            i += 2
            continue

        out.append(ch)
        i += 1

    return "".join(out), in_block_comment


def _iter_code_chars(code: str):
    """Yield (index, char) for characters outside string and rune literals."""
    quote: str | None = None
    escaped = False
    for index, ch in enumerate(code):
        if quote is not None:
            if escaped:
                escaped = False
            elif ch == "\\" and quote != "`":
                escaped = True
            elif ch == quote:
                quote = None
            continue
        if ch in QUOTE_CHARS:
            quote = ch
            continue
        yield index, ch


def scan_braces(code: str, depth: int) -> tuple[int, int | None]:
    """Track brace depth across a comment-free line.

    Args:
        code: Line with comments already removed
        depth: Depth before the line

    Returns:
        Tuple of (depth after the line, index of the brace that closed depth
        to zero or None). Scanning stops at the closing brace.
    """
    for index, ch in _iter_code_chars(code):
        if ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
            if depth == 0:
                return 0, index
    return depth, None


def scan_parens(code: str, depth: int) -> int:
    """Track parenthesis depth across a comment-free line."""
    for _, ch in _iter_code_chars(code):
        if ch == "(":
            depth += 1
        elif ch == ")":
            depth -= 1
    return max(depth, 0)


def split_field_segments(code: str, nesting: int = 0) -> tuple[list[tuple[int, str]], int]:
    """Split a body line on semicolons that are outside brackets and literals.

    Parentheses and square brackets may stay open at the end of a line (a
    ``func(`` parameter list spread over several lines); their depth is
    carried to the next line through ``nesting``. Braces are balanced per
    line since the caller tracks them separately.

    Args:
        code: Depth-1 body text with comments removed
        nesting: Open ``(`` / ``[`` depth left over from previous lines

    Returns:
        Tuple of (list of (start column, segment text) pairs, open
        ``(`` / ``[`` depth at the end of the line)
    """
    segments: list[tuple[int, str]] = []
    start = 0
    braces = 0
    for index, ch in _iter_code_chars(code):
        if ch in "[(":
            nesting += 1
        elif ch in "])":
            nesting = max(nesting - 1, 0)
        elif ch == "{":
            braces += 1
        elif ch == "}":
            braces -= 1
        elif ch == ";" and nesting == 0 and braces <= 0:
            segments.append((start, code[start:index]))
            start = index + 1
    segments.append((start, code[start:]))
    return segments, nesting
