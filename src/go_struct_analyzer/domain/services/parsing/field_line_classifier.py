#!/usr/bin/env python3

"""Classification of struct body lines into field shapes.

A field line is recognized as one of, in priority order:

1. ``name Type`` - a standard field
2. ``a, b, c Type`` - several names sharing one type
3. ``[*][pkg.]Type`` - an embedded field named after its base type

A trailing struct tag (raw or interpreted string literal) is removed before
classification. Anything else is reported as unrecognized.
"""

import re
from dataclasses import dataclass

from ....infrastructure.logging import get_logger

logger = get_logger(__name__)

_IDENT = r"[^\W\d]\w*"

_TAG_PATTERN = re.compile(r"""(?:^|\s+)(?:`[^`]*`|"(?:[^"\\]|\\.)*")\s*$""")
_NAMED_FIELD_PATTERN = re.compile(rf"^({_IDENT})\s+([^\s,].*)$")
_MULTI_NAME_FIELD_PATTERN = re.compile(rf"^({_IDENT}(?:\s*,\s*{_IDENT})+)\s+(\S.*)$")
_EMBEDDED_FIELD_PATTERN = re.compile(rf"^\*?(?:{_IDENT}\.)?({_IDENT})(?:\[.*\])?$")


class FieldShape:
    """Names of the recognized field line shapes."""

    NAMED = "named"
    MULTI_NAME = "multi_name"
    EMBEDDED = "embedded"


@dataclass(frozen=True)
class FieldLineMatch:
    """Result of classifying one field line."""

    names: tuple[str, ...]
    type_expression: str
    shape: str


def strip_struct_tag(text: str) -> str:
    """Remove a trailing struct tag from a field line."""
    match = _TAG_PATTERN.search(text)
    if match is None:
        return text.strip()
    return text[: match.start()].strip()


def classify_field_line(text: str) -> FieldLineMatch | None:
    """Classify a comment-free struct body line.

    Args:
        text: Field line text with comments removed

    Returns:
        FieldLineMatch, or None if the line has no recognized field shape
    """
    clean = strip_struct_tag(text)
    if not clean:
        return None

    match = _NAMED_FIELD_PATTERN.match(clean)
    if match:
        return FieldLineMatch(
            names=(match.group(1),),
            type_expression=match.group(2).strip(),
            shape=FieldShape.NAMED,
        )

    match = _MULTI_NAME_FIELD_PATTERN.match(clean)
    if match:
        names = tuple(name.strip() for name in match.group(1).split(","))
        return FieldLineMatch(
            names=names,
            type_expression=match.group(2).strip(),
            shape=FieldShape.MULTI_NAME,
        )

    match = _EMBEDDED_FIELD_PATTERN.match(clean)
    if match:
        return FieldLineMatch(
            names=(match.group(1),),
            type_expression=clean,
            shape=FieldShape.EMBEDDED,
        )

    logger.debug(f"Unrecognized field line: {clean!r}")
    return None
