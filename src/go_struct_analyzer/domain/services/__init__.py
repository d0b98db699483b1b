#!/usr/bin/env python3

"""Domain services layer."""

from . import layout, parsing

__all__ = [
    "layout",
    "parsing",
]
