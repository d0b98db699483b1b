#!/usr/bin/env python3

"""Domain models for the Go struct analyzer."""

from . import go

__all__ = [
    "go",
]
