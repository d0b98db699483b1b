#!/usr/bin/env python3

"""Domain layer containing the parser, layout engine and models."""

from . import models, services

__all__ = [
    "models",
    "services",
]
