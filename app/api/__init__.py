# app/api/__init__.py
# This file makes the api directory a Python package.

from . import matching
from . import skill

__all__ = [
    "skill",
    "matching",
]
