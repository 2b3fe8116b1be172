# app/models/__init__.py
from .skill import SkillListing

__all__ = ["SkillListing"]
