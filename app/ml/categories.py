# app/ml/categories.py
"""
Static reference data for skill matching: category relations,
proficiency ranks and skill direction aliases.
"""

from enum import Enum
from types import MappingProxyType
from typing import Any, Optional


# Categories considered topically adjacent. Relation is checked both ways.
RELATED_CATEGORIES = MappingProxyType({
    "programming": frozenset({"web-development", "mobile-development", "data-science"}),
    "design": frozenset({"graphic-design", "ui-design", "ux-design"}),
    "language": frozenset({"translation", "writing", "editing"}),
    "music": frozenset({"production", "instruments", "vocals"}),
})

PROFICIENCY_RANKS = MappingProxyType({
    "beginner": 1,
    "intermediate": 2,
    "advanced": 3,
    "expert": 4,
})

MAX_LEVEL_DIFFERENCE = max(PROFICIENCY_RANKS.values()) - min(PROFICIENCY_RANKS.values())

OFFERING = "offering"
SEEKING = "seeking"

# Support both the marketplace naming and the legacy teach/learn naming.
SKILL_TYPE_ALIASES = MappingProxyType({
    "offering": OFFERING,
    "offer": OFFERING,
    "teach": OFFERING,
    "seeking": SEEKING,
    "need": SEEKING,
    "learn": SEEKING,
})


def normalize_key(value: Any) -> str:
    """Lowercase, stripped string form of a key ('' for None). Enums use their value."""
    if isinstance(value, Enum):
        value = value.value
    if value is None:
        return ""
    return str(value).strip().lower()


def normalize_skill_type(value: Any) -> Optional[str]:
    """Canonical direction ('offering' / 'seeking'), or None when unknown."""
    return SKILL_TYPE_ALIASES.get(normalize_key(value))


def proficiency_rank(level: Any) -> Optional[int]:
    """Ordinal rank of a proficiency level, or None when unknown."""
    return PROFICIENCY_RANKS.get(normalize_key(level))


def level_difference(level1: Any, level2: Any) -> Optional[int]:
    """Absolute rank distance between two levels; None if either is unknown."""
    rank1 = proficiency_rank(level1)
    rank2 = proficiency_rank(level2)
    if rank1 is None or rank2 is None:
        return None
    return abs(rank1 - rank2)


def is_related_category(category1: Any, category2: Any) -> bool:
    """True when the relation table links the two categories in either direction."""
    key1 = normalize_key(category1)
    key2 = normalize_key(category2)
    if not key1 or not key2:
        return False
    return key2 in RELATED_CATEGORIES.get(key1, ()) or key1 in RELATED_CATEGORIES.get(key2, ())
