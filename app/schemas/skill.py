from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, Field, field_validator

from app.ml.categories import normalize_key, normalize_skill_type

# ======================
# ENUMS
# ======================

# app/schemas/skill.py
class ProficiencyLevel(str, Enum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"
    EXPERT = "expert"


class SkillType(str, Enum):
    OFFERING = "offering"
    SEEKING = "seeking"


# ======================
# SKILL SCHEMAS
# ======================

class SkillBase(BaseModel):
    title: str = Field(..., min_length=1, max_length=100)
    description: Optional[str] = None
    category: str = Field(..., min_length=1, max_length=50)
    subcategory: Optional[str] = Field(None, max_length=50)
    proficiency_level: ProficiencyLevel
    skill_type: SkillType

    @field_validator("category", "subcategory", mode="before")
    @classmethod
    def _normalize_category(cls, value):
        if value is None:
            return None
        return normalize_key(value) or None

    @field_validator("proficiency_level", mode="before")
    @classmethod
    def _normalize_level(cls, value):
        return normalize_key(value)

    @field_validator("skill_type", mode="before")
    @classmethod
    def _normalize_skill_type(cls, value):
        # Accept legacy teach/learn and offer/need spellings
        return normalize_skill_type(value) or value


class SkillCreate(SkillBase):
    user_id: str = Field(..., min_length=1, max_length=64)


class Skill(SkillBase):
    """A skill record as handed to the matching engine."""
    id: Union[int, str]
    user_id: str

    class Config:
        from_attributes = True  # For SQLAlchemy ORM mode


class SkillListing(Skill):
    is_active: bool = True
