# app/schemas/__init__.py

# Skill schemas
from .skill import (
    ProficiencyLevel,
    SkillType,
    Skill,
    SkillBase,
    SkillCreate,
    SkillListing,
)

# Matching schemas
from .matching import (
    MatchScoreResponse,
    ScoreRequest,
    MatchRequest,
    SkillMatchResponse,
    SimilarSkillsRequest,
    SimilarSkillResponse,
)

__all__ = [
    "ProficiencyLevel",
    "SkillType",
    "Skill",
    "SkillBase",
    "SkillCreate",
    "SkillListing",
    "MatchScoreResponse",
    "ScoreRequest",
    "MatchRequest",
    "SkillMatchResponse",
    "SimilarSkillsRequest",
    "SimilarSkillResponse",
]
