# app/schemas/matching.py
"""
Matching Pydantic Schemas
Request/response models for skill matches and similar-skill discovery
"""

from pydantic import BaseModel, Field
from typing import List

from app.schemas.skill import Skill


# ======================
# MATCH SCORE
# ======================

class MatchScoreResponse(BaseModel):
    """Score breakdown for one wanted/offered pair"""
    score: float = Field(..., ge=0, le=1, description="Overall match score (0-1)")
    complementary_score: float = Field(..., ge=0, le=1, description="Seeking/offering complementarity (0-1)")
    category_overlap: float = Field(..., ge=0, le=1, description="Category overlap (0-1)")
    level_compatibility: float = Field(..., ge=0, le=1, description="Proficiency level proximity (0-1)")
    match_percentage: int = Field(..., ge=0, le=100, description="Score as a rounded percentage")
    reasons: List[str] = Field(default_factory=list, description="Contributing factors")
    explanation: str = Field(..., description="Human-readable explanation")

    class Config:
        json_schema_extra = {
            "example": {
                "score": 0.867,
                "complementary_score": 1.0,
                "category_overlap": 1.0,
                "level_compatibility": 0.333,
                "match_percentage": 87,
                "reasons": [
                    "Direct match between requested and offered skills",
                    "Skills are in the same category",
                    "Significant skill level difference",
                ],
                "explanation": "Matched because: Direct match between requested and offered skills, "
                               "Skills are in the same category, Significant skill level difference",
            }
        }


class ScoreRequest(BaseModel):
    """Score a single pair"""
    wanted: Skill = Field(..., description="Skill being sought")
    offered: Skill = Field(..., description="Skill being offered")


# ======================
# MATCH RANKING
# ======================

class MatchRequest(BaseModel):
    """Rank an offered pool against wanted skills"""
    wanted_skills: List[Skill] = Field(default_factory=list, description="Skills the user is seeking")
    offered_skills: List[Skill] = Field(default_factory=list, description="Skills offered by other users")
    limit: int = Field(10, ge=0, description="Maximum number of matches")


class SkillMatchResponse(BaseModel):
    """One ranked match"""
    rank: int = Field(..., ge=1, description="Match rank (1 = best match)")
    user_id: str = Field(..., description="Owner of the offered skill")
    wanted_skill: Skill
    offered_skill: Skill
    match_score: MatchScoreResponse


# ======================
# SIMILAR SKILLS
# ======================

class SimilarSkillsRequest(BaseModel):
    """Find skills similar to a subject skill"""
    skill: Skill = Field(..., description="Subject skill")
    pool: List[Skill] = Field(default_factory=list, description="Candidate skills")
    limit: int = Field(5, ge=0, description="Maximum number of results")


class SimilarSkillResponse(BaseModel):
    skill: Skill
    similarity_score: float = Field(..., ge=0, le=1, description="Similarity (0-1)")
