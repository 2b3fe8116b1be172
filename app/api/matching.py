# app/api/matching.py
"""
Matching API Router

Endpoints:
- POST /matches/score - Score one wanted/offered pair
- POST /matches/ - Rank caller-supplied offered skills against wanted skills
- POST /matches/similar - Find similar skills in a caller-supplied pool
- GET /matches/user/{user_id} - Rank stored offered listings for a user
- GET /matches/similar/{skill_id} - Find stored listings similar to one listing
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from app.config import settings
from app.crud import skill as skill_crud
from app.database import get_db
from app.ml.categories import normalize_key
from app.ml.recommender import MatchingEngine, MatchScore, SimilarityResult, SkillMatch, get_engine
from app.schemas.matching import (
    MatchRequest,
    MatchScoreResponse,
    ScoreRequest,
    SimilarSkillResponse,
    SimilarSkillsRequest,
    SkillMatchResponse,
)
from app.schemas.skill import Skill

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/matches", tags=["matching"])


def _score_response(engine: MatchingEngine, match_score: MatchScore) -> MatchScoreResponse:
    return MatchScoreResponse(
        score=round(match_score.score, 3),
        complementary_score=round(match_score.complementary_score, 3),
        category_overlap=round(match_score.category_overlap, 3),
        level_compatibility=round(match_score.level_compatibility, 3),
        match_percentage=round(match_score.score * 100),
        reasons=list(match_score.reasons),
        explanation=engine.explain_match(match_score),
    )


def _match_responses(engine: MatchingEngine, matches: List[SkillMatch]) -> List[SkillMatchResponse]:
    return [
        SkillMatchResponse(
            rank=rank,
            user_id=str(match.user_id),
            wanted_skill=Skill.model_validate(match.wanted_skill),
            offered_skill=Skill.model_validate(match.offered_skill),
            match_score=_score_response(engine, match.match_score),
        )
        for rank, match in enumerate(matches, start=1)
    ]


def _similar_responses(results: List[SimilarityResult]) -> List[SimilarSkillResponse]:
    return [
        SimilarSkillResponse(
            skill=Skill.model_validate(result.skill),
            similarity_score=round(result.similarity_score, 3),
        )
        for result in results
    ]


def _check_pool_size(size: int, label: str = "Skill pool") -> None:
    if size > settings.MAX_POOL_SIZE:
        raise HTTPException(
            status_code=413,
            detail=f"{label} too large ({size} > {settings.MAX_POOL_SIZE}); split the request",
        )


def _clamp_limit(limit: int) -> int:
    return min(limit, settings.MAX_RESULT_LIMIT)


# ======================
# SCORE ONE PAIR
# ======================
@router.post("/score", response_model=MatchScoreResponse)
def score_pair(request: ScoreRequest):
    """
    Score how well an offered skill fits a wanted skill.

    Returns the overall score, the three sub-scores and the reasons behind them.
    """
    engine = get_engine()
    return _score_response(engine, engine.calculate_match_score(request.wanted, request.offered))


# ======================
# RANK SUPPLIED SKILLS
# ======================
@router.post("/", response_model=List[SkillMatchResponse])
def rank_matches(request: MatchRequest):
    """
    Rank offered skills against wanted skills supplied in the request body.

    Pairs owned by the same user are skipped; weak pairs are dropped.
    """
    _check_pool_size(len(request.wanted_skills), "Wanted skill list")
    _check_pool_size(len(request.offered_skills))
    engine = get_engine()

    logger.info(
        "Ranking %d wanted skills against %d offered skills",
        len(request.wanted_skills), len(request.offered_skills),
    )
    matches = engine.find_best_matches(
        request.wanted_skills,
        request.offered_skills,
        limit=_clamp_limit(request.limit),
    )
    return _match_responses(engine, matches)


# ======================
# SIMILAR SUPPLIED SKILLS
# ======================
@router.post("/similar", response_model=List[SimilarSkillResponse])
def similar_skills(request: SimilarSkillsRequest):
    """Find skills in the supplied pool that are topically close to the subject skill."""
    _check_pool_size(len(request.pool))
    engine = get_engine()

    results = engine.find_similar_skills(
        request.skill,
        request.pool,
        limit=_clamp_limit(request.limit),
    )
    return _similar_responses(results)


# ======================
# MATCHES FOR A STORED USER
# ======================
@router.get("/user/{user_id}", response_model=List[SkillMatchResponse])
def get_user_matches(
    user_id: str,
    limit: int = Query(
        settings.DEFAULT_MATCH_LIMIT,
        ge=0,
        le=settings.MAX_RESULT_LIMIT,
        description="Maximum number of matches",
    ),
    category: Optional[str] = Query(None, description="Only offered skills in this category"),
    db: Session = Depends(get_db),
):
    """
    Rank active offered listings of other users against the user's active wanted listings.

    Path Parameters:
        user_id: Owner of the wanted skills

    Query Parameters:
        category: Optional category filter on the offered skill

    Returns:
        Matches ranked by score; empty when the user seeks nothing
    """
    try:
        wanted = skill_crud.get_wanted_skills(db, user_id)
        if not wanted:
            return []

        category_key = normalize_key(category) or None
        _check_pool_size(len(wanted), "Wanted skill list")
        _check_pool_size(skill_crud.count_offered_pool(db, exclude_user_id=user_id, category=category_key))
        pool = skill_crud.get_offered_pool(db, exclude_user_id=user_id, category=category_key)

        engine = get_engine()
        matches = engine.find_best_matches(wanted, pool, limit=limit)

        logger.info(
            "User %s: %d matches from %d wanted / %d offered listings",
            user_id, len(matches), len(wanted), len(pool),
        )
        return _match_responses(engine, matches)

    except HTTPException:
        raise
    except Exception as e:
        logger.warning("Matching failed for user %s: %s", user_id, e)
        raise HTTPException(
            status_code=500,
            detail=f"Failed to generate matches: {str(e)}"
        ) from e


# ======================
# SIMILAR STORED LISTINGS
# ======================
@router.get("/similar/{skill_id}", response_model=List[SimilarSkillResponse])
def get_similar_listings(
    skill_id: int,
    limit: int = Query(
        settings.DEFAULT_SIMILAR_LIMIT,
        ge=0,
        le=settings.MAX_RESULT_LIMIT,
        description="Maximum number of similar skills",
    ),
    db: Session = Depends(get_db),
):
    """
    Find active listings similar to a stored listing.

    Path Parameters:
        skill_id: Listing identifier
    """
    try:
        listing = skill_crud.get_skill_listing(db, skill_id)
        if not listing:
            raise HTTPException(
                status_code=404,
                detail=f"Skill {skill_id} not found"
            )

        _check_pool_size(skill_crud.count_active_skills(db, exclude_id=listing.id))
        pool = skill_crud.get_active_skills(db, exclude_id=listing.id)
        results = get_engine().find_similar_skills(listing, pool, limit=limit)
        return _similar_responses(results)

    except HTTPException:
        raise
    except Exception as e:
        logger.warning("Similar-skill lookup failed for skill %s: %s", skill_id, e)
        raise HTTPException(
            status_code=500,
            detail=f"Failed to find similar skills: {str(e)}"
        ) from e
