# app/ml/recommender.py
"""
Skill Matching Engine
Scores wanted/offered skill pairs, ranks trade matches and finds similar skills.

All operations are pure: they read only their arguments and the static
tables in app.ml.categories, so one engine can serve concurrent callers.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, List, Optional, Sequence, Tuple

from app.ml.categories import (
    MAX_LEVEL_DIFFERENCE,
    OFFERING,
    SEEKING,
    is_related_category,
    level_difference,
    normalize_key,
    normalize_skill_type,
)
from app.ml.vectorizer import keyword_similarities, skill_text

logger = logging.getLogger(__name__)


# ======================
# RESULT TYPES
# ======================

@dataclass(frozen=True)
class MatchScore:
    """Score breakdown for one (wanted, offered) skill pair."""
    score: float
    complementary_score: float
    category_overlap: float
    level_compatibility: float
    reasons: Tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class SkillMatch:
    """A wanted skill paired with another user's offered skill."""
    wanted_skill: Any
    offered_skill: Any
    user_id: Any            # owner of the offered skill, profile lookup is the caller's job
    match_score: MatchScore


@dataclass(frozen=True)
class SimilarityResult:
    skill: Any
    similarity_score: float


class MatchingEngine:
    """
    Rule-based skill matching engine.

    Pair scores combine direction complementarity, category overlap and
    proficiency-level proximity. Similar-skill discovery adds category,
    subcategory and keyword overlap signals.
    """

    # Match score weights
    WEIGHT_COMPLEMENTARY = 0.4
    WEIGHT_CATEGORY = 0.4
    WEIGHT_LEVEL = 0.2

    # Similarity increments
    SIMILARITY_SAME_CATEGORY = 0.4
    SIMILARITY_SAME_SUBCATEGORY = 0.3
    SIMILARITY_KEYWORD_SCALE = 0.3

    # Minimum scores for a result to be returned
    MIN_MATCH_SCORE = 0.4
    MIN_SIMILARITY_SCORE = 0.3

    DEFAULT_MATCH_LIMIT = 10
    DEFAULT_SIMILAR_LIMIT = 5

    def calculate_match_score(self, wanted_skill: Any, offered_skill: Any) -> MatchScore:
        """
        Score a skill someone wants against a skill someone offers.

        Category, level and direction are compared case-insensitively, so
        "Programming" and "programming" count as the same category.

        Args:
            wanted_skill: The skill a user is looking for
            offered_skill: The skill another user is offering

        Returns:
            MatchScore with overall score, sub-scores and reasons
        """
        reasons: List[str] = []

        # Complementary match (seeking vs offering)
        complementary_score = 0.0
        if (
            normalize_skill_type(getattr(wanted_skill, "skill_type", None)) == SEEKING
            and normalize_skill_type(getattr(offered_skill, "skill_type", None)) == OFFERING
        ):
            complementary_score = 1.0
            reasons.append("Direct match between requested and offered skills")

        # Category match
        category_overlap = 0.0
        wanted_category = normalize_key(getattr(wanted_skill, "category", None))
        offered_category = normalize_key(getattr(offered_skill, "category", None))
        if wanted_category and wanted_category == offered_category:
            category_overlap = 1.0
            reasons.append("Skills are in the same category")
        elif is_related_category(wanted_category, offered_category):
            category_overlap = 0.5
            reasons.append("Skills are in related categories")

        # Skill level compatibility
        difference = level_difference(
            getattr(wanted_skill, "proficiency_level", None),
            getattr(offered_skill, "proficiency_level", None),
        )
        if difference is None:
            level_compatibility = 0.0
            reasons.append("Skill level could not be compared")
        else:
            level_compatibility = 1.0 - difference / MAX_LEVEL_DIFFERENCE
            if difference == 0:
                reasons.append("Perfect skill level match")
            elif difference <= 1:
                reasons.append("Closely matched skill levels")
            else:
                reasons.append("Significant skill level difference")

        score = (
            self.WEIGHT_COMPLEMENTARY * complementary_score +
            self.WEIGHT_CATEGORY * category_overlap +
            self.WEIGHT_LEVEL * level_compatibility
        )

        return MatchScore(
            score=score,
            complementary_score=complementary_score,
            category_overlap=category_overlap,
            level_compatibility=level_compatibility,
            reasons=tuple(reasons),
        )

    def find_best_matches(
        self,
        wanted_skills: Sequence[Any],
        offered_skills: Sequence[Any],
        limit: int = DEFAULT_MATCH_LIMIT,
    ) -> List[SkillMatch]:
        """
        Rank other users' offered skills against a user's wanted skills.

        Args:
            wanted_skills: Skills the user is seeking
            offered_skills: Pool of skills offered by users
            limit: Maximum number of matches to return

        Returns:
            Matches sorted by score (highest first), at most `limit` long
        """
        if limit <= 0 or not wanted_skills or not offered_skills:
            return []

        matches: List[SkillMatch] = []

        for wanted_skill in wanted_skills:
            wanted_owner = getattr(wanted_skill, "user_id", None)
            for offered_skill in offered_skills:
                offered_owner = getattr(offered_skill, "user_id", None)

                # A user never matches their own listings
                if wanted_owner == offered_owner:
                    continue

                match_score = self.calculate_match_score(wanted_skill, offered_skill)
                if match_score.score < self.MIN_MATCH_SCORE:
                    continue

                matches.append(SkillMatch(
                    wanted_skill=wanted_skill,
                    offered_skill=offered_skill,
                    user_id=offered_owner,
                    match_score=match_score,
                ))

        # Stable sort: ties keep wanted-skill order, then pool order
        matches.sort(key=lambda m: m.match_score.score, reverse=True)

        logger.debug(
            "Ranked %d matches from %d wanted x %d offered skills (limit %d)",
            len(matches), len(wanted_skills), len(offered_skills), limit,
        )

        return matches[:limit]

    def find_similar_skills(
        self,
        skill: Any,
        pool: Sequence[Any],
        limit: int = DEFAULT_SIMILAR_LIMIT,
    ) -> List[SimilarityResult]:
        """
        Find skills in a pool that are topically close to the given skill.

        Direction is ignored. The skill itself (matched by id) is skipped.

        Args:
            skill: Subject skill
            pool: Candidate skills
            limit: Maximum number of results

        Returns:
            Similar skills sorted by similarity (highest first)
        """
        if limit <= 0:
            return []

        skill_id = getattr(skill, "id", None)
        candidates = [c for c in pool if getattr(c, "id", None) != skill_id]
        if not candidates:
            return []

        category = normalize_key(getattr(skill, "category", None))
        subcategory = normalize_key(getattr(skill, "subcategory", None))
        keyword_scores = keyword_similarities(
            skill_text(skill),
            [skill_text(candidate) for candidate in candidates],
        )

        similar: List[SimilarityResult] = []

        for candidate, keyword_score in zip(candidates, keyword_scores):
            similarity_score = 0.0

            if category and normalize_key(getattr(candidate, "category", None)) == category:
                similarity_score += self.SIMILARITY_SAME_CATEGORY

            if subcategory and normalize_key(getattr(candidate, "subcategory", None)) == subcategory:
                similarity_score += self.SIMILARITY_SAME_SUBCATEGORY

            similarity_score += self.SIMILARITY_KEYWORD_SCALE * keyword_score

            if similarity_score >= self.MIN_SIMILARITY_SCORE:
                similar.append(SimilarityResult(skill=candidate, similarity_score=similarity_score))

        similar.sort(key=lambda s: s.similarity_score, reverse=True)

        return similar[:limit]

    def explain_match(self, match_score: MatchScore) -> str:
        """
        Human-readable explanation for a match score.

        Args:
            match_score: Score returned by calculate_match_score

        Returns:
            Explanation string
        """
        reasons = list(match_score.reasons) or ["potential match"]
        return f"Matched because: {', '.join(reasons)}"


# ======================
# UTILITY FUNCTIONS
# ======================

_engine = MatchingEngine()


def get_engine() -> MatchingEngine:
    """Shared engine instance. Stateless, so no per-request construction is needed."""
    return _engine


def calculate_match_score(wanted_skill: Any, offered_skill: Any) -> MatchScore:
    return _engine.calculate_match_score(wanted_skill, offered_skill)


def find_best_matches(
    wanted_skills: Sequence[Any],
    offered_skills: Sequence[Any],
    limit: int = MatchingEngine.DEFAULT_MATCH_LIMIT,
) -> List[SkillMatch]:
    return _engine.find_best_matches(wanted_skills, offered_skills, limit)


def find_similar_skills(
    skill: Any,
    pool: Sequence[Any],
    limit: int = MatchingEngine.DEFAULT_SIMILAR_LIMIT,
) -> List[SimilarityResult]:
    return _engine.find_similar_skills(skill, pool, limit)


def explain_match(match_score: Optional[MatchScore]) -> str:
    if match_score is None:
        return "Matched because: potential match"
    return _engine.explain_match(match_score)
