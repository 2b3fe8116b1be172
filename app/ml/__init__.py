# app/ml/__init__.py
from .recommender import (
    MatchingEngine,
    MatchScore,
    SimilarityResult,
    SkillMatch,
    calculate_match_score,
    explain_match,
    find_best_matches,
    find_similar_skills,
    get_engine,
)
from .vectorizer import KeywordVectorizer, keyword_similarity

__all__ = [
    "MatchingEngine",
    "MatchScore",
    "SimilarityResult",
    "SkillMatch",
    "calculate_match_score",
    "explain_match",
    "find_best_matches",
    "find_similar_skills",
    "get_engine",
    "KeywordVectorizer",
    "keyword_similarity",
]
