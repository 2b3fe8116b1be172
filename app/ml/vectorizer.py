# app/ml/vectorizer.py
"""
Keyword Vectorization Module
Turns free skill text into keyword sets and scores their lexical overlap
(Jaccard coefficient) for the similar-skill finder.
"""

import numpy as np
from sklearn.base import clone
from sklearn.feature_extraction.text import CountVectorizer
from typing import Iterable, List, Optional, Set


# Runs of word characters at least 4 long; shorter tokens are noise/stop-words.
TOKEN_PATTERN = r"(?u)\b\w{4,}\b"


class KeywordVectorizer:
    """
    Binary bag-of-keywords vectorizer.

    Tokenization: lowercase, split on non-word characters, drop tokens of
    three characters or fewer. Each text is reduced to its set of keywords.
    """

    def __init__(self):
        self.vectorizer = CountVectorizer(
            lowercase=True,
            token_pattern=TOKEN_PATTERN,
            binary=True,            # presence only, repeated words count once
        )
        self._analyze = self.vectorizer.build_analyzer()

    def tokenize(self, text: Optional[str]) -> Set[str]:
        """
        Reduce text to its deduplicated keyword set.

        Args:
            text: Free text (None is treated as empty)

        Returns:
            Set of lowercase keywords
        """
        return set(self._analyze(self._clean_text(text)))

    def similarity(self, text1: Optional[str], text2: Optional[str]) -> float:
        """
        Jaccard similarity between the keyword sets of two texts.

        Returns 0.0 when neither text has any keyword.
        """
        words1 = self.tokenize(text1)
        words2 = self.tokenize(text2)

        union = words1 | words2
        if not union:
            return 0.0
        return len(words1 & words2) / len(union)

    def similarities(self, text: Optional[str], candidates: Iterable[Optional[str]]) -> np.ndarray:
        """
        Jaccard similarity of one text against many candidates at once.

        Args:
            text: Subject text
            candidates: Candidate texts

        Returns:
            numpy array of similarities (n_candidates,), values in [0, 1]
        """
        documents = [self._clean_text(text)] + [self._clean_text(c) for c in candidates]
        n_candidates = len(documents) - 1

        if n_candidates == 0:
            return np.zeros(0)

        # Fit a copy so the shared instance stays unfitted across callers
        try:
            matrix = clone(self.vectorizer).fit_transform(documents)
        except ValueError:
            # empty vocabulary: no text has a keyword
            return np.zeros(n_candidates)

        subject = matrix[0]
        others = matrix[1:]

        intersection = np.asarray((others @ subject.T).todense(), dtype=float).ravel()
        sizes = np.asarray(others.sum(axis=1), dtype=float).ravel()
        union = sizes + float(subject.sum()) - intersection

        return np.divide(
            intersection,
            union,
            out=np.zeros(n_candidates, dtype=float),
            where=union > 0,
        )

    def _clean_text(self, text: Optional[str]) -> str:
        if text is None or not isinstance(text, str):
            return ""
        return " ".join(text.split())


# ======================
# HELPER FUNCTIONS
# ======================

_default_vectorizer = KeywordVectorizer()


def skill_text(skill) -> str:
    """Concatenate a skill's title and description for keyword comparison."""
    return f"{getattr(skill, 'title', None) or ''} {getattr(skill, 'description', None) or ''}"


def keyword_similarity(text1: Optional[str], text2: Optional[str]) -> float:
    """Jaccard similarity of the keyword sets of two texts (0.0 for an empty union)."""
    return _default_vectorizer.similarity(text1, text2)


def keyword_similarities(text: Optional[str], candidates: List[Optional[str]]) -> List[float]:
    """Batched keyword_similarity of one text against a list of candidates."""
    return _default_vectorizer.similarities(text, candidates).tolist()
