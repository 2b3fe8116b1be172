from __future__ import annotations

import pytest

from app.ml.recommender import MatchingEngine, find_similar_skills
from app.ml.vectorizer import KeywordVectorizer, keyword_similarities, keyword_similarity


# ======================
# KEYWORD SIMILARITY
# ======================

def test_keyword_similarity_is_jaccard_of_long_tokens():
    text1 = "Python programming basics"
    text2 = "python PROGRAMMING advanced"

    # {python, programming} / {python, programming, basics, advanced}
    assert keyword_similarity(text1, text2) == pytest.approx(0.5)


def test_short_tokens_are_ignored():
    assert KeywordVectorizer().tokenize("Use the Go API in a web app") == set()
    assert keyword_similarity("the cat and dog", "the cat and dog") == 0.0


def test_splits_on_non_word_characters():
    tokens = KeywordVectorizer().tokenize("Data-science with React.js, SQL/NoSQL!")

    assert tokens == {"data", "science", "with", "react", "nosql"}


def test_empty_or_missing_text_scores_zero():
    assert keyword_similarity("", "") == 0.0
    assert keyword_similarity(None, "python scripting") == 0.0


def test_batched_similarities_agree_with_pairwise():
    subject = "Guitar lessons for beginners"
    candidates = [
        "Acoustic guitar lessons",
        "Baking sourdough bread",
        "",
        "guitar GUITAR beginners lessons",
    ]

    batched = keyword_similarities(subject, candidates)

    assert batched == pytest.approx([keyword_similarity(subject, c) for c in candidates])
    assert batched[3] == pytest.approx(1.0)
    assert keyword_similarities(subject, []) == []
    assert keyword_similarities("a b c", ["d e", "f"]) == [0.0, 0.0]


def test_batched_similarities_leave_shared_vectorizer_unfitted():
    vectorizer = KeywordVectorizer()

    first = vectorizer.similarities("Python scripting", ["python scripting"]).tolist()
    second = vectorizer.similarities("Knitting scarves", ["knitting hats", "the a"]).tolist()

    assert first == pytest.approx([1.0])
    assert second == pytest.approx([1 / 3, 0.0])
    assert not hasattr(vectorizer.vectorizer, "vocabulary_")


# ======================
# SIMILAR SKILLS
# ======================

def test_no_shared_keywords_or_categories_yields_nothing(make_skill):
    subject = make_skill(
        title="Guitar lessons", description="Learn chords",
        category="music", subcategory="instruments",
    )
    pool = [
        make_skill(title="Python coding", description="Write scripts",
                   category="programming", subcategory="backend"),
        make_skill(title="Sourdough baking", description="Bread from scratch",
                   category="cooking", subcategory=None),
    ]

    assert find_similar_skills(subject, pool) == []


def test_subject_is_excluded_by_id_even_for_copies(make_skill):
    subject = make_skill(id="skill-1", title="Watercolor painting", category="art")
    copy = subject.model_copy()
    other = make_skill(id="skill-2", title="Watercolor painting", category="art")

    results = find_similar_skills(subject, [subject, copy, other])

    assert [r.skill.id for r in results] == ["skill-2"]


def test_category_and_subcategory_increments(make_skill):
    subject = make_skill(title="Vocal warmups", description="Breathing drills",
                         category="music", subcategory="vocals")
    same_category = make_skill(title="Drum rudiments", description="Stick control",
                               category="music", subcategory="percussion")
    same_subcategory = make_skill(title="Choir singing", description="Harmony parts",
                                  category="music", subcategory="vocals")

    results = find_similar_skills(subject, [same_category, same_subcategory])

    assert [r.skill.id for r in results] == [same_subcategory.id, same_category.id]
    assert results[0].similarity_score == pytest.approx(0.7)
    assert results[1].similarity_score == pytest.approx(0.4)


def test_subcategory_bonus_needs_both_sides(make_skill):
    subject = make_skill(title="Knitting", description="Scarves", category="crafts", subcategory=None)
    candidate = make_skill(title="Crochet", description="Blankets", category="crafts", subcategory=None)

    [result] = find_similar_skills(subject, [candidate])

    assert result.similarity_score == pytest.approx(0.4)


def test_keyword_overlap_alone_can_reach_threshold(make_skill):
    subject = make_skill(title="Spanish conversation", description="", category="language")
    full_overlap = make_skill(title="Conversation Spanish", description="", category="travel")
    half_overlap = make_skill(title="Spanish grammar", description="", category="travel")

    results = find_similar_skills(subject, [half_overlap, full_overlap])

    assert [r.skill.id for r in results] == [full_overlap.id]
    assert results[0].similarity_score == pytest.approx(MatchingEngine.MIN_SIMILARITY_SCORE)


def test_similarity_score_is_bounded_by_one(make_skill):
    subject = make_skill(title="React hooks", description="State management patterns",
                         category="web-development", subcategory="frontend")
    twin = make_skill(title="React hooks", description="State management patterns",
                      category="web-development", subcategory="frontend", skill_type="offering")

    [result] = find_similar_skills(subject, [twin])

    assert result.similarity_score == pytest.approx(1.0)
    assert result.similarity_score <= 1.0 + 1e-9


def test_results_sorted_and_limited(make_skill):
    subject = make_skill(title="Portrait photography", description="Lighting setups",
                         category="photography", subcategory="portrait")
    pool = [
        make_skill(title="Landscape shots", category="photography", subcategory="landscape"),
        make_skill(title="Portrait photography", description="Lighting setups",
                   category="photography", subcategory="portrait"),
        make_skill(title="Studio portrait", category="photography", subcategory="portrait"),
    ]

    results = find_similar_skills(subject, pool, limit=2)

    assert [r.skill.id for r in results] == [pool[1].id, pool[2].id]
    all_scores = [r.similarity_score for r in find_similar_skills(subject, pool)]
    assert all_scores == sorted(all_scores, reverse=True)
    assert find_similar_skills(subject, pool, limit=0) == []
