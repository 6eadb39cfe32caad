"""Tests for TF-IDF vectors, cosine similarity and startup similarity search."""

import math

import pytest

from campus_match.models.startup import Startup
from campus_match.scoring.similarity import (
    SIMILARITY_THRESHOLD,
    cosine_similarity,
    find_similar_startups,
    score_similar_startups,
    text_similarity,
    tfidf_vector,
)


def _make_startup(**kwargs) -> Startup:
    defaults = {"status": "approved"}
    defaults.update(kwargs)
    return Startup(**defaults)


class TestTfidfVector:
    """Tests for tfidf_vector."""

    def test_empty_document(self) -> None:
        """Empty document has an empty vector."""
        assert tfidf_vector("", ["anything here"]) == {}
        assert tfidf_vector(None, []) == {}

    def test_weights_use_term_frequency_and_smoothed_idf(self) -> None:
        """TF = count / total, IDF = ln(N / (df + 1))."""
        corpus = ["mobile payments", "soil sensors", "exam quizzes"]
        vector = tfidf_vector("mobile payments", corpus)
        expected = 0.5 * math.log(3 / 2)
        assert vector["mobile"] == pytest.approx(expected)
        assert vector["payments"] == pytest.approx(expected)

    def test_idf_negative_when_term_in_every_document(self) -> None:
        """Tiny corpora give negative weights for shared terms."""
        vector = tfidf_vector("payments", ["payments", "payments"])
        assert vector["payments"] == pytest.approx(math.log(2 / 3))
        assert vector["payments"] < 0


class TestCosineSimilarity:
    """Tests for cosine_similarity."""

    def test_self_similarity_is_one(self) -> None:
        """A non-empty vector is fully similar to itself."""
        vector = tfidf_vector("mobile payments app", ["mobile payments app", "soil sensors farm", "learning quizzes"])
        assert cosine_similarity(vector, vector) == pytest.approx(1.0)

    def test_empty_vector_is_zero(self) -> None:
        """Zero norm gives zero similarity."""
        assert cosine_similarity({}, {"mobile": 0.3}) == 0.0
        assert cosine_similarity({}, {}) == 0.0

    def test_disjoint_vectors_are_zero(self) -> None:
        """No shared terms, no similarity."""
        assert cosine_similarity({"mobile": 0.4}, {"soil": 0.2}) == 0.0

    def test_clamped_to_unit_range(self) -> None:
        """Opposite-signed weights would be negative; result is clamped at 0."""
        assert cosine_similarity({"mobile": 1.0}, {"mobile": -1.0}) == 0.0


class TestTextSimilarity:
    """Tests for text_similarity."""

    def test_empty_text(self) -> None:
        """Either side empty gives 0."""
        assert text_similarity("", "mobile payments") == 0.0
        assert text_similarity("mobile payments", None) == 0.0

    def test_identical_texts(self) -> None:
        """Identical texts are fully similar."""
        assert text_similarity("mobile payments", "mobile payments") == pytest.approx(1.0)

    def test_disjoint_texts(self) -> None:
        """No shared words, no similarity."""
        assert text_similarity("solar panels", "exam quizzes") == 0.0


class TestScoreSimilarStartups:
    """Tests for similarity search over startups."""

    def test_best_match_first(self, sample_startups: list[Startup]) -> None:
        """Startup sharing the query terms ranks first; unrelated ones are dropped."""
        results = score_similar_startups("mobile payments", sample_startups)
        assert [r.startup.id for r in results] == ["s1"]
        assert results[0].similarity > SIMILARITY_THRESHOLD

    def test_fintech_query_ranks_payease_above_edulearn(self, sample_startups: list[Startup]) -> None:
        """PayEase ranks above EduLearn; EduLearn is excluded at or below the threshold."""
        pay_ease = _make_startup(
            id="p", name="PayEase", tagline="Mobile payments for students", description="A fintech app", category="fintech"
        )
        edu_learn = _make_startup(
            id="e", name="EduLearn", tagline="Online courses", description="Learning platform", category="edtech"
        )
        candidates = [pay_ease, edu_learn] + sample_startups[2:]
        results = find_similar_startups("fintech payments app", candidates, 10)
        assert results[0].name == "PayEase"
        assert all(s.name != "EduLearn" for s in results)

    def test_terms_shared_by_whole_tiny_corpus_carry_no_weight(self) -> None:
        """With only two candidates every query term has zero IDF, so nothing clears the threshold."""
        pay_ease = _make_startup(
            name="PayEase", tagline="Mobile payments for students", description="A fintech app", category="fintech"
        )
        edu_learn = _make_startup(name="EduLearn", tagline="Online courses", description="Learning platform", category="edtech")
        assert score_similar_startups("fintech payments app", [pay_ease, edu_learn]) == []

    def test_results_above_threshold_and_sorted(self, sample_startups: list[Startup]) -> None:
        """Every result clears the threshold and scores are non-increasing."""
        results = score_similar_startups("students learning payments", sample_startups)
        scores = [r.similarity for r in results]
        assert all(s > SIMILARITY_THRESHOLD for s in scores)
        assert scores == sorted(scores, reverse=True)

    def test_ties_keep_input_order(self, sample_startups: list[Startup]) -> None:
        """Equal scores keep candidate order."""
        first = _make_startup(id="a", name="PayEase", tagline="Mobile payments", category="fintech")
        second = _make_startup(id="b", name="PayEase", tagline="Mobile payments", category="fintech")
        results = score_similar_startups("mobile payments", [first, second] + sample_startups[1:])
        assert [r.startup.id for r in results[:2]] == ["a", "b"]
        assert results[0].similarity == results[1].similarity

    def test_limit(self, sample_startups: list[Startup]) -> None:
        """Results are truncated to limit."""
        assert score_similar_startups("mobile payments", sample_startups, limit=0) == []
        assert len(score_similar_startups("students", sample_startups, limit=1)) <= 1

    def test_empty_query_or_candidates(self, sample_startups: list[Startup]) -> None:
        """Blank query or no candidates gives no results."""
        assert score_similar_startups("", sample_startups) == []
        assert score_similar_startups("   ", sample_startups) == []
        assert score_similar_startups(None, sample_startups) == []
        assert score_similar_startups("mobile payments", []) == []

    def test_find_similar_returns_records(self, sample_startups: list[Startup]) -> None:
        """find_similar_startups returns the startup records themselves."""
        results = find_similar_startups("soil moisture sensors", sample_startups)
        assert results[0].id == "s4"
