"""Unit tests for the keyword-coverage confidence scorer."""

import math
import pytest

from config.clause_taxonomy import ClauseTaxonomy
from services.confidence_scorer import ConfidenceScorer


@pytest.fixture
def scorer() -> ConfidenceScorer:
    return ConfidenceScorer()


class TestScore:
    """Confidence formula."""

    def test_payment_sentence(self, scorer, payment_text):
        # "payment" and "pay" match (2 of 5), both occur twice
        assert scorer.score(payment_text, "payment_terms") == 0.82

    def test_single_match_without_repetition(self, scorer):
        assert scorer.score("The invoice is attached", "payment_terms") == 0.66

    def test_full_coverage_is_clamped_to_one(self, scorer):
        assert scorer.score("payment pay invoice billing fee payment", "payment_terms") == 1.0

    def test_known_category_without_match_is_zero(self, scorer):
        assert scorer.score("Lorem ipsum dolor sit amet", "payment_terms") == 0.0

    @pytest.mark.parametrize("text", ["", None])
    def test_missing_text_is_zero(self, scorer, text):
        assert scorer.score(text, "payment_terms") == 0.0

    @pytest.mark.parametrize("category", [ClauseTaxonomy.UNKNOWN, "not_a_category", None])
    def test_no_keyword_basis_default(self, scorer, category):
        assert scorer.score("Some clause text", category) == 0.3

    def test_idempotent(self, scorer, service_agreement):
        first  = scorer.score(service_agreement, "liability_limitation")
        second = scorer.score(service_agreement, "liability_limitation")

        assert first == second

    @pytest.mark.parametrize("category", list(ClauseTaxonomy.CLAUSE_TYPES) + [ClauseTaxonomy.UNKNOWN])
    def test_bounds_for_every_category(self, scorer, service_agreement, category):
        value = scorer.score(service_agreement, category)

        assert not math.isnan(value)
        assert 0.0 <= value <= 1.0
        assert value == round(value, 2)


class TestNormalize:
    """Clamping, rounding and anomaly handling."""

    def test_nan_becomes_zero(self):
        assert ConfidenceScorer.normalize(float("nan")) == 0.0

    def test_clamps(self):
        assert ConfidenceScorer.normalize(1.7) == 1.0
        assert ConfidenceScorer.normalize(-0.2) == 0.0

    def test_rounds_half_up(self):
        assert ConfidenceScorer.normalize(0.125) == 0.13
        assert ConfidenceScorer.normalize(0.8249) == 0.82

    def test_non_numeric_becomes_zero(self):
        assert ConfidenceScorer.normalize("high") == 0.0
        assert ConfidenceScorer.normalize(None) == 0.0
