# DEPENDENCIES
import math
from typing import Optional
from config.model_config import ModelConfig
from config.clause_taxonomy import ClauseTaxonomy


class ConfidenceScorer:
    """
    Keyword-coverage confidence for a (clause text, category) pair

    Independent of how the category was chosen; the result is a heuristic in [0, 1], not a calibrated probability
    """
    def __init__(self):
        scoring                 = ModelConfig.CONFIDENCE_SCORING

        self.base_confidence    = scoring["base_confidence"]
        self.coverage_weight    = scoring["coverage_weight"]
        self.strong_match_bonus = scoring["strong_match_bonus"]
        self.no_keyword_basis   = scoring["no_keyword_basis"]


    def score(self, clause_text: Optional[str], category: Optional[str]) -> float:
        """
        Compute confidence for a clause categorization

        Arguments:
        ----------
            clause_text { str } : Clause text

            category    { str } : Assigned category

        Returns:
        --------
                 { float }      : Confidence in [0, 1], rounded to 2 decimals
        """
        if not clause_text:
            return 0.0

        keywords = ClauseTaxonomy.get_keywords_for_category(category)

        # No keyword basis to judge from (unknown or unrecognized category)
        if not keywords:
            return self.no_keyword_basis

        text_lower         = str(clause_text).lower()
        match_count        = 0
        strong_match_count = 0

        for keyword in keywords:
            occurrences = text_lower.count(keyword.lower())

            if (occurrences > 0):
                match_count += 1

                if (occurrences > 1):
                    strong_match_count += 1

        confidence = 0.0

        if (match_count > 0):
            confidence = self.base_confidence + (match_count / len(keywords)) * self.coverage_weight

            if (strong_match_count > 0):
                confidence += self.strong_match_bonus

        return self.normalize(confidence)


    @staticmethod
    def normalize(confidence: float) -> float:
        """
        Clamp to [0, 1] and round half-up to 2 decimals; NaN becomes 0
        """
        try:
            confidence = float(confidence)

        except (TypeError, ValueError):
            return 0.0

        if math.isnan(confidence):
            return 0.0

        confidence = min(max(confidence, 0.0), 1.0)

        return math.floor(confidence * 100 + 0.5) / 100
