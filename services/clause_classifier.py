# DEPENDENCIES
from typing import Dict
from config.model_config import ModelConfig
from utils.validators import InputValidator
from config.clause_taxonomy import ClauseTaxonomy


class ClauseClassifier:
    """
    Deterministic weighted-keyword classifier over the fixed clause taxonomy
    """
    def __init__(self):
        scoring                   = ModelConfig.CONFIDENCE_SCORING

        self.classification_table = ClauseTaxonomy.get_classification_table()
        self.long_keyword_length  = scoring["long_keyword_length"]
        self.long_keyword_weight  = scoring["long_keyword_weight"]
        self.short_keyword_weight = scoring["short_keyword_weight"]


    def classify(self, clause_text: str) -> str:
        """
        Assign a taxonomy category (or 'unknown') to a clause

        Arguments:
        ----------
            clause_text { str } : Clause text

        Returns:
        --------
                  { str }       : Best scoring category, 'unknown' when nothing matches
        """
        InputValidator.ensure_text(clause_text, "clause classification")

        if not clause_text:
            return ClauseTaxonomy.UNKNOWN

        best_category = ClauseTaxonomy.UNKNOWN
        best_score    = 0

        # Strictly greater: the first maximal category in table order keeps the tie
        for category, score in self.score_categories(clause_text).items():
            if (score > best_score):
                best_score    = score
                best_category = category

        return best_category


    def score_categories(self, clause_text: str) -> Dict[str, int]:
        """
        Keyword score of every category, in table order
        """
        text_lower = clause_text.lower()
        scores     = dict()

        for category, keywords in self.classification_table:
            scores[category] = sum(text_lower.count(keyword) * self._keyword_weight(keyword) for keyword in keywords)

        return scores


    def _keyword_weight(self, keyword: str) -> int:
        if (len(keyword) > self.long_keyword_length):
            return self.long_keyword_weight

        return self.short_keyword_weight
