# DEPENDENCIES
from typing import Dict
from typing import List
from services.data_models import Clause
from services.data_models import ClauseGroup
from utils.validators import InputValidator
from config.clause_taxonomy import ClauseTaxonomy


class ClauseGrouper:
    """
    Partitions classified clauses by category without altering them
    """
    def group(self, clauses: List[Clause]) -> Dict[str, ClauseGroup]:
        """
        Group clauses by category

        Every taxonomy category is present in the output, even with zero clauses. Clauses whose
        category is outside the taxonomy (e.g. 'unknown') get an ad-hoc group.

        Arguments:
        ----------
            clauses { list } : Classified clauses

        Returns:
        --------
                { dict }     : category -> ClauseGroup, taxonomy order first
        """
        clauses = InputValidator.ensure_clause_sequence(clauses)

        grouped = {clause_type: ClauseGroup(type = clause_type) for clause_type in ClauseTaxonomy.CLAUSE_TYPES}

        for clause in clauses:
            category = clause.category or ClauseTaxonomy.UNKNOWN

            if category not in grouped:
                grouped[category] = ClauseGroup(type = category)

            grouped[category].add(clause)

        return grouped


    @staticmethod
    def count_by_category(clauses: List[Clause]) -> Dict[str, int]:
        """
        Count clauses per category present, in first-seen order
        """
        distribution = dict()

        for clause in clauses:
            category               = clause.category or ClauseTaxonomy.UNKNOWN
            distribution[category] = distribution.get(category, 0) + 1

        return distribution
