"""Unit tests for clause grouping."""

from collections import Counter

import pytest

from services.data_models import Clause
from config.clause_taxonomy import ClauseTaxonomy
from services.clause_grouper import ClauseGrouper
from utils.validators import InvalidInputError


@pytest.fixture
def grouper() -> ClauseGrouper:
    return ClauseGrouper()


def make_clause(clause_id: str, category: str, confidence: float = 0.7) -> Clause:
    return Clause(id             = clause_id,
                  text           = f"text of {clause_id}",
                  start_position = 0,
                  end_position   = 10,
                  category       = category,
                  confidence     = confidence,
                 )


class TestGroup:
    """Grouping behavior."""

    def test_empty_input_has_every_category(self, grouper):
        grouped = grouper.group([])

        assert list(grouped) == list(ClauseTaxonomy.CLAUSE_TYPES)
        assert all(group.count == 0 for group in grouped.values())
        assert all(group.to_dict()["count"] == 0 for group in grouped.values())

    @pytest.mark.parametrize("value", ["not a list", None, {"a": 1}, 42])
    def test_non_sequence_raises(self, grouper, value):
        with pytest.raises(InvalidInputError, match = "clauses must be a sequence"):
            grouper.group(value)

    def test_tuple_is_accepted(self, grouper):
        grouped = grouper.group((make_clause("clause_1", "payment_terms"),))

        assert grouped["payment_terms"].count == 1

    def test_lossless(self, grouper):
        clauses = [make_clause("clause_1", "payment_terms"),
                   make_clause("clause_2", "payment_terms"),
                   make_clause("clause_3", "force_majeure"),
                   make_clause("clause_4", ClauseTaxonomy.UNKNOWN),
                  ]

        grouped = grouper.group(clauses)

        assert sum(group.count for group in grouped.values()) == len(clauses)

        grouped_ids = Counter(c.id for group in grouped.values() for c in group.clauses)
        assert grouped_ids == Counter(c.id for c in clauses)

    def test_unknown_gets_ad_hoc_group(self, grouper):
        grouped = grouper.group([make_clause("clause_1", ClauseTaxonomy.UNKNOWN)])

        assert ClauseTaxonomy.UNKNOWN in grouped
        assert grouped[ClauseTaxonomy.UNKNOWN].type == ClauseTaxonomy.UNKNOWN
        assert grouped[ClauseTaxonomy.UNKNOWN].count == 1
        assert len(grouped) == len(ClauseTaxonomy.CLAUSE_TYPES) + 1

    def test_clauses_are_kept_unmodified(self, grouper):
        clause  = make_clause("clause_1", "notice_provisions", confidence = 0.66)
        grouped = grouper.group([clause])

        assert grouped["notice_provisions"].clauses[0] is clause

    def test_group_entry_fields(self, grouper):
        grouped = grouper.group([make_clause("clause_1", "notice_provisions", confidence = 0.66)])
        entry   = grouped["notice_provisions"].to_dict()["clauses"][0]

        assert entry == {"id"            : "clause_1",
                         "text"          : "text of clause_1",
                         "confidence"    : 0.66,
                         "startPosition" : 0,
                         "endPosition"   : 10,
                        }


class TestCountByCategory:

    def test_counts_present_categories_only(self):
        clauses = [make_clause("clause_1", "payment_terms"),
                   make_clause("clause_2", "payment_terms"),
                   make_clause("clause_3", ClauseTaxonomy.UNKNOWN),
                  ]

        assert ClauseGrouper.count_by_category(clauses) == {"payment_terms": 2, "unknown": 1}
