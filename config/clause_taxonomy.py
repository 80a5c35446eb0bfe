# DEPENDENCIES
from typing import Dict
from typing import List
from typing import Tuple


class ClauseTaxonomy:
    """
    Fixed clause taxonomy and the keyword tables used to classify and score clauses

    Two keyword tables are kept on purpose:
    - CLASSIFICATION_KEYWORDS drives category selection (its order is the tie-break order)
    - CONFIDENCE_KEYWORDS is the keyword basis for confidence scoring
    """
    UNKNOWN                 = "unknown"

    CLAUSE_TYPES            = ("payment_terms",
                               "termination_clause",
                               "liability_limitation",
                               "confidentiality_agreement",
                               "intellectual_property",
                               "force_majeure",
                               "governing_law",
                               "dispute_resolution",
                               "warranties_representations",
                               "indemnification",
                               "assignment_rights",
                               "amendment_modification",
                               "severability_clause",
                               "entire_agreement",
                               "notice_provisions",
                              )

    # Iteration order matters: first maximal category wins a tie
    CLASSIFICATION_KEYWORDS = {"confidentiality_agreement"  : ("confidential", "non-disclosure", "secret", "proprietary", "confidentiality"),
                               "payment_terms"              : ("payment", "pay", "invoice", "billing", "fee", "cost"),
                               "termination_clause"         : ("terminate", "termination", "end", "expire", "cancel"),
                               "liability_limitation"       : ("liability", "liable", "damages", "loss", "harm", "limitation"),
                               "intellectual_property"      : ("intellectual property", "copyright", "patent", "trademark", "ip rights"),
                               "force_majeure"              : ("force majeure", "act of god", "unforeseeable", "beyond control"),
                               "governing_law"              : ("governing law", "jurisdiction", "applicable law", "courts"),
                               "dispute_resolution"         : ("dispute", "arbitration", "mediation", "resolution"),
                               "warranties_representations" : ("warrant", "represent", "guarantee", "assure"),
                               "indemnification"            : ("indemnify", "hold harmless", "defend", "protect"),
                               "assignment_rights"          : ("assign", "transfer", "delegate", "convey"),
                               "amendment_modification"     : ("amend", "modify", "change", "alter"),
                               "severability_clause"        : ("severable", "invalid", "unenforceable", "separate"),
                               "entire_agreement"           : ("entire agreement", "complete agreement", "supersede", "merge"),
                               "notice_provisions"          : ("notice", "notification", "inform", "notify"),
                              }

    CONFIDENCE_KEYWORDS     = {"payment_terms"              : ("payment", "pay", "invoice", "billing", "fee"),
                               "termination_clause"         : ("terminate", "termination", "end", "expire", "cancel"),
                               "liability_limitation"       : ("liability", "liable", "damages", "loss", "harm"),
                               "confidentiality_agreement"  : ("confidential", "non-disclosure", "secret", "proprietary"),
                               "intellectual_property"      : ("intellectual property", "copyright", "patent", "trademark"),
                               "force_majeure"              : ("force majeure", "act of god", "unforeseeable", "beyond control"),
                               "governing_law"              : ("governing law", "jurisdiction", "applicable law", "courts"),
                               "dispute_resolution"         : ("dispute", "arbitration", "mediation", "resolution"),
                               "warranties_representations" : ("warrant", "represent", "guarantee", "assure"),
                               "indemnification"            : ("indemnify", "hold harmless", "defend", "protect"),
                               "assignment_rights"          : ("assign", "transfer", "delegate", "convey"),
                               "amendment_modification"     : ("amend", "modify", "change", "alter"),
                               "severability_clause"        : ("severable", "invalid", "unenforceable", "separate"),
                               "entire_agreement"           : ("entire agreement", "complete agreement", "supersede", "merge"),
                               "notice_provisions"          : ("notice", "notification", "inform", "notify"),
                              }


    @classmethod
    def get_supported_clause_types(cls) -> List[str]:
        """
        Get a copy of the supported clause types in taxonomy order
        """
        return list(cls.CLAUSE_TYPES)


    @classmethod
    def is_known_type(cls, category: str) -> bool:
        """
        Check whether a category belongs to the fixed taxonomy
        """
        return category in cls.CLAUSE_TYPES


    @classmethod
    def get_classification_table(cls) -> List[Tuple[str, Tuple[str, ...]]]:
        """
        Get (category, keywords) pairs in tie-break order
        """
        return list(cls.CLASSIFICATION_KEYWORDS.items())


    @classmethod
    def get_keywords_for_category(cls, category: str) -> List[str]:
        """
        Get the confidence keyword basis for a category (empty for unknown / unrecognized categories)
        """
        return list(cls.CONFIDENCE_KEYWORDS.get(category, ()))


    @classmethod
    def get_keyword_counts(cls) -> Dict[str, int]:
        """
        Get number of classification keywords per category
        """
        return {category: len(keywords) for category, keywords in cls.CLASSIFICATION_KEYWORDS.items()}
