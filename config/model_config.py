# DEPENDENCIES
import re


class ModelConfig:
    """
    Extraction-specific constants - FOR SEGMENTATION, SCORING AND AI GENERATION SETTINGS ONLY
    """
    # Segmentation Settings (minimum stripped fragment length per strategy, exclusive)
    CLAUSE_SEGMENTATION = {"structural_min_length" : 30,
                           "sentence_min_length"   : 15,
                           "paragraph_min_length"  : 10,
                          }

    # Structural separators, applied cumulatively in this order
    STRUCTURAL_PATTERNS = [(r'\n\s*\d+\.', 0),
                           (r'\n\s*[A-Z]\.', 0),
                           (r'Section \d+', re.IGNORECASE),
                           (r'Article \d+', re.IGNORECASE),
                           (r'\n\s*\([a-z]\)', 0),
                           (r'\n\s*\d+\.\d+', 0),
                          ]

    # Keyword anchors for the third segmentation strategy (keyword up to next period)
    KEYWORD_ANCHORS     = [r'payment[^.]*\.',
                           r'termination[^.]*\.',
                           r'liability[^.]*\.',
                           r'confidential[^.]*\.',
                           r'intellectual property[^.]*\.',
                           r'indemnif[^.]*\.',
                          ]

    # Confidence Scoring Settings
    CONFIDENCE_SCORING  = {"base_confidence"         : 0.6,
                           "coverage_weight"         : 0.3,
                           "strong_match_bonus"      : 0.1,
                           "no_keyword_basis"        : 0.3,
                           "ai_default_confidence"   : 0.5,
                           "long_keyword_length"     : 5,
                           "long_keyword_weight"     : 2,
                           "short_keyword_weight"    : 1,
                          }

    # LLM Generation Settings for clause extraction
    LLM_GENERATION      = {"extraction_max_tokens"     : 4000,
                           "classification_max_tokens" : 50,
                           "temperature"               : 0.1,
                          }
