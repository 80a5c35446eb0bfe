# DEPENDENCIES
from .data_models import Clause
from .data_models import ClauseGroup
from .clause_grouper import ClauseGrouper
from .data_models import ExtractionResult
from .data_models import ExtractionSummary
from .data_models import ExtractionOptions
from .clause_extractor import ClauseExtractor
from .clause_segmenter import ClauseSegmenter
from .confidence_scorer import ConfidenceScorer
from .clause_classifier import ClauseClassifier
from .llm_clause_classifier import LLMClauseClassifier



__all__ = ['Clause',
           'ClauseGroup',
           'ClauseGrouper',
           'ClauseExtractor',
           'ClauseSegmenter',
           'ConfidenceScorer',
           'ClauseClassifier',
           'ExtractionResult',
           'ExtractionSummary',
           'ExtractionOptions',
           'LLMClauseClassifier',
          ]
