# DEPENDENCIES
import json
import logging
from typing import Any
from typing import Dict
from typing import List
from typing import Callable
from typing import Optional
from utils.logger import log_info
from utils.logger import log_error
from utils.logger import log_warning
from config.model_config import ModelConfig
from services.data_models import Clause
from utils.logger import ClauseEngineLogger
from utils.validators import InputValidator
from services.data_models import ClauseGroup
from config.clause_taxonomy import ClauseTaxonomy
from services.clause_grouper import ClauseGrouper
from services.data_models import ExtractionResult
from services.data_models import ExtractionSummary
from services.data_models import ExtractionOptions
from services.data_models import AIExtractionOutcome
from services.clause_segmenter import ClauseSegmenter
from services.confidence_scorer import ConfidenceScorer
from services.clause_classifier import ClauseClassifier


class ClauseExtractor:
    """
    Public entry point of the clause engine: segmentation -> classification -> scoring -> grouping

    When an inference backend is supplied and loaded, a single AI extraction is attempted first; any failure
    falls back to the deterministic path, which never depends on the model
    """
    def __init__(self, model_manager: Any = None, classification_step: Optional[Callable[[str], str]] = None):
        """
        Initialize clause extractor

        Arguments:
        ----------
            model_manager       { Any }      : Optional inference backend exposing `is_loaded` and
                                               `inference(prompt, **options) -> str`

            classification_step { callable } : Optional replacement for rule-based classification of a
                                               single clause text; failures fall back per clause
        """
        self.model_manager       = model_manager
        self.classification_step = classification_step

        self.segmenter           = ClauseSegmenter()
        self.classifier          = ClauseClassifier()
        self.scorer              = ConfidenceScorer()
        self.grouper             = ClauseGrouper()

        self.generation          = ModelConfig.LLM_GENERATION
        self.ai_default          = ModelConfig.CONFIDENCE_SCORING["ai_default_confidence"]


    @ClauseEngineLogger.log_execution_time("extract_clauses")
    def extract(self, text: str, options: Optional[ExtractionOptions] = None) -> ExtractionResult:
        """
        Extract, classify, score and group the clauses of a contract

        Arguments:
        ----------
            text    { str }               : Contract text

            options { ExtractionOptions } : Per-call options (AI attempt, grouping)

        Returns:
        --------
              { ExtractionResult }        : Clauses, grouped clauses and summary
        """
        InputValidator.ensure_text(text, "clause extraction")

        options  = options or ExtractionOptions()
        method   = "rule_based"
        strategy = None
        clauses  = None

        log_info("Starting clause extraction",
                 text_length = len(text),
                 ai_ready    = self.is_ai_ready(),
                 use_ai      = options.use_ai,
                )

        if options.use_ai and self.is_ai_ready() and text.strip():
            outcome = self._attempt_ai_extraction(text)

            if outcome.success:
                clauses = outcome.clauses
                method  = "ai_model"

            else:
                log_warning("AI clause extraction failed, falling back to rule-based", error = str(outcome.error))

        if clauses is None:
            strategy, candidates = self.segmenter.segment_with_strategy(text)
            clauses              = self.categorize(candidates)

        grouped = self.group(clauses) if options.group_clauses else dict()
        summary = self.generate_summary(clauses  = clauses,
                                        method   = method,
                                        strategy = strategy,
                                       )

        log_info("Clause extraction complete",
                 method             = method,
                 strategy           = strategy,
                 total_clauses      = summary.total_clauses,
                 identified_types   = summary.identified_types,
                 average_confidence = summary.average_confidence,
                )

        return ExtractionResult(clauses = clauses,
                                grouped = grouped,
                                summary = summary,
                               )


    def segment(self, text: str) -> List[Clause]:
        return self.segmenter.segment(text)


    def classify(self, clause_text: str) -> str:
        return self.classifier.classify(clause_text)


    def score(self, clause_text: str, category: str) -> float:
        return self.scorer.score(clause_text, category)


    def group(self, clauses: List[Clause]) -> Dict[str, ClauseGroup]:
        return self.grouper.group(clauses)


    def categorize(self, candidates: List[Clause]) -> List[Clause]:
        """
        Classify and score clause candidates, returning new clause records
        """
        candidates = InputValidator.ensure_clause_sequence(candidates)
        classified = list()

        for candidate in candidates:
            category   = self._classify_candidate(candidate.text)
            confidence = self.scorer.score(candidate.text, category)

            classified.append(candidate.with_classification(category, confidence))

        return classified


    def generate_summary(self, clauses: List[Clause], method: str = "rule_based", strategy: Optional[str] = None) -> ExtractionSummary:
        """
        Summary statistics: counts per category, average confidence, categories found
        """
        clause_types       = self.grouper.count_by_category(clauses)
        total_confidence   = sum((clause.confidence or 0) for clause in clauses)
        average_confidence = (total_confidence / len(clauses)) if clauses else 0.0

        return ExtractionSummary(total_clauses         = len(clauses),
                                 clause_types          = clause_types,
                                 average_confidence    = self.scorer.normalize(average_confidence),
                                 supported_types       = len(ClauseTaxonomy.CLAUSE_TYPES),
                                 identified_types      = len(clause_types),
                                 method                = method,
                                 segmentation_strategy = strategy,
                                )


    def get_supported_clause_types(self) -> List[str]:
        return ClauseTaxonomy.get_supported_clause_types()


    def is_ai_ready(self) -> bool:
        return (self.model_manager is not None) and bool(getattr(self.model_manager, "is_loaded", False))


    def _classify_candidate(self, clause_text: str) -> str:
        if self.classification_step is None:
            return self.classifier.classify(clause_text)

        try:
            category = self.classification_step(clause_text)

        except Exception as e:
            log_error(e, context = {"component" : "ClauseExtractor", "operation" : "classification_step"}, level = logging.WARNING)

            return self.classifier.classify(clause_text)

        if ClauseTaxonomy.is_known_type(category) or (category == ClauseTaxonomy.UNKNOWN):
            return category

        return self.classifier.classify(clause_text)


    # AI ATTEMPT
    def _attempt_ai_extraction(self, text: str) -> AIExtractionOutcome:
        """
        Single AI extraction call; every failure is captured in the outcome instead of raised
        """
        try:
            response = self.model_manager.inference(self._create_extraction_prompt(text),
                                                    temperature = self.generation["temperature"],
                                                    max_tokens  = self.generation["extraction_max_tokens"],
                                                    json_mode   = True,
                                                   )

            payload  = self._parse_ai_response(response)
            clauses  = self._normalize_ai_clauses(raw_clauses = payload["clauses"], source = text)

        except Exception as e:
            log_error(e, context = {"component" : "ClauseExtractor", "operation" : "ai_extraction"}, level = logging.WARNING)

            return AIExtractionOutcome.failed(e)

        log_info("AI clause extraction succeeded", num_clauses = len(clauses))

        return AIExtractionOutcome(success = True, clauses = clauses)


    @staticmethod
    def _parse_ai_response(response: Any) -> Dict[str, Any]:
        """
        Decode the model output and run the basic schema checks
        """
        if not isinstance(response, str):
            raise ValueError(f"Unexpected response type: {type(response).__name__}")

        # Clean response (remove markdown code blocks if present)
        cleaned = response.strip().replace("```json", "").replace("```", "").strip()
        payload = json.loads(cleaned)

        if not isinstance(payload, dict) or not isinstance(payload.get("clauses"), list):
            raise ValueError("Invalid clause extraction response format")

        return payload


    def _normalize_ai_clauses(self, raw_clauses: List[Any], source: str) -> List[Clause]:
        """
        Build clause records from the model output; positions are resolved against the source text,
        reported offsets are ignored
        """
        clauses  = list()
        seen_ids = set()

        for index, raw in enumerate(raw_clauses):
            if not isinstance(raw, dict):
                raise ValueError(f"Clause entry {index} is not an object")

            text = raw.get("text")

            if not isinstance(text, str) or not text.strip():
                raise ValueError(f"Clause entry {index} has no text")

            clause_id = str(raw.get("id") or f"clause_{index + 1}")

            if clause_id in seen_ids:
                raise ValueError(f"Duplicate clause id in AI response: {clause_id}")

            seen_ids.add(clause_id)

            # First occurrence in source, 0 when the model paraphrased
            start_position = max(source.find(text), 0)

            clauses.append(Clause(id             = clause_id,
                                  text           = text,
                                  start_position = start_position,
                                  end_position   = start_position + len(text),
                                  category       = self._coerce_category(raw.get("category") or raw.get("type")),
                                  confidence     = self._coerce_confidence(raw.get("confidence")),
                                 )
                          )

        return clauses


    @staticmethod
    def _coerce_category(value: Any) -> str:
        if isinstance(value, str):
            category = value.strip().lower()

            if ClauseTaxonomy.is_known_type(category):
                return category

        return ClauseTaxonomy.UNKNOWN


    def _coerce_confidence(self, value: Any) -> float:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return self.ai_default

        return self.scorer.normalize(value)


    def _create_extraction_prompt(self, text: str) -> str:
        clause_types = ", ".join(ClauseTaxonomy.CLAUSE_TYPES)

        return f"""You are a legal document analysis expert. Extract and categorize clauses from the following contract text.

CONTRACT TEXT:
{text}

INSTRUCTIONS:
- Identify individual clauses and their boundaries
- Categorize each clause into one of these types: {clause_types}
- Assign confidence scores (0.0-1.0) for each categorization
- Preserve exact clause text

Respond with JSON format:
{{
  "clauses": [
    {{
      "id": "clause_1",
      "text": "exact clause text",
      "type": "clause_type",
      "category": "clause_type",
      "confidence": 0.9,
      "startPosition": 100,
      "endPosition": 200
    }}
  ]
}}"""
