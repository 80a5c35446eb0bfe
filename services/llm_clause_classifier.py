# DEPENDENCIES
from typing import Any
from utils.logger import log_debug
from config.model_config import ModelConfig
from config.clause_taxonomy import ClauseTaxonomy


class LLMClauseClassifier:
    """
    Optional AI classification step: asks the model for a single clause type

    Callable with a clause text; raises ValueError when the model answers outside the taxonomy so the caller
    can fall back to the deterministic classifier
    """
    def __init__(self, model_manager: Any):
        """
        Initialize LLM clause classifier

        Arguments:
        ----------
            model_manager { Any } : Inference backend exposing `is_loaded` and `inference(prompt, **options)`
        """
        self.model_manager = model_manager
        self.generation    = ModelConfig.LLM_GENERATION


    def __call__(self, clause_text: str) -> str:
        if not getattr(self.model_manager, "is_loaded", False):
            raise ValueError("Model not loaded")

        response = self.model_manager.inference(self._create_classification_prompt(clause_text),
                                                temperature = self.generation["temperature"],
                                                max_tokens  = self.generation["classification_max_tokens"],
                                               )

        if not isinstance(response, str):
            raise ValueError(f"Unexpected classification response type: {type(response).__name__}")

        category = response.strip().strip('"\'.').lower()

        if ClauseTaxonomy.is_known_type(category) or (category == ClauseTaxonomy.UNKNOWN):
            log_debug("AI clause classification", category = category)

            return category

        raise ValueError(f"Model returned a category outside the taxonomy: {category[:50]}")


    def _create_classification_prompt(self, clause_text: str) -> str:
        clause_types = ", ".join(ClauseTaxonomy.CLAUSE_TYPES)

        return (f"You are a legal AI assistant. Categorize the following contract clause into one of these types:\n\n"
                f"CLAUSE TYPES: {clause_types}\n\n"
                f"CLAUSE TEXT:\n{clause_text}\n\n"
                f"Respond with only the clause type from the list above. If the clause doesn't clearly fit any category, "
                f"respond with \"{ClauseTaxonomy.UNKNOWN}\"."
               )
