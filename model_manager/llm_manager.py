# DEPENDENCIES
import time
import requests
from typing import Any
from typing import Dict
from typing import List
from typing import Optional
from dataclasses import dataclass
from utils.logger import log_info
from utils.logger import log_error
from config.settings import settings
from utils.logger import ClauseEngineLogger


@dataclass
class LLMResponse:
    """
    Standardized LLM response
    """
    text            : str
    model           : str
    tokens_used     : int
    latency_seconds : float
    success         : bool
    error_message   : Optional[str]            = None
    raw_response    : Optional[Dict[str, Any]] = None


    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to dictionary
        """
        return {"text"            : self.text,
                "model"           : self.model,
                "tokens_used"     : self.tokens_used,
                "latency_seconds" : round(self.latency_seconds, 3),
                "success"         : self.success,
                "error_message"   : self.error_message,
               }


class LLMManager:
    """
    Inference backend for the optional AI extraction attempt, served by a local Ollama server

    Exposes `is_loaded` and `inference(prompt, **options) -> str`, the two members the clause extractor relies on
    """
    def __init__(self, base_url: Optional[str] = None, model: Optional[str] = None, timeout: Optional[int] = None,
                 temperature: Optional[float] = None, max_tokens: Optional[int] = None):
        """
        Initialize LLM Manager

        Arguments:
        ----------
            base_url    : Ollama server URL (default: settings.OLLAMA_BASE_URL)

            model       : Model name (default: settings.OLLAMA_MODEL)

            timeout     : Request timeout in seconds (default: settings.OLLAMA_TIMEOUT)

            temperature : Default sampling temperature

            max_tokens  : Default maximum tokens to generate
        """
        self.base_url        = (base_url or settings.OLLAMA_BASE_URL).rstrip("/")
        self.model           = model or settings.OLLAMA_MODEL
        self.timeout         = timeout or settings.OLLAMA_TIMEOUT
        self.temperature     = settings.OLLAMA_TEMPERATURE if temperature is None else temperature
        self.max_tokens      = max_tokens or settings.OLLAMA_MAX_TOKENS

        # Lifecycle state
        self.is_loaded       = False
        self.health_status   = "unknown"
        self.load_time       = None
        self.inference_count = 0
        self.failed_requests = 0

        log_info("LLMManager initialized",
                 base_url = self.base_url,
                 model    = self.model,
                 timeout  = self.timeout,
                )


    # AVAILABILITY CHECKS
    def check_available(self) -> bool:
        """
        Check if Ollama server is reachable
        """
        try:
            response = requests.get(f"{self.base_url}/api/tags", timeout = self.timeout)

            return (response.status_code == 200)

        except requests.RequestException as e:
            log_error(e, context = {"component" : "LLMManager", "operation" : "check_available"})

            return False


    def list_models(self) -> List[str]:
        """
        List available local Ollama models
        """
        try:
            response = requests.get(f"{self.base_url}/api/tags", timeout = self.timeout)
            response.raise_for_status()

            models   = [model['name'] for model in response.json().get('models', [])]

            log_info("Ollama models listed", count = len(models), models = models)

            return models

        except (requests.RequestException, ValueError, KeyError) as e:
            log_error(e, context = {"component" : "LLMManager", "operation" : "list_models"})

            return []


    # LIFECYCLE
    def load_model(self) -> bool:
        """
        Mark the model ready when the server is up and the configured model is present
        """
        if not self.check_available():
            self.is_loaded     = False
            self.health_status = "unavailable"

            log_info("Ollama server not available, AI extraction disabled", base_url = self.base_url)

            return False

        models = self.list_models()

        if not any(name == self.model or name.startswith(f"{self.model}:") for name in models):
            self.is_loaded     = False
            self.health_status = "model_missing"

            log_info("Configured model not found on Ollama server", model = self.model, available = models)

            return False

        self.is_loaded     = True
        self.health_status = "healthy"
        self.load_time     = time.time()

        log_info("Model ready for inference", model = self.model)

        return True


    def unload_model(self):
        self.is_loaded     = False
        self.health_status = "unloaded"

        log_info("Model unloaded", model = self.model)


    def get_model_status(self) -> Dict[str, Any]:
        return {"model"           : self.model,
                "base_url"        : self.base_url,
                "is_loaded"       : self.is_loaded,
                "health_status"   : self.health_status,
                "inference_count" : self.inference_count,
                "failed_requests" : self.failed_requests,
               }


    # COMPLETION
    @ClauseEngineLogger.log_execution_time("llm_complete")
    def complete(self, prompt: str, temperature: Optional[float] = None, max_tokens: Optional[int] = None, json_mode: bool = False) -> LLMResponse:
        """
        Single completion request against Ollama

        Failures are logged and returned as an unsuccessful LLMResponse; no retries are made here

        Arguments:
        ----------
            prompt      : User prompt

            temperature : Sampling temperature (0.0-1.0)

            max_tokens  : Maximum tokens to generate

            json_mode   : Force JSON output

        Returns:
        --------
            { LLMResponse } : LLMResponse object
        """
        start_time  = time.time()
        temperature = self.temperature if temperature is None else temperature
        max_tokens  = max_tokens or self.max_tokens

        payload     = {"model"   : self.model,
                       "prompt"  : prompt,
                       "stream"  : False,
                       "options" : {"temperature": temperature, "num_predict": max_tokens},
                      }

        if json_mode:
            payload["format"] = "json"

        log_info("Calling Ollama API",
                 model         = self.model,
                 prompt_length = len(prompt),
                 json_mode     = json_mode,
                )

        try:
            response = requests.post(f"{self.base_url}/api/generate", json = payload, timeout = self.timeout)
            response.raise_for_status()

            result   = response.json()

        except (requests.RequestException, ValueError) as e:
            self.failed_requests += 1

            log_error(e, context = {"component" : "LLMManager", "operation" : "complete", "model" : self.model})

            return LLMResponse(text            = "",
                               model           = self.model,
                               tokens_used     = 0,
                               latency_seconds = time.time() - start_time,
                               success         = False,
                               error_message   = str(e),
                              )

        generated_text        = result.get('response', '')
        latency               = time.time() - start_time

        # Estimate tokens (rough approximation)
        tokens_used           = len(prompt.split()) + len(generated_text.split())
        self.inference_count += 1

        log_info("Ollama completion successful",
                 model           = self.model,
                 tokens_used     = tokens_used,
                 latency_seconds = round(latency, 3),
                )

        return LLMResponse(text            = generated_text,
                           model           = self.model,
                           tokens_used     = tokens_used,
                           latency_seconds = latency,
                           success         = True,
                           raw_response    = result,
                          )


    def inference(self, prompt: str, temperature: Optional[float] = None, max_tokens: Optional[int] = None, json_mode: bool = False) -> str:
        """
        Run inference and return the generated text

        Raises ValueError when the model is not loaded or the completion failed
        """
        if not self.is_loaded:
            raise ValueError("Model not loaded. Call load_model() first.")

        if not prompt or not isinstance(prompt, str):
            raise ValueError("Valid prompt string is required for inference")

        response = self.complete(prompt      = prompt,
                                 temperature = temperature,
                                 max_tokens  = max_tokens,
                                 json_mode   = json_mode,
                                )

        if not response.success:
            raise ValueError(f"Model inference failed: {response.error_message}")

        return response.text
