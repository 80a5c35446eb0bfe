# app.py
# DEPENDENCIES
import time
import uvicorn
from typing import Any
from typing import Dict
from typing import List
from typing import Optional
from pydantic import Field
from fastapi import FastAPI
from fastapi import Request
from datetime import datetime
from pydantic import BaseModel
from fastapi import HTTPException
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
from fastapi.middleware.cors import CORSMiddleware
from utils.logger import log_info
from utils.logger import log_error
from config.settings import settings
from utils.validators import InputValidator
from utils.validators import InvalidInputError
from config.clause_taxonomy import ClauseTaxonomy
from model_manager.llm_manager import LLMManager
from services.data_models import ExtractionOptions
from services.clause_extractor import ClauseExtractor


# ============================================================================
# REQUEST / RESPONSE MODELS
# ============================================================================
class HealthResponse(BaseModel):
    status          : str
    version         : str
    timestamp       : str
    ai_model_loaded : bool


class ExtractionRequest(BaseModel):
    text          : str  = Field(..., description = "Contract text to extract clauses from")
    use_ai        : bool = Field(True, description = "Attempt AI extraction first when a model is loaded")
    group_clauses : bool = Field(True, description = "Include clauses grouped by type")


class ClassificationRequest(BaseModel):
    text : str = Field(..., description = "Single clause text to classify")


class ClassificationResponse(BaseModel):
    category   : str
    confidence : float
    scores     : Dict[str, int]


class ClauseTypesResponse(BaseModel):
    clause_types   : List[str]
    keyword_counts : Dict[str, int]
    count          : int


# ============================================================================
# SERVICE HOLDER
# ============================================================================
class ExtractionService:
    """
    Holds the extractor and (when enabled) the inference backend for the app lifetime
    """
    def __init__(self):
        self.model_manager : Optional[LLMManager] = None
        self.extractor                            = ClauseExtractor()


    def initialize(self):
        if not settings.AI_EXTRACTION_ENABLED:
            log_info("AI extraction disabled, using rule-based extraction only")
            return

        model_manager = LLMManager()

        if model_manager.load_model():
            self.model_manager = model_manager
            self.extractor     = ClauseExtractor(model_manager = model_manager)


    def shutdown(self):
        if self.model_manager is not None:
            self.model_manager.unload_model()


    def get_status(self) -> Dict[str, Any]:
        return {"ai_model_loaded" : self.extractor.is_ai_ready(),
                "model"           : self.model_manager.get_model_status() if self.model_manager else None,
               }


service = ExtractionService()


@asynccontextmanager
async def lifespan(app: FastAPI):
    log_info(f"Starting {settings.APP_NAME}", version = settings.APP_VERSION)
    service.initialize()

    yield

    service.shutdown()
    log_info(f"Stopped {settings.APP_NAME}")


app = FastAPI(title    = settings.APP_NAME,
              version  = settings.APP_VERSION,
              docs_url = f"{settings.API_PREFIX}/docs",
              lifespan = lifespan,
             )

app.add_middleware(CORSMiddleware,
                   allow_origins     = settings.CORS_ORIGINS,
                   allow_credentials = True,
                   allow_methods     = ["*"],
                   allow_headers     = ["*"],
                  )


# ============================================================================
# ENDPOINTS
# ============================================================================
@app.get(f"{settings.API_PREFIX}/health", response_model = HealthResponse)
async def health_check():
    return HealthResponse(status          = "healthy",
                          version         = settings.APP_VERSION,
                          timestamp       = datetime.now().isoformat(),
                          ai_model_loaded = service.extractor.is_ai_ready(),
                         )


@app.get(f"{settings.API_PREFIX}/status")
async def get_status():
    return service.get_status()


@app.get(f"{settings.API_PREFIX}/clauses/types", response_model = ClauseTypesResponse)
async def get_clause_types():
    clause_types = service.extractor.get_supported_clause_types()

    return ClauseTypesResponse(clause_types   = clause_types,
                               keyword_counts = ClauseTaxonomy.get_keyword_counts(),
                               count          = len(clause_types),
                              )


@app.post(f"{settings.API_PREFIX}/clauses/extract")
def extract_clauses(request: ExtractionRequest):
    is_valid, message = InputValidator.check_length(request.text)

    if not is_valid:
        raise HTTPException(status_code = 413, detail = message)

    result = service.extractor.extract(request.text,
                                       ExtractionOptions(use_ai        = request.use_ai,
                                                         group_clauses = request.group_clauses,
                                                        ),
                                      )

    return result.to_dict()


@app.post(f"{settings.API_PREFIX}/clauses/classify", response_model = ClassificationResponse)
def classify_clause(request: ClassificationRequest):
    extractor = service.extractor
    category  = extractor.classify(request.text)

    return ClassificationResponse(category   = category,
                                  confidence = extractor.score(request.text, category),
                                  scores     = extractor.classifier.score_categories(request.text),
                                 )


# ============================================================================
# ERROR HANDLING & MIDDLEWARE
# ============================================================================
@app.exception_handler(InvalidInputError)
async def invalid_input_handler(request: Request, exc: InvalidInputError):
    return JSONResponse(status_code = 400,
                        content     = {"error"     : "invalid_input",
                                       "detail"    : str(exc),
                                       "timestamp" : datetime.now().isoformat(),
                                      },
                       )


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    log_error(exc, context = {"component" : "app", "path" : request.url.path})

    return JSONResponse(status_code = 500,
                        content     = {"error"     : "internal_error",
                                       "detail"    : "Unexpected error during clause extraction",
                                       "timestamp" : datetime.now().isoformat(),
                                      },
                       )


@app.middleware("http")
async def log_requests(request: Request, call_next):
    start_time = time.time()
    response   = await call_next(request)

    log_info("Request handled",
             method      = request.method,
             path        = request.url.path,
             status_code = response.status_code,
             duration    = round(time.time() - start_time, 3),
            )

    return response


def main():
    uvicorn.run("app:app",
                host    = settings.HOST,
                port    = settings.PORT,
                reload  = settings.RELOAD,
                workers = settings.WORKERS,
               )


if __name__ == "__main__":
    main()
