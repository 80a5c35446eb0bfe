# DEPENDENCIES
from pathlib import Path
from pydantic_settings import BaseSettings
from pydantic_settings import SettingsConfigDict


class Settings(BaseSettings):
    """
    Application-wide settings: primary configuration source
    """
    # Application Info
    APP_NAME              : str   = "Clause Extraction Engine"
    APP_VERSION           : str   = "1.0.0"
    API_PREFIX            : str   = "/api/v1"

    # Server Configuration
    HOST                  : str   = "0.0.0.0"
    PORT                  : int   = 8000
    RELOAD                : bool  = False
    WORKERS               : int   = 1

    # CORS Settings
    CORS_ORIGINS          : list  = ["http://localhost:3000", "http://localhost:8000", "http://127.0.0.1:8000"]

    # AI Extraction Settings (optional first attempt, deterministic path always available)
    AI_EXTRACTION_ENABLED : bool  = False
    OLLAMA_BASE_URL       : str   = "http://localhost:11434"
    OLLAMA_MODEL          : str   = "llama3.1:8b"
    OLLAMA_TIMEOUT        : int   = 30
    OLLAMA_TEMPERATURE    : float = 0.1
    OLLAMA_MAX_TOKENS     : int   = 4000

    # Analysis Limits
    MAX_CONTRACT_LENGTH   : int   = 500000 # Maximum characters (500KB text)

    # Logging Settings
    LOG_LEVEL             : str   = "INFO"
    LOG_DIR               : Path  = Path("logs")
    LOG_APP_NAME          : str   = "clause_engine"

    model_config = SettingsConfigDict(env_file          = ".env",
                                      env_file_encoding = "utf-8",
                                      case_sensitive    = True,
                                      extra             = "ignore",
                                     )


# Global settings instance
settings = Settings()
