# DEPENDENCIES
import sys
import time
import json
import logging
import traceback
from typing import Any
from typing import Dict
from pathlib import Path
from typing import Optional
from functools import wraps
from datetime import datetime
from config.settings import settings



class ClauseEngineLogger:
    """
    Logging for the clause extraction engine
    Features:
    - Structured JSON messages
    - Separate files for errors and performance
    - Execution time decorator
    """
    _loggers  : Dict[str, logging.Logger] = dict()
    _log_dir  : Optional[Path]            = None
    _app_name : str                       = settings.LOG_APP_NAME

    # Log levels
    DEBUG                                 = logging.DEBUG
    INFO                                  = logging.INFO
    WARNING                               = logging.WARNING
    ERROR                                 = logging.ERROR


    @classmethod
    def setup(cls, log_dir: Optional[Path] = None, app_name: Optional[str] = None, level: Optional[str] = None):
        """
        Setup logging system

        Arguments:
        ----------
            log_dir  { Path } : Directory for log files (default: settings.LOG_DIR)

            app_name { str }  : Application name used for logger names and log files

            level    { str }  : Level name for the main logger (default: settings.LOG_LEVEL)
        """
        cls._log_dir  = Path(log_dir or settings.LOG_DIR)
        cls._app_name = app_name or settings.LOG_APP_NAME
        cls._log_dir.mkdir(parents = True, exist_ok = True)

        main_level    = logging.getLevelName((level or settings.LOG_LEVEL).upper())

        if not isinstance(main_level, int):
            main_level = logging.INFO

        # Main logger
        cls._create_logger(name     = cls._app_name,
                           log_file = cls._log_dir / f"{cls._app_name}.log",
                           level    = main_level,
                          )

        # Error logger
        cls._create_logger(name     = f"{cls._app_name}.error",
                           log_file = cls._log_dir / f"{cls._app_name}_error.log",
                           level    = logging.ERROR,
                          )

        # Performance logger
        cls._create_logger(name     = f"{cls._app_name}.performance",
                           log_file = cls._log_dir / f"{cls._app_name}_performance.log",
                           level    = logging.INFO,
                          )


    @classmethod
    def _create_logger(cls, name: str, log_file: Path, level: int) -> logging.Logger:
        """
        Create and configure a logger
        """
        logger             = logging.getLogger(name)
        logger.setLevel(level)
        logger.propagate   = False

        # Clear existing handlers
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)

        # File handler
        file_handler       = logging.FileHandler(log_file, encoding = "utf-8")
        file_handler.setLevel(level)

        # Console handler (for warnings and above)
        console_handler    = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(logging.WARNING)

        formatter          = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s', datefmt = '%Y-%m-%d %H:%M:%S')
        file_handler.setFormatter(formatter)
        console_handler.setFormatter(formatter)

        logger.addHandler(file_handler)
        logger.addHandler(console_handler)

        cls._loggers[name] = logger

        return logger


    @classmethod
    def get_logger(cls, name: Optional[str] = None) -> logging.Logger:
        """
        Get logger by name (lazy initialization on first use)
        """
        name = name or cls._app_name

        if name not in cls._loggers:
            cls.setup()

        return cls._loggers.get(name, logging.getLogger(name))


    @classmethod
    def log_structured(cls, level: int, message: str, **kwargs):
        """
        Log structured data as JSON

        Arguments:
        ----------
            level   { int } : Log level

            message { str } : Log message

            **kwargs        : Additional structured data
        """
        logger   = cls.get_logger()

        log_data = {"timestamp" : datetime.now().isoformat(),
                    "message"   : message,
                    **kwargs
                   }

        logger.log(level, json.dumps(log_data, default = str))


    @classmethod
    def log_error(cls, error: Exception, context: Dict[str, Any] = None, level: int = logging.ERROR):
        """
        Log error with traceback and context

        Arguments:
        ----------
            error   { Exception } : Exception object

            context   { dict }    : Additional context dictionary

            level     { int }     : Log level (absorbed failures are logged as warnings)
        """
        if level >= logging.ERROR:
            logger = cls.get_logger(f"{cls._app_name}.error")

        else:
            logger = cls.get_logger()

        error_data = {"timestamp"     : datetime.now().isoformat(),
                      "error_type"    : type(error).__name__,
                      "error_message" : str(error),
                      "traceback"     : traceback.format_exc(),
                      "context"       : context or {},
                     }

        logger.log(level, json.dumps(error_data, indent = 2, default = str))


    @classmethod
    def log_performance(cls, operation: str, duration: float, **metrics):
        """
        Log performance metrics

        Arguments:
        ----------
            operation { str }   : Operation name

            duration  { float } : Duration in seconds

            **metrics           : Additional metrics
        """
        perf_logger = cls.get_logger(f"{cls._app_name}.performance")

        perf_data   = {"timestamp"        : datetime.now().isoformat(),
                       "operation"        : operation,
                       "duration_seconds" : round(duration, 3),
                       **metrics
                      }

        perf_logger.info(json.dumps(perf_data, default = str))


    @staticmethod
    def log_execution_time(operation_name: str = None):
        """
        Decorator to log execution time of functions
        """
        def decorator(func):
            @wraps(func)
            def wrapper(*args, **kwargs):
                op_name    = operation_name or func.__name__
                start_time = time.time()

                try:
                    result   = func(*args, **kwargs)
                    duration = time.time() - start_time

                    ClauseEngineLogger.log_performance(operation = op_name,
                                                       duration  = duration,
                                                       status    = "success",
                                                      )

                    return result

                except Exception as e:
                    duration = time.time() - start_time

                    ClauseEngineLogger.log_performance(operation = op_name,
                                                       duration  = duration,
                                                       status    = "error",
                                                       error     = str(e),
                                                      )

                    ClauseEngineLogger.log_error(e, context = {"operation" : op_name})
                    raise

            return wrapper

        return decorator



# Convenience functions
def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get logger instance
    """
    return ClauseEngineLogger.get_logger(name)


def log_info(message: str, **kwargs):
    """
    Log info message
    """
    ClauseEngineLogger.log_structured(logging.INFO, message, **kwargs)


def log_warning(message: str, **kwargs):
    """
    Log warning message
    """
    ClauseEngineLogger.log_structured(logging.WARNING, message, **kwargs)


def log_error(error: Exception, context: Dict[str, Any] = None, level: int = logging.ERROR):
    """
    Log error with context
    """
    ClauseEngineLogger.log_error(error, context, level)


def log_debug(message: str, **kwargs):
    """
    Log debug message
    """
    ClauseEngineLogger.log_structured(logging.DEBUG, message, **kwargs)
