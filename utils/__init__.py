# DEPENDENCIES
from .validators import InputValidator
from .logger import ClauseEngineLogger
from .validators import InvalidInputError


__all__ = ['InputValidator',
           'InvalidInputError',
           'ClauseEngineLogger',
          ]
