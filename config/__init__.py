# DEPENDENCIES
from .settings import settings
from .model_config import ModelConfig
from .clause_taxonomy import ClauseTaxonomy


__all__ = ['settings',
           'ModelConfig',
           'ClauseTaxonomy',
          ]
