# DEPENDENCIES
from typing import Any
from typing import Dict
from typing import List
from typing import Optional
from dataclasses import field
from dataclasses import replace
from dataclasses import dataclass



@dataclass(frozen = True)
class Clause:
    """
    Clause record: a contiguous span of source text expressing one contractual provision

    Candidates produced by segmentation carry no category / confidence yet
    """
    id             : str
    text           : str
    start_position : int
    end_position   : int
    category       : Optional[str]   = None
    confidence     : Optional[float] = None


    @property
    def type(self) -> Optional[str]:
        """
        Alias of category kept for consumers reading 'type'
        """
        return self.category


    @property
    def is_classified(self) -> bool:
        return self.category is not None


    def with_classification(self, category: str, confidence: float) -> "Clause":
        """
        Return a classified copy; text and positions are never touched
        """
        return replace(self, category = category, confidence = confidence)


    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to dictionary for serialization
        """
        return {"id"            : self.id,
                "text"          : self.text,
                "type"          : self.type,
                "category"      : self.category,
                "confidence"    : self.confidence,
                "startPosition" : self.start_position,
                "endPosition"   : self.end_position,
               }


    def to_group_entry(self) -> Dict[str, Any]:
        """
        Subset of fields preserved inside a clause group
        """
        return {"id"            : self.id,
                "text"          : self.text,
                "confidence"    : self.confidence,
                "startPosition" : self.start_position,
                "endPosition"   : self.end_position,
               }


@dataclass
class ClauseGroup:
    """
    All clauses of one category
    """
    type    : str
    clauses : List[Clause] = field(default_factory = list)


    @property
    def count(self) -> int:
        return len(self.clauses)


    def add(self, clause: Clause):
        self.clauses.append(clause)


    def to_dict(self) -> Dict[str, Any]:
        return {"type"    : self.type,
                "clauses" : [clause.to_group_entry() for clause in self.clauses],
                "count"   : self.count,
               }


@dataclass
class ExtractionSummary:
    """
    Summary statistics for one extraction run
    """
    total_clauses         : int
    clause_types          : Dict[str, int]
    average_confidence    : float
    supported_types       : int
    identified_types      : int
    method                : str           = "rule_based"
    segmentation_strategy : Optional[str] = None


    def to_dict(self) -> Dict[str, Any]:
        return {"totalClauses"         : self.total_clauses,
                "clauseTypes"          : dict(self.clause_types),
                "averageConfidence"    : self.average_confidence,
                "supportedTypes"       : self.supported_types,
                "identifiedTypes"      : self.identified_types,
                "method"               : self.method,
                "segmentationStrategy" : self.segmentation_strategy,
               }


@dataclass
class ExtractionResult:
    """
    Extraction output: classified clauses, their grouping and summary
    """
    clauses : List[Clause]
    grouped : Dict[str, ClauseGroup]
    summary : ExtractionSummary


    def to_dict(self) -> Dict[str, Any]:
        return {"clauses" : [clause.to_dict() for clause in self.clauses],
                "grouped" : {category: group.to_dict() for category, group in self.grouped.items()},
                "summary" : self.summary.to_dict(),
               }


@dataclass
class ExtractionOptions:
    """
    Per-call extraction options
    """
    use_ai        : bool = True
    group_clauses : bool = True


@dataclass
class AIExtractionOutcome:
    """
    Result of the single AI extraction attempt: either clauses or the failure that triggers fallback
    """
    success : bool
    clauses : List[Clause]        = field(default_factory = list)
    error   : Optional[Exception] = None


    @classmethod
    def failed(cls, error: Exception) -> "AIExtractionOutcome":
        return cls(success = False, error = error)
