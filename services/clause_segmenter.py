# DEPENDENCIES
import re
from typing import List
from typing import Tuple
from typing import Callable
from typing import Optional
from utils.logger import log_debug
from config.model_config import ModelConfig
from services.data_models import Clause
from utils.validators import InputValidator


EDGE_PATTERN = re.compile(r'\A[\s\ufeff]+|[\s\ufeff]+\Z')


class ClauseSegmenter:
    """
    Splits raw contract text into candidate clause spans

    Strategies are tried in order and the first one that yields candidates wins:
    1. structural : numbered / lettered sections, Section n, Article n, (a) sub-clauses, n.m sub-sections
    2. sentence   : sentence terminators
    3. keyword    : keyword up to the next period, grouped by keyword
    4. paragraph  : blank-line separated paragraphs
    5. whole      : the whole (stripped) document as a single candidate
    """
    def __init__(self):
        thresholds                 = ModelConfig.CLAUSE_SEGMENTATION

        self.structural_min_length = thresholds["structural_min_length"]
        self.sentence_min_length   = thresholds["sentence_min_length"]
        self.paragraph_min_length  = thresholds["paragraph_min_length"]

        self.structural_patterns   = [re.compile(pattern, flags) for pattern, flags in ModelConfig.STRUCTURAL_PATTERNS]
        self.keyword_patterns      = [re.compile(pattern, re.IGNORECASE) for pattern in ModelConfig.KEYWORD_ANCHORS]
        self.sentence_pattern      = re.compile(r'[.!?]+')
        self.paragraph_pattern     = re.compile(r'\n\s*\n')

        self.strategies            = [("structural", self._split_structural),
                                      ("sentence", self._split_sentences),
                                      ("keyword", self._split_keyword_anchored),
                                      ("paragraph", self._split_paragraphs),
                                      ("whole_document", self._whole_document),
                                     ]


    def segment(self, text: str) -> List[Clause]:
        """
        Segment text into unclassified clause candidates

        Arguments:
        ----------
            text { str } : Contract text

        Returns:
        --------
              { list }   : Clause candidates (id, text, positions only)
        """
        _, candidates = self.segment_with_strategy(text)

        return candidates


    def segment_with_strategy(self, text: str) -> Tuple[Optional[str], List[Clause]]:
        """
        Segment text and report which strategy produced the candidates

        Returns:
        --------
            { tuple } : (strategy_name, candidates); strategy_name is None for empty input
        """
        InputValidator.ensure_text(text, "clause segmentation")

        if not self._trim(text):
            return None, []

        for name, strategy in self.strategies:
            fragments = strategy(text)

            if fragments:
                candidates = self._build_candidates(source = text, fragments = fragments)

                log_debug("Segmentation complete",
                          strategy       = name,
                          num_candidates = len(candidates),
                         )

                return name, candidates

        return None, []


    def get_strategy_names(self) -> List[str]:
        return [name for name, _ in self.strategies]


    def _split_structural(self, text: str) -> List[str]:
        """
        Cumulative split: every pattern is applied to every fragment produced by the previous one
        """
        sections = [text]

        for pattern in self.structural_patterns:
            new_sections = list()

            for section in sections:
                new_sections.extend(pattern.split(section))

            sections = new_sections

        return self._keep_longer_than(sections, self.structural_min_length)


    def _split_sentences(self, text: str) -> List[str]:
        return self._keep_longer_than(self.sentence_pattern.split(text), self.sentence_min_length)


    def _split_keyword_anchored(self, text: str) -> List[str]:
        """
        One fragment per keyword match, ordered by keyword pattern first and match position second
        """
        fragments = list()

        for pattern in self.keyword_patterns:
            for match in pattern.findall(text):
                stripped = self._trim(match)

                if stripped:
                    fragments.append(stripped)

        return fragments


    def _split_paragraphs(self, text: str) -> List[str]:
        return self._keep_longer_than(self.paragraph_pattern.split(text), self.paragraph_min_length)


    def _whole_document(self, text: str) -> List[str]:
        stripped = self._trim(text)

        return [stripped] if stripped else []


    @staticmethod
    def _trim(fragment: str) -> str:
        """
        Strip surrounding whitespace and byte-order marks
        """
        return EDGE_PATTERN.sub('', fragment)


    @staticmethod
    def _keep_longer_than(fragments: List[str], min_length: int) -> List[str]:
        stripped = (ClauseSegmenter._trim(fragment) for fragment in fragments)

        return [fragment for fragment in stripped if (len(fragment) > min_length)]


    @staticmethod
    def _build_candidates(source: str, fragments: List[str]) -> List[Clause]:
        """
        Build candidates with sequential ids; positions resolve to the first occurrence in source
        """
        candidates = list()

        for index, fragment in enumerate(fragments, start = 1):
            start_position = source.find(fragment)

            if (start_position < 0):
                start_position = 0

            candidates.append(Clause(id             = f"clause_{index}",
                                     text           = fragment,
                                     start_position = start_position,
                                     end_position   = start_position + len(fragment),
                                    )
                             )

        return candidates
