# src/spec_fidelity/fidelity/analyzer.py

import logging
from dataclasses import dataclass

from .config import FidelityConfig
from .keywords import KeywordExtractor
from .similarity import LevenshteinScorer, SimilarityScorer
from .vocabulary import Vocabulary, load_vocabulary

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NewConceptsAnalysis:
    """Outcome of comparing a candidate text against its source.

    Transient. Never persisted.
    """

    has_new_concepts: bool
    new_concept_ratio: float
    new_keywords: list[str]
    total_keywords: int


class FidelityAnalyzer:
    """Measures how much of a text's vocabulary is not grounded in a source.

    A target keyword is grounded when it is a generic testing term, occurs
    verbatim among the source keywords, or is lexically similar to one of
    them above ``similarity_cutoff``. Holds no state between calls.
    """

    def __init__(
        self,
        config: FidelityConfig = FidelityConfig(),
        vocabulary: Vocabulary | None = None,
        scorer: SimilarityScorer | None = None,
    ) -> None:
        self.config = config
        self.vocabulary = vocabulary or load_vocabulary(config.vocabulary_dir)
        self.extractor = KeywordExtractor(
            self.vocabulary.stop_words, min_length=config.min_keyword_length
        )
        self._scorer = scorer or LevenshteinScorer()

    def extract_keywords(self, text: str) -> list[str]:
        return self.extractor.extract(text)

    def analyze(
        self,
        source_text: str,
        target_text: str,
        threshold: float | None = None,
    ) -> NewConceptsAnalysis:
        threshold = self.config.threshold if threshold is None else threshold

        source_keywords = self.extractor.extract(source_text)
        target_keywords = self.extractor.extract(target_text)
        return self.analyze_keywords(source_keywords, target_keywords, threshold)

    def analyze_keywords(
        self,
        source_keywords: list[str],
        target_keywords: list[str],
        threshold: float | None = None,
    ) -> NewConceptsAnalysis:
        """Same as :meth:`analyze` for keywords that are already extracted."""
        threshold = self.config.threshold if threshold is None else threshold
        source_set = set(source_keywords)

        new_keywords = [
            keyword
            for keyword in target_keywords
            if not self._is_grounded(keyword, source_keywords, source_set)
        ]
        ratio = len(new_keywords) / max(len(target_keywords), 1)

        logger.debug(
            "Drift analysis: target=%d, new=%d, ratio=%.2f",
            len(target_keywords),
            len(new_keywords),
            ratio,
        )

        return NewConceptsAnalysis(
            has_new_concepts=ratio > threshold,
            new_concept_ratio=ratio,
            new_keywords=new_keywords,
            total_keywords=len(target_keywords),
        )

    def _is_grounded(
        self, keyword: str, source_keywords: list[str], source_set: set[str]
    ) -> bool:
        if keyword in self.vocabulary.testing_terms or keyword in source_set:
            return True

        cutoff = self.config.similarity_cutoff
        return any(
            self._scorer.score(keyword, source) > cutoff for source in source_keywords
        )


def analyze_new_concepts(
    source_text: str,
    target_text: str,
    threshold: float = 0.3,
) -> NewConceptsAnalysis:
    """One-off analysis with the shipped vocabulary and default settings."""
    return FidelityAnalyzer().analyze(source_text, target_text, threshold)


def contains_new_concepts(
    source_text: str,
    target_text: str,
    threshold: float = 0.3,
) -> bool:
    return analyze_new_concepts(source_text, target_text, threshold).has_new_concepts
