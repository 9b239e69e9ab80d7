from .analyzer import (
    FidelityAnalyzer,
    NewConceptsAnalysis,
    analyze_new_concepts,
    contains_new_concepts,
)
from .config import FidelityConfig
from .keywords import KeywordExtractor
from .similarity import (
    BestMatch,
    LevenshteinScorer,
    SimilarityScorer,
    calculate_similarity,
    find_best_match,
)
from .vocabulary import Vocabulary, load_vocabulary

__all__ = [
    "BestMatch",
    "FidelityAnalyzer",
    "FidelityConfig",
    "KeywordExtractor",
    "LevenshteinScorer",
    "NewConceptsAnalysis",
    "SimilarityScorer",
    "Vocabulary",
    "analyze_new_concepts",
    "calculate_similarity",
    "contains_new_concepts",
    "find_best_match",
    "load_vocabulary",
]
