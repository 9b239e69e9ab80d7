# src/spec_fidelity/fidelity/similarity.py

from dataclasses import dataclass
from typing import Protocol

from rapidfuzz.distance import Levenshtein


class SimilarityScorer(Protocol):
    """Lexical similarity between two strings.

    Implementations must be symmetric, deterministic and return a value
    in ``[0, 1]``.
    """

    def score(self, first: str, second: str) -> float: ...


class LevenshteinScorer:
    """Normalized edit-distance similarity, case-insensitive."""

    def score(self, first: str, second: str) -> float:
        return Levenshtein.normalized_similarity(first.lower(), second.lower())


@dataclass(frozen=True)
class BestMatch:
    best_match: str
    best_match_index: int
    rating: float


def calculate_similarity(
    first: str, second: str, scorer: SimilarityScorer | None = None
) -> float:
    return (scorer or LevenshteinScorer()).score(first, second)


def find_best_match(
    main: str, candidates: list[str], scorer: SimilarityScorer | None = None
) -> BestMatch:
    """Return the candidate most similar to ``main``.

    Ties keep the earliest candidate.

    Raises:
        ValueError: If ``candidates`` is empty.
    """
    if not candidates:
        raise ValueError("candidates must not be empty")

    scorer = scorer or LevenshteinScorer()
    best_index = 0
    best_rating = -1.0
    for index, candidate in enumerate(candidates):
        rating = scorer.score(main, candidate)
        if rating > best_rating:
            best_index, best_rating = index, rating

    return BestMatch(
        best_match=candidates[best_index],
        best_match_index=best_index,
        rating=best_rating,
    )
