# src/spec_fidelity/fidelity/keywords.py

import re
from collections.abc import Iterable

# Slovak letters count as word characters so target-language words stay whole
_NON_WORD = re.compile(r"[^a-z0-9áäčďéíĺľňóôŕšťúýž\s]")
_WHITESPACE = re.compile(r"\s+")


class KeywordExtractor:
    """Turns text into a deduplicated, order-preserving keyword list.

    Deterministic and side-effect free. Empty text yields an empty list.
    """

    def __init__(self, stop_words: Iterable[str], min_length: int = 4) -> None:
        self._stop_words = frozenset(stop_words)
        self._min_length = min_length

    def extract(self, text: str) -> list[str]:
        cleaned = _NON_WORD.sub(" ", (text or "").lower())
        words = (
            word
            for word in _WHITESPACE.split(cleaned)
            if len(word) >= self._min_length and word not in self._stop_words
        )
        return list(dict.fromkeys(words))
