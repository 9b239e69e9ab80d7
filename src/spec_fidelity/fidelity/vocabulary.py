# src/spec_fidelity/fidelity/vocabulary.py

"""Word lists used by keyword extraction and step validation.

The lists are data, not code: each one is a YAML file mapping a language
code to a list of words. The shipped files live in ``data/``; a custom
directory may override any of them.
"""

import logging
from dataclasses import dataclass
from pathlib import Path

import yaml

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).parent / "data"

STOP_WORDS_FILE = "stop_words.yaml"
TESTING_TERMS_FILE = "testing_terms.yaml"
ACTION_VERBS_FILE = "action_verbs.yaml"


@dataclass(frozen=True)
class Vocabulary:
    stop_words: frozenset[str]
    testing_terms: frozenset[str]
    action_verbs: tuple[str, ...]


def load_vocabulary(directory: str | Path | None = None) -> Vocabulary:
    """Load all word lists, preferring files found in ``directory``."""
    base = Path(directory) if directory else None
    vocabulary = Vocabulary(
        stop_words=frozenset(_load_words(base, STOP_WORDS_FILE)),
        testing_terms=frozenset(_load_words(base, TESTING_TERMS_FILE)),
        # Ordered and deduplicated so step checks are deterministic
        action_verbs=tuple(dict.fromkeys(_load_words(base, ACTION_VERBS_FILE))),
    )
    logger.debug(
        "Loaded vocabulary: stop_words=%d, testing_terms=%d, action_verbs=%d",
        len(vocabulary.stop_words),
        len(vocabulary.testing_terms),
        len(vocabulary.action_verbs),
    )
    return vocabulary


def _load_words(base: Path | None, filename: str) -> list[str]:
    path = DATA_DIR / filename
    if base is not None and (base / filename).is_file():
        path = base / filename

    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a mapping of language -> words")

    words: list[str] = []
    for language, entries in data.items():
        if not isinstance(entries, list):
            raise ValueError(f"{path}: '{language}' must be a list of words")
        words.extend(str(entry).strip().lower() for entry in entries if entry)

    logger.debug("Loaded %d words from %s", len(words), path)
    return words
