"""
Spell vocabulary and the process-wide default dictionary.

The default dictionary is built from the packaged ``vocabulary.yaml`` on
first use and shared read-only afterwards.
"""

from functools import lru_cache
from pathlib import Path

from .models import VocabularyEntry
from .resolver import Sense, SpellDictionary

VOCABULARY_PATH = Path(__file__).parent / "vocabulary.yaml"


@lru_cache(maxsize=None)
def get_dictionary() -> SpellDictionary:
    """Return the shared dictionary built from the packaged vocabulary."""
    return SpellDictionary.from_yaml(VOCABULARY_PATH)


__all__ = ["Sense", "SpellDictionary", "VocabularyEntry", "VOCABULARY_PATH", "get_dictionary"]
