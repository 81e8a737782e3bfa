"""
Spell dictionary with case-insensitive, category-filtered lookup.
"""

import logging
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any, Optional

import yaml

from ..types import Category, Word
from .models import VocabularyEntry

logger = logging.getLogger("lat-spells")

Sense = tuple[Category, Word]


class SpellDictionary:
    """Resolves surface word forms to their (category, variant) senses.

    The dictionary is built once from a list of VocabularyEntry objects and
    offers no way to change it afterwards, so a single instance can be shared
    freely between threads.

    Structural decisions go through ``lookup_in`` with the set of categories
    the caller is prepared to accept. ``lookup`` returns every sense of a
    word and is meant for diagnostics.

    Example:
        >>> d = SpellDictionary.from_yaml(Path("vocabulary.yaml"))
        >>> d.lookup_in("Terra", [Category.ELEMENT])
        <Element.TERRA: 'Terra'>
        >>> d.lookup_in("terra", [Category.ORIGIN])
        <Origin.TERRA: 'Terra'>
        >>> d.lookup_in("terra", [Category.ACTION]) is None
        True
    """

    def __init__(self, entries: Iterable[VocabularyEntry]) -> None:
        """Build the lookup table.

        Args:
            entries: Vocabulary entries to index

        Raises:
            ValueError: If a form maps to two variants of one category, or a
                preposition form also belongs to another category
        """
        lookup: dict[str, dict[Category, Word]] = {}

        for entry in entries:
            word = entry.word
            for form in entry.forms:
                key = self._normalize(form)
                senses = lookup.setdefault(key, {})
                existing = senses.get(entry.category)
                if existing is not None and existing != word:
                    raise ValueError(
                        f"form {form!r} maps to both {existing.value} and {word.value} "
                        f"in category {entry.category.value}"
                    )
                senses[entry.category] = word

        for key, senses in lookup.items():
            if Category.PREPOSITION in senses and len(senses) > 1:
                raise ValueError(f"preposition {key!r} cannot belong to another category")

        self._lookup: dict[str, frozenset[Sense]] = {
            key: frozenset(senses.items()) for key, senses in lookup.items()
        }
        logger.debug(f"📖 Spell dictionary built with {len(self._lookup)} forms")

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "SpellDictionary":
        """Build a dictionary from already-parsed vocabulary data.

        Expected format:
            words:
              - category: Element
                variant: Terra
                forms: [terra]

        Raises:
            ValueError: If the data has no 'words' key or invalid entries
        """
        if not data or "words" not in data:
            raise ValueError("vocabulary data must contain a 'words' key")
        return cls(VocabularyEntry(**item) for item in data["words"])

    @classmethod
    def from_yaml(cls, path: Path) -> "SpellDictionary":
        """Build a dictionary from a YAML vocabulary file.

        Raises:
            FileNotFoundError: If the file doesn't exist
            yaml.YAMLError: If the YAML is malformed
            ValueError: If required fields are missing or invalid
        """
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
        logger.debug(f"📂 Loading vocabulary from {path}")
        return cls.from_mapping(data)

    @staticmethod
    def _normalize(word: str) -> str:
        return word.strip().lower()

    def __len__(self) -> int:
        return len(self._lookup)

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self._normalize(word) in self._lookup

    def lookup(self, word: str) -> frozenset[Sense]:
        """Return every (category, variant) sense of a word.

        Unknown words give an empty set rather than an error.
        """
        return self._lookup.get(self._normalize(word), frozenset())

    def lookup_in(self, word: str, allowed_categories: Iterable[Category]) -> Optional[Word]:
        """Resolve a word restricted to the categories a caller accepts.

        When the word belongs to several of the allowed categories the one
        listed first in ``allowed_categories`` wins.

        Args:
            word: Surface form, any case
            allowed_categories: Acceptable categories, in order of precedence

        Returns:
            The matching variant, or None if the word is unknown or belongs
            only to other categories
        """
        senses = dict(self.lookup(word))
        for category in allowed_categories:
            if category in senses:
                return senses[category]
        return None

    def categories_of(self, word: str) -> list[Category]:
        """Return the categories a word belongs to, in declaration order."""
        found = {category for category, _ in self.lookup(word)}
        return [category for category in Category if category in found]

    def forms(self, category: Optional[Category] = None) -> list[str]:
        """List known surface forms, optionally restricted to one category."""
        return sorted(
            key
            for key, senses in self._lookup.items()
            if category is None or any(c == category for c, _ in senses)
        )
