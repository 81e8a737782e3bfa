"""
Lat spells - a parser for pseudo-Latin spell incantations.

    >>> from lat_spells import parse
    >>> parse("Ure ignis magno").modifier
    <Modifier.MAGNUS: 'Magnus'>
"""

from .dictionary import SpellDictionary, VocabularyEntry, get_dictionary
from .errors import (
    CoreComponent,
    ErrorKind,
    ErrorReport,
    IncompleteExtensionPhraseError,
    MissingCoreComponentError,
    ParseError,
    UnexpectedComponentError,
    UnexpectedEofError,
    UnknownWordError,
)
from .grammar import ParseOutcome, ParseState, SpellParser, parse, try_parse
from .tokenizer import tokenize
from .types import (
    Action,
    Category,
    Element,
    Emphasis,
    Modifier,
    Origin,
    Preposition,
    SpellDescriptor,
    Target,
)

try:
    from importlib.metadata import version as _get_version
    __version__ = _get_version("lat-spells")
except Exception:
    __version__ = "0.1.0"  # Fallback if metadata unavailable

__all__ = [
    "Action",
    "Category",
    "CoreComponent",
    "Element",
    "Emphasis",
    "ErrorKind",
    "ErrorReport",
    "IncompleteExtensionPhraseError",
    "MissingCoreComponentError",
    "Modifier",
    "Origin",
    "ParseError",
    "ParseOutcome",
    "ParseState",
    "Preposition",
    "SpellDescriptor",
    "SpellDictionary",
    "SpellParser",
    "Target",
    "UnexpectedComponentError",
    "UnexpectedEofError",
    "UnknownWordError",
    "VocabularyEntry",
    "get_dictionary",
    "parse",
    "tokenize",
    "try_parse",
]
