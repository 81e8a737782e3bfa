"""
Grammar engine turning spell strings into SpellDescriptors.

The grammar is flat: three mandatory words (Action, Element, Modifier)
followed by any number of extension phrases. It is parsed by a single-pass,
left-to-right state machine with no backtracking. Each state resolves the
next token only against the categories it permits, which is how a word
such as "terra" reads as an Element in slot two and as an Origin after "ex".

Key components:
- ParseState: states of the machine
- SpellParser: parser bound to a SpellDictionary
- ParseOutcome: result-or-error value for callers that prefer no exceptions
- parse / try_parse: module-level helpers using the shared dictionary
"""

import logging
from collections import deque
from enum import Enum
from typing import Optional

from pydantic import BaseModel

from .dictionary import SpellDictionary, get_dictionary
from .errors import (
    CoreComponent,
    ErrorReport,
    IncompleteExtensionPhraseError,
    MissingCoreComponentError,
    ParseError,
    UnexpectedComponentError,
    UnknownWordError,
)
from .tokenizer import tokenize
from .types import Category, Emphasis, Preposition, SpellDescriptor, Word

logger = logging.getLogger("lat-spells")


class ParseState(str, Enum):
    """States of the spell grammar, in the order they are visited."""
    EXPECT_ACTION = "expect_action"
    EXPECT_ELEMENT = "expect_element"
    EXPECT_MODIFIER = "expect_modifier"
    EXTENSION = "extension"
    DONE = "done"


# state -> (category to read, slot reported when missing, next state)
_CORE_STATES: dict[ParseState, tuple[Category, CoreComponent, ParseState]] = {
    ParseState.EXPECT_ACTION: (Category.ACTION, CoreComponent.ACTION, ParseState.EXPECT_ELEMENT),
    ParseState.EXPECT_ELEMENT: (Category.ELEMENT, CoreComponent.ELEMENT, ParseState.EXPECT_MODIFIER),
    ParseState.EXPECT_MODIFIER: (Category.MODIFIER, CoreComponent.MODIFIER, ParseState.EXTENSION),
}

_EXTENSION_CATEGORIES = (Category.PREPOSITION, Category.EMPHASIS)
_EXTENSION_EXPECTED = "Preposition or Emphasis"


class ParseOutcome(BaseModel):
    """Either a parsed spell or the error that stopped parsing, never both.

    Attributes:
        spell: The descriptor on success
        error: The error report on failure
    """
    spell: Optional[SpellDescriptor] = None
    error: Optional[ErrorReport] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class SpellParser:
    """Parses spell strings against a SpellDictionary.

    The parser holds no per-call state, so one instance can serve any
    number of threads.

    Example:
        >>> parser = SpellParser()
        >>> spell = parser.parse("Ure Ignis Magnus ex Terra")
        >>> spell.element, spell.origin
        (<Element.TERRA: 'Terra'>, <Origin.TERRA: 'Terra'>)
    """

    def __init__(self, dictionary: Optional[SpellDictionary] = None) -> None:
        self.dictionary = dictionary if dictionary is not None else get_dictionary()

    def parse(self, text: str) -> SpellDescriptor:
        """Parse a spell string.

        Args:
            text: Raw input; kept verbatim as ``source_text``

        Returns:
            The parsed SpellDescriptor

        Raises:
            UnknownWordError: A word is not in the dictionary
            MissingCoreComponentError: Input ended before the Spell Core was complete
            UnexpectedComponentError: A word's category is not allowed where it appears
            IncompleteExtensionPhraseError: A preposition is the last word
        """
        tokens = deque(tokenize(text))
        state = ParseState.EXPECT_ACTION
        core: dict[Category, Word] = {}
        target = None
        origin = None
        emphasis: list[Emphasis] = []

        while state is not ParseState.DONE:
            if state in _CORE_STATES:
                category, component, next_state = _CORE_STATES[state]
                if not tokens:
                    raise MissingCoreComponentError(component)
                core[category] = self._resolve(tokens.popleft(), category.value, (category,))
                logger.debug(f"{state.value}: {category.value} {core[category].value}")
                state = next_state
                continue

            if not tokens:
                state = ParseState.DONE
                continue

            token = tokens.popleft()
            word = self._resolve(token, _EXTENSION_EXPECTED, _EXTENSION_CATEGORIES)

            if word is Preposition.TO_TARGET:
                value = self._phrase_object(token, tokens, Category.TARGET)
                if target is not None:
                    raise UnexpectedComponentError(
                        "end of input or Origin/Emphasis", Category.TARGET.value
                    )
                target = value
            elif word is Preposition.FROM_ORIGIN:
                value = self._phrase_object(token, tokens, Category.ORIGIN)
                if origin is not None:
                    raise UnexpectedComponentError(
                        "end of input or Target/Emphasis", Category.ORIGIN.value
                    )
                origin = value
            else:
                emphasis.append(word)
            logger.debug(f"{state.value}: {token} -> {Category.of(word).value} {word.value}")

        return SpellDescriptor(
            action=core[Category.ACTION],
            element=core[Category.ELEMENT],
            modifier=core[Category.MODIFIER],
            target=target,
            origin=origin,
            emphasis_phrases=tuple(emphasis),
            source_text=text,
        )

    def try_parse(self, text: str) -> ParseOutcome:
        """Parse a spell string, returning errors as values instead of raising."""
        try:
            return ParseOutcome(spell=self.parse(text))
        except ParseError as e:
            logger.debug(f"Rejected spell {text!r}: {e}")
            return ParseOutcome(error=e.to_report())

    def _resolve(self, token: str, expected: str, allowed: tuple[Category, ...]) -> Word:
        word = self.dictionary.lookup_in(token, allowed)
        if word is not None:
            return word
        categories = self.dictionary.categories_of(token)
        if not categories:
            raise UnknownWordError(token)
        raise UnexpectedComponentError(expected, " or ".join(c.value for c in categories))

    def _phrase_object(self, preposition: str, tokens: deque, category: Category) -> Word:
        if not tokens:
            raise IncompleteExtensionPhraseError(preposition)
        return self._resolve(tokens.popleft(), category.value, (category,))


def parse(text: str) -> SpellDescriptor:
    """Parse a spell string with the shared dictionary. See SpellParser.parse."""
    return SpellParser().parse(text)


def try_parse(text: str) -> ParseOutcome:
    """Parse a spell string with the shared dictionary, returning a ParseOutcome."""
    return SpellParser().try_parse(text)
