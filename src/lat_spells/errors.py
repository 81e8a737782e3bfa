"""
Parse error taxonomy.

Every failure of the grammar engine is raised as a subclass of ParseError.
Errors are terminal: parsing stops at the first one and no partial
descriptor is ever attached.
"""

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel


class CoreComponent(str, Enum):
    """A mandatory slot of the Spell Core."""
    ACTION = "Action"
    ELEMENT = "Element"
    MODIFIER = "Modifier"


class ErrorKind(str, Enum):
    """Tag identifying the kind of a ParseError."""
    UNKNOWN_WORD = "unknown_word"
    MISSING_CORE_COMPONENT = "missing_core_component"
    UNEXPECTED_COMPONENT = "unexpected_component"
    INCOMPLETE_EXTENSION_PHRASE = "incomplete_extension_phrase"
    UNEXPECTED_EOF = "unexpected_eof"


class ErrorReport(BaseModel):
    """Serializable view of a ParseError for callers across a boundary.

    Attributes:
        kind: Which error this is
        message: Human-readable message
        word: Offending word (unknown word or dangling preposition)
        component: Missing Spell Core slot
        expected: What the current state accepts
        found: What the word actually is
    """
    kind: ErrorKind
    message: str
    word: Optional[str] = None
    component: Optional[CoreComponent] = None
    expected: Optional[str] = None
    found: Optional[str] = None


class ParseError(Exception):
    """Base class for all spell parse errors."""

    kind: ErrorKind

    def _fields(self) -> dict[str, Any]:
        return {}

    def to_report(self) -> ErrorReport:
        """Convert the error into a serializable ErrorReport."""
        return ErrorReport(kind=self.kind, message=str(self), **self._fields())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParseError):
            return NotImplemented
        return self.kind == other.kind and self._fields() == other._fields()

    def __hash__(self) -> int:
        return hash((self.kind, tuple(sorted(self._fields().items()))))

    def __repr__(self) -> str:
        args = ", ".join(f"{k}={v!r}" for k, v in self._fields().items())
        return f"{type(self).__name__}({args})"


class UnknownWordError(ParseError):
    """A word not present in the dictionary under any category."""

    kind = ErrorKind.UNKNOWN_WORD

    def __init__(self, word: str) -> None:
        self.word = word
        super().__init__(f'Parse Error: Unknown word "{word}".')

    def _fields(self) -> dict[str, Any]:
        return {"word": self.word}


class MissingCoreComponentError(ParseError):
    """Input ended before a Spell Core slot was filled."""

    kind = ErrorKind.MISSING_CORE_COMPONENT

    def __init__(self, component: CoreComponent) -> None:
        self.component = component
        super().__init__(f"Parse Error: Missing core spell component {component.value}.")

    def _fields(self) -> dict[str, Any]:
        return {"component": self.component}


class UnexpectedComponentError(ParseError):
    """A known word in a position where its category is not permitted."""

    kind = ErrorKind.UNEXPECTED_COMPONENT

    def __init__(self, expected: str, found: str) -> None:
        self.expected = expected
        self.found = found
        super().__init__(
            f"Parse Error: Unexpected component. Expected {expected} but found {found}."
        )

    def _fields(self) -> dict[str, Any]:
        return {"expected": self.expected, "found": self.found}


class IncompleteExtensionPhraseError(ParseError):
    """A preposition with nothing after it."""

    kind = ErrorKind.INCOMPLETE_EXTENSION_PHRASE

    def __init__(self, preposition: str) -> None:
        self.preposition = preposition
        super().__init__(
            f'Parse Error: Incomplete extension phrase starting with "{preposition}".'
        )

    def _fields(self) -> dict[str, Any]:
        return {"word": self.preposition}


class UnexpectedEofError(ParseError):
    """Input ended prematurely.

    Reserved for truncation conditions the other kinds do not describe;
    the grammar engine does not currently raise it.
    """

    kind = ErrorKind.UNEXPECTED_EOF

    def __init__(self) -> None:
        super().__init__("Parse Error: Unexpected end of input.")
