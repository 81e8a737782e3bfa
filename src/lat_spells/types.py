"""
Value types for parsed spells.

The word enums mirror the grammatical categories of the spell language.
Every enum value is the canonical display form of the word, so
``Element.TERRA.value == "Terra"``.

Key components:
- Action, Element, Modifier: the mandatory Spell Core slots
- Target, Origin, Emphasis: optional extension phrases
- Preposition: phrase introducers ("ad", "ex")
- Category: grammatical class of a dictionary word, bound to its variant enum
- SpellDescriptor: the parse result
"""

from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict


class Action(str, Enum):
    """The core action (verb) of the spell."""
    URE = "Ure"          # burn
    SANA = "Sana"        # heal
    DEFENDE = "Defende"  # defend
    FERI = "Feri"        # strike


class Element(str, Enum):
    """The core element or medium (noun) of the spell."""
    IGNIS = "Ignis"
    AQUA = "Aqua"
    VENTUS = "Ventus"
    TERRA = "Terra"
    LUMEN = "Lumen"
    UMBRA = "Umbra"


class Modifier(str, Enum):
    """The core modifier describing the scale or form of the spell."""
    MAGNUS = "Magnus"
    PARVUS = "Parvus"
    CELER = "Celer"
    FORTIS = "Fortis"


class Target(str, Enum):
    """Where the spell goes. Introduced by ``Preposition.TO_TARGET``."""
    HOSTIS = "Hostis"
    AMICUS = "Amicus"
    ME = "Me"
    AREA = "Area"


class Origin(str, Enum):
    """Where the spell comes from. Introduced by ``Preposition.FROM_ORIGIN``."""
    CAELUM = "Caelum"
    TERRA = "Terra"


class Emphasis(str, Enum):
    """
    Emphasis words modifying the spell's potency.

    The parser only records them; evaluating their effect is up to the caller.
    """
    NUNC = "Nunc"
    CUM_VI = "CumVi"
    TANDEM = "Tandem"


class Preposition(str, Enum):
    """Words that open a Target or Origin extension phrase."""
    TO_TARGET = "ToTarget"
    FROM_ORIGIN = "FromOrigin"


Word = Union[Action, Element, Modifier, Target, Origin, Emphasis, Preposition]


class Category(str, Enum):
    """
    Grammatical class a dictionary word may belong to.

    Declaration order is the order used when describing a word's
    categories in error messages.
    """
    ACTION = "Action"
    ELEMENT = "Element"
    MODIFIER = "Modifier"
    TARGET = "Target"
    ORIGIN = "Origin"
    EMPHASIS = "Emphasis"
    PREPOSITION = "Preposition"

    @property
    def variants(self) -> type[Enum]:
        """The enum class holding this category's variants."""
        return _CATEGORY_TYPES[self]

    def variant(self, value: str) -> Word:
        """Look up a variant of this category by its value or member name.

        Raises:
            ValueError: If the category has no such variant
        """
        enum_cls = self.variants
        try:
            return enum_cls(value)
        except ValueError:
            pass
        try:
            return enum_cls[value.upper()]
        except KeyError:
            raise ValueError(f"{value!r} is not a valid {self.value} variant") from None

    @classmethod
    def of(cls, word: Word) -> "Category":
        """Return the category a variant belongs to."""
        for category, enum_cls in _CATEGORY_TYPES.items():
            if isinstance(word, enum_cls):
                return category
        raise TypeError(f"{word!r} is not a spell word")


_CATEGORY_TYPES: dict[Category, type[Enum]] = {
    Category.ACTION: Action,
    Category.ELEMENT: Element,
    Category.MODIFIER: Modifier,
    Category.TARGET: Target,
    Category.ORIGIN: Origin,
    Category.EMPHASIS: Emphasis,
    Category.PREPOSITION: Preposition,
}


class SpellDescriptor(BaseModel):
    """The parsed form of an entire spell string.

    Attributes:
        action: The core action (verb)
        element: The core element (noun)
        modifier: The core modifier (adjective)
        target: Optional target, set by an "ad ..." phrase
        origin: Optional origin, set by an "ex ..." phrase
        emphasis_phrases: Emphasis words in input order, repeats kept
        source_text: The original, unmodified input
    """
    model_config = ConfigDict(frozen=True)

    action: Action
    element: Element
    modifier: Modifier
    target: Optional[Target] = None
    origin: Optional[Origin] = None
    emphasis_phrases: tuple[Emphasis, ...] = ()
    source_text: str = ""

    @property
    def is_quick_cast(self) -> bool:
        """True when the spell consists of the Spell Core only."""
        return self.target is None and self.origin is None and not self.emphasis_phrases

    @property
    def is_full_cast(self) -> bool:
        """True when at least one extension phrase follows the Spell Core."""
        return not self.is_quick_cast
