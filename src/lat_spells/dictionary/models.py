"""
Data models for the spell vocabulary.
"""

from pydantic import BaseModel, Field, field_validator, model_validator

from ..types import Category, Word


class VocabularyEntry(BaseModel):
    """One dictionary entry mapping surface forms to a single word variant.

    A surface form may appear in several entries (e.g. "terra" is both an
    Element and an Origin); the grammar decides which one applies.

    Attributes:
        category: Grammatical category (e.g. Action, Origin)
        variant: Variant name within the category (e.g. "Ure", "CumVi")
        forms: Surface forms recognised for this variant, case-insensitive
    """
    category: Category = Field(..., description="Grammatical category")
    variant: str = Field(..., description="Variant within the category")
    forms: list[str] = Field(..., min_length=1, description="Recognised surface forms")

    @field_validator("forms")
    @classmethod
    def _single_words(cls, forms: list[str]) -> list[str]:
        for form in forms:
            if not form.strip() or len(form.split()) != 1:
                raise ValueError(f"form {form!r} must be a single non-empty word")
        return forms

    @model_validator(mode="after")
    def _known_variant(self) -> "VocabularyEntry":
        # Raises ValueError for variants the category does not define
        self.category.variant(self.variant)
        return self

    @property
    def word(self) -> Word:
        """The enum member this entry resolves to."""
        return self.category.variant(self.variant)
