"""Results of validating vocabularies against model definitions."""

from __future__ import annotations

from pydantic import Field

from pyvocab.models._base import VocabBaseModel
from pyvocab.models.vocabulary import Vocabulary


class VocabularyValidation(VocabBaseModel):
    """Per-vocabulary entry of a :class:`ValidationResult`."""

    locale: str
    namespace: str
    missing_terms: list[str] = Field(default_factory=list)
    additional_terms: list[str] = Field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.missing_terms and not self.additional_terms


class ValidationResult(VocabBaseModel):
    """Outcome of ``VocabularyManager.validate``."""

    missing_vocabularies: list[str] = Field(default_factory=list)
    """Model namespaces without any registered vocabulary."""
    additional_vocabularies: list[Vocabulary] = Field(default_factory=list)
    """Vocabularies whose namespace has no model file."""
    vocabularies: dict[str, VocabularyValidation] = Field(default_factory=dict)
    """Term differences keyed by ``namespace/locale``."""

    @property
    def is_valid(self) -> bool:
        return (
            not self.missing_vocabularies
            and not self.additional_vocabularies
            and all(v.is_valid for v in self.vocabularies.values())
        )
