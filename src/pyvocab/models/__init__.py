"""Pydantic models for vocabulary documents and validation results."""

from pyvocab.models._base import VocabBaseModel
from pyvocab.models.validation import ValidationResult, VocabularyValidation
from pyvocab.models.vocabulary import DeclarationTerms, TermDiff, TermKey, Vocabulary

__all__ = [
    "DeclarationTerms",
    "TermDiff",
    "TermKey",
    "ValidationResult",
    "VocabBaseModel",
    "Vocabulary",
    "VocabularyValidation",
]
