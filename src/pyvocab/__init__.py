"""pyvocab - Localized vocabularies for model declarations."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pyvocab")
except PackageNotFoundError:
    __version__ = "0+local"
from pyvocab._locale import LocaleMatcher
from pyvocab.config import VocabularyConfig
from pyvocab.exceptions import (
    VocabularyConfigError,
    VocabularyDuplicateError,
    VocabularyError,
    VocabularyInvalidArgumentError,
    VocabularyParseError,
)
from pyvocab.manager import VocabularyManager
from pyvocab.modeling import (
    Declaration,
    DeclarationLike,
    ModelFile,
    ModelFileLike,
    ModelManager,
    ModelProviderLike,
    Property,
    PropertyLike,
)
from pyvocab.models import (
    DeclarationTerms,
    TermDiff,
    TermKey,
    ValidationResult,
    Vocabulary,
    VocabularyValidation,
)
from pyvocab.terms import MissingTermGenerator, english_missing_term_generator

__all__ = [
    "__version__",
    "Declaration",
    "DeclarationLike",
    "DeclarationTerms",
    "LocaleMatcher",
    "MissingTermGenerator",
    "ModelFile",
    "ModelFileLike",
    "ModelManager",
    "ModelProviderLike",
    "Property",
    "PropertyLike",
    "TermDiff",
    "TermKey",
    "ValidationResult",
    "Vocabulary",
    "VocabularyConfig",
    "VocabularyConfigError",
    "VocabularyDuplicateError",
    "VocabularyError",
    "VocabularyInvalidArgumentError",
    "VocabularyManager",
    "VocabularyParseError",
    "VocabularyValidation",
    "english_missing_term_generator",
]
