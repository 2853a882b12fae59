"""In-memory registry of vocabularies.

The manager stores vocabulary documents, each tied to one model
namespace and one BCP-47 locale, and answers term lookups with locale
fallback. See https://datatracker.ietf.org/doc/html/rfc5646#section-2.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from pyvocab._locale import LocaleMatcher, generalize
from pyvocab.config import VocabularyConfig
from pyvocab.exceptions import VocabularyDuplicateError, VocabularyInvalidArgumentError
from pyvocab.modeling import ModelProviderLike
from pyvocab.models.validation import ValidationResult, VocabularyValidation
from pyvocab.models.vocabulary import Vocabulary
from pyvocab.terms import MissingTermGenerator, english_missing_term_generator

_logger = logging.getLogger(__name__)


class VocabularyManager:
    """Registry of :class:`Vocabulary` objects keyed by ``namespace/locale``.

    Not thread-safe; callers sharing a manager across threads must
    serialize access themselves.

    Parameters
    ----------
    config : VocabularyConfig or None
        Lookup defaults. ``VocabularyConfig()`` when omitted.
    missing_term_generator : MissingTermGenerator or None
        Called by :meth:`get_term` when no vocabulary at any ancestor
        locale has the term. Overrides ``config.generate_missing_terms``.
    """

    def __init__(
        self,
        config: VocabularyConfig | None = None,
        *,
        missing_term_generator: MissingTermGenerator | None = None,
    ) -> None:
        self._config = config or VocabularyConfig()
        if missing_term_generator is None and self._config.generate_missing_terms:
            missing_term_generator = english_missing_term_generator
        self._missing_term_generator = missing_term_generator
        self.vocabularies: dict[str, Vocabulary] = {}

    @property
    def config(self) -> VocabularyConfig:
        return self._config

    def __len__(self) -> int:
        return len(self.vocabularies)

    def clear(self) -> None:
        """Remove all vocabularies."""
        self.vocabularies = {}
        _logger.debug("Cleared all vocabularies")

    def remove_vocabulary(self, namespace: str, locale: str) -> None:
        """Remove the vocabulary for *namespace* and *locale*, if registered."""
        identifier = f"{namespace}/{locale.lower()}"
        if self.vocabularies.pop(identifier, None) is not None:
            _logger.debug("Removed vocabulary %s", identifier)

    def add_vocabulary(self, contents: str) -> Vocabulary:
        """Parse a YAML vocabulary document and register it.

        Raises
        ------
        VocabularyInvalidArgumentError
            If *contents* is empty.
        VocabularyParseError
            If *contents* is not a valid vocabulary document.
        VocabularyDuplicateError
            If a vocabulary with the same namespace and locale exists.
        """
        if not contents:
            raise VocabularyInvalidArgumentError("Vocabulary contents must be specified")
        vocabulary = Vocabulary.from_yaml(contents)

        identifier = vocabulary.identifier
        if identifier in self.vocabularies:
            raise VocabularyDuplicateError(
                f"Vocabulary {identifier} has already been added",
                identifier=identifier,
            )
        self.vocabularies[identifier] = vocabulary
        _logger.debug("Added vocabulary %s", identifier)
        return vocabulary

    @staticmethod
    def find_vocabulary(
        requested_locale: str,
        vocabularies: Iterable[Vocabulary],
        locale_matcher: str | None = None,
    ) -> Vocabulary | None:
        """Return the most specific vocabulary for *requested_locale*.

        With ``locale_matcher="lookup"`` subtags are removed from the end
        of the locale until a vocabulary matches (``en-us-x``, ``en-us``,
        ``en``). Any other matcher only accepts an exact match.
        """
        candidates = list(vocabularies)
        for locale in generalize(requested_locale.lower()):
            match = next((v for v in candidates if v.locale == locale), None)
            if match is not None:
                return match
            if locale_matcher != LocaleMatcher.LOOKUP:
                break
            _logger.debug("No vocabulary for locale %s, trying a more general tag", locale)
        return None

    def get_vocabulary(
        self,
        namespace: str,
        locale: str,
        locale_matcher: str | None = None,
    ) -> Vocabulary | None:
        """Return the vocabulary for *namespace* and *locale*, or ``None``.

        *locale_matcher* defaults to ``config.locale_matcher``.
        """
        if locale_matcher is None:
            locale_matcher = self._config.locale_matcher
        return self.find_vocabulary(
            locale.lower(),
            self.get_vocabularies_for_namespace(namespace),
            locale_matcher,
        )

    def get_vocabularies_for_namespace(self, namespace: str) -> list[Vocabulary]:
        return [v for v in self.vocabularies.values() if v.namespace == namespace]

    def get_vocabularies_for_locale(self, locale: str) -> list[Vocabulary]:
        locale = locale.lower()
        return [v for v in self.vocabularies.values() if v.locale == locale]

    def get_term(
        self,
        namespace: str,
        locale: str,
        declaration_name: str,
        property_name: str | None = None,
    ) -> str | None:
        """Return the term for a declaration or property.

        Walks from *locale* to ever more general tags, looking for an
        exact-locale vocabulary that defines the term. When none does, the
        missing-term generator (if any) supplies the result.
        """
        for candidate in generalize(locale):
            vocabulary = self.get_vocabulary(namespace, candidate, LocaleMatcher.EXACT)
            term = vocabulary.get_term(declaration_name, property_name) if vocabulary is not None else None
            if term:
                return term

        if self._missing_term_generator is not None:
            return self._missing_term_generator(namespace, locale, declaration_name, property_name)
        return None

    def validate(self, model_provider: ModelProviderLike) -> ValidationResult:
        """Check registered vocabularies against the model files of *model_provider*.

        Mismatches are reported in the result, never raised.
        """
        missing_vocabularies = [
            m.namespace for m in model_provider.get_model_files() if not self.get_vocabularies_for_namespace(m.namespace)
        ]

        additional_vocabularies: list[Vocabulary] = []
        results: dict[str, VocabularyValidation] = {}
        for vocabulary in self.vocabularies.values():
            model_file = model_provider.get_model_file(vocabulary.namespace)
            if model_file is None:
                additional_vocabularies.append(vocabulary)
                continue

            diff = vocabulary.validate_model_file(model_file)
            results[f"{vocabulary.namespace}/{vocabulary.locale}"] = VocabularyValidation(
                locale=vocabulary.locale,
                namespace=vocabulary.namespace,
                missing_terms=diff.missing_terms,
                additional_terms=diff.additional_terms,
            )

        _logger.debug(
            "Validated %d vocabularies: %d missing, %d additional",
            len(self.vocabularies),
            len(missing_vocabularies),
            len(additional_vocabularies),
        )
        return ValidationResult(
            missing_vocabularies=missing_vocabularies,
            additional_vocabularies=additional_vocabularies,
            vocabularies=results,
        )
