"""Parsed vocabulary documents.

A vocabulary holds the human-readable terms for the declarations (and
their properties) of one model namespace in one locale. Documents are
YAML::

    namespace: org.acme@1.0.0
    locale: en-GB
    declarations:
      - Truck: A road vehicle
        properties:
          - weight: The weight of the truck
      - Color: A colour

Each declaration item carries exactly one key besides ``properties``:
the declaration name, mapped to its term.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING, Any, NamedTuple

import yaml
from pydantic import Field, PrivateAttr, ValidationError, field_validator

from pyvocab._locale import normalize_locale
from pyvocab.exceptions import VocabularyParseError
from pyvocab.models._base import VocabBaseModel

if TYPE_CHECKING:
    from pyvocab.modeling import DeclarationLike, ModelFileLike, PropertyLike

_logger = logging.getLogger(__name__)

_PROPERTIES_KEY = "properties"

_NULL_TAG = "tag:yaml.org,2002:null"


class _VocabularyLoader(yaml.SafeLoader):
    """SafeLoader that keeps every non-null scalar as text.

    YAML 1.1 implicit typing would turn ``no``, ``On`` or ``2024`` into bools and
    ints, but locales, names and terms are always strings.
    """


_VocabularyLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag == _NULL_TAG]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


class TermKey(NamedTuple):
    """Index key of a term: a declaration, optionally narrowed to a property."""

    declaration: str
    property_name: str | None = None


class TermDiff(VocabBaseModel):
    """Differences between one vocabulary and one model file.

    Property terms are reported as ``"Declaration.property"``.
    """

    missing_terms: list[str] = Field(default_factory=list)
    additional_terms: list[str] = Field(default_factory=list)


class DeclarationTerms(VocabBaseModel):
    """Terms for one declaration and its properties."""

    name: str
    term: str | None = None
    properties: dict[str, str | None] = Field(default_factory=dict)


def _parse_properties(declaration: str, value: Any) -> dict[str, Any]:
    if value is None:
        return {}
    if isinstance(value, dict):
        return dict(value)
    if not isinstance(value, list):
        raise ValueError(f"properties of {declaration!r} must be a list of mappings")
    properties: dict[str, Any] = {}
    for item in value:
        if not isinstance(item, dict) or len(item) != 1:
            raise ValueError(f"each property of {declaration!r} must be a single-entry mapping")
        ((name, term),) = item.items()
        # First definition wins.
        properties.setdefault(str(name), term)
    return properties


def _parse_declaration_item(item: Any) -> dict[str, Any]:
    """Turn a document item into ``DeclarationTerms`` input."""
    if not isinstance(item, dict):
        raise ValueError("each declaration must be a mapping")
    names = [k for k in item if k != _PROPERTIES_KEY]
    if len(names) != 1:
        raise ValueError(f"a declaration must have exactly one name key, got {names!r}")
    name = str(names[0])
    return {
        "name": name,
        "term": item[names[0]],
        "properties": _parse_properties(name, item.get(_PROPERTIES_KEY)),
    }


def _own_properties(declaration: DeclarationLike) -> list[PropertyLike]:
    # Enums and scalars may not expose properties at all.
    getter = getattr(declaration, "get_own_properties", None)
    if getter is None:
        return []
    return list(getter())


class Vocabulary(VocabBaseModel):
    """Terms for one ``namespace`` in one ``locale``."""

    namespace: str
    locale: str
    declarations: list[DeclarationTerms]

    _terms: dict[TermKey, str] = PrivateAttr(default_factory=dict)

    @field_validator("namespace")
    @classmethod
    def _normalize_namespace(cls, value: str) -> str:
        namespace = value.strip()
        if not namespace:
            raise ValueError("namespace must be non-empty")
        return namespace

    @field_validator("locale")
    @classmethod
    def _normalize_locale(cls, value: str) -> str:
        return normalize_locale(value)

    @field_validator("declarations", mode="before")
    @classmethod
    def _parse_declarations(cls, value: Any) -> Any:
        if not isinstance(value, list):
            raise ValueError("declarations must be a list")
        return [item if isinstance(item, DeclarationTerms) else _parse_declaration_item(item) for item in value]

    def model_post_init(self, __context: Any) -> None:
        terms: dict[TermKey, str] = {}
        for declaration in self.declarations:
            if declaration.term is not None:
                terms.setdefault(TermKey(declaration.name), declaration.term)
            for prop, term in declaration.properties.items():
                if term is not None:
                    terms.setdefault(TermKey(declaration.name, prop), term)
        self._terms = terms

    @classmethod
    def from_yaml(cls, contents: str) -> Vocabulary:
        """Parse a YAML vocabulary document.

        Raises
        ------
        VocabularyParseError
            If the text is not valid YAML, is not a mapping, or does not
            satisfy the vocabulary schema.
        """
        try:
            document = yaml.load(contents, Loader=_VocabularyLoader)
        except yaml.YAMLError as exc:
            raise VocabularyParseError(f"Vocabulary is not valid YAML: {exc}") from exc
        if not isinstance(document, dict):
            raise VocabularyParseError("Vocabulary document must be a mapping")
        try:
            vocabulary = cls.model_validate(document)
        except ValidationError as exc:
            raise VocabularyParseError(
                f"Invalid vocabulary document: {exc.error_count()} error(s)",
                errors=exc.errors(include_url=False),
            ) from exc
        _logger.debug("Parsed vocabulary %s with %d terms", vocabulary.identifier, len(vocabulary._terms))
        return vocabulary

    @property
    def identifier(self) -> str:
        """``namespace/locale``, unique within a manager."""
        return f"{self.namespace}/{self.locale}"

    def get_identifier(self) -> str:
        return self.identifier

    def get_namespace(self) -> str:
        return self.namespace

    def get_locale(self) -> str:
        return self.locale

    def get_terms(self) -> list[DeclarationTerms]:
        return list(self.declarations)

    def get_term(self, declaration_name: str, property_name: str | None = None) -> str | None:
        """Return the term for a declaration or one of its properties, or ``None``."""
        return self._terms.get(TermKey(declaration_name, property_name or None))

    def validate_model_file(self, model_file: ModelFileLike) -> TermDiff:
        """Compare the terms against the declarations of *model_file*.

        Missing terms are model declarations and own properties without a
        term. Additional terms are vocabulary entries the model file does
        not declare.
        """
        missing: list[str] = []
        for declaration in model_file.get_all_declarations():
            if not self.get_term(declaration.name):
                missing.append(declaration.name)
            missing.extend(
                f"{declaration.name}.{prop.name}"
                for prop in _own_properties(declaration)
                if not self.get_term(declaration.name, prop.name)
            )

        additional: list[str] = []
        for terms in self.declarations:
            model_declaration = model_file.get_local_type(terms.name)
            known: Iterable[str] = ()
            if model_declaration is None:
                additional.append(terms.name)
            else:
                known = {prop.name for prop in _own_properties(model_declaration)}
            additional.extend(f"{terms.name}.{prop}" for prop in terms.properties if prop not in known)

        # Repeated declarations are reported once.
        return TermDiff(missing_terms=missing, additional_terms=list(dict.fromkeys(additional)))
