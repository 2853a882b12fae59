"""Model definitions that vocabularies are validated against.

The manager only relies on the structural protocols below, so any model
registry with the same shape can be passed to
:meth:`pyvocab.manager.VocabularyManager.validate`. The concrete classes
are a small in-memory implementation for callers that describe their
models as plain mappings.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Protocol, runtime_checkable

from pydantic import Field, field_validator

from pyvocab.models._base import VocabBaseModel


@runtime_checkable
class PropertyLike(Protocol):
    @property
    def name(self) -> str: ...


@runtime_checkable
class DeclarationLike(Protocol):
    @property
    def name(self) -> str: ...

    def get_own_properties(self) -> Sequence[PropertyLike]: ...


@runtime_checkable
class ModelFileLike(Protocol):
    @property
    def namespace(self) -> str: ...

    def get_all_declarations(self) -> Sequence[DeclarationLike]: ...

    def get_local_type(self, name: str) -> DeclarationLike | None: ...


@runtime_checkable
class ModelProviderLike(Protocol):
    def get_model_files(self) -> Sequence[ModelFileLike]: ...

    def get_model_file(self, namespace: str) -> ModelFileLike | None: ...


class Property(VocabBaseModel):
    name: str


class Declaration(VocabBaseModel):
    """A concept, enum or other named type declared in a model file."""

    name: str
    properties: list[Property] = Field(default_factory=list)

    @field_validator("properties", mode="before")
    @classmethod
    def _coerce_property_names(cls, value: object) -> object:
        if isinstance(value, list):
            return [{"name": item} if isinstance(item, str) else item for item in value]
        return value

    def get_own_properties(self) -> list[Property]:
        return list(self.properties)


class ModelFile(VocabBaseModel):
    """Declarations of one namespace."""

    namespace: str
    declarations: list[Declaration] = Field(default_factory=list)

    def get_all_declarations(self) -> list[Declaration]:
        return list(self.declarations)

    def get_local_type(self, name: str) -> Declaration | None:
        return next((d for d in self.declarations if d.name == name), None)

    @classmethod
    def from_mapping(cls, namespace: str, declarations: Mapping[str, Sequence[str]]) -> ModelFile:
        """Build a model file from ``{declaration: [property, ...]}``."""
        return cls(
            namespace=namespace,
            declarations=[Declaration(name=name, properties=list(props)) for name, props in declarations.items()],
        )


class ModelManager:
    """In-memory registry of model files keyed by namespace."""

    def __init__(self, model_files: Sequence[ModelFile] = ()) -> None:
        self._model_files: dict[str, ModelFile] = {}
        for model_file in model_files:
            self.add_model_file(model_file)

    def add_model_file(self, model_file: ModelFile) -> None:
        """Register *model_file*, replacing any file with the same namespace."""
        self._model_files[model_file.namespace] = model_file

    def get_model_files(self) -> list[ModelFile]:
        return list(self._model_files.values())

    def get_model_file(self, namespace: str) -> ModelFile | None:
        return self._model_files.get(namespace)

    @classmethod
    def from_mapping(cls, models: Mapping[str, Mapping[str, Sequence[str]]]) -> ModelManager:
        """Build a manager from ``{namespace: {declaration: [property, ...]}}``."""
        return cls([ModelFile.from_mapping(namespace, decls) for namespace, decls in models.items()])
