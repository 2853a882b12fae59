"""Custom exception hierarchy for pyvocab."""

from __future__ import annotations

from typing import Any


class VocabularyError(Exception):
    """Base exception for all pyvocab errors."""


class VocabularyConfigError(VocabularyError):
    """Invalid or missing configuration."""


class VocabularyInvalidArgumentError(VocabularyError, ValueError):
    """Empty or otherwise unusable input was passed to the manager."""


class VocabularyParseError(VocabularyInvalidArgumentError):
    """Vocabulary document could not be parsed or failed schema checks.

    ``errors`` holds the structured pydantic error list when the failure
    came from model validation, and is empty for YAML syntax errors.
    """

    def __init__(
        self,
        message: str,
        *,
        errors: list[dict[str, Any]] | None = None,
    ) -> None:
        self.errors = errors or []
        super().__init__(message)


class VocabularyDuplicateError(VocabularyError):
    """A vocabulary with the same ``namespace/locale`` is already registered."""

    def __init__(self, message: str, *, identifier: str = "") -> None:
        self.identifier = identifier
        super().__init__(message)
