"""Manager configuration for pyvocab."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

from pyvocab._locale import LocaleMatcher
from pyvocab.exceptions import VocabularyConfigError


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    return default


def _parse_locale_matcher(value: str) -> LocaleMatcher:
    try:
        return LocaleMatcher(value.strip().lower())
    except ValueError as exc:
        allowed = ", ".join(m.value for m in LocaleMatcher)
        raise VocabularyConfigError(f"Unknown locale matcher {value!r} (expected one of: {allowed})") from exc


@dataclasses.dataclass(frozen=True)
class VocabularyConfig:
    """Vocabulary manager configuration.

    Parameters
    ----------
    locale_matcher : str
        Matcher used by ``get_vocabulary`` when the caller does not pass
        one. ``"exact"`` only returns a vocabulary whose locale equals the
        requested one; ``"lookup"`` falls back to more general tags.
    generate_missing_terms : bool
        When ``True`` and the manager was not given an explicit generator,
        ``get_term`` returns an English label derived from the declaration
        and property names instead of ``None``.
    """

    locale_matcher: LocaleMatcher | str = LocaleMatcher.EXACT
    generate_missing_terms: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "locale_matcher", _parse_locale_matcher(self.locale_matcher))

    @classmethod
    def from_env(cls, **overrides: Any) -> VocabularyConfig:
        """Create configuration from environment variables.

        Reads ``PYVOCAB_LOCALE_MATCHER`` and
        ``PYVOCAB_GENERATE_MISSING_TERMS``. Explicit keyword arguments
        override environment values.

        Parameters
        ----------
        **overrides
            Explicit field values that take precedence over env vars.

        Returns
        -------
        VocabularyConfig
            Populated configuration.

        Raises
        ------
        VocabularyConfigError
            If the locale matcher is not a known value.
        """
        env = os.environ
        config_kwargs: dict[str, Any] = {}

        matcher_env = env.get("PYVOCAB_LOCALE_MATCHER")
        if matcher_env is not None:
            config_kwargs["locale_matcher"] = matcher_env

        config_kwargs["generate_missing_terms"] = _env_bool(
            env.get("PYVOCAB_GENERATE_MISSING_TERMS"),
            False,
        )

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
