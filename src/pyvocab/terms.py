"""Fallback term generation for declarations without a vocabulary entry."""

from __future__ import annotations

import re
from collections.abc import Callable

MissingTermGenerator = Callable[[str, str, str, str | None], str | None]
"""``(namespace, locale, declaration_name, property_name) -> term``."""

# Splits "HTTPServerConfig" into HTTP / Server / Config and "weightKg" into weight / Kg.
_WORD_RE = re.compile(r"[A-Z]+(?=[A-Z][a-z])|[A-Z]?[a-z]+|[A-Z]+|\d+")


def split_words(name: str) -> list[str]:
    """Split a camelCase, PascalCase or snake_case identifier into words."""
    return _WORD_RE.findall(name)


def _title(words: list[str]) -> str:
    # Acronyms keep their case.
    return " ".join(w if w.isupper() else w.capitalize() for w in words)


def english_missing_term_generator(
    namespace: str,
    locale: str,
    declaration_name: str,
    property_name: str | None = None,
) -> str:
    """Build an English label from model element names.

    ``("org.acme", "en", "DeliveryTruck")`` gives ``"Delivery Truck"`` and
    ``("org.acme", "en", "Truck", "grossWeight")`` gives
    ``"Gross Weight of the Truck"``. *namespace* and *locale* are accepted
    so the function matches :data:`MissingTermGenerator`.
    """
    declaration = _title(split_words(declaration_name)) or declaration_name
    if not property_name:
        return declaration
    prop = _title(split_words(property_name)) or property_name
    return f"{prop} of the {declaration}"
