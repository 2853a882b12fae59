"""BCP-47 locale helpers.

Only the small subset needed for vocabulary matching lives here: case
normalization and progressive truncation of subtags (RFC 4647 "lookup").
"""

from __future__ import annotations

from collections.abc import Iterator
from enum import StrEnum


class LocaleMatcher(StrEnum):
    """How a requested locale is matched against available vocabularies."""

    EXACT = "exact"
    LOOKUP = "lookup"


def normalize_locale(tag: str) -> str:
    """Return *tag* stripped and lowercased.

    Raises ``ValueError`` for an empty tag.
    """
    normalized = tag.strip().lower()
    if not normalized:
        raise ValueError("locale must be non-empty")
    return normalized


def generalize(tag: str) -> Iterator[str]:
    """Yield *tag* followed by each truncation, most specific first.

    ``"en-us-x"`` yields ``"en-us-x"``, ``"en-us"``, ``"en"``. The loop is
    bounded by the number of subtags.
    """
    subtags = tag.split("-")
    for end in range(len(subtags), 0, -1):
        yield "-".join(subtags[:end])
