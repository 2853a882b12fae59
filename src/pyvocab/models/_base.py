"""Base model for pyvocab data types.

Every parsed or computed structure inherits from :class:`VocabBaseModel`,
which makes instances immutable and ignores unknown document keys so that
vocabulary files written for newer tooling still load.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class VocabBaseModel(BaseModel):
    """Base for pyvocab models."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
    )
