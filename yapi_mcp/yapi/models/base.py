"""Pydantic base schema for YApi wire models.

YApi responses use snake_case keys and Mongo-style ``_id`` identifiers, and
carry many fields this package never reads. ``BaseSchema`` keeps those extra
fields so a model can be dumped back to the exact upstream shape.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class BaseSchema(BaseModel):
    """Shared base for all YApi models.

    - Keeps unknown fields (``extra="allow"``)
    - Enables populate_by_name so fields can be set by attribute name or wire key
    """

    model_config = ConfigDict(
        populate_by_name=True,
        extra="allow",
    )
