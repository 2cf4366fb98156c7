"""Book value model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Book(BaseModel):
    """A book held by a :class:`~booklytics.library.Library`."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
