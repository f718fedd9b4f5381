"""Domain models for stored records and query results."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class RecordMetadata(BaseModel):
    """Metadata schema attached to every vector in the collection.

    Attributes
    ----------
    url:
        Source page URL.
    head:
        Inner markup of the page ``<head>``.
    body:
        Full page body for the head record, or the chunk text for a body
        chunk record.
    """

    model_config = ConfigDict(extra="ignore")

    url: str
    head: str = ""
    body: str = ""

    def to_store(self) -> dict[str, Any]:
        return self.model_dump()


class QueryHit(BaseModel):
    """A single nearest-neighbour result, best matches first."""

    id: str
    score: float = Field(description="Similarity in (0, 1]; higher is closer")
    distance: float | None = None
    metadata: RecordMetadata


def chunk_record_id(url: str, index: int, *, composite: bool = True) -> str:
    """Return the store id for body chunk *index* of *url*.

    With ``composite=False`` every chunk shares the bare URL, so each
    write replaces the previous one.
    """
    if not composite:
        return url
    return f"{url}#chunk-{index}"
