"""Domain models produced by the ingestion path."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field

from web_rag.errors import ErrorKind


class ExtractedPage(BaseModel):
    """Structural view of one fetched page.

    Attributes
    ----------
    url:
        The URL the page was fetched from; used as the document identity.
    head:
        Inner markup of ``<head>`` (empty when the page has none).
    body:
        Inner markup of ``<body>`` (empty when the page has none).
    external_links:
        De-duplicated hrefs with an absolute ``http(s)://`` scheme.
    internal_links:
        De-duplicated relative hrefs.
    """

    url: str
    head: str = ""
    body: str = ""
    external_links: list[str] = Field(default_factory=list)
    internal_links: list[str] = Field(default_factory=list)


class IngestStatus(str, Enum):
    OK = "ok"
    PARTIAL = "partial"
    FAILED = "failed"


class IngestReport(BaseModel):
    """Outcome of a single :meth:`Ingestor.ingest` call."""

    url: str
    status: IngestStatus
    error_kind: ErrorKind | None = None
    reason: str = ""
    records_written: int = 0
    chunks_total: int = 0
    external_links: list[str] = Field(default_factory=list)
    internal_links: list[str] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.status is IngestStatus.OK
