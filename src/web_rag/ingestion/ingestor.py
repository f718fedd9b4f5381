"""Single-URL ingestion: extract → embed head → chunk body → embed + store chunks."""

from __future__ import annotations

import logging

from web_rag.config import settings
from web_rag.errors import RagError
from web_rag.ingestion.chunker import chunk_text
from web_rag.ingestion.embedder import Embedder
from web_rag.ingestion.extractor import PageExtractor
from web_rag.ingestion.models import IngestReport, IngestStatus
from web_rag.retrieval.base import VectorStoreBase
from web_rag.retrieval.models import RecordMetadata, chunk_record_id

logger = logging.getLogger(__name__)


class Ingestor:
    """Store one web page as a head record plus one record per body chunk.

    Parameters
    ----------
    extractor:
        Fetches and parses the page.
    embedder:
        Converts head and chunk text to vectors.
    store:
        A connected vector-store backend.
    chunk_size:
        Maximum characters per body chunk.
    composite_chunk_ids:
        When false, every chunk is stored under the bare URL (each write
        replaces the previous one).
    """

    def __init__(
        self,
        extractor: PageExtractor,
        embedder: Embedder,
        store: VectorStoreBase,
        *,
        chunk_size: int = settings.chunk_size,
        composite_chunk_ids: bool = settings.composite_chunk_ids,
    ) -> None:
        self._extractor = extractor
        self._embedder = embedder
        self._store = store
        self.chunk_size = chunk_size
        self.composite_chunk_ids = composite_chunk_ids

    def ingest(self, url: str) -> IngestReport:
        """Ingest *url*; never raises for expected pipeline failures."""
        logger.info("Ingesting %s", url)
        records_written = 0

        try:
            self._embedder.check_credentials()
            page = self._extractor.extract(url)
        except RagError as exc:
            return self._failed(url, exc, records_written)

        try:
            head_embedding = self._embedder.embed(page.head)
            self._store.upsert(
                page.url,
                head_embedding,
                RecordMetadata(url=page.url, head=page.head, body=page.body),
            )
            records_written += 1
            chunks = chunk_text(page.body, self.chunk_size)
        except RagError as exc:
            return self._failed(url, exc, records_written)

        report = IngestReport(
            url=page.url,
            status=IngestStatus.OK,
            chunks_total=len(chunks),
            external_links=page.external_links,
            internal_links=page.internal_links,
        )

        for index, chunk in enumerate(chunks):
            try:
                chunk_embedding = self._embedder.embed(chunk)
            except RagError as exc:
                logger.error("Embedding failed for chunk %d/%d of %s: %s", index + 1, len(chunks), page.url, exc)
                report.status = IngestStatus.PARTIAL
                report.error_kind = exc.kind
                report.reason = str(exc)
                break

            record_id = chunk_record_id(page.url, index, composite=self.composite_chunk_ids)
            try:
                self._store.upsert(
                    record_id,
                    chunk_embedding,
                    RecordMetadata(url=page.url, head=page.head, body=chunk),
                )
            except RagError as exc:
                logger.error("Failed to store chunk %d/%d of %s: %s", index + 1, len(chunks), page.url, exc)
                report.status = IngestStatus.FAILED
                report.error_kind = exc.kind
                report.reason = str(exc)
                report.records_written = records_written
                return report
            records_written += 1

        report.records_written = records_written

        # Internal links are reported only; following them is disabled.
        if page.internal_links:
            logger.debug("Not following %d internal links of %s", len(page.internal_links), page.url)

        if report.status is IngestStatus.OK:
            logger.info("Ingested %s (%d records, %d chunks)", page.url, records_written, len(chunks))
        else:
            logger.warning(
                "Partially ingested %s (%d/%d chunks stored)", page.url, records_written - 1, len(chunks)
            )
        return report

    @staticmethod
    def _failed(url: str, exc: RagError, records_written: int) -> IngestReport:
        logger.error("Failed to ingest %s: %s", url, exc)
        return IngestReport(
            url=url,
            status=IngestStatus.FAILED,
            error_kind=exc.kind,
            reason=str(exc),
            records_written=records_written,
        )
