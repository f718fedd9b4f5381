"""Shared pytest configuration and fixtures."""

from __future__ import annotations

import math
from unittest.mock import MagicMock

import pytest
from langchain_core.embeddings import Embeddings

from web_rag.retrieval.base import VectorStoreBase
from web_rag.retrieval.models import QueryHit, RecordMetadata


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "integration: marks tests requiring external services")


# ── Fakes for external services ──────────────────────────────────────


class LetterEmbeddings(Embeddings):
    """Deterministic 27-dim letter-frequency embedding.

    Identical texts map to identical vectors and texts sharing words land
    close together, which is enough to exercise nearest-neighbour search.
    """

    def __init__(self, fail_on: str | None = None) -> None:
        self.fail_on = fail_on
        self.calls: list[str] = []

    def _vector(self, text: str) -> list[float]:
        counts = [0.0] * 26
        for ch in text.lower():
            if "a" <= ch <= "z":
                counts[ord(ch) - ord("a")] += 1.0
        return counts + [1.0]

    def embed_documents(self, texts: list[str]) -> list[list[float]]:
        return [self.embed_query(t) for t in texts]

    def embed_query(self, text: str) -> list[float]:
        self.calls.append(text)
        if self.fail_on is not None and self.fail_on in text:
            raise ConnectionError("embedding endpoint reset the connection")
        return self._vector(text)


class InMemoryVectorStore(VectorStoreBase):
    """Dict-backed store using L2 distance, mirroring Chroma's upsert semantics."""

    def __init__(self) -> None:
        super().__init__("test-collection")
        self.records: dict[str, tuple[list[float], RecordMetadata]] = {}
        self.connected = False

    def connect(self) -> None:
        self.connected = True

    def upsert(self, record_id: str, embedding: list[float], metadata: RecordMetadata) -> None:
        self.records[record_id] = (list(embedding), metadata)

    def similarity_search(self, query_embedding: list[float], *, k: int = 1) -> list[QueryHit]:
        scored = []
        for record_id, (embedding, metadata) in self.records.items():
            dist = math.dist(query_embedding, embedding)
            scored.append(QueryHit(id=record_id, score=1.0 / (1.0 + dist), distance=dist, metadata=metadata))
        scored.sort(key=lambda hit: hit.distance)
        return scored[:k]

    def health_check(self) -> bool:
        return self.connected

    def count(self) -> int:
        return len(self.records)


def make_session(html: str) -> MagicMock:
    """A ``requests.Session`` stand-in that always returns *html*."""
    session = MagicMock()
    session.get.return_value = MagicMock(text=html, raise_for_status=MagicMock())
    return session


# ── Fixtures ────────────────────────────────────────────────────────────


@pytest.fixture()
def store() -> InMemoryVectorStore:
    s = InMemoryVectorStore()
    s.connect()
    return s


@pytest.fixture()
def fake_embeddings() -> LetterEmbeddings:
    return LetterEmbeddings()
