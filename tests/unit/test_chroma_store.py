"""Unit tests for the Chroma vector-store adapter (client mocked)."""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import pytest

from web_rag.errors import StoreUnavailableError
from web_rag.retrieval.chroma_store import ChromaVectorStore
from web_rag.retrieval.models import QueryHit, RecordMetadata


@pytest.fixture()
def mock_client() -> MagicMock:
    client = MagicMock()
    client.get_or_create_collection.return_value = MagicMock()
    return client


@pytest.fixture()
def chroma(mock_client: MagicMock) -> ChromaVectorStore:
    store = ChromaVectorStore("web_pages", host="chroma.local", port=9000, client=mock_client)
    store.connect()
    return store


class TestConnect:
    def test_connect_runs_heartbeat(self, chroma: ChromaVectorStore, mock_client: MagicMock) -> None:
        mock_client.heartbeat.assert_called_once()

    def test_failed_heartbeat_raises(self, mock_client: MagicMock) -> None:
        mock_client.heartbeat.side_effect = ConnectionError("refused")
        store = ChromaVectorStore("web_pages", client=mock_client)
        with pytest.raises(StoreUnavailableError, match="liveness"):
            store.connect()

    def test_builds_http_client_from_host_and_port(self) -> None:
        mock_chromadb = MagicMock()
        with patch.dict("sys.modules", {"chromadb": mock_chromadb}):
            ChromaVectorStore("c", host="chroma.local", port=9000).connect()
        mock_chromadb.HttpClient.assert_called_once_with(host="chroma.local", port=9000)
        mock_chromadb.HttpClient.return_value.heartbeat.assert_called_once()

    def test_unconnected_store_refuses_operations(self) -> None:
        store = ChromaVectorStore("c")
        with pytest.raises(StoreUnavailableError, match="connect"):
            store.similarity_search([0.1], k=1)
        assert store.health_check() is False


class TestUpsert:
    def test_creates_collection_and_upserts(self, chroma: ChromaVectorStore, mock_client: MagicMock) -> None:
        meta = RecordMetadata(url="https://a.test", head="<title>A</title>", body="hello")
        chroma.upsert("https://a.test", [0.1, 0.2], meta)

        mock_client.get_or_create_collection.assert_called_with(
            "web_pages", metadata={"hnsw:space": "cosine"}
        )
        collection = mock_client.get_or_create_collection.return_value
        collection.upsert.assert_called_once_with(
            ids=["https://a.test"],
            embeddings=[[0.1, 0.2]],
            metadatas=[{"url": "https://a.test", "head": "<title>A</title>", "body": "hello"}],
            documents=["hello"],
        )

    def test_accepts_plain_dict_metadata(self, chroma: ChromaVectorStore, mock_client: MagicMock) -> None:
        chroma.upsert("id-1", [1.0], {"url": "https://a.test", "body": "b"})  # type: ignore[arg-type]
        collection = mock_client.get_or_create_collection.return_value
        assert collection.upsert.call_args.kwargs["metadatas"] == [
            {"url": "https://a.test", "head": "", "body": "b"}
        ]

    def test_client_error_is_store_unavailable(self, chroma: ChromaVectorStore, mock_client: MagicMock) -> None:
        mock_client.get_or_create_collection.return_value.upsert.side_effect = RuntimeError("boom")
        with pytest.raises(StoreUnavailableError, match="boom"):
            chroma.upsert("id", [1.0], RecordMetadata(url="u"))


class TestSimilaritySearch:
    def test_maps_results_best_first(self, chroma: ChromaVectorStore, mock_client: MagicMock) -> None:
        collection = mock_client.get_or_create_collection.return_value
        collection.query.return_value = {
            "ids": [["a", "b"]],
            "metadatas": [[{"url": "https://a.test", "head": "", "body": "A"}, {"url": "https://b.test", "body": "B"}]],
            "distances": [[0.0, 1.0]],
        }

        hits = chroma.similarity_search([0.5, 0.5], k=2)

        collection.query.assert_called_once_with(
            query_embeddings=[[0.5, 0.5]],
            n_results=2,
            include=["metadatas", "distances"],
        )
        assert [h.id for h in hits] == ["a", "b"]
        assert all(isinstance(h, QueryHit) for h in hits)
        assert hits[0].score == 1.0
        assert hits[1].score == 0.5
        assert hits[1].metadata.body == "B"

    def test_invalid_metadata_is_skipped(self, chroma: ChromaVectorStore, mock_client: MagicMock) -> None:
        collection = mock_client.get_or_create_collection.return_value
        collection.query.return_value = {
            "ids": [["bad", "good"]],
            "metadatas": [[{"body": "no url"}, {"url": "https://g.test", "body": "ok"}]],
            "distances": [[0.1, 0.2]],
        }
        hits = chroma.similarity_search([1.0], k=2)
        assert [h.id for h in hits] == ["good"]

    def test_empty_collection(self, chroma: ChromaVectorStore, mock_client: MagicMock) -> None:
        mock_client.get_or_create_collection.return_value.query.return_value = {
            "ids": [[]],
            "metadatas": [[]],
            "distances": [[]],
        }
        assert chroma.similarity_search([1.0]) == []

    def test_query_error_is_store_unavailable(self, chroma: ChromaVectorStore, mock_client: MagicMock) -> None:
        mock_client.get_or_create_collection.return_value.query.side_effect = RuntimeError("down")
        with pytest.raises(StoreUnavailableError):
            chroma.similarity_search([1.0])


class TestHousekeeping:
    def test_health_check(self, chroma: ChromaVectorStore, mock_client: MagicMock) -> None:
        assert chroma.health_check() is True
        mock_client.heartbeat.side_effect = ConnectionError("gone")
        assert chroma.health_check() is False

    def test_count(self, chroma: ChromaVectorStore, mock_client: MagicMock) -> None:
        mock_client.get_or_create_collection.return_value.count.return_value = 3
        assert chroma.count() == 3

    def test_count_error_is_store_unavailable(self, chroma: ChromaVectorStore, mock_client: MagicMock) -> None:
        mock_client.get_or_create_collection.return_value.count.side_effect = RuntimeError("down")
        with pytest.raises(StoreUnavailableError, match="count failed"):
            chroma.count()
