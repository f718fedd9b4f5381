"""Chroma implementation of the vector-store abstraction."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

from web_rag.config import settings
from web_rag.errors import StoreUnavailableError
from web_rag.retrieval.base import VectorStoreBase
from web_rag.retrieval.models import QueryHit, RecordMetadata

logger = logging.getLogger(__name__)


class ChromaVectorStore(VectorStoreBase):
    """Chroma-backed vector store.

    Nothing is opened at construction time; call :meth:`connect` once at
    startup.  The resulting client is owned by this object and shared with
    whoever the store is passed to.

    Parameters
    ----------
    collection_name:
        Name of the Chroma collection.
    host:
        Chroma server hostname.
    port:
        Chroma server port.
    distance:
        Distance function used when the collection is first created
        (``cosine`` | ``l2`` | ``ip``).
    client:
        Pre-built Chroma client (an ``EphemeralClient`` or a mock).  When
        omitted, :meth:`connect` builds a ``chromadb.HttpClient``.
    """

    def __init__(
        self,
        collection_name: str = settings.chroma_collection,
        *,
        host: str = settings.chroma_host,
        port: int = settings.chroma_port,
        distance: str = settings.chroma_distance,
        client: Any = None,
    ) -> None:
        super().__init__(collection_name)
        self._host = host
        self._port = port
        self._distance = distance
        self._client = client

    # -- connection -----------------------------------------------------------

    def connect(self) -> None:
        if self._client is None:
            import chromadb

            try:
                self._client = chromadb.HttpClient(host=self._host, port=self._port)
            except Exception as exc:
                raise StoreUnavailableError(
                    f"cannot connect to Chroma at {self._host}:{self._port}: {exc}"
                ) from exc
        try:
            self._client.heartbeat()
        except Exception as exc:
            raise StoreUnavailableError(
                f"Chroma at {self._host}:{self._port} failed the liveness check: {exc}"
            ) from exc
        logger.info("Connected to Chroma at %s:%s (collection=%s)", self._host, self._port, self.collection_name)

    def _collection(self) -> Any:
        if self._client is None:
            raise StoreUnavailableError("vector store is not connected; call connect() first")
        try:
            return self._client.get_or_create_collection(
                self.collection_name,
                metadata={"hnsw:space": self._distance},
            )
        except Exception as exc:
            raise StoreUnavailableError(f"cannot open collection {self.collection_name!r}: {exc}") from exc

    # -- VectorStoreBase overrides --------------------------------------------

    def upsert(self, record_id: str, embedding: list[float], metadata: RecordMetadata) -> None:
        metadata = RecordMetadata.model_validate(metadata)
        collection = self._collection()
        try:
            collection.upsert(
                ids=[record_id],
                embeddings=[embedding],
                metadatas=[metadata.to_store()],
                documents=[metadata.body],
            )
        except Exception as exc:
            raise StoreUnavailableError(f"upsert of {record_id!r} failed: {exc}") from exc
        logger.debug("Upserted %s (%d-dim)", record_id, len(embedding))

    def similarity_search(self, query_embedding: list[float], *, k: int = 1) -> list[QueryHit]:
        collection = self._collection()
        try:
            results = collection.query(
                query_embeddings=[query_embedding],
                n_results=k,
                include=["metadatas", "distances"],
            )
        except Exception as exc:
            raise StoreUnavailableError(f"query failed: {exc}") from exc

        ids = (results.get("ids") or [[]])[0]
        metas = (results.get("metadatas") or [[]])[0]
        distances = (results.get("distances") or [[]])[0]

        hits: list[QueryHit] = []
        for record_id, meta, dist in zip(ids, metas, distances):
            try:
                metadata = RecordMetadata.model_validate(meta or {})
            except ValidationError:
                logger.warning("Skipping %s: metadata does not match the record schema", record_id)
                continue
            # Chroma returns distances; convert to a 0-1 similarity score.
            score = 1.0 / (1.0 + dist)
            hits.append(QueryHit(id=record_id, score=score, distance=dist, metadata=metadata))
        return hits

    def health_check(self) -> bool:
        if self._client is None:
            return False
        try:
            self._client.heartbeat()
            return True
        except Exception:
            logger.warning("Chroma health-check failed", exc_info=True)
            return False

    def count(self) -> int:
        try:
            return self._collection().count()
        except StoreUnavailableError:
            raise
        except Exception as exc:
            raise StoreUnavailableError(f"count failed: {exc}") from exc
