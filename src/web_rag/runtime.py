"""Wire the store, ingestor and answerer together from settings."""

from __future__ import annotations

from dataclasses import dataclass

from web_rag.answering.answerer import Answerer
from web_rag.answering.llm import AnswerGenerator
from web_rag.config import Settings, settings
from web_rag.ingestion.embedder import Embedder
from web_rag.ingestion.extractor import PageExtractor
from web_rag.ingestion.ingestor import Ingestor
from web_rag.retrieval.base import VectorStoreBase


@dataclass
class RagRuntime:
    store: VectorStoreBase
    ingestor: Ingestor
    answerer: Answerer


def build_runtime(
    config: Settings = settings,
    *,
    store: VectorStoreBase | None = None,
    connect: bool = True,
) -> RagRuntime:
    """Build every component from *config* and connect the store.

    The liveness check runs here, so a missing vector store fails
    immediately with :class:`~web_rag.errors.StoreUnavailableError`.
    """
    if store is None:
        from web_rag.retrieval.chroma_store import ChromaVectorStore

        store = ChromaVectorStore(
            config.chroma_collection,
            host=config.chroma_host,
            port=config.chroma_port,
            distance=config.chroma_distance,
        )
    if connect:
        store.connect()

    embedder = Embedder.from_settings(config)
    ingestor = Ingestor(
        PageExtractor(timeout=config.request_timeout),
        embedder,
        store,
        chunk_size=config.chunk_size,
        composite_chunk_ids=config.composite_chunk_ids,
    )
    answerer = Answerer(
        embedder,
        store,
        AnswerGenerator.from_settings(config),
        top_k=config.retrieval_top_k,
    )
    return RagRuntime(store=store, ingestor=ingestor, answerer=answerer)
