"""
Retrieval — vector storage and nearest-neighbour search.

This module wraps the vector store behind a clean interface so that the
ingestion and answering layers never need to know which DB is backing
them.

Public surface
--------------
- :class:`VectorStoreBase` — abstract backend.
- :class:`ChromaVectorStore` — default Chroma backend.
- :class:`RecordMetadata`, :class:`QueryHit` — data models.
"""

from web_rag.retrieval.base import VectorStoreBase
from web_rag.retrieval.models import QueryHit, RecordMetadata, chunk_record_id

__all__ = [
    "ChromaVectorStore",
    "QueryHit",
    "RecordMetadata",
    "VectorStoreBase",
    "chunk_record_id",
]


def __getattr__(name: str):  # noqa: ANN001
    """Lazy-import ChromaVectorStore to avoid pulling in chromadb at import time."""
    if name == "ChromaVectorStore":
        from web_rag.retrieval.chroma_store import ChromaVectorStore

        return ChromaVectorStore
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
