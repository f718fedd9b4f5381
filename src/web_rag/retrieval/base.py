"""Abstract base class for vector-store backends.

Adding a new backend only requires subclassing :class:`VectorStoreBase`
and implementing the abstract methods.  The ingestion and answering code
is backend-agnostic.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from web_rag.retrieval.models import QueryHit, RecordMetadata


class VectorStoreBase(ABC):
    """Backend-agnostic vector-store interface.

    Parameters
    ----------
    collection_name:
        Logical name of the single collection used by the whole system.
    """

    def __init__(self, collection_name: str) -> None:
        self.collection_name = collection_name

    # -- required overrides ---------------------------------------------------

    @abstractmethod
    def connect(self) -> None:
        """Open the connection and verify liveness.

        Raises :class:`~web_rag.errors.StoreUnavailableError` when the
        backend cannot be reached.
        """
        ...

    @abstractmethod
    def upsert(self, record_id: str, embedding: list[float], metadata: RecordMetadata) -> None:
        """Insert or overwrite the record stored under *record_id*.

        The collection is created first if it does not exist yet.
        """
        ...

    @abstractmethod
    def similarity_search(self, query_embedding: list[float], *, k: int = 1) -> list[QueryHit]:
        """Return the *k* records nearest to *query_embedding*, best first."""
        ...

    @abstractmethod
    def health_check(self) -> bool:
        """Return ``True`` when the backend is reachable and ready."""
        ...

    # -- optional overrides ---------------------------------------------------

    def count(self) -> int:
        """Number of records in the collection.  Optional — raises by default."""
        raise NotImplementedError(f"{type(self).__name__} does not support count")
