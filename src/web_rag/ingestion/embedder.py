"""Text → vector conversion through a LangChain embedding model."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from web_rag.config import Settings, require_api_key, settings
from web_rag.errors import EmptyResultError, TransportError

if TYPE_CHECKING:
    from langchain_core.embeddings import Embeddings

logger = logging.getLogger(__name__)


class Embedder:
    """Credential-checked wrapper around a LangChain ``Embeddings`` object.

    Parameters
    ----------
    api_key:
        Model credential.  Checked before every call; a blank key raises
        :class:`~web_rag.errors.MissingCredentialError` without touching
        the model.
    model:
        Embedding model name used when the client is built lazily.
    base_url:
        Optional OpenAI-compatible endpoint.
    client:
        Pre-built ``Embeddings`` implementation (tests inject fakes here).
    """

    def __init__(
        self,
        api_key: str = "",
        *,
        model: str = settings.embedding_model,
        base_url: str = "",
        client: Embeddings | None = None,
    ) -> None:
        self._api_key = api_key
        self.model = model
        self._base_url = base_url
        self._client = client

    @classmethod
    def from_settings(cls, config: Settings = settings) -> Embedder:
        return cls(
            config.openai_api_key,
            model=config.embedding_model,
            base_url=config.llm_base_url,
        )

    def check_credentials(self) -> None:
        require_api_key(self._api_key)

    def _get_client(self) -> Embeddings:
        if self._client is None:
            from langchain_openai import OpenAIEmbeddings

            kwargs: dict = {"model": self.model, "api_key": require_api_key(self._api_key)}
            if self._base_url:
                kwargs["base_url"] = self._base_url
            self._client = OpenAIEmbeddings(**kwargs)
        return self._client

    def embed(self, text: str) -> list[float]:
        """Return the embedding vector for *text*, unmodified.

        The caller is responsible for keeping *text* within the model's
        input limit (see :func:`~web_rag.ingestion.chunker.chunk_text`).
        """
        self.check_credentials()
        client = self._get_client()

        logger.debug("Embedding text (%d chars)", len(text))
        try:
            vector = client.embed_query(text)
        except Exception as exc:
            raise TransportError(f"embedding request failed: {exc}") from exc

        if not vector:
            raise EmptyResultError("embedding model returned an empty vector")
        return list(vector)
