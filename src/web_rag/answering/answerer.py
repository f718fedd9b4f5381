"""Question answering over the vector store.

Usage::

    store = ChromaVectorStore()
    store.connect()
    answerer = Answerer(Embedder.from_settings(), store, AnswerGenerator.from_settings())
    print(answerer.answer("What does the pricing page say about refunds?"))
"""

from __future__ import annotations

import logging

from pydantic import BaseModel, Field

from web_rag.answering.llm import AnswerGenerator
from web_rag.answering.prompts import build_answer_prompt
from web_rag.config import settings
from web_rag.errors import InvalidInputError
from web_rag.ingestion.embedder import Embedder
from web_rag.retrieval.base import VectorStoreBase
from web_rag.retrieval.models import QueryHit

logger = logging.getLogger(__name__)


class Answer(BaseModel):
    """Generated answer with the URLs whose content was used as context."""

    text: str
    sources: list[str] = Field(default_factory=list)


def _non_blank(values: list[str]) -> list[str]:
    return [v for v in values if v and v.strip()]


class Answerer:
    """Embed a question, fetch the nearest records and ask the chat model.

    Parameters
    ----------
    embedder:
        Used for the question embedding.
    store:
        A connected vector-store backend.
    generator:
        Chat model wrapper producing the final text.
    top_k:
        Number of records used as context.
    """

    def __init__(
        self,
        embedder: Embedder,
        store: VectorStoreBase,
        generator: AnswerGenerator,
        *,
        top_k: int = settings.retrieval_top_k,
    ) -> None:
        self._embedder = embedder
        self._store = store
        self._generator = generator
        self.top_k = top_k

    def retrieve(self, question: str) -> list[QueryHit]:
        embedding = self._embedder.embed(question)
        hits = self._store.similarity_search(embedding, k=self.top_k)
        logger.info("Retrieved %d records for %r", len(hits), question)
        return hits

    def answer_with_sources(self, question: str) -> Answer:
        """Answer *question* and report which URLs supplied the context."""
        if not question or not question.strip():
            raise InvalidInputError("a question is required")

        self._embedder.check_credentials()
        self._generator.check_credentials()

        hits = self.retrieve(question)
        bodies = _non_blank([hit.metadata.body for hit in hits])
        urls = _non_blank([hit.metadata.url for hit in hits])

        text = self._generator.generate(build_answer_prompt(question, bodies, urls))
        return Answer(text=text, sources=urls)

    def answer(self, question: str) -> str:
        return self.answer_with_sources(question).text
