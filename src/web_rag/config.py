"""Shared configuration loaded from environment / .env file."""

from __future__ import annotations

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings

from web_rag.errors import MissingCredentialError


class Settings(BaseSettings):
    """Application-wide settings, populated from env vars or .env file."""

    # Model credential (shared by embedding and generation)
    openai_api_key: str = Field(default="", description="OpenAI API key used for embeddings and chat")

    # LLM
    llm_model_name: str = Field(default="gpt-4o-mini", description="Chat model identifier")
    llm_base_url: str = Field(
        default="",
        description=(
            "Base URL for an OpenAI-compatible API. Leave empty to use OpenAI cloud."
        ),
    )
    llm_temperature: float = 0.0

    # Embedding
    embedding_model: str = "text-embedding-3-small"

    # Vector store
    chroma_host: str = "localhost"
    chroma_port: int = 8000
    chroma_collection: str = "web_scraped_data"
    chroma_distance: Literal["cosine", "l2", "ip"] = "cosine"

    # Ingestion
    chunk_size: int = Field(default=1000, gt=0, description="Maximum characters per body chunk")
    composite_chunk_ids: bool = Field(
        default=True,
        description=(
            "Store body chunks under '<url>#chunk-<n>'. When false every chunk "
            "reuses the bare URL and overwrites the previous record."
        ),
    )
    request_timeout: float = Field(default=30.0, gt=0, description="Page fetch timeout in seconds")

    # Retrieval
    retrieval_top_k: int = Field(default=1, ge=1)

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


def require_api_key(api_key: str | None) -> str:
    """Return *api_key* or raise :class:`MissingCredentialError` when it is blank.

    This is the single place the credential is resolved; both the embedder
    and the chat model go through it before touching the network.
    """
    if not api_key or not api_key.strip():
        raise MissingCredentialError("OPENAI_API_KEY is required")
    return api_key.strip()


# Singleton: import `settings` wherever needed.
settings = Settings()
