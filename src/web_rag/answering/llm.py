"""LLM initialisation — single place to swap providers.

Supports two modes:

1. **OpenAI cloud** (default) — set ``OPENAI_API_KEY``.
2. **OpenAI-compatible endpoint** — set ``LLM_BASE_URL`` as well
   (vLLM, a local gateway, …); ``ChatOpenAI`` works unchanged.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from langchain_openai import ChatOpenAI

from web_rag.config import Settings, require_api_key, settings
from web_rag.errors import EmptyResultError, TransportError

if TYPE_CHECKING:
    from langchain_core.language_models import BaseChatModel
    from langchain_core.messages import BaseMessage

logger = logging.getLogger(__name__)


def get_llm(config: Settings = settings) -> ChatOpenAI:
    """Return the configured chat model.

    Raises :class:`~web_rag.errors.MissingCredentialError` when no API key
    is configured.
    """
    kwargs: dict = {
        "model": config.llm_model_name,
        "temperature": config.llm_temperature,
        "api_key": require_api_key(config.openai_api_key),
    }
    if config.llm_base_url:
        logger.info("Using OpenAI-compatible endpoint: %s", config.llm_base_url)
        kwargs["base_url"] = config.llm_base_url
    return ChatOpenAI(**kwargs)


class AnswerGenerator:
    """Run a prompt through a chat model and return its text.

    Parameters
    ----------
    api_key:
        Model credential, checked before every call.
    llm:
        Pre-built chat model (tests inject a fake).  When omitted it is
        built from *config* on first use.
    config:
        Settings used to build the default model.
    """

    def __init__(
        self,
        api_key: str = "",
        *,
        llm: BaseChatModel | None = None,
        config: Settings = settings,
    ) -> None:
        self._api_key = api_key
        self._llm = llm
        self._config = config

    @classmethod
    def from_settings(cls, config: Settings = settings) -> AnswerGenerator:
        return cls(config.openai_api_key, config=config)

    def check_credentials(self) -> None:
        require_api_key(self._api_key)

    def generate(self, messages: list[BaseMessage]) -> str:
        self.check_credentials()
        if self._llm is None:
            self._llm = get_llm(self._config.model_copy(update={"openai_api_key": self._api_key}))

        try:
            response = self._llm.invoke(messages)
        except Exception as exc:
            raise TransportError(f"generation request failed: {exc}") from exc

        text = response.content if isinstance(response.content, str) else ""
        if not text.strip():
            raise EmptyResultError("the model returned no text")
        return text
