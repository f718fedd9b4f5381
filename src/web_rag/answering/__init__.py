"""
Answering — retrieval-augmented generation over the ingested pages.

Public API
----------
- :class:`Answerer` — embed a question, retrieve context, generate an answer.
- :class:`AnswerGenerator` — credential-checked chat model wrapper.
- :func:`build_answer_prompt` — prompt assembly.
"""

from web_rag.answering.answerer import Answer, Answerer
from web_rag.answering.llm import AnswerGenerator, get_llm
from web_rag.answering.prompts import build_answer_prompt

__all__ = [
    "Answer",
    "AnswerGenerator",
    "Answerer",
    "build_answer_prompt",
    "get_llm",
]
