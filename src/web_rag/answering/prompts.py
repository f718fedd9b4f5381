"""Prompt template for context-grounded answering."""

from __future__ import annotations

from langchain_core.messages import BaseMessage, HumanMessage, SystemMessage

ANSWER_SYSTEM = """\
You answer questions about web pages that were ingested into a knowledge
base.

Use **only** the context provided in the user message.  If the context
does not contain the answer, say that you don't know instead of guessing.
When it helps, mention the source URL the answer came from.
"""


def build_answer_prompt(question: str, bodies: list[str], urls: list[str]) -> list[BaseMessage]:
    """Build the chat prompt from retrieved *bodies*, their *urls* and the *question*."""
    context = ", ".join(bodies) if bodies else "(no context retrieved)"
    sources = ", ".join(urls) if urls else "(none)"
    return [
        SystemMessage(content=ANSWER_SYSTEM),
        HumanMessage(
            content=(
                "Answer the following question based on the context provided.\n\n"
                f"Context: {context}\n"
                f"Url: {sources}\n\n"
                f"Question: {question}"
            )
        ),
    ]
