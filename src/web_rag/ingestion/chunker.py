"""Word-boundary text chunking."""

from __future__ import annotations

from web_rag.errors import InvalidInputError


def chunk_text(text: str, max_size: int) -> list[str]:
    """Split *text* into chunks of at most *max_size* characters.

    Words (runs of non-space characters) are accumulated greedily and
    joined by single spaces; a chunk is closed as soon as the next word
    would push it past *max_size*.  Text is never split mid-word, so a
    word longer than *max_size* is emitted on its own.

    Parameters
    ----------
    text:
        Arbitrary text, typically a page body.
    max_size:
        Maximum number of characters per chunk.  Must be positive.

    Returns
    -------
    list[str]
        Ordered, non-overlapping chunks.  Empty when *text* holds no words.
    """
    if max_size <= 0:
        raise InvalidInputError(f"chunk size must be greater than 0, got {max_size}")

    chunks: list[str] = []
    current: list[str] = []
    length = 0

    for word in text.split(" "):
        if not word:
            continue
        added = len(word) + (1 if current else 0)
        if current and length + added > max_size:
            chunks.append(" ".join(current))
            current, length = [word], len(word)
        else:
            current.append(word)
            length += added

    if current:
        chunks.append(" ".join(current))
    return chunks
