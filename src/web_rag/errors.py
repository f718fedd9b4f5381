"""Typed failures raised by every stage of the ingestion and query paths.

Library exceptions (``requests``, ``chromadb``, LangChain providers) are
wrapped into one of these at the boundary that calls the library, so the
orchestration layers only ever deal with :class:`RagError`.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """Machine-readable failure category carried by every :class:`RagError`."""

    INVALID_INPUT = "invalid_input"
    MISSING_CREDENTIAL = "missing_credential"
    TRANSPORT_FAILURE = "transport_failure"
    EMPTY_RESULT = "empty_result"
    STORE_UNAVAILABLE = "store_unavailable"


class RagError(Exception):
    """Base class for all expected pipeline failures."""

    kind: ErrorKind = ErrorKind.TRANSPORT_FAILURE


class InvalidInputError(RagError, ValueError):
    """Empty URL / question or a non-positive chunk size."""

    kind = ErrorKind.INVALID_INPUT


class MissingCredentialError(RagError):
    """No API key is configured for the embedding or generation model."""

    kind = ErrorKind.MISSING_CREDENTIAL


class TransportError(RagError):
    """A fetch, embedding or generation call failed."""

    kind = ErrorKind.TRANSPORT_FAILURE


class EmptyResultError(RagError):
    """The model answered, but with no usable text or vector."""

    kind = ErrorKind.EMPTY_RESULT


class StoreUnavailableError(RagError):
    """The vector store could not be reached or rejected the request."""

    kind = ErrorKind.STORE_UNAVAILABLE
