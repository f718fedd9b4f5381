"""FastAPI application exposing ingestion and RAG answering as a REST API."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, HTTPException, Request
from pydantic import BaseModel

from web_rag import __version__
from web_rag.config import settings
from web_rag.errors import ErrorKind, RagError
from web_rag.ingestion.models import IngestReport, IngestStatus
from web_rag.logging_utils import setup_logging
from web_rag.runtime import RagRuntime, build_runtime

_STATUS_BY_KIND = {
    ErrorKind.INVALID_INPUT: 422,
    ErrorKind.MISSING_CREDENTIAL: 503,
    ErrorKind.STORE_UNAVAILABLE: 503,
    ErrorKind.TRANSPORT_FAILURE: 502,
    ErrorKind.EMPTY_RESULT: 502,
}


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Connect the vector store once; a failed liveness check aborts startup."""
    setup_logging(settings.log_level)
    if getattr(app.state, "runtime", None) is None:
        app.state.runtime = build_runtime(settings)
    yield


app = FastAPI(
    title="Web RAG API",
    version=__version__,
    description="Ingest web pages and answer questions about them.",
    lifespan=lifespan,
)


def get_runtime(request: Request) -> RagRuntime:
    return request.app.state.runtime


# ── Request / Response schemas ────────────────────────────────────────
class IngestRequest(BaseModel):
    """Page to ingest."""

    url: str


class QueryRequest(BaseModel):
    """Incoming question from the user."""

    query: str


class QueryResponse(BaseModel):
    """Answer returned by the model."""

    answer: str
    sources: list[str] = []


# ── Routes ────────────────────────────────────────────────────────────
@app.get("/health")
async def health() -> dict[str, str]:
    """Liveness probe."""
    return {"status": "ok"}


@app.post("/ingest", response_model=IngestReport)
def ingest(request: IngestRequest, runtime: RagRuntime = Depends(get_runtime)) -> IngestReport:
    """Ingest one page and return the ingestion report."""
    report = runtime.ingestor.ingest(request.url)
    if report.status is IngestStatus.FAILED and report.error_kind is not None:
        raise HTTPException(status_code=_STATUS_BY_KIND[report.error_kind], detail=report.reason)
    return report


@app.post("/query", response_model=QueryResponse)
def query(request: QueryRequest, runtime: RagRuntime = Depends(get_runtime)) -> QueryResponse:
    """Answer a question from the stored pages."""
    try:
        answer = runtime.answerer.answer_with_sources(request.query)
    except RagError as exc:
        raise HTTPException(status_code=_STATUS_BY_KIND[exc.kind], detail=str(exc)) from exc
    return QueryResponse(answer=answer.text, sources=answer.sources)
