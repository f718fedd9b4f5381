from __future__ import annotations

import logging

import typer

from web_rag import __version__
from web_rag.config import settings
from web_rag.errors import RagError, StoreUnavailableError
from web_rag.ingestion.models import IngestStatus
from web_rag.logging_utils import setup_logging
from web_rag.runtime import RagRuntime, build_runtime

app = typer.Typer(add_completion=False, help="Ingest web pages and ask questions about them")

log = logging.getLogger("web_rag.cli")


def _runtime() -> RagRuntime:
    setup_logging(settings.log_level)
    try:
        return build_runtime(settings)
    except StoreUnavailableError as exc:
        typer.echo(f"Vector store unavailable: {exc}", err=True)
        raise typer.Exit(code=1)


@app.command()
def ingest(url: str = typer.Argument(..., help="Page URL to ingest")) -> None:
    """
    Fetch a page, chunk and embed it, and store it in the vector store.
    """
    runtime = _runtime()
    report = runtime.ingestor.ingest(url)

    if report.status is IngestStatus.FAILED:
        typer.echo(f"Failed to ingest {url}: {report.reason}", err=True)
        raise typer.Exit(code=1)
    if report.status is IngestStatus.PARTIAL:
        typer.echo(
            f"Partially ingested {report.url}: {report.records_written} records "
            f"({report.reason})"
        )
        raise typer.Exit(code=1)

    typer.echo(f"Ingested {report.url}: {report.records_written} records, {report.chunks_total} chunks")


@app.command()
def ask(question: str = typer.Argument(..., help="Question to answer from the ingested pages")) -> None:
    """
    Answer a question using the closest stored content as context.
    """
    runtime = _runtime()
    try:
        answer = runtime.answerer.answer_with_sources(question)
    except RagError as exc:
        log.error("Failed to answer %r: %s", question, exc)
        typer.echo(f"Failed to answer: {exc}", err=True)
        raise typer.Exit(code=1)

    typer.echo(answer.text)
    if answer.sources:
        typer.echo(f"\nSources: {', '.join(answer.sources)}")


@app.command()
def health() -> None:
    """Check that the configuration loads and the vector store is reachable."""
    runtime = _runtime()

    log.info("Chat model: %s", settings.llm_model_name)
    log.info("Embedding model: %s", settings.embedding_model)
    log.info("Chroma: %s:%s (collection=%s)", settings.chroma_host, settings.chroma_port, settings.chroma_collection)
    if not settings.openai_api_key:
        log.warning("OPENAI_API_KEY is not set; ingest and ask will fail")

    if not runtime.store.health_check():
        typer.echo("UNHEALTHY")
        raise typer.Exit(code=1)
    typer.echo(f"OK ({runtime.store.count()} records in {runtime.store.collection_name})")


@app.command()
def version() -> None:
    """Print version and exit."""
    typer.echo(f"web-rag {__version__}")


if __name__ == "__main__":
    app()
