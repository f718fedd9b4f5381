"""web_rag — ingest web pages into a vector store and answer questions over them."""

__version__ = "0.1.0"
