"""
Ingestion — page extraction, chunking, and embedding into the vector store.

This module is responsible for the ETL-like pipeline that turns one web
page into a head record plus one record per body chunk in the vector
database.
"""
