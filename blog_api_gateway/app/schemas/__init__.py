"""
Pydantic schema definitions for API payloads.

Request models double as the validation layer: field constraints are
declared here and checked by FastAPI before a handler runs.  Each
request model converts itself into the record type stored by the
repositories.
"""
