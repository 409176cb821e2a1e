"""
Pydantic schema definitions for API payloads.

Request bodies are decoded into these models before they reach the
store, so a body that does not fit the album shape never becomes a
blank record.
"""
