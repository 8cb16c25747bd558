"""
Pydantic schema definitions for API payloads.

Schemas are separated from the store records to decouple the API
representation (which carries the derived ``href``) from storage.
"""
