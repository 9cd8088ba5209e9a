"""
Pydantic schema definitions for API payloads.

Each museum entity defines its own Pydantic models for request and
response bodies.  Schemas are separated from the database rows to
decouple the API representation from persistence; response models
never include passwords.
"""
