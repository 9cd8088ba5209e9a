"""
Service layer.

Each service encapsulates the business rules for one museum entity.
Services open a transaction per call through ``core.db.transaction``,
work through the repositories and return pydantic read models.  Rule
violations are raised as ``core.exceptions.MuseumError``.
"""
