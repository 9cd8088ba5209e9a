"""
Application package initializer.

The project is organised in layers: ``api`` holds the versioned HTTP
routers, ``services`` the business rules for each museum entity,
``repositories`` the SQL for each table and ``schemas`` the pydantic
models exchanged with clients.  Requests flow from a router to a
service, which opens a transaction and works through the repositories.
"""

from .main import app  # noqa: F401
