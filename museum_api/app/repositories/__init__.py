"""
Data access layer.

Each repository wraps an open ``sqlite3.Connection`` and holds the SQL
for one table.  Repositories never commit: the service that created
the connection through ``core.db.transaction`` owns the transaction.
"""

from .artefact import ArtefactRepository
from .loan import LoanRepository
from .manager import ManagerRepository
from .open_day import OpenDayRepository
from .visitor import VisitorRepository

__all__ = [
    "ArtefactRepository",
    "LoanRepository",
    "ManagerRepository",
    "OpenDayRepository",
    "VisitorRepository",
]
