"""
Business logic for the museum manager.

There is exactly one manager account, seeded when the database is
initialised.  The service exposes it read-only apart from password
changes.
"""

import logging
from typing import List

from museum_api.app.core.db import transaction
from museum_api.app.core.exceptions import MuseumError, NotFoundError
from museum_api.app.core.security import hash_password, verify_password
from museum_api.app.repositories import ManagerRepository
from museum_api.app.schemas.manager import ManagerRead

MIN_PASSWORD_LENGTH = 8


class ManagerService:
    """Service for the singleton manager account."""

    @classmethod
    async def get_manager(cls) -> ManagerRead:
        with transaction() as conn:
            row = ManagerRepository(conn).get()
            if row is None:
                raise NotFoundError("Manager not found.")
            return ManagerRead(username=row["username"])

    @classmethod
    async def update_manager_password(cls, old_password: str, new_password: str) -> ManagerRead:
        """Replace the manager password.

        The old password must match, and the new one must be at least
        ``MIN_PASSWORD_LENGTH`` characters and differ from the old one.
        Every failed check is reported in the error message.
        """
        logger = logging.getLogger(__name__)
        with transaction() as conn:
            repo = ManagerRepository(conn)
            row = repo.get()
            if row is None:
                raise NotFoundError("Manager not found.")
            errors: List[str] = []
            if not verify_password(old_password, row["password"]):
                errors.append("The old password is incorrect.")
            if len(new_password) < MIN_PASSWORD_LENGTH:
                errors.append(f"The new password must be at least {MIN_PASSWORD_LENGTH} characters long.")
            if new_password == old_password:
                errors.append("The new password must be different from the old password.")
            if errors:
                raise MuseumError(" ".join(errors))
            repo.update_password(hash_password(new_password))
            logger.info("Manager password updated")
            return ManagerRead(username=row["username"])
