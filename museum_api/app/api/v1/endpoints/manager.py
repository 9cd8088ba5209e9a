"""
Manager endpoints for API v1.

The museum has a single manager account.  These routes return it and
change its password; the password itself is never part of a response.
"""

from fastapi import APIRouter, HTTPException, Query, status

from museum_api.app.core.exceptions import MuseumError, NotFoundError
from museum_api.app.schemas.manager import ManagerRead
from museum_api.app.services.manager_service import ManagerService

router = APIRouter()


@router.get("/", response_model=ManagerRead)
async def get_manager() -> ManagerRead:
    """Return the manager account."""
    try:
        return await ManagerService.get_manager()
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.put("/", response_model=ManagerRead)
async def update_password(
    old_password: str = Query(..., alias="oldPassword"),
    new_password: str = Query(..., alias="newPassword"),
) -> ManagerRead:
    """Change the manager password.

    Returns the updated manager (without password) or HTTP 400 listing
    every rule the new password breaks.
    """
    try:
        return await ManagerService.update_manager_password(old_password, new_password)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except MuseumError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
