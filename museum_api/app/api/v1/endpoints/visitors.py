"""
Visitor endpoints for API v1.

Routes to register visitors, look them up, settle their balance and
remove them.
"""

from typing import List

from fastapi import APIRouter, HTTPException, Path, Query, status

from museum_api.app.core.exceptions import MuseumError, NotFoundError
from museum_api.app.schemas.visitor import VisitorCreate, VisitorRead
from museum_api.app.services.visitor_service import VisitorService

router = APIRouter()


@router.get("/", response_model=List[VisitorRead])
async def list_visitors() -> List[VisitorRead]:
    return await VisitorService.get_all_visitors()


@router.post("/", response_model=VisitorRead, status_code=status.HTTP_201_CREATED)
async def create_visitor(visitor: VisitorCreate) -> VisitorRead:
    try:
        return await VisitorService.create_visitor(visitor)
    except MuseumError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.get("/{username}", response_model=VisitorRead)
async def get_visitor(username: str = Path(...)) -> VisitorRead:
    try:
        return await VisitorService.retrieve_visitor(username)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.put("/{username}/balance", response_model=VisitorRead)
async def update_balance(
    username: str = Path(...),
    balance: float = Query(..., description="New outstanding balance; 0 once paid"),
) -> VisitorRead:
    try:
        return await VisitorService.update_balance(username, balance)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except MuseumError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.delete("/{username}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_visitor(username: str = Path(...)) -> None:
    """Delete a visitor and all of their loans."""
    try:
        await VisitorService.delete_visitor(username)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
