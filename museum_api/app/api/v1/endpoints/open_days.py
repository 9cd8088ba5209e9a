"""
Open day endpoints for API v1.

Routes to maintain the museum calendar.  Dates are exchanged as ISO
``YYYY-MM-DD`` strings.
"""

from datetime import date
from typing import List

from fastapi import APIRouter, HTTPException, Path, Query, status

from museum_api.app.core.exceptions import MuseumError, NotFoundError
from museum_api.app.schemas.open_day import OpenDayCreate, OpenDayRead
from museum_api.app.services.open_day_service import OpenDayService

router = APIRouter()


@router.get("/", response_model=List[OpenDayRead])
async def list_open_days() -> List[OpenDayRead]:
    """List all open days in calendar order."""
    return await OpenDayService.get_all_open_days()


@router.post("/", response_model=OpenDayRead, status_code=status.HTTP_201_CREATED)
async def create_open_day(open_day: OpenDayCreate) -> OpenDayRead:
    try:
        return await OpenDayService.create_open_day(open_day.date)
    except MuseumError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


# Declared before "/{day}" so that "next" is not parsed as a date.
@router.get("/next", response_model=OpenDayRead)
async def next_open_day(on_or_after: date = Query(..., alias="onOrAfter")) -> OpenDayRead:
    """Return the first open day on or after the given date."""
    try:
        return await OpenDayService.next_open_day_on_or_after(on_or_after)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.get("/{day}", response_model=OpenDayRead)
async def get_open_day(day: date = Path(..., description="Calendar date (YYYY-MM-DD)")) -> OpenDayRead:
    try:
        return await OpenDayService.retrieve_open_day(day)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.delete("/{day}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_open_day(day: date = Path(..., description="Calendar date (YYYY-MM-DD)")) -> None:
    try:
        await OpenDayService.delete_open_day(day)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except MuseumError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
