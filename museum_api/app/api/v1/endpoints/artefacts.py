"""
Artefact endpoints for API v1.

CRUD routes over the museum collection.  ``GET /artefacts/?canLoan=true``
lists only the artefacts visitors may borrow.
"""

from typing import List, Optional

from fastapi import APIRouter, HTTPException, Path, Query, status

from museum_api.app.core.exceptions import MuseumError, NotFoundError
from museum_api.app.schemas.artefact import ArtefactCreate, ArtefactRead, ArtefactUpdate
from museum_api.app.services.artefact_service import ArtefactService

router = APIRouter()


@router.get("/", response_model=List[ArtefactRead])
async def list_artefacts(
    can_loan: Optional[bool] = Query(None, alias="canLoan"),
) -> List[ArtefactRead]:
    return await ArtefactService.get_all_artefacts(can_loan)


@router.post("/", response_model=ArtefactRead, status_code=status.HTTP_201_CREATED)
async def create_artefact(artefact: ArtefactCreate) -> ArtefactRead:
    return await ArtefactService.create_artefact(artefact)


@router.get("/{artefact_id}", response_model=ArtefactRead)
async def get_artefact(artefact_id: int = Path(..., description="ID of the artefact")) -> ArtefactRead:
    try:
        return await ArtefactService.retrieve_artefact(artefact_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.put("/{artefact_id}", response_model=ArtefactRead)
async def update_artefact(
    changes: ArtefactUpdate,
    artefact_id: int = Path(..., description="ID of the artefact"),
) -> ArtefactRead:
    try:
        return await ArtefactService.update_artefact(artefact_id, changes)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.delete("/{artefact_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_artefact(artefact_id: int = Path(..., description="ID of the artefact")) -> None:
    """Delete an artefact.  Artefacts on loan cannot be deleted."""
    try:
        await ArtefactService.delete_artefact(artefact_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except MuseumError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
