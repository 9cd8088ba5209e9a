"""
Top‑level router for version 1 of the API.

This router aggregates the entity routers (manager, loans, visitors,
artefacts and open days) under a unified prefix.
"""

from fastapi import APIRouter

from .endpoints import artefacts, loans, manager, open_days, visitors

router = APIRouter()

router.include_router(manager.router, prefix="/manager", tags=["manager"])
router.include_router(loans.router, prefix="/loans", tags=["loans"])
router.include_router(visitors.router, prefix="/visitors", tags=["visitors"])
router.include_router(artefacts.router, prefix="/artefacts", tags=["artefacts"])
router.include_router(open_days.router, prefix="/open-days", tags=["open-days"])
