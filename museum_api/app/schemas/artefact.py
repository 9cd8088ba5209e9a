"""
Pydantic models for artefacts.

``currently_on_loan`` is maintained by the loan workflow and therefore
only appears on the read model.
"""

from typing import Optional

from pydantic import BaseModel, Field


class ArtefactBase(BaseModel):
    name: str = Field(..., min_length=1)
    description: Optional[str] = None
    can_loan: bool = Field(False, description="Whether visitors may request a loan")
    insurance_fee: float = Field(0.0, ge=0)
    loan_fee: float = Field(0.0, ge=0)


class ArtefactCreate(ArtefactBase):
    """Schema for adding an artefact to the collection."""
    pass


class ArtefactUpdate(BaseModel):
    """Schema for updating an artefact.

    Every field is optional; omitted fields keep their stored value.
    """

    name: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    can_loan: Optional[bool] = None
    insurance_fee: Optional[float] = Field(default=None, ge=0)
    loan_fee: Optional[float] = Field(default=None, ge=0)


class ArtefactRead(ArtefactBase):
    id: int
    currently_on_loan: bool = False

    model_config = {
        "from_attributes": True,
    }
