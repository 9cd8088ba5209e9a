"""
Pydantic models for museum visitors.

Visitors are identified by their username.  The password is accepted
when the account is created but is never returned by the API.
"""

from typing import Optional

from pydantic import BaseModel, Field


class VisitorBase(BaseModel):
    username: str = Field(..., min_length=1, description="Unique login name of the visitor")
    name: Optional[str] = Field(None, description="Display name")


class VisitorCreate(VisitorBase):
    """Schema for registering a visitor."""

    password: str = Field(..., description="Plain text password, at least 8 characters")


class VisitorRead(VisitorBase):
    """Schema for reading a visitor from the API."""

    balance: float = 0.0
    loan_count: int = Field(0, description="Number of loans currently held or requested")

    model_config = {
        "from_attributes": True,
    }
