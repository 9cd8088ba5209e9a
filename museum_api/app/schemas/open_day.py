"""Pydantic models for open days, the calendar days the museum operates."""

import datetime

from pydantic import BaseModel


class OpenDayCreate(BaseModel):
    date: datetime.date


class OpenDayRead(OpenDayCreate):
    id: int

    model_config = {
        "from_attributes": True,
    }
