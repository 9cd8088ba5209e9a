"""Pydantic model for the museum manager.

The manager is a single account; only its username is exposed.
"""

from pydantic import BaseModel


class ManagerRead(BaseModel):
    username: str

    model_config = {
        "from_attributes": True,
    }
