"""Response models for the HTTP API.

Identifiers serialize as ``_id`` to keep the established wire format.
"""

from typing import List, Union

from pydantic import BaseModel, ConfigDict, Field


class UserResponse(BaseModel):
    """A registered user."""
    model_config = ConfigDict(populate_by_name=True)

    username: str
    id: str = Field(alias="_id")


class ExerciseResponse(BaseModel):
    """An appended exercise; ``_id`` is the owning user's id."""
    model_config = ConfigDict(populate_by_name=True)

    username: str
    description: str
    duration: Union[int, float]
    date: str = Field(..., description="Calendar date, e.g. 'Mon Jan 01 2024'")
    id: str = Field(alias="_id")


class LogItemResponse(BaseModel):
    """One entry in a user's log."""
    description: str
    duration: Union[int, float]
    date: str


class LogResponse(BaseModel):
    """A user's filtered exercise log."""
    model_config = ConfigDict(populate_by_name=True)

    username: str
    count: int
    id: str = Field(alias="_id")
    log: List[LogItemResponse]
