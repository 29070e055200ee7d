from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class TaskCreateDTO(BaseModel):
    # Presence is checked by the domain so every missing field is reported at once
    title: str | None = None
    description: str | None = None
    time_spent: str | None = Field(None, alias="timeSpent")

    model_config = ConfigDict(populate_by_name=True)


class TaskDTO(BaseModel):
    id: str
    title: str
    description: str
    time_spent: str = Field(alias="timeSpent")
    completed: bool = False
    created_at: datetime = Field(alias="createdAt")
    updated_at: datetime = Field(alias="updatedAt")

    model_config = ConfigDict(populate_by_name=True)


class MessageDTO(BaseModel):
    message: str


class ErrorDTO(BaseModel):
    error: str
    fields: list[str] | None = None
