from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


# PUBLIC_INTERFACE
class TodoCreate(BaseModel):
    """
    Schema for creating a new Todo item.

    The title is optional at the schema level so that a missing, null or blank
    title reaches the handler and is rejected with a 400 ``{"error": ...}``.
    """

    model_config = ConfigDict(json_schema_extra={"example": {"title": "Buy groceries"}})

    title: Optional[str] = Field(default=None, description="Short title for the todo item")

    @field_validator("title")
    @classmethod
    def strip_title(cls, v: Optional[str]) -> Optional[str]:
        """
        Strip surrounding whitespace; emptiness is checked by the handler.
        """
        if v is None:
            return v
        return v.strip()


# PUBLIC_INTERFACE
class TodoOut(BaseModel):
    """
    Schema returned by the API for a Todo item.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "id": 123,
                "title": "Buy groceries",
                "done": False,
                "createdAt": "2025-01-25T10:15:30",
            }
        },
    )

    id: int = Field(..., description="Unique identifier of the todo item")
    title: str = Field(..., description="Short title for the todo item")
    done: bool = Field(..., description="Completion status flag")
    created_at: Optional[datetime] = Field(
        default=None, alias="createdAt", description="Creation timestamp"
    )


class SuccessOut(BaseModel):
    success: bool = True


class ErrorOut(BaseModel):
    error: str = Field(..., description="Human readable error message")


class HealthOut(BaseModel):
    status: str = "ok"


class HelloOut(BaseModel):
    message: str


class EchoOut(BaseModel):
    echoed: Any = Field(default=None, description="The request body, unmodified")


class EnvOut(BaseModel):
    env: str = Field(..., description="Environment mode the service runs in")
