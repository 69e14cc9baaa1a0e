"""Common schemas for TaskCell Server."""

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Error response schema."""

    message: str = Field(..., description="Human readable error message")

    class Config:
        json_schema_extra = {"example": {"message": "task not found"}}
