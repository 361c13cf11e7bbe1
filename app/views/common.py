"""Common response schemas."""

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    success: bool = False
    detail: str


class SuccessResponse(BaseModel):
    success: bool = True
    message: str
