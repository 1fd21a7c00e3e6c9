# app/schemas/common.py
from typing import Generic, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    """
    Success envelope shared by every endpoint:

        {"success": true, "data": ..., "message": "..."}
    """

    success: bool = True
    data: T | None = None
    message: str | None = None


class FieldErrorDetail(BaseModel):
    field: str
    message: str


class ErrorBody(BaseModel):
    code: str
    message: str
    details: list[FieldErrorDetail] | None = None


class ErrorResponse(BaseModel):
    """Error envelope (documented in OpenAPI; built by app.core.errors)."""

    success: bool = False
    error: ErrorBody
