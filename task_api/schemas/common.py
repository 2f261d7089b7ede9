from typing import Any

from pydantic import BaseModel


class DataResponse(BaseModel):
    """Envelope for every successful response."""
    data: Any


class ErrorResponse(BaseModel):
    status: int
    error_msg: str
