from pydantic import BaseModel, StrictInt
from typing import Optional


class TaskCreate(BaseModel):
    """Schema for creating new tasks; fields are trimmed and checked by the router."""
    topic: str = ""
    description: str = ""


class TaskUpdate(BaseModel):
    """Schema for updating a task. Only status is supported; booleans and strings are rejected."""
    status: Optional[StrictInt] = None
