import enum
from typing import Optional

from .base import Document


class TaskStatus(enum.IntEnum):
    OPEN = 1
    IN_PROGRESS = 2
    DONE = 3


class TaskDoc(Document):
    """A task. Archival populates ``archive_date`` instead of deleting."""

    topic: str
    description: str
    status: TaskStatus = TaskStatus.OPEN
    create_date: int
    owner_id: str
    archive_date: Optional[int] = None
    update_date: Optional[int] = None
