from typing import Optional

from .base import Document


class CommentDoc(Document):
    owner_id: str
    task_id: str
    content: str
    create_date: int
    update_date: Optional[int] = None
