import time
from typing import Callable, List, Optional

from pydantic import ValidationError as DecodeError

from ..database import DocumentStore
from ..errors import PersistenceError
from ..models import CommentDoc
from ..pagination import Paginate
from .task_manager import inserted_object_id


class CommentService:
    def __init__(self, store: DocumentStore, clock: Optional[Callable[[], float]] = None):
        self.store = store
        self.clock = clock or time.time

    async def create_comment(self, owner_id: str, task_id: str, content: str) -> CommentDoc:
        """Store a comment on ``task_id``; the task itself is not looked up."""
        comment = CommentDoc(
            owner_id=owner_id,
            task_id=task_id,
            content=content,
            create_date=int(self.clock()),
        )
        inserted_id = await self.store.insert_one(comment.to_document())
        comment.id = inserted_object_id(inserted_id)
        return comment

    async def get_topic_comments(self, task_id: str, page: int, limit: int) -> List[CommentDoc]:
        documents = await self.store.find({"task_id": task_id}, **Paginate(page, limit).find_options())
        try:
            return [CommentDoc.model_validate(document) for document in documents]
        except DecodeError as exc:
            raise PersistenceError(f"cannot decode comment document: {exc}") from exc
