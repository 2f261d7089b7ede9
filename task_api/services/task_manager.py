import time
from typing import Callable, List, Optional

from bson import ObjectId
from bson.errors import InvalidId
from pydantic import ValidationError as DecodeError

from ..database import DocumentStore
from ..errors import IdentifierDecodeError, InvalidIdentifierError, NotFoundError, PersistenceError
from ..logging_config import get_logger
from ..models import TaskDoc, TaskStatus
from ..pagination import Paginate

logger = get_logger(__name__)

# archive_date is populated on archival, so "not archived" means absent or null
NOT_ARCHIVED = {
    "$or": [
        {"archive_date": {"$exists": False}},
        {"archive_date": None},
    ]
}


def parse_object_id(value: str) -> ObjectId:
    try:
        return ObjectId(value)
    except (InvalidId, TypeError) as exc:
        raise InvalidIdentifierError(value) from exc


def inserted_object_id(inserted_id) -> str:
    """Hex form of an insert acknowledgment; anything but an ObjectId is a driver fault."""
    if not isinstance(inserted_id, ObjectId):
        logger.error("cannot convert inserted id %r to object id", inserted_id)
        raise IdentifierDecodeError("cannot convert inserted id to object id")
    return str(inserted_id)


class TaskManager:
    """Task creation, status updates, archival and listing.

    Mutations are owner-scoped through the update filter; there is no
    separate ownership check.
    """

    def __init__(self, store: DocumentStore, clock: Optional[Callable[[], float]] = None):
        self.store = store
        self.clock = clock or time.time

    def now(self) -> int:
        return int(self.clock())

    async def create_task(self, owner_id: str, topic: str, description: str) -> TaskDoc:
        task = TaskDoc(
            topic=topic,
            description=description,
            status=TaskStatus.OPEN,
            create_date=self.now(),
            owner_id=owner_id,
        )
        inserted_id = await self.store.insert_one(task.to_document())
        task.id = inserted_object_id(inserted_id)
        logger.info("Task created", extra={"task_id": task.id, "owner_id": owner_id})
        return task

    async def get_all_task(self, page: int, limit: int) -> List[TaskDoc]:
        documents = await self.store.find(NOT_ARCHIVED, **Paginate(page, limit).find_options())
        return _decode_tasks(documents)

    async def get_task(self, task_id: str) -> TaskDoc:
        try:
            document = await self.store.find_one(
                {"_id": parse_object_id(task_id), **NOT_ARCHIVED},
                sort=[("_id", 1)],
            )
        except NotFoundError as exc:
            raise NotFoundError("Task not found") from exc
        return _decode_tasks([document])[0]

    async def update_task_status(self, owner_id: str, task_id: str, status: TaskStatus) -> int:
        """Set status and update_date; returns the matched count (0 is not an error)."""
        matched = await self.store.update_one(
            {"_id": parse_object_id(task_id), "owner_id": owner_id},
            {"$set": {"status": int(status), "update_date": self.now()}},
        )
        if not matched:
            logger.debug("Status update matched nothing", extra={"task_id": task_id, "owner_id": owner_id})
        return matched

    async def archive_task(self, owner_id: str, task_id: str) -> int:
        now = self.now()
        return await self.store.update_one(
            {"_id": parse_object_id(task_id), "owner_id": owner_id},
            {"$set": {"archive_date": now, "update_date": now}},
        )


def _decode_tasks(documents) -> List[TaskDoc]:
    try:
        return [TaskDoc.model_validate(document) for document in documents]
    except DecodeError as exc:
        raise PersistenceError(f"cannot decode task document: {exc}") from exc
