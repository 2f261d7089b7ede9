from typing import Any, List, Mapping, Optional, Protocol, Sequence, Tuple

from pymongo import AsyncMongoClient, WriteConcern
from pymongo.asynchronous.collection import AsyncCollection
from pymongo.errors import PyMongoError

from . import config
from .errors import NotFoundError, PersistenceError, StoreTimeoutError
from .logging_config import get_logger

logger = get_logger(__name__)

SortSpec = Sequence[Tuple[str, int]]


class DocumentStore(Protocol):
    """The four collection operations the services depend on."""

    async def insert_one(self, document: Mapping[str, Any]) -> Any: ...

    async def find_one(self, filter: Mapping[str, Any], sort: Optional[SortSpec] = None) -> dict: ...

    async def find(self, filter: Mapping[str, Any], skip: int = 0, limit: int = 0) -> List[dict]: ...

    async def update_one(self, filter: Mapping[str, Any], update: Mapping[str, Any]) -> int: ...


def _store_error(operation: str, collection: str, exc: PyMongoError) -> PersistenceError:
    logger.error("%s on %s failed: %s", operation, collection, exc)
    if exc.timeout:
        return StoreTimeoutError(f"{operation} on {collection} timed out")
    return PersistenceError(f"{operation} on {collection} failed: {exc}")


class CollectionGateway:
    """DocumentStore backed by a single pymongo collection.

    Every driver error is re-raised as PersistenceError. Callers bound a call
    with ``pymongo.timeout(seconds)``; otherwise the client's default applies.
    """

    def __init__(self, collection: AsyncCollection):
        self.collection = collection

    @property
    def name(self) -> str:
        return self.collection.name

    async def insert_one(self, document):
        try:
            result = await self.collection.insert_one(dict(document))
        except PyMongoError as exc:
            raise _store_error("insert_one", self.name, exc) from exc
        return result.inserted_id

    async def find_one(self, filter, sort=None):
        try:
            document = await self.collection.find_one(filter, sort=list(sort) if sort else None)
        except PyMongoError as exc:
            raise _store_error("find_one", self.name, exc) from exc
        if document is None:
            raise NotFoundError(f"no document in {self.name} matches the filter")
        return document

    async def find(self, filter, skip=0, limit=0):
        try:
            cursor = self.collection.find(filter, skip=skip, limit=limit)
            return await cursor.to_list(None)
        except PyMongoError as exc:
            raise _store_error("find", self.name, exc) from exc

    async def update_one(self, filter, update):
        try:
            result = await self.collection.update_one(filter, update)
        except PyMongoError as exc:
            raise _store_error("update_one", self.name, exc) from exc
        return result.matched_count


class MongoDB:
    """Process-wide MongoDB connection, opened at startup and closed at shutdown."""

    def __init__(self, host: str = config.MONGO_HOST, db_name: str = config.MONGO_DBNAME):
        self.host = host
        self.db_name = db_name
        self.client: Optional[AsyncMongoClient] = None

    async def open(self) -> None:
        options = {
            "appname": config.MONGO_APP_NAME,
            "connectTimeoutMS": int(config.MONGO_CONNECT_TIMEOUT * 1000),
            "timeoutMS": int(config.MONGO_DEFAULT_TIMEOUT * 1000),
        }
        if config.MONGO_USERNAME:
            options.update(
                username=config.MONGO_USERNAME,
                password=config.MONGO_PASSWORD,
                authSource=self.db_name,
                authMechanism="SCRAM-SHA-1",
            )
        self.client = AsyncMongoClient(self.host, **options)
        try:
            await self.client.aconnect()
        except PyMongoError as exc:
            logger.error("cannot connect to MongoDB (%s): %s", self.db_name, exc)
            raise PersistenceError(f"cannot connect to MongoDB: {exc}") from exc

    async def status(self) -> None:
        """Ping the primary; raises PersistenceError when unreachable."""
        if self.client is None:
            raise PersistenceError("MongoDB connection is not open")
        try:
            await self.client.admin.command("ping")
        except PyMongoError as exc:
            raise PersistenceError(f"MongoDB ping failed: {exc}") from exc

    async def close(self, force: bool = False) -> None:
        """Disconnect. Without ``force`` an unreachable server is left alone."""
        if self.client is None:
            return
        if not force:
            try:
                await self.status()
            except PersistenceError:
                logger.warning("MongoDB unreachable at shutdown, skipping disconnect")
                return
        await self.client.close()
        self.client = None

    def get_collection(self, name: str) -> CollectionGateway:
        if self.client is None:
            raise PersistenceError("MongoDB connection is not open")
        collection = self.client[self.db_name].get_collection(
            name, write_concern=WriteConcern(w="majority")
        )
        return CollectionGateway(collection)
