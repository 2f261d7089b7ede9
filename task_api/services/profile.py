from typing import List, Optional

from pydantic import ValidationError as DecodeError

from ..database import DocumentStore
from ..errors import NotFoundError, PersistenceError
from ..models import ProfileDoc


def _decode(document) -> ProfileDoc:
    try:
        return ProfileDoc.model_validate(document)
    except DecodeError as exc:
        raise PersistenceError(f"cannot decode profile document: {exc}") from exc


class ProfileService:
    """Read-only lookups against the profiles collection."""

    def __init__(self, store: DocumentStore):
        self.store = store

    async def get_profile(self, owner_id: str) -> Optional[ProfileDoc]:
        """Returns None when the owner has no profile."""
        try:
            document = await self.store.find_one({"owner_id": owner_id})
        except NotFoundError:
            return None
        return _decode(document)

    async def get_profile_list(self, owner_ids: List[str]) -> List[ProfileDoc]:
        # Unknown ids are simply absent from the result
        documents = await self.store.find({"owner_id": {"$in": list(owner_ids)}})
        return [_decode(document) for document in documents]
