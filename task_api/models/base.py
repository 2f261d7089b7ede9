from typing import Annotated, Optional

from pydantic import AliasChoices, BaseModel, BeforeValidator, Field

# ObjectId on the way in, 24-hex string on the way out
DocumentId = Annotated[str, BeforeValidator(str)]


class Document(BaseModel):
    """Base for documents read from and written to a collection.

    Reads accept the store's ``_id``; responses always render ``id``.
    """

    id: Optional[DocumentId] = Field(default=None, validation_alias=AliasChoices("_id", "id"))

    def to_document(self) -> dict:
        """Field mapping for insert; the store assigns ``_id``."""
        return self.model_dump(exclude={"id"}, mode="json")
