from pydantic import BaseModel, Field, field_validator


class ProfileDoc(BaseModel):
    """Owner profile, maintained by the identity system and read-only here."""

    owner_id: str
    display_name: str = ""
    email: str = ""
    display_pic: str = ""
    update_date: int = Field(default=0, exclude=True)
    create_date: int = Field(default=0, exclude=True)

    @field_validator("display_name", "email", "display_pic", mode="before")
    @classmethod
    def _null_text(cls, value):
        return "" if value is None else value

    @field_validator("update_date", "create_date", mode="before")
    @classmethod
    def _null_date(cls, value):
        return 0 if value is None else value
