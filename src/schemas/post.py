"""Post schemas."""

from datetime import datetime
from typing import Annotated

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from src.schemas.rules import optional_text, required_text

TITLE_REQUIRED = "Title text is required!"
BODY_REQUIRED = "Body text is required!"


class PostCreate(BaseModel):
    """Create a new post."""

    title: Annotated[str | None, required_text(TITLE_REQUIRED, max_length=255)] = Field(
        None, validate_default=True
    )
    body: Annotated[str | None, required_text(BODY_REQUIRED)] = Field(None, validate_default=True)


class PostUpdate(BaseModel):
    """Update a post; omitted fields keep their stored value."""

    title: Annotated[str | None, optional_text(TITLE_REQUIRED, max_length=255)] = None
    body: Annotated[str | None, optional_text(BODY_REQUIRED)] = None


class PostResponse(BaseModel):
    """Post response; ``user`` is the owner's id."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    user: str = Field(validation_alias=AliasChoices("user_id", "user"))
    title: str
    body: str
    date: datetime


class MessageResponse(BaseModel):
    msg: str
