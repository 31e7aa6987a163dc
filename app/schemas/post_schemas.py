import uuid
from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field, field_validator
from app.models.post import MAX_TITLE_LENGTH


class NewPostRequest(BaseModel):
    """Schema for creating a new post"""

    title: str = Field(..., min_length=1, max_length=MAX_TITLE_LENGTH)
    content: str = Field(..., min_length=1)

    @field_validator("title", "content")
    @classmethod
    def not_blank(cls, value: str) -> str:
        # Whitespace-only counts as empty; the value itself is kept verbatim
        if not value.strip():
            raise ValueError("must not be blank")
        return value


class UpdatePostRequest(BaseModel):
    """
    Schema for updating a post.

    Only title and content can change. id is optional and, when sent, must
    match the id in the URL. Any other field (author, creation date) is ignored.
    """

    id: uuid.UUID | None = None
    title: str = Field(..., min_length=1, max_length=MAX_TITLE_LENGTH)
    content: str = Field(..., min_length=1)

    @field_validator("title", "content")
    @classmethod
    def not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value


class PostResponse(BaseModel):
    """Schema for post response"""

    id: uuid.UUID
    title: str
    content: str
    created_at: datetime = Field(alias="createdAt")

    model_config = ConfigDict(populate_by_name=True)
