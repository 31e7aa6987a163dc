import uuid
from datetime import datetime
from sqlalchemy import String, Text, DateTime, Uuid
from sqlalchemy.orm import Mapped, mapped_column
from app.models.base import Base, utc_now

MAX_TITLE_LENGTH = 200
MAX_AUTHOR_ID_LENGTH = 100


class Post(Base):
    """
    Blog post owned by a single author.

    author_id is the 'sub' claim of the creating caller and never changes.
    Isolation between authors is done by filtering on author_id, there is no
    users table to reference.
    """

    __tablename__ = "Posts"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    title: Mapped[str] = mapped_column(String(MAX_TITLE_LENGTH), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    author_id: Mapped[str] = mapped_column(
        "authorId",
        String(MAX_AUTHOR_ID_LENGTH),
        nullable=False,
        index=True,  # Every caller-facing query filters on it
    )
    date_created: Mapped[datetime] = mapped_column(
        "dateCreated", DateTime(timezone=True), nullable=False, default=utc_now
    )

    def __repr__(self) -> str:
        return f"<Post(id={self.id}, author_id={self.author_id!r})>"
