import logging
import uuid
from typing import Optional
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.exceptions import StorageException
from app.core.logging import log_event, EVENT_DB_WRITE_FAILED
from app.models.post import Post

logger = logging.getLogger(__name__)


class PostRepository:
    """
    Repository for Post model operations with multi-tenant support.

    The session is the unit of work: add/update/remove only stage changes,
    nothing is written until save() commits. add_and_save() and delete()
    commit immediately.

    get_by_id, update and remove are not filtered by author. They are for
    internal flows that already hold a post fetched through
    get_by_id_and_author; PostService never calls get_by_id.
    """

    def __init__(self, db: Session):
        self.db = db

    def add_and_save(self, post: Post) -> Post:
        """Insert post and commit"""
        self.db.add(post)
        self.save()
        self.db.refresh(post)
        return post

    def add(self, post: Post) -> None:
        """Stage insert. Caller responsible for save()."""
        self.db.add(post)

    def get_by_id(self, post_id: uuid.UUID) -> Optional[Post]:
        """Get post by primary key, regardless of author (internal use only)"""
        return self.db.get(Post, post_id)

    def get_by_id_and_author(self, post_id: uuid.UUID, author_id: str) -> Optional[Post]:
        """
        Get post ensuring it belongs to the author (multi-tenant safety).

        Returns None if post doesn't exist or belongs to another author.
        """
        return (
            self.db.query(Post)
            .filter(Post.id == post_id, Post.author_id == author_id)
            .first()
        )

    def get_by_author(self, author_id: str) -> list[Post]:
        """
        Get all posts for an author, newest first.

        Ordered by dateCreated only. Posts has no insertion-sequence column,
        so posts sharing the same microsecond timestamp come back in whatever
        order the database returns them.
        """
        return (
            self.db.query(Post)
            .filter(Post.author_id == author_id)
            .order_by(Post.date_created.desc())
            .all()
        )

    def update(self, post: Post) -> None:
        """Stage update of an already fetched post. Caller responsible for save()."""
        self.db.add(post)

    def remove(self, post: Post) -> None:
        """Stage delete. Caller responsible for save()."""
        self.db.delete(post)

    def delete(self, post: Post) -> None:
        """Delete post and commit"""
        self.remove(post)
        self.save()

    def save(self) -> None:
        """
        Commit everything staged in this session.

        Raises:
            StorageException: If the commit fails. The session is rolled back
                so none of the staged changes are applied.
        """
        try:
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            log_event(logger, "error", EVENT_DB_WRITE_FAILED, error_type=type(e).__name__)
            raise StorageException("Failed to save changes") from e
