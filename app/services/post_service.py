import logging
import uuid
from sqlalchemy.orm import Session

from app.core.exceptions import NotFoundException, UnauthorizedException, ValidationException
from app.core.logging import (
    log_event,
    EVENT_POST_CREATED,
    EVENT_POST_UPDATED,
    EVENT_POST_DELETED,
    EVENT_POST_LOOKUP_DENIED,
)
from app.mappings.post_mappings import to_entity
from app.models.post import Post
from app.models.user_context import UserContext
from app.repositories.post_repository import PostRepository
from app.schemas.post_schemas import NewPostRequest, UpdatePostRequest

logger = logging.getLogger(__name__)


class PostService:
    """
    Service for post business logic.

    Every operation is scoped to the author resolved from the UserContext.
    Only author-filtered repository lookups are used here, so a post owned by
    someone else behaves exactly like a missing one.
    """

    def __init__(self, db: Session):
        self.db = db
        self.repo = PostRepository(db)

    @staticmethod
    def _require_author_id(user_context: UserContext) -> str:
        author_id = user_context.get_current_user_id()
        if not author_id:
            raise UnauthorizedException("User must be authenticated")
        return author_id

    def create_post(self, data: NewPostRequest, user_context: UserContext) -> Post:
        """Create new post owned by the caller"""
        post = to_entity(data, user_context)
        post = self.repo.add_and_save(post)
        log_event(
            logger,
            "info",
            EVENT_POST_CREATED,
            post_id=post.id,
            title_len=len(post.title),
            content_len=len(post.content),
        )
        return post

    def get_author_posts(self, user_context: UserContext) -> list[Post]:
        """Get all posts for the caller, newest first"""
        return self.repo.get_by_author(self._require_author_id(user_context))

    def get_post(self, post_id: uuid.UUID, user_context: UserContext) -> Post:
        """
        Get specific post ensuring caller ownership.

        Raises:
            NotFoundException: If post not found or belongs to another author
        """
        post = self.repo.get_by_id_and_author(post_id, self._require_author_id(user_context))
        if not post:
            log_event(logger, "info", EVENT_POST_LOOKUP_DENIED, post_id=post_id)
            raise NotFoundException("Post not found")
        return post

    def update_post(
        self, post_id: uuid.UUID, data: UpdatePostRequest, user_context: UserContext
    ) -> Post:
        """
        Replace title and content. Author and creation date are never touched.

        Raises:
            ValidationException: If the body id disagrees with the URL id
            NotFoundException: If post not found or belongs to another author
        """
        if data.id is not None and data.id != post_id:
            raise ValidationException("Post id in body does not match URL")

        post = self.get_post(post_id, user_context)
        post.title = data.title
        post.content = data.content

        self.repo.update(post)
        self.repo.save()
        self.db.refresh(post)
        log_event(logger, "info", EVENT_POST_UPDATED, post_id=post.id)
        return post

    def delete_post(self, post_id: uuid.UUID, user_context: UserContext) -> None:
        """Delete post owned by the caller"""
        post = self.get_post(post_id, user_context)
        self.repo.delete(post)
        log_event(logger, "info", EVENT_POST_DELETED, post_id=post_id)
