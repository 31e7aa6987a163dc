"""Conversions between request/response schemas and the Post entity."""

import uuid
from datetime import UTC

from app.core.exceptions import UnauthorizedException
from app.models.base import utc_now
from app.models.post import Post, MAX_AUTHOR_ID_LENGTH
from app.models.user_context import UserContext
from app.schemas.post_schemas import NewPostRequest, PostResponse

UNAUTHENTICATED_CREATE_MESSAGE = "User must be authenticated to create posts"
AUTHOR_ID_TOO_LONG_MESSAGE = f"User identifier exceeds {MAX_AUTHOR_ID_LENGTH} characters"


def to_entity(request: NewPostRequest, user_context: UserContext) -> Post:
    """
    Build a new Post for the calling author.

    Raises:
        UnauthorizedException: If the caller has no user id, an empty one, or
            one longer than the authorId column. Raised before anything is
            constructed or staged.
    """
    author_id = user_context.get_current_user_id()
    if not author_id:
        raise UnauthorizedException(UNAUTHENTICATED_CREATE_MESSAGE)
    if len(author_id) > MAX_AUTHOR_ID_LENGTH:
        raise UnauthorizedException(AUTHOR_ID_TOO_LONG_MESSAGE)

    return Post(
        id=uuid.uuid4(),
        title=request.title,
        content=request.content,
        author_id=author_id,
        date_created=utc_now(),
    )


def to_response(post: Post) -> PostResponse:
    """Map a Post to its public shape (author_id is never exposed)"""
    created_at = post.date_created
    # SQLite hands timestamps back without tzinfo; they are stored as UTC
    if created_at.tzinfo is None:
        created_at = created_at.replace(tzinfo=UTC)

    return PostResponse(
        id=post.id,
        title=post.title,
        content=post.content,
        created_at=created_at,
    )
