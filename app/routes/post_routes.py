import uuid
from fastapi import APIRouter, Depends, Request, Response, status
from sqlalchemy.orm import Session

from app.database import get_db
from app.dependencies import require_user_context
from app.mappings.post_mappings import to_response
from app.models.user_context import UserContext
from app.services.post_service import PostService
from app.schemas.post_schemas import NewPostRequest, UpdatePostRequest, PostResponse

router = APIRouter()


@router.get("", response_model=list[PostResponse])
async def list_posts(
    user_context: UserContext = Depends(require_user_context), db: Session = Depends(get_db)
):
    """Get all posts of the authenticated user, newest first"""
    service = PostService(db)
    posts = service.get_author_posts(user_context)
    return [to_response(post) for post in posts]


@router.get("/{post_id}", response_model=PostResponse, name="get_post")
async def get_post(
    post_id: uuid.UUID,
    user_context: UserContext = Depends(require_user_context),
    db: Session = Depends(get_db),
):
    """Get specific post"""
    service = PostService(db)
    post = service.get_post(post_id, user_context)
    return to_response(post)


@router.post("", response_model=PostResponse, status_code=status.HTTP_201_CREATED)
async def create_post(
    data: NewPostRequest,
    request: Request,
    response: Response,
    user_context: UserContext = Depends(require_user_context),
    db: Session = Depends(get_db),
):
    """Create a new post for the authenticated user"""
    service = PostService(db)
    post = service.create_post(data, user_context)
    response.headers["Location"] = str(request.url_for("get_post", post_id=str(post.id)))
    return to_response(post)


@router.patch("/{post_id}", response_model=PostResponse)
async def update_post(
    post_id: uuid.UUID,
    data: UpdatePostRequest,
    user_context: UserContext = Depends(require_user_context),
    db: Session = Depends(get_db),
):
    """Update post title and content"""
    service = PostService(db)
    post = service.update_post(post_id, data, user_context)
    return to_response(post)


@router.delete("/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_post(
    post_id: uuid.UUID,
    user_context: UserContext = Depends(require_user_context),
    db: Session = Depends(get_db),
):
    """Delete post"""
    service = PostService(db)
    service.delete_post(post_id, user_context)
    return None
