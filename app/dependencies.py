import logging
from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from app.core.exceptions import UnauthorizedException
from app.core.logging import log_event, EVENT_AUTH_REJECTED
from app.core.security import decode_jwt
from app.models.post import MAX_AUTHOR_ID_LENGTH
from app.models.user_context import Principal, UserContext

logger = logging.getLogger(__name__)

# auto_error=False so a missing header reaches our own 401 handling
security = HTTPBearer(auto_error=False)


async def get_user_context(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
) -> UserContext:
    """
    FastAPI dependency building the caller's UserContext for this request.

    Flow:
    1. Extract token from Authorization: Bearer <token>
    2. Validate JWT using shared SECRET_KEY
    3. Wrap the claims in an authenticated Principal

    A request without a bearer token gets a context with no principal.

    Raises:
        UnauthorizedException: If a token was sent but is invalid or expired
    """
    if credentials is None:
        return UserContext()

    try:
        claims = decode_jwt(credentials.credentials)
    except UnauthorizedException as e:
        log_event(logger, "warning", EVENT_AUTH_REJECTED, reason=str(e))
        raise

    return UserContext(principal=Principal(claims=claims))


async def require_user_context(
    user_context: UserContext = Depends(get_user_context),
) -> UserContext:
    """
    FastAPI dependency for routes that need an identified caller.

    Raises:
        UnauthorizedException: If there is no token, or the token carries no
            (or an empty) user identifier, or one too long to store as author
    """
    if user_context.principal is None:
        log_event(logger, "info", EVENT_AUTH_REJECTED, reason="missing_token")
        raise UnauthorizedException("Not authenticated")
    user_id = user_context.get_current_user_id()
    if not user_id:
        log_event(logger, "warning", EVENT_AUTH_REJECTED, reason="missing_subject")
        raise UnauthorizedException("Token missing user identifier")
    if len(user_id) > MAX_AUTHOR_ID_LENGTH:
        log_event(logger, "warning", EVENT_AUTH_REJECTED, reason="subject_too_long")
        raise UnauthorizedException("Token user identifier too long")
    return user_context
