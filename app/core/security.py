from jose import JWTError, jwt
from app.config import settings
from app.core.exceptions import UnauthorizedException


def decode_jwt(token: str) -> dict:
    """
    Decode and validate JWT token using shared SECRET_KEY.

    Only signature, format and expiry are checked here. The subject claim is
    read later through UserContext so that a missing or empty subject can be
    told apart from an invalid token.

    Args:
        token: JWT access token from Authorization header

    Returns:
        Decoded token payload with 'sub', 'exp', etc.

    Raises:
        UnauthorizedException: If token invalid, expired, or malformed
    """
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.JWT_ALGORITHM])
    except JWTError as e:
        raise UnauthorizedException(f"Invalid token: {str(e)}")

    # jose only validates 'exp' when present
    if payload.get("exp") is None:
        raise UnauthorizedException("Token missing expiration")

    return payload
