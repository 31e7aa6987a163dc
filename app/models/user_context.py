"""Caller identity for request authorization."""

from dataclasses import dataclass, field

SUBJECT_CLAIM = "sub"
NAME_IDENTIFIER_CLAIM = "http://schemas.xmlsoap.org/ws/2005/05/identity/claims/nameidentifier"


@dataclass(frozen=True)
class Principal:
    """
    Authenticated principal built from a decoded bearer token.

    Attributes:
        claims: Decoded JWT payload
        authenticated: False for anonymous principals
    """

    claims: dict = field(default_factory=dict)
    authenticated: bool = True

    def find_claim(self, claim_type: str) -> str | None:
        value = self.claims.get(claim_type)
        if value is None:
            return None
        return str(value)


@dataclass(frozen=True)
class UserContext:
    """
    Per-request view of who is calling.

    Built explicitly for each request and passed down to the service and
    mapping functions. Nothing is cached across requests.

    Attributes:
        principal: The caller's principal, or None when no request identity exists
    """

    principal: Principal | None = None

    def get_current_user_id(self) -> str | None:
        """
        Return the tenant identifier (author id) of the caller.

        Returns None when there is no principal, the principal is not
        authenticated, or it carries no subject claim. An empty claim value is
        returned as "" so callers can decide how to treat it.
        """
        principal = self.principal
        if principal is None or not principal.authenticated:
            return None

        user_id = principal.find_claim(SUBJECT_CLAIM)
        if user_id is None:
            user_id = principal.find_claim(NAME_IDENTIFIER_CLAIM)
        return user_id

    def __repr__(self) -> str:
        return f"<UserContext(user_id={self.get_current_user_id()!r})>"
