class BloggitException(Exception):
    """Base exception for the posts service"""

    pass


class UnauthorizedException(BloggitException):
    """Raised when the caller has no usable identity (bad token or missing subject)"""

    pass


class NotFoundException(BloggitException):
    """
    Raised when a resource is missing or owned by another author.

    The two cases are deliberately merged so cross-tenant existence is never observable.
    """

    pass


class ValidationException(BloggitException):
    """Raised for business logic validation errors"""

    pass


class StorageException(BloggitException):
    """Raised when the database rejects a commit"""

    pass
