"""Logging for the posts service.

Application code logs through ``log_event`` so every line starts with one
of the event names below, followed by ``key=value`` fields::

    log_event(logger, "info", EVENT_POST_CREATED, post_id=post.id)

Post content and bearer tokens are never logged; ids and lengths are.
"""

import logging
import sys

EVENT_APP_START = "app_start"
EVENT_AUTH_REJECTED = "auth_rejected"
EVENT_POST_CREATED = "post_created"
EVENT_POST_UPDATED = "post_updated"
EVENT_POST_DELETED = "post_deleted"
EVENT_POST_LOOKUP_DENIED = "post_lookup_denied"  # missing, or owned by another author
EVENT_DB_WRITE_FAILED = "db_write_failed"

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

# Marks the handler installed by setup_logging
_HANDLER_MARKER = "_bloggit_posts_handler"


def setup_logging(level: int | str = logging.INFO) -> None:
    """Send root logger output to stdout at the given level (LOG_LEVEL)."""
    root = logging.getLogger()
    root.setLevel(level)

    if any(getattr(h, _HANDLER_MARKER, False) for h in root.handlers):
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    setattr(handler, _HANDLER_MARKER, True)
    root.addHandler(handler)


def log_event(logger: logging.Logger, level: str, event_name: str, **fields: object) -> None:
    """Log ``event_name: k1=v1 k2=v2`` with the logger method named by ``level``."""
    message = event_name
    if fields:
        message += ": " + " ".join(f"{key}={value}" for key, value in fields.items())
    getattr(logger, level, logger.info)(message)
