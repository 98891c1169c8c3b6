"""
Logging setup shared by all marketplace services.
"""
import logging
import os
import sys

from .config import Settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

auth_logger = logging.getLogger("marketplace.auth_events")


def configure_logging(settings: Settings) -> None:
    """
    Configure stdout logging and, when LOG_DIR is set, a log file.

    A log directory that cannot be created only disables the file handler.
    """
    handlers = [logging.StreamHandler(sys.stdout)]

    if settings.LOG_DIR:
        try:
            os.makedirs(settings.LOG_DIR, exist_ok=True)
            handlers.append(logging.FileHandler(os.path.join(settings.LOG_DIR, "marketplace.log")))
        except OSError as e:
            print(f"WARNING: Could not set up file logging: {e}", file=sys.stderr)

    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt='%Y-%m-%d %H:%M:%S',
        handlers=handlers
    )


ALLOWED_EVENT_TYPES = {
    "register",
    "login_success",
    "login_failure",
}


def log_auth_event(event_type: str, email: str, user_id: str = None) -> None:
    """
    Write one line per authentication outcome.

    Args:
        event_type: One of: register, login_success, login_failure
        email: Email address the request was made for
        user_id: ID of the matched user, if any

    Raises:
        ValueError: If event_type is invalid
    """
    if event_type not in ALLOWED_EVENT_TYPES:
        raise ValueError(
            f"Invalid event_type '{event_type}'. Must be one of: {', '.join(sorted(ALLOWED_EVENT_TYPES))}"
        )

    level = logging.WARNING if event_type == "login_failure" else logging.INFO
    auth_logger.log(level, "AUTH %s user_id=%s email=%s", event_type, user_id, email)
