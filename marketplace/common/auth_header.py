from typing import Optional

from fastapi import Header

from .errors import UnauthorizedError


def bearer_token(
    authorization: Optional[str] = Header(default=None, alias="Authorization"),
) -> str:
    """Extract the token from an ``Authorization: Bearer <token>`` header."""
    if not authorization or not authorization.startswith("Bearer "):
        raise UnauthorizedError("Token not provided")
    token = authorization.split(" ", 1)[1].strip()
    if not token:
        raise UnauthorizedError("Token not provided")
    return token
