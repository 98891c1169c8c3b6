"""
Request authentication for the Vendor Service.
"""
import logging

from fastapi import Depends, Request

from ..common.auth_header import bearer_token
from ..common.errors import UnauthorizedError
from ..common.tokens import TokenPayload
from .service import VendorService

logger = logging.getLogger(__name__)


def get_current_user(request: Request, token: str = Depends(bearer_token)) -> TokenPayload:
    """
    Verify the bearer token and return its payload.

    The token is trusted on signature and expiry alone; the user table is
    not consulted.
    """
    try:
        return request.app.state.tokens.verify(token)
    except UnauthorizedError as exc:
        raise UnauthorizedError("Invalid token") from exc


def get_vendor_service(request: Request) -> VendorService:
    return request.app.state.vendor_service
