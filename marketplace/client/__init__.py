"""
Client-side flows of the storefront and vendor portal.

Credentials are passed explicitly into every call as a ``Credentials`` value.
"""
from .http import (
    AuthenticationRequired,
    Credentials,
    MarketplaceClient,
    NetworkError,
    RequestFailed,
)

__all__ = [
    "AuthenticationRequired",
    "Credentials",
    "MarketplaceClient",
    "NetworkError",
    "RequestFailed",
]
