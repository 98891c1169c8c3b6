"""
HTTP client for the Auth and Vendor services.
"""
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional
import logging

import httpx

from ..auth_service.schemas import LoginRequest, RegisterRequest
from ..common.config import Settings
from ..common.schemas import validate
from ..vendor_service.schemas import StoreCreate, VendorProfileCreate

logger = logging.getLogger(__name__)

NETWORK_ERROR_MESSAGE = "Network error. Please try again."


@dataclass(frozen=True)
class Credentials:
    """Bearer token scoped to one signed-in vendor session."""

    token: str

    def headers(self) -> Dict[str, str]:
        return {"Authorization": f"Bearer {self.token}"}

    def __repr__(self):
        return "Credentials(token=<redacted>)"


class ClientError(Exception):
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NetworkError(ClientError):
    """The service could not be reached."""


class RequestFailed(ClientError):
    """The service answered with an error status."""

    def __init__(self, status_code: int, message: str):
        super().__init__(message)
        self.status_code = status_code


class AuthenticationRequired(RequestFailed):
    """401 from a service; the caller must sign in again."""


def _error_message(response: httpx.Response, default: str) -> str:
    try:
        data = response.json()
    except ValueError:
        return default
    if isinstance(data, dict):
        detail = data.get("detail") or data.get("message")
        if isinstance(detail, str):
            return detail
    return default


class MarketplaceClient:
    """
    Calls the Auth Service and the Vendor Service.

    Payloads are validated locally before any request is made; error
    statuses are raised as ``RequestFailed`` (``AuthenticationRequired``
    for 401) and transport failures as ``NetworkError``.
    """

    def __init__(self, auth_http: httpx.Client, vendor_http: httpx.Client):
        self.auth_http = auth_http
        self.vendor_http = vendor_http

    @classmethod
    def from_settings(cls, settings: Settings) -> "MarketplaceClient":
        return cls(
            auth_http=httpx.Client(base_url=settings.AUTH_SERVICE_URL, timeout=settings.CLIENT_TIMEOUT_SECONDS),
            vendor_http=httpx.Client(base_url=settings.VENDOR_SERVICE_URL, timeout=settings.CLIENT_TIMEOUT_SECONDS),
        )

    def close(self) -> None:
        self.auth_http.close()
        self.vendor_http.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    def _send(
        self,
        http: httpx.Client,
        method: str,
        path: str,
        credentials: Optional[Credentials] = None,
        json: Optional[Mapping[str, Any]] = None,
        default_error: str = "Request failed",
    ) -> Any:
        headers = credentials.headers() if credentials else {}
        try:
            response = http.request(method, path, json=json, headers=headers)
        except httpx.TransportError as e:
            logger.warning(f"{method} {path} failed: {e}")
            raise NetworkError(NETWORK_ERROR_MESSAGE) from e

        if response.status_code == 401:
            raise AuthenticationRequired(401, _error_message(response, "Authentication required"))
        if response.is_error:
            raise RequestFailed(response.status_code, _error_message(response, default_error))
        return response.json()

    # ---------------- Auth Service ----------------

    def register(self, email: str, password: str) -> Dict[str, Any]:
        body = validate(RegisterRequest, {"email": email, "password": password})
        return self._send(
            self.auth_http, "POST", "/auth/register",
            json=body.model_dump(by_alias=True), default_error="Registration failed",
        )

    def login(self, email: str, password: str) -> Dict[str, Any]:
        body = validate(LoginRequest, {"email": email, "password": password})
        return self._send(
            self.auth_http, "POST", "/auth/login",
            json=body.model_dump(by_alias=True), default_error="Login failed",
        )

    # ---------------- Vendor Service ----------------

    def create_vendor_profile(self, credentials: Credentials, fields: Mapping[str, Any]) -> Dict[str, Any]:
        body = validate(VendorProfileCreate, fields)
        return self._send(
            self.vendor_http, "POST", "/vendor/profile", credentials,
            json=body.model_dump(by_alias=True, exclude_none=True),
            default_error="Failed to create vendor profile",
        )

    def get_vendor_profile(self, credentials: Credentials) -> Dict[str, Any]:
        return self._send(
            self.vendor_http, "GET", "/vendor/profile", credentials,
            default_error="Failed to load profile",
        )

    def create_store(
        self, credentials: Credentials, name: str, slug: str, description: Optional[str] = None
    ) -> Dict[str, Any]:
        body = validate(StoreCreate, {"name": name, "slug": slug, "description": description})
        return self._send(
            self.vendor_http, "POST", "/vendor/stores", credentials,
            json=body.model_dump(by_alias=True, exclude_none=True),
            default_error="Failed to create store",
        )

    def list_stores(self, credentials: Credentials) -> List[Dict[str, Any]]:
        return self._send(
            self.vendor_http, "GET", "/vendor/stores", credentials,
            default_error="Failed to load stores",
        )
