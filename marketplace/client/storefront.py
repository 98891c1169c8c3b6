"""
Storefront vendor signup: account registration followed by the business
profile, ending in a hand-off into the vendor portal.
"""
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Tuple
from urllib.parse import quote
import logging

from ..common.errors import ValidationFailed
from ..common.schemas import validate
from ..vendor_service.schemas import VendorProfileCreate
from .http import AuthenticationRequired, ClientError, Credentials, MarketplaceClient, NetworkError, RequestFailed

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Registration:
    email: str
    password: str
    confirm_password: str


@dataclass(frozen=True)
class SignupResult:
    credentials: Credentials
    vendor: Dict[str, Any]
    redirect_url: str
    user: Optional[Dict[str, Any]] = None


class SignupRestart(Exception):
    """The token was rejected during step 2; registration must start over."""

    message = "Authentication failed. Please try again."


class SignupIncomplete(ClientError):
    """The account was created but the vendor profile was not."""

    def __init__(self, credentials: Credentials, user: Dict[str, Any], cause: ClientError):
        super().__init__(cause.message)
        self.credentials = credentials
        self.user = user
        self.cause = cause


def portal_admin_url(portal_url: str, vendor_id: str, credentials: Credentials) -> str:
    """URL of the vendor's admin page carrying the one-time token hand-off."""
    return f"{portal_url.rstrip('/')}/vendors/{quote(vendor_id, safe='')}/admin?token={quote(credentials.token, safe='')}"


def register_account(client: MarketplaceClient, registration: Registration) -> Tuple[Credentials, Dict[str, Any]]:
    """
    Step 1: create the account.

    Returns the credentials of the new user and the user record; keep them
    so step 2 can be resubmitted without registering again.
    """
    if registration.password != registration.confirm_password:
        raise ValidationFailed("Passwords do not match")

    registered = client.register(registration.email, registration.password)
    logger.info(f"Account registered: user_id={registered['user']['id']}")
    return Credentials(registered["token"]), registered["user"]


def complete_vendor_profile(
    client: MarketplaceClient,
    credentials: Credentials,
    vendor_fields: Mapping[str, Any],
    portal_url: str,
    user: Optional[Dict[str, Any]] = None,
) -> SignupResult:
    """
    Step 2: create the vendor profile with the step 1 credentials.

    Raises:
        SignupRestart: the vendor service rejected the token
        RequestFailed, NetworkError, ValidationFailed: step 2 can be retried
            with the same credentials
    """
    try:
        created = client.create_vendor_profile(credentials, vendor_fields)
    except AuthenticationRequired as e:
        raise SignupRestart(SignupRestart.message) from e

    vendor = created["vendor"]
    return SignupResult(
        credentials=credentials,
        user=user,
        vendor=vendor,
        redirect_url=portal_admin_url(portal_url, vendor["id"], credentials),
    )


def signup_vendor(
    client: MarketplaceClient,
    registration: Registration,
    vendor_fields: Mapping[str, Any],
    portal_url: str,
) -> SignupResult:
    """
    Run both signup steps.

    Vendor fields are validated before the account is created.

    Raises:
        ValidationFailed: passwords differ or a field is rejected locally
        RequestFailed: step 1 was refused (e.g. 409 duplicate email)
        NetworkError: step 1 could not reach the auth service
        SignupRestart: the vendor service rejected the fresh token
        SignupIncomplete: the account exists but step 2 failed; carries the
            credentials for ``complete_vendor_profile``
    """
    validate(VendorProfileCreate, vendor_fields)
    credentials, user = register_account(client, registration)

    try:
        return complete_vendor_profile(client, credentials, vendor_fields, portal_url, user=user)
    except (RequestFailed, NetworkError) as e:
        logger.warning(f"Vendor profile step failed for user_id={user['id']}: {e.message}")
        raise SignupIncomplete(credentials, user, e) from e
