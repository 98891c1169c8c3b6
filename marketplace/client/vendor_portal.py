"""
Vendor portal page flows.

Every loader takes the caller's credentials explicitly and returns a
``PortalView``: either data to show, an inline error, or a redirect to the
login page (in which case the caller must discard its credentials).
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

from ..common.errors import ValidationFailed
from .http import AuthenticationRequired, Credentials, MarketplaceClient, NetworkError, RequestFailed

LOGIN_PATH = "/login"
NOT_OWNER_MESSAGE = "Unauthorized: You don't own this vendor account"


@dataclass
class PortalView:
    profile: Optional[Dict[str, Any]] = None
    stores: List[Dict[str, Any]] = field(default_factory=list)
    error: Optional[str] = None
    redirect_to: Optional[str] = None

    @property
    def needs_login(self) -> bool:
        return self.redirect_to == LOGIN_PATH


def accept_token_handoff(url: str, stored: Optional[Credentials] = None) -> Tuple[Optional[Credentials], str]:
    """
    Take the one-time ``?token=`` hand-off from a portal URL.

    Returns the credentials to keep and the URL with the token removed.
    Without a token in the URL the stored credentials are returned as-is.
    """
    parts = urlsplit(url)
    query = parse_qsl(parts.query, keep_blank_values=True)
    token = next((value for key, value in query if key == "token" and value), None)
    remaining = [(key, value) for key, value in query if key != "token"]
    clean_url = urlunsplit(parts._replace(query=urlencode(remaining)))

    if token:
        return Credentials(token), clean_url
    return stored, clean_url


def load_admin_view(client: MarketplaceClient, credentials: Optional[Credentials], vendor_id: str) -> PortalView:
    """
    Load the admin page of ``vendor_id``.

    The profile is always fetched with the caller's own token; when its id
    differs from the vendor id in the page path, the view carries an
    error and no profile.
    """
    if credentials is None:
        return PortalView(redirect_to=LOGIN_PATH)

    try:
        profile = client.get_vendor_profile(credentials)
    except AuthenticationRequired:
        return PortalView(redirect_to=LOGIN_PATH)
    except RequestFailed:
        return PortalView(error="Failed to load profile")
    except NetworkError:
        return PortalView(error="Network error")

    if profile.get("id") != vendor_id:
        return PortalView(error=NOT_OWNER_MESSAGE)

    return PortalView(profile=profile, stores=profile.get("stores", []))


def load_dashboard(client: MarketplaceClient, credentials: Optional[Credentials]) -> PortalView:
    """Dashboard: the caller's profile, or a redirect to profile setup when none exists."""
    if credentials is None:
        return PortalView(redirect_to=LOGIN_PATH)

    try:
        profile = client.get_vendor_profile(credentials)
    except AuthenticationRequired:
        return PortalView(redirect_to=LOGIN_PATH)
    except RequestFailed as e:
        if e.status_code == 404:
            return PortalView(redirect_to="/vendor-profile")
        return PortalView(error="Failed to load profile")
    except NetworkError:
        return PortalView(error="Network error")

    return PortalView(profile=profile, stores=profile.get("stores", []))


def load_stores_view(client: MarketplaceClient, credentials: Optional[Credentials]) -> PortalView:
    if credentials is None:
        return PortalView(redirect_to=LOGIN_PATH)

    try:
        stores = client.list_stores(credentials)
    except AuthenticationRequired:
        return PortalView(redirect_to=LOGIN_PATH)
    except RequestFailed:
        return PortalView(error="Failed to load stores")
    except NetworkError:
        return PortalView(error="Network error")

    return PortalView(stores=stores)


def submit_store(
    client: MarketplaceClient,
    credentials: Optional[Credentials],
    name: str,
    slug: str,
    description: Optional[str] = None,
) -> PortalView:
    """Create a store; on success the view redirects to the store list."""
    if credentials is None:
        return PortalView(redirect_to=LOGIN_PATH)

    try:
        client.create_store(credentials, name, slug, description)
    except ValidationFailed as e:
        return PortalView(error=e.message)
    except AuthenticationRequired:
        return PortalView(redirect_to=LOGIN_PATH)
    except RequestFailed as e:
        return PortalView(error=e.message)
    except NetworkError:
        return PortalView(error="Network error. Please try again.")

    return PortalView(redirect_to="/stores")
