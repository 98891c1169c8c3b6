from urllib.parse import parse_qs, urlsplit

import httpx
import pytest

from marketplace.client import AuthenticationRequired, Credentials, MarketplaceClient, NetworkError, RequestFailed
from marketplace.client.storefront import (
    Registration,
    SignupIncomplete,
    SignupRestart,
    complete_vendor_profile,
    register_account,
    signup_vendor,
)
from marketplace.client.vendor_portal import (
    NOT_OWNER_MESSAGE,
    accept_token_handoff,
    load_admin_view,
    load_dashboard,
    load_stores_view,
    submit_store,
)
from marketplace.common.errors import ValidationFailed

from .helpers import VENDOR_FIELDS


@pytest.fixture
def client(auth_client, vendor_client):
    return MarketplaceClient(auth_http=auth_client, vendor_http=vendor_client)


@pytest.fixture
def offline_client():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    transport = httpx.MockTransport(handler)
    return MarketplaceClient(
        auth_http=httpx.Client(transport=transport, base_url="http://auth-service"),
        vendor_http=httpx.Client(transport=transport, base_url="http://vendor-service"),
    )


def signup(client, email="funnel@example.com"):
    return signup_vendor(
        client,
        Registration(email=email, password="pw1", confirm_password="pw1"),
        VENDOR_FIELDS,
        portal_url="http://portal.test",
    )


def test_signup_redirects_into_portal_with_token(client):
    result = signup(client)

    url = urlsplit(result.redirect_url)
    assert f"{url.scheme}://{url.netloc}" == "http://portal.test"
    assert url.path == f"/vendors/{result.vendor['id']}/admin"
    assert parse_qs(url.query)["token"] == [result.credentials.token]
    assert result.vendor["userId"] == result.user["id"]


def test_signup_rejects_mismatched_passwords_before_any_request(offline_client):
    with pytest.raises(ValidationFailed) as exc_info:
        signup_vendor(
            offline_client,
            Registration(email="x@example.com", password="pw1", confirm_password="pw2"),
            VENDOR_FIELDS,
            portal_url="http://portal.test",
        )
    assert exc_info.value.message == "Passwords do not match"


def test_signup_with_taken_email_reports_conflict(client):
    signup(client, "taken@example.com")

    with pytest.raises(RequestFailed) as exc_info:
        signup(client, "taken@example.com")
    assert exc_info.value.status_code == 409
    assert exc_info.value.message == "User with this email already exists"


def test_signup_restarts_when_token_is_rejected(auth_client):
    def reject(request):
        return httpx.Response(401, json={"detail": "Invalid token"})

    client = MarketplaceClient(
        auth_http=auth_client,
        vendor_http=httpx.Client(transport=httpx.MockTransport(reject), base_url="http://vendor-service"),
    )
    with pytest.raises(SignupRestart):
        signup(client, "restart@example.com")


def test_signup_validates_vendor_fields_locally(client):
    fields = dict(VENDOR_FIELDS)
    del fields["country"]

    with pytest.raises(ValidationFailed) as exc_info:
        signup_vendor(
            client,
            Registration(email="fields@example.com", password="pw1", confirm_password="pw1"),
            fields,
            portal_url="http://portal.test",
        )
    assert [e["field"] for e in exc_info.value.errors] == ["country"]


def test_network_failure_is_reported_generically(offline_client):
    with pytest.raises(NetworkError) as exc_info:
        offline_client.login("a@x.com", "pw1")
    assert exc_info.value.message == "Network error. Please try again."


def test_login_with_bad_credentials_requires_authentication(client):
    with pytest.raises(AuthenticationRequired) as exc_info:
        client.login("ghost@example.com", "pw1")
    assert exc_info.value.message == "Invalid email or password"


def test_token_handoff_strips_token_from_url():
    credentials, clean = accept_token_handoff("http://portal.test/vendors/v1/admin?token=abc.def&tab=stores")

    assert credentials == Credentials("abc.def")
    assert clean == "http://portal.test/vendors/v1/admin?tab=stores"


def test_token_handoff_falls_back_to_stored_credentials():
    stored = Credentials("stored-token")

    credentials, clean = accept_token_handoff("http://portal.test/vendors/v1/admin", stored)
    assert credentials is stored
    assert clean == "http://portal.test/vendors/v1/admin"

    assert accept_token_handoff("http://portal.test/stores")[0] is None


def test_credentials_repr_hides_token():
    assert "secret" not in repr(Credentials("secret"))


def test_admin_view_after_signup(client):
    result = signup(client, "admin@example.com")
    credentials, _ = accept_token_handoff(result.redirect_url)

    view = load_admin_view(client, credentials, result.vendor["id"])
    assert view.error is None
    assert view.profile["businessName"] == "Acme Goods"


def test_admin_view_for_someone_elses_vendor_id(client):
    mine = signup(client, "mine@example.com")
    theirs = signup(client, "theirs@example.com")

    view = load_admin_view(client, mine.credentials, theirs.vendor["id"])
    assert view.error == NOT_OWNER_MESSAGE
    assert view.profile is None


def test_admin_view_without_or_with_bad_credentials_goes_to_login(client):
    assert load_admin_view(client, None, "v1").needs_login
    assert load_admin_view(client, Credentials("expired"), "v1").needs_login


def test_admin_view_network_error(offline_client):
    view = load_admin_view(offline_client, Credentials("t"), "v1")
    assert view.error == "Network error"


def test_dashboard_without_profile_redirects_to_profile_setup(client):
    registered = client.register("dash@example.com", "pw1")

    view = load_dashboard(client, Credentials(registered["token"]))
    assert view.redirect_to == "/vendor-profile"


def test_store_pages(client):
    result = signup(client, "stores@example.com")

    created = submit_store(client, result.credentials, "Shop", "portal-shop", "Things")
    assert created.redirect_to == "/stores"

    duplicate = submit_store(client, result.credentials, "Shop", "portal-shop")
    assert duplicate.error == "Store slug already exists"

    malformed = submit_store(client, result.credentials, "Shop", "Bad Slug")
    assert malformed.error.startswith("Invalid fields")

    view = load_stores_view(client, result.credentials)
    assert [s["slug"] for s in view.stores] == ["portal-shop"]


def test_stores_view_without_profile_shows_error(client):
    registered = client.register("nostores@example.com", "pw1")

    view = load_stores_view(client, Credentials(registered["token"]))
    assert view.error == "Failed to load stores"


def test_failed_profile_step_keeps_credentials_for_retry(auth_client, vendor_client):
    def refuse(request):
        raise httpx.ConnectError("connection refused", request=request)

    flaky = MarketplaceClient(
        auth_http=auth_client,
        vendor_http=httpx.Client(transport=httpx.MockTransport(refuse), base_url="http://vendor-service"),
    )
    with pytest.raises(SignupIncomplete) as exc_info:
        signup(flaky, "retry@example.com")

    incomplete = exc_info.value
    assert isinstance(incomplete.cause, NetworkError)
    assert incomplete.message == "Network error. Please try again."

    # Step 2 is resubmitted alone; the account is not registered again
    client = MarketplaceClient(auth_http=auth_client, vendor_http=vendor_client)
    result = complete_vendor_profile(client, incomplete.credentials, VENDOR_FIELDS, "http://portal.test")
    assert result.vendor["userId"] == incomplete.user["id"]
    assert result.redirect_url.startswith(f"http://portal.test/vendors/{result.vendor['id']}/admin?token=")


def test_two_step_signup(client):
    credentials, user = register_account(
        client, Registration(email="steps@example.com", password="pw1", confirm_password="pw1")
    )

    result = complete_vendor_profile(client, credentials, VENDOR_FIELDS, "http://portal.test", user=user)
    assert result.user["id"] == result.vendor["userId"]


def test_submit_store_network_error(offline_client):
    view = submit_store(offline_client, Credentials("t"), "Shop", "shop")
    assert view.error == "Network error. Please try again."
