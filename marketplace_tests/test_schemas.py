import pytest

from marketplace.common.errors import ValidationFailed
from marketplace.common.schemas import validate
from marketplace.vendor_service.schemas import StoreCreate, VendorProfileCreate

from .helpers import VENDOR_FIELDS


def test_validate_accepts_camel_case_payload():
    profile = validate(VendorProfileCreate, VENDOR_FIELDS)

    assert profile.business_name == "Acme Goods"
    assert profile.zip_code == "62701"
    assert profile.model_dump(by_alias=True)["zipCode"] == "62701"


def test_validate_reports_every_rejected_field():
    payload = dict(VENDOR_FIELDS, businessName="", city=None)

    with pytest.raises(ValidationFailed) as exc_info:
        validate(VendorProfileCreate, payload)

    assert {e["field"] for e in exc_info.value.errors} == {"businessName", "city"}
    assert exc_info.value.status_code == 422


def test_store_description_is_optional():
    store = validate(StoreCreate, {"name": "Shop", "slug": "my-shop"})
    assert store.description is None
