from datetime import datetime
from typing import List, Optional

from pydantic import Field

from ..common.schemas import CamelModel

SLUG_PATTERN = r"^[a-z0-9]+(?:-[a-z0-9]+)*$"


class VendorProfileCreate(CamelModel):
    business_name: str = Field(..., min_length=1, max_length=255)
    business_type: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    contact_phone: Optional[str] = Field(None, max_length=50)
    address: str = Field(..., min_length=1, max_length=255)
    city: str = Field(..., min_length=1, max_length=255)
    state: str = Field(..., min_length=1, max_length=255)
    zip_code: str = Field(..., min_length=1, max_length=20)
    country: str = Field(..., min_length=1, max_length=255)


class StoreCreate(CamelModel):
    name: str = Field(..., min_length=1, max_length=255)
    slug: str = Field(..., min_length=1, max_length=100, pattern=SLUG_PATTERN)
    description: Optional[str] = None


class StoreOut(CamelModel):
    id: str
    vendor_id: str
    name: str
    slug: str
    description: Optional[str] = None
    is_active: bool
    created_at: datetime


class VendorOut(CamelModel):
    id: str
    user_id: str
    business_name: str
    business_type: str
    description: Optional[str] = None
    contact_phone: Optional[str] = None
    address: str
    city: str
    state: str
    zip_code: str
    country: str
    created_at: datetime
    updated_at: datetime


class VendorWithStoresOut(VendorOut):
    stores: List[StoreOut] = []


class VendorCreateResponse(CamelModel):
    message: str
    vendor: VendorOut


class StoreCreateResponse(CamelModel):
    message: str
    store: StoreOut
