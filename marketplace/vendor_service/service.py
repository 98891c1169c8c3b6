import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from ..common.errors import ConflictError, NotFoundError
from ..common.models import Store, Vendor
from .repository import StoreRepository, VendorRepository

logger = logging.getLogger(__name__)


class VendorService:
    """
    Vendor profile and store operations.

    Every operation is scoped to the user id taken from the verified token;
    stores are owned transitively through the caller's vendor profile.
    """

    def __init__(self, vendors: VendorRepository, stores: StoreRepository):
        self.vendors = vendors
        self.stores = stores

    def _require_vendor(self, db: Session, user_id: str, with_stores: bool = False) -> Vendor:
        vendor = self.vendors.get_by_user(db, user_id, with_stores=with_stores)
        if not vendor:
            raise NotFoundError("Vendor profile not found")
        return vendor

    def create_vendor_profile(self, db: Session, user_id: str, fields: dict) -> dict:
        if self.vendors.get_by_user(db, user_id):
            raise ConflictError("Vendor profile already exists for this user")

        vendor = self.vendors.create(db, user_id, fields)
        logger.info(f"Vendor profile created: vendor_id={vendor.id}, user_id={user_id}")
        return {
            "message": "Vendor profile created successfully",
            "vendor": vendor,
        }

    def get_vendor_profile(self, db: Session, user_id: str) -> Vendor:
        return self._require_vendor(db, user_id, with_stores=True)

    def create_store(self, db: Session, user_id: str, name: str, slug: str, description: Optional[str] = None) -> dict:
        vendor = self._require_vendor(db, user_id)

        if self.stores.get_by_slug(db, slug):
            raise ConflictError("Store slug already exists")

        store = self.stores.create(db, vendor.id, name, slug, description)
        logger.info(f"Store created: store_id={store.id}, vendor_id={vendor.id}, slug={slug}")
        return {
            "message": "Store created successfully",
            "store": store,
        }

    def list_stores(self, db: Session, user_id: str) -> List[Store]:
        vendor = self._require_vendor(db, user_id)
        return self.stores.list_for_vendor(db, vendor.id)
