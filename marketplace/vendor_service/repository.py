from typing import List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, selectinload

from ..common.errors import ConflictError
from ..common.models import Store, Vendor


class VendorRepository:
    """Persistence for vendor profiles, always looked up by owning user."""

    def get_by_user(self, db: Session, user_id: str, with_stores: bool = False) -> Optional[Vendor]:
        query = db.query(Vendor).filter(Vendor.user_id == user_id)
        if with_stores:
            query = query.options(selectinload(Vendor.stores))
        return query.first()

    def create(self, db: Session, user_id: str, fields: dict) -> Vendor:
        vendor = Vendor(user_id=user_id, **fields)
        db.add(vendor)
        try:
            db.commit()
        except IntegrityError as exc:
            db.rollback()
            raise ConflictError("Vendor profile already exists for this user") from exc
        db.refresh(vendor)
        return vendor


class StoreRepository:
    """Persistence for stores. Slugs are unique across all vendors."""

    def get_by_slug(self, db: Session, slug: str) -> Optional[Store]:
        return db.query(Store).filter(Store.slug == slug).first()

    def list_for_vendor(self, db: Session, vendor_id: str) -> List[Store]:
        return (
            db.query(Store)
            .filter(Store.vendor_id == vendor_id)
            .order_by(Store.created_at.asc())
            .all()
        )

    def create(self, db: Session, vendor_id: str, name: str, slug: str, description: Optional[str]) -> Store:
        store = Store(vendor_id=vendor_id, name=name, slug=slug, description=description)
        db.add(store)
        try:
            db.commit()
        except IntegrityError as exc:
            # Lost a race for the slug; the unique constraint is the arbiter
            db.rollback()
            raise ConflictError("Store slug already exists") from exc
        db.refresh(store)
        return store
