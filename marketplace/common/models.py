from sqlalchemy import Column, String, Boolean, ForeignKey, DateTime, Text
from sqlalchemy.orm import relationship
from datetime import datetime
import uuid

from .db import Base


def _new_id() -> str:
    return str(uuid.uuid4())


class User(Base):
    __tablename__ = "users"
    id = Column(String, primary_key=True, default=_new_id)
    email = Column(String, unique=True, index=True, nullable=False)
    password = Column(String, nullable=False)
    verified = Column(Boolean, default=False, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    vendor = relationship("Vendor", back_populates="user", uselist=False)

    def __repr__(self):
        return f"<User(id={self.id}, email={self.email})>"


class Vendor(Base):
    """
    Business profile owned by exactly one user.

    The unique constraint on user_id keeps the user -> vendor mapping
    one-to-one even when two creations race.
    """
    __tablename__ = "vendors"
    id = Column(String, primary_key=True, default=_new_id)
    user_id = Column(String, ForeignKey("users.id", ondelete="CASCADE"), unique=True, index=True, nullable=False)

    business_name = Column(String, nullable=False)
    business_type = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    contact_phone = Column(String, nullable=True)

    address = Column(String, nullable=False)
    city = Column(String, nullable=False)
    state = Column(String, nullable=False)
    zip_code = Column(String, nullable=False)
    country = Column(String, nullable=False)

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    user = relationship("User", back_populates="vendor")
    stores = relationship(
        "Store",
        back_populates="vendor",
        cascade="all, delete-orphan",
        order_by="Store.created_at",
    )

    def __repr__(self):
        return f"<Vendor(id={self.id}, user_id={self.user_id}, business_name={self.business_name})>"


class Store(Base):
    __tablename__ = "stores"
    id = Column(String, primary_key=True, default=_new_id)
    vendor_id = Column(String, ForeignKey("vendors.id", ondelete="CASCADE"), index=True, nullable=False)
    name = Column(String, nullable=False)
    slug = Column(String, unique=True, index=True, nullable=False)
    description = Column(Text, nullable=True)
    is_active = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    vendor = relationship("Vendor", back_populates="stores")

    def __repr__(self):
        return f"<Store(id={self.id}, vendor_id={self.vendor_id}, slug={self.slug})>"
