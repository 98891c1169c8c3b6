"""
Vendor Service - vendor profiles and stores owned by authenticated users
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, FastAPI, status
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session

from ..common.app_factory import build_service_app
from ..common.config import Settings, settings as default_settings
from ..common.db import get_db
from ..common.tokens import TokenPayload
from .deps import get_current_user, get_vendor_service
from .repository import StoreRepository, VendorRepository
from .schemas import (
    StoreCreate,
    StoreCreateResponse,
    StoreOut,
    VendorCreateResponse,
    VendorProfileCreate,
    VendorWithStoresOut,
)
from .service import VendorService

router = APIRouter(prefix="/vendor", tags=["vendor"])


@router.post("/profile", response_model=VendorCreateResponse, status_code=status.HTTP_201_CREATED)
def create_vendor_profile(
    payload: VendorProfileCreate,
    user: TokenPayload = Depends(get_current_user),
    db: Session = Depends(get_db),
    service: VendorService = Depends(get_vendor_service),
):
    return service.create_vendor_profile(db, user.user_id, payload.model_dump())


@router.get("/profile", response_model=VendorWithStoresOut)
def get_vendor_profile(
    user: TokenPayload = Depends(get_current_user),
    db: Session = Depends(get_db),
    service: VendorService = Depends(get_vendor_service),
):
    return service.get_vendor_profile(db, user.user_id)


@router.post("/stores", response_model=StoreCreateResponse, status_code=status.HTTP_201_CREATED)
def create_store(
    payload: StoreCreate,
    user: TokenPayload = Depends(get_current_user),
    db: Session = Depends(get_db),
    service: VendorService = Depends(get_vendor_service),
):
    return service.create_store(db, user.user_id, payload.name, payload.slug, payload.description)


@router.get("/stores", response_model=List[StoreOut])
def list_stores(
    user: TokenPayload = Depends(get_current_user),
    db: Session = Depends(get_db),
    service: VendorService = Depends(get_vendor_service),
):
    return service.list_stores(db, user.user_id)


def create_app(settings: Optional[Settings] = None, engine: Optional[Engine] = None) -> FastAPI:
    settings = settings or default_settings
    app = build_service_app("Vendor Service", settings, engine)

    app.state.vendor_service = VendorService(
        vendors=VendorRepository(),
        stores=StoreRepository(),
    )
    app.include_router(router)
    return app


app = create_app()
