"""
Auth Service - user identity, password login and token issuance
"""
from typing import Optional

from fastapi import APIRouter, Depends, FastAPI, Request, status
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session

from ..common.app_factory import build_service_app
from ..common.auth_header import bearer_token
from ..common.config import Settings, settings as default_settings
from ..common.db import get_db
from .auth import PasswordHasher
from .repository import UserRepository
from .schemas import AuthResponse, LoginRequest, RegisterRequest, UserOut
from .service import AuthService

router = APIRouter(prefix="/auth", tags=["auth"])


def get_auth_service(request: Request) -> AuthService:
    return request.app.state.auth_service


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register(
    payload: RegisterRequest,
    db: Session = Depends(get_db),
    service: AuthService = Depends(get_auth_service),
):
    return service.register(db, payload.email, payload.password)


@router.post("/login", response_model=AuthResponse)
def login(
    payload: LoginRequest,
    db: Session = Depends(get_db),
    service: AuthService = Depends(get_auth_service),
):
    return service.login(db, payload.email, payload.password)


@router.get("/me", response_model=UserOut)
def me(
    token: str = Depends(bearer_token),
    db: Session = Depends(get_db),
    service: AuthService = Depends(get_auth_service),
):
    """Resolve the bearer token to fresh user data."""
    return service.current_user(db, token)


def create_app(settings: Optional[Settings] = None, engine: Optional[Engine] = None) -> FastAPI:
    settings = settings or default_settings
    app = build_service_app("Auth Service", settings, engine)

    app.state.auth_service = AuthService(
        users=UserRepository(),
        tokens=app.state.tokens,
        passwords=PasswordHasher(settings.PASSWORD_HASH_ROUNDS),
    )
    app.include_router(router)
    return app


app = create_app()
