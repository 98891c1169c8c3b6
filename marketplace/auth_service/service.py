import logging

from sqlalchemy.orm import Session

from ..common.errors import ConflictError, UnauthorizedError
from ..common.logging_config import log_auth_event
from ..common.models import User
from ..common.tokens import TokenService
from .auth import PasswordHasher
from .repository import UserRepository

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid email or password"


class AuthService:
    """
    Registration, login and token-to-user resolution.

    Login failures never reveal whether the email or the password was wrong.
    """

    def __init__(self, users: UserRepository, tokens: TokenService, passwords: PasswordHasher):
        self.users = users
        self.tokens = tokens
        self.passwords = passwords

    def register(self, db: Session, email: str, password: str) -> dict:
        if self.users.get_by_email(db, email):
            raise ConflictError("User with this email already exists")

        user = self.users.create(db, email, self.passwords.hash(password))
        log_auth_event("register", user.email, user.id)

        return {
            "message": "User registered successfully",
            "user": user,
            "token": self.tokens.issue(user.id, user.email),
        }

    def login(self, db: Session, email: str, password: str) -> dict:
        user = self.users.get_by_email(db, email)
        if not user or not self.passwords.verify(password, user.password):
            log_auth_event("login_failure", email, user.id if user else None)
            raise UnauthorizedError(INVALID_CREDENTIALS)

        log_auth_event("login_success", user.email, user.id)
        return {
            "message": "Login successful",
            "user": user,
            "token": self.tokens.issue(user.id, user.email),
        }

    def current_user(self, db: Session, token: str) -> User:
        payload = self.tokens.verify(token)
        user = self.users.get_by_id(db, payload.user_id)
        if not user:
            logger.info(f"Token for unknown user_id={payload.user_id}")
            raise UnauthorizedError("Invalid or expired token")
        return user
