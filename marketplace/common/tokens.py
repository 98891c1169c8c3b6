"""
Signed bearer tokens shared by the Auth Service (issuing) and the
Vendor Service (verifying).
"""
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
import logging

import jwt

from .errors import UnauthorizedError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TokenPayload:
    user_id: str
    email: str
    expires_at: datetime


class TokenService:
    """
    Issues and verifies HS256 JWTs embedding ``{userId, email}``.

    Tokens are stateless: verification checks signature and expiry only,
    there is no refresh and no revocation.
    """

    def __init__(self, secret: str, algorithm: str = "HS256", expires_in: timedelta = timedelta(hours=24)):
        self.secret = secret
        self.algorithm = algorithm
        self.expires_in = expires_in

    @classmethod
    def from_settings(cls, settings) -> "TokenService":
        return cls(
            secret=settings.JWT_SECRET,
            algorithm=settings.JWT_ALGORITHM,
            expires_in=timedelta(hours=settings.JWT_EXPIRE_HOURS),
        )

    def issue(self, user_id: str, email: str) -> str:
        now = datetime.now(timezone.utc)
        payload = {
            "userId": user_id,
            "email": email,
            "iat": now,
            "exp": now + self.expires_in,
        }
        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def verify(self, token: str) -> TokenPayload:
        try:
            data = jwt.decode(
                token,
                self.secret,
                algorithms=[self.algorithm],
                options={"require": ["exp", "userId", "email"]},
            )
        except jwt.ExpiredSignatureError as exc:
            logger.info("Rejected expired token")
            raise UnauthorizedError("Invalid or expired token") from exc
        except jwt.InvalidTokenError as exc:
            logger.info(f"Rejected invalid token: {exc}")
            raise UnauthorizedError("Invalid or expired token") from exc

        user_id = data["userId"]
        email = data["email"]
        if not isinstance(user_id, str) or not user_id or not isinstance(email, str):
            raise UnauthorizedError("Invalid or expired token")

        return TokenPayload(
            user_id=user_id,
            email=email,
            expires_at=datetime.fromtimestamp(data["exp"], tz=timezone.utc),
        )
