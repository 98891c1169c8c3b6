from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ..common.errors import ConflictError
from ..common.models import User


class UserRepository:
    """Persistence for user identities."""

    def get_by_email(self, db: Session, email: str) -> Optional[User]:
        return db.query(User).filter(User.email == email).first()

    def get_by_id(self, db: Session, user_id: str) -> Optional[User]:
        return db.query(User).filter(User.id == user_id).first()

    def create(self, db: Session, email: str, hashed_password: str) -> User:
        user = User(email=email, password=hashed_password)
        db.add(user)
        try:
            db.commit()
        except IntegrityError as exc:
            # A concurrent registration won the unique constraint on email
            db.rollback()
            raise ConflictError("User with this email already exists") from exc
        db.refresh(user)
        return user
