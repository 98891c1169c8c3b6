from passlib.context import CryptContext

DEFAULT_ROUNDS = 29000


class PasswordHasher:
    """
    Salted one-way password hashing with a fixed work factor.

    Uses pbkdf2_sha256 to avoid external bcrypt backend issues in some environments.
    """

    def __init__(self, rounds: int = DEFAULT_ROUNDS):
        self.context = CryptContext(
            schemes=["pbkdf2_sha256"],
            deprecated="auto",
            pbkdf2_sha256__rounds=rounds,
        )

    def hash(self, password: str) -> str:
        return self.context.hash(password)

    def verify(self, plain_password: str, hashed_password: str) -> bool:
        return self.context.verify(plain_password, hashed_password)
