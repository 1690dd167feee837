"""Authentication service for JWT and password handling."""

import logging
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

from jose import JWTError, jwt
from passlib.context import CryptContext
from sqlalchemy.orm import Session

from gift_tracker.errors import DuplicateEmail, EmailTaken, InvalidCredentials, InvalidToken
from gift_tracker.models.user import User, default_preferences
from gift_tracker.services.credentials import CredentialStore, normalize_email

logger = logging.getLogger(__name__)

# Password hashing context
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


@dataclass(frozen=True)
class TokenClaims:
    """Identity asserted by a verified token."""

    user_id: str
    email: str | None
    issued_at: datetime
    expires_at: datetime


class Authenticator:
    """Turns credentials into signed tokens and tokens back into caller identities.

    Token verification is purely cryptographic and time based: it never consults
    the credential store and there is no revocation list, so a token stays valid
    until its ``exp`` claim passes.
    """

    def __init__(self, secret: str, algorithm: str = "HS256", expiration_minutes: int = 1440):
        self.secret = secret
        self.algorithm = algorithm
        self.expiration = timedelta(minutes=expiration_minutes)

    def hash_password(self, password: str) -> str:
        """Hash a password."""
        return pwd_context.hash(password)

    def verify_password(self, plain_password: str, hashed_password: str) -> bool:
        """Verify a password against its hash."""
        return pwd_context.verify(plain_password, hashed_password)

    def issue_token(self, user_id: str, email: str, now: datetime | None = None) -> str:
        """Create a JWT access token valid for the configured window starting at ``now``."""
        issued_at = int((now or datetime.now(UTC)).timestamp())
        expires_at = issued_at + int(self.expiration.total_seconds())
        to_encode = {
            "sub": user_id,
            "email": email,
            "iat": issued_at,
            "exp": expires_at,
        }
        return jwt.encode(to_encode, self.secret, algorithm=self.algorithm)

    def verify_token(self, token: str, now: datetime | None = None) -> TokenClaims:
        """Check signature and expiry; valid while ``now < exp``.

        Raises:
            InvalidToken: bad signature, malformed payload or expired.
        """
        try:
            # Expiry is checked below so the window is half-open: [iat, exp)
            payload = jwt.decode(
                token,
                self.secret,
                algorithms=[self.algorithm],
                options={"verify_exp": False},
            )
        except JWTError as e:
            logger.debug(f"Rejected token: {e}")
            raise InvalidToken() from e

        user_id = payload.get("sub")
        issued_at = payload.get("iat")
        expires_at = payload.get("exp")
        if not isinstance(user_id, str) or not isinstance(expires_at, int | float):
            logger.debug("Rejected token with malformed claims")
            raise InvalidToken()

        current = (now or datetime.now(UTC)).timestamp()
        if current >= expires_at:
            logger.debug(f"Rejected expired token for user {user_id}")
            raise InvalidToken()

        return TokenClaims(
            user_id=user_id,
            email=payload.get("email"),
            issued_at=datetime.fromtimestamp(issued_at or expires_at, UTC),
            expires_at=datetime.fromtimestamp(expires_at, UTC),
        )

    def register(self, db: Session, name: str, email: str, password: str) -> tuple[User, str]:
        """Create a user and log them in.

        Raises:
            EmailTaken: an account already uses this email.
        """
        store = CredentialStore(db)
        if store.find_by_email(email) is not None:
            raise EmailTaken()

        user = User(
            name=name,
            email=normalize_email(email),
            password_hash=self.hash_password(password),
            preferences=default_preferences(),
        )
        try:
            store.insert(user)
        except DuplicateEmail:
            # Lost a race with a concurrent registration
            raise EmailTaken() from None

        logger.info(f"Registered user {user.id}")
        return user, self.issue_token(user.id, user.email)

    def login(self, db: Session, email: str, password: str) -> tuple[User, str]:
        """Authenticate by email and password.

        Raises:
            InvalidCredentials: unknown email or wrong password, indistinguishably.
        """
        user = CredentialStore(db).find_by_email(email)
        if user is None:
            # Spend the same hashing time as a real check
            pwd_context.dummy_verify()
            logger.info("Failed login for unknown email")
            raise InvalidCredentials()
        if not self.verify_password(password, user.password_hash):
            logger.info(f"Failed login for user {user.id}")
            raise InvalidCredentials()

        logger.info(f"User {user.id} logged in")
        return user, self.issue_token(user.id, user.email)
