"""Server context built once at startup and shared with every request."""

import logging
import secrets
from dataclasses import dataclass

from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from gift_tracker.config import Settings
from gift_tracker.database import build_engine, build_session_factory
from gift_tracker.services.auth import Authenticator

logger = logging.getLogger(__name__)


@dataclass
class AppContext:
    """Everything a request handler needs besides the request itself."""

    settings: Settings
    engine: Engine
    session_factory: sessionmaker
    authenticator: Authenticator

    @classmethod
    def from_settings(cls, settings: Settings) -> "AppContext":
        secret = settings.jwt_secret
        if not secret:
            # Settings validation already refuses this in production
            secret = secrets.token_urlsafe(32)
            logger.warning(
                "JWT_SECRET is not set; using a random per-process secret. "
                "Tokens will not survive a restart."
            )

        engine = build_engine(settings.database_url)
        return cls(
            settings=settings,
            engine=engine,
            session_factory=build_session_factory(engine),
            authenticator=Authenticator(
                secret=secret,
                algorithm=settings.jwt_algorithm,
                expiration_minutes=settings.jwt_expiration_minutes,
            ),
        )
