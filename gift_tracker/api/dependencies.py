"""FastAPI dependencies for authentication and database."""

import logging
from typing import Annotated

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from gift_tracker.context import AppContext
from gift_tracker.database import get_db
from gift_tracker.errors import Unauthorized
from gift_tracker.models.user import User
from gift_tracker.services.auth import Authenticator
from gift_tracker.services.credentials import CredentialStore

logger = logging.getLogger(__name__)

# Missing or non-bearer headers are reported through Unauthorized, not HTTPBearer's own error
security = HTTPBearer(auto_error=False)


def get_context(request: Request) -> AppContext:
    """Get the server context built by the application factory."""
    return request.app.state.context


def get_authenticator(
    context: Annotated[AppContext, Depends(get_context)],
) -> Authenticator:
    return context.authenticator


def get_credential_store(
    db: Annotated[Session, Depends(get_db)],
) -> CredentialStore:
    return CredentialStore(db)


def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    authenticator: Annotated[Authenticator, Depends(get_authenticator)],
    store: Annotated[CredentialStore, Depends(get_credential_store)],
) -> User:
    """Get the current authenticated user from the bearer token.

    The token is verified before any query runs.
    """
    if credentials is None:
        raise Unauthorized("Access token required")

    claims = authenticator.verify_token(credentials.credentials)

    user = store.find_by_id(claims.user_id)
    if user is None:
        logger.info(f"Token for unknown user {claims.user_id}")
        raise Unauthorized("User not found")

    return user


CurrentUser = Annotated[User, Depends(get_current_user)]
DbSession = Annotated[Session, Depends(get_db)]
