"""Identity provider client and the FastAPI dependencies built on it."""
import logging
from typing import Optional

import requests
from fastapi import Cookie, Depends, HTTPException
from pydantic import ValidationError

from .schemas import User
from .settings import (
    IDENTITY_TIMEOUT_SEC,
    SESSION_COOKIE_NAME,
    USERS_SERVICE_API_KEY,
    USERS_SERVICE_API_URL,
)

logger = logging.getLogger(__name__)


class IdentityError(RuntimeError):
    """The identity provider refused or failed a request we cannot do without."""


class IdentityClient:
    """Thin HTTP client for the identity provider.

    The provider owns users and opaque session tokens; this service only
    exchanges OAuth codes for tokens and resolves tokens to users.
    """

    def __init__(self, api_url: str, api_key: str, timeout: float = IDENTITY_TIMEOUT_SEC):
        self.api_url = api_url.rstrip("/")
        self.api_key = api_key
        self.timeout = timeout

    def _headers(self) -> dict:
        return {"Authorization": f"Bearer {self.api_key}"}

    def get_oauth_redirect_url(self, provider: str = "google") -> str:
        try:
            response = requests.get(
                f"{self.api_url}/oauth/{provider}/redirect_url",
                headers=self._headers(),
                timeout=self.timeout,
            )
            response.raise_for_status()
            return response.json()["redirect_url"]
        except (requests.exceptions.RequestException, KeyError, ValueError) as e:
            raise IdentityError(f"Could not get {provider} redirect URL: {e}") from e

    def exchange_code_for_session_token(self, code: str) -> str:
        try:
            response = requests.post(
                f"{self.api_url}/sessions",
                json={"code": code},
                headers=self._headers(),
                timeout=self.timeout,
            )
            response.raise_for_status()
            return response.json()["session_token"]
        except (requests.exceptions.RequestException, KeyError, ValueError) as e:
            raise IdentityError(f"Could not exchange authorization code: {e}") from e

    def resolve_session_token(self, session_token: str) -> Optional[User]:
        """Return the user behind ``session_token``, or None if it can't be resolved.

        Failures are not errors here: callers fall back to anonymous play.
        """
        try:
            response = requests.get(
                f"{self.api_url}/sessions/{session_token}",
                headers=self._headers(),
                timeout=self.timeout,
            )
        except requests.exceptions.RequestException as e:
            logger.warning("Identity provider unreachable: %s", e)
            return None

        if response.status_code != 200:
            logger.debug("Session token rejected with status %s", response.status_code)
            return None

        try:
            return User.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            logger.warning("Unexpected identity provider response: %s", e)
            return None

    def delete_session(self, session_token: str) -> None:
        try:
            requests.delete(
                f"{self.api_url}/sessions/{session_token}",
                headers=self._headers(),
                timeout=self.timeout,
            )
        except requests.exceptions.RequestException as e:
            logger.warning("Could not delete session at identity provider: %s", e)


def get_identity_client() -> IdentityClient:
    """Dependency that provides the identity provider client."""
    return IdentityClient(USERS_SERVICE_API_URL, USERS_SERVICE_API_KEY)


def get_session_token(
    session_token: Optional[str] = Cookie(None, alias=SESSION_COOKIE_NAME),
) -> Optional[str]:
    return session_token


def get_optional_user(
    session_token: Optional[str] = Depends(get_session_token),
    client: IdentityClient = Depends(get_identity_client),
) -> Optional[User]:
    """Current user, or None for guests.  Never raises."""
    if not session_token:
        return None
    return client.resolve_session_token(session_token)


def require_user(user: Optional[User] = Depends(get_optional_user)) -> User:
    """Current user; 401 when there is no valid identity."""
    if user is None:
        raise HTTPException(status_code=401, detail="Unauthorized")
    return user
