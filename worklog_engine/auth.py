"""Authentication collaborator.

The query layer never looks at who is signed in; callers resolve the user
here first and pass plain ids down.
"""

from __future__ import annotations

import logging
import time
from typing import Optional, Protocol

from worklog_engine.errors import UnauthorizedError
from worklog_engine.schema import ROLES, User

logger = logging.getLogger("worklog_engine.auth")

MOCK_USERS = {
    "developer@example.com": User("dev-123", "John Developer", "developer@example.com", "developer", "frontend"),
    "manager@example.com": User("mgr-456", "Jane Manager", "manager@example.com", "manager"),
}


class AuthProvider(Protocol):
    def current_user(self) -> Optional[User]: ...


class MockAuthProvider:
    """Accepts the two demo accounts with any password."""

    def __init__(self, user: Optional[User] = None) -> None:
        self._user = user

    def current_user(self) -> Optional[User]:
        return self._user

    def login(self, email: str, password: str) -> User:
        user = MOCK_USERS.get(email.strip().lower())
        if user is None:
            logger.warning("Login failed for %s", email)
            raise UnauthorizedError("Invalid credentials")
        self._user = user
        logger.info("Signed in %s", user.id)
        return user

    def signup(self, name: str, email: str, password: str, role: str) -> User:
        if role not in ROLES:
            raise ValueError(f"Invalid role '{role}'")
        user = User(
            id=f"user-{int(time.time() * 1000)}",
            name=name,
            email=email,
            role=role,
            team="frontend" if role == "developer" else None,
        )
        self._user = user
        logger.info("Signed up %s as %s", user.id, role)
        return user

    def logout(self) -> None:
        if self._user is not None:
            logger.info("Signed out %s", self._user.id)
        self._user = None


def require_user(auth: AuthProvider) -> User:
    user = auth.current_user()
    if user is None:
        raise UnauthorizedError("You must be logged in")
    return user


def require_manager(auth: AuthProvider) -> User:
    user = require_user(auth)
    if not user.is_manager:
        raise UnauthorizedError("You don't have permission to view this page")
    return user
