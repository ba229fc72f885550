"""
Session binding: which owner partition does the current caller act on?

The binding only looks identities up. It never mutates the store; the store
maps a missing owner to the default partition.
"""
from typing import Callable, List, Optional

from .logging_config import auth_logger

OwnerId = str
SessionListener = Callable[[Optional[OwnerId]], None]


class AuthSession:
    """
    In-process authentication collaborator.

    Holds the logged-in owner id and tells subscribers when it changes.
    Scripts and tests use it directly; HTTP requests use ``TokenSession``.
    """

    def __init__(self, owner_id: Optional[OwnerId] = None):
        self._owner_id = owner_id
        self._listeners: List[SessionListener] = []

    def current_owner_id(self) -> Optional[OwnerId]:
        return self._owner_id

    def login(self, owner_id: OwnerId) -> None:
        self._owner_id = str(owner_id)
        auth_logger.info("Session started", owner_id=self._owner_id)
        self._notify()

    def logout(self) -> None:
        previous = self._owner_id
        self._owner_id = None
        auth_logger.info("Session ended", owner_id=previous)
        self._notify()

    def on_session_change(self, listener: SessionListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self._owner_id)


class TokenSession:
    """Authentication collaborator for one request: the user behind its bearer token."""

    def __init__(self, user=None):
        self._user = user

    def current_owner_id(self) -> Optional[OwnerId]:
        if self._user is None:
            return None
        return str(self._user.id)


class SessionBinding:
    """Resolve the acting owner from an authentication collaborator."""

    def __init__(self, auth):
        self._auth = auth

    def resolve_owner(self) -> Optional[OwnerId]:
        """The active session's owner id, or None for the shared default partition."""
        return self._auth.current_owner_id()

    def on_session_change(self, listener: SessionListener) -> Callable[[], None]:
        """Subscribe to login/logout. Collaborators without events never fire."""
        subscribe = getattr(self._auth, "on_session_change", None)
        if subscribe is None:
            return lambda: None
        return subscribe(listener)
