"""Authentication signal: a read-only view of the identity provider's session state."""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Callable

from flask import Flask, current_app, session

SESSION_USER_KEY = "user"

AuthListener = Callable[["AuthState"], None]


class AuthState(Enum):
    """Render state of the visitor, as reported by the identity provider."""

    ANONYMOUS = "anonymous"
    AUTHENTICATED = "authenticated"
    # Provider could not report a state (failed to load, bad payload).
    UNKNOWN = "unknown"


class AuthProviderError(RuntimeError):
    """Raised when the identity provider cannot produce an authentication state."""


class AuthStateProvider:
    """Injected capability exposing the current auth state and change notifications."""

    notifies_changes = True

    def __init__(self) -> None:
        self._listeners: list[AuthListener] = []

    def current_auth_state(self) -> AuthState:
        raise NotImplementedError

    def subscribe(self, listener: AuthListener) -> Callable[[], None]:
        """Register a change listener; the returned callable removes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self, state: AuthState) -> None:
        for listener in list(self._listeners):
            listener(state)


class SessionAuthProvider(AuthStateProvider):
    """Reads the user mapping the identity provider's integration places in the session.

    The session is request-scoped and re-read on every render, so there is no
    change event on the server: listeners are not stored and never fire.
    Visitors whose session changes see the new branch on their next request.
    """

    notifies_changes = False

    def __init__(self, session_key: str = SESSION_USER_KEY) -> None:
        super().__init__()
        self.session_key = session_key

    def subscribe(self, listener: AuthListener) -> Callable[[], None]:
        return lambda: None

    def current_auth_state(self) -> AuthState:
        user = session.get(self.session_key)
        if user is None:
            return AuthState.ANONYMOUS
        if not isinstance(user, Mapping):
            raise AuthProviderError(
                f"Session entry {self.session_key!r} is not a mapping: {type(user).__name__}"
            )
        return AuthState.AUTHENTICATED if user else AuthState.ANONYMOUS


class StaticAuthProvider(AuthStateProvider):
    """Provider holding a state set from code; notifies listeners when it changes."""

    def __init__(self, state: AuthState = AuthState.ANONYMOUS) -> None:
        super().__init__()
        self._state = state

    def current_auth_state(self) -> AuthState:
        return self._state

    def set_state(self, state: AuthState) -> None:
        if state is self._state:
            return
        self._state = state
        self._notify(state)


def install_auth_provider(app: Flask, provider: AuthStateProvider | None = None) -> AuthStateProvider:
    provider = provider or SessionAuthProvider()
    app.extensions["auth_provider"] = provider
    return provider


def get_auth_provider(app: Flask | None = None) -> AuthStateProvider:
    app = app or current_app
    return app.extensions["auth_provider"]


def read_auth_state(provider: AuthStateProvider | None = None) -> AuthState:
    """Return the provider's state, or UNKNOWN when the provider fails."""
    provider = provider or get_auth_provider()
    try:
        return provider.current_auth_state()
    except AuthProviderError as exc:
        current_app.logger.warning("Identity provider unavailable: %s", exc)
        return AuthState.UNKNOWN
