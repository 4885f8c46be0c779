"""Foundational types of the auth subsystem.

- :class:`AuthResult` -- a plain container for the HTTP headers an auth
  strategy attaches to an outgoing request.
- :class:`AccessToken` and :class:`SessionLike` -- the structural interfaces
  gafeed consumes. Credential acquisition (login, OAuth handshake, token
  storage) happens elsewhere; any object with these methods can be passed to
  :meth:`~gafeed.client.engine.RequestEngine.send`.
  :class:`~gafeed.session.Session` is the bundled implementation.

See Also:
    :mod:`gafeed.auth.strategies` for strategy selection.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol, runtime_checkable


class AuthResult:
    """Container for authentication headers to inject into HTTP requests.

    Args:
        headers: HTTP headers to add (e.g. ``{"Authorization": "Bearer ..."}``).

    Example::

        result = AuthResult(headers={"Authorization": "Bearer tok123"})
        assert result.headers["Authorization"] == "Bearer tok123"
    """

    def __init__(self, headers: dict[str, str] | None = None):
        self.headers = headers or {}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AuthResult):
            return NotImplemented
        return self.headers == other.headers

    def __repr__(self) -> str:
        return f"AuthResult(headers={self.headers!r})"


@runtime_checkable
class AccessToken(Protocol):
    """A capability object that signs and sends requests on the caller's behalf."""

    token: str

    def get(self, uri: str, headers: Mapping[str, str]) -> Any:
        """Issue a signed GET against the absolute *uri* and return the response."""
        ...


@runtime_checkable
class SessionLike(Protocol):
    """The credential state of one caller, as seen by the request engine."""

    def is_single_user(self) -> bool: ...

    def is_oauth_user(self) -> bool: ...

    def legacy_auth_token(self) -> Optional[str]: ...

    def oauth_access_token(self) -> Optional[AccessToken]: ...
