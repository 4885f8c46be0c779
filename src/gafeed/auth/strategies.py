"""Authentication strategy selection.

A session is resolved once per call into one of two strategies:

- :class:`SingleUserAuth` -- a static token. The request is sent by one of
  gafeed's own executors with the headers from
  :meth:`SingleUserAuth.authenticate`.
- :class:`OAuthAuth` -- an access-token object that signs and sends the GET
  itself.

The set is closed: :func:`select_strategy` is the only producer and
:func:`select_execution_mode` pairs the strategy with the configured
concurrency model.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional, Union

from gafeed.auth.base import AccessToken, AuthResult, SessionLike
from gafeed.exceptions import ConfigError
from gafeed.models import ClientConfig

GDATA_VERSION = "3"


@dataclass(frozen=True)
class SingleUserAuth:
    """Static-token credentials attached as request headers.

    When an access token is present it wins and is sent as a bearer token;
    otherwise the legacy token is sent in a ``GoogleLogin`` header together
    with ``GData-Version``.
    """

    auth_token: Optional[str] = None
    access_token: Optional[AccessToken] = None

    def authenticate(self) -> AuthResult:
        if self.access_token is not None:
            return AuthResult(headers={"Authorization": f"Bearer {self.access_token.token}"})
        return AuthResult(
            headers={
                "Authorization": f"GoogleLogin auth={self.auth_token}",
                "GData-Version": GDATA_VERSION,
            }
        )


@dataclass(frozen=True)
class OAuthAuth:
    """An access token that performs the signed GET on its own."""

    access_token: AccessToken

    def authenticate(self) -> AuthResult:
        """Headers passed to :meth:`AccessToken.get`; signing is the token's job."""
        return AuthResult(headers={"GData-Version": GDATA_VERSION})


AuthStrategy = Union[SingleUserAuth, OAuthAuth]


class ExecutionMode(str, enum.Enum):
    """How a call is dispatched."""

    SINGLE_USER_BLOCKING = "single_user_blocking"
    SINGLE_USER_COOPERATIVE = "single_user_cooperative"
    OAUTH = "oauth"


def select_strategy(session: SessionLike) -> AuthStrategy:
    """Resolve *session* into its authentication strategy.

    Single-user mode is checked first, so a session reporting both modes is
    treated as single-user (with its access token sent as a bearer token).

    Raises:
        ConfigError: If the session is neither single-user nor OAuth, or an
            OAuth session carries no access token.
    """
    if session.is_single_user():
        return SingleUserAuth(
            auth_token=session.legacy_auth_token(),
            access_token=session.oauth_access_token(),
        )
    if session.is_oauth_user():
        access_token = session.oauth_access_token()
        if access_token is None:
            raise ConfigError("OAuth session has no access token")
        return OAuthAuth(access_token=access_token)
    raise ConfigError(
        "Session is neither a single-user nor an OAuth session; "
        "provide an auth token or an OAuth access token"
    )


def select_execution_mode(strategy: AuthStrategy, config: ClientConfig) -> ExecutionMode:
    """Pick the concurrency model for *strategy* under *config*.

    OAuth requests always run on the calling thread.
    """
    if isinstance(strategy, OAuthAuth):
        return ExecutionMode.OAUTH
    if config.use_cooperative:
        return ExecutionMode.SINGLE_USER_COOPERATIVE
    return ExecutionMode.SINGLE_USER_BLOCKING
