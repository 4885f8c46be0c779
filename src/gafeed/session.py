"""Bundled session and access-token implementations.

gafeed does not acquire credentials; it only consumes them. These classes
hold credentials obtained elsewhere (a stored legacy token, an OAuth2 access
token from your own authorization flow) in the shape
:class:`~gafeed.client.engine.RequestEngine` expects.

Typical usage::

    session = Session.from_sources(auth_token_source="env:GA_AUTH_TOKEN")
    result = RequestEngine(config).send(session, endpoint, params)
"""

from __future__ import annotations

from typing import Mapping, Optional

import httpx

from gafeed.auth.base import AccessToken
from gafeed.client.uri import request_target
from gafeed.config import resolve_credential


class OAuth2AccessToken:
    """An OAuth2 access token able to send its own authorised GET.

    The token is sent as ``Authorization: Bearer <token>`` on top of the
    headers supplied by the caller.

    Args:
        token: The access token string.
        timeout: Request timeout in seconds.
        transport: Optional transport replacing the network layer.
    """

    def __init__(
        self,
        token: str,
        *,
        timeout: float = 60.0,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self.token = token
        self._timeout = timeout
        self._transport = transport

    def __repr__(self) -> str:
        return "OAuth2AccessToken(token='***')"

    def get(self, uri: str, headers: Mapping[str, str]) -> httpx.Response:
        """GET the absolute *uri* with this token attached."""
        merged = {**headers, "Authorization": f"Bearer {self.token}"}
        with httpx.Client(timeout=self._timeout, transport=self._transport) as client:
            return client.get(request_target(uri), headers=merged)


class Session:
    """Credential state for one caller.

    A session is single-user when it holds a legacy auth token, and OAuth
    when it holds an access token. Holding both makes it single-user with
    the access token sent as a bearer token.

    Args:
        auth_token: Legacy ``GoogleLogin`` auth token.
        access_token: OAuth access token object.
    """

    def __init__(
        self,
        auth_token: Optional[str] = None,
        access_token: Optional[AccessToken] = None,
    ) -> None:
        self.auth_token = auth_token
        self.access_token = access_token

    @classmethod
    def from_sources(
        cls,
        auth_token_source: Optional[str] = None,
        access_token_source: Optional[str] = None,
    ) -> Session:
        """Build a session from credential source descriptors.

        Args:
            auth_token_source: Source of a legacy token (``env:VAR`` or
                ``file:/path``).
            access_token_source: Source of an OAuth2 access token, wrapped in
                :class:`OAuth2AccessToken`.

        Raises:
            ConfigError: If a source can't be resolved.
        """
        auth_token = resolve_credential(auth_token_source) if auth_token_source else None
        access_token = (
            OAuth2AccessToken(resolve_credential(access_token_source))
            if access_token_source
            else None
        )
        return cls(auth_token=auth_token, access_token=access_token)

    def is_single_user(self) -> bool:
        return isinstance(self.auth_token, str)

    def is_oauth_user(self) -> bool:
        return self.access_token is not None

    def legacy_auth_token(self) -> Optional[str]:
        return self.auth_token

    def oauth_access_token(self) -> Optional[AccessToken]:
        return self.access_token
