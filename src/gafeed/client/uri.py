"""Request URI assembly.

A :class:`RequestDescriptor` pairs a base endpoint with its query
parameters and renders the two URIs every call needs:

* the **absolute URI** (``https://host/path?query``) handed to OAuth access
  tokens and attached to every :class:`~gafeed.exceptions.ClientError`;
* the **relative URI** (``/path?query``) sent by the single-user executors,
  which are already connected to the endpoint's host.

Query values are rendered with ``str()`` and are deliberately not
percent-escaped; callers rely on passing pre-formatted values such as
``ga:123`` or ``ga:visits,ga:pageviews`` through untouched.

The one exception is ``#`` on the wire: an HTTP client would read it as
the start of a fragment and drop the rest of the query, API key
included. :func:`request_target` encodes it as ``%23`` just before
sending; the URIs reported in traces and errors keep the literal text.
"""

from __future__ import annotations

from functools import cached_property
from typing import Any, Mapping, Optional

import httpx


def query_string(parameters: Mapping[str, Any], api_key: Optional[str] = None) -> str:
    """Render *parameters* (plus ``key=<api_key>``) as ``?k=v&k=v``.

    Pairs follow the mapping's iteration order. The API key replaces a
    caller-supplied ``key`` in place, otherwise it is appended last. The
    caller's mapping is copied, never mutated.

    Returns:
        The query string including the leading ``?``, or ``""`` when there
        is nothing to send.
    """
    params = dict(parameters)
    if api_key is not None:
        params["key"] = api_key
    pairs = "&".join(f"{k}={v}" for k, v in params.items())
    return f"?{pairs}" if pairs else ""


def build_uris(
    base_endpoint: str,
    parameters: Optional[Mapping[str, Any]] = None,
    api_key: Optional[str] = None,
) -> tuple[str, str]:
    """Return ``(absolute_uri, relative_uri)`` for a request.

    Example::

        >>> build_uris("https://example.com/data", {"ids": "ga:123"}, api_key="K")
        ('https://example.com/data?ids=ga:123&key=K', '/data?ids=ga:123&key=K')
    """
    descriptor = RequestDescriptor(base_endpoint, parameters, api_key=api_key)
    return descriptor.absolute_uri, descriptor.relative_uri


def request_target(uri: str) -> str:
    """Return *uri* as it must be handed to httpx: ``#`` becomes ``%23``."""
    return uri.replace("#", "%23")


class RequestDescriptor:
    """One logical request: base endpoint, parameters, and derived URIs.

    The parameter mapping is copied on construction. The parsed endpoint
    and both URIs are computed on first access and then reused.

    Args:
        base_endpoint: Absolute endpoint URL without a query string.
        parameters: Query parameters.
        api_key: Process-wide API key, sent as the ``key`` parameter.
    """

    def __init__(
        self,
        base_endpoint: str,
        parameters: Optional[Mapping[str, Any]] = None,
        api_key: Optional[str] = None,
    ) -> None:
        self._base_endpoint = str(base_endpoint)
        self._parameters = dict(parameters or {})
        self._api_key = api_key

    def __repr__(self) -> str:
        return f"RequestDescriptor({self.absolute_uri!r})"

    @property
    def base_endpoint(self) -> str:
        return self._base_endpoint

    @property
    def parameters(self) -> dict[str, Any]:
        """A copy of the caller's parameters (without the API key)."""
        return dict(self._parameters)

    @cached_property
    def url(self) -> httpx.URL:
        """The parsed base endpoint."""
        return httpx.URL(self._base_endpoint)

    @cached_property
    def query_string(self) -> str:
        return query_string(self._parameters, self._api_key)

    @cached_property
    def absolute_uri(self) -> str:
        return self._base_endpoint + self.query_string

    @cached_property
    def relative_uri(self) -> str:
        return self.url.path + self.query_string

    @cached_property
    def request_target(self) -> str:
        """:attr:`relative_uri` as sent by the single-user executors."""
        return request_target(self.relative_uri)

    @cached_property
    def origin(self) -> str:
        """``https://host[:port]`` of the endpoint.

        The scheme is always ``https``: single-user requests are only ever
        sent over TLS.
        """
        port = f":{self.url.port}" if self.url.port is not None else ""
        return f"https://{self.url.host}{port}"
