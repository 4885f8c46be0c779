"""Execution strategy interface shared by the blocking and cooperative executors.

Both executors send the same GET with the same connection settings; they
differ only in the concurrency model. :class:`Executor` fixes that single
entry point so :class:`~gafeed.client.engine.RequestEngine` can swap one for
the other, and tests can inject either with an :class:`httpx.MockTransport`.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Mapping

import httpx

from gafeed.client.uri import RequestDescriptor
from gafeed.models import ClientConfig


class Executor(ABC):
    """Performs the network exchange for a single-user request.

    Args:
        config: Connection settings (proxy, timeouts, TLS verification).
    """

    def __init__(self, config: ClientConfig) -> None:
        self._config = config

    @abstractmethod
    def execute(
        self,
        descriptor: RequestDescriptor,
        headers: Mapping[str, str],
    ) -> httpx.Response:
        """GET ``descriptor.relative_uri`` on the endpoint's host.

        Returns:
            The response with its body fully read.

        Raises:
            httpx.TransportError: On connect, TLS, proxy, or timeout
                failures. Nothing is retried.
        """
        ...

    def _client_options(self, descriptor: RequestDescriptor) -> dict[str, Any]:
        """Keyword arguments for :class:`httpx.Client` / :class:`httpx.AsyncClient`.

        Environment proxy settings are ignored: only the configured proxy
        is used.
        """
        config = self._config
        options: dict[str, Any] = {
            "base_url": descriptor.origin,
            "timeout": httpx.Timeout(config.read_timeout, connect=config.open_timeout),
            "verify": config.verify_ssl,
            "trust_env": False,
        }
        if config.proxy_url is not None:
            options["proxy"] = config.proxy_url
        return options
