"""Blocking executor.

:class:`BlockingExecutor` opens an :class:`httpx.Client` to the endpoint's
host for the duration of one call and performs the GET on the calling
thread. The connection is bounded only by the configured open and read
timeouts.

See Also:
    :class:`~gafeed.client.async_client.CooperativeExecutor` for the
    event-loop based equivalent.
"""

from __future__ import annotations

from typing import Mapping, Optional

import httpx

from gafeed.client.base import Executor
from gafeed.client.uri import RequestDescriptor
from gafeed.models import ClientConfig


class BlockingExecutor(Executor):
    """Synchronous execution on the caller's thread.

    Args:
        config: Connection settings.
        transport: Optional transport replacing the network layer (tests use
            :class:`httpx.MockTransport`).

    Example::

        executor = BlockingExecutor(config)
        response = executor.execute(descriptor, {"Authorization": "Bearer tok"})
    """

    def __init__(
        self,
        config: ClientConfig,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        super().__init__(config)
        self._transport = transport

    def execute(
        self,
        descriptor: RequestDescriptor,
        headers: Mapping[str, str],
    ) -> httpx.Response:
        with httpx.Client(**self._client_options(descriptor), transport=self._transport) as client:
            return client.get(descriptor.request_target, headers=dict(headers))
