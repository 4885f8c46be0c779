"""Cooperative executor -- mirrors :class:`~gafeed.client.sync_client.BlockingExecutor`.

:class:`CooperativeExecutor` sends the same request on an
:class:`httpx.AsyncClient`. Each call starts a private event loop, runs one
task on it until the response is read, and closes the loop again, so no
state is shared between calls and no other task runs on that loop.

The result is indistinguishable from the blocking path; only the way the
I/O wait is spent differs.

.. note::
   The loop is created with :func:`asyncio.run`, so the executor cannot be
   used from a thread that is already running an event loop.
"""

from __future__ import annotations

import asyncio
from typing import Mapping, Optional

import httpx

from gafeed.client.base import Executor
from gafeed.client.uri import RequestDescriptor
from gafeed.exceptions import ConfigError
from gafeed.models import ClientConfig


class CooperativeExecutor(Executor):
    """Execution as a single task on a call-scoped event loop.

    Args:
        config: Connection settings.
        transport: Optional async transport replacing the network layer.
    """

    def __init__(
        self,
        config: ClientConfig,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        super().__init__(config)
        self._transport = transport

    def execute(
        self,
        descriptor: RequestDescriptor,
        headers: Mapping[str, str],
    ) -> httpx.Response:
        """Run :meth:`fetch` to completion on a fresh event loop.

        Raises:
            ConfigError: If called while an event loop is running in this
                thread.
        """
        try:
            asyncio.get_running_loop()
        except RuntimeError:
            return asyncio.run(self.fetch(descriptor, headers))
        raise ConfigError(
            "Cooperative execution cannot run inside an active event loop; "
            "await CooperativeExecutor.fetch() instead"
        )

    async def fetch(
        self,
        descriptor: RequestDescriptor,
        headers: Mapping[str, str],
    ) -> httpx.Response:
        """The request itself, suspending at each I/O boundary."""
        async with httpx.AsyncClient(
            **self._client_options(descriptor), transport=self._transport
        ) as client:
            return await client.get(descriptor.request_target, headers=dict(headers))
