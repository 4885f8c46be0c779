"""Request execution for gafeed.

Provides the orchestrator and its components:

Classes:
    :class:`RequestEngine` -- builds, authenticates, executes, and
    classifies one GET per call.
    :class:`RequestDescriptor` -- base endpoint plus parameters, rendered
    into absolute and relative URIs.
    :class:`BlockingExecutor` -- runs the request on the calling thread.
    :class:`CooperativeExecutor` -- runs it as one task on a call-scoped
    event loop.

Example::

    from gafeed.client import RequestEngine

    result = RequestEngine(config).send(session, endpoint, {"ids": "ga:123"})
"""

from gafeed.client.async_client import CooperativeExecutor
from gafeed.client.base import Executor
from gafeed.client.engine import RequestEngine
from gafeed.client.response import classify
from gafeed.client.sync_client import BlockingExecutor
from gafeed.client.uri import RequestDescriptor, build_uris

__all__ = [
    "BlockingExecutor",
    "CooperativeExecutor",
    "Executor",
    "RequestDescriptor",
    "RequestEngine",
    "build_uris",
    "classify",
]
