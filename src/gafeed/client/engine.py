"""Request orchestration: build, authenticate, execute, classify.

:class:`RequestEngine` is the entry point of gafeed. One engine is built
from a :class:`~gafeed.models.ClientConfig` and may be shared across
threads; every call to :meth:`RequestEngine.send` runs this pipeline:

1. **Strategy** -- the session is resolved into
   :class:`~gafeed.auth.strategies.SingleUserAuth` or
   :class:`~gafeed.auth.strategies.OAuthAuth`, and the execution mode is
   chosen from the strategy and ``config.use_cooperative``.
2. **URIs** -- a :class:`~gafeed.client.uri.RequestDescriptor` renders the
   absolute and relative URIs, injecting the configured API key.
3. **Pre-dispatch trace** -- ``Request -> <relative uri>`` is sent to the
   log sink.
4. **Dispatch** -- blocking executor, cooperative executor, or the OAuth
   access token's own GET.
5. **Post-dispatch trace** -- ``Response -> <response repr>``.
6. **Classification** -- :func:`~gafeed.client.response.classify` turns the
   response into :class:`~gafeed.result.Success` or
   :class:`~gafeed.result.Failure`.

Nothing is retried. Transport errors propagate unchanged from step 4.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Mapping, Optional

from gafeed.auth.base import SessionLike
from gafeed.auth.strategies import (
    AuthStrategy,
    ExecutionMode,
    OAuthAuth,
    select_execution_mode,
    select_strategy,
)
from gafeed.client.async_client import CooperativeExecutor
from gafeed.client.base import Executor
from gafeed.client.response import classify
from gafeed.client.sync_client import BlockingExecutor
from gafeed.client.uri import RequestDescriptor
from gafeed.models import ClientConfig
from gafeed.output import debug
from gafeed.result import Result

logger = logging.getLogger(__name__)


class RequestEngine:
    """Executes single GET requests against the analytics API.

    Args:
        config: Process-wide settings. Defaults to ``ClientConfig()``.
        blocking: Executor used for blocking single-user calls.
        cooperative: Executor used when ``config.use_cooperative`` is set.

    Example::

        engine = RequestEngine(load_config())
        result = engine.send(session, "https://www.google.com/analytics/feeds/data",
                             {"ids": "ga:123", "metrics": "ga:visits"})
        if result.ok:
            print(result.response.text)
    """

    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        *,
        blocking: Optional[Executor] = None,
        cooperative: Optional[Executor] = None,
    ) -> None:
        self._config = config or ClientConfig()
        self._blocking = blocking or BlockingExecutor(self._config)
        self._cooperative = cooperative or CooperativeExecutor(self._config)

    @property
    def config(self) -> ClientConfig:
        return self._config

    def send(
        self,
        session: SessionLike,
        base_endpoint: str,
        parameters: Optional[Mapping[str, Any]] = None,
    ) -> Result:
        """Send one GET and classify the outcome.

        Args:
            session: Credential state of the caller.
            base_endpoint: Absolute endpoint URL without a query string.
            parameters: Query parameters. Never mutated.

        Returns:
            :class:`~gafeed.result.Success` or :class:`~gafeed.result.Failure`.

        Raises:
            ConfigError: If the session is neither single-user nor OAuth.
                No request is issued.
            httpx.TransportError: On network-level failures.
        """
        strategy = select_strategy(session)
        mode = select_execution_mode(strategy, self._config)
        descriptor = RequestDescriptor(base_endpoint, parameters, api_key=self._config.api_key)

        self._trace(f"Request -> {descriptor.relative_uri}")
        logger.debug("Dispatching %s in %s mode", descriptor.absolute_uri, mode.value)
        response = self._dispatch(strategy, mode, descriptor)
        self._trace(f"Response -> {response!r}")

        return classify(response, descriptor.absolute_uri)

    def get(
        self,
        session: SessionLike,
        base_endpoint: str,
        parameters: Optional[Mapping[str, Any]] = None,
    ) -> Any:
        """Like :meth:`send`, but return the response or raise its ClientError."""
        return self.send(session, base_endpoint, parameters).unwrap()

    # ------------------------------------------------------------------ #
    # Private helpers
    # ------------------------------------------------------------------ #

    def _dispatch(
        self,
        strategy: AuthStrategy,
        mode: ExecutionMode,
        descriptor: RequestDescriptor,
    ) -> Any:
        headers = strategy.authenticate().headers
        if isinstance(strategy, OAuthAuth):
            return strategy.access_token.get(descriptor.absolute_uri, headers)
        if mode is ExecutionMode.SINGLE_USER_COOPERATIVE:
            return self._cooperative.execute(descriptor, headers)
        return self._blocking.execute(descriptor, headers)

    def _trace(self, message: str) -> None:
        sink: Callable[[str], None] = self._config.log_sink or debug
        sink(message)
