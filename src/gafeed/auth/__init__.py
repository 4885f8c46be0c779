"""Authentication strategies for gafeed.

The main entry points are:

- :func:`select_strategy` -- resolves a session into :class:`SingleUserAuth`
  or :class:`OAuthAuth`.
- :func:`select_execution_mode` -- pairs the strategy with the configured
  concurrency model.
- :class:`AuthResult` -- the headers a strategy attaches to a request.

Typical usage::

    from gafeed.auth import select_strategy

    strategy = select_strategy(session)
    headers = strategy.authenticate().headers
"""

from gafeed.auth.base import AccessToken, AuthResult, SessionLike
from gafeed.auth.strategies import (
    AuthStrategy,
    ExecutionMode,
    OAuthAuth,
    SingleUserAuth,
    select_execution_mode,
    select_strategy,
)

__all__ = [
    "AccessToken",
    "AuthResult",
    "AuthStrategy",
    "ExecutionMode",
    "OAuthAuth",
    "SessionLike",
    "SingleUserAuth",
    "select_execution_mode",
    "select_strategy",
]
