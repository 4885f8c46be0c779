"""gafeed -- request execution engine for the analytics data API.

gafeed turns a base endpoint plus query parameters into one authenticated
HTTPS GET and classifies the outcome into a success value or a typed
failure. Sessions authenticate either with a static token (legacy
``GoogleLogin`` or bearer) sent by gafeed's own blocking or cooperative
executor, or with an OAuth access token that signs and sends the request
itself.

Typical workflow::

    from gafeed import RequestEngine, Session, load_config

    engine = RequestEngine(load_config())
    result = engine.send(Session(auth_token="..."), endpoint, {"ids": "ga:123"})

Modules:
    client: URI assembly, executors, classification, and the engine.
    auth: Authentication strategy selection.
    models: The immutable :class:`ClientConfig`.
    config: Config loading and credential sources.
    session: Bundled session and access-token implementations.
    result: :class:`Success` / :class:`Failure` result values.
    exceptions: Error taxonomy.
    output: Diagnostics on stderr.
"""

from gafeed.client import RequestEngine
from gafeed.config import load_config
from gafeed.exceptions import (
    BackendError,
    BadRequestError,
    ClientError,
    ConfigError,
    GafeedError,
    GenericClientError,
    InsufficientPermissionsError,
    InvalidCredentialsError,
)
from gafeed.models import ClientConfig
from gafeed.result import Failure, Result, Success
from gafeed.session import OAuth2AccessToken, Session

__version__ = "0.1.0"

__all__ = [
    "BackendError",
    "BadRequestError",
    "ClientConfig",
    "ClientError",
    "ConfigError",
    "Failure",
    "GafeedError",
    "GenericClientError",
    "InsufficientPermissionsError",
    "InvalidCredentialsError",
    "OAuth2AccessToken",
    "RequestEngine",
    "Result",
    "Session",
    "Success",
    "load_config",
]
