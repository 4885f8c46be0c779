"""Pydantic models shared across gafeed.

:class:`ClientConfig` is the process-wide configuration consumed by
:class:`~gafeed.client.engine.RequestEngine`. It is frozen: an engine reads
it from any number of threads, and changing configuration means building a
new value (``config.model_copy(update={...})``) and a new engine.

Values are normally produced by :func:`~gafeed.config.load_config`, which
layers overrides, environment variables, and a JSON file on top of the
defaults declared here.
"""

from __future__ import annotations

from typing import Callable, Optional

from pydantic import BaseModel, ConfigDict, Field


class ClientConfig(BaseModel):
    """Immutable request execution settings.

    Example::

        ClientConfig(
            api_key="K",
            proxy_address="proxy.internal",
            proxy_port=3128,
            use_cooperative=True,
        )
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    api_key: Optional[str] = Field(
        default=None, description="Appended to every request as the 'key' query parameter"
    )
    proxy_address: Optional[str] = Field(
        default=None, description="Proxy host for single-user requests"
    )
    proxy_port: Optional[int] = Field(default=None, description="Proxy port")
    open_timeout: Optional[float] = Field(
        default=60.0, description="Connect timeout in seconds (None disables it)"
    )
    read_timeout: Optional[float] = Field(
        default=60.0, description="Read timeout in seconds (None disables it)"
    )
    use_cooperative: bool = Field(
        default=False,
        description="Run single-user requests on a private event loop instead of blocking",
    )
    verify_ssl: bool = Field(
        default=False,
        description="Verify the server certificate. Off unless explicitly enabled",
    )
    log_sink: Optional[Callable[[str], None]] = Field(
        default=None,
        exclude=True,
        description="Receives the pre- and post-dispatch trace lines of every call",
    )

    @property
    def proxy_url(self) -> Optional[str]:
        """``http://<address>[:<port>]`` for the configured proxy, or ``None``."""
        if not self.proxy_address:
            return None
        if self.proxy_port is None:
            return f"http://{self.proxy_address}"
        return f"http://{self.proxy_address}:{self.proxy_port}"
