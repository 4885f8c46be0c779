"""Exception hierarchy for gafeed.

All exceptions inherit from :class:`GafeedError`. Two families live below
it:

* :class:`ConfigError` -- raised immediately for misconfiguration (a session
  that is neither single-user nor OAuth, an unreadable config file, a bad
  credential source).
* :class:`ClientError` -- the typed taxonomy for non-success API responses.
  These are *returned* inside a :class:`~gafeed.result.Failure` by
  :meth:`~gafeed.client.engine.RequestEngine.send` and only raised when the
  caller asks for it via :meth:`~gafeed.result.Failure.unwrap`.

Subclass hierarchy::

    GafeedError
    +-- ConfigError
    +-- ClientError
        +-- BadRequestError              (backend code 400)
        +-- InvalidCredentialsError      (backend code 401)
        +-- InsufficientPermissionsError (backend code 403)
        +-- BackendError                 (backend code 503)
        +-- GenericClientError           (any other code, or unstructured body)

Transport failures (DNS, connect, TLS, timeout) are not part of this
hierarchy; they surface as the underlying :mod:`httpx` exceptions.
"""

from __future__ import annotations

from typing import Any, Optional


class GafeedError(Exception):
    """Base exception for all gafeed errors."""


class ConfigError(GafeedError):
    """Raised for configuration problems (session mode, config file, credential sources)."""


class ClientError(GafeedError):
    """A non-success response returned by the API.

    Compares by value so that classifying the same response twice yields
    equal errors.

    Args:
        message: Backend-supplied message, or the raw body for unstructured
            responses.
        code: Backend-supplied numeric error code, ``None`` when absent.
        errors: Structured sub-errors from the ``errors`` field.
        uri: Absolute URI of the request that produced the error.
    """

    def __init__(
        self,
        message: str,
        code: Optional[int] = None,
        errors: Optional[list[Any]] = None,
        uri: Optional[str] = None,
    ) -> None:
        self.message = message
        self.code = code
        self.errors = list(errors or [])
        self.uri = uri
        # All fields in args: pickle and copy rebuild the error from them.
        super().__init__(message, code, self.errors, uri)

    def __str__(self) -> str:
        text = f"[{self.code}] {self.message}" if self.code is not None else self.message
        return f"{text} : {self.uri}"

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(message={self.message!r}, code={self.code!r}, "
            f"errors={self.errors!r}, uri={self.uri!r})"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ClientError):
            return NotImplemented
        return (
            type(self) is type(other)
            and self.message == other.message
            and self.code == other.code
            and self.errors == other.errors
            and self.uri == other.uri
        )

    def __hash__(self) -> int:
        return hash((type(self), self.message, self.code, self.uri))


class BadRequestError(ClientError):
    """Backend code 400: the request itself is malformed. Fail fast."""


class InvalidCredentialsError(ClientError):
    """Backend code 401: the credentials were rejected. Re-authenticate."""


class InsufficientPermissionsError(ClientError):
    """Backend code 403: the credentials lack access to the resource."""


class BackendError(ClientError):
    """Backend code 503: the service is unavailable. Back off and retry later."""


class GenericClientError(ClientError):
    """Any other backend code, or a body that is not a structured error."""


ERROR_CODES: dict[int, type[ClientError]] = {
    400: BadRequestError,
    401: InvalidCredentialsError,
    403: InsufficientPermissionsError,
    503: BackendError,
}
"""Backend error code to :class:`ClientError` variant."""


def error_class_for(code: object) -> type[ClientError]:
    """Return the :class:`ClientError` variant for a backend error *code*.

    Non-integer codes (including ``bool``) and unknown codes map to
    :class:`GenericClientError`.
    """
    if isinstance(code, bool) or not isinstance(code, int):
        return GenericClientError
    return ERROR_CODES.get(code, GenericClientError)
