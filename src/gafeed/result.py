"""Result values returned by :meth:`~gafeed.client.engine.RequestEngine.send`.

A request either succeeds, producing :class:`Success`, or the backend answers
with a non-success status, producing :class:`Failure` carrying exactly one
:class:`~gafeed.exceptions.ClientError` variant. Callers pattern-match on the
result instead of catching exceptions::

    match engine.send(session, url, params):
        case Success(response=response):
            ...
        case Failure(error=InvalidCredentialsError()):
            reauthenticate()
        case Failure(error=BackendError()):
            back_off()
        case Failure(error=error):
            raise error
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union

from gafeed.exceptions import ClientError


@dataclass(frozen=True)
class Success:
    """A 2xx (or ``status == 200``) response."""

    response: Any
    uri: str

    @property
    def ok(self) -> bool:
        return True

    def unwrap(self) -> Any:
        """Return the response."""
        return self.response


@dataclass(frozen=True)
class Failure:
    """A non-success response classified into a :class:`ClientError` variant."""

    error: ClientError

    @property
    def ok(self) -> bool:
        return False

    def unwrap(self) -> Any:
        """Raise the carried error."""
        raise self.error


Result = Union[Success, Failure]
