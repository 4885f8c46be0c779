"""Response classification -- maps a raw response to a result value.

:func:`classify` recognises two response shapes:

* :class:`httpx.Response` (blocking and cooperative paths), successful when
  ``status_code`` is in the 2xx family;
* access-token responses exposing a ``status`` field, successful when it
  equals 200.

Any other response is a failure. Its body is parsed as JSON; a body of the
form ``{"error": {"code": ..., "message": ..., "errors": [...]}}`` selects a
:class:`~gafeed.exceptions.ClientError` variant by ``code``. Anything else
becomes a :class:`~gafeed.exceptions.GenericClientError` carrying the raw
body as its message. Classification never raises on a malformed body.
"""

from __future__ import annotations

import json
from typing import Any

from gafeed.exceptions import ClientError, GenericClientError, error_class_for
from gafeed.result import Failure, Result, Success


def is_success(response: Any) -> bool:
    """Return True for a 2xx ``status_code`` or a ``status`` of 200."""
    status_code = getattr(response, "status_code", None)
    if isinstance(status_code, int) and 200 <= status_code < 300:
        return True
    return getattr(response, "status", None) == 200


def response_body(response: Any) -> str:
    """Return the raw body of *response* as text."""
    text = getattr(response, "text", None)
    if isinstance(text, str):
        return text
    body = getattr(response, "body", None)
    if isinstance(body, bytes):
        return body.decode("utf-8", errors="replace")
    if body is None:
        return ""
    return str(body)


def parse_error(body: str, uri: str) -> ClientError:
    """Build the :class:`ClientError` for a non-success *body*."""
    try:
        parsed = json.loads(body)
    except (json.JSONDecodeError, ValueError, TypeError, RecursionError):
        parsed = None

    error = parsed.get("error") if isinstance(parsed, dict) else None
    if not isinstance(error, dict):
        return GenericClientError(body, uri=uri)

    code = error.get("code")
    message = error.get("message")
    errors = error.get("errors")
    klass = error_class_for(code)
    return klass(
        "" if message is None else str(message),
        code=code if isinstance(code, int) and not isinstance(code, bool) else None,
        errors=errors if isinstance(errors, list) else [],
        uri=uri,
    )


def classify(response: Any, uri: str) -> Result:
    """Classify *response* for the request sent to the absolute *uri*.

    Returns:
        :class:`~gafeed.result.Success` wrapping the response, or
        :class:`~gafeed.result.Failure` carrying exactly one
        :class:`~gafeed.exceptions.ClientError` variant.
    """
    if is_success(response):
        return Success(response=response, uri=uri)
    return Failure(error=parse_error(response_body(response), uri))
