from logging import getLogger
from typing import Any, Mapping, Optional

from httpx import Response
from pydantic import TypeAdapter, ValidationError

from ..models.results import ErrorKind, JiraError, JiraResult
from ._expectations import Expectation, JsonBody, NoBody, TextBody
from .constants import LOGGER_NAME, MEDIA_TYPE_JSON

logger = getLogger(LOGGER_NAME)


class _DecodeFailure(Exception):
    pass


def interpret_response(
    response: Response, expectations: Mapping[int, Expectation]
) -> JiraResult[Any]:
    """Turn a raw response into a ``JiraResult`` without raising.

    The status is looked up in ``expectations``. A match is decoded with the
    declared strategy; a body that does not decode yields a ``DECODE`` error.
    Any other status yields an ``APPLICATION`` error carrying the best-effort
    decoded body.
    """
    status = response.status_code
    headers = dict(response.headers)
    expectation = expectations.get(status)

    if expectation is None:
        body = _decode_error_body(response)
        message = extract_error_message(body) or response.reason_phrase or str(status)
        logger.debug(f"Response {status} not in expected {sorted(expectations)}")
        return JiraResult(
            success=False,
            status=status,
            error=JiraError(
                kind=ErrorKind.APPLICATION,
                status_code=status,
                message=message,
                body=body,
            ),
            headers=headers,
        )

    try:
        data = _decode(response, expectation)
    except _DecodeFailure as e:
        logger.debug(f"Response {status} could not be decoded: {e}")
        return JiraResult(
            success=False,
            status=status,
            error=JiraError(
                kind=ErrorKind.DECODE,
                status_code=status,
                message=str(e),
                body=response.text,
            ),
            headers=headers,
        )

    return JiraResult(success=True, status=status, data=data, headers=headers)


def _decode(response: Response, expectation: Expectation) -> Any:
    if isinstance(expectation, NoBody):
        return None
    if isinstance(expectation, TextBody):
        return response.text
    if isinstance(expectation, JsonBody):
        try:
            payload = response.json()
        except ValueError as e:
            raise _DecodeFailure(f"Invalid JSON body: {e}") from e
        if expectation.model is None:
            return payload
        try:
            return TypeAdapter(expectation.model).validate_python(payload)
        except ValidationError as e:
            raise _DecodeFailure(
                f"Body does not match {_type_name(expectation.model)}: "
                f"{e.error_count()} validation error(s)"
            ) from e
    raise TypeError(f"Unknown expectation: {expectation!r}")


def _decode_error_body(response: Response) -> Any:
    if not response.content:
        return {"message": response.reason_phrase}

    content_type = response.headers.get("content-type", "")
    if MEDIA_TYPE_JSON in content_type or content_type.endswith("+json"):
        try:
            return response.json()
        except ValueError:
            pass
    return response.text


def extract_error_message(body: Any) -> Optional[str]:
    """Pull a readable message out of the shapes Jira uses for errors.

    Handles ``{"errorMessages": [...], "errors": {...}}`` from the platform
    API, ``{"errorMessage": ...}`` from the service desk API and plain
    ``{"message": ...}`` bodies.
    """
    if isinstance(body, str):
        return body.strip() or None
    if not isinstance(body, dict):
        return None

    parts = [str(m) for m in body.get("errorMessages") or [] if m]
    errors = body.get("errors")
    if isinstance(errors, dict):
        parts.extend(f"{field}: {reason}" for field, reason in errors.items())
    if parts:
        return "; ".join(parts)

    for key in ("errorMessage", "message", "error", "detail"):
        value = body.get(key)
        if value:
            return str(value)
    return None


def _type_name(model: Any) -> str:
    return getattr(model, "__name__", None) or repr(model)
