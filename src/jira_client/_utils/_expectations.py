"""Per-status expectations describing how a response body is decoded."""

from dataclasses import dataclass
from typing import Any, Dict, Iterable, Optional, Union


@dataclass(frozen=True)
class JsonBody:
    """Parse the body as JSON, validating it into ``model`` when given."""

    model: Optional[Any] = None


@dataclass(frozen=True)
class TextBody:
    """Return the body as text."""


@dataclass(frozen=True)
class NoBody:
    """Ignore the body; the call yields ``None`` on success."""


Expectation = Union[JsonBody, TextBody, NoBody]
ExpectationTable = Dict[int, Expectation]

JSON_STATUSES = (200, 201)
NO_CONTENT_STATUSES = (200, 201, 202, 204)


def expect_json(
    model: Optional[Any] = None, statuses: Iterable[int] = JSON_STATUSES
) -> ExpectationTable:
    body = JsonBody(model)
    return {status: body for status in statuses}


def expect_text(statuses: Iterable[int] = (200,)) -> ExpectationTable:
    return {status: TextBody() for status in statuses}


def expect_no_content(
    statuses: Iterable[int] = NO_CONTENT_STATUSES,
) -> ExpectationTable:
    return {status: NoBody() for status in statuses}
