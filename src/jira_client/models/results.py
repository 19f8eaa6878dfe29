from datetime import datetime
from email.utils import parsedate_to_datetime
from enum import Enum
from typing import Any, Dict, Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .errors import JiraApiError, ResponseDecodeError

T = TypeVar("T")


class ErrorKind(str, Enum):
    APPLICATION = "application"
    DECODE = "decode"


class JiraError(BaseModel):
    """Error details of an unsuccessful call.

    ``APPLICATION`` means Jira answered with a status that was not declared
    as success. ``DECODE`` means the status was expected but the body could
    not be parsed or validated.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    kind: ErrorKind
    status_code: int
    message: str
    body: Optional[Any] = None


class JiraResult(BaseModel, Generic[T]):
    """Outcome of a Jira call.

    Exactly one side is populated: ``data`` for successful calls (``None``
    for endpoints without a response body) or ``error`` otherwise.

    Examples:
        ```python
        result = client.issue_resolutions.get_resolution("10000")
        if result.success:
            print(result.data.name)
        elif result.status == 404:
            print(result.error.message)
        ```
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    success: bool
    status: int
    data: Optional[T] = None
    error: Optional[JiraError] = None
    headers: Dict[str, str] = Field(default_factory=dict)

    @model_validator(mode="after")
    def check_sides(self) -> "JiraResult[T]":
        if self.success and self.error is not None:
            raise ValueError("a successful result cannot carry an error")
        if not self.success and (self.error is None or self.data is not None):
            raise ValueError("a failed result must carry an error and no data")
        return self

    def unwrap(self) -> T:
        """Return ``data`` or raise the error as an exception.

        Raises:
            JiraApiError: Jira rejected the request.
            ResponseDecodeError: The response body could not be decoded.
        """
        if self.success:
            return self.data  # type: ignore[return-value]

        assert self.error is not None
        if self.error.kind == ErrorKind.DECODE:
            raise ResponseDecodeError(
                self.error.message, self.error.status_code, self.error.body
            )
        raise JiraApiError(self.error.message, self.error.status_code, self.error.body)

    @property
    def location(self) -> Optional[str]:
        return self._header("Location")

    @property
    def retry_after(self) -> Optional[float]:
        """Seconds to wait according to the Retry-After header (RFC 7231).

        Returns ``None`` when the header is absent or unparsable. The client
        never retries on its own; this is for callers that do.
        """
        value = self._header("Retry-After")
        if not value:
            return None

        try:
            return max(float(value), 0.0)
        except ValueError:
            pass

        try:
            retry_date = parsedate_to_datetime(value)
            delta = (retry_date - datetime.now(retry_date.tzinfo)).total_seconds()
            return max(delta, 0.0)
        except (ValueError, TypeError):
            return None

    def _header(self, name: str) -> Optional[str]:
        lowered = name.lower()
        for key, value in self.headers.items():
            if key.lower() == lowered:
                return value
        return None
