from typing import Any, Optional

import httpx


class JiraClientError(Exception):
    """Base exception for all errors raised by the client."""


class BaseUrlMissingError(JiraClientError):
    def __init__(
        self,
        message="Jira site URL missing. Pass base_url to JiraClient or set the JIRA_BASE_URL environment variable.",
    ):
        self.message = message
        super().__init__(self.message)


class CredentialsMissingError(JiraClientError):
    def __init__(
        self,
        message="Authentication required. Set JIRA_EMAIL and JIRA_API_TOKEN, JIRA_BEARER_TOKEN or JIRA_SESSION_COOKIE, or provide a request bridge.",
    ):
        self.message = message
        super().__init__(self.message)


class MissingPathParameterError(JiraClientError):
    """Raised when a path template placeholder has no value.

    This is a programming error in the calling code and is raised before
    any request is sent.
    """

    def __init__(self, name: str, template: str) -> None:
        self.name = name
        self.template = template
        super().__init__(
            f"Missing value for path parameter '{name}' in template '{template}'"
        )


class TransportError(JiraClientError):
    """The request could not be delivered or no response was received.

    Covers DNS failures, refused connections, TLS errors and timeouts.
    The original exception is available as ``__cause__``.
    """

    def __init__(self, method: str, url: str, reason: str) -> None:
        self.method = method
        self.url = url
        self.reason = reason
        super().__init__(f"{method} {url} failed: {reason}")

    @classmethod
    def from_exception(
        cls, method: str, url: str, exc: BaseException
    ) -> "TransportError":
        reason = str(exc) or type(exc).__name__
        if isinstance(exc, httpx.TimeoutException):
            reason = f"timed out ({reason})"
        return cls(method, url, reason)


class JiraApiError(JiraClientError):
    """Jira answered with a status the caller did not declare as success."""

    def __init__(self, message: str, status_code: int, body: Optional[Any] = None):
        self.message = message
        self.status_code = status_code
        self.body = body
        super().__init__(f"{status_code}: {message}")


class ResponseDecodeError(JiraClientError):
    """A success response whose body could not be decoded as declared."""

    def __init__(self, message: str, status_code: int, body: Optional[Any] = None):
        self.message = message
        self.status_code = status_code
        self.body = body
        super().__init__(f"{status_code}: {message}")
