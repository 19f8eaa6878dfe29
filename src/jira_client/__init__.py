from ._config import Config, RequestBridge
from ._jira_client import JiraClient
from .models import (
    BaseUrlMissingError,
    CredentialsMissingError,
    ErrorKind,
    JiraApiError,
    JiraClientError,
    JiraError,
    JiraResult,
    MissingPathParameterError,
    ResponseDecodeError,
    TransportError,
)

__all__ = [
    "BaseUrlMissingError",
    "Config",
    "CredentialsMissingError",
    "ErrorKind",
    "JiraApiError",
    "JiraClient",
    "JiraClientError",
    "JiraError",
    "JiraResult",
    "MissingPathParameterError",
    "RequestBridge",
    "ResponseDecodeError",
    "TransportError",
]
