from typing import (
    Awaitable,
    Literal,
    Mapping,
    Optional,
    Protocol,
    Union,
    runtime_checkable,
)

from httpx import Response
from pydantic import BaseModel, ConfigDict, HttpUrl, field_validator, model_validator

from .models.errors import BaseUrlMissingError, CredentialsMissingError

ActAs = Literal["user", "app"]


@runtime_checkable
class RequestBridge(Protocol):
    """Request primitive provided by a sandboxed host runtime.

    Hosts such as app platforms expose their own authenticated way of
    calling Jira. The bridge receives a site-relative URL and returns the
    raw response (or an awaitable of it). Credentials are supplied by the
    host, so no Authorization header is added for bridged requests.
    """

    def request(
        self,
        method: str,
        url: str,
        *,
        headers: Mapping[str, str],
        content: Optional[bytes],
        act_as: ActAs,
    ) -> Union[Response, Awaitable[Response]]: ...


class Config(BaseModel):
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    base_url: Optional[str] = None
    email: Optional[str] = None
    api_token: Optional[str] = None
    bearer_token: Optional[str] = None
    session_cookie: Optional[str] = None
    bridge: Optional[RequestBridge] = None
    timeout: Optional[float] = None
    debug: bool = False

    @field_validator("base_url", mode="before")
    @classmethod
    def validate_url(cls, value: Optional[str]) -> Optional[str]:
        if not value:
            return None
        # https://{site}.atlassian.net or a custom domain
        url_value = HttpUrl(url=value)
        assert url_value.host, "Invalid URL"
        return str(value).rstrip("/")

    @model_validator(mode="after")
    def validate_transport(self) -> "Config":
        if self.bridge is not None:
            return self
        if not self.base_url:
            raise BaseUrlMissingError()
        if bool(self.email) != bool(self.api_token):
            raise CredentialsMissingError(
                "Basic authentication needs both JIRA_EMAIL and JIRA_API_TOKEN."
            )
        if self.auth_method == "ambient":
            raise CredentialsMissingError()
        return self

    @property
    def transport(self) -> Literal["direct", "bridge"]:
        return "bridge" if self.bridge is not None else "direct"

    @property
    def auth_method(self) -> Literal["basic", "bearer", "cookie", "ambient"]:
        if self.email and self.api_token:
            return "basic"
        if self.bearer_token:
            return "bearer"
        if self.session_cookie:
            return "cookie"
        return "ambient"
