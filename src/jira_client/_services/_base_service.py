import base64
import inspect
from dataclasses import replace
from logging import getLogger
from typing import Any, Dict, Mapping, Optional, TypedDict

from httpx import AsyncClient, Client, Headers, Response
from httpx import TransportError as HttpxTransportError

from .._config import ActAs, Config
from .._utils import RequestSpec, ResolvedRequest, interpret_response, mask_headers
from .._utils._ssl_context import get_httpx_client_kwargs
from .._utils._user_agent import user_agent_value
from .._utils.constants import (
    HEADER_ACCEPT,
    HEADER_AUTHORIZATION,
    HEADER_CONTENT_TYPE,
    HEADER_COOKIE,
    HEADER_USER_AGENT,
    LOGGER_NAME,
    MEDIA_TYPE_JSON,
)
from ..models.errors import TransportError
from ..models.results import JiraResult

_TRANSPORT_ERRORS = (HttpxTransportError, OSError)


class RequestOptions(TypedDict, total=False):
    headers: Mapping[str, str]
    act_as: ActAs


class BaseService:
    """Shared request pipeline for every Jira resource service.

    ``execute`` resolves a ``RequestSpec``, sends it once through the
    configured transport and interprets the response into a ``JiraResult``.
    HTTP error statuses never raise; only transport failures and caller
    mistakes (such as a missing path parameter) do.
    """

    def __init__(self, config: Config) -> None:
        self._logger = getLogger(LOGGER_NAME)
        self._config = config
        self._client: Optional[Client] = None
        self._client_async: Optional[AsyncClient] = None
        self._client_kwargs: Dict[str, Any] = {}

        if config.transport == "direct":
            self._client_kwargs = {
                **get_httpx_client_kwargs(config.timeout),
                "base_url": config.base_url,
            }
            self._client = Client(**self._client_kwargs)

        super().__init__()

    def execute(
        self,
        spec: RequestSpec,
        *,
        headers: Optional[Mapping[str, str]] = None,
        act_as: ActAs = "user",
    ) -> JiraResult[Any]:
        resolved = self._with_overrides(spec, headers).resolve()
        response = self.send(resolved, act_as=act_as)
        return interpret_response(response, spec.expectations)

    async def execute_async(
        self,
        spec: RequestSpec,
        *,
        headers: Optional[Mapping[str, str]] = None,
        act_as: ActAs = "user",
    ) -> JiraResult[Any]:
        resolved = self._with_overrides(spec, headers).resolve()
        response = await self.send_async(resolved, act_as=act_as)
        return interpret_response(response, spec.expectations)

    def send(self, request: ResolvedRequest, *, act_as: ActAs = "user") -> Response:
        """Issue ``request`` exactly once and return the raw response."""
        headers = self.prepare_headers(request)
        self._log_request(request, headers)

        try:
            if self._config.bridge is not None:
                response = self._config.bridge.request(
                    request.method,
                    request.url,
                    headers=dict(headers),
                    content=request.content,
                    act_as=act_as,
                )
                if inspect.isawaitable(response):
                    if inspect.iscoroutine(response):
                        response.close()
                    raise TypeError(
                        "The request bridge returned an awaitable; use the *_async methods."
                    )
            else:
                assert self._client is not None
                response = self._client.request(
                    request.method,
                    request.url,
                    headers=headers,
                    content=request.content,
                )
        except _TRANSPORT_ERRORS as e:
            self._logger.warning(f"Transport failure: {request.method} {request.url}: {e}")
            raise TransportError.from_exception(request.method, request.url, e) from e

        self._logger.debug(f"Response: {response.status_code} {request.url}")
        return response

    async def send_async(
        self, request: ResolvedRequest, *, act_as: ActAs = "user"
    ) -> Response:
        headers = self.prepare_headers(request)
        self._log_request(request, headers)

        try:
            if self._config.bridge is not None:
                response = self._config.bridge.request(
                    request.method,
                    request.url,
                    headers=dict(headers),
                    content=request.content,
                    act_as=act_as,
                )
                if inspect.isawaitable(response):
                    response = await response
            else:
                response = await self._get_client_async().request(
                    request.method,
                    request.url,
                    headers=headers,
                    content=request.content,
                )
        except _TRANSPORT_ERRORS as e:
            self._logger.warning(f"Transport failure: {request.method} {request.url}: {e}")
            raise TransportError.from_exception(request.method, request.url, e) from e

        self._logger.debug(f"Response: {response.status_code} {request.url}")
        return response

    def prepare_headers(self, request: ResolvedRequest) -> Headers:
        """Add default and auth headers without touching caller-supplied ones."""
        headers = Headers(request.headers)
        defaults = dict(self.default_headers)
        if request.content is not None:
            defaults[HEADER_CONTENT_TYPE] = MEDIA_TYPE_JSON

        for name, value in defaults.items():
            if name not in headers:
                headers[name] = value
        return headers

    def close(self) -> None:
        """Close the sync HTTP client.

        The async client can only be closed from a coroutine; call
        ``aclose`` once any ``_async`` method has been used.
        """
        if self._client is not None:
            self._client.close()
        if self._client_async is not None and not self._client_async.is_closed:
            self._logger.warning(
                "close() left the async HTTP client open; await aclose() instead."
            )

    async def aclose(self) -> None:
        if self._client_async is not None:
            await self._client_async.aclose()
        self.close()

    @property
    def default_headers(self) -> Dict[str, str]:
        return {
            HEADER_ACCEPT: MEDIA_TYPE_JSON,
            HEADER_USER_AGENT: user_agent_value(),
            **self.auth_headers,
        }

    @property
    def auth_headers(self) -> Dict[str, str]:
        method = self._config.auth_method
        if self._config.transport == "bridge" or method == "ambient":
            return {}
        if method == "basic":
            raw = f"{self._config.email}:{self._config.api_token}".encode()
            return {HEADER_AUTHORIZATION: f"Basic {base64.b64encode(raw).decode()}"}
        if method == "bearer":
            return {HEADER_AUTHORIZATION: f"Bearer {self._config.bearer_token}"}
        return {HEADER_COOKIE: str(self._config.session_cookie)}

    @staticmethod
    def _with_overrides(
        spec: RequestSpec, headers: Optional[Mapping[str, str]]
    ) -> RequestSpec:
        if not headers:
            return spec
        # case-insensitive merge
        merged = Headers(spec.headers)
        merged.update(headers)
        return replace(spec, headers=dict(merged.items()))

    def _get_client_async(self) -> AsyncClient:
        # created on first use so that sync-only callers never open it
        if self._client_async is None:
            self._client_async = AsyncClient(**self._client_kwargs)
        return self._client_async

    def _log_request(self, request: ResolvedRequest, headers: Headers) -> None:
        self._logger.debug(f"Request: {request.method} {request.url}")
        self._logger.debug(f"HEADERS: {mask_headers(headers)}")
