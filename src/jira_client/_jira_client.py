from functools import cached_property
from logging import getLogger
from os import environ as env
from typing import List, Optional

from dotenv import load_dotenv

from ._config import Config, RequestBridge
from ._services import (
    GroupsService,
    IssueBulkOperationsService,
    IssuePrioritiesService,
    IssueResolutionsService,
    IssueSecuritySchemesService,
    RequestService,
    ScreensService,
    SprintService,
    UserSearchService,
)
from ._services._base_service import BaseService
from ._utils._logs import setup_logging
from ._utils.constants import (
    ENV_API_TOKEN,
    ENV_BASE_URL,
    ENV_BEARER_TOKEN,
    ENV_DEBUG,
    ENV_EMAIL,
    ENV_SESSION_COOKIE,
    ENV_TIMEOUT,
    LOGGER_NAME,
)

load_dotenv()


class JiraClient:
    """Entry point for the Jira Cloud REST API.

    Values not passed to the constructor are read from the environment
    (``JIRA_BASE_URL``, ``JIRA_EMAIL``, ``JIRA_API_TOKEN``,
    ``JIRA_BEARER_TOKEN``, ``JIRA_SESSION_COOKIE``, ``JIRA_TIMEOUT``,
    ``JIRA_DEBUG``), after loading a ``.env`` file if present. Passing any
    credential (or a bridge) ignores every credential in the environment.

    Examples:
        ```python
        from jira_client import JiraClient

        with JiraClient(base_url="https://your-domain.atlassian.net") as client:
            result = client.issue_priorities.get_priority("1")
            print(result.status, result.data)
        ```
    """

    def __init__(
        self,
        *,
        base_url: Optional[str] = None,
        email: Optional[str] = None,
        api_token: Optional[str] = None,
        bearer_token: Optional[str] = None,
        session_cookie: Optional[str] = None,
        bridge: Optional[RequestBridge] = None,
        timeout: Optional[float] = None,
        debug: Optional[bool] = None,
    ) -> None:
        timeout_value = timeout
        if timeout_value is None and env.get(ENV_TIMEOUT):
            timeout_value = float(env[ENV_TIMEOUT])

        debug_value = debug
        if debug_value is None:
            debug_value = env.get(ENV_DEBUG, "").strip().lower() in ("1", "true", "yes")

        # explicit credentials replace the environment ones as a whole
        if any((email, api_token, bearer_token, session_cookie, bridge)):
            credentials = {
                "email": email,
                "api_token": api_token,
                "bearer_token": bearer_token,
                "session_cookie": session_cookie,
            }
        else:
            credentials = {
                "email": env.get(ENV_EMAIL),
                "api_token": env.get(ENV_API_TOKEN),
                "bearer_token": env.get(ENV_BEARER_TOKEN),
                "session_cookie": env.get(ENV_SESSION_COOKIE),
            }

        self._config = Config(
            base_url=base_url or env.get(ENV_BASE_URL),
            **credentials,
            bridge=bridge,
            timeout=timeout_value,
            debug=debug_value,
        )

        setup_logging(self._config.debug)
        log = getLogger(LOGGER_NAME)

        log.debug("CONFIG:")
        log.debug(
            f"base_url={self._config.base_url} transport={self._config.transport} "
            f"auth={self._config.auth_method} timeout={self._config.timeout}"
        )

    @property
    def config(self) -> Config:
        return self._config

    @cached_property
    def groups(self) -> GroupsService:
        return GroupsService(self._config)

    @cached_property
    def issue_priorities(self) -> IssuePrioritiesService:
        return IssuePrioritiesService(self._config)

    @cached_property
    def issue_resolutions(self) -> IssueResolutionsService:
        return IssueResolutionsService(self._config)

    @cached_property
    def issue_security_schemes(self) -> IssueSecuritySchemesService:
        return IssueSecuritySchemesService(self._config)

    @cached_property
    def screens(self) -> ScreensService:
        return ScreensService(self._config)

    @cached_property
    def sprints(self) -> SprintService:
        return SprintService(self._config)

    @cached_property
    def issue_bulk_operations(self) -> IssueBulkOperationsService:
        return IssueBulkOperationsService(self._config)

    @cached_property
    def user_search(self) -> UserSearchService:
        return UserSearchService(self._config)

    @cached_property
    def requests(self) -> RequestService:
        return RequestService(self._config)

    def close(self) -> None:
        """Close the sync HTTP clients of every service used so far.

        After using ``_async`` methods, await ``aclose`` (or use
        ``async with``) instead so the async clients are closed too.
        """
        for service in self._services():
            service.close()

    async def aclose(self) -> None:
        for service in self._services():
            await service.aclose()

    def __enter__(self) -> "JiraClient":
        return self

    def __exit__(self, *args) -> None:
        self.close()

    async def __aenter__(self) -> "JiraClient":
        return self

    async def __aexit__(self, *args) -> None:
        await self.aclose()

    def _services(self) -> List[BaseService]:
        # cached_property stores created services in the instance dict
        return [v for v in vars(self).values() if isinstance(v, BaseService)]
