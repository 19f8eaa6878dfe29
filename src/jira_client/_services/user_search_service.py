from typing import List, Optional, Unpack

from .._config import Config
from .._utils import Endpoint, RequestSpec, comma_separated, expect_json
from .._utils.constants import PLATFORM_API
from ..models import FoundUsers, PageBean, User, UserKey
from ..models.results import JiraResult
from ._base_service import BaseService, RequestOptions

_USER = f"{PLATFORM_API}/user"


class UserSearchService(BaseService):
    """Service for finding users.

    Searches that return plain lists are not paged by Jira in a stable way;
    Jira may return fewer than ``max_results`` users even when more match,
    because users hidden by privacy settings are filtered after paging.
    """

    def __init__(self, config: Config) -> None:
        super().__init__(config=config)

    def find_assignable_users(
        self,
        *,
        query: Optional[str] = None,
        session_id: Optional[str] = None,
        account_id: Optional[str] = None,
        project: Optional[str] = None,
        issue_key: Optional[str] = None,
        issue_id: Optional[str] = None,
        start_at: Optional[int] = None,
        max_results: Optional[int] = None,
        action_descriptor_id: Optional[int] = None,
        recommend: Optional[bool] = None,
        **options: Unpack[RequestOptions],
    ) -> JiraResult[List[User]]:
        """Find users who can be assigned issues in a project or to an issue.

        One of ``project``, ``issue_key`` or ``issue_id`` must be given.

        Args:
            query (Optional[str]): Matched against display name and email.
            session_id (Optional[str]): Identifies a picker session, so that
                repeated calls are cached by Jira.
            account_id (Optional[str]): Return only this user.
            project (Optional[str]): Project ID or key.
            issue_key (Optional[str]): Issue key.
            issue_id (Optional[str]): Issue ID.
            start_at (Optional[int]): Index of the first user to return.
            max_results (Optional[int]): Maximum number of users to return.
            action_descriptor_id (Optional[int]): Workflow transition, to find
                users assignable while transitioning.
            recommend (Optional[bool]): Rank recommended users first.

        Examples:
            ```python
            from jira_client import JiraClient

            client = JiraClient()

            users = client.user_search.find_assignable_users(project="PROJ", query="ana")
            for user in users.unwrap():
                print(user.display_name)
            ```
        """
        spec = self._find_assignable_users_spec(
            query=query,
            session_id=session_id,
            account_id=account_id,
            project=project,
            issue_key=issue_key,
            issue_id=issue_id,
            start_at=start_at,
            max_results=max_results,
            action_descriptor_id=action_descriptor_id,
            recommend=recommend,
        )
        return self.execute(spec, **options)

    async def find_assignable_users_async(
        self,
        *,
        query: Optional[str] = None,
        session_id: Optional[str] = None,
        account_id: Optional[str] = None,
        project: Optional[str] = None,
        issue_key: Optional[str] = None,
        issue_id: Optional[str] = None,
        start_at: Optional[int] = None,
        max_results: Optional[int] = None,
        action_descriptor_id: Optional[int] = None,
        recommend: Optional[bool] = None,
        **options: Unpack[RequestOptions],
    ) -> JiraResult[List[User]]:
        spec = self._find_assignable_users_spec(
            query=query,
            session_id=session_id,
            account_id=account_id,
            project=project,
            issue_key=issue_key,
            issue_id=issue_id,
            start_at=start_at,
            max_results=max_results,
            action_descriptor_id=action_descriptor_id,
            recommend=recommend,
        )
        return await self.execute_async(spec, **options)

    def find_bulk_assignable_users(
        self,
        project_keys: List[str],
        *,
        query: Optional[str] = None,
        account_id: Optional[str] = None,
        start_at: Optional[int] = None,
        max_results: Optional[int] = None,
        **options: Unpack[RequestOptions],
    ) -> JiraResult[List[User]]:
        """Find users assignable to issues in every one of ``project_keys``."""
        spec = self._find_bulk_assignable_users_spec(
            project_keys,
            query=query,
            account_id=account_id,
            start_at=start_at,
            max_results=max_results,
        )
        return self.execute(spec, **options)

    async def find_bulk_assignable_users_async(
        self,
        project_keys: List[str],
        *,
        query: Optional[str] = None,
        account_id: Optional[str] = None,
        start_at: Optional[int] = None,
        max_results: Optional[int] = None,
        **options: Unpack[RequestOptions],
    ) -> JiraResult[List[User]]:
        spec = self._find_bulk_assignable_users_spec(
            project_keys,
            query=query,
            account_id=account_id,
            start_at=start_at,
            max_results=max_results,
        )
        return await self.execute_async(spec, **options)

    def find_users(
        self,
        *,
        query: Optional[str] = None,
        account_id: Optional[str] = None,
        start_at: Optional[int] = None,
        max_results: Optional[int] = None,
        property: Optional[str] = None,
        **options: Unpack[RequestOptions],
    ) -> JiraResult[List[User]]:
        """Find active users by display name, email or a user property.

        ``property`` takes ``<key>.<path>=<value>``, e.g. ``"thepropertykey.something.nested=1"``.
        """
        spec = self._find_users_spec(
            query=query,
            account_id=account_id,
            start_at=start_at,
            max_results=max_results,
            property=property,
        )
        return self.execute(spec, **options)

    async def find_users_async(
        self,
        *,
        query: Optional[str] = None,
        account_id: Optional[str] = None,
        start_at: Optional[int] = None,
        max_results: Optional[int] = None,
        property: Optional[str] = None,
        **options: Unpack[RequestOptions],
    ) -> JiraResult[List[User]]:
        spec = self._find_users_spec(
            query=query,
            account_id=account_id,
            start_at=start_at,
            max_results=max_results,
            property=property,
        )
        return await self.execute_async(spec, **options)

    def find_users_by_query(
        self,
        query: str,
        *,
        start_at: Optional[int] = None,
        max_results: Optional[int] = None,
        **options: Unpack[RequestOptions],
    ) -> JiraResult[PageBean[User]]:
        """Find users with a structured query, e.g. ``is assignee of PROJ``."""
        spec = self._find_users_by_query_spec(
            query, start_at=start_at, max_results=max_results
        )
        return self.execute(spec, **options)

    async def find_users_by_query_async(
        self,
        query: str,
        *,
        start_at: Optional[int] = None,
        max_results: Optional[int] = None,
        **options: Unpack[RequestOptions],
    ) -> JiraResult[PageBean[User]]:
        spec = self._find_users_by_query_spec(
            query, start_at=start_at, max_results=max_results
        )
        return await self.execute_async(spec, **options)

    def find_user_keys_by_query(
        self,
        query: str,
        *,
        start_at: Optional[int] = None,
        max_results: Optional[int] = None,
        **options: Unpack[RequestOptions],
    ) -> JiraResult[PageBean[UserKey]]:
        spec = self._find_user_keys_by_query_spec(
            query, start_at=start_at, max_results=max_results
        )
        return self.execute(spec, **options)

    async def find_user_keys_by_query_async(
        self,
        query: str,
        *,
        start_at: Optional[int] = None,
        max_results: Optional[int] = None,
        **options: Unpack[RequestOptions],
    ) -> JiraResult[PageBean[UserKey]]:
        spec = self._find_user_keys_by_query_spec(
            query, start_at=start_at, max_results=max_results
        )
        return await self.execute_async(spec, **options)

    def find_users_for_picker(
        self,
        query: str,
        *,
        max_results: Optional[int] = None,
        show_avatar: Optional[bool] = None,
        exclude_account_ids: Optional[List[str]] = None,
        avatar_size: Optional[str] = None,
        exclude_connect_users: Optional[bool] = None,
        **options: Unpack[RequestOptions],
    ) -> JiraResult[FoundUsers]:
        """Find users for a user picker, with matches highlighted in ``html``."""
        spec = self._find_users_for_picker_spec(
            query,
            max_results=max_results,
            show_avatar=show_avatar,
            exclude_account_ids=exclude_account_ids,
            avatar_size=avatar_size,
            exclude_connect_users=exclude_connect_users,
        )
        return self.execute(spec, **options)

    async def find_users_for_picker_async(
        self,
        query: str,
        *,
        max_results: Optional[int] = None,
        show_avatar: Optional[bool] = None,
        exclude_account_ids: Optional[List[str]] = None,
        avatar_size: Optional[str] = None,
        exclude_connect_users: Optional[bool] = None,
        **options: Unpack[RequestOptions],
    ) -> JiraResult[FoundUsers]:
        spec = self._find_users_for_picker_spec(
            query,
            max_results=max_results,
            show_avatar=show_avatar,
            exclude_account_ids=exclude_account_ids,
            avatar_size=avatar_size,
            exclude_connect_users=exclude_connect_users,
        )
        return await self.execute_async(spec, **options)

    def find_users_with_all_permissions(
        self,
        permissions: List[str],
        *,
        query: Optional[str] = None,
        account_id: Optional[str] = None,
        issue_key: Optional[str] = None,
        project_key: Optional[str] = None,
        start_at: Optional[int] = None,
        max_results: Optional[int] = None,
        **options: Unpack[RequestOptions],
    ) -> JiraResult[List[User]]:
        """Find users who hold every one of ``permissions``.

        Args:
            permissions (List[str]): Permission keys such as ``BROWSE_PROJECTS``,
                sent comma separated.
            query (Optional[str]): Matched against display name and email.
            account_id (Optional[str]): Return only this user.
            issue_key (Optional[str]): Check permissions on this issue.
            project_key (Optional[str]): Check permissions on this project.
            start_at (Optional[int]): Index of the first user to return.
            max_results (Optional[int]): Maximum number of users to return.
        """
        spec = self._find_users_with_all_permissions_spec(
            permissions,
            query=query,
            account_id=account_id,
            issue_key=issue_key,
            project_key=project_key,
            start_at=start_at,
            max_results=max_results,
        )
        return self.execute(spec, **options)

    async def find_users_with_all_permissions_async(
        self,
        permissions: List[str],
        *,
        query: Optional[str] = None,
        account_id: Optional[str] = None,
        issue_key: Optional[str] = None,
        project_key: Optional[str] = None,
        start_at: Optional[int] = None,
        max_results: Optional[int] = None,
        **options: Unpack[RequestOptions],
    ) -> JiraResult[List[User]]:
        spec = self._find_users_with_all_permissions_spec(
            permissions,
            query=query,
            account_id=account_id,
            issue_key=issue_key,
            project_key=project_key,
            start_at=start_at,
            max_results=max_results,
        )
        return await self.execute_async(spec, **options)

    def find_users_with_browse_permission(
        self,
        *,
        query: Optional[str] = None,
        account_id: Optional[str] = None,
        issue_key: Optional[str] = None,
        project_key: Optional[str] = None,
        start_at: Optional[int] = None,
        max_results: Optional[int] = None,
        **options: Unpack[RequestOptions],
    ) -> JiraResult[List[User]]:
        """Find users who can browse an issue or project."""
        spec = self._find_users_with_browse_permission_spec(
            query=query,
            account_id=account_id,
            issue_key=issue_key,
            project_key=project_key,
            start_at=start_at,
            max_results=max_results,
        )
        return self.execute(spec, **options)

    async def find_users_with_browse_permission_async(
        self,
        *,
        query: Optional[str] = None,
        account_id: Optional[str] = None,
        issue_key: Optional[str] = None,
        project_key: Optional[str] = None,
        start_at: Optional[int] = None,
        max_results: Optional[int] = None,
        **options: Unpack[RequestOptions],
    ) -> JiraResult[List[User]]:
        spec = self._find_users_with_browse_permission_spec(
            query=query,
            account_id=account_id,
            issue_key=issue_key,
            project_key=project_key,
            start_at=start_at,
            max_results=max_results,
        )
        return await self.execute_async(spec, **options)

    def _find_assignable_users_spec(
        self,
        *,
        query: Optional[str],
        session_id: Optional[str],
        account_id: Optional[str],
        project: Optional[str],
        issue_key: Optional[str],
        issue_id: Optional[str],
        start_at: Optional[int],
        max_results: Optional[int],
        action_descriptor_id: Optional[int],
        recommend: Optional[bool],
    ) -> RequestSpec:
        return RequestSpec(
            method="GET",
            endpoint=Endpoint(f"{_USER}/assignable/search"),
            params={
                "query": query,
                "sessionId": session_id,
                "accountId": account_id,
                "project": project,
                "issueKey": issue_key,
                "issueId": issue_id,
                "startAt": start_at,
                "maxResults": max_results,
                "actionDescriptorId": action_descriptor_id,
                "recommend": recommend,
            },
            expectations=expect_json(List[User], statuses=(200,)),
        )

    def _find_bulk_assignable_users_spec(
        self,
        project_keys: List[str],
        *,
        query: Optional[str],
        account_id: Optional[str],
        start_at: Optional[int],
        max_results: Optional[int],
    ) -> RequestSpec:
        return RequestSpec(
            method="GET",
            endpoint=Endpoint(f"{_USER}/assignable/multiProjectSearch"),
            params={
                "query": query,
                "accountId": account_id,
                "projectKeys": comma_separated(project_keys),
                "startAt": start_at,
                "maxResults": max_results,
            },
            expectations=expect_json(List[User], statuses=(200,)),
        )

    def _find_users_spec(
        self,
        *,
        query: Optional[str],
        account_id: Optional[str],
        start_at: Optional[int],
        max_results: Optional[int],
        property: Optional[str],
    ) -> RequestSpec:
        return RequestSpec(
            method="GET",
            endpoint=Endpoint(f"{_USER}/search"),
            params={
                "query": query,
                "accountId": account_id,
                "startAt": start_at,
                "maxResults": max_results,
                "property": property,
            },
            expectations=expect_json(List[User], statuses=(200,)),
        )

    def _find_users_by_query_spec(
        self, query: str, *, start_at: Optional[int], max_results: Optional[int]
    ) -> RequestSpec:
        return RequestSpec(
            method="GET",
            endpoint=Endpoint(f"{_USER}/search/query"),
            params={"query": query, "startAt": start_at, "maxResults": max_results},
            expectations=expect_json(PageBean[User], statuses=(200,)),
        )

    def _find_user_keys_by_query_spec(
        self, query: str, *, start_at: Optional[int], max_results: Optional[int]
    ) -> RequestSpec:
        # Jira names this parameter maxResult, without the trailing s
        return RequestSpec(
            method="GET",
            endpoint=Endpoint(f"{_USER}/search/query/key"),
            params={"query": query, "startAt": start_at, "maxResult": max_results},
            expectations=expect_json(PageBean[UserKey], statuses=(200,)),
        )

    def _find_users_for_picker_spec(
        self,
        query: str,
        *,
        max_results: Optional[int],
        show_avatar: Optional[bool],
        exclude_account_ids: Optional[List[str]],
        avatar_size: Optional[str],
        exclude_connect_users: Optional[bool],
    ) -> RequestSpec:
        return RequestSpec(
            method="GET",
            endpoint=Endpoint(f"{_USER}/picker"),
            params={
                "query": query,
                "maxResults": max_results,
                "showAvatar": show_avatar,
                "excludeAccountIds": exclude_account_ids,
                "avatarSize": avatar_size,
                "excludeConnectUsers": exclude_connect_users,
            },
            expectations=expect_json(FoundUsers, statuses=(200,)),
        )

    def _find_users_with_all_permissions_spec(
        self,
        permissions: List[str],
        *,
        query: Optional[str],
        account_id: Optional[str],
        issue_key: Optional[str],
        project_key: Optional[str],
        start_at: Optional[int],
        max_results: Optional[int],
    ) -> RequestSpec:
        return RequestSpec(
            method="GET",
            endpoint=Endpoint(f"{_USER}/permission/search"),
            params={
                "query": query,
                "accountId": account_id,
                "permissions": comma_separated(permissions),
                "issueKey": issue_key,
                "projectKey": project_key,
                "startAt": start_at,
                "maxResults": max_results,
            },
            expectations=expect_json(List[User], statuses=(200,)),
        )

    def _find_users_with_browse_permission_spec(
        self,
        *,
        query: Optional[str],
        account_id: Optional[str],
        issue_key: Optional[str],
        project_key: Optional[str],
        start_at: Optional[int],
        max_results: Optional[int],
    ) -> RequestSpec:
        return RequestSpec(
            method="GET",
            endpoint=Endpoint(f"{_USER}/viewissue/search"),
            params={
                "query": query,
                "accountId": account_id,
                "issueKey": issue_key,
                "projectKey": project_key,
                "startAt": start_at,
                "maxResults": max_results,
            },
            expectations=expect_json(List[User], statuses=(200,)),
        )
