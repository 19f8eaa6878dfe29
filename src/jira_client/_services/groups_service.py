from typing import Any, Dict, List, Optional, Unpack

from .._config import Config
from .._utils import Endpoint, RequestSpec, expect_json, expect_no_content
from .._utils.constants import PLATFORM_API
from ..models import FoundGroups, Group, GroupDetails, PageBean, UserDetails
from ..models.results import JiraResult
from ._base_service import BaseService, RequestOptions


class GroupsService(BaseService):
    """Service for user groups.

    Groups are identified either by ``group_id`` or by ``group_name``; Jira
    recommends the ID because names can change. Most operations need site
    administration permissions.
    """

    def __init__(self, config: Config) -> None:
        super().__init__(config=config)

    def add_user_to_group(
        self,
        account_id: str,
        *,
        group_id: Optional[str] = None,
        group_name: Optional[str] = None,
        **options: Unpack[RequestOptions],
    ) -> JiraResult[Group]:
        """Add a user to a group.

        Args:
            account_id (str): The account ID of the user.
            group_id (Optional[str]): The ID of the group.
            group_name (Optional[str]): The name of the group, if no ID is given.

        Returns:
            JiraResult[Group]: The group the user was added to.

        Examples:
            ```python
            from jira_client import JiraClient

            client = JiraClient()

            client.groups.add_user_to_group(
                "5b10a2844c20165700ede21g", group_id="276f955c-63d7-42c8-9520-92d01dca0625"
            )
            ```
        """
        spec = self._add_user_to_group_spec(
            account_id, group_id=group_id, group_name=group_name
        )
        return self.execute(spec, **options)

    async def add_user_to_group_async(
        self,
        account_id: str,
        *,
        group_id: Optional[str] = None,
        group_name: Optional[str] = None,
        **options: Unpack[RequestOptions],
    ) -> JiraResult[Group]:
        spec = self._add_user_to_group_spec(
            account_id, group_id=group_id, group_name=group_name
        )
        return await self.execute_async(spec, **options)

    def bulk_get_groups(
        self,
        *,
        start_at: Optional[int] = None,
        max_results: Optional[int] = None,
        group_ids: Optional[List[str]] = None,
        group_names: Optional[List[str]] = None,
        access_type: Optional[str] = None,
        application_key: Optional[str] = None,
        **options: Unpack[RequestOptions],
    ) -> JiraResult[PageBean[GroupDetails]]:
        """Return a page of groups.

        Args:
            start_at (Optional[int]): Index of the first item to return.
            max_results (Optional[int]): Maximum number of items per page.
            group_ids (Optional[List[str]]): Group IDs, sent as repeated
                ``groupId`` parameters.
            group_names (Optional[List[str]]): Group names, sent as repeated
                ``groupName`` parameters.
            access_type (Optional[str]): ``site-admin``, ``admin`` or ``user``.
            application_key (Optional[str]): Product the groups belong to,
                e.g. ``jira-software``.
        """
        spec = self._bulk_get_groups_spec(
            start_at=start_at,
            max_results=max_results,
            group_ids=group_ids,
            group_names=group_names,
            access_type=access_type,
            application_key=application_key,
        )
        return self.execute(spec, **options)

    async def bulk_get_groups_async(
        self,
        *,
        start_at: Optional[int] = None,
        max_results: Optional[int] = None,
        group_ids: Optional[List[str]] = None,
        group_names: Optional[List[str]] = None,
        access_type: Optional[str] = None,
        application_key: Optional[str] = None,
        **options: Unpack[RequestOptions],
    ) -> JiraResult[PageBean[GroupDetails]]:
        spec = self._bulk_get_groups_spec(
            start_at=start_at,
            max_results=max_results,
            group_ids=group_ids,
            group_names=group_names,
            access_type=access_type,
            application_key=application_key,
        )
        return await self.execute_async(spec, **options)

    def create_group(
        self, name: str, **options: Unpack[RequestOptions]
    ) -> JiraResult[Group]:
        """Create a group."""
        return self.execute(self._create_group_spec(name), **options)

    async def create_group_async(
        self, name: str, **options: Unpack[RequestOptions]
    ) -> JiraResult[Group]:
        return await self.execute_async(self._create_group_spec(name), **options)

    def find_groups(
        self,
        *,
        query: Optional[str] = None,
        exclude: Optional[List[str]] = None,
        exclude_ids: Optional[List[str]] = None,
        max_results: Optional[int] = None,
        case_insensitive: Optional[bool] = None,
        account_id: Optional[str] = None,
        **options: Unpack[RequestOptions],
    ) -> JiraResult[FoundGroups]:
        """Find groups whose names contain ``query``, for group pickers."""
        spec = self._find_groups_spec(
            query=query,
            exclude=exclude,
            exclude_ids=exclude_ids,
            max_results=max_results,
            case_insensitive=case_insensitive,
            account_id=account_id,
        )
        return self.execute(spec, **options)

    async def find_groups_async(
        self,
        *,
        query: Optional[str] = None,
        exclude: Optional[List[str]] = None,
        exclude_ids: Optional[List[str]] = None,
        max_results: Optional[int] = None,
        case_insensitive: Optional[bool] = None,
        account_id: Optional[str] = None,
        **options: Unpack[RequestOptions],
    ) -> JiraResult[FoundGroups]:
        spec = self._find_groups_spec(
            query=query,
            exclude=exclude,
            exclude_ids=exclude_ids,
            max_results=max_results,
            case_insensitive=case_insensitive,
            account_id=account_id,
        )
        return await self.execute_async(spec, **options)

    def get_users_from_group(
        self,
        *,
        group_id: Optional[str] = None,
        group_name: Optional[str] = None,
        include_inactive_users: Optional[bool] = None,
        start_at: Optional[int] = None,
        max_results: Optional[int] = None,
        **options: Unpack[RequestOptions],
    ) -> JiraResult[PageBean[UserDetails]]:
        """Return a page of the members of a group."""
        spec = self._get_users_from_group_spec(
            group_id=group_id,
            group_name=group_name,
            include_inactive_users=include_inactive_users,
            start_at=start_at,
            max_results=max_results,
        )
        return self.execute(spec, **options)

    async def get_users_from_group_async(
        self,
        *,
        group_id: Optional[str] = None,
        group_name: Optional[str] = None,
        include_inactive_users: Optional[bool] = None,
        start_at: Optional[int] = None,
        max_results: Optional[int] = None,
        **options: Unpack[RequestOptions],
    ) -> JiraResult[PageBean[UserDetails]]:
        spec = self._get_users_from_group_spec(
            group_id=group_id,
            group_name=group_name,
            include_inactive_users=include_inactive_users,
            start_at=start_at,
            max_results=max_results,
        )
        return await self.execute_async(spec, **options)

    def remove_group(
        self,
        *,
        group_id: Optional[str] = None,
        group_name: Optional[str] = None,
        swap_group_id: Optional[str] = None,
        **options: Unpack[RequestOptions],
    ) -> JiraResult[None]:
        """Delete a group.

        Args:
            group_id (Optional[str]): The ID of the group.
            group_name (Optional[str]): The name of the group, if no ID is given.
            swap_group_id (Optional[str]): Group that takes over the restrictions
                (comments, worklogs) of the deleted group.
        """
        spec = self._remove_group_spec(
            group_id=group_id, group_name=group_name, swap_group_id=swap_group_id
        )
        return self.execute(spec, **options)

    async def remove_group_async(
        self,
        *,
        group_id: Optional[str] = None,
        group_name: Optional[str] = None,
        swap_group_id: Optional[str] = None,
        **options: Unpack[RequestOptions],
    ) -> JiraResult[None]:
        spec = self._remove_group_spec(
            group_id=group_id, group_name=group_name, swap_group_id=swap_group_id
        )
        return await self.execute_async(spec, **options)

    def remove_user_from_group(
        self,
        account_id: str,
        *,
        group_id: Optional[str] = None,
        group_name: Optional[str] = None,
        **options: Unpack[RequestOptions],
    ) -> JiraResult[None]:
        """Remove a user from a group."""
        spec = self._remove_user_from_group_spec(
            account_id, group_id=group_id, group_name=group_name
        )
        return self.execute(spec, **options)

    async def remove_user_from_group_async(
        self,
        account_id: str,
        *,
        group_id: Optional[str] = None,
        group_name: Optional[str] = None,
        **options: Unpack[RequestOptions],
    ) -> JiraResult[None]:
        spec = self._remove_user_from_group_spec(
            account_id, group_id=group_id, group_name=group_name
        )
        return await self.execute_async(spec, **options)

    def _add_user_to_group_spec(
        self, account_id: str, *, group_id: Optional[str], group_name: Optional[str]
    ) -> RequestSpec:
        return RequestSpec(
            method="POST",
            endpoint=Endpoint(f"{PLATFORM_API}/group/user"),
            params={"groupId": group_id, "groupname": group_name},
            json={"accountId": account_id},
            expectations=expect_json(Group),
        )

    def _bulk_get_groups_spec(
        self,
        *,
        start_at: Optional[int],
        max_results: Optional[int],
        group_ids: Optional[List[str]],
        group_names: Optional[List[str]],
        access_type: Optional[str],
        application_key: Optional[str],
    ) -> RequestSpec:
        return RequestSpec(
            method="GET",
            endpoint=Endpoint(f"{PLATFORM_API}/group/bulk"),
            params={
                "startAt": start_at,
                "maxResults": max_results,
                "groupId": group_ids,
                "groupName": group_names,
                "accessType": access_type,
                "applicationKey": application_key,
            },
            expectations=expect_json(PageBean[GroupDetails], statuses=(200,)),
        )

    def _create_group_spec(self, name: str) -> RequestSpec:
        return RequestSpec(
            method="POST",
            endpoint=Endpoint(f"{PLATFORM_API}/group"),
            json={"name": name},
            expectations=expect_json(Group),
        )

    def _find_groups_spec(
        self,
        *,
        query: Optional[str],
        exclude: Optional[List[str]],
        exclude_ids: Optional[List[str]],
        max_results: Optional[int],
        case_insensitive: Optional[bool],
        account_id: Optional[str],
    ) -> RequestSpec:
        params: Dict[str, Any] = {
            "query": query,
            "exclude": exclude,
            "excludeId": exclude_ids,
            "maxResults": max_results,
            "caseInsensitive": case_insensitive,
            "accountId": account_id,
        }
        return RequestSpec(
            method="GET",
            endpoint=Endpoint(f"{PLATFORM_API}/groups/picker"),
            params=params,
            expectations=expect_json(FoundGroups, statuses=(200,)),
        )

    def _get_users_from_group_spec(
        self,
        *,
        group_id: Optional[str],
        group_name: Optional[str],
        include_inactive_users: Optional[bool],
        start_at: Optional[int],
        max_results: Optional[int],
    ) -> RequestSpec:
        return RequestSpec(
            method="GET",
            endpoint=Endpoint(f"{PLATFORM_API}/group/member"),
            params={
                "groupname": group_name,
                "groupId": group_id,
                "includeInactiveUsers": include_inactive_users,
                "startAt": start_at,
                "maxResults": max_results,
            },
            expectations=expect_json(PageBean[UserDetails], statuses=(200,)),
        )

    def _remove_group_spec(
        self,
        *,
        group_id: Optional[str],
        group_name: Optional[str],
        swap_group_id: Optional[str],
    ) -> RequestSpec:
        return RequestSpec(
            method="DELETE",
            endpoint=Endpoint(f"{PLATFORM_API}/group"),
            params={
                "groupId": group_id,
                "groupname": group_name,
                "swapGroupId": swap_group_id,
            },
            expectations=expect_no_content(),
        )

    def _remove_user_from_group_spec(
        self, account_id: str, *, group_id: Optional[str], group_name: Optional[str]
    ) -> RequestSpec:
        return RequestSpec(
            method="DELETE",
            endpoint=Endpoint(f"{PLATFORM_API}/group/user"),
            params={
                "groupId": group_id,
                "groupname": group_name,
                "accountId": account_id,
            },
            expectations=expect_no_content(),
        )
