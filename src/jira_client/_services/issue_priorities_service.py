from typing import Any, Dict, List, Optional, Unpack

from .._config import Config
from .._utils import Endpoint, RequestSpec, expect_json, expect_no_content
from .._utils.constants import PLATFORM_API
from ..models import PageBean, Priority, PriorityId
from ..models.results import JiraResult
from ._base_service import BaseService, RequestOptions


class IssuePrioritiesService(BaseService):
    """Service for issue priorities.

    Priorities are ordered; use :meth:`move_priorities` to change the order
    and :meth:`set_default_priority` to choose the one new issues get.
    """

    def __init__(self, config: Config) -> None:
        super().__init__(config=config)

    def create_priority(
        self,
        name: str,
        status_color: str,
        *,
        description: Optional[str] = None,
        icon_url: Optional[str] = None,
        avatar_id: Optional[int] = None,
        **options: Unpack[RequestOptions],
    ) -> JiraResult[PriorityId]:
        """Create an issue priority.

        Args:
            name (str): The name of the priority. Must be unique.
            status_color (str): The status color of the priority in 3-digit or
                6-digit hexadecimal format.
            description (Optional[str]): The description of the priority.
            icon_url (Optional[str]): URL of one of Jira's built-in priority icons.
            avatar_id (Optional[int]): The ID of an avatar to use instead of an icon.

        Returns:
            JiraResult[PriorityId]: The ID of the created priority.
        """
        spec = self._create_priority_spec(
            name,
            status_color,
            description=description,
            icon_url=icon_url,
            avatar_id=avatar_id,
        )
        return self.execute(spec, **options)

    async def create_priority_async(
        self,
        name: str,
        status_color: str,
        *,
        description: Optional[str] = None,
        icon_url: Optional[str] = None,
        avatar_id: Optional[int] = None,
        **options: Unpack[RequestOptions],
    ) -> JiraResult[PriorityId]:
        spec = self._create_priority_spec(
            name,
            status_color,
            description=description,
            icon_url=icon_url,
            avatar_id=avatar_id,
        )
        return await self.execute_async(spec, **options)

    def delete_priority(
        self, id: str, **options: Unpack[RequestOptions]
    ) -> JiraResult[None]:
        """Delete an issue priority.

        Runs as an asynchronous task in Jira; ``result.location`` points at it.
        """
        return self.execute(self._delete_priority_spec(id), **options)

    async def delete_priority_async(
        self, id: str, **options: Unpack[RequestOptions]
    ) -> JiraResult[None]:
        return await self.execute_async(self._delete_priority_spec(id), **options)

    def get_priorities(
        self, **options: Unpack[RequestOptions]
    ) -> JiraResult[List[Priority]]:
        """List all issue priorities. Deprecated by Jira; prefer :meth:`search_priorities`."""
        return self.execute(self._get_priorities_spec(), **options)

    async def get_priorities_async(
        self, **options: Unpack[RequestOptions]
    ) -> JiraResult[List[Priority]]:
        return await self.execute_async(self._get_priorities_spec(), **options)

    def get_priority(
        self, id: str, **options: Unpack[RequestOptions]
    ) -> JiraResult[Priority]:
        """Retrieve an issue priority by its ID."""
        return self.execute(self._get_priority_spec(id), **options)

    async def get_priority_async(
        self, id: str, **options: Unpack[RequestOptions]
    ) -> JiraResult[Priority]:
        return await self.execute_async(self._get_priority_spec(id), **options)

    def move_priorities(
        self,
        ids: List[str],
        *,
        after: Optional[str] = None,
        position: Optional[str] = None,
        **options: Unpack[RequestOptions],
    ) -> JiraResult[None]:
        """Change the order of issue priorities.

        Args:
            ids (List[str]): The priorities to move, in order.
            after (Optional[str]): The ID of the priority to place them after.
            position (Optional[str]): ``"First"`` or ``"Last"``.
        """
        spec = self._move_priorities_spec(ids, after=after, position=position)
        return self.execute(spec, **options)

    async def move_priorities_async(
        self,
        ids: List[str],
        *,
        after: Optional[str] = None,
        position: Optional[str] = None,
        **options: Unpack[RequestOptions],
    ) -> JiraResult[None]:
        spec = self._move_priorities_spec(ids, after=after, position=position)
        return await self.execute_async(spec, **options)

    def search_priorities(
        self,
        *,
        start_at: Optional[int] = None,
        max_results: Optional[int] = None,
        ids: Optional[List[str]] = None,
        project_ids: Optional[List[str]] = None,
        priority_name: Optional[str] = None,
        only_default: Optional[bool] = None,
        expand: Optional[str] = None,
        **options: Unpack[RequestOptions],
    ) -> JiraResult[PageBean[Priority]]:
        """Return a page of priorities.

        Args:
            start_at (Optional[int]): Index of the first item to return.
            max_results (Optional[int]): Maximum number of items per page.
            ids (Optional[List[str]]): Only return these priorities.
            project_ids (Optional[List[str]]): Only return priorities used by
                these projects.
            priority_name (Optional[str]): Case-insensitive partial name match.
            only_default (Optional[bool]): Only return the default priority.
            expand (Optional[str]): ``"schemes"`` to include priority schemes.
        """
        spec = self._search_priorities_spec(
            start_at=start_at,
            max_results=max_results,
            ids=ids,
            project_ids=project_ids,
            priority_name=priority_name,
            only_default=only_default,
            expand=expand,
        )
        return self.execute(spec, **options)

    async def search_priorities_async(
        self,
        *,
        start_at: Optional[int] = None,
        max_results: Optional[int] = None,
        ids: Optional[List[str]] = None,
        project_ids: Optional[List[str]] = None,
        priority_name: Optional[str] = None,
        only_default: Optional[bool] = None,
        expand: Optional[str] = None,
        **options: Unpack[RequestOptions],
    ) -> JiraResult[PageBean[Priority]]:
        spec = self._search_priorities_spec(
            start_at=start_at,
            max_results=max_results,
            ids=ids,
            project_ids=project_ids,
            priority_name=priority_name,
            only_default=only_default,
            expand=expand,
        )
        return await self.execute_async(spec, **options)

    def set_default_priority(
        self, id: Optional[str], **options: Unpack[RequestOptions]
    ) -> JiraResult[None]:
        """Set the default priority. ``None`` clears it."""
        return self.execute(self._set_default_priority_spec(id), **options)

    async def set_default_priority_async(
        self, id: Optional[str], **options: Unpack[RequestOptions]
    ) -> JiraResult[None]:
        return await self.execute_async(self._set_default_priority_spec(id), **options)

    def update_priority(
        self,
        id: str,
        *,
        name: Optional[str] = None,
        status_color: Optional[str] = None,
        description: Optional[str] = None,
        icon_url: Optional[str] = None,
        avatar_id: Optional[int] = None,
        **options: Unpack[RequestOptions],
    ) -> JiraResult[None]:
        """Update an issue priority. Only the given attributes change."""
        spec = self._update_priority_spec(
            id,
            name=name,
            status_color=status_color,
            description=description,
            icon_url=icon_url,
            avatar_id=avatar_id,
        )
        return self.execute(spec, **options)

    async def update_priority_async(
        self,
        id: str,
        *,
        name: Optional[str] = None,
        status_color: Optional[str] = None,
        description: Optional[str] = None,
        icon_url: Optional[str] = None,
        avatar_id: Optional[int] = None,
        **options: Unpack[RequestOptions],
    ) -> JiraResult[None]:
        spec = self._update_priority_spec(
            id,
            name=name,
            status_color=status_color,
            description=description,
            icon_url=icon_url,
            avatar_id=avatar_id,
        )
        return await self.execute_async(spec, **options)

    def _create_priority_spec(
        self,
        name: str,
        status_color: str,
        *,
        description: Optional[str],
        icon_url: Optional[str],
        avatar_id: Optional[int],
    ) -> RequestSpec:
        body = _priority_details(
            name=name,
            status_color=status_color,
            description=description,
            icon_url=icon_url,
            avatar_id=avatar_id,
        )
        return RequestSpec(
            method="POST",
            endpoint=Endpoint(f"{PLATFORM_API}/priority"),
            json=body,
            expectations=expect_json(PriorityId),
        )

    def _delete_priority_spec(self, id: str) -> RequestSpec:
        return RequestSpec(
            method="DELETE",
            endpoint=Endpoint(f"{PLATFORM_API}/priority/{{id}}"),
            path_params={"id": id},
            # deletion runs as a task; Jira redirects to it with 303
            expectations=expect_no_content(statuses=(204, 303)),
        )

    def _get_priorities_spec(self) -> RequestSpec:
        return RequestSpec(
            method="GET",
            endpoint=Endpoint(f"{PLATFORM_API}/priority"),
            expectations=expect_json(List[Priority], statuses=(200,)),
        )

    def _get_priority_spec(self, id: str) -> RequestSpec:
        return RequestSpec(
            method="GET",
            endpoint=Endpoint(f"{PLATFORM_API}/priority/{{id}}"),
            path_params={"id": id},
            expectations=expect_json(Priority, statuses=(200,)),
        )

    def _move_priorities_spec(
        self, ids: List[str], *, after: Optional[str], position: Optional[str]
    ) -> RequestSpec:
        body: Dict[str, Any] = {"ids": ids}
        if after is not None:
            body["after"] = after
        if position is not None:
            body["position"] = position
        return RequestSpec(
            method="PUT",
            endpoint=Endpoint(f"{PLATFORM_API}/priority/move"),
            json=body,
            expectations=expect_no_content(),
        )

    def _search_priorities_spec(
        self,
        *,
        start_at: Optional[int],
        max_results: Optional[int],
        ids: Optional[List[str]],
        project_ids: Optional[List[str]],
        priority_name: Optional[str],
        only_default: Optional[bool],
        expand: Optional[str],
    ) -> RequestSpec:
        return RequestSpec(
            method="GET",
            endpoint=Endpoint(f"{PLATFORM_API}/priority/search"),
            params={
                "startAt": start_at,
                "maxResults": max_results,
                "id": ids,
                "projectId": project_ids,
                "priorityName": priority_name,
                "onlyDefault": only_default,
                "expand": expand,
            },
            expectations=expect_json(PageBean[Priority], statuses=(200,)),
        )

    def _set_default_priority_spec(self, id: Optional[str]) -> RequestSpec:
        return RequestSpec(
            method="PUT",
            endpoint=Endpoint(f"{PLATFORM_API}/priority/default"),
            json={"id": id},
            expectations=expect_no_content(),
        )

    def _update_priority_spec(
        self,
        id: str,
        *,
        name: Optional[str],
        status_color: Optional[str],
        description: Optional[str],
        icon_url: Optional[str],
        avatar_id: Optional[int],
    ) -> RequestSpec:
        body = _priority_details(
            name=name,
            status_color=status_color,
            description=description,
            icon_url=icon_url,
            avatar_id=avatar_id,
        )
        return RequestSpec(
            method="PUT",
            endpoint=Endpoint(f"{PLATFORM_API}/priority/{{id}}"),
            path_params={"id": id},
            json=body,
            expectations=expect_no_content(),
        )


def _priority_details(**fields: Any) -> Dict[str, Any]:
    aliases = {
        "name": "name",
        "status_color": "statusColor",
        "description": "description",
        "icon_url": "iconUrl",
        "avatar_id": "avatarId",
    }
    return {
        aliases[key]: value for key, value in fields.items() if value is not None
    }
