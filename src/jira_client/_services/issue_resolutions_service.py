from typing import Any, Dict, List, Optional, Unpack

from .._config import Config
from .._utils import Endpoint, RequestSpec, expect_json, expect_no_content
from .._utils.constants import PLATFORM_API
from ..models import PageBean, Resolution, ResolutionId
from ..models.results import JiraResult
from ._base_service import BaseService, RequestOptions


class IssueResolutionsService(BaseService):
    """Service for issue resolution values.

    Use it to obtain the list of resolutions and the details of individual
    resolutions, and (with the *Administer Jira* global permission) to
    create, reorder and delete them.
    """

    def __init__(self, config: Config) -> None:
        super().__init__(config=config)

    def create_resolution(
        self,
        name: str,
        *,
        description: Optional[str] = None,
        **options: Unpack[RequestOptions],
    ) -> JiraResult[ResolutionId]:
        """Create an issue resolution.

        Args:
            name (str): The name of the resolution. Must be unique.
            description (Optional[str]): The description of the resolution.

        Returns:
            JiraResult[ResolutionId]: The ID of the created resolution.

        Examples:
            ```python
            from jira_client import JiraClient

            client = JiraClient()

            result = client.issue_resolutions.create_resolution(
                "Won't fix", description="The problem will not be fixed."
            )
            print(result.unwrap().id)
            ```
        """
        spec = self._create_resolution_spec(name, description=description)
        return self.execute(spec, **options)

    async def create_resolution_async(
        self,
        name: str,
        *,
        description: Optional[str] = None,
        **options: Unpack[RequestOptions],
    ) -> JiraResult[ResolutionId]:
        """Asynchronously create an issue resolution.

        Args:
            name (str): The name of the resolution. Must be unique.
            description (Optional[str]): The description of the resolution.

        Returns:
            JiraResult[ResolutionId]: The ID of the created resolution.
        """
        spec = self._create_resolution_spec(name, description=description)
        return await self.execute_async(spec, **options)

    def delete_resolution(
        self, id: str, replace_with: str, **options: Unpack[RequestOptions]
    ) -> JiraResult[None]:
        """Delete an issue resolution.

        The deletion runs as an asynchronous task in Jira; follow
        ``result.location`` to track it.

        Args:
            id (str): The ID of the resolution to delete.
            replace_with (str): The ID of the resolution that replaces it on
                existing issues.

        Returns:
            JiraResult[None]: An empty success result once the task is queued.
        """
        spec = self._delete_resolution_spec(id, replace_with)
        return self.execute(spec, **options)

    async def delete_resolution_async(
        self, id: str, replace_with: str, **options: Unpack[RequestOptions]
    ) -> JiraResult[None]:
        """Asynchronously delete an issue resolution."""
        spec = self._delete_resolution_spec(id, replace_with)
        return await self.execute_async(spec, **options)

    def get_resolution(
        self, id: str, **options: Unpack[RequestOptions]
    ) -> JiraResult[Resolution]:
        """Retrieve an issue resolution by its ID.

        Args:
            id (str): The ID of the resolution.

        Returns:
            JiraResult[Resolution]: The resolution details.

        Examples:
            ```python
            from jira_client import JiraClient

            client = JiraClient()

            result = client.issue_resolutions.get_resolution("10000")
            if result.success:
                print(result.data.name)
            ```
        """
        return self.execute(self._get_resolution_spec(id), **options)

    async def get_resolution_async(
        self, id: str, **options: Unpack[RequestOptions]
    ) -> JiraResult[Resolution]:
        """Asynchronously retrieve an issue resolution by its ID."""
        return await self.execute_async(self._get_resolution_spec(id), **options)

    def get_resolutions(
        self, **options: Unpack[RequestOptions]
    ) -> JiraResult[List[Resolution]]:
        """List all issue resolutions.

        Deprecated by Jira in favour of :meth:`search_resolutions`.
        """
        return self.execute(self._get_resolutions_spec(), **options)

    async def get_resolutions_async(
        self, **options: Unpack[RequestOptions]
    ) -> JiraResult[List[Resolution]]:
        return await self.execute_async(self._get_resolutions_spec(), **options)

    def move_resolutions(
        self,
        ids: List[str],
        *,
        after: Optional[str] = None,
        position: Optional[str] = None,
        **options: Unpack[RequestOptions],
    ) -> JiraResult[None]:
        """Change the order of issue resolutions.

        Args:
            ids (List[str]): The resolutions to move, in order.
            after (Optional[str]): The ID of the resolution to place them after.
            position (Optional[str]): ``"First"`` or ``"Last"``. Ignored when
                ``after`` is given.
        """
        spec = self._move_resolutions_spec(ids, after=after, position=position)
        return self.execute(spec, **options)

    async def move_resolutions_async(
        self,
        ids: List[str],
        *,
        after: Optional[str] = None,
        position: Optional[str] = None,
        **options: Unpack[RequestOptions],
    ) -> JiraResult[None]:
        spec = self._move_resolutions_spec(ids, after=after, position=position)
        return await self.execute_async(spec, **options)

    def search_resolutions(
        self,
        *,
        start_at: Optional[int] = None,
        max_results: Optional[int] = None,
        ids: Optional[List[str]] = None,
        only_default: Optional[bool] = None,
        **options: Unpack[RequestOptions],
    ) -> JiraResult[PageBean[Resolution]]:
        """Return a page of resolutions.

        Args:
            start_at (Optional[int]): Index of the first item to return.
            max_results (Optional[int]): Maximum number of items per page.
            ids (Optional[List[str]]): Only return these resolutions.
            only_default (Optional[bool]): Only return the default resolution.

        Returns:
            JiraResult[PageBean[Resolution]]: The page of resolutions.
        """
        spec = self._search_resolutions_spec(
            start_at=start_at, max_results=max_results, ids=ids, only_default=only_default
        )
        return self.execute(spec, **options)

    async def search_resolutions_async(
        self,
        *,
        start_at: Optional[int] = None,
        max_results: Optional[int] = None,
        ids: Optional[List[str]] = None,
        only_default: Optional[bool] = None,
        **options: Unpack[RequestOptions],
    ) -> JiraResult[PageBean[Resolution]]:
        spec = self._search_resolutions_spec(
            start_at=start_at, max_results=max_results, ids=ids, only_default=only_default
        )
        return await self.execute_async(spec, **options)

    def set_default_resolution(
        self, id: str, **options: Unpack[RequestOptions]
    ) -> JiraResult[None]:
        """Set the default issue resolution."""
        return self.execute(self._set_default_resolution_spec(id), **options)

    async def set_default_resolution_async(
        self, id: str, **options: Unpack[RequestOptions]
    ) -> JiraResult[None]:
        return await self.execute_async(self._set_default_resolution_spec(id), **options)

    def update_resolution(
        self,
        id: str,
        name: str,
        *,
        description: Optional[str] = None,
        **options: Unpack[RequestOptions],
    ) -> JiraResult[None]:
        """Update an issue resolution.

        Args:
            id (str): The ID of the resolution.
            name (str): The new name. Must be unique.
            description (Optional[str]): The new description.
        """
        spec = self._update_resolution_spec(id, name, description=description)
        return self.execute(spec, **options)

    async def update_resolution_async(
        self,
        id: str,
        name: str,
        *,
        description: Optional[str] = None,
        **options: Unpack[RequestOptions],
    ) -> JiraResult[None]:
        spec = self._update_resolution_spec(id, name, description=description)
        return await self.execute_async(spec, **options)

    def _create_resolution_spec(
        self, name: str, *, description: Optional[str]
    ) -> RequestSpec:
        body: Dict[str, Any] = {"name": name}
        if description is not None:
            body["description"] = description
        return RequestSpec(
            method="POST",
            endpoint=Endpoint(f"{PLATFORM_API}/resolution"),
            json=body,
            expectations=expect_json(ResolutionId),
        )

    def _delete_resolution_spec(self, id: str, replace_with: str) -> RequestSpec:
        return RequestSpec(
            method="DELETE",
            endpoint=Endpoint(f"{PLATFORM_API}/resolution/{{id}}"),
            path_params={"id": id},
            params={"replaceWith": replace_with},
            # deletion runs as a task; Jira redirects to it with 303
            expectations=expect_no_content(statuses=(204, 303)),
        )

    def _get_resolution_spec(self, id: str) -> RequestSpec:
        return RequestSpec(
            method="GET",
            endpoint=Endpoint(f"{PLATFORM_API}/resolution/{{id}}"),
            path_params={"id": id},
            expectations=expect_json(Resolution, statuses=(200,)),
        )

    def _get_resolutions_spec(self) -> RequestSpec:
        return RequestSpec(
            method="GET",
            endpoint=Endpoint(f"{PLATFORM_API}/resolution"),
            expectations=expect_json(List[Resolution], statuses=(200,)),
        )

    def _move_resolutions_spec(
        self, ids: List[str], *, after: Optional[str], position: Optional[str]
    ) -> RequestSpec:
        body: Dict[str, Any] = {"ids": ids}
        if after is not None:
            body["after"] = after
        if position is not None:
            body["position"] = position
        return RequestSpec(
            method="PUT",
            endpoint=Endpoint(f"{PLATFORM_API}/resolution/move"),
            json=body,
            expectations=expect_no_content(),
        )

    def _search_resolutions_spec(
        self,
        *,
        start_at: Optional[int],
        max_results: Optional[int],
        ids: Optional[List[str]],
        only_default: Optional[bool],
    ) -> RequestSpec:
        return RequestSpec(
            method="GET",
            endpoint=Endpoint(f"{PLATFORM_API}/resolution/search"),
            params={
                "startAt": start_at,
                "maxResults": max_results,
                "id": ids,
                "onlyDefault": only_default,
            },
            expectations=expect_json(PageBean[Resolution], statuses=(200,)),
        )

    def _set_default_resolution_spec(self, id: str) -> RequestSpec:
        return RequestSpec(
            method="PUT",
            endpoint=Endpoint(f"{PLATFORM_API}/resolution/default"),
            json={"id": id},
            expectations=expect_no_content(),
        )

    def _update_resolution_spec(
        self, id: str, name: str, *, description: Optional[str]
    ) -> RequestSpec:
        body: Dict[str, Any] = {"name": name}
        if description is not None:
            body["description"] = description
        return RequestSpec(
            method="PUT",
            endpoint=Endpoint(f"{PLATFORM_API}/resolution/{{id}}"),
            path_params={"id": id},
            json=body,
            expectations=expect_no_content(),
        )
