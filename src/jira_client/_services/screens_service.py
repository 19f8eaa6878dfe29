from typing import Any, Dict, List, Optional, Unpack

from .._config import Config
from .._utils import Endpoint, RequestSpec, expect_json, expect_no_content
from .._utils.constants import PLATFORM_API
from ..models import PageBean, Screen, ScreenableField, ScreenWithTab
from ..models.results import JiraResult
from ._base_service import BaseService, RequestOptions


class ScreensService(BaseService):
    """Service for screens, the layouts of fields shown when an issue is
    created, viewed or transitioned."""

    def __init__(self, config: Config) -> None:
        super().__init__(config=config)

    def add_field_to_default_screen(
        self, field_id: str, **options: Unpack[RequestOptions]
    ) -> JiraResult[Any]:
        """Add a field to the default tab of the default screen.

        The response body is returned as decoded JSON without a model.
        """
        return self.execute(self._add_field_to_default_screen_spec(field_id), **options)

    async def add_field_to_default_screen_async(
        self, field_id: str, **options: Unpack[RequestOptions]
    ) -> JiraResult[Any]:
        return await self.execute_async(
            self._add_field_to_default_screen_spec(field_id), **options
        )

    def create_screen(
        self,
        name: str,
        *,
        description: Optional[str] = None,
        **options: Unpack[RequestOptions],
    ) -> JiraResult[Screen]:
        """Create a screen with a default field tab.

        Args:
            name (str): The name of the screen. Must be unique.
            description (Optional[str]): The description of the screen.

        Returns:
            JiraResult[Screen]: The created screen.
        """
        spec = self._create_screen_spec(name, description=description)
        return self.execute(spec, **options)

    async def create_screen_async(
        self,
        name: str,
        *,
        description: Optional[str] = None,
        **options: Unpack[RequestOptions],
    ) -> JiraResult[Screen]:
        spec = self._create_screen_spec(name, description=description)
        return await self.execute_async(spec, **options)

    def delete_screen(
        self, screen_id: int, **options: Unpack[RequestOptions]
    ) -> JiraResult[None]:
        """Delete a screen that is not used in any screen scheme or workflow."""
        return self.execute(self._delete_screen_spec(screen_id), **options)

    async def delete_screen_async(
        self, screen_id: int, **options: Unpack[RequestOptions]
    ) -> JiraResult[None]:
        return await self.execute_async(self._delete_screen_spec(screen_id), **options)

    def get_available_screen_fields(
        self, screen_id: int, **options: Unpack[RequestOptions]
    ) -> JiraResult[List[ScreenableField]]:
        """List the fields that can be added to a screen's tabs."""
        return self.execute(self._get_available_screen_fields_spec(screen_id), **options)

    async def get_available_screen_fields_async(
        self, screen_id: int, **options: Unpack[RequestOptions]
    ) -> JiraResult[List[ScreenableField]]:
        return await self.execute_async(
            self._get_available_screen_fields_spec(screen_id), **options
        )

    def get_screens(
        self,
        *,
        start_at: Optional[int] = None,
        max_results: Optional[int] = None,
        ids: Optional[List[int]] = None,
        query_string: Optional[str] = None,
        scope: Optional[List[str]] = None,
        order_by: Optional[str] = None,
        **options: Unpack[RequestOptions],
    ) -> JiraResult[PageBean[Screen]]:
        """Return a page of screens.

        Args:
            start_at (Optional[int]): Index of the first item to return.
            max_results (Optional[int]): Maximum number of items per page.
            ids (Optional[List[int]]): Only return these screens.
            query_string (Optional[str]): Case-insensitive partial name match.
            scope (Optional[List[str]]): ``GLOBAL``, ``TEMPLATE`` or ``PROJECT``.
            order_by (Optional[str]): ``id`` or ``name``, optionally prefixed
                with ``-`` or ``+``.
        """
        spec = self._get_screens_spec(
            start_at=start_at,
            max_results=max_results,
            ids=ids,
            query_string=query_string,
            scope=scope,
            order_by=order_by,
        )
        return self.execute(spec, **options)

    async def get_screens_async(
        self,
        *,
        start_at: Optional[int] = None,
        max_results: Optional[int] = None,
        ids: Optional[List[int]] = None,
        query_string: Optional[str] = None,
        scope: Optional[List[str]] = None,
        order_by: Optional[str] = None,
        **options: Unpack[RequestOptions],
    ) -> JiraResult[PageBean[Screen]]:
        spec = self._get_screens_spec(
            start_at=start_at,
            max_results=max_results,
            ids=ids,
            query_string=query_string,
            scope=scope,
            order_by=order_by,
        )
        return await self.execute_async(spec, **options)

    def get_screens_for_field(
        self,
        field_id: str,
        *,
        start_at: Optional[int] = None,
        max_results: Optional[int] = None,
        expand: Optional[str] = None,
        **options: Unpack[RequestOptions],
    ) -> JiraResult[PageBean[ScreenWithTab]]:
        """Return a page of the screens a field is used in."""
        spec = self._get_screens_for_field_spec(
            field_id, start_at=start_at, max_results=max_results, expand=expand
        )
        return self.execute(spec, **options)

    async def get_screens_for_field_async(
        self,
        field_id: str,
        *,
        start_at: Optional[int] = None,
        max_results: Optional[int] = None,
        expand: Optional[str] = None,
        **options: Unpack[RequestOptions],
    ) -> JiraResult[PageBean[ScreenWithTab]]:
        spec = self._get_screens_for_field_spec(
            field_id, start_at=start_at, max_results=max_results, expand=expand
        )
        return await self.execute_async(spec, **options)

    def update_screen(
        self,
        screen_id: int,
        *,
        name: Optional[str] = None,
        description: Optional[str] = None,
        **options: Unpack[RequestOptions],
    ) -> JiraResult[Screen]:
        spec = self._update_screen_spec(screen_id, name=name, description=description)
        return self.execute(spec, **options)

    async def update_screen_async(
        self,
        screen_id: int,
        *,
        name: Optional[str] = None,
        description: Optional[str] = None,
        **options: Unpack[RequestOptions],
    ) -> JiraResult[Screen]:
        spec = self._update_screen_spec(screen_id, name=name, description=description)
        return await self.execute_async(spec, **options)

    def _add_field_to_default_screen_spec(self, field_id: str) -> RequestSpec:
        return RequestSpec(
            method="POST",
            endpoint=Endpoint(f"{PLATFORM_API}/screens/addToDefault/{{fieldId}}"),
            path_params={"fieldId": field_id},
            expectations=expect_json(),
        )

    def _create_screen_spec(
        self, name: str, *, description: Optional[str]
    ) -> RequestSpec:
        return RequestSpec(
            method="POST",
            endpoint=Endpoint(f"{PLATFORM_API}/screens"),
            json=_screen_details(name=name, description=description),
            expectations=expect_json(Screen),
        )

    def _delete_screen_spec(self, screen_id: int) -> RequestSpec:
        return RequestSpec(
            method="DELETE",
            endpoint=Endpoint(f"{PLATFORM_API}/screens/{{screenId}}"),
            path_params={"screenId": screen_id},
            expectations=expect_no_content(),
        )

    def _get_available_screen_fields_spec(self, screen_id: int) -> RequestSpec:
        return RequestSpec(
            method="GET",
            endpoint=Endpoint(f"{PLATFORM_API}/screens/{{screenId}}/availableFields"),
            path_params={"screenId": screen_id},
            expectations=expect_json(List[ScreenableField], statuses=(200,)),
        )

    def _get_screens_spec(
        self,
        *,
        start_at: Optional[int],
        max_results: Optional[int],
        ids: Optional[List[int]],
        query_string: Optional[str],
        scope: Optional[List[str]],
        order_by: Optional[str],
    ) -> RequestSpec:
        return RequestSpec(
            method="GET",
            endpoint=Endpoint(f"{PLATFORM_API}/screens"),
            params={
                "startAt": start_at,
                "maxResults": max_results,
                "id": ids,
                "queryString": query_string,
                "scope": scope,
                "orderBy": order_by,
            },
            expectations=expect_json(PageBean[Screen], statuses=(200,)),
        )

    def _get_screens_for_field_spec(
        self,
        field_id: str,
        *,
        start_at: Optional[int],
        max_results: Optional[int],
        expand: Optional[str],
    ) -> RequestSpec:
        return RequestSpec(
            method="GET",
            endpoint=Endpoint(f"{PLATFORM_API}/field/{{fieldId}}/screens"),
            path_params={"fieldId": field_id},
            params={"startAt": start_at, "maxResults": max_results, "expand": expand},
            expectations=expect_json(PageBean[ScreenWithTab], statuses=(200,)),
        )

    def _update_screen_spec(
        self, screen_id: int, *, name: Optional[str], description: Optional[str]
    ) -> RequestSpec:
        return RequestSpec(
            method="PUT",
            endpoint=Endpoint(f"{PLATFORM_API}/screens/{{screenId}}"),
            path_params={"screenId": screen_id},
            json=_screen_details(name=name, description=description),
            expectations=expect_json(Screen, statuses=(200,)),
        )


def _screen_details(
    *, name: Optional[str], description: Optional[str]
) -> Dict[str, Any]:
    body: Dict[str, Any] = {}
    if name is not None:
        body["name"] = name
    if description is not None:
        body["description"] = description
    return body
