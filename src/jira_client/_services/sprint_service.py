import json
from typing import Any, Dict, List, Optional, Unpack

from .._config import Config
from .._utils import Endpoint, RequestSpec, comma_separated, expect_json, expect_no_content
from .._utils.constants import AGILE_API
from ..models import EntityProperty, PropertyKeys, SearchResults, Sprint
from ..models.results import JiraResult
from ._base_service import BaseService, RequestOptions

_SPRINT = f"{AGILE_API}/sprint/{{sprintId}}"


class SprintService(BaseService):
    """Service for Jira Software sprints (agile API).

    Sprint dates are ISO 8601 strings, e.g. ``"2015-04-11T15:22:00.000+10:00"``.
    """

    def __init__(self, config: Config) -> None:
        super().__init__(config=config)

    def create_sprint(
        self,
        name: str,
        origin_board_id: int,
        *,
        start_date: Optional[str] = None,
        end_date: Optional[str] = None,
        goal: Optional[str] = None,
        **options: Unpack[RequestOptions],
    ) -> JiraResult[Sprint]:
        """Create a future sprint on a board.

        Args:
            name (str): The name of the sprint.
            origin_board_id (int): The board the sprint is created on.
            start_date (Optional[str]): Planned start, ISO 8601.
            end_date (Optional[str]): Planned end, ISO 8601.
            goal (Optional[str]): The sprint goal.

        Returns:
            JiraResult[Sprint]: The created sprint.

        Examples:
            ```python
            from jira_client import JiraClient

            client = JiraClient()

            sprint = client.sprints.create_sprint("Sprint 1", 5).unwrap()
            print(sprint.id, sprint.state)
            ```
        """
        spec = self._create_sprint_spec(
            name,
            origin_board_id,
            start_date=start_date,
            end_date=end_date,
            goal=goal,
        )
        return self.execute(spec, **options)

    async def create_sprint_async(
        self,
        name: str,
        origin_board_id: int,
        *,
        start_date: Optional[str] = None,
        end_date: Optional[str] = None,
        goal: Optional[str] = None,
        **options: Unpack[RequestOptions],
    ) -> JiraResult[Sprint]:
        spec = self._create_sprint_spec(
            name,
            origin_board_id,
            start_date=start_date,
            end_date=end_date,
            goal=goal,
        )
        return await self.execute_async(spec, **options)

    def get_sprint(
        self, sprint_id: int, **options: Unpack[RequestOptions]
    ) -> JiraResult[Sprint]:
        return self.execute(self._get_sprint_spec(sprint_id), **options)

    async def get_sprint_async(
        self, sprint_id: int, **options: Unpack[RequestOptions]
    ) -> JiraResult[Sprint]:
        return await self.execute_async(self._get_sprint_spec(sprint_id), **options)

    def update_sprint(
        self,
        sprint_id: int,
        sprint: Dict[str, Any],
        **options: Unpack[RequestOptions],
    ) -> JiraResult[Sprint]:
        """Replace a sprint. Fields missing from ``sprint`` are cleared.

        Args:
            sprint_id (int): The ID of the sprint.
            sprint (Dict[str, Any]): The full sprint, in Jira's camelCase form.
        """
        return self.execute(self._update_sprint_spec(sprint_id, sprint), **options)

    async def update_sprint_async(
        self,
        sprint_id: int,
        sprint: Dict[str, Any],
        **options: Unpack[RequestOptions],
    ) -> JiraResult[Sprint]:
        return await self.execute_async(
            self._update_sprint_spec(sprint_id, sprint), **options
        )

    def partially_update_sprint(
        self,
        sprint_id: int,
        changes: Dict[str, Any],
        **options: Unpack[RequestOptions],
    ) -> JiraResult[Sprint]:
        """Update only the given sprint fields.

        Setting ``state`` to ``"active"`` starts the sprint and ``"closed"``
        completes it.
        """
        spec = self._partially_update_sprint_spec(sprint_id, changes)
        return self.execute(spec, **options)

    async def partially_update_sprint_async(
        self,
        sprint_id: int,
        changes: Dict[str, Any],
        **options: Unpack[RequestOptions],
    ) -> JiraResult[Sprint]:
        spec = self._partially_update_sprint_spec(sprint_id, changes)
        return await self.execute_async(spec, **options)

    def delete_sprint(
        self, sprint_id: int, **options: Unpack[RequestOptions]
    ) -> JiraResult[None]:
        """Delete a sprint. Its open issues move to the backlog."""
        return self.execute(self._delete_sprint_spec(sprint_id), **options)

    async def delete_sprint_async(
        self, sprint_id: int, **options: Unpack[RequestOptions]
    ) -> JiraResult[None]:
        return await self.execute_async(self._delete_sprint_spec(sprint_id), **options)

    def get_issues_for_sprint(
        self,
        sprint_id: int,
        *,
        start_at: Optional[int] = None,
        max_results: Optional[int] = None,
        jql: Optional[str] = None,
        validate_query: Optional[bool] = None,
        fields: Optional[List[str]] = None,
        expand: Optional[str] = None,
        **options: Unpack[RequestOptions],
    ) -> JiraResult[SearchResults]:
        """Return a page of the issues in a sprint.

        Args:
            sprint_id (int): The ID of the sprint.
            start_at (Optional[int]): Index of the first issue to return.
            max_results (Optional[int]): Maximum number of issues per page.
            jql (Optional[str]): Additional JQL filter.
            validate_query (Optional[bool]): Whether Jira validates ``jql``.
            fields (Optional[List[str]]): Fields to return, sent comma separated.
            expand (Optional[str]): Entities to expand.
        """
        spec = self._get_issues_for_sprint_spec(
            sprint_id,
            start_at=start_at,
            max_results=max_results,
            jql=jql,
            validate_query=validate_query,
            fields=fields,
            expand=expand,
        )
        return self.execute(spec, **options)

    async def get_issues_for_sprint_async(
        self,
        sprint_id: int,
        *,
        start_at: Optional[int] = None,
        max_results: Optional[int] = None,
        jql: Optional[str] = None,
        validate_query: Optional[bool] = None,
        fields: Optional[List[str]] = None,
        expand: Optional[str] = None,
        **options: Unpack[RequestOptions],
    ) -> JiraResult[SearchResults]:
        spec = self._get_issues_for_sprint_spec(
            sprint_id,
            start_at=start_at,
            max_results=max_results,
            jql=jql,
            validate_query=validate_query,
            fields=fields,
            expand=expand,
        )
        return await self.execute_async(spec, **options)

    def move_issues_to_sprint_and_rank(
        self,
        sprint_id: int,
        issues: List[str],
        *,
        rank_before_issue: Optional[str] = None,
        rank_after_issue: Optional[str] = None,
        rank_custom_field_id: Optional[int] = None,
        **options: Unpack[RequestOptions],
    ) -> JiraResult[None]:
        """Move up to 50 issues into a sprint, optionally ranking them."""
        spec = self._move_issues_to_sprint_and_rank_spec(
            sprint_id,
            issues,
            rank_before_issue=rank_before_issue,
            rank_after_issue=rank_after_issue,
            rank_custom_field_id=rank_custom_field_id,
        )
        return self.execute(spec, **options)

    async def move_issues_to_sprint_and_rank_async(
        self,
        sprint_id: int,
        issues: List[str],
        *,
        rank_before_issue: Optional[str] = None,
        rank_after_issue: Optional[str] = None,
        rank_custom_field_id: Optional[int] = None,
        **options: Unpack[RequestOptions],
    ) -> JiraResult[None]:
        spec = self._move_issues_to_sprint_and_rank_spec(
            sprint_id,
            issues,
            rank_before_issue=rank_before_issue,
            rank_after_issue=rank_after_issue,
            rank_custom_field_id=rank_custom_field_id,
        )
        return await self.execute_async(spec, **options)

    def swap_sprint(
        self,
        sprint_id: int,
        sprint_to_swap_with: int,
        **options: Unpack[RequestOptions],
    ) -> JiraResult[None]:
        """Swap the position of two future sprints."""
        spec = self._swap_sprint_spec(sprint_id, sprint_to_swap_with)
        return self.execute(spec, **options)

    async def swap_sprint_async(
        self,
        sprint_id: int,
        sprint_to_swap_with: int,
        **options: Unpack[RequestOptions],
    ) -> JiraResult[None]:
        spec = self._swap_sprint_spec(sprint_id, sprint_to_swap_with)
        return await self.execute_async(spec, **options)

    def get_properties_keys(
        self, sprint_id: int, **options: Unpack[RequestOptions]
    ) -> JiraResult[PropertyKeys]:
        return self.execute(self._get_properties_keys_spec(sprint_id), **options)

    async def get_properties_keys_async(
        self, sprint_id: int, **options: Unpack[RequestOptions]
    ) -> JiraResult[PropertyKeys]:
        return await self.execute_async(
            self._get_properties_keys_spec(sprint_id), **options
        )

    def get_property(
        self, sprint_id: int, property_key: str, **options: Unpack[RequestOptions]
    ) -> JiraResult[EntityProperty]:
        return self.execute(self._get_property_spec(sprint_id, property_key), **options)

    async def get_property_async(
        self, sprint_id: int, property_key: str, **options: Unpack[RequestOptions]
    ) -> JiraResult[EntityProperty]:
        return await self.execute_async(
            self._get_property_spec(sprint_id, property_key), **options
        )

    def set_property(
        self,
        sprint_id: int,
        property_key: str,
        value: Any,
        **options: Unpack[RequestOptions],
    ) -> JiraResult[None]:
        """Set a sprint property. ``value`` must be JSON serializable."""
        spec = self._set_property_spec(sprint_id, property_key, value)
        return self.execute(spec, **options)

    async def set_property_async(
        self,
        sprint_id: int,
        property_key: str,
        value: Any,
        **options: Unpack[RequestOptions],
    ) -> JiraResult[None]:
        spec = self._set_property_spec(sprint_id, property_key, value)
        return await self.execute_async(spec, **options)

    def delete_property(
        self, sprint_id: int, property_key: str, **options: Unpack[RequestOptions]
    ) -> JiraResult[None]:
        return self.execute(
            self._delete_property_spec(sprint_id, property_key), **options
        )

    async def delete_property_async(
        self, sprint_id: int, property_key: str, **options: Unpack[RequestOptions]
    ) -> JiraResult[None]:
        return await self.execute_async(
            self._delete_property_spec(sprint_id, property_key), **options
        )

    def _create_sprint_spec(
        self,
        name: str,
        origin_board_id: int,
        *,
        start_date: Optional[str],
        end_date: Optional[str],
        goal: Optional[str],
    ) -> RequestSpec:
        body: Dict[str, Any] = {"name": name, "originBoardId": origin_board_id}
        if start_date is not None:
            body["startDate"] = start_date
        if end_date is not None:
            body["endDate"] = end_date
        if goal is not None:
            body["goal"] = goal
        return RequestSpec(
            method="POST",
            endpoint=Endpoint(f"{AGILE_API}/sprint"),
            json=body,
            expectations=expect_json(Sprint),
        )

    def _get_sprint_spec(self, sprint_id: int) -> RequestSpec:
        return RequestSpec(
            method="GET",
            endpoint=Endpoint(_SPRINT),
            path_params={"sprintId": sprint_id},
            expectations=expect_json(Sprint, statuses=(200,)),
        )

    def _update_sprint_spec(self, sprint_id: int, sprint: Dict[str, Any]) -> RequestSpec:
        return RequestSpec(
            method="PUT",
            endpoint=Endpoint(_SPRINT),
            path_params={"sprintId": sprint_id},
            json=sprint,
            expectations=expect_json(Sprint, statuses=(200,)),
        )

    def _partially_update_sprint_spec(
        self, sprint_id: int, changes: Dict[str, Any]
    ) -> RequestSpec:
        return RequestSpec(
            method="POST",
            endpoint=Endpoint(_SPRINT),
            path_params={"sprintId": sprint_id},
            json=changes,
            expectations=expect_json(Sprint, statuses=(200,)),
        )

    def _delete_sprint_spec(self, sprint_id: int) -> RequestSpec:
        return RequestSpec(
            method="DELETE",
            endpoint=Endpoint(_SPRINT),
            path_params={"sprintId": sprint_id},
            expectations=expect_no_content(),
        )

    def _get_issues_for_sprint_spec(
        self,
        sprint_id: int,
        *,
        start_at: Optional[int],
        max_results: Optional[int],
        jql: Optional[str],
        validate_query: Optional[bool],
        fields: Optional[List[str]],
        expand: Optional[str],
    ) -> RequestSpec:
        return RequestSpec(
            method="GET",
            endpoint=Endpoint(f"{_SPRINT}/issue"),
            path_params={"sprintId": sprint_id},
            params={
                "startAt": start_at,
                "maxResults": max_results,
                "jql": jql,
                "validateQuery": validate_query,
                "fields": comma_separated(fields),
                "expand": expand,
            },
            expectations=expect_json(SearchResults, statuses=(200,)),
        )

    def _move_issues_to_sprint_and_rank_spec(
        self,
        sprint_id: int,
        issues: List[str],
        *,
        rank_before_issue: Optional[str],
        rank_after_issue: Optional[str],
        rank_custom_field_id: Optional[int],
    ) -> RequestSpec:
        body: Dict[str, Any] = {"issues": issues}
        if rank_before_issue is not None:
            body["rankBeforeIssue"] = rank_before_issue
        if rank_after_issue is not None:
            body["rankAfterIssue"] = rank_after_issue
        if rank_custom_field_id is not None:
            body["rankCustomFieldId"] = rank_custom_field_id
        return RequestSpec(
            method="POST",
            endpoint=Endpoint(f"{_SPRINT}/issue"),
            path_params={"sprintId": sprint_id},
            json=body,
            expectations=expect_no_content(),
        )

    def _swap_sprint_spec(self, sprint_id: int, sprint_to_swap_with: int) -> RequestSpec:
        return RequestSpec(
            method="POST",
            endpoint=Endpoint(f"{_SPRINT}/swap"),
            path_params={"sprintId": sprint_id},
            json={"sprintToSwapWith": sprint_to_swap_with},
            expectations=expect_no_content(),
        )

    def _get_properties_keys_spec(self, sprint_id: int) -> RequestSpec:
        return RequestSpec(
            method="GET",
            endpoint=Endpoint(f"{_SPRINT}/properties"),
            path_params={"sprintId": sprint_id},
            expectations=expect_json(PropertyKeys, statuses=(200,)),
        )

    def _get_property_spec(self, sprint_id: int, property_key: str) -> RequestSpec:
        return RequestSpec(
            method="GET",
            endpoint=Endpoint(f"{_SPRINT}/properties/{{propertyKey}}"),
            path_params={"sprintId": sprint_id, "propertyKey": property_key},
            expectations=expect_json(EntityProperty, statuses=(200,)),
        )

    def _set_property_spec(
        self, sprint_id: int, property_key: str, value: Any
    ) -> RequestSpec:
        return RequestSpec(
            method="PUT",
            endpoint=Endpoint(f"{_SPRINT}/properties/{{propertyKey}}"),
            path_params={"sprintId": sprint_id, "propertyKey": property_key},
            # serialized here so that a null value still makes a body
            content=json.dumps(value),
            expectations=expect_no_content(),
        )

    def _delete_property_spec(self, sprint_id: int, property_key: str) -> RequestSpec:
        return RequestSpec(
            method="DELETE",
            endpoint=Endpoint(f"{_SPRINT}/properties/{{propertyKey}}"),
            path_params={"sprintId": sprint_id, "propertyKey": property_key},
            expectations=expect_no_content(),
        )
