from typing import Any, Dict, List, Optional, Unpack

from .._config import Config
from .._utils import Endpoint, RequestSpec, comma_separated, expect_json
from .._utils.constants import PLATFORM_API
from ..models import (
    BulkEditableFields,
    BulkOperationProgress,
    BulkTransitions,
    SubmittedBulkOperation,
)
from ..models.results import JiraResult
from ._base_service import BaseService, RequestOptions

_BULK_ISSUES = f"{PLATFORM_API}/bulk/issues"


class IssueBulkOperationsService(BaseService):
    """Service for bulk issue operations.

    Every ``submit_*`` call queues a task in Jira and returns its ``task_id``.
    Poll :meth:`get_bulk_operation_progress` until
    ``BulkOperationProgress.is_finished`` is true.

    Examples:
        ```python
        from jira_client import JiraClient

        client = JiraClient()

        task = client.issue_bulk_operations.submit_bulk_watch(["PROJ-1", "PROJ-2"]).unwrap()
        progress = client.issue_bulk_operations.get_bulk_operation_progress(task.task_id)
        ```
    """

    def __init__(self, config: Config) -> None:
        super().__init__(config=config)

    def get_available_transitions(
        self,
        issue_ids_or_keys: List[str],
        *,
        ending_before: Optional[str] = None,
        starting_after: Optional[str] = None,
        **options: Unpack[RequestOptions],
    ) -> JiraResult[BulkTransitions]:
        """List the transitions shared by the given issues, grouped by workflow.

        Args:
            issue_ids_or_keys (List[str]): Up to 1000 issue IDs or keys.
            ending_before (Optional[str]): Cursor for the previous page.
            starting_after (Optional[str]): Cursor for the next page.
        """
        spec = self._get_available_transitions_spec(
            issue_ids_or_keys,
            ending_before=ending_before,
            starting_after=starting_after,
        )
        return self.execute(spec, **options)

    async def get_available_transitions_async(
        self,
        issue_ids_or_keys: List[str],
        *,
        ending_before: Optional[str] = None,
        starting_after: Optional[str] = None,
        **options: Unpack[RequestOptions],
    ) -> JiraResult[BulkTransitions]:
        spec = self._get_available_transitions_spec(
            issue_ids_or_keys,
            ending_before=ending_before,
            starting_after=starting_after,
        )
        return await self.execute_async(spec, **options)

    def get_bulk_editable_fields(
        self,
        issue_ids_or_keys: List[str],
        *,
        search_text: Optional[str] = None,
        ending_before: Optional[str] = None,
        starting_after: Optional[str] = None,
        **options: Unpack[RequestOptions],
    ) -> JiraResult[BulkEditableFields]:
        """List the fields that can be bulk edited on the given issues."""
        spec = self._get_bulk_editable_fields_spec(
            issue_ids_or_keys,
            search_text=search_text,
            ending_before=ending_before,
            starting_after=starting_after,
        )
        return self.execute(spec, **options)

    async def get_bulk_editable_fields_async(
        self,
        issue_ids_or_keys: List[str],
        *,
        search_text: Optional[str] = None,
        ending_before: Optional[str] = None,
        starting_after: Optional[str] = None,
        **options: Unpack[RequestOptions],
    ) -> JiraResult[BulkEditableFields]:
        spec = self._get_bulk_editable_fields_spec(
            issue_ids_or_keys,
            search_text=search_text,
            ending_before=ending_before,
            starting_after=starting_after,
        )
        return await self.execute_async(spec, **options)

    def get_bulk_operation_progress(
        self, task_id: str, **options: Unpack[RequestOptions]
    ) -> JiraResult[BulkOperationProgress]:
        return self.execute(self._get_bulk_operation_progress_spec(task_id), **options)

    async def get_bulk_operation_progress_async(
        self, task_id: str, **options: Unpack[RequestOptions]
    ) -> JiraResult[BulkOperationProgress]:
        return await self.execute_async(
            self._get_bulk_operation_progress_spec(task_id), **options
        )

    def submit_bulk_delete(
        self,
        issue_ids_or_keys: List[str],
        *,
        send_bulk_notification: Optional[bool] = None,
        **options: Unpack[RequestOptions],
    ) -> JiraResult[SubmittedBulkOperation]:
        """Queue the deletion of up to 1000 issues, subtasks included."""
        body = _selection(issue_ids_or_keys, send_bulk_notification)
        return self.execute(self._submit_spec("delete", body), **options)

    async def submit_bulk_delete_async(
        self,
        issue_ids_or_keys: List[str],
        *,
        send_bulk_notification: Optional[bool] = None,
        **options: Unpack[RequestOptions],
    ) -> JiraResult[SubmittedBulkOperation]:
        body = _selection(issue_ids_or_keys, send_bulk_notification)
        return await self.execute_async(self._submit_spec("delete", body), **options)

    def submit_bulk_edit(
        self,
        issue_ids_or_keys: List[str],
        selected_actions: List[str],
        edited_fields_input: Dict[str, Any],
        *,
        send_bulk_notification: Optional[bool] = None,
        **options: Unpack[RequestOptions],
    ) -> JiraResult[SubmittedBulkOperation]:
        """Queue a bulk edit.

        Args:
            issue_ids_or_keys (List[str]): The issues to edit.
            selected_actions (List[str]): IDs of the fields to change, as
                returned by :meth:`get_bulk_editable_fields`.
            edited_fields_input (Dict[str, Any]): The new values, keyed by
                field input type (``labelsFields``, ``priority`` and so on).
            send_bulk_notification (Optional[bool]): Whether to email watchers.
        """
        body = _selection(issue_ids_or_keys, send_bulk_notification)
        body["selectedActions"] = selected_actions
        body["editedFieldsInput"] = edited_fields_input
        return self.execute(self._submit_spec("fields", body), **options)

    async def submit_bulk_edit_async(
        self,
        issue_ids_or_keys: List[str],
        selected_actions: List[str],
        edited_fields_input: Dict[str, Any],
        *,
        send_bulk_notification: Optional[bool] = None,
        **options: Unpack[RequestOptions],
    ) -> JiraResult[SubmittedBulkOperation]:
        body = _selection(issue_ids_or_keys, send_bulk_notification)
        body["selectedActions"] = selected_actions
        body["editedFieldsInput"] = edited_fields_input
        return await self.execute_async(self._submit_spec("fields", body), **options)

    def submit_bulk_move(
        self,
        target_to_sources_mapping: Dict[str, Any],
        *,
        send_bulk_notification: Optional[bool] = None,
        **options: Unpack[RequestOptions],
    ) -> JiraResult[SubmittedBulkOperation]:
        """Queue moving issues to other projects or issue types.

        ``target_to_sources_mapping`` is keyed by ``"<projectId>,<issueTypeId>"``
        (or ``"<projectId>,<issueTypeId>,<parentIdOrKey>"`` for subtasks).
        """
        body = _move_payload(target_to_sources_mapping, send_bulk_notification)
        return self.execute(self._submit_spec("move", body), **options)

    async def submit_bulk_move_async(
        self,
        target_to_sources_mapping: Dict[str, Any],
        *,
        send_bulk_notification: Optional[bool] = None,
        **options: Unpack[RequestOptions],
    ) -> JiraResult[SubmittedBulkOperation]:
        body = _move_payload(target_to_sources_mapping, send_bulk_notification)
        return await self.execute_async(self._submit_spec("move", body), **options)

    def submit_bulk_transition(
        self,
        bulk_transition_inputs: List[Dict[str, Any]],
        *,
        send_bulk_notification: Optional[bool] = None,
        **options: Unpack[RequestOptions],
    ) -> JiraResult[SubmittedBulkOperation]:
        """Queue transitions. Each input pairs ``selectedIssueIdsOrKeys`` with a
        ``transitionId``."""
        body = _transition_payload(bulk_transition_inputs, send_bulk_notification)
        return self.execute(self._submit_spec("transition", body), **options)

    async def submit_bulk_transition_async(
        self,
        bulk_transition_inputs: List[Dict[str, Any]],
        *,
        send_bulk_notification: Optional[bool] = None,
        **options: Unpack[RequestOptions],
    ) -> JiraResult[SubmittedBulkOperation]:
        body = _transition_payload(bulk_transition_inputs, send_bulk_notification)
        return await self.execute_async(
            self._submit_spec("transition", body), **options
        )

    def submit_bulk_watch(
        self, issue_ids_or_keys: List[str], **options: Unpack[RequestOptions]
    ) -> JiraResult[SubmittedBulkOperation]:
        body = _selection(issue_ids_or_keys, None)
        return self.execute(self._submit_spec("watch", body), **options)

    async def submit_bulk_watch_async(
        self, issue_ids_or_keys: List[str], **options: Unpack[RequestOptions]
    ) -> JiraResult[SubmittedBulkOperation]:
        body = _selection(issue_ids_or_keys, None)
        return await self.execute_async(self._submit_spec("watch", body), **options)

    def submit_bulk_unwatch(
        self, issue_ids_or_keys: List[str], **options: Unpack[RequestOptions]
    ) -> JiraResult[SubmittedBulkOperation]:
        body = _selection(issue_ids_or_keys, None)
        return self.execute(self._submit_spec("unwatch", body), **options)

    async def submit_bulk_unwatch_async(
        self, issue_ids_or_keys: List[str], **options: Unpack[RequestOptions]
    ) -> JiraResult[SubmittedBulkOperation]:
        body = _selection(issue_ids_or_keys, None)
        return await self.execute_async(self._submit_spec("unwatch", body), **options)

    def _get_available_transitions_spec(
        self,
        issue_ids_or_keys: List[str],
        *,
        ending_before: Optional[str],
        starting_after: Optional[str],
    ) -> RequestSpec:
        return RequestSpec(
            method="GET",
            endpoint=Endpoint(f"{_BULK_ISSUES}/transition"),
            params={
                "issueIdsOrKeys": comma_separated(issue_ids_or_keys),
                "endingBefore": ending_before,
                "startingAfter": starting_after,
            },
            expectations=expect_json(BulkTransitions, statuses=(200,)),
        )

    def _get_bulk_editable_fields_spec(
        self,
        issue_ids_or_keys: List[str],
        *,
        search_text: Optional[str],
        ending_before: Optional[str],
        starting_after: Optional[str],
    ) -> RequestSpec:
        return RequestSpec(
            method="GET",
            endpoint=Endpoint(f"{_BULK_ISSUES}/fields"),
            params={
                "issueIdsOrKeys": comma_separated(issue_ids_or_keys),
                "searchText": search_text,
                "endingBefore": ending_before,
                "startingAfter": starting_after,
            },
            expectations=expect_json(BulkEditableFields, statuses=(200,)),
        )

    def _get_bulk_operation_progress_spec(self, task_id: str) -> RequestSpec:
        return RequestSpec(
            method="GET",
            endpoint=Endpoint(f"{PLATFORM_API}/bulk/queue/{{taskId}}"),
            path_params={"taskId": task_id},
            expectations=expect_json(BulkOperationProgress, statuses=(200,)),
        )

    def _submit_spec(self, operation: str, body: Dict[str, Any]) -> RequestSpec:
        return RequestSpec(
            method="POST",
            endpoint=Endpoint(f"{_BULK_ISSUES}/{operation}"),
            json=body,
            expectations=expect_json(SubmittedBulkOperation),
        )


def _selection(
    issue_ids_or_keys: List[str], send_bulk_notification: Optional[bool]
) -> Dict[str, Any]:
    body: Dict[str, Any] = {"selectedIssueIdsOrKeys": list(issue_ids_or_keys)}
    if send_bulk_notification is not None:
        body["sendBulkNotification"] = send_bulk_notification
    return body


def _move_payload(
    target_to_sources_mapping: Dict[str, Any], send_bulk_notification: Optional[bool]
) -> Dict[str, Any]:
    body: Dict[str, Any] = {"targetToSourcesMapping": target_to_sources_mapping}
    if send_bulk_notification is not None:
        body["sendBulkNotification"] = send_bulk_notification
    return body


def _transition_payload(
    bulk_transition_inputs: List[Dict[str, Any]],
    send_bulk_notification: Optional[bool],
) -> Dict[str, Any]:
    body: Dict[str, Any] = {"bulkTransitionInputs": bulk_transition_inputs}
    if send_bulk_notification is not None:
        body["sendBulkNotification"] = send_bulk_notification
    return body
