import json

import pytest
from pytest_httpx import HTTPXMock

from jira_client._config import Config
from jira_client._services.issue_bulk_operations_service import (
    IssueBulkOperationsService,
)
from jira_client.models import BulkOperationProgress, SubmittedBulkOperation

TASK = {"taskId": "10641"}


@pytest.fixture
def service(config: Config) -> IssueBulkOperationsService:
    return IssueBulkOperationsService(config=config)


class TestIssueBulkOperationsService:
    def test_get_available_transitions(
        self,
        httpx_mock: HTTPXMock,
        service: IssueBulkOperationsService,
        base_url: str,
    ) -> None:
        httpx_mock.add_response(
            url=f"{base_url}/rest/api/3/bulk/issues/transition?issueIdsOrKeys=EPIC-1%2CTASK-1",
            status_code=200,
            json={
                "availableTransitions": [
                    {"isTransitionsFiltered": False, "issues": ["EPIC-1"], "transitions": []}
                ],
                "startingAfter": "abc",
            },
        )

        result = service.get_available_transitions(["EPIC-1", "TASK-1"])

        transitions = result.unwrap()
        assert transitions.available_transitions[0]["issues"] == ["EPIC-1"]
        assert transitions.starting_after == "abc"

        sent_request = httpx_mock.get_request()
        if sent_request is None:
            raise Exception("No request was sent")
        assert sent_request.url.params["issueIdsOrKeys"] == "EPIC-1,TASK-1"

    def test_get_bulk_editable_fields(
        self,
        httpx_mock: HTTPXMock,
        service: IssueBulkOperationsService,
        base_url: str,
    ) -> None:
        httpx_mock.add_response(
            url=f"{base_url}/rest/api/3/bulk/issues/fields?issueIdsOrKeys=PROJ-1&searchText=label",
            status_code=200,
            json={"fields": [{"id": "labels", "name": "Labels"}]},
        )

        result = service.get_bulk_editable_fields(["PROJ-1"], search_text="label")

        assert result.unwrap().fields[0]["id"] == "labels"

    def test_get_bulk_operation_progress(
        self,
        httpx_mock: HTTPXMock,
        service: IssueBulkOperationsService,
        base_url: str,
    ) -> None:
        httpx_mock.add_response(
            url=f"{base_url}/rest/api/3/bulk/queue/10641",
            status_code=200,
            json={
                "taskId": "10641",
                "status": "COMPLETE",
                "progressPercent": 100,
                "processedAccessibleIssues": [10001, 10002],
                "failedAccessibleIssues": {"10003": ["Issue is locked"]},
                "totalIssueCount": 3,
            },
        )

        result = service.get_bulk_operation_progress("10641")

        progress = result.unwrap()
        assert isinstance(progress, BulkOperationProgress)
        assert progress.is_finished
        assert progress.processed_accessible_issues == [10001, 10002]
        assert progress.failed_accessible_issues == {"10003": ["Issue is locked"]}

    def test_progress_of_running_task(self) -> None:
        progress = BulkOperationProgress.model_validate(
            {"taskId": "1", "status": "RUNNING", "progressPercent": 40}
        )

        assert not progress.is_finished

    class TestSubmit:
        def test_submit_bulk_delete(
            self,
            httpx_mock: HTTPXMock,
            service: IssueBulkOperationsService,
            base_url: str,
        ) -> None:
            httpx_mock.add_response(
                url=f"{base_url}/rest/api/3/bulk/issues/delete",
                method="POST",
                status_code=201,
                json=TASK,
            )

            result = service.submit_bulk_delete(
                ["PROJ-1", "PROJ-2"], send_bulk_notification=False
            )

            assert isinstance(result.data, SubmittedBulkOperation)
            assert result.data.task_id == "10641"
            sent_request = httpx_mock.get_request()
            assert sent_request is not None
            assert json.loads(sent_request.content) == {
                "selectedIssueIdsOrKeys": ["PROJ-1", "PROJ-2"],
                "sendBulkNotification": False,
            }

        def test_submit_bulk_edit(
            self,
            httpx_mock: HTTPXMock,
            service: IssueBulkOperationsService,
            base_url: str,
        ) -> None:
            httpx_mock.add_response(
                url=f"{base_url}/rest/api/3/bulk/issues/fields",
                method="POST",
                status_code=201,
                json=TASK,
            )
            edited = {"labelsFields": [{"fieldId": "labels", "labels": [{"name": "x"}]}]}

            service.submit_bulk_edit(["PROJ-1"], ["labels"], edited)

            sent_request = httpx_mock.get_request()
            assert sent_request is not None
            assert json.loads(sent_request.content) == {
                "selectedIssueIdsOrKeys": ["PROJ-1"],
                "selectedActions": ["labels"],
                "editedFieldsInput": edited,
            }

        def test_submit_bulk_move(
            self,
            httpx_mock: HTTPXMock,
            service: IssueBulkOperationsService,
            base_url: str,
        ) -> None:
            httpx_mock.add_response(
                url=f"{base_url}/rest/api/3/bulk/issues/move",
                method="POST",
                status_code=201,
                json=TASK,
            )
            mapping = {"10000,10001": {"issueIdsOrKeys": ["ISSUE-1"], "inferStatusDefaults": True}}

            service.submit_bulk_move(mapping)

            sent_request = httpx_mock.get_request()
            assert sent_request is not None
            assert json.loads(sent_request.content) == {"targetToSourcesMapping": mapping}

        def test_submit_bulk_transition(
            self,
            httpx_mock: HTTPXMock,
            service: IssueBulkOperationsService,
            base_url: str,
        ) -> None:
            httpx_mock.add_response(
                url=f"{base_url}/rest/api/3/bulk/issues/transition",
                method="POST",
                status_code=201,
                json=TASK,
            )
            inputs = [{"selectedIssueIdsOrKeys": ["10001"], "transitionId": "11"}]

            service.submit_bulk_transition(inputs, send_bulk_notification=True)

            sent_request = httpx_mock.get_request()
            assert sent_request is not None
            assert json.loads(sent_request.content) == {
                "bulkTransitionInputs": inputs,
                "sendBulkNotification": True,
            }

        def test_submit_bulk_watch(
            self,
            httpx_mock: HTTPXMock,
            service: IssueBulkOperationsService,
            base_url: str,
        ) -> None:
            httpx_mock.add_response(
                url=f"{base_url}/rest/api/3/bulk/issues/watch",
                method="POST",
                status_code=201,
                json=TASK,
            )

            result = service.submit_bulk_watch(["PROJ-1"])

            assert result.unwrap().task_id == "10641"

        @pytest.mark.anyio
        async def test_submit_bulk_unwatch_async(
            self,
            httpx_mock: HTTPXMock,
            service: IssueBulkOperationsService,
            base_url: str,
        ) -> None:
            httpx_mock.add_response(
                url=f"{base_url}/rest/api/3/bulk/issues/unwatch",
                method="POST",
                status_code=400,
                json={"errors": {"selectedIssueIdsOrKeys": "Too many issues."}},
            )

            result = await service.submit_bulk_unwatch_async(["PROJ-1"])

            assert not result.success
            assert result.error.message == "selectedIssueIdsOrKeys: Too many issues."
