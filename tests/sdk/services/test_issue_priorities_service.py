import json

import pytest
from pytest_httpx import HTTPXMock

from jira_client._config import Config
from jira_client._services.issue_priorities_service import IssuePrioritiesService
from jira_client.models import ErrorKind, Priority, PriorityId


@pytest.fixture
def service(config: Config) -> IssuePrioritiesService:
    return IssuePrioritiesService(config=config)


class TestIssuePrioritiesService:
    def test_create_priority(
        self, httpx_mock: HTTPXMock, service: IssuePrioritiesService, base_url: str
    ) -> None:
        httpx_mock.add_response(
            url=f"{base_url}/rest/api/3/priority",
            method="POST",
            status_code=201,
            json={"id": "10001"},
        )

        result = service.create_priority("Urgent", "#ff0000", description="Drop everything")

        assert result.success
        assert result.status == 201
        assert isinstance(result.data, PriorityId)
        assert result.data.id == "10001"

        sent_request = httpx_mock.get_request()
        if sent_request is None:
            raise Exception("No request was sent")

        assert json.loads(sent_request.content) == {
            "name": "Urgent",
            "statusColor": "#ff0000",
            "description": "Drop everything",
        }

    def test_delete_priority(
        self, httpx_mock: HTTPXMock, service: IssuePrioritiesService, base_url: str
    ) -> None:
        httpx_mock.add_response(
            url=f"{base_url}/rest/api/3/priority/3",
            method="DELETE",
            status_code=303,
            headers={"Location": f"{base_url}/rest/api/3/task/1"},
        )

        result = service.delete_priority("3")

        assert result.success
        assert result.status == 303
        assert result.data is None
        assert result.location == f"{base_url}/rest/api/3/task/1"
        assert len(httpx_mock.get_requests()) == 1

    def test_get_priorities(
        self, httpx_mock: HTTPXMock, service: IssuePrioritiesService, base_url: str
    ) -> None:
        httpx_mock.add_response(
            url=f"{base_url}/rest/api/3/priority",
            status_code=200,
            json=[
                {"id": "1", "name": "Highest", "statusColor": "#d04437"},
                {"id": "2", "name": "High", "statusColor": "#f15C75"},
            ],
        )

        result = service.get_priorities()

        priorities = result.unwrap()
        assert [p.name for p in priorities] == ["Highest", "High"]
        assert all(isinstance(p, Priority) for p in priorities)
        assert priorities[0].status_color == "#d04437"

    def test_get_priority_not_found(
        self, httpx_mock: HTTPXMock, service: IssuePrioritiesService, base_url: str
    ) -> None:
        httpx_mock.add_response(
            url=f"{base_url}/rest/api/3/priority/99",
            status_code=404,
            json={"errorMessages": ["The priority with ID 99 does not exist."]},
        )

        result = service.get_priority("99")

        assert not result.success
        assert result.error.kind == ErrorKind.APPLICATION
        assert result.error.status_code == 404

    def test_move_priorities(
        self, httpx_mock: HTTPXMock, service: IssuePrioritiesService, base_url: str
    ) -> None:
        httpx_mock.add_response(
            url=f"{base_url}/rest/api/3/priority/move",
            method="PUT",
            status_code=204,
        )

        result = service.move_priorities(["10004", "10005"], position="First")

        assert result.success
        sent_request = httpx_mock.get_request()
        assert sent_request is not None
        assert json.loads(sent_request.content) == {
            "ids": ["10004", "10005"],
            "position": "First",
        }

    def test_search_priorities(
        self, httpx_mock: HTTPXMock, service: IssuePrioritiesService, base_url: str
    ) -> None:
        httpx_mock.add_response(
            url=f"{base_url}/rest/api/3/priority/search?maxResults=50&id=1&id=2&onlyDefault=false",
            status_code=200,
            json={"maxResults": 50, "total": 2, "values": [{"id": "1"}, {"id": "2"}]},
        )

        result = service.search_priorities(
            max_results=50, ids=["1", "2"], only_default=False
        )

        assert result.unwrap().total == 2

    def test_set_default_priority_to_none(
        self, httpx_mock: HTTPXMock, service: IssuePrioritiesService, base_url: str
    ) -> None:
        httpx_mock.add_response(
            url=f"{base_url}/rest/api/3/priority/default",
            method="PUT",
            status_code=204,
        )

        service.set_default_priority(None)

        sent_request = httpx_mock.get_request()
        assert sent_request is not None
        assert json.loads(sent_request.content) == {"id": None}

    @pytest.mark.anyio
    async def test_update_priority_async(
        self, httpx_mock: HTTPXMock, service: IssuePrioritiesService, base_url: str
    ) -> None:
        httpx_mock.add_response(
            url=f"{base_url}/rest/api/3/priority/1",
            method="PUT",
            status_code=204,
        )

        result = await service.update_priority_async("1", name="Blocker", avatar_id=3)

        assert result.success
        sent_request = httpx_mock.get_request()
        assert sent_request is not None
        assert json.loads(sent_request.content) == {"name": "Blocker", "avatarId": 3}
