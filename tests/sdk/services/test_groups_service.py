import json

import pytest
from pytest_httpx import HTTPXMock

from jira_client._config import Config
from jira_client._services.groups_service import GroupsService
from jira_client.models import ErrorKind, FoundGroups, Group, PageBean


@pytest.fixture
def service(config: Config) -> GroupsService:
    return GroupsService(config=config)


class TestGroupsService:
    def test_add_user_to_group(
        self, httpx_mock: HTTPXMock, service: GroupsService, base_url: str
    ) -> None:
        httpx_mock.add_response(
            url=f"{base_url}/rest/api/3/group/user?groupId=g-1",
            method="POST",
            status_code=201,
            json={"name": "jira-developers", "groupId": "g-1"},
        )

        result = service.add_user_to_group("acc-1", group_id="g-1")

        assert result.success
        assert isinstance(result.data, Group)
        assert result.data.group_id == "g-1"

        sent_request = httpx_mock.get_request()
        if sent_request is None:
            raise Exception("No request was sent")

        assert sent_request.method == "POST"
        assert json.loads(sent_request.content) == {"accountId": "acc-1"}
        assert sent_request.headers["Content-Type"] == "application/json"

    def test_bulk_get_groups(
        self, httpx_mock: HTTPXMock, service: GroupsService, base_url: str
    ) -> None:
        httpx_mock.add_response(
            url=f"{base_url}/rest/api/3/group/bulk?startAt=0&maxResults=2&groupId=a&groupId=b",
            status_code=200,
            json={
                "startAt": 0,
                "maxResults": 2,
                "total": 2,
                "isLast": True,
                "values": [
                    {"name": "alpha", "groupId": "a"},
                    {"name": "beta", "groupId": "b"},
                ],
            },
        )

        result = service.bulk_get_groups(start_at=0, max_results=2, group_ids=["a", "b"])

        page = result.unwrap()
        assert isinstance(page, PageBean)
        assert page.is_last is True
        assert [g.name for g in page.values] == ["alpha", "beta"]

        sent_request = httpx_mock.get_request()
        assert sent_request is not None
        assert sent_request.url.params.get_list("groupId") == ["a", "b"]

    def test_create_group_conflict(
        self, httpx_mock: HTTPXMock, service: GroupsService, base_url: str
    ) -> None:
        httpx_mock.add_response(
            url=f"{base_url}/rest/api/3/group",
            method="POST",
            status_code=400,
            json={"errorMessages": ["Group 'devs' already exists."], "errors": {}},
        )

        result = service.create_group("devs")

        assert not result.success
        assert result.error.kind == ErrorKind.APPLICATION
        assert result.error.message == "Group 'devs' already exists."

    def test_find_groups(
        self, httpx_mock: HTTPXMock, service: GroupsService, base_url: str
    ) -> None:
        httpx_mock.add_response(
            url=f"{base_url}/rest/api/3/groups/picker?query=dev&excludeId=x1&excludeId=x2&caseInsensitive=true",
            status_code=200,
            json={
                "header": "Showing 1 of 1 matching groups",
                "total": 1,
                "groups": [{"name": "developers", "groupId": "g-1", "html": "<b>dev</b>elopers"}],
            },
        )

        result = service.find_groups(
            query="dev", exclude_ids=["x1", "x2"], case_insensitive=True
        )

        found = result.unwrap()
        assert isinstance(found, FoundGroups)
        assert found.total == 1
        assert found.groups[0].group_id == "g-1"

    def test_get_users_from_group(
        self, httpx_mock: HTTPXMock, service: GroupsService, base_url: str
    ) -> None:
        httpx_mock.add_response(
            url=f"{base_url}/rest/api/3/group/member?groupId=g-1&includeInactiveUsers=false",
            status_code=200,
            json={
                "isLast": False,
                "nextPage": f"{base_url}/rest/api/3/group/member?groupId=g-1&startAt=50",
                "values": [{"accountId": "acc-1", "displayName": "Mia", "active": True}],
            },
        )

        result = service.get_users_from_group(group_id="g-1", include_inactive_users=False)

        page = result.unwrap()
        assert page.is_last is False
        assert page.values[0].display_name == "Mia"

    def test_remove_group(
        self, httpx_mock: HTTPXMock, service: GroupsService, base_url: str
    ) -> None:
        httpx_mock.add_response(
            url=f"{base_url}/rest/api/3/group?groupId=g-1&swapGroupId=g-2",
            method="DELETE",
            status_code=200,
        )

        result = service.remove_group(group_id="g-1", swap_group_id="g-2")

        assert result.success
        assert result.data is None

        sent_request = httpx_mock.get_request()
        assert sent_request is not None
        assert sent_request.content == b""
        assert "Content-Type" not in sent_request.headers

    @pytest.mark.anyio
    async def test_remove_user_from_group_async(
        self, httpx_mock: HTTPXMock, service: GroupsService, base_url: str
    ) -> None:
        httpx_mock.add_response(
            url=f"{base_url}/rest/api/3/group/user?groupname=devs&accountId=acc-1",
            method="DELETE",
            status_code=200,
        )

        result = await service.remove_user_from_group_async("acc-1", group_name="devs")

        assert result.success
        assert result.status == 200
