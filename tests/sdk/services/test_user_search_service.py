import pytest
from pytest_httpx import HTTPXMock

from jira_client._config import Config
from jira_client._services.user_search_service import UserSearchService
from jira_client.models import FoundUsers, User

USERS = [
    {"accountId": "5b10a2844c20165700ede21g", "displayName": "Mia Krystof", "active": True},
    {"accountId": "5b10ac8d82e05b22cc7d4ef5", "displayName": "Emma Richards", "active": False},
]


@pytest.fixture
def service(config: Config) -> UserSearchService:
    return UserSearchService(config=config)


class TestUserSearchService:
    def test_find_assignable_users(
        self, httpx_mock: HTTPXMock, service: UserSearchService, base_url: str
    ) -> None:
        httpx_mock.add_response(
            url=f"{base_url}/rest/api/3/user/assignable/search?query=mia&issueKey=PROJ-1&recommend=true",
            status_code=200,
            json=USERS[:1],
        )

        result = service.find_assignable_users(
            query="mia", issue_key="PROJ-1", recommend=True
        )

        [user] = result.unwrap()
        assert isinstance(user, User)
        assert user.display_name == "Mia Krystof"

        sent_request = httpx_mock.get_request()
        if sent_request is None:
            raise Exception("No request was sent")
        assert sent_request.url.params["recommend"] == "true"

    def test_find_bulk_assignable_users(
        self, httpx_mock: HTTPXMock, service: UserSearchService, base_url: str
    ) -> None:
        httpx_mock.add_response(
            url=f"{base_url}/rest/api/3/user/assignable/multiProjectSearch?query=e&projectKeys=PROJ%2COPS",
            status_code=200,
            json=USERS,
        )

        result = service.find_bulk_assignable_users(["PROJ", "OPS"], query="e")

        assert len(result.unwrap()) == 2

    def test_find_users(
        self, httpx_mock: HTTPXMock, service: UserSearchService, base_url: str
    ) -> None:
        httpx_mock.add_response(
            url=f"{base_url}/rest/api/3/user/search?query=emma&maxResults=10",
            status_code=200,
            json=USERS[1:],
        )

        result = service.find_users(query="emma", max_results=10)

        assert result.unwrap()[0].active is False

    def test_find_users_by_query(
        self, httpx_mock: HTTPXMock, service: UserSearchService, base_url: str
    ) -> None:
        httpx_mock.add_response(
            url=f"{base_url}/rest/api/3/user/search/query?query=is+assignee+of+PROJ&startAt=0",
            status_code=200,
            json={"isLast": True, "maxResults": 50, "startAt": 0, "total": 2, "values": USERS},
        )

        result = service.find_users_by_query("is assignee of PROJ", start_at=0)

        page = result.unwrap()
        assert page.total == 2
        assert [u.account_id for u in page.values] == [u["accountId"] for u in USERS]

    def test_find_user_keys_by_query_uses_singular_max_result(
        self, httpx_mock: HTTPXMock, service: UserSearchService, base_url: str
    ) -> None:
        httpx_mock.add_response(
            url=f"{base_url}/rest/api/3/user/search/query/key?query=is+watcher+of+PROJ-1&maxResult=25",
            status_code=200,
            json={"values": [{"accountId": "abc", "key": "abc"}]},
        )

        result = service.find_user_keys_by_query("is watcher of PROJ-1", max_results=25)

        assert result.unwrap().values[0].key == "abc"
        sent_request = httpx_mock.get_request()
        assert sent_request is not None
        assert "maxResults" not in sent_request.url.params

    def test_find_users_for_picker(
        self, httpx_mock: HTTPXMock, service: UserSearchService, base_url: str
    ) -> None:
        httpx_mock.add_response(
            url=f"{base_url}/rest/api/3/user/picker?query=mia&excludeAccountIds=a&excludeAccountIds=b&showAvatar=false",
            status_code=200,
            json={
                "header": "Showing 1 of 1 matching users",
                "total": 1,
                "users": [{"accountId": "x", "displayName": "Mia", "html": "<strong>Mia</strong>"}],
            },
        )

        result = service.find_users_for_picker(
            "mia", exclude_account_ids=["a", "b"], show_avatar=False
        )

        found = result.unwrap()
        assert isinstance(found, FoundUsers)
        assert found.users[0].html == "<strong>Mia</strong>"

    def test_find_users_with_all_permissions(
        self, httpx_mock: HTTPXMock, service: UserSearchService, base_url: str
    ) -> None:
        httpx_mock.add_response(
            url=f"{base_url}/rest/api/3/user/permission/search?permissions=BROWSE%2CCREATE_ISSUES&projectKey=PROJ",
            status_code=200,
            json=USERS,
        )

        result = service.find_users_with_all_permissions(
            ["BROWSE", "CREATE_ISSUES"], project_key="PROJ"
        )

        assert result.success
        sent_request = httpx_mock.get_request()
        assert sent_request is not None
        assert sent_request.url.params["permissions"] == "BROWSE,CREATE_ISSUES"

    @pytest.mark.anyio
    async def test_find_users_with_browse_permission_async(
        self, httpx_mock: HTTPXMock, service: UserSearchService, base_url: str
    ) -> None:
        httpx_mock.add_response(
            url=f"{base_url}/rest/api/3/user/viewissue/search?query=mia&issueKey=PROJ-1",
            status_code=200,
            json=USERS[:1],
        )

        result = await service.find_users_with_browse_permission_async(
            query="mia", issue_key="PROJ-1"
        )

        assert result.unwrap()[0].account_id == USERS[0]["accountId"]

    def test_act_as_is_ignored_for_direct_transport(
        self, httpx_mock: HTTPXMock, service: UserSearchService, base_url: str
    ) -> None:
        httpx_mock.add_response(
            url=f"{base_url}/rest/api/3/user/search?query=x", status_code=200, json=[]
        )

        result = service.find_users(query="x", act_as="app")

        assert result.unwrap() == []
