import json

import pytest
from pytest_httpx import HTTPXMock

from jira_client._config import Config
from jira_client._services.issue_security_schemes_service import (
    IssueSecuritySchemesService,
)
from jira_client.models import SecurityScheme, SecuritySchemes


@pytest.fixture
def service(config: Config) -> IssueSecuritySchemesService:
    return IssueSecuritySchemesService(config=config)


class TestIssueSecuritySchemesService:
    def test_create_issue_security_scheme(
        self,
        httpx_mock: HTTPXMock,
        service: IssueSecuritySchemesService,
        base_url: str,
    ) -> None:
        httpx_mock.add_response(
            url=f"{base_url}/rest/api/3/issuesecurityschemes",
            method="POST",
            status_code=201,
            json={"id": "10001"},
        )
        levels = [{"name": "Staff", "isDefault": True, "members": [{"type": "group"}]}]

        result = service.create_issue_security_scheme("Internal", levels=levels)

        assert result.unwrap().id == "10001"
        sent_request = httpx_mock.get_request()
        if sent_request is None:
            raise Exception("No request was sent")
        assert json.loads(sent_request.content) == {"name": "Internal", "levels": levels}

    def test_get_issue_security_scheme(
        self,
        httpx_mock: HTTPXMock,
        service: IssueSecuritySchemesService,
        base_url: str,
    ) -> None:
        httpx_mock.add_response(
            url=f"{base_url}/rest/api/3/issuesecurityschemes/10000",
            status_code=200,
            json={
                "id": 10000,
                "name": "Default scheme",
                "defaultSecurityLevelId": 10021,
                "levels": [{"id": "10021", "name": "Admin only"}],
            },
        )

        result = service.get_issue_security_scheme("10000")

        scheme = result.unwrap()
        assert isinstance(scheme, SecurityScheme)
        assert scheme.id == 10000
        assert scheme.levels[0].name == "Admin only"

    def test_get_issue_security_schemes(
        self,
        httpx_mock: HTTPXMock,
        service: IssueSecuritySchemesService,
        base_url: str,
    ) -> None:
        httpx_mock.add_response(
            url=f"{base_url}/rest/api/3/issuesecurityschemes",
            status_code=200,
            json={"issueSecuritySchemes": [{"id": 1, "name": "A"}, {"id": 2, "name": "B"}]},
        )

        result = service.get_issue_security_schemes()

        schemes = result.unwrap()
        assert isinstance(schemes, SecuritySchemes)
        assert [s.name for s in schemes.issue_security_schemes] == ["A", "B"]

    def test_search_security_schemes(
        self,
        httpx_mock: HTTPXMock,
        service: IssueSecuritySchemesService,
        base_url: str,
    ) -> None:
        httpx_mock.add_response(
            url=f"{base_url}/rest/api/3/issuesecurityschemes/search?projectId=10000&projectId=10001",
            status_code=200,
            json={
                "isLast": True,
                "values": [{"id": 1, "name": "A", "projectIds": [10000, 10001]}],
            },
        )

        result = service.search_security_schemes(project_ids=["10000", "10001"])

        assert result.unwrap().values[0].project_ids == [10000, 10001]

    def test_get_security_levels(
        self,
        httpx_mock: HTTPXMock,
        service: IssueSecuritySchemesService,
        base_url: str,
    ) -> None:
        httpx_mock.add_response(
            url=f"{base_url}/rest/api/3/issuesecurityschemes/level?schemeId=1&onlyDefault=true",
            status_code=200,
            json={"values": [{"id": "5", "isDefault": True, "issueSecuritySchemeId": "1"}]},
        )

        result = service.get_security_levels(scheme_ids=["1"], only_default=True)

        level = result.unwrap().values[0]
        assert level.is_default is True
        assert level.issue_security_scheme_id == "1"

    def test_add_security_level(
        self,
        httpx_mock: HTTPXMock,
        service: IssueSecuritySchemesService,
        base_url: str,
    ) -> None:
        httpx_mock.add_response(
            url=f"{base_url}/rest/api/3/issuesecurityschemes/1/level",
            method="PUT",
            status_code=204,
        )

        result = service.add_security_level("1", [{"name": "Managers"}])

        assert result.success
        sent_request = httpx_mock.get_request()
        assert sent_request is not None
        assert json.loads(sent_request.content) == {"levels": [{"name": "Managers"}]}

    def test_update_security_level(
        self,
        httpx_mock: HTTPXMock,
        service: IssueSecuritySchemesService,
        base_url: str,
    ) -> None:
        httpx_mock.add_response(
            url=f"{base_url}/rest/api/3/issuesecurityschemes/1/level/5",
            method="PUT",
            status_code=204,
        )

        service.update_security_level("1", "5", description="Only managers")

        sent_request = httpx_mock.get_request()
        assert sent_request is not None
        assert json.loads(sent_request.content) == {"description": "Only managers"}

    def test_remove_level_returns_task_location(
        self,
        httpx_mock: HTTPXMock,
        service: IssueSecuritySchemesService,
        base_url: str,
    ) -> None:
        httpx_mock.add_response(
            url=f"{base_url}/rest/api/3/issuesecurityschemes/1/level/5?replaceWith=6",
            method="DELETE",
            status_code=303,
            headers={"Location": f"{base_url}/rest/api/3/task/10050"},
        )

        result = service.remove_level("1", "5", replace_with="6")

        assert result.success
        assert result.location == f"{base_url}/rest/api/3/task/10050"

    @pytest.mark.anyio
    async def test_delete_security_scheme_async(
        self,
        httpx_mock: HTTPXMock,
        service: IssueSecuritySchemesService,
        base_url: str,
    ) -> None:
        httpx_mock.add_response(
            url=f"{base_url}/rest/api/3/issuesecurityschemes/1",
            method="DELETE",
            status_code=204,
        )

        result = await service.delete_security_scheme_async("1")

        assert result.success
        assert result.data is None
