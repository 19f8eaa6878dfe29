import base64
import logging
from typing import Any, Dict, List, Mapping, Optional

import httpx
import pytest
from pytest_httpx import HTTPXMock

from jira_client._config import Config
from jira_client._services._base_service import BaseService
from jira_client._utils import (
    Endpoint,
    RequestSpec,
    expect_json,
    expect_no_content,
    user_agent_value,
)
from jira_client._utils.constants import HEADER_USER_AGENT
from jira_client.models import (
    ErrorKind,
    MissingPathParameterError,
    TransportError,
)


@pytest.fixture
def service(config: Config) -> BaseService:
    return BaseService(config=config)


class RecordingBridge:
    """Stands in for a host runtime's request primitive."""

    def __init__(self, response: httpx.Response) -> None:
        self.response = response
        self.calls: List[Dict[str, Any]] = []

    def request(
        self,
        method: str,
        url: str,
        *,
        headers: Mapping[str, str],
        content: Optional[bytes],
        act_as: str,
    ) -> httpx.Response:
        self.calls.append(
            {
                "method": method,
                "url": url,
                "headers": dict(headers),
                "content": content,
                "act_as": act_as,
            }
        )
        return self.response


class AsyncRecordingBridge(RecordingBridge):
    async def request(  # type: ignore[override]
        self,
        method: str,
        url: str,
        *,
        headers: Mapping[str, str],
        content: Optional[bytes],
        act_as: str,
    ) -> httpx.Response:
        return super().request(
            method, url, headers=headers, content=content, act_as=act_as
        )


class TestBaseService:
    def test_init_base_service(self, service: BaseService):
        assert service is not None

    def test_base_service_default_headers(
        self, service: BaseService, email: str, api_token: str
    ):
        token = base64.b64encode(f"{email}:{api_token}".encode()).decode()

        assert service.default_headers == {
            "Accept": "application/json",
            "User-Agent": user_agent_value(),
            "Authorization": f"Basic {token}",
        }

    @pytest.mark.parametrize(
        "credentials, header, value",
        [
            ({"bearer_token": "abc"}, "Authorization", "Bearer abc"),
            ({"session_cookie": "tenant.session.token=xyz"}, "Cookie", "tenant.session.token=xyz"),
        ],
    )
    def test_auth_headers(self, base_url: str, credentials, header, value):
        service = BaseService(config=Config(base_url=base_url, **credentials))

        assert service.auth_headers == {header: value}

    class TestExecute:
        def test_success_envelope(
            self, httpx_mock: HTTPXMock, service: BaseService, base_url: str
        ):
            httpx_mock.add_response(
                url=f"{base_url}/rest/api/3/group?groupId=g1",
                status_code=200,
                json={"id": "10001"},
            )

            result = service.execute(
                RequestSpec(
                    method="GET",
                    endpoint=Endpoint("/rest/api/3/group"),
                    params={"groupId": "g1"},
                )
            )

            assert result.success
            assert result.status == 200
            assert result.data == {"id": "10001"}
            assert result.error is None

            sent_request = httpx_mock.get_request()
            if sent_request is None:
                raise Exception("No request was sent")

            assert sent_request.method == "GET"
            assert sent_request.url == f"{base_url}/rest/api/3/group?groupId=g1"
            assert sent_request.headers["Accept"] == "application/json"
            assert sent_request.headers[HEADER_USER_AGENT] == user_agent_value()
            assert sent_request.headers["Authorization"].startswith("Basic ")
            assert "Content-Type" not in sent_request.headers

        def test_error_status_does_not_raise(
            self, httpx_mock: HTTPXMock, service: BaseService, base_url: str
        ):
            httpx_mock.add_response(
                url=f"{base_url}/rest/api/3/group",
                status_code=404,
                json={"errorMessages": ["Group not found"]},
            )

            result = service.execute(
                RequestSpec(method="GET", endpoint=Endpoint("/rest/api/3/group"))
            )

            assert not result.success
            assert result.status == 404
            assert result.data is None
            assert result.error.kind == ErrorKind.APPLICATION
            assert result.error.message == "Group not found"
            assert result.error.body == {"errorMessages": ["Group not found"]}

        def test_no_content(
            self, httpx_mock: HTTPXMock, service: BaseService, base_url: str
        ):
            httpx_mock.add_response(
                url=f"{base_url}/rest/api/3/group",
                method="DELETE",
                status_code=204,
            )

            result = service.execute(
                RequestSpec(
                    method="DELETE",
                    endpoint=Endpoint("/rest/api/3/group"),
                    expectations=expect_no_content(),
                )
            )

            assert result.success
            assert result.status == 204
            assert result.data is None

        def test_missing_path_parameter_sends_nothing(
            self, httpx_mock: HTTPXMock, service: BaseService
        ):
            with pytest.raises(MissingPathParameterError):
                service.execute(
                    RequestSpec(
                        method="GET",
                        endpoint=Endpoint("/rest/api/3/group/{groupId}"),
                    )
                )

            assert httpx_mock.get_requests() == []

        def test_connect_error_raises_transport_error(
            self, httpx_mock: HTTPXMock, service: BaseService
        ):
            httpx_mock.add_exception(httpx.ConnectError("connection refused"))

            with pytest.raises(TransportError) as exc_info:
                service.execute(
                    RequestSpec(method="GET", endpoint=Endpoint("/rest/api/3/priority"))
                )

            assert exc_info.value.method == "GET"
            assert exc_info.value.url == "/rest/api/3/priority"
            assert isinstance(exc_info.value.__cause__, httpx.ConnectError)

        def test_timeout_is_reported(self, httpx_mock: HTTPXMock, service: BaseService):
            httpx_mock.add_exception(httpx.ReadTimeout("read timed out"))

            with pytest.raises(TransportError) as exc_info:
                service.execute(
                    RequestSpec(method="GET", endpoint=Endpoint("/rest/api/3/priority"))
                )

            assert exc_info.value.reason.startswith("timed out")

        def test_caller_headers_are_not_overwritten(
            self, httpx_mock: HTTPXMock, service: BaseService, base_url: str
        ):
            httpx_mock.add_response(
                url=f"{base_url}/rest/api/3/group", method="POST", status_code=201, json={}
            )

            service.execute(
                RequestSpec(
                    method="POST",
                    endpoint=Endpoint("/rest/api/3/group"),
                    json={"name": "devs"},
                ),
                headers={
                    "accept": "text/plain",
                    "content-type": "application/vnd.custom+json",
                    "authorization": "Bearer override",
                },
            )

            sent_request = httpx_mock.get_request()
            assert sent_request is not None
            assert sent_request.headers["Accept"] == "text/plain"
            assert sent_request.headers["Content-Type"] == "application/vnd.custom+json"
            assert sent_request.headers["Authorization"] == "Bearer override"
            assert sent_request.content == b'{"name": "devs"}'

        def test_call_headers_replace_spec_headers_of_any_case(
            self, httpx_mock: HTTPXMock, service: BaseService, base_url: str
        ):
            httpx_mock.add_response(url=f"{base_url}/x", status_code=200, text="ok")

            service.execute(
                RequestSpec(
                    method="GET",
                    endpoint=Endpoint("/x"),
                    headers={"Accept": "text/plain", "X-Atlassian-Token": "no-check"},
                ),
                headers={"accept": "application/xml", "x-atlassian-token": "nocheck"},
            )

            sent_request = httpx_mock.get_request()
            assert sent_request is not None
            assert sent_request.headers.get_list("Accept") == ["application/xml"]
            assert sent_request.headers.get_list("X-Atlassian-Token") == ["nocheck"]

        def test_body_gets_json_content_type(
            self, httpx_mock: HTTPXMock, service: BaseService, base_url: str
        ):
            httpx_mock.add_response(
                url=f"{base_url}/rest/api/3/group", method="POST", status_code=201, json={}
            )

            service.execute(
                RequestSpec(
                    method="POST",
                    endpoint=Endpoint("/rest/api/3/group"),
                    json={"name": "devs"},
                )
            )

            sent_request = httpx_mock.get_request()
            assert sent_request is not None
            assert sent_request.headers["Content-Type"] == "application/json"

        def test_experimental_header_is_sent(
            self, httpx_mock: HTTPXMock, service: BaseService, base_url: str
        ):
            httpx_mock.add_response(url=f"{base_url}/x", status_code=200, json={})

            service.execute(
                RequestSpec(method="GET", endpoint=Endpoint("/x"), is_experimental=True)
            )

            sent_request = httpx_mock.get_request()
            assert sent_request is not None
            assert sent_request.headers["X-ExperimentalApi"] == "opt-in"

        def test_sends_exactly_once(
            self, httpx_mock: HTTPXMock, service: BaseService, base_url: str
        ):
            httpx_mock.add_response(url=f"{base_url}/x", status_code=503)

            result = service.execute(RequestSpec(method="GET", endpoint=Endpoint("/x")))

            assert result.status == 503
            assert len(httpx_mock.get_requests()) == 1

    class TestExecuteAsync:
        @pytest.mark.anyio
        async def test_success_envelope_async(
            self, httpx_mock: HTTPXMock, service: BaseService, base_url: str
        ):
            httpx_mock.add_response(
                url=f"{base_url}/rest/api/3/priority/3",
                status_code=200,
                json={"id": "3"},
            )

            result = await service.execute_async(
                RequestSpec(
                    method="GET",
                    endpoint=Endpoint("/rest/api/3/priority/{id}"),
                    path_params={"id": 3},
                    expectations=expect_json(statuses=(200,)),
                )
            )

            assert result.success
            assert result.data == {"id": "3"}

        @pytest.mark.anyio
        async def test_connect_error_async(
            self, httpx_mock: HTTPXMock, service: BaseService
        ):
            httpx_mock.add_exception(httpx.ConnectError("dns failure"))

            with pytest.raises(TransportError):
                await service.execute_async(
                    RequestSpec(method="GET", endpoint=Endpoint("/x"))
                )

    class TestClose:
        def test_sync_only_use_closes_quietly(
            self, service: BaseService, caplog: pytest.LogCaptureFixture
        ):
            with caplog.at_level(logging.WARNING, logger="jira_client"):
                service.close()

            assert caplog.records == []

        @pytest.mark.anyio
        async def test_close_warns_when_async_client_is_open(
            self,
            httpx_mock: HTTPXMock,
            service: BaseService,
            base_url: str,
            caplog: pytest.LogCaptureFixture,
        ):
            httpx_mock.add_response(url=f"{base_url}/x", status_code=200, json={})
            await service.execute_async(RequestSpec(method="GET", endpoint=Endpoint("/x")))

            with caplog.at_level(logging.WARNING, logger="jira_client"):
                service.close()

            assert "aclose()" in caplog.text
            await service.aclose()

        @pytest.mark.anyio
        async def test_aclose_closes_both_clients(
            self,
            httpx_mock: HTTPXMock,
            service: BaseService,
            base_url: str,
            caplog: pytest.LogCaptureFixture,
        ):
            httpx_mock.add_response(url=f"{base_url}/x", status_code=200, json={})
            await service.execute_async(RequestSpec(method="GET", endpoint=Endpoint("/x")))

            with caplog.at_level(logging.WARNING, logger="jira_client"):
                await service.aclose()

            assert caplog.records == []

    class TestBridgeTransport:
        def test_routes_through_bridge(self):
            bridge = RecordingBridge(httpx.Response(201, json={"id": "5"}))
            service = BaseService(config=Config(bridge=bridge))

            result = service.execute(
                RequestSpec(
                    method="POST",
                    endpoint=Endpoint("/rest/api/3/priority"),
                    json={"name": "P"},
                    params={"x": True},
                ),
                act_as="app",
            )

            assert result.success
            assert result.data == {"id": "5"}

            [call] = bridge.calls
            assert call["method"] == "POST"
            assert call["url"] == "/rest/api/3/priority?x=true"
            assert call["act_as"] == "app"
            assert call["content"] == b'{"name": "P"}'
            headers = {k.lower(): v for k, v in call["headers"].items()}
            assert "authorization" not in headers
            assert headers["content-type"] == "application/json"

        def test_defaults_to_user(self):
            bridge = RecordingBridge(httpx.Response(204))
            service = BaseService(config=Config(bridge=bridge))

            service.execute(
                RequestSpec(
                    method="DELETE",
                    endpoint=Endpoint("/x"),
                    expectations=expect_no_content(),
                )
            )

            assert bridge.calls[0]["act_as"] == "user"

        def test_bridge_errors_raise_transport_error(self):
            class FailingBridge(RecordingBridge):
                def request(self, *args, **kwargs):
                    raise OSError("host unreachable")

            service = BaseService(config=Config(bridge=FailingBridge(httpx.Response(200))))

            with pytest.raises(TransportError):
                service.execute(RequestSpec(method="GET", endpoint=Endpoint("/x")))

        def test_sync_call_rejects_async_bridge(self):
            bridge = AsyncRecordingBridge(httpx.Response(200, json={}))
            service = BaseService(config=Config(bridge=bridge))

            with pytest.raises(TypeError):
                service.execute(RequestSpec(method="GET", endpoint=Endpoint("/x")))

        @pytest.mark.anyio
        async def test_async_bridge(self):
            bridge = AsyncRecordingBridge(httpx.Response(200, json={"ok": True}))
            service = BaseService(config=Config(bridge=bridge))

            result = await service.execute_async(
                RequestSpec(method="GET", endpoint=Endpoint("/x"))
            )

            assert result.data == {"ok": True}
            assert bridge.calls[0]["url"] == "/x"
