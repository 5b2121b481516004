import httpx
import pytest

from glk_admin.core.config import Settings
from glk_admin.exceptions import BusinessError, HTTPStatusError, TransportError
from glk_admin.transport import HttpTransport


@pytest.mark.asyncio
async def test_get_unwraps_envelope_and_sends_auth_headers(transport, backend):
    backend.data["/glk/admin/sys/dept/list"] = [{"id": 1, "deptName": "总部"}]

    data = await transport.get("/glk/admin/sys/dept/list", params={"page": 1})

    assert data == [{"id": 1, "deptName": "总部"}]
    call = backend.last_call("/glk/admin/sys/dept/list")
    assert call.method == "GET"
    assert call.query == {"page": "1"}
    assert call.headers["authorization"] == "Bearer token-123"
    assert call.headers["x-request-id"]


@pytest.mark.asyncio
async def test_post_sends_query_params_and_json_body_separately(transport, backend):
    await transport.post("/glk/admin/user/update", params={"page": 2}, data={"userId": 7})

    call = backend.last_call("/glk/admin/user/update")
    assert call.method == "POST"
    assert call.query == {"page": "2"}
    assert call.body == {"userId": 7}


@pytest.mark.asyncio
async def test_non_envelope_payload_is_returned_unchanged(transport, backend):
    backend.raw["/glk/admin/sys/dept/treeList"] = (200, [{"id": 1, "children": []}])

    assert await transport.get("/glk/admin/sys/dept/treeList") == [{"id": 1, "children": []}]


@pytest.mark.asyncio
async def test_empty_body_resolves_to_none(transport, backend):
    backend.raw["/glk/admin/menu/delete"] = (200, None)

    assert await transport.post("/glk/admin/menu/delete", data={"id": 1}) is None


@pytest.mark.asyncio
async def test_success_notification_only_when_requested(transport, notifications):
    await transport.post("/glk/admin/role/delete", data={"id": 1})
    assert notifications.successes == []

    await transport.post("/glk/admin/role/assignUser", data={"roleId": 1}, notify_on_success=True)
    assert notifications.successes == ["操作成功"]


@pytest.mark.asyncio
async def test_success_notification_falls_back_to_method_message(transport, backend, notifications):
    backend.raw["/glk/admin/user/add"] = (200, {"code": 200, "data": None})

    await transport.post("/glk/admin/user/add", data={"account": "a"}, notify_on_success=True)

    assert notifications.successes == ["操作成功。"]


@pytest.mark.asyncio
async def test_business_error_code_raises_and_notifies(transport, backend, notifications):
    backend.raw["/glk/admin/user/add"] = (200, {"code": 500, "msg": "账号已存在"})

    with pytest.raises(BusinessError) as exc_info:
        await transport.post("/glk/admin/user/add", data={"account": "dup"}, notify_on_success=True)

    assert exc_info.value.code == 500
    assert exc_info.value.message == "账号已存在"
    assert exc_info.value.details["path"] == "/glk/admin/user/add"
    assert notifications.errors == [exc_info.value]
    assert notifications.successes == []


@pytest.mark.asyncio
async def test_string_success_code_is_accepted(transport, backend):
    backend.raw["/glk/admin/role/list"] = (200, {"code": "0", "data": {"list": []}})

    assert await transport.post("/glk/admin/role/list") == {"list": []}


@pytest.mark.asyncio
async def test_http_error_uses_body_message_or_default(transport, backend, notifications):
    backend.raw["/glk/admin/user/list/admin"] = (403, {"message": "无权访问用户列表"})
    backend.raw["/glk/admin/sys/dept/list"] = (401, None)

    with pytest.raises(HTTPStatusError) as forbidden:
        await transport.post("/glk/admin/user/list/admin")
    with pytest.raises(HTTPStatusError) as unauthorized:
        await transport.get("/glk/admin/sys/dept/list")

    assert forbidden.value.status_code == 403
    assert forbidden.value.code == "FORBIDDEN"
    assert forbidden.value.message == "无权访问用户列表"
    assert unauthorized.value.message == "未登录或登录状态已失效。"
    assert len(notifications.errors) == 2


@pytest.mark.asyncio
async def test_network_failure_is_wrapped():
    def _refuse(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    errors: list[TransportError] = []
    async with httpx.AsyncClient(transport=httpx.MockTransport(_refuse), base_url="http://legacy.test") as client:
        transport = HttpTransport(Settings(), client=client, on_error=errors.append)
        with pytest.raises(TransportError) as exc_info:
            await transport.get("/glk/admin/sys/dept/treeList")

    assert isinstance(exc_info.value.__cause__, httpx.ConnectError)
    assert exc_info.value.details["path"] == "/glk/admin/sys/dept/treeList"
    assert errors == [exc_info.value]


@pytest.mark.asyncio
async def test_transport_owns_and_closes_its_client():
    async with HttpTransport(Settings(base_url="http://legacy.test")) as transport:
        client = transport._client
        assert not client.is_closed
    assert client.is_closed


@pytest.mark.asyncio
async def test_injected_client_is_left_open(transport):
    await transport.aclose()

    assert not transport._client.is_closed
