from collections.abc import AsyncIterator
from dataclasses import dataclass, field
from typing import Any

import pytest
import pytest_asyncio
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, Response
from httpx import ASGITransport, AsyncClient

from glk_admin.core.config import Settings
from glk_admin.exceptions import TransportError
from glk_admin.transport import HttpTransport


@dataclass
class RecordedCall:
    """桩服务收到的一次请求。"""

    method: str
    path: str
    query: dict[str, str]
    body: Any
    headers: dict[str, str]


@dataclass
class LegacyBackendStub:
    """模拟旧后台：按路径返回预置响应，并记录所有请求。"""

    # 路径 -> 业务数据，默认包裹为 {code: 0, msg, data}。
    data: dict[str, Any] = field(default_factory=dict)
    # 路径 -> (状态码, 原始响应体)，不做包裹。
    raw: dict[str, tuple[int, Any]] = field(default_factory=dict)
    calls: list[RecordedCall] = field(default_factory=list)

    def last_call(self, path: str) -> RecordedCall:
        for call in reversed(self.calls):
            if call.path == path:
                return call
        raise AssertionError(f"no call recorded for {path}, got {[c.path for c in self.calls]}")


def build_stub_app(stub: LegacyBackendStub) -> FastAPI:
    app = FastAPI()

    @app.api_route("/{path:path}", methods=["GET", "POST"])
    async def catch_all(path: str, request: Request):
        raw_body = await request.body()
        full_path = f"/{path}"
        stub.calls.append(
            RecordedCall(
                method=request.method,
                path=full_path,
                query=dict(request.query_params),
                body=await request.json() if raw_body else None,
                headers=dict(request.headers),
            )
        )
        if full_path in stub.raw:
            status_code, body = stub.raw[full_path]
            if body is None:
                return Response(status_code=status_code)
            return JSONResponse(status_code=status_code, content=body)
        return {"code": 0, "msg": "操作成功", "data": stub.data.get(full_path)}

    return app


@pytest.fixture
def backend() -> LegacyBackendStub:
    return LegacyBackendStub()


@pytest.fixture
def settings() -> Settings:
    return Settings(base_url="http://legacy.test", access_token="token-123")


@dataclass
class Notifications:
    """记录请求通道发出的成功/失败提示。"""

    successes: list[str] = field(default_factory=list)
    errors: list[TransportError] = field(default_factory=list)


@pytest.fixture
def notifications() -> Notifications:
    return Notifications()


@pytest_asyncio.fixture
async def transport(
    backend: LegacyBackendStub,
    settings: Settings,
    notifications: Notifications,
) -> AsyncIterator[HttpTransport]:
    client = AsyncClient(transport=ASGITransport(app=build_stub_app(backend)), base_url=settings.base_url)
    async with client:
        yield HttpTransport(
            settings,
            client=client,
            on_success=notifications.successes.append,
            on_error=notifications.errors.append,
        )
