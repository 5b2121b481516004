"""旧后台请求通道。

职责:
1. 拼接服务根地址并携带认证头、请求追踪 ID。
2. 拆解旧接口统一包裹 `{code, msg, data}`，只向上返回 `data`。
3. 非 2xx、业务失败码、网络异常统一抛出 `TransportError` 子类。
4. 成功/失败提示通过显式回调发出，不依赖全局状态。
"""

import logging
import uuid
from collections.abc import Callable
from time import perf_counter
from typing import Any, Protocol

import httpx

from glk_admin.core.config import Settings, get_settings
from glk_admin.exceptions import BusinessError, HTTPStatusError, TransportError, extract_message

logger = logging.getLogger("glk_admin.transport")

SuccessNotifier = Callable[[str], None]
ErrorNotifier = Callable[[TransportError], None]

_SUCCESS_MESSAGE_BY_METHOD = {
    "GET": "查询成功。",
    "POST": "操作成功。",
}


class Transport(Protocol):
    """适配函数依赖的最小请求协议。"""

    async def get(self, url: str, *, params: dict[str, Any] | None = None) -> Any: ...

    async def post(
        self,
        url: str,
        *,
        data: dict[str, Any] | None = None,
        params: dict[str, Any] | None = None,
        notify_on_success: bool = False,
    ) -> Any: ...


def _log_success(message: str) -> None:
    logger.info("success: %s", message)


def _log_error(exc: TransportError) -> None:
    logger.warning("request failed: %s details=%s", exc.message, exc.details)


class HttpTransport:
    """基于 httpx 的默认请求通道实现。"""

    def __init__(
        self,
        settings: Settings | None = None,
        *,
        client: httpx.AsyncClient | None = None,
        on_success: SuccessNotifier | None = None,
        on_error: ErrorNotifier | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            base_url=self.settings.base_url,
            timeout=self.settings.request_timeout_seconds,
        )
        self._on_success = on_success or _log_success
        self._on_error = on_error or _log_error

    async def __aenter__(self) -> "HttpTransport":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """关闭自行创建的连接池；外部注入的客户端由调用方负责关闭。"""
        if self._owns_client:
            await self._client.aclose()

    async def get(self, url: str, *, params: dict[str, Any] | None = None) -> Any:
        """发送 GET 请求并返回业务数据。"""
        return await self._request("GET", url, params=params)

    async def post(
        self,
        url: str,
        *,
        data: dict[str, Any] | None = None,
        params: dict[str, Any] | None = None,
        notify_on_success: bool = False,
    ) -> Any:
        """发送 POST 请求并返回业务数据。

        旧接口部分查询走 POST + query 参数，因此 `params` 与 `data` 可同时出现。
        """
        return await self._request("POST", url, params=params, json=data, notify_on_success=notify_on_success)

    def _build_headers(self, request_id: str) -> dict[str, str]:
        headers = {"X-Request-Id": request_id}
        auth_value = self.settings.auth_header_value
        if auth_value:
            headers[self.settings.auth_header_name] = auth_value
        return headers

    async def _request(
        self,
        method: str,
        url: str,
        *,
        params: dict[str, Any] | None = None,
        json: dict[str, Any] | None = None,
        notify_on_success: bool = False,
    ) -> Any:
        request_id = str(uuid.uuid4())
        started_at = perf_counter()
        try:
            response = await self._client.request(
                method,
                url,
                params=params,
                json=json,
                headers=self._build_headers(request_id),
            )
        except httpx.HTTPError as err:
            raise self._report(
                TransportError(
                    "网络请求失败，请检查网络连接。",
                    details={"method": method, "path": url, "request_id": request_id, "error": str(err)},
                )
            ) from err

        elapsed_ms = round((perf_counter() - started_at) * 1000, 2)
        logger.debug(
            "request_id=%s method=%s path=%s status=%s elapsed_ms=%s",
            request_id,
            method,
            url,
            response.status_code,
            elapsed_ms,
        )

        body = self._decode_body(response)
        details = {"method": method, "path": url, "request_id": request_id}
        if response.is_error:
            raise self._report(HTTPStatusError(response.status_code, extract_message(body), details=details))

        payload, message = self._unwrap(body, details)
        if notify_on_success:
            self._on_success(message or _SUCCESS_MESSAGE_BY_METHOD.get(method, "操作成功。"))
        return payload

    @staticmethod
    def _decode_body(response: httpx.Response) -> Any:
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            return response.text

    def _unwrap(self, body: Any, details: dict[str, Any]) -> tuple[Any, str | None]:
        """拆解 `{code, msg, data}` 包裹；非包裹结构原样返回。"""
        if not isinstance(body, dict) or "code" not in body:
            return body, None

        code = body.get("code")
        message = extract_message(body)
        if str(code) not in self.settings.business_success_codes:
            raise self._report(BusinessError(code, message, details={**details, "code": code}))
        return body.get("data"), message

    def _report(self, exc: TransportError) -> TransportError:
        """触发失败提示回调后交回异常，由调用处抛出。"""
        self._on_error(exc)
        return exc
