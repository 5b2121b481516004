"""客户端异常定义。

旧后台的失败分两类：
1. 协议层失败：网络异常或非 2xx 状态码。
2. 业务层失败：HTTP 200 但响应包裹中的 code 不在成功码列表内。

适配函数不做任何错误转换，异常原样抛给调用方。
"""

from typing import Any

_DEFAULT_HTTP_ERROR_CODES = {
    400: "BAD_REQUEST",
    401: "UNAUTHORIZED",
    403: "FORBIDDEN",
    404: "NOT_FOUND",
    409: "CONFLICT",
    422: "VALIDATION_ERROR",
}

_DEFAULT_HTTP_MESSAGES = {
    400: "请求参数不合法。",
    401: "未登录或登录状态已失效。",
    403: "无权限访问该资源。",
    404: "请求资源不存在。",
    409: "请求与当前数据状态冲突。",
    422: "请求参数校验失败。",
}


def default_http_error_code(status_code: int) -> str:
    """按状态码给出机器可识别的错误码。"""
    if status_code >= 500:
        return "SERVER_ERROR"
    return _DEFAULT_HTTP_ERROR_CODES.get(status_code, "HTTP_ERROR")


def default_http_message(status_code: int) -> str:
    """按状态码给出可读的默认错误信息。"""
    if status_code >= 500:
        return "服务暂时不可用，请稍后重试。"
    return _DEFAULT_HTTP_MESSAGES.get(status_code, "请求处理失败。")


def extract_message(body: object) -> str | None:
    """从旧接口响应体中提取错误描述，兼容 msg / message 两种字段。"""
    if not isinstance(body, dict):
        return None
    for key in ("msg", "message"):
        value = body.get(key)
        if isinstance(value, str) and value.strip():
            return value.strip()
    return None


class TransportError(Exception):
    """请求执行失败的基类。"""

    def __init__(self, message: str, *, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class HTTPStatusError(TransportError):
    """后端返回非 2xx 状态码。"""

    def __init__(self, status_code: int, message: str | None = None, *, details: dict[str, Any] | None = None) -> None:
        super().__init__(message or default_http_message(status_code), details=details)
        self.status_code = status_code
        self.code = default_http_error_code(status_code)


class BusinessError(TransportError):
    """后端返回业务失败码。"""

    def __init__(self, code: Any, message: str | None = None, *, details: dict[str, Any] | None = None) -> None:
        super().__init__(message or "请求处理失败。", details=details)
        self.code = code
