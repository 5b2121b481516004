"""旧接口响应结构适配工具。

旧后台的列表接口返回 `{list, totalCount}`，且两个字段都可能缺失；
这里统一转换为前端分页结构 `{records, total, current, size}`。
"""

import logging
from typing import Any, TypeVar

from pydantic import TypeAdapter, ValidationError

from glk_admin.schemas.common import PaginatedResult, SearchParams

logger = logging.getLogger("glk_admin.response")

T = TypeVar("T")


def _empty_page(params: SearchParams) -> PaginatedResult[Any]:
    return PaginatedResult[Any](records=[], total=0, current=params.page, size=params.limit)


def _extract_total(payload: dict[str, Any], fallback: int) -> int:
    """读取 `totalCount`，兼容数字字符串与整数值浮点数。"""
    total = payload.get("totalCount")
    # bool 是 int 的子类，需要单独排除。
    if isinstance(total, bool):
        return fallback
    if isinstance(total, int):
        return total if total >= 0 else fallback
    if isinstance(total, float):
        return int(total) if total.is_integer() and total >= 0 else fallback
    if isinstance(total, str) and total.strip().isdigit():
        return int(total.strip())
    return fallback


def _validate_rows(records: list[Any], item_type: type[T]) -> list[Any]:
    """逐行校验为实体模型，校验失败的行保留原始数据，不丢弃。"""
    adapter = TypeAdapter(item_type)
    rows: list[Any] = []
    failed = 0
    for record in records:
        try:
            rows.append(adapter.validate_python(record))
        except ValidationError:
            failed += 1
            rows.append(record)
    if failed:
        logger.warning("%s of %s records failed validation as %s, kept raw", failed, len(records), item_type.__name__)
    return rows


def to_paginated(payload: Any, params: SearchParams, item_type: type[T] | None = None) -> PaginatedResult[T]:
    """将旧接口列表结构转换为统一分页结构。

    1. `records` 取 `list`，缺失或非数组时为空页（total 为 0）。
    2. `total` 取 `totalCount`，缺失或非数字时回退为当前页记录数。
    3. `current` / `size` 直接回显请求参数，保持分页器与请求一致。
    4. 不抛异常：单行校验失败时该行以原始数据保留，总数仍以服务端为准。

    只能在请求通道返回处调用一次，不能对自身输出再次调用。
    """
    records = payload.get("list") if isinstance(payload, dict) else None
    if not isinstance(records, list):
        logger.warning("list payload missing `list`, degrade to empty page type=%s", type(payload).__name__)
        return _empty_page(params)

    if item_type is not None:
        records = _validate_rows(records, item_type)

    return PaginatedResult[Any](
        records=list(records),
        total=_extract_total(payload, len(records)),
        current=params.page,
        size=params.limit,
    )


def unwrap_data_envelope(payload: Any) -> Any:
    """拆解可选的二次 `data` 包裹；空值统一返回空列表。"""
    if isinstance(payload, dict) and "data" in payload:
        return payload["data"] or []
    return payload or []


def to_records(records: Any, item_type: type[T]) -> list[Any]:
    """将不分页的数组结果校验为实体列表，校验失败的行保留原始数据，非数组时降级为空列表。"""
    if not isinstance(records, list):
        if records is not None:
            logger.warning("unexpected records type=%s, degrade to empty list", type(records).__name__)
        return []
    return _validate_rows(records, item_type)
