"""全局通用结构。

旧后台字段统一为驼峰命名，这里以蛇形命名声明属性，通过别名与后端字段对齐。
"""

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# 旧接口中的开关字段可能是布尔、0/1 数字或字符串，边界处保持原样。
LegacyFlag = bool | str | int

_TRUTHY_FLAG_VALUES = {"1", "true", "yes", "y", "on"}


def normalize_flag(value: LegacyFlag | None) -> bool:
    """将混合类型的开关字段统一为布尔值。"""
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return value != 0
    return value.strip().lower() in _TRUTHY_FLAG_VALUES


class BaseSchema(BaseModel):
    """请求参数/请求体基础结构，序列化时输出驼峰字段并剔除空值。"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

    def to_legacy(self) -> dict[str, Any]:
        """导出为旧接口可接受的字段结构。"""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class LegacyRecord(BaseSchema):
    """旧接口返回的实体记录，保留未声明的字段。"""

    model_config = ConfigDict(extra="allow")


class SearchParams(BaseSchema):
    """旧接口通用分页参数（page / limit）。"""

    page: int = Field(default=1, ge=1, description="当前页码（从 1 开始）。")
    limit: int = Field(default=20, ge=1, description="每页条数。")


class BatchDeleteRequest(BaseSchema):
    """删除请求体，单个删除传 id，批量删除传逗号分隔的 ids。"""

    id: int | str | None = Field(default=None, description="单条记录 ID。")
    ids: str | None = Field(default=None, description="批量删除 ID，逗号分隔。")


T = TypeVar("T")


class PaginatedResult(BaseModel, Generic[T]):
    """前端统一分页结构。

    `records` 原样承接服务端当前页数据，不按 `size` 截断；
    后端返回条数超过请求的每页条数时也如实透传。
    """

    records: list[T] = Field(default_factory=list, description="当前页记录，保持服务端顺序。")
    total: int = Field(ge=0, description="总记录数，以服务端为准。")
    current: int = Field(ge=1, description="请求的页码。")
    size: int = Field(ge=1, description="请求的每页条数。")
