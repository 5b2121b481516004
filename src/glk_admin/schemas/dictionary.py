"""数据字典相关结构。"""

from pydantic import Field

from glk_admin.schemas.common import LegacyRecord, SearchParams


class DictDetailItem(LegacyRecord):
    """字典明细项，旧接口字段不固定，未声明字段原样保留。"""

    id: int | str | None = Field(default=None, description="明细 ID。")
    label: str | None = Field(default=None, description="展示文本。")
    value: str | int | None = Field(default=None, description="字典取值。")
    sort: int | None = Field(default=None, description="排序值。")
    dict_name: str | None = Field(default=None, description="所属字典名称。")


class DictDetailSearchParams(SearchParams):
    """字典明细分页查询参数。"""

    dict_name: str = Field(min_length=1, description="字典名称。")
