"""数据字典接口（兼容旧项目 /admin/sys/dictDetail/* 接口）。"""

from glk_admin.schemas.common import PaginatedResult
from glk_admin.schemas.dictionary import DictDetailItem, DictDetailSearchParams
from glk_admin.transport import Transport
from glk_admin.utils.response import to_paginated


async def fetch_dict_detail_page(
    transport: Transport,
    params: DictDetailSearchParams,
) -> PaginatedResult[DictDetailItem]:
    """字典明细分页查询，对接 /admin/sys/dictDetail/getDictDetailPage。"""
    data = await transport.get("/glk/admin/sys/dictDetail/getDictDetailPage", params=params.to_legacy())
    return to_paginated(data, params, DictDetailItem)
