"""角色管理接口（兼容旧项目 roleManagement）。

注意：角色下拉列表走不带 /glk 前缀的旧路由，与分页列表不是同一个后端入口，
两条路由需要分别保留。
"""

from glk_admin.schemas.common import BatchDeleteRequest, PaginatedResult
from glk_admin.schemas.role import (
    AdminRoleAssignUserRequest,
    AdminRoleItem,
    AdminRoleSaveRequest,
    AdminRoleSearchParams,
    AdminRoleSimpleItem,
)
from glk_admin.transport import Transport
from glk_admin.utils.response import to_paginated, to_records

# 下拉场景一次性拉取全部角色。
SIMPLE_LIST_PARAMS = {"page": 1, "limit": 1000}


async def fetch_admin_role_simple_list(transport: Transport) -> list[AdminRoleSimpleItem]:
    """角色简易列表，用于“角色”下拉选择，对接 /admin/role/list。"""
    data = await transport.post("/admin/role/list", params=dict(SIMPLE_LIST_PARAMS))
    records = data.get("list") if isinstance(data, dict) else None
    return to_records(records or [], AdminRoleSimpleItem)


async def fetch_admin_role_list(
    transport: Transport,
    params: AdminRoleSearchParams,
) -> PaginatedResult[AdminRoleItem]:
    """获取角色分页列表，对接 /glk/admin/role/list。"""
    data = await transport.post("/glk/admin/role/list", params=params.to_legacy())
    return to_paginated(data, params, AdminRoleItem)


async def save_or_update_role(transport: Transport, payload: AdminRoleSaveRequest) -> None:
    """新增/编辑角色，成功提示由页面自行处理。"""
    await transport.post("/glk/admin/role/addAndUpdate", data=payload.to_legacy(), notify_on_success=False)


async def delete_role(transport: Transport, payload: BatchDeleteRequest) -> None:
    """删除角色。"""
    await transport.post("/glk/admin/role/delete", data=payload.to_legacy())


async def assign_role_users(transport: Transport, payload: AdminRoleAssignUserRequest) -> None:
    """角色关联员工。"""
    await transport.post("/glk/admin/role/assignUser", data=payload.to_legacy(), notify_on_success=True)
