"""后台用户管理接口（兼容旧项目 adminManagement）。

字段命名与旧接口保持一致，列表结果统一转换为分页结构。
"""

from typing import Any

from glk_admin.schemas.common import PaginatedResult
from glk_admin.schemas.user import (
    AdminUserCreateRequest,
    AdminUserItem,
    AdminUserPasswordResetRequest,
    AdminUserSearchParams,
    AdminUserStatusRequest,
    AdminUserUpdateRequest,
)
from glk_admin.transport import Transport
from glk_admin.utils.response import to_paginated


async def fetch_admin_user_list(
    transport: Transport,
    params: AdminUserSearchParams,
) -> PaginatedResult[AdminUserItem]:
    """获取后台用户列表，对接 /admin/user/list/admin。"""
    data = await transport.post("/glk/admin/user/list/admin", params=params.to_legacy())
    return to_paginated(data, params, AdminUserItem)


async def change_admin_user_status(transport: Transport, payload: AdminUserStatusRequest) -> None:
    """修改用户禁用状态。"""
    await transport.post("/glk/admin/user/forbidden/admin", data=payload.to_legacy(), notify_on_success=True)


async def reset_admin_user_password(transport: Transport, payload: AdminUserPasswordResetRequest) -> None:
    """重置用户密码。"""
    await transport.post("/glk/admin/user/password/reset", data=payload.to_legacy(), notify_on_success=True)


async def add_admin_user(transport: Transport, payload: AdminUserCreateRequest) -> None:
    """新增后台用户。"""
    await transport.post("/glk/admin/user/add", data=payload.to_legacy(), notify_on_success=True)


async def update_admin_user(transport: Transport, payload: AdminUserUpdateRequest) -> None:
    """编辑后台用户。"""
    await transport.post("/glk/admin/user/update", data=payload.to_legacy(), notify_on_success=True)


async def fetch_admin_user_biz_list(transport: Transport, params: dict[str, Any]) -> Any:
    """业务员工列表。

    旧接口入参与返回均无固定结构，这里不做类型约束，原样透传。
    """
    return await transport.post("/glk/admin/user/list/biz", params=params)
