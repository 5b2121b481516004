"""菜单管理接口（兼容旧项目 menuManagement）。"""

from typing import Any

from glk_admin.schemas.common import BatchDeleteRequest
from glk_admin.schemas.menu import AdminMenuSaveRequest, AdminMenuTreeParams, RoleMenuQuery
from glk_admin.transport import Transport
from glk_admin.utils.response import unwrap_data_envelope


async def fetch_admin_menu_tree(transport: Transport, params: AdminMenuTreeParams | None = None) -> Any:
    """获取带子节点的菜单树，对接 /admin/menu/getMenuAllHasChild。

    该接口部分环境会再包一层 `data`，这里拆掉后原样返回嵌套结构。
    """
    query = params.to_legacy() if params is not None else {}
    res = await transport.post("/glk/admin/menu/getMenuAllHasChild", params=query or None)
    return unwrap_data_envelope(res)


async def fetch_menu_by_role(transport: Transport, payload: RoleMenuQuery) -> Any:
    """根据角色获取菜单树。"""
    return await transport.post("/glk/admin/menu/getMenuAllByRole", data=payload.to_legacy())


async def fetch_all_menus(transport: Transport) -> Any:
    """获取全部菜单树，用于角色菜单权限配置。"""
    return await transport.post("/glk/admin/menu/getMenuAll")


async def fetch_route_menus(transport: Transport) -> Any:
    """获取当前角色可访问的路由菜单。"""
    return await transport.post("/glk/admin/menu/getRouteByRole")


async def save_or_update_menu(transport: Transport, payload: AdminMenuSaveRequest) -> None:
    """新增/编辑菜单。"""
    await transport.post("/glk/admin/menu/addAndUpdate", data=payload.to_legacy())


async def delete_menu(transport: Transport, payload: BatchDeleteRequest) -> None:
    """删除菜单。"""
    await transport.post("/glk/admin/menu/delete", data=payload.to_legacy())
