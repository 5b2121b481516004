"""部门接口。"""

from typing import Any

from glk_admin.schemas.dept import AdminDeptItem
from glk_admin.transport import Transport
from glk_admin.utils.response import to_records


async def fetch_admin_dept_list(transport: Transport) -> list[AdminDeptItem]:
    """部门简易列表，用于“所属部门”下拉选择。旧接口直接返回数组。"""
    data = await transport.get("/glk/admin/sys/dept/list")
    return to_records(data, AdminDeptItem)


async def fetch_dept_tree(transport: Transport) -> Any:
    """机构树（数据权限使用），嵌套结构原样返回。"""
    return await transport.get("/glk/admin/sys/dept/treeList")
