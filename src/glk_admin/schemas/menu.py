"""菜单管理相关结构。"""

from enum import IntEnum

from pydantic import Field

from glk_admin.schemas.common import BaseSchema, LegacyRecord


class MenuType(IntEnum):
    """菜单类型。"""

    MENU = 1  # 页面菜单。
    BUTTON = 2  # 按钮权限点。


class AdminMenuItem(LegacyRecord):
    """菜单树节点。"""

    id: int | str = Field(description="菜单 ID。")
    pid: int | str | None = Field(default=None, description="父级菜单 ID。")
    name: str = Field(description="菜单名称。")
    path: str = Field(description="路由路径。")
    describes: str | None = Field(default=None, description="菜单描述。")
    sort: int | None = Field(default=None, description="排序值。")
    menu_type: int | None = Field(default=None, description="菜单类型，1 菜单 2 按钮。")
    child_menu: list["AdminMenuItem"] | None = Field(default=None, description="子菜单。")


class AdminMenuTreeParams(BaseSchema):
    """菜单树查询参数，旧接口可选分页。"""

    page: int | None = Field(default=None, ge=1, description="页码。")
    limit: int | None = Field(default=None, ge=1, description="每页条数。")


class AdminMenuSaveRequest(BaseSchema):
    """新增/编辑菜单请求体，携带 id 时为编辑。"""

    id: int | None = Field(default=None, description="菜单 ID。")
    pid: int | None = Field(default=None, description="父级菜单 ID。")
    name: str | None = Field(default=None, description="菜单名称。")
    path: str | None = Field(default=None, description="路由路径。")
    describes: str | None = Field(default=None, description="菜单描述。")
    sort: int | None = Field(default=None, description="排序值。")
    menu_type: MenuType | None = Field(default=None, description="菜单类型。")


class RoleMenuQuery(BaseSchema):
    """按角色查询菜单树的请求体。"""

    id: int | str = Field(description="角色 ID。")
