"""角色管理相关结构。"""

from pydantic import Field

from glk_admin.schemas.common import BaseSchema, LegacyRecord, SearchParams


class AdminRoleItem(LegacyRecord):
    """角色列表项。"""

    id: int | str = Field(description="角色 ID。")
    name: str = Field(description="角色名称。")
    describes: str | None = Field(default=None, description="角色描述。")
    data_scope: str | int | None = Field(default=None, description="数据权限范围。")
    data_scope_dept: str | None = Field(default=None, description="自定义数据权限部门 ID，逗号分隔。")


class AdminRoleSimpleItem(LegacyRecord):
    """角色下拉选项。"""

    id: int | str = Field(description="角色 ID。")
    name: str = Field(description="角色名称。")
    describes: str | None = Field(default=None, description="角色描述。")
    data_scope: int | str | None = Field(default=None, description="数据权限范围。")
    data_scope_dept: str | None = Field(default=None, description="自定义数据权限部门 ID，逗号分隔。")


class AdminRoleSearchParams(SearchParams):
    """角色搜索参数。"""

    name: str | None = Field(default=None, description="按角色名称搜索。")


class AdminRoleSaveRequest(BaseSchema):
    """新增/编辑角色请求体，携带 id 时为编辑。"""

    id: int | str | None = Field(default=None, description="角色 ID。")
    name: str = Field(min_length=1, description="角色名称。")
    describes: str | None = Field(default=None, description="角色描述。")
    menu_id_list: list[int | str] | None = Field(default=None, description="授权菜单 ID 列表。")
    data_scope: str | int | None = Field(default=None, description="数据权限范围。")
    data_scope_dept: str | None = Field(default=None, description="自定义数据权限部门 ID，逗号分隔。")


class AdminRoleAssignUserRequest(BaseSchema):
    """角色关联员工请求体。"""

    role_id: int | str = Field(description="角色 ID。")
    user_id_list: list[int] = Field(default_factory=list, description="关联的员工 ID 列表。")
