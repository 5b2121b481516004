"""后台用户相关结构。"""

from pydantic import Field

from glk_admin.schemas.common import BaseSchema, LegacyFlag, LegacyRecord, SearchParams, normalize_flag


class AdminUserItem(LegacyRecord):
    """后台用户列表项。"""

    id: int | str = Field(description="用户 ID。")
    account: str = Field(description="登录账号。")
    role_name: str | None = Field(default=None, description="角色名称。")
    dept_name: str | None = Field(default=None, description="所属部门名称。")
    role_id: int | str | None = Field(default=None, description="角色 ID。")
    dept_id: int | str | None = Field(default=None, description="所属部门 ID。")
    is_forbidden: LegacyFlag | None = Field(default=None, description="禁用标记，类型随后端而变。")
    create_time: str | int | None = Field(default=None, description="创建时间。")
    last_login_time: str | int | None = Field(default=None, description="最近登录时间。")

    @property
    def forbidden(self) -> bool:
        """是否已禁用。"""
        return normalize_flag(self.is_forbidden)


class AdminUserSearchParams(SearchParams):
    """后台用户搜索参数。"""

    account: str | None = Field(default=None, description="按账号模糊搜索。")
    phone: str | None = Field(default=None, description="按手机号搜索。")


class AdminUserStatusRequest(BaseSchema):
    """修改用户状态请求体。"""

    user_id: int = Field(description="用户 ID。")
    is_forbidden: str | int = Field(description="禁用标记，沿用旧接口 0/1 或字符串取值。")


class AdminUserPasswordResetRequest(BaseSchema):
    """重置用户密码请求体。"""

    id: int | str = Field(description="用户 ID。")


class AdminUserCreateRequest(BaseSchema):
    """新增后台用户请求体。"""

    account: str = Field(min_length=1, description="登录账号。")
    role_id: int | str = Field(description="角色 ID。")
    dept_id: int | str = Field(description="所属部门 ID。")


class AdminUserUpdateRequest(AdminUserCreateRequest):
    """编辑后台用户请求体。"""

    user_id: int | str = Field(description="用户 ID。")
