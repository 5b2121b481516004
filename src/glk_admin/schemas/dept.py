"""部门相关结构。"""

from pydantic import Field

from glk_admin.schemas.common import LegacyRecord


class AdminDeptItem(LegacyRecord):
    """部门下拉选项。"""

    id: int | str = Field(description="部门 ID。")
    dept_name: str = Field(description="部门名称。")
