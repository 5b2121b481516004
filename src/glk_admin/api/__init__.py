"""旧后台接口适配函数导出集合。"""

from glk_admin.api.departments import fetch_admin_dept_list, fetch_dept_tree
from glk_admin.api.dictionaries import fetch_dict_detail_page
from glk_admin.api.menus import (
    delete_menu,
    fetch_admin_menu_tree,
    fetch_all_menus,
    fetch_menu_by_role,
    fetch_route_menus,
    save_or_update_menu,
)
from glk_admin.api.roles import (
    assign_role_users,
    delete_role,
    fetch_admin_role_list,
    fetch_admin_role_simple_list,
    save_or_update_role,
)
from glk_admin.api.users import (
    add_admin_user,
    change_admin_user_status,
    fetch_admin_user_biz_list,
    fetch_admin_user_list,
    reset_admin_user_password,
    update_admin_user,
)

__all__ = [
    "fetch_dict_detail_page",
    "fetch_admin_user_list",
    "fetch_admin_user_biz_list",
    "change_admin_user_status",
    "reset_admin_user_password",
    "add_admin_user",
    "update_admin_user",
    "fetch_admin_dept_list",
    "fetch_dept_tree",
    "fetch_admin_role_simple_list",
    "fetch_admin_role_list",
    "save_or_update_role",
    "delete_role",
    "assign_role_users",
    "fetch_admin_menu_tree",
    "fetch_menu_by_role",
    "fetch_all_menus",
    "fetch_route_menus",
    "save_or_update_menu",
    "delete_menu",
]
