# contenthub/crud/__init__.py

from .crud_user import (
    get_user,
    get_user_by_email,
    get_all_users,
    upsert_user,
    update_user,
    update_user_admin_status,
)
from .crud_category import (
    get_categories,
    get_category,
    get_category_by_name,
    get_default_category,
    create_category,
    update_category,
    count_category_posts,
    delete_category,
    ensure_default_category,
)
from .crud_post import (
    get_posts,
    get_post,
    get_user_posts,
    create_post,
    update_post,
    delete_post,
)
from .crud_comment import (
    get_post_comments,
    get_comment,
    create_comment,
    delete_comment,
)
from .crud_file import (
    add_post_file,
    add_post_files,
    get_post_files,
    get_post_file,
    delete_post_file,
)
from .crud_engagement import (
    record_view,
    toggle_like,
    has_liked,
    get_like_count,
    get_user_likes,
)
from .crud_site_setting import get_setting, set_setting


__all__ = [
    "get_user", "get_user_by_email", "get_all_users", "upsert_user", "update_user",
    "update_user_admin_status",
    "get_categories", "get_category", "get_category_by_name", "get_default_category",
    "create_category", "update_category", "count_category_posts", "delete_category",
    "ensure_default_category",
    "get_posts", "get_post", "get_user_posts", "create_post", "update_post", "delete_post",
    "get_post_comments", "get_comment", "create_comment", "delete_comment",
    "add_post_file", "add_post_files", "get_post_files", "get_post_file", "delete_post_file",
    "record_view", "toggle_like", "has_liked", "get_like_count", "get_user_likes",
    "get_setting", "set_setting",
]
