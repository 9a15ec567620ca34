from .user import User, UserUpsert, AdminStatusUpdate
from .category import Category, CategoryCreate, CategoryUpdate
from .post import (
    Post,
    PostCreate,
    PostUpdate,
    PostWithDetails,
    PostFile,
    Comment,
    CommentCreate,
    CommentWithAuthor,
    LikeResult,
)
from .site_setting import SettingValue
from .contact import ContactMessage

__all__ = [
    "User", "UserUpsert", "AdminStatusUpdate",
    "Category", "CategoryCreate", "CategoryUpdate",
    "Post", "PostCreate", "PostUpdate", "PostWithDetails", "PostFile",
    "Comment", "CommentCreate", "CommentWithAuthor", "LikeResult",
    "SettingValue",
    "ContactMessage",
]
