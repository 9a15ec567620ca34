# contenthub/db/base.py
# Import every model so Base.metadata knows all tables (create_all, Alembic).

from contenthub.db.base_class import Base
from contenthub.models.user import User
from contenthub.models.category import Category
from contenthub.models.post import Post, Comment, PostFile
from contenthub.models.engagement import PostView, PostLike
from contenthub.models.site_setting import SiteSetting

__all__ = [
    "Base",
    "User",
    "Category",
    "Post",
    "Comment",
    "PostFile",
    "PostView",
    "PostLike",
    "SiteSetting",
]
