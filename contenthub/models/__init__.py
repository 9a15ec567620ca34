# contenthub/models/__init__.py
from contenthub.models.user import User
from contenthub.models.category import Category
from contenthub.models.post import Post, Comment, PostFile
from contenthub.models.engagement import PostView, PostLike
from contenthub.models.site_setting import SiteSetting

__all__ = [
    "User",
    "Category",
    "Post",
    "Comment",
    "PostFile",
    "PostView",
    "PostLike",
    "SiteSetting",
]
