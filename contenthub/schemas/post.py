# contenthub/schemas/post.py
from datetime import datetime
from typing import List, Optional

from pydantic import Field, field_validator

from contenthub.schemas.base import ApiModel
from contenthub.schemas.category import Category
from contenthub.schemas.user import User

class PostBase(ApiModel):
    """Fields a client may set on a post"""
    title: str = Field(..., min_length=1, max_length=255)
    short_description: str = Field(..., min_length=1)
    content: str = Field(..., min_length=1)
    type: str = Field("post", min_length=1, max_length=50)
    published: bool = True

class PostCreate(PostBase):
    category_id: Optional[str] = None
    cover_image: Optional[str] = None

    @field_validator("category_id", mode="before")
    @classmethod
    def blank_category_is_none(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v

class PostUpdate(ApiModel):
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    short_description: Optional[str] = Field(None, min_length=1)
    content: Optional[str] = Field(None, min_length=1)
    type: Optional[str] = Field(None, min_length=1, max_length=50)
    category_id: Optional[str] = None
    published: Optional[bool] = None

class Post(PostBase):
    id: str
    cover_image: Optional[str] = None
    author_id: str
    category_id: str
    view_count: int = 0
    like_count: int = 0
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

class PostFile(ApiModel):
    id: str
    post_id: str
    filename: str
    original_name: str
    mime_type: str
    size: int
    created_at: Optional[datetime] = None

class CommentCreate(ApiModel):
    content: str = Field(..., min_length=1, max_length=5000)

class Comment(ApiModel):
    id: str
    post_id: str
    author_id: str
    content: str
    created_at: Optional[datetime] = None

class CommentWithAuthor(Comment):
    author: User

class PostWithDetails(Post):
    """A post joined with its author, category, comments and files"""
    author: User
    category: Category
    comments: List[CommentWithAuthor] = []
    files: List[PostFile] = []
    is_liked: Optional[bool] = None

class LikeResult(ApiModel):
    liked: bool
    like_count: int
