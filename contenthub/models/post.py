# contenthub/models/post.py

from sqlalchemy import Boolean, Column, Integer, String, Text, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from contenthub.db.base_class import Base, generate_uuid, utcnow

class Post(Base):
    """Posts and articles; `type` tells them apart."""
    __tablename__ = "posts"

    id = Column(String(36), primary_key=True, index=True, default=generate_uuid)
    title = Column(String(255), nullable=False, index=True)
    short_description = Column(Text, nullable=False)
    content = Column(Text, nullable=False)
    cover_image = Column(String(512))
    type = Column(String(50), nullable=False, default="post")
    author_id = Column(String(255), ForeignKey("users.id"), nullable=False, index=True)
    category_id = Column(String(36), ForeignKey("categories.id"), nullable=False, index=True)
    published = Column(Boolean, nullable=False, default=True)
    # Maintained by the engagement operations, never written by clients
    view_count = Column(Integer, nullable=False, default=0)
    like_count = Column(Integer, nullable=False, default=0)
    created_at = Column(
        DateTime(timezone=True),
        default=utcnow,
        nullable=False,
        index=True
    )
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow)

    author = relationship("User", back_populates="posts")
    category = relationship("Category", back_populates="posts")
    comments = relationship(
        "Comment",
        back_populates="post",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="Comment.created_at.desc()",
    )
    files = relationship(
        "PostFile",
        back_populates="post",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="PostFile.created_at",
    )
    views = relationship("PostView", back_populates="post", cascade="all, delete-orphan", passive_deletes=True)
    likes = relationship("PostLike", back_populates="post", cascade="all, delete-orphan", passive_deletes=True)

class Comment(Base):
    __tablename__ = "comments"

    id = Column(String(36), primary_key=True, index=True, default=generate_uuid)
    post_id = Column(String(36), ForeignKey("posts.id", ondelete="CASCADE"), nullable=False, index=True)
    author_id = Column(String(255), ForeignKey("users.id"), nullable=False)
    content = Column(Text, nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    post = relationship("Post", back_populates="comments")
    author = relationship("User", back_populates="comments")

class PostFile(Base):
    __tablename__ = "post_files"

    id = Column(String(36), primary_key=True, index=True, default=generate_uuid)
    post_id = Column(String(36), ForeignKey("posts.id", ondelete="CASCADE"), nullable=False, index=True)
    filename = Column(String(255), nullable=False)
    original_name = Column(String(255), nullable=False)
    mime_type = Column(String(255), nullable=False)
    size = Column(Integer, nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    post = relationship("Post", back_populates="files")
