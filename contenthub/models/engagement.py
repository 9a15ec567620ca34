# contenthub/models/engagement.py

from sqlalchemy import Column, String, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from contenthub.db.base_class import Base, generate_uuid, utcnow

class PostView(Base):
    """One row per distinct viewer of a post"""
    __tablename__ = "post_views"

    id = Column(String(36), primary_key=True, index=True, default=generate_uuid)
    post_id = Column(String(36), ForeignKey("posts.id", ondelete="CASCADE"), nullable=False)
    user_id = Column(String(255), ForeignKey("users.id", ondelete="SET NULL"))
    ip_address = Column(String(64), nullable=False)
    session_id = Column(String(64))
    # "user:<id>" for signed-in viewers, "anon:<ip>:<session>" otherwise
    viewer_key = Column(String(400), nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    post = relationship("Post", back_populates="views")

    __table_args__ = (UniqueConstraint('post_id', 'viewer_key', name='post_views_unique_viewer'),)

class PostLike(Base):
    """Model for post likes"""
    __tablename__ = "post_likes"

    id = Column(String(36), primary_key=True, index=True, default=generate_uuid)
    post_id = Column(String(36), ForeignKey("posts.id", ondelete="CASCADE"), nullable=False)
    user_id = Column(String(255), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    post = relationship("Post", back_populates="likes")
    user = relationship("User", back_populates="likes")

    __table_args__ = (UniqueConstraint('post_id', 'user_id', name='post_likes_unique'),)
