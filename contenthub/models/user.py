# contenthub/models/user.py
from sqlalchemy import Boolean, Column, String, DateTime
from sqlalchemy.orm import relationship
from contenthub.db.base_class import Base, utcnow

class User(Base):
    __tablename__ = "users"

    # Assigned by the identity provider
    id = Column(String(255), primary_key=True, index=True)
    email = Column(String(255), unique=True, index=True)
    first_name = Column(String(255))
    last_name = Column(String(255))
    profile_image_url = Column(String(512))
    is_admin = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(timezone=True), default=utcnow)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow)

    posts = relationship("Post", back_populates="author")
    comments = relationship("Comment", back_populates="author")
    likes = relationship("PostLike", back_populates="user")
