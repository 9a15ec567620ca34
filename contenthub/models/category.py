# contenthub/models/category.py

from sqlalchemy import Boolean, Column, String, Text, DateTime
from sqlalchemy.orm import relationship
from contenthub.db.base_class import Base, generate_uuid, utcnow

class Category(Base):
    __tablename__ = "categories"

    id = Column(String(36), primary_key=True, index=True, default=generate_uuid)
    name = Column(String(255), unique=True, index=True, nullable=False)
    description = Column(Text)
    color = Column(String(50), nullable=False, default="blue")
    is_default = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(timezone=True), default=utcnow)

    posts = relationship("Post", back_populates="category")
