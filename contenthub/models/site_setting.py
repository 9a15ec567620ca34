# contenthub/models/site_setting.py

from sqlalchemy import Column, String, Text, DateTime
from contenthub.db.base_class import Base, generate_uuid, utcnow

class SiteSetting(Base):
    __tablename__ = "site_settings"

    id = Column(String(36), primary_key=True, index=True, default=generate_uuid)
    key = Column(String(255), unique=True, index=True, nullable=False)
    value = Column(Text)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow)
