# contenthub/db/init_db.py

import logging
from sqlalchemy.orm import Session

from contenthub.db.base import Base
from contenthub.db.session import engine
from contenthub.crud.crud_category import ensure_default_category

logger = logging.getLogger(__name__)

def create_tables():
    Base.metadata.create_all(bind=engine)
    logger.info("Database tables created")

def init_db(db: Session):
    """Create tables and seed the rows the application expects to exist."""
    create_tables()
    category = ensure_default_category(db)
    logger.info(f"Default category ready: {category.name} ({category.id})")
