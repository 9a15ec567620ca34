# contenthub/db/session.py

import logging
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from contenthub.core.config import settings

logger = logging.getLogger(__name__)

SQLALCHEMY_DATABASE_URL = settings.DATABASE_URL

connect_args = {}
if SQLALCHEMY_DATABASE_URL.startswith("sqlite"):
    connect_args = {"check_same_thread": False}

engine = create_engine(SQLALCHEMY_DATABASE_URL, connect_args=connect_args, pool_pre_ping=True)

@event.listens_for(engine, "connect")
def connect(dbapi_connection, connection_record):
    if engine.dialect.name == "sqlite":
        # SQLite ignores ON DELETE CASCADE unless foreign keys are switched on per connection
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()
    logger.info("Database connection established")

@event.listens_for(engine, "close")
def close(dbapi_connection, connection_record):
    logger.info("Database connection closed")

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

def dispose_engine():
    engine.dispose()
    logger.info("Database engine disposed")
