# contenthub/crud/crud_category.py

import logging
from typing import List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from contenthub.core.config import settings
from contenthub.models.category import Category
from contenthub.models.post import Post
from contenthub.schemas.category import CategoryCreate, CategoryUpdate

logger = logging.getLogger(__name__)

def get_categories(db: Session) -> List[Category]:
    logger.info("Fetching categories")
    return db.query(Category).order_by(Category.name).all()

def get_category(db: Session, category_id: str) -> Optional[Category]:
    return db.query(Category).filter(Category.id == category_id).first()

def get_category_by_name(db: Session, name: str) -> Optional[Category]:
    return db.query(Category).filter(Category.name == name).first()

def get_default_category(db: Session) -> Optional[Category]:
    return db.query(Category).filter(Category.is_default.is_(True)).first()

def create_category(db: Session, category: CategoryCreate) -> Category:
    logger.info(f"Creating new category: {category.name}")
    db_category = Category(
        name=category.name,
        description=category.description,
        color=category.color,
    )
    db.add(db_category)
    db.commit()
    db.refresh(db_category)
    logger.info(f"Category created successfully. ID: {db_category.id}")
    return db_category

def update_category(db: Session, category_id: str, category: CategoryUpdate) -> Optional[Category]:
    db_category = get_category(db, category_id)
    if db_category is None:
        logger.warning(f"Category with ID {category_id} not found")
        return None
    for field, value in category.model_dump(exclude_unset=True).items():
        if value is None and field != "description":
            continue
        setattr(db_category, field, value)
    db.commit()
    db.refresh(db_category)
    logger.info(f"Category {category_id} updated")
    return db_category

def count_category_posts(db: Session, category_id: str) -> int:
    return db.query(Post).filter(Post.category_id == category_id).count()

def delete_category(db: Session, category_id: str) -> bool:
    db_category = get_category(db, category_id)
    if db_category is None:
        return False
    db.delete(db_category)
    db.commit()
    logger.info(f"Category {category_id} deleted")
    return True

def ensure_default_category(db: Session) -> Category:
    """
    Return the default category, creating it on first use.

    Safe to call from concurrent requests: the unique name constraint lets
    only one insert win and the losers re-read the winning row.
    """
    category = get_default_category(db)
    if category is not None:
        return category

    category = get_category_by_name(db, settings.DEFAULT_CATEGORY_NAME)
    if category is not None:
        category.is_default = True
        db.commit()
        db.refresh(category)
        return category

    logger.info(f"Seeding default category '{settings.DEFAULT_CATEGORY_NAME}'")
    category = Category(
        name=settings.DEFAULT_CATEGORY_NAME,
        description=settings.DEFAULT_CATEGORY_DESCRIPTION,
        color=settings.DEFAULT_CATEGORY_COLOR,
        is_default=True,
    )
    try:
        with db.begin_nested():
            db.add(category)
            db.flush()
    except IntegrityError:
        logger.info("Default category was created concurrently, reusing it")
        return get_category_by_name(db, settings.DEFAULT_CATEGORY_NAME)
    db.commit()
    db.refresh(category)
    return category
