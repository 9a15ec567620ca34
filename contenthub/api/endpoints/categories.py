# contenthub/api/endpoints/categories.py

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from contenthub import crud, schemas
from contenthub.api import deps
from contenthub.core.permissions import Capability

logger = logging.getLogger(__name__)

router = APIRouter()

manage_categories = deps.require_capability(Capability.MANAGE_CATEGORIES)


@router.get("", response_model=List[schemas.Category])
def read_categories(db: Session = Depends(deps.get_db)):
    return crud.get_categories(db)


@router.post("", response_model=schemas.Category)
def create_category(
    category: schemas.CategoryCreate,
    db: Session = Depends(deps.get_db),
    admin=Depends(manage_categories),
):
    logger.info(f"Received request to create category: {category.name}")
    if crud.get_category_by_name(db, category.name):
        raise HTTPException(status_code=409, detail="Category already exists")
    try:
        return crud.create_category(db, category)
    except IntegrityError:
        db.rollback()
        raise HTTPException(status_code=409, detail="Category already exists")


@router.put("/{category_id}", response_model=schemas.Category)
def update_category(
    category_id: str,
    category: schemas.CategoryUpdate,
    db: Session = Depends(deps.get_db),
    admin=Depends(manage_categories),
):
    if category.name is not None:
        current = crud.get_category(db, category_id)
        if current is not None and current.is_default and category.name != current.name:
            logger.warning(f"Refusing to rename default category {category_id}")
            raise HTTPException(status_code=409, detail="The default category cannot be renamed")
        existing = crud.get_category_by_name(db, category.name)
        if existing and existing.id != category_id:
            raise HTTPException(status_code=409, detail="Category already exists")
    try:
        db_category = crud.update_category(db, category_id, category)
    except IntegrityError:
        db.rollback()
        raise HTTPException(status_code=409, detail="Category already exists")
    if db_category is None:
        raise HTTPException(status_code=404, detail="Category not found")
    return db_category


@router.delete("/{category_id}")
def delete_category(
    category_id: str,
    db: Session = Depends(deps.get_db),
    admin=Depends(manage_categories),
):
    db_category = crud.get_category(db, category_id)
    if db_category is None:
        raise HTTPException(status_code=404, detail="Category not found")
    if db_category.is_default:
        raise HTTPException(status_code=409, detail="The default category cannot be deleted")
    if crud.count_category_posts(db, category_id):
        logger.warning(f"Refusing to delete category {category_id}: it still has posts")
        raise HTTPException(status_code=409, detail="Category still has posts")
    crud.delete_category(db, category_id)
    return {"message": "Category deleted successfully"}
