# contenthub/api/endpoints/articles.py

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile
from sqlalchemy.orm import Session

from contenthub import crud, schemas
from contenthub.api import deps
from contenthub.api.endpoints.posts import check_category
from contenthub.models.user import User
from contenthub.utils.uploads import remove_upload, save_uploads

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("", response_model=schemas.Post)
def create_article(
    title: str = Form(..., min_length=1, max_length=255),
    short_description: str = Form(..., alias="shortDescription", min_length=1),
    content: str = Form(..., min_length=1),
    category_id: Optional[str] = Form(None, alias="categoryId"),
    published: bool = Form(True),
    images: Optional[List[UploadFile]] = File(None),
    db: Session = Depends(deps.get_db),
    current_user: User = Depends(deps.get_current_user),
):
    """Create an article; attached images are stored as post files, there is no cover image."""
    data = schemas.PostCreate(
        title=title,
        short_description=short_description,
        content=content,
        category_id=category_id,
        published=published,
        type="article",
    )
    check_category(db, data.category_id)

    stored = save_uploads(images)
    try:
        article = crud.create_post(db, data, author_id=current_user.id)
        if stored:
            crud.add_post_files(db, article.id, stored)
    except Exception as e:
        logger.error(f"Error creating article: {str(e)}", exc_info=True)
        db.rollback()
        for item in stored:
            remove_upload(item.filename)
        raise HTTPException(status_code=500, detail="Failed to create article")

    db.refresh(article)
    return article
