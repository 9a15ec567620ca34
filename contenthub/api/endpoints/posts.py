# contenthub/api/endpoints/posts.py

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, File, Form, HTTPException, Query, Request, UploadFile
from sqlalchemy.orm import Session

from contenthub import crud, schemas
from contenthub.api import deps
from contenthub.core.permissions import can_modify
from contenthub.models.post import Post
from contenthub.models.user import User
from contenthub.utils.uploads import remove_upload, save_upload, save_uploads

logger = logging.getLogger(__name__)
router = APIRouter()


def get_post_or_404(db: Session, post_id: str) -> Post:
    post = crud.get_post(db, post_id)
    if post is None:
        logger.warning(f"Post {post_id} not found")
        raise HTTPException(status_code=404, detail="Post not found")
    return post


def check_category(db: Session, category_id: Optional[str]) -> None:
    if category_id and crud.get_category(db, category_id) is None:
        raise HTTPException(status_code=400, detail="Category not found")


def check_can_modify(user: User, post: Post) -> None:
    if not can_modify(user, post.author_id):
        logger.warning(f"User {user.id} may not modify post {post.id}")
        raise HTTPException(status_code=403, detail="Access denied")


def with_like_state(posts: List[Post], user: Optional[User], db: Session) -> List[schemas.PostWithDetails]:
    liked = set(crud.get_user_likes(db, user.id)) if user else set()
    results = []
    for post in posts:
        item = schemas.PostWithDetails.model_validate(post)
        if user:
            item.is_liked = post.id in liked
        results.append(item)
    return results


@router.get("", response_model=List[schemas.PostWithDetails])
def read_posts(
    category_id: Optional[str] = Query(None, alias="categoryId"),
    limit: int = Query(10, ge=1, le=100),
    offset: int = Query(0, ge=0),
    db: Session = Depends(deps.get_db),
    user: Optional[User] = Depends(deps.get_optional_user),
):
    posts = crud.get_posts(db, category_id=category_id, limit=limit, offset=offset)
    return with_like_state(posts, user, db)


@router.get("/my-posts", response_model=List[schemas.PostWithDetails])
def read_my_posts(
    db: Session = Depends(deps.get_db),
    current_user: User = Depends(deps.get_current_user),
):
    posts = crud.get_user_posts(db, current_user.id)
    return with_like_state(posts, current_user, db)


@router.get("/{post_id}", response_model=schemas.PostWithDetails)
def read_post(
    post_id: str,
    request: Request,
    db: Session = Depends(deps.get_db),
    user: Optional[User] = Depends(deps.get_optional_user),
):
    """
    Return a post with its details and count the caller's view.

    The response carries the counters as they were before this view.
    """
    post = get_post_or_404(db, post_id)
    result = with_like_state([post], user, db)[0]

    crud.record_view(
        db,
        post_id=post.id,
        user_id=user.id if user else None,
        ip_address=deps.get_client_ip(request),
        session_id=deps.get_session_id(request),
    )
    return result


@router.post("", response_model=schemas.Post)
def create_post(
    title: str = Form(..., min_length=1, max_length=255),
    short_description: str = Form(..., alias="shortDescription", min_length=1),
    content: str = Form(..., min_length=1),
    category_id: Optional[str] = Form(None, alias="categoryId"),
    published: bool = Form(True),
    type: str = Form("post", min_length=1, max_length=50),
    cover_image: Optional[UploadFile] = File(None, alias="coverImage"),
    db: Session = Depends(deps.get_db),
    current_user: User = Depends(deps.get_current_user),
):
    data = schemas.PostCreate(
        title=title,
        short_description=short_description,
        content=content,
        category_id=category_id,
        published=published,
        type=type,
    )
    check_category(db, data.category_id)

    stored = None
    if cover_image is not None and cover_image.filename:
        stored = save_upload(cover_image)
        data.cover_image = stored.url

    try:
        return crud.create_post(db, data, author_id=current_user.id)
    except Exception as e:
        logger.error(f"Error creating post: {str(e)}", exc_info=True)
        db.rollback()
        if stored:
            remove_upload(stored.filename)
        raise HTTPException(status_code=500, detail="Failed to create post")


@router.put("/{post_id}", response_model=schemas.Post)
def update_post(
    post_id: str,
    post_in: schemas.PostUpdate,
    db: Session = Depends(deps.get_db),
    current_user: User = Depends(deps.get_current_user),
):
    post = get_post_or_404(db, post_id)
    check_can_modify(current_user, post)
    if "category_id" in post_in.model_fields_set:
        if not post_in.category_id:
            raise HTTPException(status_code=400, detail="Category not found")
        check_category(db, post_in.category_id)
    return crud.update_post(db, post_id, post_in)


@router.delete("/{post_id}")
def delete_post(
    post_id: str,
    db: Session = Depends(deps.get_db),
    current_user: User = Depends(deps.get_current_user),
):
    post = get_post_or_404(db, post_id)
    check_can_modify(current_user, post)

    stored_files = [f.filename for f in post.files]
    if post.cover_image:
        stored_files.append(post.cover_image)

    crud.delete_post(db, post_id)
    for filename in stored_files:
        remove_upload(filename)
    return {"message": "Post deleted successfully"}


@router.post("/{post_id}/like", response_model=schemas.LikeResult)
def toggle_like(
    post_id: str,
    db: Session = Depends(deps.get_db),
    current_user: User = Depends(deps.get_current_user),
):
    get_post_or_404(db, post_id)
    liked, like_count = crud.toggle_like(db, post_id, current_user.id)
    return schemas.LikeResult(liked=liked, like_count=like_count)


@router.get("/{post_id}/comments", response_model=List[schemas.CommentWithAuthor])
def read_comments(post_id: str, db: Session = Depends(deps.get_db)):
    get_post_or_404(db, post_id)
    return crud.get_post_comments(db, post_id)


@router.post("/{post_id}/comments", response_model=schemas.Comment)
def create_comment(
    post_id: str,
    comment: schemas.CommentCreate,
    db: Session = Depends(deps.get_db),
    current_user: User = Depends(deps.get_current_user),
):
    get_post_or_404(db, post_id)
    return crud.create_comment(db, post_id=post_id, author_id=current_user.id, content=comment.content)


@router.post("/{post_id}/files", response_model=List[schemas.PostFile])
def upload_post_files(
    post_id: str,
    files: List[UploadFile] = File(...),
    db: Session = Depends(deps.get_db),
    current_user: User = Depends(deps.get_current_user),
):
    post = get_post_or_404(db, post_id)
    check_can_modify(current_user, post)

    stored = save_uploads(files)
    try:
        return crud.add_post_files(db, post_id, stored)
    except Exception as e:
        logger.error(f"Error attaching files to post {post_id}: {str(e)}", exc_info=True)
        db.rollback()
        for item in stored:
            remove_upload(item.filename)
        raise HTTPException(status_code=500, detail="Failed to upload files")
