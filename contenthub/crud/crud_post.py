# contenthub/crud/crud_post.py

import logging
from typing import List, Optional

from sqlalchemy import desc
from sqlalchemy.orm import Query, Session, joinedload, selectinload

from contenthub.crud.crud_category import ensure_default_category
from contenthub.models.post import Comment, Post
from contenthub.schemas.post import PostCreate, PostUpdate

logger = logging.getLogger(__name__)

def _with_details(query: Query) -> Query:
    """Eager-load everything a "post with details" response needs"""
    return query.options(
        joinedload(Post.author),
        joinedload(Post.category),
        selectinload(Post.comments).joinedload(Comment.author),
        selectinload(Post.files),
    )

def get_posts(
    db: Session,
    category_id: Optional[str] = None,
    limit: int = 10,
    offset: int = 0,
) -> List[Post]:
    """Published posts, newest first, optionally restricted to one category"""
    query = _with_details(db.query(Post)).filter(Post.published.is_(True))
    if category_id:
        query = query.filter(Post.category_id == category_id)
    posts = query.order_by(desc(Post.created_at), desc(Post.id))\
                 .offset(offset)\
                 .limit(limit)\
                 .all()
    logger.info(f"Retrieved {len(posts)} posts (category={category_id}, limit={limit}, offset={offset})")
    return posts

def get_post(db: Session, post_id: str) -> Optional[Post]:
    return _with_details(db.query(Post)).filter(Post.id == post_id).first()

def get_user_posts(db: Session, user_id: str) -> List[Post]:
    """All posts of one author regardless of publish state"""
    return _with_details(db.query(Post))\
        .filter(Post.author_id == user_id)\
        .order_by(desc(Post.created_at), desc(Post.id))\
        .all()

def create_post(db: Session, post: PostCreate, author_id: str) -> Post:
    category_id = post.category_id
    if not category_id:
        category_id = ensure_default_category(db).id

    db_post = Post(
        title=post.title,
        short_description=post.short_description,
        content=post.content,
        cover_image=post.cover_image,
        type=post.type,
        published=post.published,
        author_id=author_id,
        category_id=category_id,
    )
    db.add(db_post)
    db.commit()
    db.refresh(db_post)
    logger.info(f"{db_post.type.capitalize()} created successfully. ID: {db_post.id}")
    return db_post

def update_post(db: Session, post_id: str, post: PostUpdate) -> Optional[Post]:
    db_post = db.query(Post).filter(Post.id == post_id).first()
    if db_post is None:
        return None
    for field, value in post.model_dump(exclude_unset=True, exclude_none=True).items():
        setattr(db_post, field, value)
    db.commit()
    db.refresh(db_post)
    logger.info(f"Post {post_id} updated")
    return db_post

def delete_post(db: Session, post_id: str) -> bool:
    """Delete a post; comments, files, views and likes go with it"""
    db_post = db.query(Post).filter(Post.id == post_id).first()
    if db_post is None:
        return False
    db.delete(db_post)
    db.commit()
    logger.info(f"Post {post_id} deleted")
    return True
