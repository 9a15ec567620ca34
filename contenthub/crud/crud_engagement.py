# contenthub/crud/crud_engagement.py

import logging
from typing import List, Optional, Tuple

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from contenthub.models.engagement import PostLike, PostView
from contenthub.models.post import Post

logger = logging.getLogger(__name__)

def build_viewer_key(user_id: Optional[str], ip_address: str, session_id: Optional[str]) -> str:
    """Identity a view is de-duplicated on: the user when signed in, else ip + session"""
    if user_id:
        return f"user:{user_id}"
    return f"anon:{ip_address}:{session_id or ''}"

def _bump_counter(db: Session, post_id: str, column, delta: int) -> None:
    db.query(Post)\
      .filter(Post.id == post_id)\
      .update({column: column + delta}, synchronize_session=False)

def _find_view(db: Session, post_id: str, viewer_key: str):
    return db.query(PostView.id).filter(
        PostView.post_id == post_id,
        PostView.viewer_key == viewer_key
    ).first()

def record_view(
    db: Session,
    post_id: str,
    user_id: Optional[str],
    ip_address: str,
    session_id: Optional[str] = None,
) -> bool:
    """
    Record one view of a post per viewer identity.

    The view row and the counter increment are committed together. A repeat
    view from the same identity hits the (post_id, viewer_key) unique
    constraint and leaves the counter untouched.

    Returns:
        bool: True when a new view was counted
    """
    viewer_key = build_viewer_key(user_id, ip_address, session_id)
    if _find_view(db, post_id, viewer_key):
        return False

    try:
        with db.begin_nested():
            db.add(PostView(
                post_id=post_id,
                user_id=user_id,
                ip_address=ip_address,
                session_id=session_id,
                viewer_key=viewer_key,
            ))
            db.flush()
    except IntegrityError:
        logger.info(f"Concurrent view of post {post_id} by {viewer_key} already counted")
        return False

    _bump_counter(db, post_id, Post.view_count, 1)
    db.commit()
    logger.info(f"View of post {post_id} recorded for {viewer_key}")
    return True

def get_like_count(db: Session, post_id: str) -> int:
    count = db.query(Post.like_count).filter(Post.id == post_id).scalar()
    return count or 0

def _remove_like(db: Session, post_id: str, user_id: str) -> int:
    return db.query(PostLike).filter(
        PostLike.post_id == post_id,
        PostLike.user_id == user_id
    ).delete(synchronize_session=False)

def toggle_like(db: Session, post_id: str, user_id: str) -> Tuple[bool, int]:
    """
    Flip the like state of (post, user).

    Returns:
        Tuple[bool, int]: whether the post is now liked, and its like count
    """
    deleted = _remove_like(db, post_id, user_id)

    if deleted:
        _bump_counter(db, post_id, Post.like_count, -deleted)
        db.commit()
        logger.info(f"User {user_id} unliked post {post_id}")
        return False, get_like_count(db, post_id)

    try:
        with db.begin_nested():
            db.add(PostLike(post_id=post_id, user_id=user_id))
            db.flush()
    except IntegrityError:
        # A parallel request from the same user inserted the like first
        logger.info(f"Concurrent like of post {post_id} by user {user_id} already recorded")
        return True, get_like_count(db, post_id)

    _bump_counter(db, post_id, Post.like_count, 1)
    db.commit()
    logger.info(f"User {user_id} liked post {post_id}")
    return True, get_like_count(db, post_id)

def has_liked(db: Session, post_id: str, user_id: str) -> bool:
    return db.query(PostLike.id).filter(
        PostLike.post_id == post_id,
        PostLike.user_id == user_id
    ).first() is not None

def get_user_likes(db: Session, user_id: str) -> List[str]:
    """Ids of every post the user currently likes"""
    return [row.post_id for row in db.query(PostLike.post_id).filter(PostLike.user_id == user_id).all()]
