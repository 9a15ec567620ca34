# contenthub/crud/crud_comment.py
import logging
from typing import List, Optional

from sqlalchemy import desc
from sqlalchemy.orm import Session, joinedload

from contenthub.models.post import Comment

logger = logging.getLogger(__name__)

def get_post_comments(db: Session, post_id: str) -> List[Comment]:
    return db.query(Comment)\
             .options(joinedload(Comment.author))\
             .filter(Comment.post_id == post_id)\
             .order_by(desc(Comment.created_at))\
             .all()

def get_comment(db: Session, comment_id: str) -> Optional[Comment]:
    return db.query(Comment).filter(Comment.id == comment_id).first()

def create_comment(db: Session, post_id: str, author_id: str, content: str) -> Comment:
    db_comment = Comment(post_id=post_id, author_id=author_id, content=content)
    db.add(db_comment)
    db.commit()
    db.refresh(db_comment)
    logger.info(f"Comment {db_comment.id} added to post {post_id}")
    return db_comment

def delete_comment(db: Session, comment_id: str) -> bool:
    db_comment = get_comment(db, comment_id)
    if db_comment is None:
        return False
    db.delete(db_comment)
    db.commit()
    logger.info(f"Comment {comment_id} deleted")
    return True
