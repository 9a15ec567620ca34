# contenthub/api/endpoints/comments.py

import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from contenthub import crud
from contenthub.api import deps
from contenthub.core.permissions import can_modify
from contenthub.models.user import User

logger = logging.getLogger(__name__)

router = APIRouter()


@router.delete("/{comment_id}")
def delete_comment(
    comment_id: str,
    db: Session = Depends(deps.get_db),
    current_user: User = Depends(deps.get_current_user),
):
    """Only the comment's author or a moderator may delete it"""
    comment = crud.get_comment(db, comment_id)
    if comment is None:
        raise HTTPException(status_code=404, detail="Comment not found")
    if not can_modify(current_user, comment.author_id):
        logger.warning(f"User {current_user.id} may not delete comment {comment_id}")
        raise HTTPException(status_code=403, detail="Access denied")
    crud.delete_comment(db, comment_id)
    return {"message": "Comment deleted successfully"}
