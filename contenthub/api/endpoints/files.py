# contenthub/api/endpoints/files.py

import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from contenthub import crud
from contenthub.api import deps
from contenthub.core.permissions import can_modify
from contenthub.models.user import User
from contenthub.utils.uploads import remove_upload

logger = logging.getLogger(__name__)

router = APIRouter()


@router.delete("/{file_id}")
def delete_file(
    file_id: str,
    db: Session = Depends(deps.get_db),
    current_user: User = Depends(deps.get_current_user),
):
    db_file = crud.get_post_file(db, file_id)
    if db_file is None:
        raise HTTPException(status_code=404, detail="File not found")
    if not can_modify(current_user, db_file.post.author_id):
        logger.warning(f"User {current_user.id} may not delete file {file_id}")
        raise HTTPException(status_code=403, detail="Access denied")
    filename = db_file.filename
    crud.delete_post_file(db, file_id)
    remove_upload(filename)
    return {"message": "File deleted successfully"}
