# contenthub/crud/crud_file.py
import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from contenthub.models.post import PostFile
from contenthub.utils.uploads import StoredFile

logger = logging.getLogger(__name__)

def add_post_file(
    db: Session,
    post_id: str,
    filename: str,
    original_name: str,
    mime_type: str,
    size: int,
) -> PostFile:
    db_file = PostFile(
        post_id=post_id,
        filename=filename,
        original_name=original_name,
        mime_type=mime_type,
        size=size,
    )
    db.add(db_file)
    db.commit()
    db.refresh(db_file)
    logger.info(f"File {filename} attached to post {post_id}")
    return db_file

def add_post_files(db: Session, post_id: str, stored_files: List[StoredFile]) -> List[PostFile]:
    """Attach several stored uploads to a post in one transaction"""
    db_files = [
        PostFile(
            post_id=post_id,
            filename=stored.filename,
            original_name=stored.original_name,
            mime_type=stored.mime_type,
            size=stored.size,
        )
        for stored in stored_files
    ]
    db.add_all(db_files)
    db.commit()
    for db_file in db_files:
        db.refresh(db_file)
    logger.info(f"{len(db_files)} files attached to post {post_id}")
    return db_files

def get_post_files(db: Session, post_id: str) -> List[PostFile]:
    return db.query(PostFile)\
             .filter(PostFile.post_id == post_id)\
             .order_by(PostFile.created_at)\
             .all()

def get_post_file(db: Session, file_id: str) -> Optional[PostFile]:
    return db.query(PostFile).filter(PostFile.id == file_id).first()

def delete_post_file(db: Session, file_id: str) -> bool:
    db_file = get_post_file(db, file_id)
    if db_file is None:
        return False
    db.delete(db_file)
    db.commit()
    logger.info(f"File {file_id} deleted")
    return True
