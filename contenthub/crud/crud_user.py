# contenthub/crud/crud_user.py
import logging
from typing import List, Optional

from sqlalchemy import desc
from sqlalchemy.orm import Session

from contenthub.core.config import settings
from contenthub.models.user import User
from contenthub.schemas.user import UserUpsert

logger = logging.getLogger(__name__)

def get_user(db: Session, user_id: str) -> Optional[User]:
    return db.query(User).filter(User.id == user_id).first()

def get_user_by_email(db: Session, email: str) -> Optional[User]:
    return db.query(User).filter(User.email == email).first()

def get_all_users(db: Session) -> List[User]:
    return db.query(User).order_by(desc(User.created_at)).all()

def is_admin_email(email: Optional[str]) -> bool:
    return bool(email) and email.strip().lower() in settings.admin_emails

def upsert_user(db: Session, profile: UserUpsert) -> User:
    """
    Insert or refresh a user from the identity provider's profile claims.

    Emails on the ADMIN_EMAILS allow-list are promoted to admin. The list only
    grants the flag: a user whose email is dropped from it keeps whatever flag
    an administrator last set.
    """
    user = get_user(db, profile.id)
    if user is None:
        user = User(id=profile.id)
        db.add(user)
        logger.info(f"Creating user {profile.id}")
    else:
        logger.info(f"Refreshing profile of user {profile.id}")

    user.email = profile.email
    user.first_name = profile.first_name
    user.last_name = profile.last_name
    if profile.profile_image_url is not None:
        user.profile_image_url = profile.profile_image_url
    if is_admin_email(profile.email):
        user.is_admin = True
    elif user.is_admin is None:
        user.is_admin = False

    db.commit()
    db.refresh(user)
    return user

def update_user(
    db: Session,
    user_id: str,
    first_name: Optional[str] = None,
    last_name: Optional[str] = None,
    profile_image_url: Optional[str] = None,
) -> Optional[User]:
    user = get_user(db, user_id)
    if user is None:
        return None
    if first_name is not None:
        user.first_name = first_name
    if last_name is not None:
        user.last_name = last_name
    if profile_image_url is not None:
        user.profile_image_url = profile_image_url
    db.commit()
    db.refresh(user)
    logger.info(f"Profile of user {user_id} updated")
    return user

def update_user_admin_status(db: Session, user_id: str, is_admin: bool) -> Optional[User]:
    user = get_user(db, user_id)
    if user is None:
        return None
    user.is_admin = is_admin
    db.commit()
    db.refresh(user)
    logger.info(f"Admin flag of user {user_id} set to {is_admin}")
    return user
