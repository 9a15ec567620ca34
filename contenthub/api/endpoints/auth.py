# contenthub/api/endpoints/auth.py

import logging
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, HTTPException, Request, UploadFile
from sqlalchemy.orm import Session

from contenthub import crud, schemas
from contenthub.api import deps
from contenthub.core.config import settings
from contenthub.models.user import User
from contenthub.utils.uploads import UploadRejected, remove_upload, save_upload

logger = logging.getLogger(__name__)

router = APIRouter()


def login_user(request: Request, db: Session, profile: schemas.UserUpsert) -> User:
    """Sync the provider's profile into the users table and start a session for it."""
    user = crud.upsert_user(db, profile)
    request.session[deps.SESSION_USER_KEY] = user.id
    logger.info(f"User {user.id} signed in")
    return user


@router.post("/login", response_model=schemas.User)
def dev_login(profile: schemas.UserUpsert, request: Request, db: Session = Depends(deps.get_db)):
    """Sign in with profile claims supplied directly. Local development only."""
    if not settings.DEV_LOGIN_ENABLED:
        raise HTTPException(status_code=404, detail="Not found")
    return login_user(request, db, profile)


@router.post("/logout")
def logout(request: Request):
    user_id = request.session.pop(deps.SESSION_USER_KEY, None)
    if user_id:
        logger.info(f"User {user_id} signed out")
    return {"message": "Logged out"}


@router.get("/user", response_model=schemas.User)
def read_current_user(request: Request, db: Session = Depends(deps.get_db)):
    user_id = request.session.get(deps.SESSION_USER_KEY)
    if not user_id:
        raise HTTPException(status_code=401, detail="Unauthorized")
    user = crud.get_user(db, user_id)
    if user is None:
        logger.warning(f"Session references missing user {user_id}")
        raise HTTPException(status_code=404, detail="User not found")
    return user


@router.post("/update-profile", response_model=schemas.User)
def update_profile(
    first_name: Optional[str] = Form(None, alias="firstName", max_length=255),
    last_name: Optional[str] = Form(None, alias="lastName", max_length=255),
    profile_image: Optional[UploadFile] = File(None, alias="profileImage"),
    current_user: User = Depends(deps.get_current_user),
    db: Session = Depends(deps.get_db),
):
    profile_image_url = None
    if profile_image is not None and profile_image.filename:
        if not (profile_image.content_type or "").startswith("image/"):
            raise UploadRejected(400, "Invalid file type")
        stored = save_upload(profile_image)
        profile_image_url = stored.url

    previous_image = current_user.profile_image_url
    user = crud.update_user(
        db,
        current_user.id,
        first_name=first_name,
        last_name=last_name,
        profile_image_url=profile_image_url,
    )
    if profile_image_url and previous_image and previous_image.startswith("/uploads/"):
        remove_upload(previous_image)
    return user
