# contenthub/api/endpoints/admin.py

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from contenthub import crud, schemas
from contenthub.api import deps
from contenthub.core.permissions import Capability

logger = logging.getLogger(__name__)

router = APIRouter()

manage_users = deps.require_capability(Capability.MANAGE_USERS)


@router.get("/users", response_model=List[schemas.User])
def read_users(db: Session = Depends(deps.get_db), admin=Depends(manage_users)):
    return crud.get_all_users(db)


@router.put("/users/{user_id}/admin")
def update_user_admin_status(
    user_id: str,
    status: schemas.AdminStatusUpdate,
    db: Session = Depends(deps.get_db),
    admin=Depends(manage_users),
):
    user = crud.update_user_admin_status(db, user_id, status.is_admin)
    if user is None:
        raise HTTPException(status_code=404, detail="User not found")
    logger.info(f"Admin {admin.id} set admin flag of {user_id} to {status.is_admin}")
    return {"message": "User admin status updated"}
