# contenthub/api/deps.py

import logging
import uuid
from typing import Optional

from fastapi import Depends, HTTPException, Request
from sqlalchemy.orm import Session

from contenthub import crud
from contenthub.core.mail import Mailer
from contenthub.core.permissions import Capability, is_allowed
from contenthub.db.session import get_db
from contenthub.models.user import User

logger = logging.getLogger(__name__)

SESSION_USER_KEY = "user_id"
SESSION_ID_KEY = "sid"


def get_session_id(request: Request) -> str:
    """Stable id of the browser session, assigned on first use"""
    sid = request.session.get(SESSION_ID_KEY)
    if not sid:
        sid = uuid.uuid4().hex
        request.session[SESSION_ID_KEY] = sid
    return sid


def get_client_ip(request: Request) -> str:
    # uvicorn resolves X-Forwarded-For into request.client when run with --proxy-headers
    if request.client and request.client.host:
        return request.client.host
    return "unknown"


def get_optional_user(request: Request, db: Session = Depends(get_db)) -> Optional[User]:
    user_id = request.session.get(SESSION_USER_KEY)
    if not user_id:
        return None
    return crud.get_user(db, user_id)


def get_current_user(user: Optional[User] = Depends(get_optional_user)) -> User:
    if user is None:
        raise HTTPException(status_code=401, detail="Unauthorized")
    return user


def require_capability(capability: Capability):
    """
    Dependency factory guarding a route with a capability.

    The caller's record is re-read on every request, so a revoked admin flag
    takes effect immediately. Denial happens before the route body runs.
    """
    def checker(user: User = Depends(get_current_user)) -> User:
        if not is_allowed(user, capability):
            logger.warning(f"User {user.id} denied {capability.value}")
            raise HTTPException(status_code=403, detail="Admin access required")
        return user

    return checker


def get_mailer(request: Request) -> Mailer:
    return request.app.state.mailer
