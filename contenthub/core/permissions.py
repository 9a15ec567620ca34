# contenthub/core/permissions.py

import enum
import logging
from typing import Optional

from contenthub.models.user import User

logger = logging.getLogger(__name__)


class Capability(str, enum.Enum):
    MANAGE_CATEGORIES = "manage_categories"
    MANAGE_USERS = "manage_users"
    MANAGE_SETTINGS = "manage_settings"
    MODERATE_CONTENT = "moderate_content"


# Capabilities held by administrators; regular users hold none of them
ADMIN_CAPABILITIES = frozenset(Capability)


def is_allowed(user: Optional[User], capability: Capability) -> bool:
    if user is None:
        return False
    if user.is_admin:
        return capability in ADMIN_CAPABILITIES
    return False


def can_modify(user: Optional[User], owner_id: Optional[str]) -> bool:
    """Owners may change their own content; moderators may change anyone's."""
    if user is None:
        return False
    if owner_id is not None and user.id == owner_id:
        return True
    return is_allowed(user, Capability.MODERATE_CONTENT)
