# contenthub/schemas/user.py
from datetime import datetime
from typing import Optional

from pydantic import EmailStr, Field

from contenthub.schemas.base import ApiModel

class UserBase(ApiModel):
    email: Optional[EmailStr] = None
    first_name: Optional[str] = Field(None, max_length=255)
    last_name: Optional[str] = Field(None, max_length=255)
    profile_image_url: Optional[str] = Field(None, max_length=512)

class UserUpsert(UserBase):
    """Profile claims handed over by the identity provider at login"""
    id: str = Field(..., min_length=1, max_length=255)

class User(UserBase):
    id: str
    email: Optional[str] = None
    is_admin: bool = False
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

class AdminStatusUpdate(ApiModel):
    is_admin: bool
