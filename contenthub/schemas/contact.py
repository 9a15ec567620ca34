# contenthub/schemas/contact.py
from typing import Optional

from pydantic import EmailStr, Field

from contenthub.schemas.base import ApiModel

class ContactMessage(ApiModel):
    name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr
    subject: Optional[str] = Field(None, max_length=255)
    message: str = Field(..., min_length=1, max_length=10000)
