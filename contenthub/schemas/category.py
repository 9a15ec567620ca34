# contenthub/schemas/category.py
from datetime import datetime
from typing import Optional

from pydantic import Field

from contenthub.schemas.base import ApiModel

class CategoryBase(ApiModel):
    name: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    color: str = Field("blue", min_length=1, max_length=50)

class CategoryCreate(CategoryBase):
    pass

class CategoryUpdate(ApiModel):
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None
    color: Optional[str] = Field(None, min_length=1, max_length=50)

class Category(CategoryBase):
    id: str
    is_default: bool = False
    created_at: Optional[datetime] = None
