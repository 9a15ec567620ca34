# contenthub/schemas/site_setting.py
from typing import Optional

from contenthub.schemas.base import ApiModel

class SettingValue(ApiModel):
    value: Optional[str] = None
