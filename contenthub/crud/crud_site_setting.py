# contenthub/crud/crud_site_setting.py
import logging
from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from contenthub.db.base_class import utcnow
from contenthub.models.site_setting import SiteSetting

logger = logging.getLogger(__name__)

def _get_setting_row(db: Session, key: str) -> Optional[SiteSetting]:
    return db.query(SiteSetting).filter(SiteSetting.key == key).first()

def get_setting(db: Session, key: str) -> Optional[str]:
    setting = _get_setting_row(db, key)
    return setting.value if setting else None

def set_setting(db: Session, key: str, value: Optional[str]) -> SiteSetting:
    setting = _get_setting_row(db, key)
    if setting is None:
        try:
            with db.begin_nested():
                setting = SiteSetting(key=key, value=value)
                db.add(setting)
                db.flush()
        except IntegrityError:
            # Another writer inserted the key first; overwrite its value
            logger.info(f"Setting '{key}' was created concurrently, overwriting it")
            setting = _get_setting_row(db, key)

    setting.value = value
    setting.updated_at = utcnow()
    db.commit()
    db.refresh(setting)
    logger.info(f"Setting '{key}' updated")
    return setting
