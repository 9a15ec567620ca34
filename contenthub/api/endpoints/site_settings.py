# contenthub/api/endpoints/site_settings.py

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from contenthub import crud, schemas
from contenthub.api import deps
from contenthub.core.permissions import Capability

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/{key}", response_model=schemas.SettingValue)
def read_setting(key: str, db: Session = Depends(deps.get_db)):
    return schemas.SettingValue(value=crud.get_setting(db, key))


@router.put("/{key}")
def update_setting(
    key: str,
    setting: schemas.SettingValue,
    db: Session = Depends(deps.get_db),
    admin=Depends(deps.require_capability(Capability.MANAGE_SETTINGS)),
):
    crud.set_setting(db, key, setting.value)
    return {"message": "Setting updated"}
