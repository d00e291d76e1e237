# scanconsole/api/v1/settings.py
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

from scanconsole.db.database import get_db
from scanconsole.schemas.setting import SettingsResponse, SettingUpdateRequest
from scanconsole.services.settings_service import get_visible_settings, update_setting

router = APIRouter()


@router.get("/global-settings", response_model=List[SettingsResponse])
async def get_global_settings(db: AsyncSession = Depends(get_db)):
    """List settings visible in the UI"""
    return await get_visible_settings(db)


@router.patch("/global-settings/{setting_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_global_setting(
    setting_id: int,
    request: SettingUpdateRequest,
    db: AsyncSession = Depends(get_db),
):
    """Update one setting; the value is validated according to its key"""
    await update_setting(db, setting_id, request)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
