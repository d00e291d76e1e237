# scanconsole/db/repositories/setting_repository.py
from typing import List, Optional
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from scanconsole.db.models.setting import Setting
from scanconsole.db.repositories.base import BaseRepository


class SettingRepository(BaseRepository[Setting]):
    """Repository for Setting operations"""

    def __init__(self, session: AsyncSession):
        super().__init__(Setting, session)

    async def get_by_key(self, key: str) -> Optional[Setting]:
        """Get setting by its unique key"""
        result = await self.session.execute(
            select(Setting).where(Setting.key == key)
        )
        return result.scalar_one_or_none()

    async def get_visible(self) -> List[Setting]:
        """Get settings shown in the UI"""
        result = await self.session.execute(
            select(Setting)
            .where(Setting.is_visible_on_ui.is_(True))
            .order_by(Setting.id)
        )
        return list(result.scalars().all())
