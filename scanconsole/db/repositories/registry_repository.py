# scanconsole/db/repositories/registry_repository.py
from typing import Optional
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from scanconsole.db.models.registry_account import RegistryAccount
from scanconsole.db.repositories.base import BaseRepository


class RegistryRepository(BaseRepository[RegistryAccount]):
    """Repository for RegistryAccount operations"""

    def __init__(self, session: AsyncSession):
        super().__init__(RegistryAccount, session)

    async def get_by_name(self, name: str) -> Optional[RegistryAccount]:
        result = await self.session.execute(
            select(RegistryAccount).where(RegistryAccount.name == name)
        )
        return result.scalar_one_or_none()
