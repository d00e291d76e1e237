# scanconsole/api/v1/registry.py
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

from scanconsole.api.dependencies import get_encryption
from scanconsole.core.encryption import EncryptionService
from scanconsole.db.database import get_db
from scanconsole.schemas.registry import RegistryAccountResponse, RegistryGitlab
from scanconsole.services.registry_service import create_registry, list_registries

router = APIRouter()


@router.post("", response_model=RegistryAccountResponse, status_code=status.HTTP_201_CREATED)
async def add_registry(
    registry: RegistryGitlab,
    db: AsyncSession = Depends(get_db),
    encryption: EncryptionService = Depends(get_encryption),
):
    """Add a GitLab registry account"""
    return await create_registry(db, registry, encryption)


@router.get("", response_model=List[RegistryAccountResponse])
async def get_registries(db: AsyncSession = Depends(get_db)):
    """List registry accounts (secrets are never returned)"""
    return await list_registries(db)
