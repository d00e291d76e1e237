# scanconsole/services/registry_service.py
import json
from typing import List

from sqlalchemy.ext.asyncio import AsyncSession

from scanconsole.core.encryption import EncryptionService
from scanconsole.core.exceptions import ValidationError
from scanconsole.core.logging import logger
from scanconsole.db.models.registry_account import RegistryAccount
from scanconsole.db.repositories.registry_repository import RegistryRepository
from scanconsole.schemas.registry import GitlabSecret, RegistryGitlab


async def create_registry(
    session: AsyncSession,
    registry: RegistryGitlab,
    encryption: EncryptionService,
) -> RegistryAccount:
    """Persist a registry account; only the non-secret part is stored in clear"""
    repo = RegistryRepository(session)
    if await repo.get_by_name(registry.name) is not None:
        raise ValidationError.for_field("RegistryGitlab", "Name", "already exists")

    account = await repo.create({
        "name": registry.name,
        "registry_type": registry.registry_type,
        "non_secret": registry.non_secret.model_dump(),
        "encrypted_secret": encryption.encrypt(registry.secret.model_dump_json()),
    })
    logger.info(f"Registry account created: {account.name}", extra={"registry_type": account.registry_type})
    return account


async def list_registries(session: AsyncSession) -> List[RegistryAccount]:
    repo = RegistryRepository(session)
    return await repo.get_multi(limit=1000)


def decrypt_secret(account: RegistryAccount, encryption: EncryptionService) -> GitlabSecret:
    return GitlabSecret(**json.loads(encryption.decrypt(account.encrypted_secret)))
