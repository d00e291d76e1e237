# scanconsole/db/models/__init__.py
from scanconsole.db.models.setting import Setting
from scanconsole.db.models.registry_account import RegistryAccount

__all__ = ["Setting", "RegistryAccount"]
