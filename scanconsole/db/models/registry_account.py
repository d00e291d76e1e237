# scanconsole/db/models/registry_account.py
from sqlalchemy import Column, Integer, String, JSON, Text

from scanconsole.db.base import BaseModel


class RegistryAccount(BaseModel):
    """Container registry credentials; the secret part is stored encrypted"""
    __tablename__ = "registry_account"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(64), nullable=False, unique=True)
    registry_type = Column(String(64), nullable=False, index=True)
    non_secret = Column(JSON, nullable=False, default=dict)
    encrypted_secret = Column(Text, nullable=False)
