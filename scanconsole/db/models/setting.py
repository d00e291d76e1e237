# scanconsole/db/models/setting.py
from sqlalchemy import Column, Integer, String, Boolean, JSON

from scanconsole.db.base import BaseModel


class Setting(BaseModel):
    """
    Global console setting.

    ``value`` holds ``{"label", "value", "description"}``; the type of the
    inner ``value`` is decided by ``key`` (see ``services.settings_service``).
    Rows are provisioned at startup and only mutated through an update.
    """
    __tablename__ = "setting"

    id = Column(Integer, primary_key=True, autoincrement=True)
    key = Column(String(255), nullable=False, unique=True, index=True)
    value = Column(JSON, nullable=False, default=dict)
    is_visible_on_ui = Column(Boolean, nullable=False, default=False)
