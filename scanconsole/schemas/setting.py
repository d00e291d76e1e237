# scanconsole/schemas/setting.py
from pydantic import BaseModel, ConfigDict, field_validator
from typing import Any, Optional, Union

from scanconsole.core.constants import SettingKey


class SettingUpdateRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    key: SettingKey
    value: Any

    @field_validator("value")
    @classmethod
    def value_required(cls, v):
        if v is None or v == "":
            raise ValueError("required")
        return v


class SettingsResponse(BaseModel):
    id: int
    key: SettingKey
    label: str
    value: Optional[Union[int, str]] = None
    description: str = ""
