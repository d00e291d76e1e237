# scanconsole/services/settings_service.py
"""
Global settings: read visible rows, validate and persist updates.

A setting's value type is decided by its key. Each key maps to a value spec
that parses the raw request value into the stored representation; the
request never declares the type itself.
"""

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Any, Dict, List, Union

from sqlalchemy.ext.asyncio import AsyncSession

from scanconsole.core.config import settings
from scanconsole.core.constants import SettingKey
from scanconsole.core.exceptions import NotFoundError, ValidationError
from scanconsole.core.input_validation import url_origin
from scanconsole.core.logging import logger
from scanconsole.db.repositories.setting_repository import SettingRepository
from scanconsole.schemas.setting import SettingsResponse, SettingUpdateRequest

UPDATE_STRUCT = "SettingUpdateRequest"

SettingValue = Union[str, int]


class SettingValueSpec:
    """Parse/validate rule for the value of one setting key"""

    key: SettingKey

    def parse(self, raw: Any) -> SettingValue:
        raise NotImplementedError

    def invalid(self, reason: str) -> ValidationError:
        return ValidationError.for_field(UPDATE_STRUCT, "Value", reason)


class ConsoleUrlValue(SettingValueSpec):
    """Absolute URL, stored as its origin (``scheme://host``)"""

    key = SettingKey.CONSOLE_URL

    def parse(self, raw: Any) -> str:
        if not isinstance(raw, str):
            raise self.invalid("must be url")
        try:
            return url_origin(raw)
        except ValueError:
            raise self.invalid("must be url")


class RetentionDaysValue(SettingValueSpec):
    """Number of days, rounded half-up to an integer"""

    key = SettingKey.INACTIVE_NODES_DELETE_SCAN_RESULTS

    def parse(self, raw: Any) -> int:
        # bool is an int subclass but never a day count
        if isinstance(raw, bool):
            raise self.invalid("must be integer")

        if isinstance(raw, (int, float)):
            text = str(raw)
        elif isinstance(raw, str):
            text = raw.strip()
        else:
            raise self.invalid("must be integer")

        try:
            number = Decimal(text)
        except InvalidOperation:
            raise self.invalid("must be integer")

        if not number.is_finite():
            raise self.invalid("must be integer")

        return int(number.quantize(Decimal(1), rounding=ROUND_HALF_UP))


VALUE_SPECS: Dict[SettingKey, SettingValueSpec] = {
    spec.key: spec for spec in (ConsoleUrlValue(), RetentionDaysValue())
}


DEFAULT_SETTINGS: List[Dict[str, Any]] = [
    {
        "key": SettingKey.CONSOLE_URL.value,
        "value": {
            "label": "Console URL",
            "value": settings.DEFAULT_CONSOLE_URL,
            "description": "Console URL used in reports and notifications",
        },
        "is_visible_on_ui": True,
    },
    {
        "key": SettingKey.INACTIVE_NODES_DELETE_SCAN_RESULTS.value,
        "value": {
            "label": "Inactive nodes: delete scan results after (days)",
            "value": settings.DEFAULT_INACTIVE_DELETE_DAYS,
            "description": "Scan results of nodes inactive for this many days are deleted",
        },
        "is_visible_on_ui": True,
    },
]


async def seed_default_settings(session: AsyncSession) -> int:
    """Create any missing default setting rows; existing rows are left untouched"""
    repo = SettingRepository(session)
    created = 0
    for default in DEFAULT_SETTINGS:
        if await repo.get_by_key(default["key"]) is None:
            await repo.create(dict(default))
            created += 1
    return created


async def get_visible_settings(session: AsyncSession) -> List[SettingsResponse]:
    """Settings marked visible, flattened for the API"""
    repo = SettingRepository(session)
    rows = await repo.get_visible()
    return [
        SettingsResponse(
            id=row.id,
            key=row.key,
            label=(row.value or {}).get("label", ""),
            value=(row.value or {}).get("value"),
            description=(row.value or {}).get("description", ""),
        )
        for row in rows
    ]


async def update_setting(session: AsyncSession, setting_id: int, request: SettingUpdateRequest) -> None:
    """
    Validate ``request`` against the stored row and persist the new value.

    Raises:
        NotFoundError: no setting exists for ``request.key``
        ValidationError: id/key mismatch or a value the key's spec rejects
    """
    repo = SettingRepository(session)
    current = await repo.get_by_key(request.key.value)
    if current is None:
        raise NotFoundError(f"Setting '{request.key.value}' not found")

    if current.id != setting_id:
        raise ValidationError.for_field(UPDATE_STRUCT, "ID", "invalid")

    value = VALUE_SPECS[request.key].parse(request.value)

    stored = current.value or {}
    await repo.update(current.id, {
        "key": current.key,
        "value": {
            "label": stored.get("label", ""),
            "value": value,
            "description": stored.get("description", ""),
        },
        "is_visible_on_ui": current.is_visible_on_ui,
    })

    logger.info(f"Updated setting {current.key}", extra={"setting_id": current.id})
