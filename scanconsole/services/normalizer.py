# scanconsole/services/normalizer.py
from typing import Any, Dict, Union

from scanconsole.core.constants import SeverityLevel, TOTAL_SEVERITIES
from scanconsole.schemas.scan import ScanInfo, ScanResultRow


def severity_breakdown(counts: Any) -> Dict[str, int]:
    """Zero-filled counts for every severity tier plus the derived total"""
    if counts is None:
        counts = {}
    elif not isinstance(counts, dict):
        counts = counts.model_dump()

    breakdown = {level.value: counts.get(level.value) or 0 for level in SeverityLevel}
    breakdown["total"] = sum(breakdown[level.value] for level in TOTAL_SEVERITIES)
    return breakdown


def normalize_scan(raw: Union[ScanInfo, Dict[str, Any]]) -> ScanResultRow:
    """Reshape a search row into a table row; never fails on missing counts"""
    if isinstance(raw, dict):
        raw = ScanInfo(**raw)

    return ScanResultRow(
        scan_id=raw.scan_id,
        node_id=raw.node_id,
        node_name=raw.node_name,
        node_type=raw.node_type,
        status=raw.status,
        updated_at=raw.updated_at,
        **severity_breakdown(raw.severity_counts),
    )
