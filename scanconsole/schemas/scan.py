# scanconsole/schemas/scan.py
from pydantic import BaseModel, Field
from typing import Dict, List, Optional


# Search request wire model
class FilterIn(BaseModel):
    filter_in: Dict[str, List[str]] = Field(default_factory=dict)


class OrderField(BaseModel):
    field_name: str
    descending: bool = False


class OrderFilter(BaseModel):
    order_fields: List[OrderField] = Field(default_factory=list)


class FieldsFilters(BaseModel):
    contains_filter: FilterIn = Field(default_factory=FilterIn)
    order_filter: OrderFilter = Field(default_factory=OrderFilter)
    match_filter: FilterIn = Field(default_factory=FilterIn)


class SearchFilter(BaseModel):
    filters: FieldsFilters = Field(default_factory=FieldsFilters)
    in_field_filter: Optional[List[str]] = None


class FetchWindow(BaseModel):
    offset: int = 0
    size: int


class SearchScanRequest(BaseModel):
    node_filters: SearchFilter
    scan_filters: SearchFilter
    window: FetchWindow


# Search response rows
class SeverityCounts(BaseModel):
    critical: Optional[int] = None
    high: Optional[int] = None
    medium: Optional[int] = None
    low: Optional[int] = None
    unknown: Optional[int] = None


class ScanInfo(BaseModel):
    scan_id: str
    node_id: str
    node_name: str = ""
    node_type: str
    status: str
    updated_at: int = 0
    severity_counts: Optional[SeverityCounts] = None


class ScanResultRow(BaseModel):
    scan_id: str
    node_id: str
    node_name: str = ""
    node_type: str
    status: str
    updated_at: int = 0
    critical: int = 0
    high: int = 0
    medium: int = 0
    low: int = 0
    unknown: int = 0
    total: int = 0


class ScanPage(BaseModel):
    scans: List[ScanResultRow] = Field(default_factory=list)
    current_page: int = 0
    total_rows: int = 0
    message: Optional[str] = None


# Row actions
class Notification(BaseModel):
    level: str
    message: str


class DownloadReference(BaseModel):
    filename: str
    url: Optional[str] = None


class ActionResult(BaseModel):
    notifications: List[Notification] = Field(default_factory=list)
    download: Optional[DownloadReference] = None
