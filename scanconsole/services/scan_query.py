# scanconsole/services/scan_query.py
"""
Translate a scan filter selection into search service requests.

Host, container, image and language selections are merged into a single
``node_id`` filter; languages are also matched against the scan's
``trigger_action``. The count request reuses every filter with an enlarged
window so a total can be estimated without an exact count endpoint.
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple

from scanconsole.core.config import settings
from scanconsole.core.constants import DEFAULT_NODE_TYPES
from scanconsole.schemas.scan import (
    FetchWindow,
    FieldsFilters,
    FilterIn,
    OrderField,
    OrderFilter,
    SearchFilter,
    SearchScanRequest,
)


@dataclass(frozen=True)
class SortSpec:
    field: str
    descending: bool = False


@dataclass(frozen=True)
class ScanFilterSelection:
    node_types: Tuple[str, ...] = ()
    status: Tuple[str, ...] = ()
    hosts: Tuple[str, ...] = ()
    containers: Tuple[str, ...] = ()
    container_images: Tuple[str, ...] = ()
    languages: Tuple[str, ...] = ()
    clusters: Tuple[str, ...] = ()
    page: int = 0
    sort: Optional[SortSpec] = None


def _search_filter(contains: dict, match: dict = None, order: List[OrderField] = None) -> SearchFilter:
    return SearchFilter(
        filters=FieldsFilters(
            contains_filter=FilterIn(filter_in=contains),
            order_filter=OrderFilter(order_fields=order or []),
            match_filter=FilterIn(filter_in=match or {}),
        ),
        in_field_filter=None,
    )


def build_search_request(selection: ScanFilterSelection, page_size: int = None) -> SearchScanRequest:
    """Search request for one page of scans"""
    if page_size is None:
        page_size = settings.SCAN_PAGE_SIZE

    node_filter_in = {"node_type": list(selection.node_types) or list(DEFAULT_NODE_TYPES)}

    node_ids = (
        list(selection.hosts)
        + list(selection.containers)
        + list(selection.container_images)
        + list(selection.languages)
    )
    if node_ids:
        node_filter_in["node_id"] = node_ids

    if selection.clusters:
        node_filter_in["kubernetes_cluster_id"] = list(selection.clusters)

    scan_filter_in = {}
    if selection.status:
        scan_filter_in["status"] = [status.upper() for status in selection.status]

    scan_match_in = {}
    if selection.languages:
        scan_match_in["trigger_action"] = list(selection.languages)

    order_fields = []
    if selection.sort is not None:
        order_fields.append(
            OrderField(field_name=selection.sort.field, descending=selection.sort.descending)
        )

    return SearchScanRequest(
        node_filters=_search_filter(node_filter_in),
        scan_filters=_search_filter(scan_filter_in, scan_match_in, order_fields),
        window=FetchWindow(offset=selection.page * page_size, size=page_size),
    )


def build_count_request(request: SearchScanRequest, factor: int = None) -> SearchScanRequest:
    """Same filters as ``request`` with the window enlarged by ``factor``"""
    if factor is None:
        factor = settings.COUNT_OVERSAMPLING_FACTOR

    window = FetchWindow(offset=request.window.offset, size=request.window.size * factor)
    return request.model_copy(update={"window": window}, deep=True)


def estimate_total_rows(page: int, page_size: int, count: int) -> int:
    """
    Approximate total: rows before the current page plus the rows the
    oversampled count window saw. Not an exact count.
    """
    return page * page_size + count
