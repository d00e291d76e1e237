# scanconsole/views/scan_table.py
"""Table model for the scan listing page: columns, filter controls, pagination"""

import math
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import List, Optional

from scanconsole.core.constants import NodeType, QueryParam, ScanStatus
from scanconsole.services.scan_query import SortSpec
from scanconsole.views.query_state import QueryState


@dataclass(frozen=True)
class ColumnSpec:
    id: str
    header: str
    sortable: bool = False
    min_size: int = 65
    size: int = 65
    max_size: int = 65


SCAN_TABLE_COLUMNS: List[ColumnSpec] = [
    ColumnSpec("node_type", "Type", False, 100, 120, 130),
    ColumnSpec("node_id", "Name", False, 300, 300, 500),
    ColumnSpec("updated_at", "Timestamp", False, 140, 170, 200),
    ColumnSpec("status", "Status", True, 100, 110, 110),
    ColumnSpec("total", "Total", False, 80, 80, 80),
    ColumnSpec("critical", ""),
    ColumnSpec("high", ""),
    ColumnSpec("medium", ""),
    ColumnSpec("low", ""),
    ColumnSpec("unknown", ""),
    ColumnSpec("actions", "", False, 50, 50, 50),
]


@dataclass(frozen=True)
class FilterOption:
    label: str
    checked: bool
    href: str


@dataclass(frozen=True)
class SortHeader:
    column: ColumnSpec
    direction: Optional[str]
    href: Optional[str]


@dataclass(frozen=True)
class PageLink:
    label: str
    page: int
    href: str
    current: bool = False


NODE_TYPE_OPTIONS = [
    ("Host", NodeType.HOST.value),
    ("Container", NodeType.CONTAINER.value),
    ("Container Images", NodeType.IMAGE.value),
]

STATUS_OPTIONS = [
    ("Completed", ScanStatus.COMPLETE.value),
    ("In Progress", ScanStatus.IN_PROGRESS.value),
    ("Error", ScanStatus.ERROR.value),
]

SELECT_FACETS = [
    ("Host", QueryParam.HOSTS.value),
    ("Container", QueryParam.CONTAINERS.value),
    ("Image", QueryParam.CONTAINER_IMAGES.value),
    ("Cluster", QueryParam.CLUSTERS.value),
    ("Language", QueryParam.LANGUAGES.value),
]


def _href(state: QueryState) -> str:
    query = state.to_query_string()
    return f"?{query}" if query else "?"


def checkbox_options(state: QueryState, name: str, options) -> List[FilterOption]:
    """Each option links to the state with that box flipped"""
    selected = state.get_all(name)
    return [
        FilterOption(
            label=label,
            checked=value in selected,
            href=_href(state.toggle_facet(name, value, value not in selected)),
        )
        for label, value in options
    ]


def selected_values(state: QueryState, name: str) -> List[FilterOption]:
    """Selected multi-select values, each linking to the state without it"""
    values = state.get_all(name)
    return [
        FilterOption(
            label=value,
            checked=True,
            href=_href(state.select_facet(name, [v for v in values if v != value])),
        )
        for value in values
    ]


def next_sort(current: Optional[SortSpec], column_id: str) -> Optional[SortSpec]:
    """Header click cycle: unsorted -> ascending -> descending -> unsorted"""
    if current is None or current.field != column_id:
        return SortSpec(field=column_id, descending=False)
    if not current.descending:
        return SortSpec(field=column_id, descending=True)
    return None


def sort_headers(state: QueryState) -> List[SortHeader]:
    current = state.sort()
    headers = []
    for column in SCAN_TABLE_COLUMNS:
        direction = None
        href = None
        if column.sortable:
            if current is not None and current.field == column.id:
                direction = "desc" if current.descending else "asc"
            href = _href(state.change_sort(next_sort(current, column.id)))
        headers.append(SortHeader(column=column, direction=direction, href=href))
    return headers


def page_count(total_rows: int, page_size: int) -> int:
    if page_size <= 0:
        return 0
    return int(math.ceil(total_rows / page_size))


def page_links(state: QueryState, current_page: int, total_rows: int, page_size: int) -> List[PageLink]:
    pages = page_count(total_rows, page_size)
    links = []
    if current_page > 0:
        links.append(PageLink("Previous", current_page - 1, _href(state.change_page(current_page - 1))))
    for page in range(pages):
        links.append(PageLink(str(page + 1), page, _href(state.change_page(page)), page == current_page))
    if current_page + 1 < pages:
        links.append(PageLink("Next", current_page + 1, _href(state.change_page(current_page + 1))))
    return links


def format_milliseconds(value: int) -> str:
    if not value:
        return "-"
    return datetime.fromtimestamp(value / 1000, tz=timezone.utc).strftime("%b %d, %Y %H:%M")


def status_label(status: str) -> str:
    return status.upper().replace("_", " ")


def table_context(state: QueryState, page, page_size: int) -> dict:
    """Template context for one rendered listing"""
    return {
        "query": state.to_query_string(),
        "has_filters": state.has_active_filters(),
        "node_type_options": checkbox_options(state, QueryParam.NODE_TYPE.value, NODE_TYPE_OPTIONS),
        "status_options": checkbox_options(state, QueryParam.STATUS.value, STATUS_OPTIONS),
        "select_facets": [
            {"label": label, "name": name, "selected": selected_values(state, name)}
            for label, name in SELECT_FACETS
        ],
        "headers": sort_headers(state),
        "page": page,
        "page_links": page_links(state, page.current_page, page.total_rows, page_size),
    }
