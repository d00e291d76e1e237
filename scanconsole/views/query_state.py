# scanconsole/views/query_state.py
"""
URL query string as the single source of truth for the scan listing view.

``QueryState`` is an immutable, ordered multimap of query parameters. Every
user interaction is one of the pure transitions below; each returns a new
state and leaves the receiver untouched. Filter transitions reset the page,
page and sort transitions do not.
"""

from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple
from urllib.parse import parse_qsl, urlencode

from scanconsole.core.constants import FILTER_PARAMS, QueryParam
from scanconsole.services.scan_query import ScanFilterSelection, SortSpec

PAGE = QueryParam.PAGE.value
SORT_BY = QueryParam.SORT_BY.value
DESC = QueryParam.DESC.value


@dataclass(frozen=True)
class QueryState:
    params: Tuple[Tuple[str, str], ...] = ()

    @classmethod
    def from_query_string(cls, query_string: str) -> "QueryState":
        return cls(tuple(parse_qsl(query_string.lstrip("?"), keep_blank_values=True)))

    @classmethod
    def from_items(cls, items: Iterable[Tuple[str, str]]) -> "QueryState":
        return cls(tuple((str(name), str(value)) for name, value in items))

    def to_query_string(self) -> str:
        return urlencode(self.params)

    def __str__(self) -> str:
        return self.to_query_string()

    # Multimap primitives
    def get(self, name: str) -> Optional[str]:
        for key, value in self.params:
            if key == name:
                return value
        return None

    def get_all(self, name: str) -> List[str]:
        return [value for key, value in self.params if key == name]

    def has(self, name: str) -> bool:
        return any(key == name for key, _ in self.params)

    def append(self, name: str, value: str) -> "QueryState":
        return QueryState(self.params + ((name, value),))

    def delete(self, name: str) -> "QueryState":
        return QueryState(tuple(item for item in self.params if item[0] != name))

    def set(self, name: str, value: str) -> "QueryState":
        """Replace the first ``name`` entry in place and drop the rest; append if absent"""
        if not self.has(name):
            return self.append(name, value)

        params = []
        replaced = False
        for key, current in self.params:
            if key != name:
                params.append((key, current))
            elif not replaced:
                params.append((key, value))
                replaced = True
        return QueryState(tuple(params))

    # View transitions
    def toggle_facet(self, name: str, value: str, checked: bool) -> "QueryState":
        """Check or uncheck one value of a checkbox facet"""
        if checked:
            state = self if value in self.get_all(name) else self.append(name, value)
        else:
            state = QueryState(tuple(item for item in self.params if item != (name, value)))
        return state.delete(PAGE)

    def select_facet(self, name: str, values: Iterable[str]) -> "QueryState":
        """Replace every value of a multi-select facet"""
        state = self.delete(name)
        seen = set()
        for value in values:
            if value in seen:
                continue
            seen.add(value)
            state = state.append(name, value)
        return state.delete(PAGE)

    def change_page(self, page: int) -> "QueryState":
        return self.set(PAGE, str(max(page, 0)))

    def change_sort(self, sort: Optional[SortSpec]) -> "QueryState":
        if sort is None:
            return self.delete(SORT_BY).delete(DESC)
        return self.set(SORT_BY, sort.field).set(DESC, "true" if sort.descending else "false")

    # Derived view state
    def page(self) -> int:
        raw = self.get(PAGE)
        try:
            page = int(raw) if raw is not None else 0
        except ValueError:
            return 0
        return page if page > 0 else 0

    def sort(self) -> Optional[SortSpec]:
        field = self.get(SORT_BY)
        if not field:
            return None
        return SortSpec(field=field, descending=self.get(DESC) == "true")

    def has_active_filters(self) -> bool:
        return any(self.has(name) for name in FILTER_PARAMS)

    def selection(self) -> ScanFilterSelection:
        return ScanFilterSelection(
            node_types=tuple(self.get_all(QueryParam.NODE_TYPE.value)),
            status=tuple(self.get_all(QueryParam.STATUS.value)),
            hosts=tuple(self.get_all(QueryParam.HOSTS.value)),
            containers=tuple(self.get_all(QueryParam.CONTAINERS.value)),
            container_images=tuple(self.get_all(QueryParam.CONTAINER_IMAGES.value)),
            languages=tuple(self.get_all(QueryParam.LANGUAGES.value)),
            clusters=tuple(self.get_all(QueryParam.CLUSTERS.value)),
            page=self.page(),
            sort=self.sort(),
        )
