# tests/test_query_state.py
"""
URL query state tests
Tests: facet transitions, page reset rules, sort/page parsing, table links
"""

from scanconsole.services.scan_query import SortSpec
from scanconsole.views.query_state import QueryState
from scanconsole.views import scan_table


def qs(text: str) -> QueryState:
    return QueryState.from_query_string(text)


class TestFacetTransitions:
    """Checkbox and multi-select facets"""

    def test_toggle_on_appends_and_resets_page(self):
        state = qs("status=error&page=3").toggle_facet("nodeType", "host", True)

        assert str(state) == "status=error&nodeType=host"

    def test_toggle_round_trip_only_drops_page(self):
        before = qs("sortby=status&desc=true&page=2&status=error")

        on = before.toggle_facet("nodeType", "host", True)
        off = on.toggle_facet("nodeType", "host", False)

        assert "page" not in str(on)
        assert off == before.delete("page")
        assert str(off) == "sortby=status&desc=true&status=error"

    def test_toggle_off_keeps_other_values_in_place(self):
        state = qs("status=complete&status=error&status=in_progress").toggle_facet("status", "error", False)

        assert state.get_all("status") == ["complete", "in_progress"]

    def test_repeated_toggle_is_noop(self):
        once = qs("page=1").toggle_facet("status", "error", True)

        assert once.toggle_facet("status", "error", True) == once

    def test_select_facet_replaces_values(self):
        state = qs("hosts=a&page=4&hosts=b").select_facet("hosts", ["c", "d", "c"])

        assert state.get_all("hosts") == ["c", "d"]
        assert not state.has("page")

    def test_select_facet_is_idempotent(self):
        once = qs("hosts=a&status=error").select_facet("hosts", ["b"])

        assert once.select_facet("hosts", ["b"]) == once

    def test_transitions_do_not_mutate(self):
        state = qs("page=2")

        state.toggle_facet("status", "error", True)

        assert str(state) == "page=2"


class TestPageAndSort:
    """Page and sort never reset the page"""

    def test_change_page(self):
        state = qs("status=error").change_page(2)

        assert str(state) == "status=error&page=2"
        assert state.change_page(5).get_all("page") == ["5"]

    def test_change_sort_keeps_page(self):
        state = qs("page=2").change_sort(SortSpec("status", descending=True))

        assert str(state) == "page=2&sortby=status&desc=true"
        assert str(state.change_sort(None)) == "page=2"

    def test_page_parsing(self):
        assert qs("").page() == 0
        assert qs("page=3").page() == 3
        assert qs("page=-1").page() == 0
        assert qs("page=abc").page() == 0

    def test_sort_parsing(self):
        assert qs("").sort() is None
        assert qs("sortby=status").sort() == SortSpec("status", False)
        assert qs("sortby=status&desc=true").sort() == SortSpec("status", True)

    def test_selection(self):
        selection = qs(
            "nodeType=host&status=error&hosts=h1&containers=c1&containerImages=i1"
            "&languages=go&clusters=k1&page=2&sortby=status&desc=false"
        ).selection()

        assert selection.node_types == ("host",)
        assert selection.status == ("error",)
        assert selection.hosts == ("h1",)
        assert selection.containers == ("c1",)
        assert selection.container_images == ("i1",)
        assert selection.languages == ("go",)
        assert selection.clusters == ("k1",)
        assert selection.page == 2
        assert selection.sort == SortSpec("status", False)

    def test_has_active_filters(self):
        assert not qs("page=1&sortby=status").has_active_filters()
        assert qs("clusters=k1").has_active_filters()


class TestScanTable:
    """Table links are transition results"""

    def test_checkbox_links(self):
        options = scan_table.checkbox_options(qs("status=error&page=2"), "status", scan_table.STATUS_OPTIONS)

        by_label = {option.label: option for option in options}
        assert by_label["Error"].checked
        assert by_label["Error"].href == "?"
        assert by_label["Completed"].href == "?status=error&status=complete"

    def test_sort_header_cycle(self):
        assert scan_table.next_sort(None, "status") == SortSpec("status", False)
        assert scan_table.next_sort(SortSpec("status", False), "status") == SortSpec("status", True)
        assert scan_table.next_sort(SortSpec("status", True), "status") is None

    def test_only_status_is_sortable(self):
        headers = scan_table.sort_headers(qs("sortby=status&desc=true"))

        sortable = [header for header in headers if header.href]
        assert [header.column.id for header in sortable] == ["status"]
        assert sortable[0].direction == "desc"
        assert sortable[0].href == "?"

    def test_page_links(self):
        links = scan_table.page_links(qs("status=error"), current_page=1, total_rows=40, page_size=15)

        labels = [link.label for link in links]
        assert labels == ["Previous", "1", "2", "3", "Next"]
        assert [link.label for link in links if link.current] == ["2"]
        assert links[-1].href == "?status=error&page=2"

    def test_status_label(self):
        assert scan_table.status_label("in_progress") == "IN PROGRESS"
