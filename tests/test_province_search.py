"""
Unit tests for the province filter and the picker widget state.
"""

from utils.province_search import filter_provinces
from wizard.render.picker import PickerState


class TestFilterProvinces:
    """Test substring filtering."""

    def test_empty_query_returns_list(self, catalog):
        provinces = list(catalog)
        assert filter_provinces(provinces, "") == provinces
        assert filter_provinces(provinces, "   ") == provinces

    def test_case_insensitive_substring(self):
        names = ["Chiang Mai", "Chiang Rai"]
        assert filter_provinces(names, "chiang") == ["Chiang Mai", "Chiang Rai"]
        assert filter_provinces(names, "rai") == ["Chiang Rai"]
        assert filter_provinces(names, "CHIANG M") == ["Chiang Mai"]

    def test_no_match(self):
        assert filter_provinces(["Chiang Mai", "Chiang Rai"], "phuket") == []

    def test_thai_query_keeps_catalog_order(self, small_catalog):
        hits = filter_provinces(list(small_catalog), "เชียง")
        assert [p.name for p in hits] == ["เชียงใหม่", "เชียงราย"]

    def test_romanized_alias(self, small_catalog):
        """Province entries also match on their English name."""
        hits = filter_provinces(list(small_catalog), "trat")
        assert [p.name for p in hits] == ["ตราด"]

    def test_does_not_modify_input(self):
        names = ["Chiang Mai", "Chiang Rai"]
        filter_provinces(names, "rai")
        assert names == ["Chiang Mai", "Chiang Rai"]


class TestPickerState:
    """Test the picker's query / open state."""

    def test_starts_closed(self, small_catalog):
        state = PickerState()
        assert state.is_open is False
        assert state.visible(list(small_catalog)) == []

    def test_typing_opens_and_filters(self, small_catalog):
        state = PickerState().type_query("rai")
        assert state.is_open is True
        assert [p.name for p in state.visible(list(small_catalog))] == ["เชียงราย"]

    def test_open_shows_everything(self, small_catalog):
        state = PickerState().open()
        assert state.visible(list(small_catalog)) == list(small_catalog)

    def test_close_without_selection(self):
        """Dismissing the list keeps the query but hides the list."""
        state = PickerState().type_query("chiang").close()
        assert state.is_open is False
        assert state.query == "chiang"

    def test_select_clears_and_closes(self):
        state, chosen = PickerState().type_query("tra").select("ตราด")
        assert chosen == "ตราด"
        assert state == PickerState()
