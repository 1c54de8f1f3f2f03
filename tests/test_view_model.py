import pytest

from sql_search import SearchViewModel, filter_sections


@pytest.fixture
def vm(catalog, scheduler):
    return SearchViewModel(catalog, debounce_seconds=0.1, scheduler=scheduler)


def test_initial_state(vm, catalog):
    assert vm.get_filtered_sections() == list(catalog)
    assert vm.expanded_section_ids == frozenset()
    assert vm.query == ""
    assert vm.results_label() == ""


def test_query_applies_after_debounce(vm, catalog, scheduler):
    vm.query_changed("join")
    assert vm.query == "join"
    assert vm.search_pending
    assert vm.get_filtered_sections() == list(catalog)
    scheduler.advance(0.1)
    assert not vm.search_pending
    assert vm.get_filtered_sections() == filter_sections(catalog, "join")


def test_auto_expand_matches(vm, catalog, scheduler):
    vm.query_changed("join")
    scheduler.advance(0.1)
    expected = {s.id for s in filter_sections(catalog, "join")}
    assert expected
    assert vm.expanded_section_ids == expected


def test_rapid_edits_only_apply_last(vm, catalog, scheduler):
    applied = []
    vm.add_listener(lambda m: applied.append(m.get_filtered_sections()))
    for text in ["r", "re", "rec", "recursive"]:
        vm.query_changed(text)
        scheduler.advance(0.03)
    scheduler.advance(0.1)
    assert len(applied) == 1
    assert [s.title for s in vm.filtered_sections] == ["Common Table Expressions (CTEs)"]


def test_clear_restores_catalog_and_collapses(vm, catalog, scheduler):
    vm.query_changed("join")
    scheduler.advance(0.1)
    vm.section_toggled(catalog[0].id)
    vm.search_cleared()
    assert vm.query == ""
    assert vm.get_filtered_sections() == list(catalog)
    assert vm.expanded_section_ids == frozenset()


def test_clear_is_synchronous_and_drops_pending_edit(vm, catalog, scheduler):
    vm.query_changed("join")
    vm.search_cleared()
    assert not vm.search_pending
    scheduler.advance(1.0)
    assert vm.get_filtered_sections() == list(catalog)
    assert vm.expanded_section_ids == frozenset()


def test_no_results(vm, scheduler):
    vm.query_changed("zzzznotfound")
    scheduler.advance(0.1)
    assert vm.get_filtered_sections() == []
    assert vm.expanded_section_ids == frozenset()
    assert not vm.has_results
    assert vm.results_label() == "0 results"


def test_whitespace_query_behaves_like_empty(vm, catalog, scheduler):
    vm.query_changed("   ")
    scheduler.advance(0.1)
    assert vm.get_filtered_sections() == list(catalog)
    assert vm.expanded_section_ids == frozenset()


def test_toggle_twice(vm, catalog, scheduler):
    vm.query_changed("recursive")
    scheduler.advance(0.1)
    cte_id = vm.get_filtered_sections()[0].id
    assert vm.is_expanded(cte_id)
    vm.section_toggled(cte_id)
    assert not vm.is_expanded(cte_id)
    assert cte_id not in vm.expanded_section_ids
    vm.section_toggled(cte_id)
    assert vm.is_expanded(cte_id)


def test_toggle_unknown_id_has_no_effect(vm, catalog):
    seen = []
    vm.add_listener(lambda m: seen.append(m))
    vm.section_toggled(10 ** 9)
    assert vm.expanded_section_ids == frozenset()
    assert vm.get_filtered_sections() == list(catalog)
    assert seen == []


def test_expanded_ids_always_belong_to_sections(vm, catalog, scheduler):
    known = {s.id for s in catalog}
    vm.section_toggled(-5)
    vm.section_toggled(catalog[3].id)
    assert vm.expanded_section_ids <= known
    vm.query_changed("join")
    scheduler.advance(0.1)
    vm.section_toggled("no-such-id")
    assert vm.expanded_section_ids <= known


def test_new_query_discards_manual_toggles(vm, catalog, scheduler):
    vm.section_toggled(catalog[0].id)
    vm.query_changed("recursive")
    scheduler.advance(0.1)
    assert vm.expanded_section_ids == {vm.get_filtered_sections()[0].id}


def test_highlight_follows_applied_query(vm, scheduler):
    assert vm.highlight("SELECT 1") == [("SELECT 1", False)]
    vm.query_changed("select")
    scheduler.advance(0.1)
    assert vm.highlight("SELECT 1") == [("SELECT", True), (" 1", False)]


def test_labels(vm, scheduler):
    assert vm.footer_label() == "18 sections • 84 examples"
    vm.query_changed("recursive")
    scheduler.advance(0.1)
    assert vm.results_label() == "1 result"


def test_listener_errors_are_contained(vm, catalog):
    seen = []

    def broken(_):
        raise RuntimeError("boom")

    vm.add_listener(broken)
    vm.add_listener(lambda m: seen.append(m.query))
    vm.section_toggled(catalog[0].id)
    assert seen == [""]


def test_without_scheduler_applies_immediately(small_catalog):
    vm = SearchViewModel(small_catalog)
    vm.query_changed("count")
    assert [s.title for s in vm.get_filtered_sections()] == ["Aggregates"]
    assert vm.expanded_section_ids == {small_catalog[1].id}
    vm.flush()
    assert vm.get_filtered_sections() == [small_catalog[1]]
