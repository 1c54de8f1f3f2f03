from sql_render import (
    CHEVRON_COLLAPSED,
    CHEVRON_EXPANDED,
    COPIED_LABEL,
    COPY_LABEL,
    copy_link,
    parse_link,
    render_sections,
    runs_to_text,
    toggle_link,
)
from sql_search import SearchViewModel


def test_collapsed_sections_show_headers_only(small_catalog):
    vm = SearchViewModel(small_catalog)
    text = runs_to_text(render_sections(vm))
    assert text.count(CHEVRON_COLLAPSED) == 3
    assert CHEVRON_EXPANDED not in text
    assert "SELECT" not in text
    assert f"{CHEVRON_COLLAPSED} Joins  1\n" in text
    assert f"{CHEVRON_COLLAPSED} Windows  2\n" in text


def test_header_runs_are_toggle_links(small_catalog):
    vm = SearchViewModel(small_catalog)
    joins = small_catalog[0]
    header = [r for r in render_sections(vm) if r.link == toggle_link(joins.id)]
    assert "".join(r.text for r in header) == f"{CHEVRON_COLLAPSED} Joins  1"


def test_expanded_section_body(small_catalog):
    vm = SearchViewModel(small_catalog)
    joins = small_catalog[0]
    vm.section_toggled(joins.id)
    runs = render_sections(vm)
    text = runs_to_text(runs)
    assert f"{CHEVRON_EXPANDED} Joins" in text
    assert "Combine tables\n" in text
    assert joins.examples[0].code in text
    copy_runs = [r for r in runs if r.link == copy_link(joins.examples[0].id)]
    assert [r.text for r in copy_runs] == [COPY_LABEL]


def test_search_highlights_title_and_explanation(small_catalog):
    vm = SearchViewModel(small_catalog)
    vm.query_changed("join")
    runs = render_sections(vm)
    marked = [(r.text, r.style) for r in runs if r.highlight]
    assert ("Join", "title") in marked
    assert ("join", "explanation") in marked
    # code blocks are shown as-is
    assert not any(r.highlight for r in runs if r.style == "code")


def test_copied_feedback_label(small_catalog):
    vm = SearchViewModel(small_catalog)
    agg = small_catalog[1]
    vm.section_toggled(agg.id)
    ex = agg.examples[0]
    runs = render_sections(vm, copied={ex.id})
    labels = [r.text for r in runs if r.link == copy_link(ex.id)]
    assert labels == [COPIED_LABEL]


def test_no_results_message(small_catalog):
    vm = SearchViewModel(small_catalog)
    vm.query_changed("zzzznotfound")
    text = runs_to_text(render_sections(vm))
    assert text == "No results found\nTry a different search term\n"


def test_parse_link():
    assert parse_link(toggle_link(3)) == ("toggle", 3)
    assert parse_link(copy_link(12)) == ("copy", 12)
    assert parse_link("toggle:abc") == (None, None)
    assert parse_link("https://example.com") == (None, None)
    assert parse_link(None) == (None, None)
