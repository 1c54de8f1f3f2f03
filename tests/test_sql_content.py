import pytest

from sql_content import Catalog, CatalogError, SQLExample, SQLSection


def test_builtin_catalog_shape(catalog):
    assert len(catalog) == 18
    assert catalog.example_count == 84
    assert catalog[0].title == "Query Execution Order"
    assert catalog[-1].title == "Pro Tips"


def test_section_and_example_ids_are_unique(catalog):
    section_ids = catalog.section_ids
    assert len(set(section_ids)) == len(section_ids)
    example_ids = [ex.id for s in catalog for ex in s.examples]
    assert len(set(example_ids)) == len(example_ids)


def test_code_blocks_are_dedented(catalog):
    first = catalog[0].examples[0].code
    assert first.startswith("-- Writing Order:\nSELECT column1, column2")
    assert not first.endswith("\n")
    cte = next(s for s in catalog if s.title == "Common Table Expressions (CTEs)")
    recursive = cte.examples[2].code
    # nested indentation inside the snippet survives
    assert "\n    SELECT\n        id," in recursive


def test_ids_assigned_at_construction():
    a = SQLExample(code="SELECT 1;")
    b = SQLExample(code="SELECT 1;")
    assert a.id != b.id
    assert a == b  # ids don't take part in equality
    assert a.is_multiline is True
    assert a.explanation is None


def test_section_stores_tuples():
    ex = SQLExample(code="x")
    s = SQLSection(title="T", examples=[ex], keywords=["k"])
    assert s.examples == (ex,)
    assert s.keywords == ("k",)
    assert s.example_count == 1
    with pytest.raises(Exception):
        s.title = "other"


def test_catalog_rejects_duplicate_ids():
    s = SQLSection(title="T", examples=[])
    with pytest.raises(CatalogError):
        Catalog([s, s])


def test_catalog_rejects_non_sections():
    with pytest.raises(CatalogError):
        Catalog(["not a section"])
    assert issubclass(CatalogError, ValueError)


def test_catalog_lookup(small_catalog):
    joins = small_catalog[0]
    assert small_catalog.find(joins.id) is joins
    assert small_catalog.find(-1) is None
    ex = joins.examples[0]
    assert small_catalog.find_example(ex.id) is ex
    assert small_catalog.find_example(-1) is None
    assert small_catalog.example_count == 4


def test_is_subsequence(small_catalog):
    a, b, c = small_catalog.sections
    assert small_catalog.is_subsequence([a, c])
    assert small_catalog.is_subsequence([])
    assert not small_catalog.is_subsequence([c, a])
