import pytest

from crunchem.catalog import (ALL_CATEGORIES, CATEGORIES, Catalog, CatalogError, all_calculators,
                              category_modules, get_all_calculators, get_catalog)
from crunchem.calculators.mathematics import MATHEMATICS, basic_calculate
from crunchem.calculators.common import number, select
from crunchem.types import Calculator, Complexity


def _record(**overrides):
    base = dict(
        id="sample", title="Sample", description="A sample calculator.", category="Mathematics",
        inputs=(number("x", "X"),), formula="x", compute=basic_calculate,
    )
    base.update(overrides)
    return Calculator(**base)


def test_registry_is_concatenation_of_modules_in_order():
    modules = category_modules()
    flat = [c for m in modules for c in m]
    assert len(all_calculators) == sum(len(m) for m in modules)
    assert [c.id for c in get_all_calculators()] == [c.id for c in flat]


def test_module_order_is_fixed():
    first_category = [m[0].category for m in category_modules()]
    assert first_category == ["Daily Life", "Cooking", "Sports", "Mathematics", "Physics"]


def test_ids_are_unique():
    ids = [c.id for c in all_calculators]
    assert len(ids) == len(set(ids))


def test_every_record_is_well_formed():
    for c in all_calculators:
        assert c.id and c.title and c.description and c.formula
        assert c.category in CATEGORIES
        assert isinstance(c.complexity, Complexity)
        assert c.inputs
        field_ids = [f.id for f in c.inputs]
        assert len(field_ids) == len(set(field_ids))
        assert all(t == t.lower() for t in c.tags)


def test_get_catalog_is_cached():
    assert get_catalog() is get_catalog()


def test_get_and_unknown_id():
    catalog = get_catalog()
    assert catalog.get("basic-calculator").title == "Basic Calculator"
    assert catalog.get("no-such-calculator") is None


def test_category_counts_cover_every_category():
    counts = get_catalog().category_counts()
    assert set(counts) == set(CATEGORIES)
    assert sum(counts.values()) == len(all_calculators)
    assert counts["Daily Life"] == 24
    assert counts["Physics"] > 0
    assert counts["Chemistry"] == 0
    assert ALL_CATEGORIES not in counts


def test_list_calculators_summaries():
    items = get_catalog().list_calculators()
    assert len(items) == len(all_calculators)
    first = items[0]
    assert set(first) == {"id", "title", "description", "category", "tags", "complexity", "input_count"}


def test_duplicate_id_is_rejected():
    with pytest.raises(CatalogError, match="Duplicate"):
        Catalog.from_modules([MATHEMATICS, MATHEMATICS[:1]])


def test_unknown_category_is_rejected():
    with pytest.raises(CatalogError, match="unknown category"):
        Catalog.from_modules([[_record(category="Astrology")]])


def test_blank_title_is_rejected():
    with pytest.raises(CatalogError, match="title"):
        Catalog.from_modules([[_record(title="  ")]])


def test_empty_inputs_are_rejected():
    with pytest.raises(CatalogError, match="inputs"):
        Catalog.from_modules([[_record(inputs=())]])


def test_duplicate_field_ids_are_rejected():
    with pytest.raises(CatalogError, match="duplicate input id"):
        Catalog.from_modules([[_record(inputs=(number("x", "X"), number("x", "Again")))]])


def test_select_without_options_is_rejected():
    with pytest.raises(CatalogError, match="no options"):
        Catalog.from_modules([[_record(inputs=(select("op", "Op", ()),))]])


def test_select_default_must_be_an_option():
    field = select("op", "Op", (("add", "Add"),), default="divide")
    with pytest.raises(CatalogError, match="default"):
        Catalog.from_modules([[_record(inputs=(field,))]])


def test_uppercase_tags_are_rejected():
    with pytest.raises(CatalogError, match="lowercase"):
        Catalog.from_modules([[_record(tags=("Math",))]])


def test_valid_custom_catalog():
    catalog = Catalog.from_modules([[_record()], [_record(id="other")]])
    assert [c.id for c in catalog.calculators] == ["sample", "other"]
