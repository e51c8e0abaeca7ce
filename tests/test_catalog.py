import pytest

from sellarity.catalog import Catalog, Product, parse_price


def test_default_catalog_contents():
    catalog = Catalog.default()
    assert catalog.names() == ["foods", "pagkain", "tabemono"]
    assert [p.price for p in catalog] == [33, 33.33, 32]
    assert [p.rating for p in catalog] == [5.0, 3.3, 4.4]
    assert [p.sales for p in catalog] == [44545, 454545, 4545454]


def test_default_returns_independent_catalogs():
    first = Catalog.default()
    second = Catalog.default()
    first.rename(0, "changed")
    assert second[0].name == "foods"


def test_add_product_parses_numeric_string():
    catalog = Catalog()
    product = catalog.add_product("rice", "12.5")
    assert product == Product("rice", 12.5, 0.0, 0.0)
    assert len(catalog) == 1


def test_add_product_accepts_number_prefix():
    catalog = Catalog()
    product = catalog.add_product("tea", "  7abc")
    assert product.price == 7.0


@pytest.mark.parametrize("text", ["", "abc", "  x12", "."])
def test_add_product_rejects_non_numbers(text):
    catalog = Catalog()
    with pytest.raises(ValueError):
        catalog.add_product("bad", text)
    assert len(catalog) == 0


def test_parse_price_exponent():
    assert parse_price("2e3") == 2000.0


def test_rename_returns_old_name():
    catalog = Catalog.default()
    assert catalog.rename(1, "bread") == "pagkain"
    assert catalog[1].name == "bread"


def test_reprice_returns_old_price():
    catalog = Catalog.default()
    assert catalog.reprice(2, 40.0) == 32
    assert catalog[2].price == 40.0


def test_remove_shifts_following_products():
    catalog = Catalog.default()
    removed = catalog.remove(0)
    assert removed.name == "foods"
    assert catalog.names() == ["pagkain", "tabemono"]


def test_out_of_range_index_raises():
    catalog = Catalog.default()
    with pytest.raises(IndexError):
        catalog.remove(3)
    with pytest.raises(IndexError):
        catalog.rename(-1, "x")


def test_record_sales_adds_price_per_order():
    catalog = Catalog()
    catalog.add_product("a", "2")
    catalog.add_product("b", "5")
    catalog.record_sales([0, 0, 1])
    assert catalog[0].sales == 4.0
    assert catalog[1].sales == 5.0


def test_total_sales_matches_products():
    catalog = Catalog.default()
    assert catalog.total_sales() == sum(p.sales for p in catalog)
    catalog.record_sales([1])
    assert catalog.total_sales() == pytest.approx(
        sum(p.sales for p in Catalog.default()) + 33.33
    )


def test_rate_with_no_previous_replaces_rating():
    catalog = Catalog.default()
    assert catalog.rate(0, 2.0, 0) == 2.0
    assert catalog[0].rating == 2.0


def test_rate_averages_between_old_and_new():
    catalog = Catalog.default()
    result = catalog.rate(0, 3.0, 1)
    assert 3.0 < result < 5.0
    assert result == 4.0


@pytest.mark.parametrize("rating", [0.5, 5.5, -1])
def test_rate_rejects_out_of_range(rating):
    catalog = Catalog.default()
    with pytest.raises(ValueError):
        catalog.rate(0, rating, 0)
    assert catalog[0].rating == 5.0