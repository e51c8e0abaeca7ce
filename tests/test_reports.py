import pytest

from sellarity.catalog import Catalog, Product
from sellarity.reports import (
    GRAPH_SCALE,
    graph_lines,
    product_info_text,
    product_row,
    receipt_text,
    table_header,
    write_product_info,
    write_receipt,
)


def test_table_header_columns():
    header = table_header()
    assert header.startswith("ID: ")
    assert header.split() == [
        "ID:", "Product", "Name", "Product", "Price",
        "Product", "Ratigs", "Product", "Sales",
    ]
    assert header.index("Product Name") == 6


def test_product_row_aligns_with_header():
    header = table_header()
    row = product_row(0, Product("foods", 33.0, 5.0, 44545.0))
    assert len(row) == len(header)
    assert row[:6].strip() == "1"
    assert row[6:24].strip() == "foods"
    assert row[24:42].strip() == "33.00"


def test_product_row_long_name_not_truncated():
    name = "x" * 30
    row = product_row(4, Product(name, 1.0))
    assert name in row
    assert row.startswith("5")


def test_graph_lines_largest_fills_bar():
    lines = graph_lines(["a", "bb"], [10.0, 5.0])
    assert lines[0].count("*") == 25
    assert lines[1].count("*") == 12
    assert lines[0].startswith("a  | ")
    assert lines[0].endswith(" 10.0")


def test_graph_lines_scale_rows():
    lines = graph_lines(["abc"], [1.0])
    assert lines[-2] == " " * 6 + "-" * 25
    assert lines[-1] == " " * 6 + GRAPH_SCALE
    assert len(lines) == 3


def test_graph_lines_zero_values_have_no_bars():
    lines = graph_lines(["a", "b"], [0.0, 0.0])
    assert all("*" not in line for line in lines[:2])


def test_graph_lines_requires_values():
    with pytest.raises(ValueError):
        graph_lines([], [])


def test_receipt_text_lists_each_order():
    catalog = Catalog.default()
    text = receipt_text([0, 0, 2], catalog, 98.0, 2.0)
    lines = text.splitlines()
    assert lines[0] == "========== RECEIPT =========="
    assert lines[-1] == "Thank you for your purchase!"
    assert text.count("Product name: foods\n") == 2
    assert "Product name: tabemono\n" in text
    assert "TOTAL : 98.00\n" in text
    assert "CHANGE: 2.00\n" in text


def test_write_receipt_round_trip(tmp_path):
    catalog = Catalog.default()
    target = tmp_path / "receipt.txt"
    write_receipt(target, [1], catalog, 33.33, 0.0)
    assert target.read_text(encoding="utf-8") == receipt_text([1], catalog, 33.33, 0.0)


def test_write_receipt_bad_path_raises(tmp_path):
    with pytest.raises(OSError):
        write_receipt(tmp_path / "missing" / "r.txt", [], Catalog(), 0.0, 0.0)


def test_product_info_text_layout():
    catalog = Catalog.default()
    text = product_info_text(catalog, catalog.total_sales())
    assert text.startswith("\t\t\t======== PRODUCT INVENTORY ========\n\n")
    for index, product in enumerate(catalog):
        assert product_row(index, product) + "\n" in text
    assert f"TOTAL SALES: {catalog.total_sales():.2f}\n" in text
    assert text.endswith("=" * 74 + "\n")


def test_write_product_info_round_trip(tmp_path):
    catalog = Catalog.default()
    target = tmp_path / "productInfoFile.txt"
    write_product_info(target, catalog, 12.0)
    assert target.read_text(encoding="utf-8") == product_info_text(catalog, 12.0)