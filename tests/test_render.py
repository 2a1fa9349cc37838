from estoque.render import (
    filter_products,
    format_price,
    format_stock,
    products_csv,
    products_frame,
)
from estoque.schemas import Product


def make_products():
    return [
        Product(id=1, name="Widget", description="blue", price=9.5, stock=3),
        Product(id=2, name="Gadget", description="", price=20, stock=1),
    ]


class TestFilterProducts:
    def test_case_insensitive_substring(self):
        products = make_products()

        assert filter_products(products, "wid") == [products[0]]
        assert filter_products(products, "GAD") == [products[1]]

    def test_empty_query_returns_all(self):
        products = make_products()
        assert filter_products(products, "") == products

    def test_no_match(self):
        assert filter_products(make_products(), "sprocket") == []

    def test_does_not_mutate_input(self):
        products = tuple(make_products())
        filter_products(products, "wid")
        assert len(products) == 2


class TestFormatting:
    def test_price_two_decimals(self):
        assert format_price(10) == "R$ 10.00"
        assert format_price(9.5) == "R$ 9.50"
        assert format_price(None) == "R$ 0.00"

    def test_stock_units(self):
        assert format_stock(5) == "5 unidades"
        assert format_stock(None) == "0 unidades"


class TestExport:
    def test_frame_columns(self):
        df = products_frame(make_products())

        assert list(df.columns) == ["id", "name", "description", "price", "stock"]
        assert df["name"].tolist() == ["Widget", "Gadget"]

    def test_empty_frame_keeps_columns(self):
        df = products_frame([])
        assert df.empty
        assert list(df.columns) == ["id", "name", "description", "price", "stock"]

    def test_csv_bytes(self):
        csv = products_csv(make_products()).decode("utf-8").splitlines()
        assert csv[0] == "id,name,description,price,stock"
        assert csv[1] == "1,Widget,blue,9.5,3"
