from typing import Iterable, List, Optional

import pandas as pd

from estoque.schemas import Product

EXPORT_COLUMNS = ["id", "name", "description", "price", "stock"]


def filter_products(products: Iterable[Product], query: str) -> List[Product]:
    needle = (query or "").lower()
    return [p for p in products if needle in (p.name or "").lower()]


def format_price(price: Optional[float]) -> str:
    return f"R$ {float(price or 0):.2f}"


def format_stock(stock: Optional[int]) -> str:
    return f"{stock if stock is not None else 0} unidades"


def products_frame(products: Iterable[Product]) -> pd.DataFrame:
    rows = [p.model_dump(include=set(EXPORT_COLUMNS)) for p in products]
    return pd.DataFrame(rows, columns=EXPORT_COLUMNS)


def products_csv(products: Iterable[Product]) -> bytes:
    return products_frame(products).to_csv(index=False).encode("utf-8")
