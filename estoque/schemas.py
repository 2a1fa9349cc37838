import math
import re
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict

REQUIRED_DRAFT_FIELDS = ("name", "price", "stock")
NUMERIC_DRAFT_FIELDS = ("price", "stock")

# Plain decimal notation only: no digit separators, hex or words.
NUMBER_RE = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$")


def to_number(text: str) -> Optional[Union[int, float]]:
    """Coerce form text to a JSON number; blank is 0, garbage is None."""
    text = (text or "").strip()
    if not text:
        return 0
    if not NUMBER_RE.match(text):
        return None
    value = float(text)
    if not math.isfinite(value):
        return None
    if value.is_integer():
        return int(value)
    return value


class Product(BaseModel):
    model_config = ConfigDict(frozen=True, extra="allow")

    id: Union[int, str]
    name: str = ""
    description: Optional[str] = ""
    price: Optional[float] = None
    stock: Optional[int] = None


class ProductCreate(BaseModel):
    name: str
    description: str
    price: Optional[Union[int, float]]
    stock: Optional[Union[int, float]]


class Draft(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = ""
    description: str = ""
    price: str = ""
    stock: str = ""

    def missing_fields(self) -> List[str]:
        return [f for f in REQUIRED_DRAFT_FIELDS if not getattr(self, f).strip()]

    def invalid_fields(self) -> List[str]:
        return [
            f for f in NUMERIC_DRAFT_FIELDS
            if getattr(self, f).strip() and to_number(getattr(self, f)) is None
        ]

    def to_payload(self) -> ProductCreate:
        return ProductCreate(
            name=self.name,
            description=self.description,
            price=to_number(self.price),
            stock=to_number(self.stock),
        )
