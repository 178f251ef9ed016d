"""
View models appended to the message log.

Blocks carry plain, already-formatted text. Turning them into markup (and escaping
it) is the job of whichever adapter displays the log.
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class TextBlock:
    text: str

    @property
    def lines(self) -> list[str]:
        return self.text.split("\n")


@dataclass(frozen=True)
class ProductCard:
    name: str
    price: str
    image_url: str
    url: str
    product_number: str | None = None
    options: tuple[str, ...] = ()
    stock_label: str | None = None
    out_of_stock: bool = False


@dataclass(frozen=True)
class ProductListBlock:
    cards: tuple[ProductCard, ...]
    pagination: str | None = None


@dataclass(frozen=True)
class ProductOptionLine:
    group: str
    option: str

    def __str__(self):
        return f"{self.group}: {self.option}"


@dataclass(frozen=True)
class ProductDetailBlock:
    name: str
    price: str
    image_url: str
    url: str
    product_number: str | None = None
    stock_label: str | None = None
    options: tuple[ProductOptionLine, ...] = ()
    call_to_action: str = "View full details →"


@dataclass(frozen=True)
class OrderCard:
    label: str
    status: str
    status_class: str
    date: str | None = None
    total: str | None = None
    items: str | None = None


@dataclass(frozen=True)
class OrderListBlock:
    orders: tuple[OrderCard, ...]


@dataclass(frozen=True)
class CartLineCard:
    name: str
    image_url: str
    quantity: int
    total: str
    unit_price: str | None = None
    product_number: str | None = None
    url: str = "#"

    @property
    def quantity_label(self) -> str:
        return f"Qty: {self.quantity}"

    @property
    def unit_price_label(self) -> str | None:
        if self.unit_price is None:
            return None
        return f"@ {self.unit_price} / each"


@dataclass(frozen=True)
class CartBlock:
    header: str
    lines: tuple[CartLineCard, ...]


Block = TextBlock | ProductListBlock | ProductDetailBlock | OrderListBlock | CartBlock
