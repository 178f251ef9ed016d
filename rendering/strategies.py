"""
One pure rendering strategy per response type.

Each strategy maps the `data` of a chat response to a single block, or to None when
there is nothing worth showing. None of them raise on missing or malformed data.
"""
import logging
from enum import Enum
from typing import Any, Callable, TypeVar

from pydantic import BaseModel, ValidationError

from rendering.blocks import (
    Block,
    CartBlock,
    CartLineCard,
    OrderCard,
    OrderListBlock,
    ProductCard,
    ProductDetailBlock,
    ProductListBlock,
    ProductOptionLine,
)
from rendering.formatting import (
    format_date,
    format_money,
    image_or_placeholder,
    status_or_unknown,
    url_or_fallback,
)
from schemas.commerce import CartLine, CartSummary, Order, Pagination, Product

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class ResponseType(str, Enum):
    TEXT = "text"
    PRODUCT_LIST = "product_list"
    PRODUCT_DETAIL = "product_detail"
    ORDER_LIST = "order_list"
    CART_LIST = "cart_list"

    @classmethod
    def _missing_(cls, value):
        # Unknown or absent types render like plain text
        return cls.TEXT


def _parse(model: type[ModelT], raw: Any) -> ModelT | None:
    try:
        return model.model_validate(raw)
    except ValidationError as e:
        logger.warning(f"Skipping malformed {model.__name__}: {e.error_count()} validation error(s)")
        return None


def _results(data: Any, model: type[ModelT]) -> list[ModelT]:
    if not isinstance(data, dict):
        return []
    raw_results = data.get("results")
    if not isinstance(raw_results, list):
        return []
    parsed = (_parse(model, raw) for raw in raw_results)
    return [item for item in parsed if item is not None]


def product_card(product: Product) -> ProductCard:
    in_stock = product.stock is not None and product.stock > 0
    return ProductCard(
        name=product.name,
        price=format_money(product.price),
        image_url=image_or_placeholder(product.imageUrl),
        url=url_or_fallback(product.url),
        product_number=product.productNumber or None,
        options=tuple(opt.option for opt in product.options),
        stock_label=f"{product.stock} in stock" if in_stock else None,
        out_of_stock=product.stock is not None and not in_stock,
    )


def render_text(data: Any) -> Block | None:
    # The response message is the whole output
    return None


def render_product_list(data: Any) -> ProductListBlock | None:
    products = _results(data, Product)
    if not products:
        return None

    pagination = None
    raw_pagination = data.get("pagination")
    if raw_pagination is not None:
        page = _parse(Pagination, raw_pagination)
        if page and page.hasNextPage:
            pagination = f"Showing {len(products)} of {page.total} products"

    return ProductListBlock(
        cards=tuple(product_card(product) for product in products),
        pagination=pagination,
    )


def render_product_detail(data: Any) -> ProductDetailBlock | None:
    if not data:
        return None
    product = _parse(Product, data)
    if product is None:
        return None

    stock_label = None
    if product.stock is not None:
        stock_label = f"{product.stock} in stock" if product.stock > 0 else "Out of stock"

    return ProductDetailBlock(
        name=product.name,
        price=format_money(product.price),
        image_url=image_or_placeholder(product.imageUrl),
        url=url_or_fallback(product.url),
        product_number=product.productNumber or None,
        stock_label=stock_label,
        options=tuple(ProductOptionLine(opt.group, opt.option) for opt in product.options),
    )


def order_card(order: Order) -> OrderCard:
    return OrderCard(
        label=f"Order #{order.orderNumber or order.id or ''}",
        status=status_or_unknown(order.status),
        status_class=(order.status or "").lower(),
        date=format_date(order.date),
        total=f"Total: {format_money(order.total)}" if order.total else None,
        items=f"{order.items} item(s)" if order.items else None,
    )


def render_order_list(data: Any) -> OrderListBlock | None:
    orders = _results(data, Order)
    if not orders:
        return None
    return OrderListBlock(orders=tuple(order_card(order) for order in orders))


def cart_line_card(line: CartLine) -> CartLineCard:
    return CartLineCard(
        name=line.name,
        image_url=image_or_placeholder(line.imageUrl),
        quantity=line.quantity,
        total=format_money(line.price),
        unit_price=format_money(line.unitPrice) if line.unitPrice is not None else None,
        product_number=line.productNumber or None,
    )


def render_cart_list(data: Any) -> CartBlock | None:
    lines = _results(data, CartLine)
    if not lines:
        return None

    summary = _parse(CartSummary, {"total": data.get("total") or 0}) or CartSummary()
    return CartBlock(
        header=f"Cart Total: {format_money(summary.total)}",
        lines=tuple(cart_line_card(line) for line in lines),
    )


STRATEGIES: dict[ResponseType, Callable[[Any], Block | None]] = {
    ResponseType.TEXT: render_text,
    ResponseType.PRODUCT_LIST: render_product_list,
    ResponseType.PRODUCT_DETAIL: render_product_detail,
    ResponseType.ORDER_LIST: render_order_list,
    ResponseType.CART_LIST: render_cart_list,
}
