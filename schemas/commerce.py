from pydantic import BaseModel, ConfigDict, Field


class ProductOption(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    group: str = ""
    option: str = ""


class Product(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    name: str
    price: float
    imageUrl: str | None = None
    url: str | None = None
    stock: int | None = None
    productNumber: str | None = None
    options: list[ProductOption] = Field(default_factory=list)


class CartLine(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    name: str
    price: float = Field(..., description="Total price of the line item.")
    unitPrice: float | None = None
    quantity: int
    imageUrl: str | None = None
    productNumber: str | None = None


class Order(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    orderNumber: str | None = None
    id: str | None = None
    status: str | None = None
    date: str | None = None
    total: float | None = None
    items: int | None = None


class Pagination(BaseModel):
    total: int = 0
    hasNextPage: bool = False


class CartSummary(BaseModel):
    total: float = 0
