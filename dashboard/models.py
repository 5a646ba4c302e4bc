from typing import List, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from dashboard.coercion import coerce_text, parse_bool, to_number

Number = Union[int, float]


class Record(BaseModel):
    """Base for records exchanged as camelCase JSON."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_dict(self) -> dict:
        return self.model_dump(by_alias=True)


class Item(Record):
    name: str = ""
    sku: str = ""
    qty_on_hand: Number = 0
    reorder_level: Number = 0
    stock_on_hand: Number = 0
    selling_price: Number = 0
    purchase_price: Number = 0
    unit: str = ""
    status: str = ""
    reference_id: str = ""
    is_low: bool = False
    image_url: str = ""
    category: str = ""
    parent_id: str = ""
    variant_options: str = ""
    promo_price: Number = 0
    promo_start: str = ""
    promo_end: str = ""
    featured: bool = False
    visible: bool = True
    sort_order: Number = 0

    @property
    def stock_value(self) -> Number:
        return self.qty_on_hand * self.selling_price


class Summary(Record):
    total_items: int = 0
    total_stock_qty: Number = 0
    total_stock_value: Number = 0
    low_stock_count: int = 0
    total_orders: int = 0
    revenue: Number = 0


class Inventory(Record):
    items: List[Item] = Field(default_factory=list)
    summary: Summary = Field(default_factory=Summary)


class Bundle(Record):
    bundle_id: str = ""
    title: str = ""
    description: str = ""
    skus: List[str] = Field(default_factory=list)
    discount_type: str = ""
    discount_value: Number = 0
    active: bool = True
    start_date: str = ""
    end_date: str = ""
    image_url: str = ""

    @field_validator("skus", mode="before")
    @classmethod
    def _split_skus(cls, value):
        if value is None:
            return []
        if not isinstance(value, (list, tuple, set)):
            value = str(value).split(",")
        return [str(sku).strip() for sku in value if str(sku).strip()]

    @field_validator(
        "bundle_id",
        "title",
        "description",
        "discount_type",
        "start_date",
        "end_date",
        "image_url",
        mode="before",
    )
    @classmethod
    def _text(cls, value):
        return coerce_text(value)

    @field_validator("discount_value", mode="before")
    @classmethod
    def _number(cls, value):
        return to_number(value)

    @field_validator("active", mode="before")
    @classmethod
    def _flag(cls, value):
        return parse_bool(value, True)
