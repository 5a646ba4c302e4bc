from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

NumberLike = Optional[Union[int, float, str]]
FlagLike = Optional[Union[bool, int, str]]


class RequestModel(BaseModel):
    """Lenient request body: text fields accept any scalar, unknown keys are dropped."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    @field_validator("*", mode="before")
    @classmethod
    def _scalars_as_text(cls, value, info):
        annotation = cls.model_fields[info.field_name].annotation
        if annotation == Optional[str] and value is not None and not isinstance(value, str):
            return str(value)
        return value

    def payload(self) -> dict:
        return self.model_dump(by_alias=True)


class ClassifyRequest(RequestModel):
    sku: Optional[str] = None
    category: Optional[str] = None
    parent_id: Optional[str] = None


class ItemImageRequest(RequestModel):
    sku: Optional[str] = None
    image_url: Optional[str] = None


class ItemMetaRequest(RequestModel):
    sku: Optional[str] = None
    category: Optional[str] = None
    parent_id: Optional[str] = None
    variant_options: Optional[str] = None
    promo_price: NumberLike = None
    promo_start: Optional[str] = None
    promo_end: Optional[str] = None
    featured: FlagLike = None
    visible: FlagLike = None
    sort_order: NumberLike = None


class CreateItemRequest(ItemMetaRequest):
    name: Optional[str] = None
    qty_on_hand: NumberLike = None
    reorder_level: NumberLike = None
    stock_on_hand: NumberLike = None
    selling_price: NumberLike = None
    reference_id: Optional[str] = None
    purchase_price: NumberLike = None
    status: Optional[str] = None
    unit: Optional[str] = None
    image_url: Optional[str] = None
