from .items import ClassifyRequest, CreateItemRequest, ItemImageRequest, ItemMetaRequest

__all__ = [
    "ClassifyRequest",
    "CreateItemRequest",
    "ItemImageRequest",
    "ItemMetaRequest",
]
