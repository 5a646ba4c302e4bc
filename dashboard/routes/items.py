from flask import request

from dashboard.schemas import ClassifyRequest, CreateItemRequest, ItemImageRequest, ItemMetaRequest
from dashboard.services import items as items_service
from dashboard.sheets import get_sheet_settings, get_sheets_client
from dashboard.utils import failure, ok, validate_schema
from . import api_bp


@api_bp.route("/inventory", methods=["GET"])
def get_inventory():
    """Full item list plus summary aggregates.
    ---
    tags:
      - Inventory
    responses:
      200:
        description: Items included by status and their summary
    """
    try:
        inventory = items_service.get_inventory_data(get_sheets_client(), get_sheet_settings())
    except Exception as e:
        return failure("GET /api/inventory", e, "Failed to load inventory")
    return ok(inventory.to_dict())


@api_bp.route("/variants", methods=["GET"])
def get_variants():
    """Variants whose parent id is the given SKU.
    ---
    tags:
      - Inventory
    parameters:
      - name: parentSku
        in: query
        type: string
        required: true
    responses:
      200:
        description: Variant items
      400:
        description: parentSku missing
    """
    try:
        variants = items_service.get_variants_by_parent_sku(
            get_sheets_client(), get_sheet_settings(), request.args.get("parentSku")
        )
    except Exception as e:
        return failure("GET /api/variants", e, "Failed to load variants")
    return ok({"variants": [item.to_dict() for item in variants]})


@api_bp.route("/items", methods=["POST"])
@validate_schema(CreateItemRequest)
def create_item():
    try:
        result = items_service.create_product(
            get_sheets_client(), get_sheet_settings(), request.validated_data.payload()
        )
    except Exception as e:
        return failure("POST /api/items", e, "Failed to create item")
    return ok(result)


@api_bp.route("/items/classify", methods=["POST"])
@validate_schema(ClassifyRequest)
def classify_item():
    data = request.validated_data
    try:
        items_service.update_classification_by_sku(
            get_sheets_client(), get_sheet_settings(), data.sku, data.category, data.parent_id
        )
    except Exception as e:
        return failure("POST /api/items/classify", e, "Failed to update classification")
    return ok({"success": True})


@api_bp.route("/items/meta", methods=["POST"])
@validate_schema(ItemMetaRequest)
def update_item_meta():
    try:
        items_service.update_item_meta_by_sku(
            get_sheets_client(), get_sheet_settings(), request.validated_data.payload()
        )
    except Exception as e:
        return failure("POST /api/items/meta", e, "Failed to update item metadata")
    return ok({"success": True})


@api_bp.route("/items/image", methods=["POST"])
@validate_schema(ItemImageRequest)
def update_item_image():
    data = request.validated_data
    try:
        result = items_service.update_image_url_by_sku(
            get_sheets_client(), get_sheet_settings(), data.sku, data.image_url
        )
    except Exception as e:
        return failure("POST /api/items/image", e, "Failed to update image URL")
    return ok(result)
