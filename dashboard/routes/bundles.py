from flask import request

from dashboard.services import bundles as bundles_service
from dashboard.sheets import get_sheet_settings, get_sheets_client
from dashboard.utils import failure, ok
from . import api_bp


def _body():
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


@api_bp.route("/bundles", methods=["GET"])
def list_bundles():
    """All bundles with a bundle id.
    ---
    tags:
      - Bundles
    responses:
      200:
        description: Bundle records
    """
    try:
        bundles = bundles_service.list_bundles(get_sheets_client(), get_sheet_settings())
    except Exception as e:
        return failure("GET /api/bundles", e, "Failed to load bundles")
    return ok({"bundles": [bundle.to_dict() for bundle in bundles]})


@api_bp.route("/bundles", methods=["POST"])
def create_bundle():
    data = _body()
    try:
        bundle = bundles_service.create_bundle(get_sheets_client(), get_sheet_settings(), data)
    except Exception as e:
        return failure("POST /api/bundles", e, "Failed to create bundle")
    return ok({"success": True, "bundle": bundle.to_dict()})


@api_bp.route("/bundles/<bundle_id>", methods=["PUT"])
def update_bundle(bundle_id):
    data = _body()
    try:
        bundle = bundles_service.update_bundle(
            get_sheets_client(), get_sheet_settings(), bundle_id, data
        )
    except Exception as e:
        return failure("PUT /api/bundles/:id", e, "Failed to update bundle")
    return ok({"success": True, "bundle": bundle.to_dict()})


@api_bp.route("/bundles/<bundle_id>", methods=["DELETE"])
def delete_bundle(bundle_id):
    try:
        result = bundles_service.delete_bundle(get_sheets_client(), get_sheet_settings(), bundle_id)
    except Exception as e:
        return failure("DELETE /api/bundles/:id", e, "Failed to delete bundle")
    return ok(result)
