from .api import ApiError, InventoryApiClient, make_writer
from .state import DashboardState, FieldStatus, PendingEdit, SAVED, SAVING, ERROR
from .views import ViewFilters, derive_view, is_on_sale_now

__all__ = [
    "ApiError",
    "InventoryApiClient",
    "make_writer",
    "DashboardState",
    "FieldStatus",
    "PendingEdit",
    "SAVED",
    "SAVING",
    "ERROR",
    "ViewFilters",
    "derive_view",
    "is_on_sale_now",
]
