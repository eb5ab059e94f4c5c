from typing import Optional

from app.db.models.products import StockStatus


def derive_status(quantity: int, reorder_point: int) -> StockStatus:
    """Stock status as a pure function of quantity and reorder point.

    Only an exact zero is Out of Stock; negative quantities (from unclamped
    OUT/DAMAGE movements) fall under Low Stock.
    """
    if quantity == 0:
        return StockStatus.OUT_OF_STOCK
    if quantity <= reorder_point:
        return StockStatus.LOW_STOCK
    return StockStatus.IN_STOCK


def resolve_status(
    quantity: int,
    reorder_point: int,
    requested: Optional[StockStatus] = None,
) -> StockStatus:
    """Status for a create or update payload.

    An explicit Damaged marking is kept; any other requested status is
    replaced by the derived one.
    """
    if requested == StockStatus.DAMAGED:
        return StockStatus.DAMAGED
    return derive_status(quantity, reorder_point)
