# -----------------------------------------------------------------------------
# DOMAIN LAYER
# -----------------------------------------------------------------------------
# The Pizza and its lifecycle, plus the result models the pipeline reports.
# -----------------------------------------------------------------------------

from .models import (
    Failure,
    FailureReason,
    NotFound,
    OrderResult,
    OrderState,
    Success,
    TicketEntry,
)
from .pizza import STAGE_ORDER, OutOfOrderStageError, Pizza, Recipe, Stage

__all__ = [
    "Failure", "FailureReason", "NotFound", "OrderResult", "OrderState",
    "Success", "TicketEntry",
    "STAGE_ORDER", "OutOfOrderStageError", "Pizza", "Recipe", "Stage",
]
