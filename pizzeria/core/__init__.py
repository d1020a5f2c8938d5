# -----------------------------------------------------------------------------
# CORE LAYER
# -----------------------------------------------------------------------------
# The business logic of the pizzeria:
# - FamilyCatalog: One read-only menu per region
# - Strategies: Direct, Regional (kitchen capability), Family (abstract factory)
# - OrderPipeline: One order from request to box
# - OrderLoop: Counter service over a stream of tokens
# - Settings: shop.yaml + environment overrides
# -----------------------------------------------------------------------------

from .catalog import CATALOGS, FamilyCatalog, get_catalog
from .loop import OrderLoop
from .pipeline import OrderPipeline, OrderTicket
from .settings import ShopSettings, load_settings
from .strategy import (
    DirectStrategy,
    FamilyStrategy,
    NoCatalogConfigured,
    RegionalStrategy,
    build_strategy,
)

__all__ = [
    "CATALOGS", "FamilyCatalog", "get_catalog",
    "OrderLoop",
    "OrderPipeline", "OrderTicket",
    "ShopSettings", "load_settings",
    "DirectStrategy", "FamilyStrategy", "NoCatalogConfigured", "RegionalStrategy",
    "build_strategy",
]
