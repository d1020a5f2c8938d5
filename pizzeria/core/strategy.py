# Copyright 2026 Pramod Kumar Voola
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

# -----------------------------------------------------------------------------
# CREATION STRATEGIES - TOKEN -> PIZZA
# -----------------------------------------------------------------------------
# Three interchangeable ways to turn a type token into a Pizza, all behind
# the same create_product() interface:
#
# - DirectStrategy:   one catalog, fixed at construction
# - RegionalStrategy: a per-region kitchen capability does the creation
# - FamilyStrategy:   catalog injected and swappable at runtime (set_family)
#
# For the same (region, token) all three produce the same label and, after
# the pipeline, the same final stage. New regions should be added as a
# FamilyCatalog and served through FamilyStrategy.
# -----------------------------------------------------------------------------

from typing import Protocol

from rich.console import Console

from pizzeria.core.catalog import (
    BEIJING,
    BEIJING_RECIPES,
    HOUSE_CATALOG,
    LONDON,
    LONDON_RECIPES,
    FamilyCatalog,
    get_catalog,
)
from pizzeria.domain.models import NotFound
from pizzeria.domain.pizza import Pizza

console = Console()

STRATEGY_KINDS = ("direct", "regional", "family")


class NoCatalogConfigured(Exception):
    """Raised when FamilyStrategy is asked for a pizza before set_family()."""

    def __init__(self, message: str, token: str) -> None:
        super().__init__(message)
        self.token = token


class CreationStrategy(Protocol):
    """Protocol every creation strategy implements."""

    @property
    def region(self) -> str | None:
        ...

    def create_product(self, token: str) -> Pizza | NotFound:
        ...


class RegionKitchen(Protocol):
    """Per-region capability: knows how to build its own region's pizzas."""

    region: str

    def create_pizza(self, token: str) -> Pizza | NotFound:
        ...


class BeijingKitchen:
    """Beijing's own creation method."""

    region = BEIJING

    def create_pizza(self, token: str) -> Pizza | NotFound:
        if token == "cheese":
            return Pizza(token=token, region=self.region, recipe=BEIJING_RECIPES["cheese"])
        elif token == "pepper":
            return Pizza(token=token, region=self.region, recipe=BEIJING_RECIPES["pepper"])
        return NotFound(token=token, region=self.region)


class LondonKitchen:
    """London's own creation method."""

    region = LONDON

    def create_pizza(self, token: str) -> Pizza | NotFound:
        if token == "cheese":
            return Pizza(token=token, region=self.region, recipe=LONDON_RECIPES["cheese"])
        elif token == "pepper":
            return Pizza(token=token, region=self.region, recipe=LONDON_RECIPES["pepper"])
        return NotFound(token=token, region=self.region)


KITCHENS: dict[str, type] = {
    BEIJING: BeijingKitchen,
    LONDON: LondonKitchen,
}


class DirectStrategy:
    """Forwards every request to the one catalog it was built with."""

    def __init__(self, catalog: FamilyCatalog = HOUSE_CATALOG) -> None:
        self._catalog = catalog

    @property
    def region(self) -> str:
        return self._catalog.region

    def create_product(self, token: str) -> Pizza | NotFound:
        return self._catalog.create(token)


class RegionalStrategy:
    """
    Fixed pipeline template paired with a per-region kitchen.

    The kitchen is the only thing that differs between regions; swapping
    regions means passing a different kitchen, not subclassing.
    """

    def __init__(self, kitchen: RegionKitchen) -> None:
        self._kitchen = kitchen

    @property
    def region(self) -> str:
        return self._kitchen.region

    def create_product(self, token: str) -> Pizza | NotFound:
        pizza = self._kitchen.create_pizza(token)
        if isinstance(pizza, NotFound):
            console.print(f"[yellow][KITCHEN] {self.region}: cannot make '{token}'[/yellow]")
        return pizza


class FamilyStrategy:
    """
    Abstract-factory strategy: the catalog is injected and may be swapped.

    Using it before a catalog is set raises NoCatalogConfigured instead of
    silently producing nothing.
    """

    def __init__(self, catalog: FamilyCatalog | None = None) -> None:
        self._catalog: FamilyCatalog | None = None
        if catalog is not None:
            self.set_family(catalog)

    @property
    def region(self) -> str | None:
        return self._catalog.region if self._catalog else None

    @property
    def is_configured(self) -> bool:
        return self._catalog is not None

    def set_family(self, catalog: FamilyCatalog) -> None:
        """
        Swap the active catalog.

        Raises:
            TypeError: If catalog does not look like a FamilyCatalog.
        """
        if catalog is None or not callable(getattr(catalog, "create", None)) or not getattr(
            catalog, "region", None
        ):
            raise TypeError(f"set_family() needs a FamilyCatalog, got {catalog!r}")

        previous = self.region
        self._catalog = catalog
        if previous and previous != catalog.region:
            console.print(f"[cyan][STRATEGY] Family switched: {previous} -> {catalog.region}[/cyan]")
        else:
            console.print(f"[cyan][STRATEGY] Family set: {catalog.region}[/cyan]")

    def create_product(self, token: str) -> Pizza | NotFound:
        if self._catalog is None:
            console.print(f"[red][STRATEGY] No catalog configured for '{token}'[/red]")
            raise NoCatalogConfigured(
                f"No family catalog configured; call set_family() before ordering '{token}'",
                token=token,
            )
        return self._catalog.create(token)


def build_strategy(kind: str, region: str) -> CreationStrategy:
    """
    Build a creation strategy by name.

    Args:
        kind: "direct", "regional" or "family".
        region: Region name; must exist for the chosen kind.

    Returns:
        A ready-to-use strategy bound to the region.

    Raises:
        ValueError: Unknown strategy kind.
        KeyError: Region unknown for the chosen kind.
    """
    if kind == "direct":
        return DirectStrategy(get_catalog(region))
    if kind == "regional":
        if region not in KITCHENS:
            raise KeyError(f"No kitchen for region '{region}'. Known kitchens: {sorted(KITCHENS)}")
        return RegionalStrategy(KITCHENS[region]())
    if kind == "family":
        return FamilyStrategy(get_catalog(region))
    raise ValueError(f"Unknown strategy '{kind}'. Expected one of: {', '.join(STRATEGY_KINDS)}")
