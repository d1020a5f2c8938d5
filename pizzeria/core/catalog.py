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
# FAMILY CATALOGS - ONE MENU PER REGION
# -----------------------------------------------------------------------------
# Responsibility: Turn a type token into a fresh, region-flavored Pizza.
#
# Each region owns exactly one catalog. Regions may share tokens ("cheese"
# exists in Beijing and London) but a catalog only ever builds pizzas of its
# own region. Unknown tokens come back as NotFound, not as an exception.
# -----------------------------------------------------------------------------

from collections.abc import Mapping
from types import MappingProxyType

from rich.console import Console

from pizzeria.domain.models import NotFound
from pizzeria.domain.pizza import Pizza, Recipe

console = Console()

BEIJING = "Beijing"
LONDON = "London"
HOUSE = "House"

BEIJING_RECIPES = {
    "cheese": Recipe("Beijing Cheese Pizza", ("mozzarella", "scallion", "hoisin glaze")),
    "pepper": Recipe("Beijing Pepper Pizza", ("sichuan pepper", "chili oil", "mozzarella")),
}

LONDON_RECIPES = {
    "cheese": Recipe("London Cheese Pizza", ("cheddar", "stilton", "mozzarella")),
    "pepper": Recipe("London Pepper Pizza", ("black pepper", "bell pepper", "mozzarella")),
}

# Regionless menu for the single-factory counter
HOUSE_RECIPES = {
    "cheese": Recipe("House Cheese Pizza", ("mozzarella", "parmesan")),
    "greek": Recipe("House Greek Pizza", ("feta", "olives", "red onion")),
    "pepper": Recipe("House Pepper Pizza", ("bell pepper", "mozzarella")),
}


class FamilyCatalog:
    """
    Read-only menu for one region.

    Safe to share between orders: it holds no per-order state and every
    create() call builds a new Pizza.
    """

    def __init__(self, region: str, recipes: Mapping[str, Recipe]) -> None:
        self._region = region
        self._recipes = MappingProxyType(dict(recipes))

    @property
    def region(self) -> str:
        return self._region

    @property
    def tokens(self) -> list[str]:
        """Type tokens this catalog recognizes."""
        return sorted(self._recipes)

    def create(self, token: str) -> Pizza | NotFound:
        """
        Build a fresh Pizza for the token.

        Args:
            token: Type token, matched exactly (no case folding).

        Returns:
            A new Pizza at Stage.CREATED, or NotFound if the token is unknown.
        """
        recipe = self._recipes.get(token)
        if recipe is None:
            console.print(f"[yellow][CATALOG] {self._region}: no '{token}' on the menu[/yellow]")
            return NotFound(token=token, region=self._region)

        console.print(f"[cyan][CATALOG] {self._region}: building {recipe.display_name}[/cyan]")
        return Pizza(token=token, region=self._region, recipe=recipe)

    def __repr__(self) -> str:
        return f"FamilyCatalog(region={self._region!r}, tokens={self.tokens!r})"


BEIJING_CATALOG = FamilyCatalog(BEIJING, BEIJING_RECIPES)
LONDON_CATALOG = FamilyCatalog(LONDON, LONDON_RECIPES)
HOUSE_CATALOG = FamilyCatalog(HOUSE, HOUSE_RECIPES)

CATALOGS: dict[str, FamilyCatalog] = {
    BEIJING: BEIJING_CATALOG,
    LONDON: LONDON_CATALOG,
    HOUSE: HOUSE_CATALOG,
}


def get_catalog(region: str) -> FamilyCatalog:
    """
    Look up the catalog for a region.

    Raises:
        KeyError: Unknown region. This is a configuration mistake, not an
            order failure, so it is not turned into a NotFound.
    """
    try:
        return CATALOGS[region]
    except KeyError:
        raise KeyError(f"Unknown region '{region}'. Known regions: {sorted(CATALOGS)}") from None
