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
# THE PIZZA - PRODUCT & LIFECYCLE
# -----------------------------------------------------------------------------
# Every catalog produces a Pizza. Every Pizza walks the same four stations:
#
#   CREATED -> PREPARED -> BAKED -> CUT -> BOXED
#
# A station can only be entered from the one before it. Skipping, repeating
# or going backwards raises OutOfOrderStageError immediately.
# -----------------------------------------------------------------------------

from dataclasses import dataclass, field
from enum import Enum

from rich.console import Console

console = Console()


class Stage(str, Enum):
    """Lifecycle stages of a Pizza, in the only order they may be applied."""

    CREATED = "created"
    PREPARED = "prepared"
    BAKED = "baked"
    CUT = "cut"
    BOXED = "boxed"


STAGE_ORDER = [Stage.CREATED, Stage.PREPARED, Stage.BAKED, Stage.CUT, Stage.BOXED]


class OutOfOrderStageError(Exception):
    """
    Raised when a lifecycle stage is invoked before its predecessor completed.

    This is a logic defect, never an expected order outcome.
    """

    def __init__(self, message: str, attempted: Stage, expected: Stage, actual: Stage) -> None:
        super().__init__(message)
        self.attempted = attempted
        self.expected = expected
        self.actual = actual


@dataclass(frozen=True)
class Recipe:
    """Region-specific flavor of one pizza variant."""

    display_name: str
    ingredients: tuple[str, ...] = ()


@dataclass
class Pizza:
    """
    The product every catalog builds.

    Fields:
    - token: The type token it was ordered by (e.g. "cheese")
    - region: The family it belongs to (e.g. "Beijing")
    - recipe: Display name and ingredients for this region
    - stage: Current lifecycle stage, read-only; only the stage methods move it
    """

    token: str
    region: str
    recipe: Recipe
    _stage: Stage = field(default=Stage.CREATED, init=False, repr=False)

    @property
    def stage(self) -> Stage:
        return self._stage

    @property
    def label(self) -> str:
        return f"{self.token}/{self.region}"

    @property
    def display_name(self) -> str:
        return self.recipe.display_name

    @property
    def ingredients(self) -> tuple[str, ...]:
        return self.recipe.ingredients

    def prepare(self) -> None:
        """Gather the ingredients."""
        self._advance(Stage.PREPARED)
        items = ", ".join(self.ingredients) or "house ingredients"
        console.print(f"[cyan][KITCHEN] {self.display_name}: preparing {items}[/cyan]")

    def bake(self) -> None:
        self._advance(Stage.BAKED)
        console.print(f"[cyan][KITCHEN] {self.display_name}: baking[/cyan]")

    def cut(self) -> None:
        self._advance(Stage.CUT)
        console.print(f"[cyan][KITCHEN] {self.display_name}: cutting[/cyan]")

    def box(self) -> None:
        self._advance(Stage.BOXED)
        console.print(f"[green][KITCHEN] {self.display_name}: boxed[/green]")

    def describe(self) -> str:
        """One-line summary for reports."""
        return f"{self.display_name} ({self.label}) - {self.stage.value}"

    def _advance(self, target: Stage) -> None:
        """Move to target, which must directly follow the current stage."""
        expected = STAGE_ORDER[STAGE_ORDER.index(target) - 1]
        if self.stage != expected:
            console.print(
                f"[red][KITCHEN] Out of order: {target.value} requested while "
                f"{self.label} is {self.stage.value}[/red]"
            )
            raise OutOfOrderStageError(
                f"Cannot {target.value} {self.label}: stage is {self.stage.value}, "
                f"expected {expected.value}",
                attempted=target,
                expected=expected,
                actual=self.stage,
            )
        self._stage = target
