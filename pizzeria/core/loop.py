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
# THE ORDER LOOP - COUNTER SERVICE
# -----------------------------------------------------------------------------
# Responsibility: Read tokens one at a time, hand each to the pipeline, and
# report every outcome. One order finishes before the next token is read.
#
# Stops on:
# - End of input (source exhausted, or an empty/None token)
# - A stop token (no result is emitted for it)
# - Too many failures in a row (settings.max_consecutive_failures)
#
# A single failed order is never a reason to stop.
# -----------------------------------------------------------------------------

from collections.abc import Iterable, Iterator

from rich.console import Console

from pizzeria.core.pipeline import OrderPipeline
from pizzeria.core.settings import ShopSettings
from pizzeria.core.strategy import CreationStrategy
from pizzeria.domain.models import OrderResult

console = Console()


class OrderLoop:
    """Drives the pipeline over a stream of type tokens."""

    def __init__(
        self,
        strategy: CreationStrategy,
        pipeline: OrderPipeline | None = None,
        settings: ShopSettings | None = None,
    ) -> None:
        self.strategy = strategy
        self._pipeline = pipeline or OrderPipeline()
        self._settings = settings or ShopSettings()

    def run(self, tokens: Iterable[str | None]) -> Iterator[OrderResult]:
        """
        Process orders lazily until a termination condition is met.

        Args:
            tokens: Any iterable of tokens; may be infinite.

        Yields:
            One OrderResult per processed order.
        """
        stop_tokens = set(self._settings.stop_tokens)
        limit = self._settings.max_consecutive_failures
        failures_in_row = 0

        for token in tokens:
            if not token:
                console.print("[dim][LOOP] End of input[/dim]")
                return
            if token in stop_tokens:
                console.print(f"[dim][LOOP] Stop requested ('{token}')[/dim]")
                return

            result = self._pipeline.process(self.strategy, token)
            yield result

            if result.succeeded:
                failures_in_row = 0
                continue

            failures_in_row += 1
            if limit and failures_in_row >= limit:
                console.print(f"[red][LOOP] {failures_in_row} failed orders in a row, closing[/red]")
                return

        console.print("[dim][LOOP] Token source exhausted[/dim]")

    def run_all(self, tokens: Iterable[str | None]) -> list[OrderResult]:
        """Run the loop to completion and collect every result."""
        return list(self.run(tokens))

    @staticmethod
    def summary(results: Iterable[OrderResult]) -> dict[str, int]:
        """Count successes and failures."""
        counts = {"success": 0, "failure": 0}
        for result in results:
            counts["success" if result.succeeded else "failure"] += 1
        return counts
