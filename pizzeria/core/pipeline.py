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
# THE ORDER PIPELINE - ONE ORDER, START TO BOX
# -----------------------------------------------------------------------------
# Responsibility: Drive a single order through its state machine:
#
#   START -> REQUESTED -> CREATED -> prepare, bake, cut, box -> Success
#                      -> FAILED                             -> Failure
#
# Failures (unknown token, no catalog) are reported, never raised, and no
# pizza is touched. OutOfOrderStageError is a defect and propagates.
# No retries: a failure ends this order only.
#
# Every order gets a Ticket: an in-memory event log attached to the result.
# -----------------------------------------------------------------------------

from datetime import datetime, timezone

from rich.console import Console

from pizzeria.core.strategy import CreationStrategy, NoCatalogConfigured
from pizzeria.domain.models import (
    Failure,
    FailureReason,
    NotFound,
    OrderResult,
    OrderState,
    Success,
    TicketEntry,
)
from pizzeria.domain.pizza import Pizza

console = Console()


class OrderTicket:
    """
    Event log for a single order.

    Lives only as long as the order; its entries travel with the OrderResult.
    """

    def __init__(self, token: str) -> None:
        self.token = token
        self.state = OrderState.START
        self._log: list[TicketEntry] = []

    @property
    def entries(self) -> list[TicketEntry]:
        return list(self._log)

    def log(self, event: str, details: str | None = None) -> None:
        """Record an event on the ticket."""
        self._log.append(
            TicketEntry(
                timestamp=datetime.now(timezone.utc).isoformat(), event=event, details=details
            )
        )

    def move_to(self, state: OrderState, details: str | None = None) -> None:
        self.state = state
        self.log(f"ORDER_{state.name}", details or self.token)


class OrderPipeline:
    """Runs one order through creation and the four fixed stages."""

    def process(self, strategy: CreationStrategy, token: str) -> OrderResult:
        """
        Process a single order.

        Args:
            strategy: Creation strategy used to build the pizza.
            token: Requested type token.

        Returns:
            OrderResult with Success(label, BOXED) or Failure(reason).

        Raises:
            OutOfOrderStageError: A stage was applied out of order (defect).
        """
        ticket = OrderTicket(token)
        ticket.move_to(OrderState.REQUESTED)
        console.print(f"[cyan][PIPELINE] Order received: '{token}'[/cyan]")

        try:
            product = strategy.create_product(token)
        except NoCatalogConfigured as e:
            return self._fail(ticket, strategy, FailureReason.NO_CATALOG_CONFIGURED, str(e))

        if isinstance(product, NotFound):
            return self._fail(
                ticket, strategy, FailureReason.UNKNOWN_TOKEN, f"'{token}' not in {product.region}"
            )

        ticket.move_to(OrderState.CREATED, product.label)
        self._run_stages(product, ticket)

        ticket.log("ORDER_COMPLETE", product.describe())
        console.print(f"[green][PIPELINE] Order complete: {product.label}[/green]")
        return OrderResult(
            token=token,
            region=product.region,
            outcome=Success(label=product.label, final_stage=product.stage),
            log=ticket.entries,
        )

    def _run_stages(self, pizza: Pizza, ticket: OrderTicket) -> None:
        """Apply prepare -> bake -> cut -> box, in that order, exactly once."""
        for step in (pizza.prepare, pizza.bake, pizza.cut, pizza.box):
            step()
            ticket.log(f"STAGE_{pizza.stage.name}", pizza.label)

    def _fail(
        self,
        ticket: OrderTicket,
        strategy: CreationStrategy,
        reason: FailureReason,
        details: str,
    ) -> OrderResult:
        ticket.move_to(OrderState.FAILED, details)
        console.print(f"[red][PIPELINE] Order failed ({reason.value}): {details}[/red]")
        return OrderResult(
            token=ticket.token,
            region=strategy.region,
            outcome=Failure(reason=reason),
            log=ticket.entries,
        )
