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
# DOMAIN MODELS - ORDER RESULTS
# -----------------------------------------------------------------------------
# What the pipeline reports back for every order. A result is either a
# Success (label + final stage) or a Failure (reason); never both, never
# an implicit None.
# -----------------------------------------------------------------------------

from dataclasses import dataclass
from enum import Enum
from typing import Literal, Union

from pydantic import BaseModel, Field

from .pizza import Stage


class FailureReason(str, Enum):
    """Why an order produced no pizza."""

    UNKNOWN_TOKEN = "unknown_token"
    NO_CATALOG_CONFIGURED = "no_catalog_configured"


class OrderState(str, Enum):
    """
    Per-order state machine.

    START -> REQUESTED -> CREATED (pizza goes through the stages)
                       -> FAILED  (nothing is touched)
    """

    START = "start"
    REQUESTED = "requested"
    CREATED = "created"
    FAILED = "failed"


@dataclass(frozen=True)
class NotFound:
    """Returned by catalogs and strategies when a token is not on the menu."""

    token: str
    region: str | None = None


class Success(BaseModel):
    """The pizza made it through every stage."""

    kind: Literal["success"] = "success"
    label: str
    final_stage: Stage


class Failure(BaseModel):
    """No pizza was produced for this order."""

    kind: Literal["failure"] = "failure"
    reason: FailureReason


class TicketEntry(BaseModel):
    """A single event in an order ticket."""

    timestamp: str
    event: str
    details: str | None = None


class OrderResult(BaseModel):
    """
    Structured outcome of one order.

    Fields:
    - token: The type token as it was requested
    - region: Region of the strategy that served it (None if unconfigured)
    - outcome: Success or Failure, discriminated on `kind`
    - log: Ticket events recorded while the order was processed
    """

    token: str
    region: str | None = None
    outcome: Union[Success, Failure] = Field(..., discriminator="kind")
    log: list[TicketEntry] = Field(default_factory=list)

    class Config:
        """Results are reports; they are not edited after creation."""

        frozen = True

    @property
    def succeeded(self) -> bool:
        return isinstance(self.outcome, Success)
