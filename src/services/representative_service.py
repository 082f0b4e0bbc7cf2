"""
Sales representative service.

Records interactions against customers in the representative's own
portfolio and produces representative-scoped actions and reports. Customer
lookups never reach outside the portfolio, even when the id exists elsewhere
in the registry.
"""

from __future__ import annotations

from typing import Callable, Dict, List, Mapping, Optional, Tuple

import pydantic

from models.customer import Customer
from models.interaction import (
    DEFAULT_TIMESTAMP_FORMAT,
    Call,
    Email,
    Interaction,
    InteractionType,
    Meeting,
)
from models.report import InteractionTimeEntry, InteractionTimeReport
from models.representative import SalesRepresentative
from models.response import OperationResult
from utils.clock import Clock, system_clock
from utils.error_handling import (
    AppError,
    CustomerNotFoundError,
    NotFoundError,
    ValidationError,
    to_result,
)
from utils.formatting import (
    customer_line,
    format_interaction_time_report,
    format_points,
)
from utils.logging_config import get_logger
from utils.output import ConsoleOutput

logger = get_logger(__name__)

NOT_FOUND_MESSAGE = "Customer not found."

# Loyalty credit per recorded interaction, for customers that earn points.
LOYALTY_CREDITS: Dict[InteractionType, Callable[[Interaction], float]] = {
    InteractionType.CALL: lambda interaction: interaction.duration_minutes * 0.5,
    InteractionType.EMAIL: lambda interaction: 10,
    InteractionType.MEETING: lambda interaction: interaction.duration_minutes * 2,
}


class RepresentativeService:
    """Operations a sales representative performs on their portfolio."""

    def __init__(
        self,
        representative: SalesRepresentative,
        customers: Mapping[int, Customer],
        clock: Optional[Clock] = None,
        output=None,
        timestamp_format: str = DEFAULT_TIMESTAMP_FORMAT,
    ):
        self.representative = representative
        self._customers = customers
        self._clock = clock or system_clock
        self._output = output or ConsoleOutput()
        self.timestamp_format = timestamp_format

    @property
    def rep_id(self) -> int:
        return self.representative.rep_id

    @property
    def name(self) -> str:
        return self.representative.name

    @property
    def customer_ids(self) -> Tuple[int, ...]:
        return self.representative.customer_ids

    def customers(self) -> List[Customer]:
        """Assigned customers in assignment order, duplicates included."""
        resolved = (self._customers.get(cid) for cid in self.representative.customer_ids)
        return [customer for customer in resolved if customer is not None]

    def _add_customer(self, customer_id: int) -> None:
        # Portfolio entries only come from CRMService.assign_customer_to_rep.
        self.representative.add_customer(customer_id)

    def _find_customer(self, customer_id: int) -> Customer:
        customer = None
        if self.representative.has_customer(customer_id):
            customer = self._customers.get(customer_id)
        if customer is None:
            raise CustomerNotFoundError(customer_id)
        return customer

    # ------------------------------------------------------------------ #
    # Recording
    # ------------------------------------------------------------------ #

    def record_call(self, customer_id: int, content: str, duration: int) -> OperationResult:
        return self._record(
            customer_id,
            lambda ts: Call(timestamp=ts, content=content, duration_minutes=duration),
        )

    def record_email(self, customer_id: int, content: str, subject: str) -> OperationResult:
        return self._record(
            customer_id,
            lambda ts: Email(timestamp=ts, content=content, subject=subject),
        )

    def record_meeting(
        self, customer_id: int, content: str, location: str, duration: int
    ) -> OperationResult:
        return self._record(
            customer_id,
            lambda ts: Meeting(
                timestamp=ts,
                content=content,
                location=location,
                duration_minutes=duration,
            ),
        )

    def _record(self, customer_id: int, build) -> OperationResult:
        """Resolve the customer, build the interaction, append and credit points."""
        try:
            customer = self._find_customer(customer_id)
            try:
                interaction = build(self._clock())
            except pydantic.ValidationError as exc:
                raise ValidationError(
                    f"Invalid interaction: {exc.errors()[0]['msg']}"
                ) from exc
        except AppError as exc:
            if isinstance(exc, NotFoundError):
                message = NOT_FOUND_MESSAGE
            else:
                message = f"Interaction not recorded: {exc}"
            logger.warning(
                "Interaction not recorded",
                extra={"rep_id": self.rep_id, "customer_id": customer_id, "error": str(exc)},
            )
            self._output.emit(message)
            return to_result(exc, message)

        customer.add_interaction(interaction)
        kind = interaction.kind.value
        message = f"{kind} recorded with {customer.name}"
        self._output.emit(message)
        logger.info(
            "Interaction recorded",
            extra={"rep_id": self.rep_id, "customer_id": customer_id, "kind": kind},
        )

        data = {"customer_id": customer_id, "kind": kind, "interaction": interaction}
        if customer.earns_loyalty_points:
            points = LOYALTY_CREDITS[interaction.kind](interaction)
            total = customer.add_loyalty_points(points)
            self._output.emit(
                f"Added {format_points(points)} loyalty points to {customer.name}. "
                f"Total: {format_points(total)}"
            )
            data["loyalty_points"] = total
        return OperationResult(message=message, data=data)

    # ------------------------------------------------------------------ #
    # Portfolio-wide actions and reports
    # ------------------------------------------------------------------ #

    def perform_customer_actions(self) -> List[str]:
        """Emit the customer-specific action for every assigned customer."""
        actions = [customer.specific_action() for customer in self.customers()]
        for action in actions:
            self._output.emit(action)
        return actions

    def generate_interaction_time_report(self) -> InteractionTimeReport:
        report = InteractionTimeReport(
            rep_id=self.rep_id,
            rep_name=self.name,
            entries=[
                InteractionTimeEntry(
                    customer_id=customer.customer_id,
                    customer_name=customer.name,
                    customer_type=customer.customer_type.value,
                    total_minutes=customer.total_interaction_minutes(),
                )
                for customer in self.customers()
            ],
        )
        for line in format_interaction_time_report(report):
            self._output.emit(line)
        logger.info(
            "Interaction time report generated",
            extra={"rep_id": self.rep_id, "customers": len(report.entries)},
        )
        return report

    def view_customer_interactions(self, customer_id: int) -> OperationResult:
        try:
            customer = self._find_customer(customer_id)
        except NotFoundError as exc:
            self._output.emit(NOT_FOUND_MESSAGE)
            return to_result(exc, NOT_FOUND_MESSAGE)

        lines = customer.describe_interactions(self.timestamp_format)
        for line in lines:
            self._output.emit(line)
        return OperationResult(message=lines[0], data={"lines": lines})

    def display_customers(self) -> List[str]:
        customers = self.customers()
        if not customers:
            lines = [f"No customers assigned to {self.name}"]
        else:
            lines = [f"Customers assigned to {self.name}:"]
            lines.extend(customer_line(c) for c in customers)
        for line in lines:
            self._output.emit(line)
        return lines
