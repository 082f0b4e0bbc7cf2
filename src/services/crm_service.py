"""
CRM coordinator service.

Owns every customer and sales representative, issues their identities,
manages the assignment relation and produces system-wide reports. Ids come
from two counters that start at 1 and are never reused.
"""

from __future__ import annotations

from collections import Counter
from types import MappingProxyType
from typing import Dict, List, Optional, Tuple, Union

import pydantic

from config.settings import Settings
from models.customer import (
    CorporateProfile,
    Customer,
    CustomerType,
    RegularProfile,
    VipProfile,
)
from models.report import SystemReport
from models.representative import SalesRepresentative
from models.response import OperationResult
from services.representative_service import RepresentativeService
from utils.clock import Clock, system_clock
from utils.error_handling import (
    AppError,
    CustomerNotFoundError,
    NotFoundError,
    RepresentativeNotFoundError,
    ValidationError,
    to_result,
)
from utils.formatting import (
    format_amount,
    format_customer_listing,
    format_system_report,
    representative_line,
)
from utils.logging_config import get_logger
from utils.output import ConsoleOutput

logger = get_logger(__name__)

ASSIGNMENT_NOT_FOUND_MESSAGE = "Customer or Sales Rep not found."

PROFILE_TYPES = {
    CustomerType.REGULAR: RegularProfile,
    CustomerType.VIP: VipProfile,
    CustomerType.CORPORATE: CorporateProfile,
}


class CRMService:
    """Registry and coordinator for customers and representatives."""

    def __init__(
        self,
        clock: Optional[Clock] = None,
        output=None,
        settings: Optional[Settings] = None,
    ):
        self.settings = settings or Settings()
        self._clock = clock or system_clock
        self._output = output or ConsoleOutput()
        self._customers: Dict[int, Customer] = {}
        self._representatives: Dict[int, RepresentativeService] = {}
        self._next_customer_id = 1
        self._next_rep_id = 1

    @property
    def customers(self) -> Tuple[Customer, ...]:
        return tuple(self._customers.values())

    @property
    def representatives(self) -> Tuple[RepresentativeService, ...]:
        return tuple(self._representatives.values())

    # ------------------------------------------------------------------ #
    # Creation
    # ------------------------------------------------------------------ #

    def create_customer(
        self,
        customer_type: Union[CustomerType, str],
        name: str,
        email: str,
        phone: str,
        **profile_fields,
    ) -> Customer:
        """
        Create a customer of the requested variant and register it.

        The profile is validated before an id is allocated, so rejected input
        never consumes an id.
        """
        try:
            profile = PROFILE_TYPES[CustomerType(customer_type)](**profile_fields)
        except ValueError as exc:
            # pydantic.ValidationError subclasses ValueError, as does a bad tag.
            logger.warning(
                "Customer rejected",
                extra={"customer_type": str(customer_type), "error": str(exc)},
            )
            raise ValidationError(f"Invalid {customer_type} customer: {exc}") from exc

        try:
            customer = Customer(
                customer_id=self._next_customer_id,
                name=name,
                email=email,
                phone=phone,
                profile=profile,
            )
        except pydantic.ValidationError as exc:
            raise ValidationError(f"Invalid customer: {exc}") from exc

        self._next_customer_id += 1
        self._customers[customer.customer_id] = customer
        logger.info(
            "Customer created",
            extra={
                "customer_id": customer.customer_id,
                "customer_type": customer.customer_type.value,
            },
        )
        return customer

    def create_regular_customer(
        self, name: str, email: str, phone: str, segment: str
    ) -> Customer:
        return self.create_customer(
            CustomerType.REGULAR, name, email, phone, segment=segment
        )

    def create_vip_customer(
        self, name: str, email: str, phone: str, account_manager: str
    ) -> Customer:
        return self.create_customer(
            CustomerType.VIP, name, email, phone, account_manager=account_manager
        )

    def create_corporate_customer(
        self,
        name: str,
        email: str,
        phone: str,
        company_name: str,
        employee_count: int,
        annual_contract: float,
    ) -> Customer:
        return self.create_customer(
            CustomerType.CORPORATE,
            name,
            email,
            phone,
            company_name=company_name,
            employee_count=employee_count,
            annual_contract=annual_contract,
        )

    def create_sales_representative(self, name: str) -> RepresentativeService:
        representative = SalesRepresentative(rep_id=self._next_rep_id, name=name)
        self._next_rep_id += 1
        service = RepresentativeService(
            representative,
            MappingProxyType(self._customers),
            clock=self._clock,
            output=self._output,
            timestamp_format=self.settings.timestamp_format,
        )
        self._representatives[representative.rep_id] = service
        logger.info("Sales representative created", extra={"rep_id": representative.rep_id})
        return service

    # ------------------------------------------------------------------ #
    # Lookup
    # ------------------------------------------------------------------ #

    def find_customer(self, customer_id: int) -> Optional[Customer]:
        return self._customers.get(customer_id)

    def get_customer(self, customer_id: int) -> Customer:
        customer = self._customers.get(customer_id)
        if customer is None:
            raise CustomerNotFoundError(customer_id)
        return customer

    def find_representative(self, rep_id: int) -> Optional[RepresentativeService]:
        return self._representatives.get(rep_id)

    def get_representative(self, rep_id: int) -> RepresentativeService:
        rep = self._representatives.get(rep_id)
        if rep is None:
            raise RepresentativeNotFoundError(rep_id)
        return rep

    # ------------------------------------------------------------------ #
    # Assignment and account operations
    # ------------------------------------------------------------------ #

    def assign_customer_to_rep(self, customer_id: int, rep_id: int) -> OperationResult:
        """Append the customer to the rep's portfolio; repeated pairs are kept."""
        try:
            customer = self.get_customer(customer_id)
            rep = self.get_representative(rep_id)
        except NotFoundError as exc:
            logger.warning(
                "Assignment failed",
                extra={"customer_id": customer_id, "rep_id": rep_id, "error": str(exc)},
            )
            self._output.emit(ASSIGNMENT_NOT_FOUND_MESSAGE)
            return to_result(exc, ASSIGNMENT_NOT_FOUND_MESSAGE)

        rep._add_customer(customer_id)
        message = f"Customer {customer.name} assigned to {rep.name}"
        self._output.emit(message)
        logger.info("Customer assigned", extra={"customer_id": customer_id, "rep_id": rep_id})
        return OperationResult(
            message=message,
            data={
                "customer_id": customer_id,
                "rep_id": rep_id,
                "assignments": rep.customer_ids.count(customer_id),
            },
        )

    def renew_contract(self, customer_id: int, new_amount: float) -> OperationResult:
        try:
            customer = self.get_customer(customer_id)
            previous = customer.renew_contract(new_amount)
        except AppError as exc:
            logger.warning(
                "Contract renewal rejected",
                extra={"customer_id": customer_id, "error": str(exc)},
            )
            message = f"Contract not renewed: {exc}"
            self._output.emit(message)
            return to_result(exc, message)

        message = (
            f"Renewing contract for {customer.profile.company_name}. "
            f"Old amount: ${format_amount(previous)}, "
            f"New amount: ${format_amount(new_amount)}"
        )
        self._output.emit(message)
        logger.info("Contract renewed", extra={"customer_id": customer_id})
        return OperationResult(
            message=message,
            data={"previous_amount": previous, "new_amount": float(new_amount)},
        )

    # ------------------------------------------------------------------ #
    # Listings and reports
    # ------------------------------------------------------------------ #

    def display_all_customers(self) -> List[str]:
        if not self._customers:
            lines = ["No customers in the system."]
        else:
            lines = format_customer_listing("All Customers:", self._customers.values())
        for line in lines:
            self._output.emit(line)
        return lines

    def display_all_sales_reps(self) -> List[str]:
        if not self._representatives:
            lines = ["No sales representatives in the system."]
        else:
            lines = ["All Sales Representatives:"]
            lines.extend(
                representative_line(rep.representative)
                for rep in self._representatives.values()
            )
        for line in lines:
            self._output.emit(line)
        return lines

    def generate_system_report(self) -> SystemReport:
        """Counts by type (ordered by label) and total interaction minutes."""
        counts = Counter(c.customer_type.value for c in self._customers.values())
        report = SystemReport(
            total_customers=len(self._customers),
            customers_by_type=dict(sorted(counts.items())),
            total_representatives=len(self._representatives),
            total_interaction_minutes=sum(
                c.total_interaction_minutes() for c in self._customers.values()
            ),
        )
        for line in format_system_report(report):
            self._output.emit(line)
        logger.info(
            "System report generated",
            extra={
                "total_customers": report.total_customers,
                "total_interaction_minutes": report.total_interaction_minutes,
            },
        )
        return report
