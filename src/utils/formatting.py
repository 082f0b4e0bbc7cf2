"""Plain-text rendering for listings and reports."""

from typing import Iterable, List

from models.customer import Customer
from models.report import InteractionTimeReport, SystemReport
from models.representative import SalesRepresentative

RULE_WIDTH = 40


def format_points(value: float) -> str:
    """Render a loyalty balance without trailing zeros (7.5, 40, 47.5)."""
    return f"{value:g}"


def format_amount(value: float) -> str:
    return f"{value:,.2f}"


def customer_line(customer: Customer) -> str:
    return (
        f"ID: {customer.customer_id}, Name: {customer.name}, "
        f"Type: {customer.customer_type.value}"
    )


def representative_line(rep: SalesRepresentative) -> str:
    return f"ID: {rep.rep_id}, Name: {rep.name}"


def format_customer_listing(heading: str, customers: Iterable[Customer]) -> List[str]:
    return [heading] + [customer_line(c) for c in customers]


def format_interaction_time_report(report: InteractionTimeReport) -> List[str]:
    lines = [
        f"Interaction Time Report for Sales Rep: {report.rep_name}",
        "-" * RULE_WIDTH,
    ]
    for entry in report.entries:
        lines.append(
            f"Customer: {entry.customer_name} ({entry.customer_type})"
            f" - Total Interaction Time: {entry.total_minutes} minutes"
        )
    lines.append("-" * RULE_WIDTH)
    return lines


def format_system_report(report: SystemReport) -> List[str]:
    lines = [
        "========== CRM SYSTEM REPORT ==========",
        f"Total Customers: {report.total_customers}",
    ]
    for label, count in report.customers_by_type.items():
        lines.append(f"  {label} Customers: {count}")
    lines.append(f"Total Sales Representatives: {report.total_representatives}")
    lines.append(f"Total Interaction Time: {report.total_interaction_minutes} minutes")
    lines.append("=" * 38)
    return lines
