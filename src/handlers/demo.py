"""
Demo entry point.

Walks through a full session: creates customers and representatives, assigns
portfolios, records interactions, performs customer actions, renews a
contract and prints the reports.
"""

from config.settings import Settings
from services.crm_service import CRMService
from utils.clock import system_clock
from utils.logging_config import get_logger, set_level
from utils.output import ConsoleOutput

logger = get_logger(__name__)


def run_demo(crm: CRMService, output) -> None:
    """Drive the sample session against an existing coordinator."""
    regular = crm.create_regular_customer(
        "John Doe", "john@example.com", "555-1234", "Small Business"
    )
    vip = crm.create_vip_customer(
        "Jane Smith", "jane@example.com", "555-5678", "Michael Johnson"
    )
    corporate = crm.create_corporate_customer(
        "Bob Anderson", "bob@megacorp.com", "555-9876", "MegaCorp", 1500, 50000.00
    )

    alice = crm.create_sales_representative("Alice Thompson")
    david = crm.create_sales_representative("David Wilson")

    crm.assign_customer_to_rep(regular.customer_id, alice.rep_id)
    crm.assign_customer_to_rep(vip.customer_id, alice.rep_id)
    crm.assign_customer_to_rep(corporate.customer_id, david.rep_id)

    crm.display_all_customers()
    crm.display_all_sales_reps()

    alice.record_call(regular.customer_id, "Discussed new product features", 15)
    alice.record_email(
        vip.customer_id, "Sending exclusive offer details", "VIP Exclusive Offer"
    )
    alice.record_meeting(vip.customer_id, "Quarterly review meeting", "Headquarters", 60)
    david.record_call(
        corporate.customer_id, "Technical support for recent installation", 30
    )
    david.record_meeting(
        corporate.customer_id, "Contract renewal discussion", "Client's Office", 90
    )

    output.emit("")
    output.emit("--- Customer Interactions ---")
    alice.view_customer_interactions(regular.customer_id)
    alice.view_customer_interactions(vip.customer_id)
    david.view_customer_interactions(corporate.customer_id)

    output.emit("")
    output.emit("--- Customer-Specific Actions ---")
    alice.perform_customer_actions()
    david.perform_customer_actions()

    crm.renew_contract(corporate.customer_id, 75000.00)

    output.emit("")
    output.emit("--- Interaction Time Reports ---")
    alice.generate_interaction_time_report()
    david.generate_interaction_time_report()

    crm.generate_system_report()


def main() -> None:
    """Build the coordinator from the environment and run the demo."""
    settings = Settings.from_environment()
    set_level(settings.log_level)
    logger.info("Starting CRM demo", extra={"environment": settings.environment})

    output = ConsoleOutput()
    crm = CRMService(clock=system_clock, output=output, settings=settings)
    run_demo(crm, output)


if __name__ == "__main__":
    main()
