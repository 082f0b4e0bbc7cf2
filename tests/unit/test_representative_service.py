"""
RepresentativeService tests.

Recording, loyalty credits, portfolio scoping and reports, driven through a
coordinator with a frozen clock and a buffered output channel.

Run with: pytest tests/unit/test_representative_service.py -v
"""

from datetime import datetime, timedelta

import pytest

from models.interaction import Call, Email, Meeting
from models.response import OperationStatus


@pytest.fixture
def portfolio(crm):
    """Alice owns a regular and a VIP customer; David owns a corporate one."""
    regular = crm.create_regular_customer("John Doe", "john@example.com", "555-1234", "Small Business")
    vip = crm.create_vip_customer("Jane Smith", "jane@example.com", "555-5678", "Michael Johnson")
    corporate = crm.create_corporate_customer(
        "Bob Anderson", "bob@megacorp.com", "555-9876", "MegaCorp", 1500, 50000.0
    )
    alice = crm.create_sales_representative("Alice Thompson")
    david = crm.create_sales_representative("David Wilson")
    crm.assign_customer_to_rep(regular.customer_id, alice.rep_id)
    crm.assign_customer_to_rep(vip.customer_id, alice.rep_id)
    crm.assign_customer_to_rep(corporate.customer_id, david.rep_id)
    return regular, vip, corporate, alice, david


class TestRecording:
    """record_call / record_email / record_meeting."""

    def test_record_call_appends_stamped_interaction(self, portfolio, output):
        regular, _, _, alice, _ = portfolio
        output.clear()

        result = alice.record_call(regular.customer_id, "Discussed new product features", 15)

        assert result.ok
        assert len(regular.interactions) == 1
        call = regular.interactions[0]
        assert isinstance(call, Call)
        assert call.duration_minutes == 15
        assert call.timestamp == datetime(2024, 1, 15, 9, 30, 0)
        assert output.lines == ["Call recorded with John Doe"]

    def test_each_recording_reads_the_clock(self, portfolio):
        regular, _, _, alice, _ = portfolio
        alice.record_call(regular.customer_id, "first", 1)
        alice.record_email(regular.customer_id, "second", "Subject")
        first, second = regular.interactions
        assert second.timestamp > first.timestamp

    def test_record_email_and_meeting(self, portfolio):
        regular, _, _, alice, _ = portfolio
        alice.record_email(regular.customer_id, "Offer details", "Spring Offer")
        alice.record_meeting(regular.customer_id, "Demo", "Headquarters", 45)
        email, meeting = regular.interactions
        assert isinstance(email, Email) and email.subject == "Spring Offer"
        assert isinstance(meeting, Meeting) and meeting.location == "Headquarters"
        assert regular.total_interaction_minutes() == 45

    def test_vip_loyalty_credit_per_kind(self, portfolio, output):
        _, vip, _, alice, _ = portfolio

        alice.record_call(vip.customer_id, "Check-in", 15)
        assert vip.loyalty_points == 7.5

        alice.record_email(vip.customer_id, "Offer", "VIP Exclusive Offer")
        assert vip.loyalty_points == 17.5

        result = alice.record_meeting(vip.customer_id, "Review", "Headquarters", 60)
        assert vip.loyalty_points == 137.5
        assert result.data["loyalty_points"] == 137.5
        assert "Added 120 loyalty points to Jane Smith. Total: 137.5" in output.lines

    def test_non_vip_gets_no_loyalty_credit(self, portfolio, output):
        regular, _, corporate, alice, david = portfolio
        output.clear()

        alice.record_call(regular.customer_id, "Call", 20)
        david.record_meeting(corporate.customer_id, "Meeting", "Office", 90)

        assert regular.loyalty_points is None
        assert corporate.loyalty_points is None
        assert not any(line.startswith("Added") for line in output.lines)

    def test_unknown_customer_is_not_found(self, portfolio, output):
        _, _, _, alice, _ = portfolio
        output.clear()

        result = alice.record_call(999, "Nobody", 10)

        assert result.status == OperationStatus.NOT_FOUND
        assert output.lines == ["Customer not found."]

    def test_customer_of_another_rep_is_not_found(self, crm, portfolio, output):
        _, vip, corporate, alice, _ = portfolio
        output.clear()

        # corporate exists in the registry but belongs to David
        assert crm.find_customer(corporate.customer_id) is corporate
        results = [
            alice.record_call(corporate.customer_id, "Call", 30),
            alice.record_email(corporate.customer_id, "Email", "Subject"),
            alice.record_meeting(corporate.customer_id, "Meeting", "Office", 60),
        ]

        assert all(r.status == OperationStatus.NOT_FOUND for r in results)
        assert corporate.interactions == ()
        assert corporate.profile.annual_contract == 50000.0
        assert vip.loyalty_points == 0
        assert output.lines == ["Customer not found."] * 3

    def test_negative_duration_is_rejected_without_change(self, portfolio, output):
        _, vip, _, alice, _ = portfolio
        output.clear()

        result = alice.record_meeting(vip.customer_id, "Bad", "Nowhere", -30)

        assert result.status == OperationStatus.INVALID
        assert vip.interactions == ()
        assert vip.loyalty_points == 0
        assert output.lines[0].startswith("Interaction not recorded:")

    def test_advanced_clock_stamps_later_recordings(self, portfolio, clock):
        regular, _, _, alice, _ = portfolio
        clock.advance(timedelta(hours=2))

        alice.record_call(regular.customer_id, "After lunch", 5)

        assert regular.interactions[0].timestamp == datetime(2024, 1, 15, 11, 30, 0)

    def test_unregistered_portfolio_id_is_not_found(self, portfolio, output):
        _, _, _, alice, _ = portfolio
        # An id that never went through the coordinator's registry.
        alice.representative.add_customer(42)
        output.clear()

        result = alice.record_call(42, "Nobody", 5)

        assert result.status == OperationStatus.NOT_FOUND
        assert output.lines == ["Customer not found."]
        assert [e.customer_id for e in alice.generate_interaction_time_report().entries] == [1, 2]
        assert len(alice.perform_customer_actions()) == 2

    def test_portfolio_is_only_extended_by_assignment(self, portfolio):
        _, _, _, alice, _ = portfolio
        assert not hasattr(alice, "add_customer")


class TestPortfolioOperations:
    """Actions, reports and listings."""

    def test_perform_customer_actions_in_assignment_order(self, portfolio, output):
        _, _, _, alice, _ = portfolio
        output.clear()

        actions = alice.perform_customer_actions()

        assert actions == [
            "Sending regular promotional materials to John Doe in segment Small Business",
            "Scheduling quarterly review with Jane Smith and account manager Michael Johnson",
        ]
        assert output.lines == actions

    def test_actions_do_not_change_state(self, portfolio):
        regular, vip, _, alice, _ = portfolio
        alice.perform_customer_actions()
        assert regular.interactions == ()
        assert vip.loyalty_points == 0

    def test_interaction_time_report(self, portfolio, output):
        regular, vip, _, alice, _ = portfolio
        alice.record_call(regular.customer_id, "Call", 15)
        alice.record_email(regular.customer_id, "Email", "Subject")
        alice.record_meeting(vip.customer_id, "Meeting", "HQ", 60)
        output.clear()

        report = alice.generate_interaction_time_report()

        assert report.rep_name == "Alice Thompson"
        assert [(e.customer_name, e.customer_type, e.total_minutes) for e in report.entries] == [
            ("John Doe", "Regular", 15),
            ("Jane Smith", "VIP", 72),
        ]
        assert report.total_minutes == 87
        assert output.lines[0] == "Interaction Time Report for Sales Rep: Alice Thompson"
        assert "Customer: Jane Smith (VIP) - Total Interaction Time: 72 minutes" in output.lines

    def test_report_is_a_pure_read(self, portfolio):
        regular, _, _, alice, _ = portfolio
        alice.record_call(regular.customer_id, "Call", 15)
        first = alice.generate_interaction_time_report()
        second = alice.generate_interaction_time_report()
        assert first == second
        assert len(regular.interactions) == 1

    def test_view_customer_interactions(self, portfolio, output):
        regular, _, corporate, alice, _ = portfolio
        alice.record_call(regular.customer_id, "Discussed features", 15)
        output.clear()

        result = alice.view_customer_interactions(regular.customer_id)
        assert result.ok
        assert output.lines == [
            "Interactions for John Doe (Regular):",
            "Call on 2024-01-15 09:30:00 (Duration: 15 minutes): Discussed features",
        ]

        output.clear()
        missing = alice.view_customer_interactions(corporate.customer_id)
        assert missing.status == OperationStatus.NOT_FOUND
        assert output.lines == ["Customer not found."]

    def test_display_customers(self, crm, portfolio, output):
        _, _, _, alice, _ = portfolio
        output.clear()

        lines = alice.display_customers()
        assert lines == [
            "Customers assigned to Alice Thompson:",
            "ID: 1, Name: John Doe, Type: Regular",
            "ID: 2, Name: Jane Smith, Type: VIP",
        ]

        empty = crm.create_sales_representative("Nobody Yet")
        assert empty.display_customers() == ["No customers assigned to Nobody Yet"]
