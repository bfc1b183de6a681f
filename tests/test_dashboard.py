"""Tests for the dashboard summary."""

from datetime import date, timedelta
from decimal import Decimal

import pytest

from multiluz.domain.dashboard import DashboardService
from multiluz.domain.entities import OrderStatus, PaymentStatus, UserRole

TODAY = date(2024, 3, 15)


@pytest.fixture
def dashboard_service(temp_db):
    return DashboardService(temp_db)


@pytest.fixture
def seeded(create_order, payment_service):
    alpha = create_order(customer_name="Empresa Alpha", consultant="Ana Costa", order_value=Decimal("25000"))
    beta = create_order(
        customer_name="Construtora Beta", consultant="Bruno Gomes", order_value=Decimal("50000")
    )
    create_order(
        customer_name="Mercado Gama",
        consultant="Bruno Gomes",
        order_value=Decimal("15000"),
        down_payment_due_date=TODAY - timedelta(days=5),
    )
    create_order(
        customer_name="Varejo Epsilon",
        consultant="Ana Costa",
        order_value=Decimal("35000"),
        order_status=OrderStatus.CANCELLED.value,
    )
    payment_service.record_payment(alpha, date(2024, 3, 2), Decimal("25000"))
    payment_service.record_payment(beta, date(2024, 2, 20), Decimal("5000"))
    payment_service.record_payment(beta, date(2024, 3, 10), Decimal("7500"))
    payment_service.record_payment(beta, date(2023, 3, 10), Decimal("1000"))


def test_summary_for_admin(dashboard_service, sample_profiles, seeded):
    summary = dashboard_service.build_summary(sample_profiles[UserRole.ADMIN], today=TODAY)

    # Same month of another year does not count
    assert summary.received_this_month == Decimal("32500")
    assert summary.total_orders == 4
    assert summary.total_balance == Decimal("86500")
    assert summary.sales_by_consultant == (
        ("Bruno Gomes", Decimal("65000")),
        ("Ana Costa", Decimal("60000")),
    )


def test_orders_by_status_skips_empty(dashboard_service, sample_profiles, seeded):
    summary = dashboard_service.build_summary(sample_profiles[UserRole.MANAGER], today=TODAY)

    assert summary.orders_by_status == (
        (PaymentStatus.CONFIRMED, 1),
        (PaymentStatus.PARTIAL, 1),
        (PaymentStatus.OVERDUE, 1),
        (PaymentStatus.CANCELLED, 1),
    )


def test_summary_scoped_to_salesperson(dashboard_service, sample_profiles, seeded):
    summary = dashboard_service.build_summary(sample_profiles[UserRole.SALESPERSON], today=TODAY)

    assert summary.total_orders == 2
    assert summary.received_this_month == Decimal("7500")
    assert summary.total_balance == Decimal("36500") + Decimal("15000")
    assert summary.sales_by_consultant == (("Bruno Gomes", Decimal("65000")),)


def test_empty_summary(dashboard_service, sample_profiles):
    summary = dashboard_service.build_summary(sample_profiles[UserRole.ADMIN], today=TODAY)

    assert summary.received_this_month == Decimal("0")
    assert summary.total_balance == Decimal("0")
    assert summary.total_orders == 0
    assert summary.sales_by_consultant == ()
    assert summary.orders_by_status == ()
