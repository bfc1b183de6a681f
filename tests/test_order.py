"""Tests for the order service."""

import pytest
from datetime import date, timedelta
from decimal import Decimal

from multiluz.domain.entities import OrderStatus, PaymentStatus, UserRole
from multiluz.domain.errors import NotFoundError, ValidationError

TODAY = date(2024, 3, 15)


def test_create_and_get_order(order_service, create_order):
    order_id = create_order(insurance=True, city="Campinas")
    order = order_service.get_order(order_id)

    assert order_id == "ORD-001"
    assert order.customer_name == "Empresa Alpha"
    assert order.insurance is True
    assert order.city == "Campinas"
    assert order.order_value == Decimal("25000")
    assert order.down_payment_percentage == Decimal("0.2")
    assert order.order_status == OrderStatus.ACTIVE.value
    assert order.cancellation_date is None


def test_create_order_requires_customer(create_order):
    with pytest.raises(ValidationError, match="Customer name"):
        create_order(customer_name="  ")


def test_create_order_requires_consultant(create_order):
    with pytest.raises(ValidationError, match="Consultant"):
        create_order(consultant="")


def test_ids_are_sequential(create_order):
    assert [create_order() for _ in range(3)] == ["ORD-001", "ORD-002", "ORD-003"]


def test_update_order_changes_only_given_fields(order_service, create_order):
    order_id = create_order()
    updated = order_service.update_order(order_id, order_value=Decimal("30000"), city="Niterói")

    assert updated.order_value == Decimal("30000")
    stored = order_service.get_order(order_id)
    assert stored.order_value == Decimal("30000")
    assert stored.city == "Niterói"
    assert stored.customer_name == "Empresa Alpha"


def test_update_order_cancellation(order_service, create_order):
    order_id = create_order()
    order_service.update_order(
        order_id, order_status=OrderStatus.CANCELLED.value, cancellation_date=date(2024, 3, 10)
    )

    calculated = order_service.get_calculated_order(order_id, today=TODAY)
    assert calculated.order.cancellation_date == date(2024, 3, 10)
    assert calculated.payment_status == PaymentStatus.CANCELLED


def test_update_missing_order(order_service):
    with pytest.raises(NotFoundError):
        order_service.update_order("ORD-999", city="X")


def test_update_unknown_field(order_service, create_order):
    order_id = create_order()
    with pytest.raises(ValidationError, match="Unknown order fields"):
        order_service.update_order(order_id, color="blue")


def test_update_blank_customer_rejected(order_service, create_order):
    order_id = create_order()
    with pytest.raises(ValidationError):
        order_service.update_order(order_id, customer_name="")


def test_calculated_order_reflects_payments(order_service, payment_service, create_order):
    order_id = create_order(down_payment_due_date=TODAY + timedelta(days=10))
    payment_service.record_payment(order_id, date(2024, 3, 10), Decimal("2500"))

    calculated = order_service.get_calculated_order(order_id, today=TODAY)
    assert calculated.received == Decimal("2500")
    assert calculated.current_balance == Decimal("22500")
    assert calculated.first_payment_date == date(2024, 3, 10)
    assert calculated.initial_payment_date == date(2024, 3, 10)
    assert calculated.payment_status == PaymentStatus.PARTIAL


def test_calculated_order_missing(order_service):
    assert order_service.get_calculated_order("ORD-404") is None


class TestListCalculatedOrders:
    """Tests for filtered order listings."""

    @pytest.fixture
    def orders(self, create_order, payment_service):
        first = create_order(customer_name="Empresa Alpha", consultant="Ana Costa")
        second = create_order(
            customer_name="Construtora Beta",
            consultant="Bruno Gomes",
            down_payment_due_date=TODAY - timedelta(days=10),
        )
        third = create_order(customer_name="Mercado Gama", consultant="Bruno Gomes")
        payment_service.record_payment(first, date(2024, 3, 1), Decimal("25000"))
        return first, second, third

    def test_lists_all_in_creation_order(self, order_service, orders):
        result = order_service.list_calculated_orders(today=TODAY)
        assert [c.id for c in result] == list(orders)

    def test_search_is_case_insensitive(self, order_service, orders):
        result = order_service.list_calculated_orders(today=TODAY, search="BETA")
        assert [c.customer_name for c in result] == ["Construtora Beta"]

    def test_search_matches_id_and_consultant(self, order_service, orders):
        assert len(order_service.list_calculated_orders(today=TODAY, search="ord-003")) == 1
        assert len(order_service.list_calculated_orders(today=TODAY, search="bruno")) == 2

    def test_filter_by_payment_status(self, order_service, orders):
        confirmed = order_service.list_calculated_orders(
            today=TODAY, payment_status=PaymentStatus.CONFIRMED
        )
        overdue = order_service.list_calculated_orders(
            today=TODAY, payment_status=PaymentStatus.OVERDUE
        )
        assert [c.id for c in confirmed] == [orders[0]]
        assert [c.id for c in overdue] == [orders[1]]

    def test_filter_by_consultant(self, order_service, orders):
        result = order_service.list_calculated_orders(today=TODAY, consultant="Ana Costa")
        assert [c.id for c in result] == [orders[0]]

    def test_salesperson_scope(self, order_service, orders, sample_profiles):
        result = order_service.list_calculated_orders(
            user=sample_profiles[UserRole.SALESPERSON], today=TODAY
        )
        assert {c.consultant for c in result} == {"Bruno Gomes"}
        assert len(result) == 2
