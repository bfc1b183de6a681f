"""Tests for the salesperson service."""

import pytest
from datetime import date
from decimal import Decimal

from multiluz.domain.errors import ConflictError, NotFoundError, ValidationError


def test_create_salesperson(salesperson_service):
    salesperson_id = salesperson_service.create_salesperson(
        name="Ana Costa",
        business_unit="São Paulo",
        sales_goal=Decimal("100000"),
        level="Sênior",
        hire_date=date(2022, 1, 15),
    )

    person = salesperson_service.get_salesperson(salesperson_id)
    assert salesperson_id == "SP-001"
    assert person.name == "Ana Costa"
    assert person.business_unit == "São Paulo"
    assert person.sales_goal == Decimal("100000")
    assert person.hire_date == date(2022, 1, 15)


def test_duplicate_name_rejected(salesperson_service, sample_salespeople):
    with pytest.raises(ConflictError, match="already exists"):
        salesperson_service.create_salesperson(
            name="Ana Costa",
            business_unit="Matriz",
            sales_goal=Decimal("1"),
            level="Júnior",
            hire_date=date(2024, 1, 1),
        )


def test_blank_name_rejected(salesperson_service):
    with pytest.raises(ValidationError):
        salesperson_service.create_salesperson(
            name=" ",
            business_unit="Matriz",
            sales_goal=Decimal("1"),
            level="Júnior",
            hire_date=date(2024, 1, 1),
        )


def test_find_by_name(salesperson_service, sample_salespeople):
    assert salesperson_service.find_by_name("Bruno Gomes").id == sample_salespeople["Bruno Gomes"].id
    assert salesperson_service.find_by_name("Nobody") is None


def test_update_salesperson(salesperson_service, sample_salespeople):
    ana = sample_salespeople["Ana Costa"]
    salesperson_service.update_salesperson(ana.id, sales_goal=Decimal("150000"), level="Pleno")

    updated = salesperson_service.get_salesperson(ana.id)
    assert updated.sales_goal == Decimal("150000")
    assert updated.level == "Pleno"
    assert updated.name == "Ana Costa"


def test_update_salesperson_keeps_own_name(salesperson_service, sample_salespeople):
    ana = sample_salespeople["Ana Costa"]
    salesperson_service.update_salesperson(ana.id, name="Ana Costa")
    assert salesperson_service.get_salesperson(ana.id).name == "Ana Costa"


def test_update_salesperson_to_taken_name(salesperson_service, sample_salespeople):
    with pytest.raises(ConflictError):
        salesperson_service.update_salesperson(
            sample_salespeople["Ana Costa"].id, name="Bruno Gomes"
        )


def test_update_missing_salesperson(salesperson_service):
    with pytest.raises(NotFoundError):
        salesperson_service.update_salesperson("SP-404", level="Pleno")


def test_delete_salesperson_keeps_orders(
    salesperson_service, order_service, sample_salespeople, create_order
):
    order_id = create_order(consultant="Bruno Gomes")
    salesperson_service.delete_salesperson(sample_salespeople["Bruno Gomes"].id)

    assert [p.name for p in salesperson_service.list_salespeople()] == ["Ana Costa"]
    assert order_service.get_order(order_id).consultant == "Bruno Gomes"


def test_ids_not_reused_after_delete(salesperson_service, sample_salespeople):
    salesperson_service.delete_salesperson(sample_salespeople["Bruno Gomes"].id)
    new_id = salesperson_service.create_salesperson(
        name="Diego Martins",
        business_unit="Matriz",
        sales_goal=Decimal("75000"),
        level="Júnior",
        hire_date=date(2023, 3, 1),
    )
    assert new_id == "SP-003"
