"""Tests for the SQLAlchemy database implementation."""

import pytest
from datetime import date
from decimal import Decimal

from multiluz.database.base import Database
from multiluz.database.factories import create_sqlite_database
from multiluz.domain.entities import CommissionStatus, ConfigList, UserRole


def _order_fields(**overrides):
    fields = dict(
        customer_name="Empresa Alpha",
        consultant="Ana Costa",
        insurance=False,
        order_value=Decimal("25000"),
        initial_payment_percentage=Decimal("0.1"),
        down_payment_percentage=Decimal("0.2"),
        down_payment_due_date=date(2024, 3, 20),
        city="São Paulo",
        contract_creation_date=date(2024, 3, 1),
        contract_signature_date=date(2024, 3, 5),
        payment_method="Boleto",
        origin="Indicação",
        prospected_by="Ana Costa",
        cancellation_date=None,
        order_status="ATIVO",
    )
    fields.update(overrides)
    return fields


def test_database_implements_interface(temp_db):
    assert isinstance(temp_db, Database)


def test_factory_uses_environment_path(tmp_path, monkeypatch):
    db_path = tmp_path / "env.db"
    monkeypatch.setenv("MULTILUZ_DB_PATH", str(db_path))

    db = create_sqlite_database()
    assert db.database_url == f"sqlite:///{db_path}"


def test_order_round_trip(temp_db):
    order_id = temp_db.create_order(**_order_fields())
    order = temp_db.get_order(order_id)

    assert order.id == "ORD-001"
    assert order.contract_signature_date == date(2024, 3, 5)
    assert order.initial_payment_percentage == Decimal("0.1")
    assert temp_db.get_order("ORD-999") is None


def test_update_order(temp_db):
    order_id = temp_db.create_order(**_order_fields())
    temp_db.update_order(order_id, **_order_fields(city="Campinas"))
    assert temp_db.get_order(order_id).city == "Campinas"


def test_update_missing_record_raises(temp_db):
    with pytest.raises(ValueError, match="not found"):
        temp_db.update_order("ORD-404", city="X")


def test_ids_are_per_prefix(temp_db):
    order_id = temp_db.create_order(**_order_fields())
    payment_id = temp_db.create_payment(order_id=order_id, payment_date=date(2024, 3, 1), value=Decimal("1"))
    profile_id = temp_db.create_user_profile(name="Ana", email="ana@multiluz.com", role=UserRole.ADMIN)

    assert (order_id, payment_id, profile_id) == ("ORD-001", "PAY-001", "USR-001")


def test_ids_never_repeat_after_delete(temp_db):
    order_id = temp_db.create_order(**_order_fields())
    first = temp_db.create_payment(order_id=order_id, payment_date=date(2024, 3, 1), value=Decimal("1"))
    second = temp_db.create_payment(order_id=order_id, payment_date=date(2024, 3, 2), value=Decimal("2"))
    temp_db.delete_payment(second)
    third = temp_db.create_payment(order_id=order_id, payment_date=date(2024, 3, 3), value=Decimal("3"))

    assert (first, second, third) == ("PAY-001", "PAY-002", "PAY-003")
    assert [p.id for p in temp_db.list_payments()] == ["PAY-001", "PAY-003"]


def test_list_payments_by_order(temp_db):
    first = temp_db.create_order(**_order_fields())
    second = temp_db.create_order(**_order_fields())
    temp_db.create_payment(order_id=first, payment_date=date(2024, 3, 1), value=Decimal("1"))
    temp_db.create_payment(order_id=second, payment_date=date(2024, 3, 1), value=Decimal("2"))

    assert [p.value for p in temp_db.list_payments(order_id=second)] == [Decimal("2")]


def test_enums_stored_by_value(temp_db):
    order_id = temp_db.create_order(**_order_fields())
    commission_id = temp_db.create_commission(
        order_id=order_id,
        commission_rate=Decimal("0.05"),
        status=CommissionStatus.PAID,
        payment_date=date(2024, 4, 1),
    )
    commission = temp_db.get_commission(commission_id)
    assert commission.status == CommissionStatus.PAID
    assert commission.commission_rate == Decimal("0.05")


def test_config_items(temp_db):
    temp_db.add_config_item(ConfigList.ORDER_ORIGINS, "Feira")
    temp_db.add_config_item(ConfigList.ORDER_ORIGINS, "Website")
    temp_db.rename_config_item(ConfigList.ORDER_ORIGINS, "Feira", "Evento")

    assert temp_db.list_config_items(ConfigList.ORDER_ORIGINS) == ["Evento", "Website"]
    assert temp_db.list_config_items(ConfigList.PAYMENT_METHODS) == []

    with pytest.raises(ValueError, match="already exists"):
        temp_db.add_config_item(ConfigList.ORDER_ORIGINS, "Website")

    temp_db.delete_config_item(ConfigList.ORDER_ORIGINS, "Evento")
    assert temp_db.list_config_items(ConfigList.ORDER_ORIGINS) == ["Website"]


def test_replace_field_value(temp_db):
    temp_db.create_order(**_order_fields(origin="Feira"))
    temp_db.create_order(**_order_fields(origin="Feira"))
    temp_db.create_order(**_order_fields(origin="Website"))

    assert temp_db.replace_field_value("order", "origin", "Feira", "Evento") == 2
    assert [o.origin for o in temp_db.list_orders()] == ["Evento", "Evento", "Website"]


def test_replace_field_value_unknown_column(temp_db):
    with pytest.raises(ValueError, match="cannot be cascaded"):
        temp_db.replace_field_value("order", "customer_name", "a", "b")


def test_rename_config_item_cascades_in_one_step(temp_db):
    temp_db.add_config_item(ConfigList.ORDER_ORIGINS, "Feira")
    temp_db.create_order(**_order_fields(origin="Feira"))

    changed = temp_db.rename_config_item(
        ConfigList.ORDER_ORIGINS, "Feira", "Evento", cascade=("order", "origin")
    )

    assert changed == 1
    assert temp_db.list_config_items(ConfigList.ORDER_ORIGINS) == ["Evento"]
    assert [o.origin for o in temp_db.list_orders()] == ["Evento"]


def test_rename_config_item_rolls_back_when_cascade_fails(temp_db):
    temp_db.add_config_item(ConfigList.ORDER_ORIGINS, "Feira")

    with pytest.raises(ValueError, match="cannot be cascaded"):
        temp_db.rename_config_item(
            ConfigList.ORDER_ORIGINS, "Feira", "Evento", cascade=("order", "customer_name")
        )

    assert temp_db.list_config_items(ConfigList.ORDER_ORIGINS) == ["Feira"]
