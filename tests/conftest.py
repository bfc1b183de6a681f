"""Shared pytest fixtures for multiluz tests."""

import tempfile
import os
from datetime import date
from decimal import Decimal
import pytest

from multiluz.database.factories import create_sqlite_database
from multiluz.domain.commission import CommissionService
from multiluz.domain.entities import ConfigList, Order, OrderStatus, UserRole
from multiluz.domain.order import OrderService
from multiluz.domain.payment import PaymentService
from multiluz.domain.profile import UserProfileService
from multiluz.domain.salesperson import SalespersonService
from multiluz.domain.settings import SettingsService


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    # Create a temporary file for the database
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    # Create database
    db = create_sqlite_database(database_path=db_path)
    # Store the path for tests that need it
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    # Cleanup
    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def order_service(temp_db):
    """Create an OrderService with a temporary database."""
    return OrderService(temp_db)


@pytest.fixture
def payment_service(temp_db):
    """Create a PaymentService with a temporary database."""
    return PaymentService(temp_db)


@pytest.fixture
def commission_service(temp_db):
    """Create a CommissionService with a temporary database."""
    return CommissionService(temp_db)


@pytest.fixture
def salesperson_service(temp_db):
    """Create a SalespersonService with a temporary database."""
    return SalespersonService(temp_db)


@pytest.fixture
def profile_service(temp_db):
    """Create a UserProfileService with a temporary database."""
    return UserProfileService(temp_db)


@pytest.fixture
def settings_service(temp_db):
    """Create a SettingsService with a temporary database."""
    return SettingsService(temp_db)


@pytest.fixture
def sample_config(settings_service):
    """Populate the lookup lists with a small set of values."""
    values = {
        ConfigList.BUSINESS_UNITS: ["São Paulo", "Matriz"],
        ConfigList.PAYMENT_METHODS: ["Boleto", "Pix"],
        ConfigList.ORDER_ORIGINS: ["Indicação", "Website"],
        ConfigList.SALESPERSON_LEVELS: ["Júnior", "Sênior"],
        ConfigList.ORDER_STATUSES: [status.value for status in OrderStatus],
    }
    for config_list, items in values.items():
        for item in items:
            settings_service.add_item(config_list, item)
    return values


@pytest.fixture
def sample_salespeople(salesperson_service):
    """Create two salespeople and return them by name."""
    ana_id = salesperson_service.create_salesperson(
        name="Ana Costa",
        business_unit="São Paulo",
        sales_goal=Decimal("100000"),
        level="Sênior",
        hire_date=date(2022, 1, 15),
    )
    bruno_id = salesperson_service.create_salesperson(
        name="Bruno Gomes",
        business_unit="Matriz",
        sales_goal=Decimal("80000"),
        level="Júnior",
        hire_date=date(2022, 8, 20),
    )
    return {
        "Ana Costa": salesperson_service.get_salesperson(ana_id),
        "Bruno Gomes": salesperson_service.get_salesperson(bruno_id),
    }


@pytest.fixture
def sample_profiles(profile_service):
    """Create one profile per role and return them by role."""
    admin_id = profile_service.create_profile("Ana Costa", "ana.costa@multiluz.com", UserRole.ADMIN)
    manager_id = profile_service.create_profile(
        "Carlos Lima", "carlos.lima@multiluz.com", UserRole.MANAGER
    )
    seller_id = profile_service.create_profile(
        "Bruno Gomes", "bruno.gomes@multiluz.com", UserRole.SALESPERSON
    )
    return {
        UserRole.ADMIN: profile_service.get_profile(admin_id),
        UserRole.MANAGER: profile_service.get_profile(manager_id),
        UserRole.SALESPERSON: profile_service.get_profile(seller_id),
    }


@pytest.fixture
def create_order(order_service):
    """Factory creating a stored order with sensible defaults."""

    def _create(**overrides):
        fields = dict(
            customer_name="Empresa Alpha",
            consultant="Ana Costa",
            order_value=Decimal("25000"),
            initial_payment_percentage=Decimal("0.1"),
            down_payment_percentage=Decimal("0.2"),
            down_payment_due_date=date(2024, 3, 20),
            contract_creation_date=date(2024, 3, 1),
            contract_signature_date=date(2024, 3, 5),
            payment_method="Boleto",
            origin="Indicação",
        )
        fields.update(overrides)
        return order_service.create_order(**fields)

    return _create


@pytest.fixture
def make_order():
    """Factory building an in-memory Order for pure derivation tests."""

    def _make(**overrides):
        fields = dict(
            id="ORD-001",
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
            order_status=OrderStatus.ACTIVE.value,
        )
        fields.update(overrides)
        return Order(**fields)

    return _make


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
