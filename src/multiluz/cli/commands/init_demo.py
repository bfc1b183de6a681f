"""Seed a database with demonstration data."""

from datetime import date, timedelta
from decimal import Decimal

import click
from multiluz.domain.commission import CommissionService
from multiluz.domain.entities import CommissionStatus, ConfigList, OrderStatus, UserRole, View
from multiluz.domain.order import OrderService
from multiluz.domain.payment import PaymentService
from multiluz.domain.profile import UserProfileService
from multiluz.domain.salesperson import SalespersonService
from multiluz.domain.settings import SettingsService
from multiluz.cli.access import require_view
from multiluz.utils.date_parser import current_date


DEMO_CONFIG = {
    ConfigList.BUSINESS_UNITS: ["São Paulo", "Rio de Janeiro", "Belo Horizonte", "Matriz"],
    ConfigList.PAYMENT_METHODS: ["Boleto", "Pix", "Cartão de Crédito", "Transferência"],
    ConfigList.ORDER_ORIGINS: ["Indicação", "Website", "Feira", "Prospecção"],
    ConfigList.SALESPERSON_LEVELS: ["Júnior", "Pleno", "Sênior"],
    ConfigList.ORDER_STATUSES: [status.value for status in OrderStatus],
}

# (name, business unit, goal, level, hire date)
DEMO_SALESPEOPLE = [
    ("Ana Costa", "São Paulo", "100000", "Sênior", date(2022, 1, 15)),
    ("Bruno Gomes", "Rio de Janeiro", "80000", "Pleno", date(2022, 8, 20)),
    ("Carla Dias", "São Paulo", "120000", "Sênior", date(2021, 5, 10)),
    ("Diego Martins", "Belo Horizonte", "75000", "Júnior", date(2023, 3, 1)),
    ("Carlos Lima", "Matriz", "250000", "Sênior", date(2020, 2, 1)),
]

DEMO_PROFILES = [
    ("Ana Costa", UserRole.ADMIN),
    ("Carlos Lima", UserRole.MANAGER),
    ("Bruno Gomes", UserRole.SALESPERSON),
    ("Carla Dias", UserRole.SALESPERSON),
    ("Diego Martins", UserRole.SALESPERSON),
]

# Due dates are days relative to today so the derived statuses stay interesting
DEMO_ORDERS = [
    dict(
        customer_name="Empresa Alpha", consultant="Ana Costa", insurance=True,
        order_value="25000", initial_payment_percentage="0.1", down_payment_percentage="0.2",
        due_in_days=10, city="São Paulo", contract_creation_date=date(2023, 10, 1),
        contract_signature_date=date(2023, 10, 5), payment_method="Boleto", origin="Indicação",
        prospected_by="Ana Costa",
    ),
    dict(
        customer_name="Construtora Beta", consultant="Bruno Gomes", insurance=False,
        order_value="50000", initial_payment_percentage="0.15", down_payment_percentage="0.3",
        due_in_days=0, city="Rio de Janeiro", contract_creation_date=date(2023, 10, 3),
        contract_signature_date=date(2023, 10, 8), payment_method="Transferência",
        origin="Website", prospected_by="Marketing",
    ),
    dict(
        customer_name="Mercado Gama", consultant="Ana Costa", insurance=False,
        order_value="15000", initial_payment_percentage="0.2", down_payment_percentage="0.5",
        due_in_days=-5, city="Campinas", contract_creation_date=date(2023, 10, 5),
        contract_signature_date=date(2023, 10, 10), payment_method="Pix", origin="Feira",
        prospected_by="Ana Costa",
    ),
    dict(
        customer_name="Indústria Delta", consultant="Carla Dias", insurance=True,
        order_value="120000", initial_payment_percentage="0.1", down_payment_percentage="0.1",
        due_in_days=-15, city="São Paulo", contract_creation_date=date(2023, 9, 15),
        contract_signature_date=date(2023, 9, 20), payment_method="Cartão de Crédito",
        origin="Prospecção", prospected_by="Carla Dias", order_status=OrderStatus.COMPLETED.value,
    ),
    dict(
        customer_name="Varejo Epsilon", consultant="Diego Martins", insurance=False,
        order_value="35000", initial_payment_percentage="0.1", down_payment_percentage="0.2",
        due_in_days=5, city="Belo Horizonte", contract_creation_date=date(2023, 10, 12),
        contract_signature_date=date(2023, 10, 15), payment_method="Boleto", origin="Website",
        prospected_by="Marketing", cancellation_date=date(2023, 10, 20),
        order_status=OrderStatus.CANCELLED.value,
    ),
    dict(
        customer_name="Escola Zeta", consultant="Bruno Gomes", insurance=True,
        order_value="42000", initial_payment_percentage="0.1", down_payment_percentage="0.25",
        due_in_days=-4, city="Niterói", contract_creation_date=date(2023, 10, 11),
        contract_signature_date=date(2023, 10, 14), payment_method="Pix", origin="Indicação",
        prospected_by="Bruno Gomes",
    ),
]

# (index into DEMO_ORDERS, payment date, value)
DEMO_PAYMENTS = [
    (0, date(2023, 10, 10), "2500"),
    (1, date(2023, 10, 12), "7500"),
    (1, date(2023, 11, 1), "7500"),
    (3, date(2023, 9, 25), "12000"),
    (3, date(2023, 10, 25), "108000"),
    (5, date(2023, 10, 20), "10500"),
]

# (index into DEMO_ORDERS, rate, status, paid on)
DEMO_COMMISSIONS = [
    (0, "0.05", CommissionStatus.PAID, date(2023, 11, 1)),
    (1, "0.05", CommissionStatus.PENDING, None),
    (3, "0.07", CommissionStatus.PAID, date(2023, 11, 5)),
    (5, "0.05", CommissionStatus.PENDING, None),
]


def _email_for(name: str) -> str:
    return f"{name.lower().replace(' ', '.')}@multiluz.com"


@click.command("init-demo")
@click.option("--force", is_flag=True, help="Seed even if orders already exist")
@click.pass_context
def init_demo(ctx, force: bool):
    """Initialize the database with demonstration data."""
    require_view(ctx, View.SETTINGS)
    db = ctx.obj["db"]
    orders = OrderService(db)

    if orders.list_orders() and not force:
        click.echo("Data already exists. Use --force to seed anyway.")
        return

    click.echo("Seeding demonstration data...")
    created = 0
    errors = 0
    today = current_date()

    settings = SettingsService(db)
    for config_list, values in DEMO_CONFIG.items():
        existing = settings.list_items(config_list)
        for value in values:
            if value in existing:
                continue
            settings.add_item(config_list, value)
            created += 1

    salespeople = SalespersonService(db)
    for name, unit, goal, level, hired in DEMO_SALESPEOPLE:
        try:
            salespeople.create_salesperson(
                name=name, business_unit=unit, sales_goal=Decimal(goal), level=level, hire_date=hired
            )
            created += 1
        except ValueError as e:
            click.echo(f"Warning: Could not create salesperson '{name}': {e}", err=True)
            errors += 1

    profiles = UserProfileService(db)
    for name, role in DEMO_PROFILES:
        profiles.create_profile(name=name, email=_email_for(name), role=role)
        created += 1

    order_ids = []
    for row in DEMO_ORDERS:
        fields = dict(row)
        due_in_days = fields.pop("due_in_days")
        order_ids.append(
            orders.create_order(
                **{
                    **fields,
                    "order_value": Decimal(fields["order_value"]),
                    "initial_payment_percentage": Decimal(fields["initial_payment_percentage"]),
                    "down_payment_percentage": Decimal(fields["down_payment_percentage"]),
                    "down_payment_due_date": today + timedelta(days=due_in_days),
                }
            )
        )
        created += 1

    payments = PaymentService(db)
    for index, paid_on, value in DEMO_PAYMENTS:
        payments.record_payment(order_ids[index], paid_on, Decimal(value))
        created += 1

    commissions = CommissionService(db)
    for index, rate, status, paid_on in DEMO_COMMISSIONS:
        commissions.create_commission(order_ids[index], Decimal(rate), status=status, payment_date=paid_on)
        created += 1

    if errors == 0:
        click.echo(f"Successfully created {created} records.")
    else:
        click.echo(f"Created {created} records with {errors} errors.")


def register_commands(cli):
    """Register init-demo command with main CLI."""
    cli.add_command(init_demo)
