"""Order management commands."""

import click
from multiluz.domain.entities import Action, ConfigList, OrderStatus, PaymentStatus, View
from multiluz.domain.order import OrderService
from multiluz.domain.payment import PaymentService
from multiluz.domain.salesperson import SalespersonService
from multiluz.domain.settings import SettingsService
from multiluz.domain.visibility import scope_orders
from multiluz.cli.access import (
    require_action,
    require_view,
    resolve_salesperson_or_exit,
    visible_order_or_exit,
)
from multiluz.cli.error_handling import handle_domain_error
from multiluz.cli.formatting import money, optional_date, percent
from multiluz.utils.amount_parser import coerce_amount
from multiluz.utils.date_parser import current_date, parse_date

STATUS_CHOICES = {status.name.lower(): status for status in PaymentStatus}


def _parse_date_or_exit(ctx, label: str, value: str):
    try:
        return parse_date(value)
    except ValueError as e:
        click.echo(f"Error: Invalid {label}: {e}", err=True)
        ctx.exit(1)


def _check_config_value(ctx, settings: SettingsService, config_list: ConfigList, value: str | None):
    """Reject a value that is not offered by a non-empty lookup list."""
    if value is None:
        return
    items = settings.list_items(config_list)
    if items and value not in items:
        click.echo(
            f"Error: '{value}' is not a valid choice. Options: {', '.join(items)}", err=True
        )
        ctx.exit(1)


@click.group()
def order_group():
    """Manage orders."""
    pass


@order_group.command("create")
@click.option("--customer", required=True, help="Customer name")
@click.option("--consultant", required=True, help="Salesperson name or ID")
@click.option("--value", "order_value", required=True, help="Order value (e.g., 25000 or 25.000,00)")
@click.option("--initial-pct", default="0", help="Initial payment share (e.g., 0.1 or 10%)")
@click.option("--down-pct", default="0", help="Down payment share (e.g., 0.2 or 20%)")
@click.option("--due-date", required=True, help="Down payment due date (YYYY-MM-DD or 'today')")
@click.option("--created", default="today", help="Contract creation date")
@click.option("--signed", default="today", help="Contract signature date")
@click.option("--insurance", is_flag=True, help="Order includes insurance")
@click.option("--city", default="", help="Customer city")
@click.option("--payment-method", help="Payment method (from settings)")
@click.option("--origin", help="Order origin (from settings)")
@click.option("--prospected-by", default="", help="Who prospected the customer")
@click.pass_context
def create_order(
    ctx,
    customer: str,
    consultant: str,
    order_value: str,
    initial_pct: str,
    down_pct: str,
    due_date: str,
    created: str,
    signed: str,
    insurance: bool,
    city: str,
    payment_method: str | None,
    origin: str | None,
    prospected_by: str,
):
    """Create a new order.

    Non-numeric values for the value and percentages are read as zero.

    Examples:
        multiluz order create --customer "Empresa Alpha" --consultant "Ana Costa" \\
            --value 25000 --initial-pct 10% --down-pct 20% --due-date 2024-02-01
    """
    require_view(ctx, View.ORDERS)
    require_action(ctx, Action.CREATE_ORDER)
    db = ctx.obj["db"]
    service = OrderService(db)
    settings = SettingsService(db)

    person = resolve_salesperson_or_exit(ctx, SalespersonService(db), consultant)
    _check_config_value(ctx, settings, ConfigList.PAYMENT_METHODS, payment_method)
    _check_config_value(ctx, settings, ConfigList.ORDER_ORIGINS, origin)

    try:
        order_id = service.create_order(
            customer_name=customer,
            consultant=person.name,
            order_value=coerce_amount(order_value),
            initial_payment_percentage=coerce_amount(initial_pct),
            down_payment_percentage=coerce_amount(down_pct),
            down_payment_due_date=_parse_date_or_exit(ctx, "due date", due_date),
            contract_creation_date=_parse_date_or_exit(ctx, "creation date", created),
            contract_signature_date=_parse_date_or_exit(ctx, "signature date", signed),
            insurance=insurance,
            city=city,
            payment_method=payment_method or "",
            origin=origin or "",
            prospected_by=prospected_by,
        )
        click.echo(f"Created order {order_id} for '{customer}'")
    except ValueError as e:
        handle_domain_error(ctx, e)


@order_group.command("update")
@click.argument("order_id")
@click.option("--customer", help="Customer name")
@click.option("--consultant", help="Salesperson name or ID")
@click.option("--value", "order_value", help="Order value")
@click.option("--initial-pct", help="Initial payment share")
@click.option("--down-pct", help="Down payment share")
@click.option("--due-date", help="Down payment due date")
@click.option("--signed", help="Contract signature date")
@click.option("--insurance/--no-insurance", default=None, help="Order includes insurance")
@click.option("--city", help="Customer city")
@click.option("--payment-method", help="Payment method (from settings)")
@click.option("--origin", help="Order origin (from settings)")
@click.option("--status", "order_status", help="Order status (from settings)")
@click.option("--cancelled-on", help="Cancellation date ('' to clear)")
@click.pass_context
def update_order(
    ctx,
    order_id: str,
    customer: str | None,
    consultant: str | None,
    order_value: str | None,
    initial_pct: str | None,
    down_pct: str | None,
    due_date: str | None,
    signed: str | None,
    insurance: bool | None,
    city: str | None,
    payment_method: str | None,
    origin: str | None,
    order_status: str | None,
    cancelled_on: str | None,
) -> None:
    """Update an order.

    Updates only the fields that are provided. Cancelling an order without
    --cancelled-on records today as the cancellation date.

    Examples:
        multiluz order update ORD-001 --value 27000
        multiluz order update ORD-005 --status CANCELADO
    """
    require_view(ctx, View.ORDERS)
    require_action(ctx, Action.EDIT_ORDER)
    visible_order_or_exit(ctx, order_id)
    db = ctx.obj["db"]
    service = OrderService(db)
    settings = SettingsService(db)

    changes = {}
    if customer is not None:
        changes["customer_name"] = customer
    if consultant is not None:
        changes["consultant"] = resolve_salesperson_or_exit(
            ctx, SalespersonService(db), consultant
        ).name
    if order_value is not None:
        changes["order_value"] = coerce_amount(order_value)
    if initial_pct is not None:
        changes["initial_payment_percentage"] = coerce_amount(initial_pct)
    if down_pct is not None:
        changes["down_payment_percentage"] = coerce_amount(down_pct)
    if due_date is not None:
        changes["down_payment_due_date"] = _parse_date_or_exit(ctx, "due date", due_date)
    if signed is not None:
        changes["contract_signature_date"] = _parse_date_or_exit(ctx, "signature date", signed)
    if insurance is not None:
        changes["insurance"] = insurance
    if city is not None:
        changes["city"] = city
    if payment_method is not None:
        _check_config_value(ctx, settings, ConfigList.PAYMENT_METHODS, payment_method)
        changes["payment_method"] = payment_method
    if origin is not None:
        _check_config_value(ctx, settings, ConfigList.ORDER_ORIGINS, origin)
        changes["origin"] = origin
    if order_status is not None:
        _check_config_value(ctx, settings, ConfigList.ORDER_STATUSES, order_status)
        changes["order_status"] = order_status
    if cancelled_on is not None:
        changes["cancellation_date"] = (
            _parse_date_or_exit(ctx, "cancellation date", cancelled_on) if cancelled_on else None
        )
    elif order_status == OrderStatus.CANCELLED:
        changes["cancellation_date"] = current_date()

    try:
        service.update_order(order_id, **changes)
        click.echo(f"Updated order {order_id}")
    except ValueError as e:
        handle_domain_error(ctx, e)


@order_group.command("list")
@click.option("--search", help="Text to match in customer, order ID or consultant")
@click.option("--status", type=click.Choice(sorted(STATUS_CHOICES)), help="Payment status")
@click.option("--consultant", help="Consultant name")
@click.pass_context
def list_orders(ctx, search: str | None, status: str | None, consultant: str | None):
    """List orders with their payment status."""
    session = require_view(ctx, View.ORDERS)
    service = OrderService(ctx.obj["db"])

    orders = service.list_calculated_orders(
        user=session.current_user,
        search=search,
        payment_status=STATUS_CHOICES[status] if status else None,
        consultant=consultant,
    )
    if not orders:
        click.echo("No orders found.")
        return

    click.echo(f"\nFound {len(orders)} order(s):")
    click.echo("-" * 118)
    click.echo(
        f"{'ID':<9} {'Customer':<24} {'Consultant':<18} {'Value':>14} "
        f"{'Received':>14} {'Balance':>14}  {'Status':<22}"
    )
    click.echo("-" * 118)
    for o in orders:
        click.echo(
            f"{o.id:<9} {o.customer_name[:24]:<24} {o.consultant[:18]:<18} "
            f"{money(o.order_value):>14} {money(o.received):>14} "
            f"{money(o.current_balance):>14}  {o.payment_status.value:<22}"
        )


@order_group.command("show")
@click.argument("order_id")
@click.pass_context
def show_order(ctx, order_id: str):
    """Show an order's details, milestones and payments."""
    session = require_view(ctx, View.DETAIL)
    db = ctx.obj["db"]

    calculated = OrderService(db).get_calculated_order(order_id)
    if calculated is None or not scope_orders([calculated], session.current_user):
        click.echo(f"Error: Order {order_id} not found", err=True)
        ctx.exit(1)

    order = calculated.order
    click.echo(f"\nOrder {order.id} - {order.customer_name}")
    click.echo("=" * 60)
    click.echo(f"  Consultant: {order.consultant}")
    click.echo(f"  City: {order.city or '-'}")
    click.echo(f"  Insurance: {'Yes' if order.insurance else 'No'}")
    click.echo(f"  Payment method: {order.payment_method or '-'}")
    click.echo(f"  Origin: {order.origin or '-'}")
    click.echo(f"  Prospected by: {order.prospected_by or '-'}")
    click.echo(f"  Contract created: {optional_date(order.contract_creation_date)}")
    click.echo(f"  Contract signed: {optional_date(order.contract_signature_date)}")
    click.echo(f"  Order status: {order.order_status}")
    if order.cancellation_date:
        click.echo(f"  Cancelled on: {optional_date(order.cancellation_date)}")
    click.echo("-" * 60)
    click.echo(f"  Order value: {money(order.order_value)}")
    click.echo(f"  Received: {money(calculated.received)}")
    click.echo(f"  Balance: {money(calculated.current_balance)}")
    click.echo(
        f"  Down payment: {money(calculated.down_payment_goal)} "
        f"({percent(order.down_payment_percentage)}) due {optional_date(order.down_payment_due_date)}"
    )
    click.echo(
        f"  Initial payment: {money(calculated.initial_payment_value)} "
        f"({percent(order.initial_payment_percentage)})"
    )
    click.echo(f"  Payment status: {calculated.payment_status.value}")
    click.echo("-" * 60)
    click.echo(f"  First payment: {optional_date(calculated.first_payment_date)}")
    click.echo(f"  Initial payment reached: {optional_date(calculated.initial_payment_date)}")
    click.echo(f"  80% reached: {optional_date(calculated.payment_date_80)}")
    click.echo(f"  100% reached: {optional_date(calculated.payment_date_100)}")

    payments = PaymentService(db).list_payments(order_id=order_id)
    if payments:
        click.echo("\n  Payments:")
        for p in sorted(payments, key=lambda p: p.payment_date):
            click.echo(f"    {p.id:<9} {optional_date(p.payment_date):<12} {money(p.value):>14}")


def register_commands(cli):
    """Register order commands with main CLI."""
    cli.add_command(order_group, name="order")
