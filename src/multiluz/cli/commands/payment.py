"""Payment management commands."""

import click
from multiluz.domain.entities import Action, View
from multiluz.domain.order import OrderService
from multiluz.domain.payment import PaymentService
from multiluz.domain.visibility import scope_orders, scope_payments
from multiluz.cli.access import require_action, require_view, visible_order_or_exit
from multiluz.cli.error_handling import handle_domain_error
from multiluz.cli.formatting import money, optional_date
from multiluz.utils.amount_parser import parse_amount
from multiluz.utils.date_parser import parse_date


def _visible_payment_or_exit(ctx, service: PaymentService, payment_id: str):
    """Fetch a payment whose order the acting profile can see."""
    user = ctx.obj["session"].current_user
    payment = service.get_payment(payment_id)
    if payment is not None:
        visible_orders = scope_orders(OrderService(ctx.obj["db"]).list_orders(), user)
        if not scope_payments([payment], visible_orders, user):
            payment = None
    if payment is None:
        click.echo(f"Error: Payment {payment_id} not found", err=True)
        ctx.exit(1)
    return payment


@click.group()
def payment_group():
    """Manage received payments."""
    pass


@payment_group.command("add")
@click.argument("order_id")
@click.argument("value")
@click.option("--date", "payment_date", default="today", help="Payment date (YYYY-MM-DD or 'today')")
@click.pass_context
def add_payment(ctx, order_id: str, value: str, payment_date: str):
    """Record a payment against an order.

    Examples:
        multiluz payment add ORD-001 2500
        multiluz payment add ORD-002 7.500,00 --date 2024-03-10
    """
    require_view(ctx, View.PAYMENTS)
    require_action(ctx, Action.RECORD_PAYMENT)
    service = PaymentService(ctx.obj["db"])
    visible_order_or_exit(ctx, order_id)

    try:
        amount = parse_amount(value)
        when = parse_date(payment_date)
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)

    try:
        payment_id = service.record_payment(order_id=order_id, payment_date=when, value=amount)
        click.echo(f"Recorded payment {payment_id} of {money(amount)} for order {order_id}")
    except ValueError as e:
        handle_domain_error(ctx, e)


@payment_group.command("update")
@click.argument("payment_id")
@click.option("--date", "payment_date", help="New payment date")
@click.option("--value", help="New payment value")
@click.pass_context
def update_payment(ctx, payment_id: str, payment_date: str | None, value: str | None):
    """Update a payment's date or value."""
    require_view(ctx, View.PAYMENTS)
    require_action(ctx, Action.EDIT_PAYMENT)
    service = PaymentService(ctx.obj["db"])
    _visible_payment_or_exit(ctx, service, payment_id)

    try:
        new_date = parse_date(payment_date) if payment_date is not None else None
        new_value = parse_amount(value) if value is not None else None
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)

    try:
        service.update_payment(payment_id, payment_date=new_date, value=new_value)
        click.echo(f"Updated payment {payment_id}")
    except ValueError as e:
        handle_domain_error(ctx, e)


@payment_group.command("delete")
@click.argument("payment_id")
@click.option("--yes", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def delete_payment(ctx, payment_id: str, yes: bool):
    """Delete a payment. This cannot be undone."""
    require_view(ctx, View.PAYMENTS)
    require_action(ctx, Action.DELETE_PAYMENT)
    service = PaymentService(ctx.obj["db"])
    payment = _visible_payment_or_exit(ctx, service, payment_id)

    if not yes and not click.confirm(
        f"Are you sure you want to delete payment {payment_id} "
        f"({money(payment.value)} on {optional_date(payment.payment_date)})?"
    ):
        click.echo("Deletion cancelled.")
        return

    try:
        service.delete_payment(payment_id)
        click.echo(f"Deleted payment {payment_id}")
    except ValueError as e:
        handle_domain_error(ctx, e)


@payment_group.command("list")
@click.option("--search", help="Text to match in customer, order ID, consultant or payment ID")
@click.pass_context
def list_payments(ctx, search: str | None):
    """List payments, newest first."""
    session = require_view(ctx, View.PAYMENTS)
    service = PaymentService(ctx.obj["db"])

    listings = service.list_payment_listings(user=session.current_user, search=search)
    if not listings:
        click.echo("No payments found.")
        return

    click.echo(f"\nFound {len(listings)} payment(s):")
    click.echo("-" * 92)
    click.echo(
        f"{'ID':<9} {'Date':<12} {'Order':<9} {'Customer':<24} {'Consultant':<18} {'Value':>14}"
    )
    click.echo("-" * 92)
    for item in listings:
        p = item.payment
        click.echo(
            f"{p.id:<9} {optional_date(p.payment_date):<12} {p.order_id:<9} "
            f"{item.customer_name[:24]:<24} {item.consultant[:18]:<18} {money(p.value):>14}"
        )


def register_commands(cli):
    """Register payment commands with main CLI."""
    cli.add_command(payment_group, name="payment")
