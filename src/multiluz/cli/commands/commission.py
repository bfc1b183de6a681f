"""Commission management commands."""

import click
from multiluz.domain.commission import CommissionService, commission_totals
from multiluz.domain.entities import CommissionStatus, View
from multiluz.cli.access import require_view
from multiluz.cli.error_handling import handle_domain_error
from multiluz.cli.formatting import money, optional_date, percent
from multiluz.utils.amount_parser import coerce_amount
from multiluz.utils.date_parser import parse_date

STATUS_CHOICES = {status.name.lower(): status for status in CommissionStatus}


@click.group()
def commission_group():
    """Manage sales commissions."""
    pass


@commission_group.command("create")
@click.argument("order_id")
@click.option("--rate", default="0.05", help="Commission rate (e.g., 0.05 or 5%)")
@click.option("--status", type=click.Choice(sorted(STATUS_CHOICES)), default="pending")
@click.option("--paid-on", help="Payment date (required when status is paid)")
@click.pass_context
def create_commission(ctx, order_id: str, rate: str, status: str, paid_on: str | None):
    """Create a commission for an order.

    Each order can only have one commission.

    Examples:
        multiluz commission create ORD-001 --rate 5%
        multiluz commission create ORD-004 --rate 0.07 --status paid --paid-on 2024-03-05
    """
    require_view(ctx, View.COMMISSIONS)
    service = CommissionService(ctx.obj["db"])

    try:
        payment_date = parse_date(paid_on) if paid_on else None
        commission_id = service.create_commission(
            order_id=order_id,
            commission_rate=coerce_amount(rate),
            status=STATUS_CHOICES[status],
            payment_date=payment_date,
        )
        click.echo(f"Created commission {commission_id} for order {order_id}")
    except ValueError as e:
        handle_domain_error(ctx, e)


@commission_group.command("update")
@click.argument("commission_id")
@click.option("--order", "order_id", help="Move the commission to another order")
@click.option("--rate", help="Commission rate")
@click.option("--status", type=click.Choice(sorted(STATUS_CHOICES)))
@click.option("--paid-on", help="Payment date")
@click.pass_context
def update_commission(
    ctx,
    commission_id: str,
    order_id: str | None,
    rate: str | None,
    status: str | None,
    paid_on: str | None,
):
    """Update a commission.

    Examples:
        multiluz commission update COM-002 --status paid --paid-on today
    """
    require_view(ctx, View.COMMISSIONS)
    service = CommissionService(ctx.obj["db"])

    try:
        service.update_commission(
            commission_id,
            order_id=order_id,
            commission_rate=coerce_amount(rate) if rate is not None else None,
            status=STATUS_CHOICES[status] if status else None,
            payment_date=parse_date(paid_on) if paid_on else None,
        )
        click.echo(f"Updated commission {commission_id}")
    except ValueError as e:
        handle_domain_error(ctx, e)


@commission_group.command("delete")
@click.argument("commission_id")
@click.option("--yes", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def delete_commission(ctx, commission_id: str, yes: bool):
    """Delete a commission."""
    require_view(ctx, View.COMMISSIONS)
    service = CommissionService(ctx.obj["db"])

    if service.get_commission(commission_id) is None:
        click.echo(f"Error: Commission {commission_id} not found", err=True)
        ctx.exit(1)

    if not yes and not click.confirm(f"Are you sure you want to delete commission {commission_id}?"):
        click.echo("Deletion cancelled.")
        return

    try:
        service.delete_commission(commission_id)
        click.echo(f"Deleted commission {commission_id}")
    except ValueError as e:
        handle_domain_error(ctx, e)


@commission_group.command("list")
@click.option("--consultant", help="Consultant name")
@click.option("--status", type=click.Choice(sorted(STATUS_CHOICES)))
@click.pass_context
def list_commissions(ctx, consultant: str | None, status: str | None):
    """List commissions, highest order value first."""
    require_view(ctx, View.COMMISSIONS)
    service = CommissionService(ctx.obj["db"])

    commissions = service.list_calculated_commissions(
        consultant=consultant, status=STATUS_CHOICES[status] if status else None
    )
    if not commissions:
        click.echo("No commissions found.")
        return

    click.echo(f"\nFound {len(commissions)} commission(s):")
    click.echo("-" * 116)
    click.echo(
        f"{'ID':<9} {'Order':<9} {'Customer':<22} {'Consultant':<18} {'Order value':>14} "
        f"{'Rate':>7} {'Commission':>12}  {'Status':<9} {'Paid on':<10}"
    )
    click.echo("-" * 116)
    for c in commissions:
        click.echo(
            f"{c.id:<9} {c.order_id:<9} {c.customer_name[:22]:<22} {c.consultant[:18]:<18} "
            f"{money(c.order_value):>14} {percent(c.commission.commission_rate):>7} "
            f"{money(c.commission_value):>12}  {c.status.value:<9} "
            f"{optional_date(c.commission.payment_date):<10}"
        )

    total_order_value, total_commission_value = commission_totals(commissions)
    click.echo("-" * 116)
    click.echo(f"{'Total':<60} {money(total_order_value):>14} {'':>7} {money(total_commission_value):>12}")


@commission_group.command("available")
@click.option("--search", help="Text to match in customer or order ID")
@click.option("--for", "commission_id", help="Commission being edited")
@click.pass_context
def available_orders(ctx, search: str | None, commission_id: str | None):
    """List orders that can still receive a commission."""
    require_view(ctx, View.COMMISSIONS)
    service = CommissionService(ctx.obj["db"])

    orders = service.selectable_orders(commission_id=commission_id, search=search)
    if not orders:
        click.echo("No orders available.")
        return
    for o in orders:
        click.echo(f"{o.id:<9} {o.customer_name[:30]:<30} {o.consultant[:20]:<20} {money(o.order_value):>14}")


def register_commands(cli):
    """Register commission commands with main CLI."""
    cli.add_command(commission_group, name="commission")
