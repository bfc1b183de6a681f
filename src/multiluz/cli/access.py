"""CLI helpers for role gating and record resolution."""

from __future__ import annotations

import click

from multiluz.domain.entities import Action, Order, Salesperson, View
from multiluz.domain.errors import PermissionDeniedError
from multiluz.domain.order import OrderService
from multiluz.domain.salesperson import SalespersonService
from multiluz.domain.session import AppSession
from multiluz.domain.visibility import scope_orders
from multiluz.cli.error_handling import handle_domain_error


def require_view(ctx: click.Context, view: View) -> AppSession:
    """Open a view for the acting profile, or exit with a CLI error."""
    session: AppSession = ctx.obj["session"]
    try:
        session.navigate(view)
    except PermissionDeniedError as exc:
        handle_domain_error(ctx, exc)
    return session


def require_action(ctx: click.Context, action: Action) -> AppSession:
    """Check the acting profile may make a change, or exit with a CLI error."""
    session: AppSession = ctx.obj["session"]
    try:
        session.authorize(action)
    except PermissionDeniedError as exc:
        handle_domain_error(ctx, exc)
    return session


def visible_order_or_exit(ctx: click.Context, order_id: str) -> Order:
    """Fetch an order the acting profile is allowed to see.

    Orders outside the profile's scope are reported as missing, the same
    as orders that do not exist.
    """
    session: AppSession = ctx.obj["session"]
    order = OrderService(ctx.obj["db"]).get_order(order_id)
    if order is None or not scope_orders([order], session.current_user):
        click.echo(f"Error: Order {order_id} not found", err=True)
        ctx.exit(1)
    return order


def resolve_salesperson_or_exit(
    ctx: click.Context, service: SalespersonService, salesperson: str
) -> Salesperson:
    """Resolve a salesperson ID (e.g. 'SP-001') or exact name.

    This keeps error messaging and exit behavior consistent across commands.
    """
    person = service.get_salesperson(salesperson)
    if person is None:
        person = service.find_by_name(salesperson)
    if person is None:
        click.echo(f"Error: Salesperson '{salesperson}' not found", err=True)
        ctx.exit(1)
    return person
