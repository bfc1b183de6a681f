"""Dashboard and sales-goal commands."""

import click
from multiluz.domain.dashboard import DashboardService
from multiluz.domain.entities import View
from multiluz.domain.salesperson import SalespersonService
from multiluz.cli.access import require_view
from multiluz.cli.formatting import money
from multiluz.utils.date_parser import parse_month


@click.command("dashboard")
@click.pass_context
def dashboard(ctx):
    """Show headline numbers for the orders visible to the acting profile."""
    session = require_view(ctx, View.DASHBOARD)
    summary = DashboardService(ctx.obj["db"]).build_summary(session.current_user)

    click.echo(f"\nDashboard - {session.current_user.name}")
    click.echo("=" * 60)
    click.echo(f"  Received this month: {money(summary.received_this_month):>16}")
    click.echo(f"  Outstanding balance: {money(summary.total_balance):>16}")
    click.echo(f"  Orders:              {summary.total_orders:>16}")

    if summary.sales_by_consultant:
        click.echo("\nSales by consultant:")
        click.echo("-" * 60)
        for name, total in summary.sales_by_consultant:
            click.echo(f"  {name[:36]:<36} {money(total):>18}")

    if summary.orders_by_status:
        click.echo("\nOrders by payment status:")
        click.echo("-" * 60)
        for status, count in summary.orders_by_status:
            click.echo(f"  {status.value:<36} {count:>18}")


@click.command("goals")
@click.option("--month", help="Reference month (YYYY-MM, MM/YYYY, 'last month'); default this month")
@click.pass_context
def goals(ctx, month: str | None):
    """Show monthly sales against each salesperson's goal.

    Examples:
        multiluz goals
        multiluz goals --month 2024-03
    """
    session = require_view(ctx, View.DASHBOARD)
    try:
        ref_month, ref_year = parse_month(month)
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)

    rows = SalespersonService(ctx.obj["db"]).goal_attainment(
        ref_month, ref_year, user=session.current_user
    )
    if not rows:
        click.echo("No salespeople found.")
        return

    click.echo(f"\nSales goals for {ref_year}-{ref_month:02d}:")
    click.echo("-" * 72)
    click.echo(f"{'Salesperson':<24} {'Sales':>16} {'Goal':>16} {'Attained':>10}")
    click.echo("-" * 72)
    for row in rows:
        click.echo(
            f"{row.name[:24]:<24} {money(row.monthly_sales):>16} "
            f"{money(row.sales_goal):>16} {row.percentage:>9.1f}%"
        )


def register_commands(cli):
    """Register dashboard commands with main CLI."""
    cli.add_command(dashboard)
    cli.add_command(goals)
