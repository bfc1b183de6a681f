"""Salesperson management commands."""

import click
from multiluz.domain.entities import ConfigList, View
from multiluz.domain.salesperson import SalespersonService
from multiluz.domain.settings import SettingsService
from multiluz.cli.access import require_view, resolve_salesperson_or_exit
from multiluz.cli.error_handling import handle_domain_error
from multiluz.cli.formatting import money, optional_date
from multiluz.utils.amount_parser import coerce_amount
from multiluz.utils.date_parser import parse_date


def _check_choice(ctx, settings: SettingsService, config_list: ConfigList, value: str | None):
    if value is None:
        return
    items = settings.list_items(config_list)
    if items and value not in items:
        click.echo(f"Error: '{value}' is not a valid choice. Options: {', '.join(items)}", err=True)
        ctx.exit(1)


@click.group()
def salesperson_group():
    """Manage salespeople."""
    pass


@salesperson_group.command("create")
@click.option("--name", required=True, help="Salesperson name")
@click.option("--unit", "business_unit", required=True, help="Business unit (from settings)")
@click.option("--goal", "sales_goal", default="0", help="Monthly sales goal")
@click.option("--level", required=True, help="Seniority level (from settings)")
@click.option("--hired", "hire_date", default="today", help="Hire date")
@click.pass_context
def create_salesperson(ctx, name: str, business_unit: str, sales_goal: str, level: str, hire_date: str):
    """Create a new salesperson.

    Examples:
        multiluz salesperson create --name "Ana Costa" --unit "São Paulo" \\
            --goal 100000 --level Sênior --hired 2022-01-15
    """
    require_view(ctx, View.SALESPEOPLE)
    db = ctx.obj["db"]
    service = SalespersonService(db)
    settings = SettingsService(db)

    _check_choice(ctx, settings, ConfigList.BUSINESS_UNITS, business_unit)
    _check_choice(ctx, settings, ConfigList.SALESPERSON_LEVELS, level)

    try:
        salesperson_id = service.create_salesperson(
            name=name,
            business_unit=business_unit,
            sales_goal=coerce_amount(sales_goal),
            level=level,
            hire_date=parse_date(hire_date),
        )
        click.echo(f"Created salesperson '{name}' (ID: {salesperson_id})")
    except ValueError as e:
        handle_domain_error(ctx, e)


@salesperson_group.command("update")
@click.argument("salesperson")
@click.option("--name", help="New name")
@click.option("--unit", "business_unit", help="Business unit")
@click.option("--goal", "sales_goal", help="Monthly sales goal")
@click.option("--level", help="Seniority level")
@click.option("--hired", "hire_date", help="Hire date")
@click.pass_context
def update_salesperson(
    ctx,
    salesperson: str,
    name: str | None,
    business_unit: str | None,
    sales_goal: str | None,
    level: str | None,
    hire_date: str | None,
):
    """Update a salesperson by ID or name.

    Renaming a salesperson does not change the consultant name on existing orders.
    """
    require_view(ctx, View.SALESPEOPLE)
    db = ctx.obj["db"]
    service = SalespersonService(db)
    settings = SettingsService(db)

    person = resolve_salesperson_or_exit(ctx, service, salesperson)
    _check_choice(ctx, settings, ConfigList.BUSINESS_UNITS, business_unit)
    _check_choice(ctx, settings, ConfigList.SALESPERSON_LEVELS, level)

    try:
        service.update_salesperson(
            person.id,
            name=name,
            business_unit=business_unit,
            sales_goal=coerce_amount(sales_goal) if sales_goal is not None else None,
            level=level,
            hire_date=parse_date(hire_date) if hire_date else None,
        )
        click.echo(f"Updated salesperson {person.id}")
    except ValueError as e:
        handle_domain_error(ctx, e)


@salesperson_group.command("delete")
@click.argument("salesperson")
@click.option("--yes", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def delete_salesperson(ctx, salesperson: str, yes: bool):
    """Delete a salesperson by ID or name."""
    require_view(ctx, View.SALESPEOPLE)
    service = SalespersonService(ctx.obj["db"])

    person = resolve_salesperson_or_exit(ctx, service, salesperson)
    if not yes and not click.confirm(
        f"Are you sure you want to delete salesperson '{person.name}' ({person.id})?"
    ):
        click.echo("Deletion cancelled.")
        return

    try:
        service.delete_salesperson(person.id)
        click.echo(f"Deleted salesperson '{person.name}'")
    except ValueError as e:
        handle_domain_error(ctx, e)


@salesperson_group.command("list")
@click.pass_context
def list_salespeople(ctx):
    """List all salespeople."""
    require_view(ctx, View.SALESPEOPLE)
    service = SalespersonService(ctx.obj["db"])

    people = service.list_salespeople()
    if not people:
        click.echo("No salespeople found.")
        return

    click.echo(f"\nFound {len(people)} salesperson(s):")
    click.echo("-" * 86)
    click.echo(f"{'ID':<8} {'Name':<22} {'Unit':<18} {'Level':<10} {'Goal':>14}  {'Hired':<10}")
    click.echo("-" * 86)
    for p in people:
        click.echo(
            f"{p.id:<8} {p.name[:22]:<22} {p.business_unit[:18]:<18} {p.level[:10]:<10} "
            f"{money(p.sales_goal):>14}  {optional_date(p.hire_date):<10}"
        )


def register_commands(cli):
    """Register salesperson commands with main CLI."""
    cli.add_command(salesperson_group, name="salesperson")
