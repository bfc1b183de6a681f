"""Lookup list (settings) commands."""

import click
from multiluz.domain.entities import ConfigList, View
from multiluz.domain.settings import LIST_LABELS, SettingsService
from multiluz.cli.access import require_view
from multiluz.cli.error_handling import handle_domain_error

LIST_CHOICE = click.Choice([config_list.value for config_list in ConfigList])


@click.group()
def settings_group():
    """Manage the configurable lookup lists."""
    pass


@settings_group.command("list")
@click.argument("list_name", type=LIST_CHOICE, required=False)
@click.pass_context
def list_settings(ctx, list_name: str | None):
    """Show one lookup list, or all of them."""
    require_view(ctx, View.SETTINGS)
    service = SettingsService(ctx.obj["db"])

    config = service.get_configuration()
    for config_list in ConfigList:
        if list_name is not None and config_list.value != list_name:
            continue
        items = config.items(config_list)
        click.echo(f"\n{LIST_LABELS[config_list].capitalize()} ({config_list.value}):")
        if not items:
            click.echo("  (empty)")
        for item in items:
            click.echo(f"  - {item}")


@settings_group.command("add")
@click.argument("list_name", type=LIST_CHOICE)
@click.argument("value")
@click.pass_context
def add_setting(ctx, list_name: str, value: str):
    """Add an item to a lookup list.

    Examples:
        multiluz settings add payment_methods Pix
    """
    require_view(ctx, View.SETTINGS)
    service = SettingsService(ctx.obj["db"])

    try:
        stored = service.add_item(ConfigList(list_name), value)
        click.echo(f"Added '{stored}' to {list_name}")
    except ValueError as e:
        handle_domain_error(ctx, e)


@settings_group.command("rename")
@click.argument("list_name", type=LIST_CHOICE)
@click.argument("old_value")
@click.argument("new_value")
@click.pass_context
def rename_setting(ctx, list_name: str, old_value: str, new_value: str):
    """Rename an item; records using it are updated too.

    Examples:
        multiluz settings rename business_units Matriz "Sede Central"
    """
    require_view(ctx, View.SETTINGS)
    service = SettingsService(ctx.obj["db"])

    try:
        changed = service.rename_item(ConfigList(list_name), old_value, new_value)
        click.echo(f"Renamed '{old_value}' to '{new_value.strip()}' ({changed} record(s) updated)")
    except ValueError as e:
        handle_domain_error(ctx, e)


@settings_group.command("delete")
@click.argument("list_name", type=LIST_CHOICE)
@click.argument("value")
@click.option("--yes", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def delete_setting(ctx, list_name: str, value: str, yes: bool):
    """Remove an item from a lookup list.

    Records that already use the value keep it.
    """
    require_view(ctx, View.SETTINGS)
    service = SettingsService(ctx.obj["db"])

    if not yes and not click.confirm(f"Are you sure you want to delete '{value}' from {list_name}?"):
        click.echo("Deletion cancelled.")
        return

    try:
        service.delete_item(ConfigList(list_name), value)
        click.echo(f"Deleted '{value}' from {list_name}")
    except ValueError as e:
        handle_domain_error(ctx, e)


def register_commands(cli):
    """Register settings commands with main CLI."""
    cli.add_command(settings_group, name="settings")
