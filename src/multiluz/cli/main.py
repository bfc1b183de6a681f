"""Main CLI entry point."""

import logging

import click
from multiluz.database.factories import create_sqlite_database
from multiluz.domain.entities import UserProfile, UserRole, View
from multiluz.domain.profile import UserProfileService
from multiluz.domain.session import AppSession

# Import and register all commands at module level
from multiluz.cli.commands import (
    order,
    payment,
    commission,
    salesperson,
    profile,
    settings,
    dashboard,
    init_demo,
)

# Acting identity used before any profile exists
BOOTSTRAP_ADMIN = UserProfile(id="", name="Admin", email="", role=UserRole.ADMIN)


def _resolve_acting_profile(ctx: click.Context, db, user_id: str | None) -> UserProfile:
    service = UserProfileService(db)
    if user_id:
        acting = service.get_profile(user_id)
        if acting is None:
            click.echo(f"Error: Profile {user_id} not found", err=True)
            ctx.exit(1)
        return acting
    if not service.list_profiles():
        return BOOTSTRAP_ADMIN
    acting = service.default_profile()
    if acting is None:
        click.echo("Error: No Admin profile exists; choose a profile with --user", err=True)
        ctx.exit(1)
    return acting


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to database file (overrides MULTILUZ_DB_PATH environment variable)",
    envvar="MULTILUZ_DB_PATH",
)
@click.option(
    "--user",
    "user_id",
    help="Acting profile ID, e.g. USR-003 (defaults to the first Admin profile)",
    envvar="MULTILUZ_USER",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx, db_path: str | None, user_id: str | None, verbose: bool):
    """Multiluz - Sales and finance back office.

    Track orders, received payments, commissions and sales goals for
    Multiluz Solar.
    """
    ctx.ensure_object(dict)
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    # Initialize database connection only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        db = create_sqlite_database(database_path=db_path)
        db.connect()
        db.initialize_schema()
        ctx.call_on_close(db.disconnect)
        ctx.obj["db"] = db
        ctx.obj["session"] = AppSession(current_user=_resolve_acting_profile(ctx, db, user_id))


@cli.command("whoami")
@click.pass_context
def whoami(ctx):
    """Show the acting profile and the views it can open."""
    session: AppSession = ctx.obj["session"]
    user = session.current_user
    click.echo(f"{user.name} ({user.role.value}){f' [{user.id}]' if user.id else ''}")
    views = [view.value for view in View if session.can_access(view)]
    click.echo(f"Views: {', '.join(views)}")


# Register all commands
order.register_commands(cli)
payment.register_commands(cli)
commission.register_commands(cli)
salesperson.register_commands(cli)
profile.register_commands(cli)
settings.register_commands(cli)
dashboard.register_commands(cli)
init_demo.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
