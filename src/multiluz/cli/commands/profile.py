"""User profile management commands."""

import click
from multiluz.domain.entities import UserRole, View
from multiluz.domain.profile import UserProfileService
from multiluz.cli.access import require_view
from multiluz.cli.error_handling import handle_domain_error

ROLE_CHOICES = {role.name.lower(): role for role in UserRole}


@click.group()
def profile_group():
    """Manage user access profiles."""
    pass


@profile_group.command("create")
@click.option("--name", required=True, help="Profile name")
@click.option("--email", required=True, help="Email address")
@click.option("--role", type=click.Choice(sorted(ROLE_CHOICES)), required=True, help="Access role")
@click.pass_context
def create_profile(ctx, name: str, email: str, role: str):
    """Create a user profile.

    Salesperson profiles should use the salesperson's exact name; they only see
    orders where they are the consultant.

    Examples:
        multiluz profile create --name "Bruno Gomes" --email bruno.gomes@multiluz.com --role salesperson
    """
    require_view(ctx, View.PROFILES)
    service = UserProfileService(ctx.obj["db"])

    try:
        profile_id = service.create_profile(name=name, email=email, role=ROLE_CHOICES[role])
        click.echo(f"Created profile '{name}' (ID: {profile_id})")
    except ValueError as e:
        handle_domain_error(ctx, e)


@profile_group.command("update")
@click.argument("profile_id")
@click.option("--name", help="New name")
@click.option("--email", help="New email address")
@click.option("--role", type=click.Choice(sorted(ROLE_CHOICES)), help="New role")
@click.pass_context
def update_profile(ctx, profile_id: str, name: str | None, email: str | None, role: str | None):
    """Update a user profile."""
    require_view(ctx, View.PROFILES)
    service = UserProfileService(ctx.obj["db"])

    try:
        service.update_profile(
            profile_id, name=name, email=email, role=ROLE_CHOICES[role] if role else None
        )
        click.echo(f"Updated profile {profile_id}")
    except ValueError as e:
        handle_domain_error(ctx, e)


@profile_group.command("delete")
@click.argument("profile_id")
@click.option("--yes", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def delete_profile(ctx, profile_id: str, yes: bool):
    """Delete a user profile.

    The acting profile cannot delete itself.
    """
    session = require_view(ctx, View.PROFILES)
    service = UserProfileService(ctx.obj["db"])

    profile = service.get_profile(profile_id)
    if profile is None:
        click.echo(f"Error: Profile {profile_id} not found", err=True)
        ctx.exit(1)

    if profile_id != session.current_user.id and not yes:
        if not click.confirm(f"Are you sure you want to delete profile '{profile.name}' ({profile_id})?"):
            click.echo("Deletion cancelled.")
            return

    try:
        service.delete_profile(profile_id, active_profile_id=session.current_user.id)
        click.echo(f"Deleted profile '{profile.name}'")
    except ValueError as e:
        handle_domain_error(ctx, e)


@profile_group.command("list")
@click.pass_context
def list_profiles(ctx):
    """List all user profiles."""
    session = require_view(ctx, View.PROFILES)
    service = UserProfileService(ctx.obj["db"])

    profiles = service.list_profiles()
    if not profiles:
        click.echo("No profiles found.")
        return

    click.echo(f"\nFound {len(profiles)} profile(s):")
    click.echo("-" * 80)
    click.echo(f"{'ID':<8} {'Name':<22} {'Email':<32} {'Role':<16}")
    click.echo("-" * 80)
    for p in profiles:
        marker = " *" if p.id == session.current_user.id else ""
        click.echo(f"{p.id:<8} {p.name[:22]:<22} {p.email[:32]:<32} {p.role.value:<16}{marker}")


def register_commands(cli):
    """Register profile commands with main CLI."""
    cli.add_command(profile_group, name="profile")
