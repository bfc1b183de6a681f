"""Tests for salesperson and goal commands."""

from multiluz.cli.main import cli
from multiluz.domain.entities import UserRole
from multiluz.utils.date_parser import current_date


def test_salesperson_create(cli_runner, temp_db, sample_config):
    result = cli_runner.invoke(
        cli,
        [
            "--db-path", temp_db.database_path, "salesperson", "create",
            "--name", "Diego Martins", "--unit", "Matriz", "--goal", "75000",
            "--level", "Júnior", "--hired", "2023-03-01",
        ],
    )

    assert result.exit_code == 0
    assert "Created salesperson 'Diego Martins' (ID: SP-001)" in result.output


def test_salesperson_create_unknown_unit(cli_runner, temp_db, sample_config):
    result = cli_runner.invoke(
        cli,
        [
            "--db-path", temp_db.database_path, "salesperson", "create",
            "--name", "Diego Martins", "--unit", "Curitiba", "--level", "Júnior",
        ],
    )
    assert result.exit_code == 1
    assert "not a valid choice" in result.output


def test_salesperson_create_duplicate(cli_runner, temp_db, sample_salespeople):
    result = cli_runner.invoke(
        cli,
        [
            "--db-path", temp_db.database_path, "salesperson", "create",
            "--name", "Ana Costa", "--unit", "Matriz", "--level", "Pleno",
        ],
    )
    assert result.exit_code == 1
    assert "already exists" in result.output


def test_salesperson_list(cli_runner, temp_db, sample_salespeople):
    result = cli_runner.invoke(cli, ["--db-path", temp_db.database_path, "salesperson", "list"])

    assert result.exit_code == 0
    assert "Found 2 salesperson(s)" in result.output
    assert "Ana Costa" in result.output
    assert "100,000.00" in result.output


def test_salesperson_update_by_name(cli_runner, temp_db, sample_salespeople):
    result = cli_runner.invoke(
        cli,
        ["--db-path", temp_db.database_path, "salesperson", "update", "Bruno Gomes", "--goal", "90000"],
    )
    assert result.exit_code == 0

    listing = cli_runner.invoke(cli, ["--db-path", temp_db.database_path, "salesperson", "list"])
    assert "90,000.00" in listing.output


def test_salesperson_delete(cli_runner, temp_db, sample_salespeople):
    result = cli_runner.invoke(
        cli, ["--db-path", temp_db.database_path, "salesperson", "delete", "Bruno Gomes"], input="y\n"
    )
    assert result.exit_code == 0
    assert "Deleted salesperson 'Bruno Gomes'" in result.output


def test_salesperson_delete_unknown(cli_runner, temp_db):
    result = cli_runner.invoke(
        cli, ["--db-path", temp_db.database_path, "salesperson", "delete", "Nobody", "--yes"]
    )
    assert result.exit_code == 1
    assert "Salesperson 'Nobody' not found" in result.output


def test_salesperson_view_denied_to_salespeople(cli_runner, temp_db, sample_profiles):
    seller = sample_profiles[UserRole.SALESPERSON]
    result = cli_runner.invoke(
        cli, ["--db-path", temp_db.database_path, "--user", seller.id, "salesperson", "list"]
    )
    assert result.exit_code == 1


def test_goals(cli_runner, temp_db, sample_salespeople, create_order):
    today = current_date()
    create_order(consultant="Bruno Gomes", contract_signature_date=today, order_value=100000)

    result = cli_runner.invoke(cli, ["--db-path", temp_db.database_path, "goals"])

    assert result.exit_code == 0
    assert f"Sales goals for {today.year}-{today.month:02d}" in result.output
    assert result.output.index("Bruno Gomes") < result.output.index("Ana Costa")
    assert "100.0%" in result.output
    assert "0.0%" in result.output


def test_goals_invalid_month(cli_runner, temp_db, sample_salespeople):
    result = cli_runner.invoke(
        cli, ["--db-path", temp_db.database_path, "goals", "--month", "someday"]
    )
    assert result.exit_code == 1
    assert "Could not parse month" in result.output


def test_goals_scoped_to_salesperson(cli_runner, temp_db, sample_salespeople, sample_profiles, create_order):
    today = current_date()
    create_order(consultant="Ana Costa", contract_signature_date=today, order_value=25000)
    create_order(consultant="Bruno Gomes", contract_signature_date=today, order_value=40000)
    seller = sample_profiles[UserRole.SALESPERSON]

    result = cli_runner.invoke(cli, ["--db-path", temp_db.database_path, "--user", seller.id, "goals"])

    assert result.exit_code == 0
    assert "Bruno Gomes" in result.output
    assert "40,000.00" in result.output
    assert "Ana Costa" not in result.output
    assert "25,000.00" not in result.output
