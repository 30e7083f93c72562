"""Main CLI entry point."""

import logging

import click
from shopledger.database.factories import DB_PATH_ENV, create_sqlite_database
from shopledger.utils.logging_utils import configure_logging

# Import and register all commands at module level
from shopledger.cli.commands import (
    company,
    party,
    entry,
    report,
    export_cmd,
    import_cmd,
)


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help=f"Path to database file (overrides {DB_PATH_ENV} environment variable)",
    envvar=DB_PATH_ENV,
)
@click.option("--verbose", "-v", is_flag=True, help="Log debugging details to stderr")
@click.pass_context
def cli(ctx, db_path: str | None, verbose: bool):
    """Shopledger - Small business ledger.

    Record sales, purchases, expenses and cash movements against clients
    and vendors, and report balances, profit, the balance sheet and cash flow.
    """
    ctx.ensure_object(dict)
    configure_logging(logging.DEBUG if verbose else logging.WARNING)

    # Initialize database connection only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        db = create_sqlite_database(database_path=db_path)
        db.connect()
        db.initialize_schema()
        ctx.obj["db"] = db
        ctx.call_on_close(db.disconnect)


# Register all commands
company.register_commands(cli)
party.register_commands(cli)
entry.register_commands(cli)
report.register_commands(cli)
export_cmd.register_commands(cli)
import_cmd.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
