"""Backup import command."""

import click
from shopledger.cli.error_handling import handle_domain_error
from shopledger.cli.store_context import save_store
from shopledger.domain.backup import BackupService
from shopledger.domain.store import RecordStore


@click.group()
def import_group():
    """Import data from a backup."""
    pass


@import_group.command("json")
@click.argument("backup_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--yes", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def import_json(ctx, backup_file: str, yes: bool):
    """Replace all records with the contents of a JSON backup."""
    try:
        with open(backup_file, encoding="utf-8") as f:
            snapshot = BackupService().import_json(f.read())
    except (ValueError, OSError) as e:
        click.echo(f"Import failed: {e}", err=True)
        ctx.exit(1)

    if not yes and not click.confirm("Replace ALL current records with this backup?"):
        click.echo("Import cancelled.")
        return

    try:
        save_store(ctx, RecordStore.from_snapshot(snapshot))
    except ValueError as e:
        handle_domain_error(ctx, e)
    click.echo("Imported successfully.")
    click.echo(f"  Clients: {len(snapshot.clients)}")
    click.echo(f"  Vendors: {len(snapshot.vendors)}")
    click.echo(f"  Entries: {len(snapshot.ledger)}")


def register_commands(cli):
    """Register import commands with main CLI."""
    cli.add_command(import_group, name="import")
