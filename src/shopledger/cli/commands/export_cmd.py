"""Export commands."""

from datetime import datetime

import click
from shopledger.cli.error_handling import handle_domain_error
from shopledger.cli.store_context import load_store
from shopledger.domain.backup import BackupService
from shopledger.domain.csv_export import CSVExportService
from shopledger.domain.entry import ENTRY_MODES


@click.group()
def export_group():
    """Export data to JSON or CSV."""
    pass


@export_group.command("json")
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, writable=True),
    help="Output file (defaults to sl-backup-<timestamp>.json; '-' for stdout)",
)
@click.pass_context
def export_json(ctx, output: str | None):
    """Export every record as a JSON backup."""
    store = load_store(ctx)
    text = BackupService().export_json(store.snapshot())

    if output == "-":
        click.echo(text)
        return
    if output is None:
        output = f"sl-backup-{datetime.now().strftime('%Y-%m-%dT%H-%M-%S')}.json"
    try:
        with open(output, "w", encoding="utf-8") as f:
            f.write(text)
    except OSError as e:
        handle_domain_error(ctx, ValueError(f"Could not write '{output}': {e}"))
    click.echo(f"Exported backup to {output}")


@export_group.command("csv")
@click.option("--mode", type=click.Choice(list(ENTRY_MODES)), help="Only export one kind of entry")
@click.option("--search", help="Only export entries matching this text")
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, writable=True),
    help="Output file (defaults to <mode>-export.csv; '-' for stdout)",
)
@click.pass_context
def export_csv(ctx, mode: str | None, search: str | None, output: str | None):
    """Export ledger entries as CSV."""
    store = load_store(ctx)
    text = CSVExportService(store).export_entries(mode=mode, query=search)

    if output == "-":
        click.echo(text)
        return
    if output is None:
        output = f"{mode or 'ledger'}-export.csv"
    try:
        with open(output, "w", encoding="utf-8", newline="") as f:
            f.write(text)
    except OSError as e:
        handle_domain_error(ctx, ValueError(f"Could not write '{output}': {e}"))
    click.echo(f"Exported {len(text.splitlines()) - 1} entries to {output}")


def register_commands(cli):
    """Register export commands with main CLI."""
    cli.add_command(export_group, name="export")
