"""Ledger entry commands."""

import click
from shopledger.cli.error_handling import handle_domain_error
from shopledger.cli.formatting import format_money, truncate
from shopledger.cli.store_context import load_store, save_store
from shopledger.domain.entities import EntryType
from shopledger.domain.entry import ENTRY_MODES, PAYMENT_METHODS, EntryService, party_type_for
from shopledger.domain.party import PartyService
from shopledger.domain.reports import ReportService
from shopledger.utils.amount_parser import parse_amount
from shopledger.utils.date_parser import to_iso

ENTRY_TYPE_CHOICE = click.Choice([t.value for t in EntryType])


def _parse_date_or_exit(ctx, value):
    try:
        return to_iso(value)
    except ValueError as e:
        click.echo(f"Error: Invalid date format: {e}", err=True)
        ctx.exit(1)


def _parse_amount_or_exit(ctx, value, label):
    try:
        return parse_amount(value)
    except ValueError as e:
        click.echo(f"Error: Invalid {label} format: {e}", err=True)
        ctx.exit(1)


def _resolve_party_id(ctx, store, entry_type: EntryType, party: str | None):
    """Resolve a party name or ID for an entry kind, or exit with an error."""
    if not party:
        return None
    party_type = party_type_for(entry_type, party)
    if party_type is None:
        handle_domain_error(ctx, ValueError(f"{entry_type.value} entries cannot reference a party"))
    try:
        return PartyService(store).resolve_party(party_type, party).id
    except ValueError as e:
        handle_domain_error(ctx, e)


@click.group()
def entry_group():
    """Record and browse ledger entries."""
    pass


@entry_group.command("add")
@click.argument("entry_type", type=ENTRY_TYPE_CHOICE)
@click.option("--date", default="today", show_default=True, help="Entry date (YYYY-MM-DD or 'today', 'yesterday')")
@click.option("--amount", required=True, help="Full amount of the transaction")
@click.option("--paid", help="Amount paid now (defaults to 0 for sale/purchase, full amount otherwise)")
@click.option("--party", help="Client or vendor name or ID")
@click.option("--ref", default="", help="Reference (invoice/bill number)")
@click.option("--desc", default="", help="Description")
@click.option("--category", help="Category (e.g., COGS, Fuel, Salary)")
@click.option("--method", type=click.Choice(PAYMENT_METHODS), default="Cash", show_default=True, help="Payment method")
@click.option("--id", "entry_id", help="Explicit entry ID (generated if not provided)")
@click.pass_context
def add_entry(ctx, entry_type, date, amount, paid, party, ref, desc, category, method, entry_id):
    """Add a ledger entry.

    ENTRY_TYPE is one of sale, purchase, expense, cash_in, cash_out.

    Examples:
        shopledger entry add sale --amount 55000 --paid 20000 --party "Ali Store" --ref S-001
        shopledger entry add purchase --amount 40000 --category COGS --party "ABC Supplier"
        shopledger entry add expense --amount 3000 --category Fuel
    """
    entry_type = EntryType(entry_type)
    entry_date = _parse_date_or_exit(ctx, date)
    entry_amount = _parse_amount_or_exit(ctx, amount, "amount")
    entry_paid = _parse_amount_or_exit(ctx, paid, "paid amount") if paid is not None else None

    store = load_store(ctx)
    party_id = _resolve_party_id(ctx, store, entry_type, party)
    try:
        entry = EntryService(store).create_entry(
            entry_type,
            date=entry_date,
            amount=entry_amount,
            paid=entry_paid,
            party_id=party_id,
            ref=ref,
            desc=desc,
            category=category,
            method=method,
            entry_id=entry_id,
        )
    except ValueError as e:
        handle_domain_error(ctx, e)
    save_store(ctx, store)

    currency = store.company.currency
    click.echo(f"Created {entry.entry_type.value} entry {entry.id}")
    click.echo(f"  Date: {entry.date}")
    click.echo(f"  Amount: {format_money(entry.amount, currency)}")
    click.echo(f"  Paid: {format_money(entry.paid, currency)}")
    if entry.party_id:
        party_name = ReportService(store).party_name(entry.party_type, entry.party_id)
        click.echo(f"  Party: {party_name}")
    if entry.category:
        click.echo(f"  Category: {entry.category}")


@entry_group.command("list")
@click.option("--mode", type=click.Choice(list(ENTRY_MODES)), help="Only show one kind of entry")
@click.option("--search", help="Search reference, description, party or category")
@click.option("--limit", type=int, help="Maximum number of entries")
@click.pass_context
def list_entries(ctx, mode, search, limit):
    """List ledger entries, newest first."""
    store = load_store(ctx)
    entries = EntryService(store).list_entries(mode=mode, query=search, limit=limit)
    if not entries:
        click.echo("No entries found.")
        return

    reports = ReportService(store)
    click.echo(f"\nFound {len(entries)} entr{'y' if len(entries) == 1 else 'ies'}:")
    click.echo("-" * 130)
    click.echo(
        f"{'ID':<34} {'Date':<11} {'Type':<9} {'Party':<18} {'Ref':<10} "
        f"{'Category':<10} {'Amount':>14} {'Paid':>14}"
    )
    click.echo("-" * 130)
    for entry in entries:
        party_name = reports.party_name(entry.party_type, entry.party_id)
        click.echo(
            f"{entry.id:<34} {entry.date:<11} {entry.entry_type.value:<9} "
            f"{truncate(party_name, 18):<18} {truncate(entry.ref, 10):<10} "
            f"{truncate(entry.category, 10):<10} {format_money(entry.amount):>14} "
            f"{format_money(entry.paid):>14}"
        )


@entry_group.command("edit")
@click.argument("entry_id")
@click.option("--type", "entry_type", type=ENTRY_TYPE_CHOICE, help="Change the entry kind")
@click.option("--date", help="Entry date")
@click.option("--amount", help="Full amount")
@click.option("--paid", help="Amount paid")
@click.option("--party", help="Client or vendor name or ID, or empty string to clear")
@click.option("--ref", help="Reference")
@click.option("--desc", help="Description")
@click.option("--category", help="Category")
@click.option("--method", type=click.Choice(PAYMENT_METHODS), help="Payment method")
@click.pass_context
def edit_entry(ctx, entry_id, entry_type, date, amount, paid, party, ref, desc, category, method):
    """Edit a ledger entry.

    Updates only the fields that are provided.

    Examples:
        shopledger entry edit 3f2a... --paid 30000
        shopledger entry edit 3f2a... --party ""  # Clear party
    """
    store = load_store(ctx)
    service = EntryService(store)
    try:
        current = service.require_entry(entry_id)
    except ValueError as e:
        handle_domain_error(ctx, e)

    changes = {}
    new_type = EntryType(entry_type) if entry_type else current.entry_type
    if entry_type:
        changes["entry_type"] = new_type
    if date is not None:
        changes["date"] = _parse_date_or_exit(ctx, date)
    if amount is not None:
        changes["amount"] = _parse_amount_or_exit(ctx, amount, "amount")
    if paid is not None:
        changes["paid"] = _parse_amount_or_exit(ctx, paid, "paid amount")
    if party is not None:
        changes["party_id"] = _resolve_party_id(ctx, store, new_type, party)
    for key, value in (("ref", ref), ("desc", desc), ("category", category), ("method", method)):
        if value is not None:
            changes[key] = value

    if not changes:
        click.echo("Nothing to update.")
        return

    try:
        service.update_entry(entry_id, **changes)
    except ValueError as e:
        handle_domain_error(ctx, e)
    save_store(ctx, store)
    click.echo(f"Updated entry {entry_id}")


@entry_group.command("delete")
@click.argument("entry_id")
@click.option("--yes", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def delete_entry(ctx, entry_id, yes):
    """Delete a ledger entry."""
    store = load_store(ctx)
    service = EntryService(store)
    try:
        service.require_entry(entry_id)
    except ValueError as e:
        handle_domain_error(ctx, e)

    if not yes and not click.confirm(f"Delete entry {entry_id}?"):
        click.echo("Deletion cancelled.")
        return

    service.delete_entry(entry_id)
    save_store(ctx, store)
    click.echo(f"Deleted entry {entry_id}")


def register_commands(cli):
    """Register entry commands with main CLI."""
    cli.add_command(entry_group, name="entry")
