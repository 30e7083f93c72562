"""Client and vendor management commands."""

import click
from shopledger.cli.error_handling import handle_domain_error
from shopledger.cli.formatting import format_money, truncate
from shopledger.cli.store_context import load_store, save_store
from shopledger.domain.entities import PartyType
from shopledger.domain.party import PartyService
from shopledger.domain.reports import ReportService
from shopledger.utils.amount_parser import parse_amount


def _parse_opening(ctx, opening_balance: str | None):
    if opening_balance is None:
        return None
    try:
        return parse_amount(opening_balance)
    except ValueError as e:
        click.echo(f"Error: Invalid opening balance: {e}", err=True)
        ctx.exit(1)


def make_party_group(party_type: PartyType) -> click.Group:
    """Build the command group managing one party collection."""
    label = party_type.value
    balance_label = "Receivable" if party_type == PartyType.CLIENT else "Payable"

    @click.group(help=f"Manage {label}s.")
    def group():
        pass

    @group.command("add")
    @click.argument("name")
    @click.option("--phone", help="Phone number")
    @click.option("--address", help="Address")
    @click.option("--notes", help="Notes")
    @click.option("--opening-balance", help=f"{balance_label} amount before any entries")
    @click.option("--id", "party_id", help="Explicit ID (generated if not provided)")
    @click.pass_context
    def add_party(ctx, name, phone, address, notes, opening_balance, party_id):
        """Add a party."""
        opening = _parse_opening(ctx, opening_balance)
        store = load_store(ctx)
        service = PartyService(store)
        try:
            party = service.create_party(
                party_type,
                name=name,
                phone=phone,
                address=address,
                notes=notes,
                opening_balance=opening if opening is not None else 0,
                party_id=party_id,
            )
        except ValueError as e:
            handle_domain_error(ctx, e)
        save_store(ctx, store)
        click.echo(f"Created {label} '{party.name}' (ID: {party.id})")

    @group.command("list")
    @click.pass_context
    def list_parties(ctx):
        """List parties with their current balances."""
        store = load_store(ctx)
        rows = ReportService(store).party_balances(party_type)
        if not rows:
            click.echo(f"No {label}s found.")
            return

        currency = store.company.currency
        click.echo(f"\n{label.capitalize()}s:")
        click.echo("-" * 100)
        click.echo(f"{'ID':<34} {'Name':<24} {'Phone':<14} {balance_label:>24}")
        click.echo("-" * 100)
        for row in rows:
            click.echo(
                f"{row.party.id:<34} {truncate(row.party.name, 24):<24} "
                f"{truncate(row.party.phone, 14):<14} {format_money(row.balance, currency):>24}"
            )

    @group.command("show")
    @click.argument("party")
    @click.pass_context
    def show_party(ctx, party):
        """Show a party's details and balance.

        PARTY can be a name or ID.
        """
        store = load_store(ctx)
        try:
            found = PartyService(store).resolve_party(party_type, party)
        except ValueError as e:
            handle_domain_error(ctx, e)

        currency = store.company.currency
        balance = ReportService(store).balance_of(party_type, found.id)
        click.echo(f"{label.capitalize()}: {found.name} (ID: {found.id})")
        if found.phone:
            click.echo(f"  Phone: {found.phone}")
        if found.address:
            click.echo(f"  Address: {found.address}")
        if found.notes:
            click.echo(f"  Notes: {found.notes}")
        click.echo(f"  Opening balance: {format_money(found.opening_balance, currency)}")
        click.echo(f"  {balance_label}: {format_money(balance, currency)}")

    @group.command("edit")
    @click.argument("party")
    @click.option("--name", help="New name")
    @click.option("--phone", help="Phone number")
    @click.option("--address", help="Address")
    @click.option("--notes", help="Notes")
    @click.option("--opening-balance", help="Opening balance")
    @click.pass_context
    def edit_party(ctx, party, name, phone, address, notes, opening_balance):
        """Edit a party.

        PARTY can be a name or ID. Options not given keep their current value.
        """
        opening = _parse_opening(ctx, opening_balance)
        store = load_store(ctx)
        service = PartyService(store)
        try:
            current = service.resolve_party(party_type, party)
            updated = service.update_party(
                party_type,
                current.id,
                name=name if name is not None else current.name,
                phone=phone if phone is not None else current.phone,
                address=address if address is not None else current.address,
                notes=notes if notes is not None else current.notes,
                opening_balance=opening if opening is not None else current.opening_balance,
            )
        except ValueError as e:
            handle_domain_error(ctx, e)
        save_store(ctx, store)
        click.echo(f"Updated {label} '{updated.name}'")

    @group.command("delete")
    @click.argument("party")
    @click.option("--yes", is_flag=True, help="Do not ask for confirmation")
    @click.pass_context
    def delete_party(ctx, party, yes):
        """Delete a party.

        PARTY can be a name or ID. Ledger entries that reference the party
        are kept; they show "-" as party name afterwards.
        """
        store = load_store(ctx)
        service = PartyService(store)
        try:
            found = service.resolve_party(party_type, party)
        except ValueError as e:
            handle_domain_error(ctx, e)

        if not yes and not click.confirm(
            f"Are you sure you want to delete {label} '{found.name}' (ID: {found.id})?"
        ):
            click.echo("Deletion cancelled.")
            return

        service.delete_party(party_type, found.id)
        save_store(ctx, store)
        click.echo(f"Deleted {label} '{found.name}'")

    return group


def register_commands(cli):
    """Register client and vendor commands with main CLI."""
    cli.add_command(make_party_group(PartyType.CLIENT), name="client")
    cli.add_command(make_party_group(PartyType.VENDOR), name="vendor")
