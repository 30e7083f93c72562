"""Company settings commands."""

import click
from shopledger.cli.error_handling import handle_domain_error
from shopledger.cli.store_context import load_store, save_store


@click.group()
def company_group():
    """Manage company settings."""
    pass


@company_group.command("show")
@click.pass_context
def show_company(ctx):
    """Show company settings."""
    company = load_store(ctx).company
    click.echo(f"Name: {company.name}")
    click.echo(f"Currency: {company.currency}")
    click.echo(f"Fiscal year starts in month: {company.fiscal_year_start_month}")


@company_group.command("set")
@click.option("--name", help="Company name")
@click.option("--currency", help="Currency label shown next to amounts (e.g., PKR)")
@click.option(
    "--fiscal-year-start-month",
    type=click.IntRange(1, 12),
    help="Month the fiscal year starts in (1-12)",
)
@click.pass_context
def set_company(ctx, name: str | None, currency: str | None, fiscal_year_start_month: int | None):
    """Update company settings.

    Only the options given are changed.

    Examples:
        shopledger company set --name "Demo Trading" --currency PKR
    """
    changes = {}
    if name is not None:
        if not name.strip():
            handle_domain_error(ctx, ValueError("Company name cannot be empty"))
        changes["name"] = name.strip()
    if currency is not None:
        if not currency.strip():
            handle_domain_error(ctx, ValueError("Currency cannot be empty"))
        changes["currency"] = currency.strip()
    if fiscal_year_start_month is not None:
        changes["fiscal_year_start_month"] = fiscal_year_start_month

    if not changes:
        click.echo("Nothing to update.")
        return

    store = load_store(ctx)
    company = store.update_company(**changes)
    save_store(ctx, store)
    click.echo(f"Saved company settings for '{company.name}' ({company.currency})")


def register_commands(cli):
    """Register company commands with main CLI."""
    cli.add_command(company_group, name="company")
