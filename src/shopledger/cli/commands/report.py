"""Report commands."""

import click
from shopledger.cli.formatting import format_money, truncate
from shopledger.cli.store_context import load_store
from shopledger.domain.entities import PartyType
from shopledger.domain.entry import EntryService
from shopledger.domain.reports import ReportService

LABEL_WIDTH = 36
AMOUNT_WIDTH = 24


def _line(label: str, value, currency: str) -> None:
    click.echo(f"{label:<{LABEL_WIDTH}} {format_money(value, currency):>{AMOUNT_WIDTH}}")


def _rule() -> None:
    click.echo("-" * (LABEL_WIDTH + AMOUNT_WIDTH + 1))


@click.group()
def report_group():
    """Show financial reports."""
    pass


@report_group.command("totals")
@click.pass_context
def show_totals(ctx):
    """Show aggregate totals over the whole ledger."""
    store = load_store(ctx)
    totals = ReportService(store).totals()
    currency = store.company.currency

    click.echo("\nTotals")
    _rule()
    _line("Sales", totals.sales, currency)
    _line("Purchases", totals.purchases, currency)
    _line("COGS (Purchases: COGS)", totals.cogs, currency)
    _line("Expenses", totals.expenses, currency)
    _line("Cash In", totals.cash_in, currency)
    _line("Cash Out", totals.cash_out, currency)
    _rule()
    _line("Cash", totals.cash, currency)
    _line("Receivable (Clients)", totals.receivable, currency)
    _line("Payable (Vendors)", totals.payable, currency)
    _line("Profit (Simple)", totals.profit, currency)


@report_group.command("pnl")
@click.pass_context
def show_profit_and_loss(ctx):
    """Show the simple profit & loss statement."""
    store = load_store(ctx)
    pnl = ReportService(store).profit_and_loss()
    currency = store.company.currency

    click.echo("\nProfit & Loss (Simple)")
    _rule()
    _line("Sales", pnl.sales, currency)
    _line("COGS (Purchases: COGS)", pnl.cogs, currency)
    _line("Expenses", pnl.expenses, currency)
    _rule()
    _line("Net Profit", pnl.profit, currency)
    click.echo('\nNote: COGS uses purchases where Category = "COGS".')


@report_group.command("balance-sheet")
@click.pass_context
def show_balance_sheet(ctx):
    """Show the balance sheet."""
    store = load_store(ctx)
    sheet = ReportService(store).balance_sheet()
    currency = store.company.currency

    click.echo("\nAssets")
    _rule()
    for line in sheet.assets:
        _line(line.name, line.value, currency)
    _line("Total Assets", sheet.total_assets, currency)

    click.echo("\nLiabilities & Equity")
    _rule()
    for line in sheet.liabilities:
        _line(line.name, line.value, currency)
    _line("Equity", sheet.equity, currency)
    _line("Total", sheet.total_liabilities + sheet.equity, currency)


@report_group.command("cash-flow")
@click.pass_context
def show_cash_flow(ctx):
    """Show the simple cash flow statement."""
    store = load_store(ctx)
    flow = ReportService(store).cash_flow()
    currency = store.company.currency

    click.echo("\nCash Flow (Simple)")
    _rule()
    _line("Cash from Sales + Receipts", flow.cash_from_sales, currency)
    _line("Cash to Suppliers + Payments", flow.cash_to_suppliers, currency)
    _line("Cash to Expenses", flow.cash_to_expenses, currency)
    _rule()
    _line("Net Cash Flow", flow.net, currency)


@report_group.command("parties")
@click.option(
    "--type",
    "party_type",
    type=click.Choice([t.value for t in PartyType]),
    default=PartyType.CLIENT.value,
    show_default=True,
    help="Which parties to show",
)
@click.pass_context
def show_party_balances(ctx, party_type):
    """Show opening and current balance of every client or vendor."""
    party_type = PartyType(party_type)
    store = load_store(ctx)
    rows = ReportService(store).party_balances(party_type)
    title = party_type.value.capitalize()
    if not rows:
        click.echo(f"No {party_type.value} records.")
        return

    currency = store.company.currency
    click.echo(f"\n{title} {'Receivable' if party_type == PartyType.CLIENT else 'Payable'} Details")
    click.echo("-" * 76)
    click.echo(f"{title:<26} {'Opening':>24} {'Balance':>24}")
    click.echo("-" * 76)
    for row in rows:
        click.echo(
            f"{truncate(row.party.name, 26):<26} "
            f"{format_money(row.opening_balance, currency):>24} "
            f"{format_money(row.balance, currency):>24}"
        )


@report_group.command("dashboard")
@click.option("--recent", type=int, default=8, show_default=True, help="Number of recent entries")
@click.pass_context
def show_dashboard(ctx, recent):
    """Show key figures and the most recent entries."""
    store = load_store(ctx)
    reports = ReportService(store)
    totals = reports.totals()
    currency = store.company.currency

    click.echo(f"Company: {store.company.name} | Currency: {currency}")
    click.echo()
    _line("Sales", totals.sales, currency)
    _line("COGS (Purchases: COGS)", totals.cogs, currency)
    _line("Expenses", totals.expenses, currency)
    _line("Profit (Simple)", totals.profit, currency)
    _rule()
    _line("Cash", totals.cash, currency)
    _line("Receivable (Clients)", totals.receivable, currency)
    _line("Payable (Vendors)", totals.payable, currency)
    _rule()
    _line("Balance Sheet Equity", reports.balance_sheet().equity, currency)
    _line("Cash Flow Net", reports.cash_flow().net, currency)

    entries = EntryService(store).list_entries(limit=recent)
    click.echo("\nRecent Transactions")
    if not entries:
        click.echo("No transactions yet.")
        return
    for entry in entries:
        party_name = reports.party_name(entry.party_type, entry.party_id)
        click.echo(
            f"{entry.date:<11} {entry.entry_type.value:<9} {truncate(party_name, 20):<20} "
            f"{truncate(entry.desc, 24):<24} {format_money(entry.amount):>14}"
        )


def register_commands(cli):
    """Register report commands with main CLI."""
    cli.add_command(report_group, name="report")
