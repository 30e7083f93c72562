"""Integration tests for end-to-end workflows."""

import json

from shopledger.cli.main import cli


def test_full_workflow(cli_runner, temp_db, tmp_path):
    """Test complete workflow: parties → entries → reports → backup → restore."""

    def run(*args):
        result = cli_runner.invoke(cli, ["--db-path", temp_db.database_path, *args])
        assert result.exit_code == 0, result.output
        return result

    # Step 1: Company settings
    run("company", "set", "--name", "Swabi Traders")

    # Step 2: Parties
    run("client", "add", "Ali Store", "--opening-balance", "12000")
    run("vendor", "add", "ABC Supplier", "--opening-balance", "8000")

    # Step 3: One entry of each kind
    run("entry", "add", "sale", "--date", "2024-07-01", "--amount", "55000",
        "--paid", "20000", "--party", "Ali Store", "--ref", "S-001")
    run("entry", "add", "purchase", "--date", "2024-07-02", "--amount", "40000",
        "--paid", "10000", "--party", "ABC Supplier", "--category", "COGS")
    run("entry", "add", "expense", "--date", "2024-07-03", "--amount", "3000",
        "--category", "Fuel")
    run("entry", "add", "cash_in", "--date", "2024-07-04", "--amount", "5000",
        "--party", "Ali Store")
    run("entry", "add", "cash_out", "--date", "2024-07-05", "--amount", "7000",
        "--party", "ABC Supplier")

    # Step 4: Reports
    result = run("report", "totals")
    assert "42,000.00 PKR" in result.output
    assert "31,000.00 PKR" in result.output
    assert "12,000.00 PKR" in result.output

    result = run("report", "balance-sheet")
    assert "47,000.00 PKR" in result.output
    assert "16,000.00 PKR" in result.output

    result = run("client", "show", "Ali Store")
    assert "Receivable: 42,000.00 PKR" in result.output

    # Step 5: Backup, wipe a party, restore
    backup = tmp_path / "backup.json"
    run("export", "json", "--output", str(backup))
    data = json.loads(backup.read_text(encoding="utf-8"))
    assert data["company"]["name"] == "Swabi Traders"
    assert len(data["ledger"]) == 5

    run("vendor", "delete", "ABC Supplier", "--yes")
    result = run("report", "totals")
    assert "31,000.00 PKR" not in result.output

    run("import", "json", str(backup), "--yes")
    result = run("report", "totals")
    assert "31,000.00 PKR" in result.output

    # Step 6: CSV export in recorded order
    result = run("export", "csv", "--output", "-")
    lines = result.output.strip().splitlines()
    assert lines[0] == "date,type,party,ref,desc,category,amount,paid,method"
    assert lines[1].startswith('2024-07-01,sale,"Ali Store","S-001"')
    assert lines[-1].startswith('2024-07-05,cash_out,"ABC Supplier"')
