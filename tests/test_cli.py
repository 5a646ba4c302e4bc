import json

from dashboard.sheets.columns import BUNDLE_COLUMNS


def test_ensure_bundles_sheet_command(app, sheets):
    runner = app.test_cli_runner()
    result = runner.invoke(args=['ensure-bundles-sheet'])
    assert result.exit_code == 0
    assert 'Bundles sheet prepared.' in result.output
    assert sheets.sheets['Bundles'] == [list(BUNDLE_COLUMNS)]

    result = runner.invoke(args=['ensure-bundles-sheet'])
    assert 'already in place' in result.output


def test_inventory_summary_command(app):
    result = app.test_cli_runner().invoke(args=['inventory-summary'])
    assert result.exit_code == 0
    summary = json.loads(result.output)
    assert summary['totalItems'] == 3
    assert summary['lowStockCount'] == 1


def test_inventory_summary_low_only(app):
    result = app.test_cli_runner().invoke(args=['inventory-summary', '--low-only'])
    assert result.exit_code == 0
    assert 'W-1-B\t3/4\tWidget Blue' in result.output
