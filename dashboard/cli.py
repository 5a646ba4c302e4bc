import json

import click
from flask.cli import with_appcontext

from dashboard.services import bundles as bundles_service
from dashboard.services import items as items_service
from dashboard.sheets import get_sheet_settings, get_sheets_client


@click.command("ensure-bundles-sheet")
@with_appcontext
def ensure_bundles_sheet():
    """Create the bundles sheet and its header row if they are missing."""
    changed = bundles_service.ensure_bundles_sheet(get_sheets_client(), get_sheet_settings())
    click.echo("Bundles sheet prepared." if changed else "Bundles sheet already in place.")


@click.command("inventory-summary")
@click.option("--low-only", is_flag=True, help="List the low stock SKUs as well")
@with_appcontext
def inventory_summary(low_only):
    """Print the dashboard summary aggregates as JSON."""
    inventory = items_service.get_inventory_data(get_sheets_client(), get_sheet_settings())
    click.echo(json.dumps(inventory.summary.to_dict(), indent=2))
    if low_only:
        for item in inventory.items:
            if item.is_low:
                click.echo(f"{item.sku}\t{item.qty_on_hand}/{item.reorder_level}\t{item.name}")


def register_cli(app):
    app.cli.add_command(ensure_bundles_sheet)
    app.cli.add_command(inventory_summary)
