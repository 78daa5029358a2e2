#!/usr/bin/env python3
"""
EC2 Inventory - CLI
Snapshot one region's EC2 resources to aws-inventory-<region>.json
"""

import sys

import click

from ec2_inventory.jobs.collect_inventory import CollectInventoryJob
from ec2_inventory.utils.config import ConfigManager, InventoryConfig
from ec2_inventory.utils.logger import configure_logging, setup_logger


def setup_logging(config_manager: ConfigManager):
    configure_logging(
        level=config_manager.get_logging_level(),
        file_enabled=config_manager.get_logging_file_enabled(),
    )
    return setup_logger("ec2_inventory_cli", "cli.log")


def handle_operation_error(operation_name: str, error: Exception) -> None:
    """Print the single error line to stderr and keep the traceback in the log file."""
    click.echo(f"❌ Error: {error}", err=True)

    logger = setup_logger("ec2_inventory.errors", "errors.log", level="DEBUG", console=False)
    logger.debug(
        f"Error in {operation_name} ({type(error).__name__}): {error}",
        exc_info=error,
    )


@click.command()
@click.argument("region", required=False)
def cli(region):
    """Write an inventory snapshot of REGION to aws-inventory-<REGION>.json

    REGION defaults to aws.region from configs/settings.yaml, else us-east-1.
    Credentials are read from AWS_ACCESS_KEY_ID and AWS_SECRET_ACCESS_KEY.
    """
    try:
        config_manager = ConfigManager()
        logger = setup_logging(config_manager)

        config = InventoryConfig.resolve(region, config_manager=config_manager)
        logger.debug(f"Resolved configuration: {config!r}")

        click.echo(f"📦 Fetching AWS inventory for region {config.region}...")
        report_path = CollectInventoryJob(config, config_manager=config_manager).execute()
    except Exception as e:
        handle_operation_error("collect_inventory", e)
        sys.exit(1)

    click.echo(f"✅ Inventory saved to {report_path}")


if __name__ == "__main__":
    cli()
