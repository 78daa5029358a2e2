#!/usr/bin/env python3
"""Collect the EC2 inventory of one region and write it as JSON."""

import time
from pathlib import Path
from typing import Optional

from ec2_inventory.core.aws.ec2 import create_ec2_manager
from ec2_inventory.core.models import InventorySnapshot
from ec2_inventory.core.processors.collectors import InventoryAggregator
from ec2_inventory.core.processors.report_generator import JSONReportGenerator
from ec2_inventory.jobs.base import BaseJob
from ec2_inventory.utils.config import ConfigManager, InventoryConfig


class CollectInventoryJob(BaseJob):
    """Job that snapshots instances, VPCs, subnets, ENIs and volumes.

    Features:
    - One shared EC2 client, five concurrent describe calls
    - All-or-nothing: any failure propagates and nothing is written
    - JSON report named after the region
    """

    def __init__(self, config: InventoryConfig, config_manager: Optional[ConfigManager] = None):
        super().__init__(config, config_manager=config_manager, job_name="collect_inventory")
        self.report_generator = JSONReportGenerator(output_dir=config.output_dir)

    @property
    def output_path(self) -> Path:
        return self.report_generator.output_path(self.config.region)

    def collect(self) -> InventorySnapshot:
        """Run the collectors and return the snapshot without writing it."""
        session = self.create_aws_session()
        ec2_manager = create_ec2_manager(session, self.config.region)
        aggregator = InventoryAggregator(ec2_manager, max_workers=self.config.max_workers)
        return aggregator.run(self.config.region)

    def execute(self, **kwargs) -> Path:
        """Collect and write the snapshot, returning the written file path."""
        start = time.time()
        self.logger.info(
            f"[{self.correlation_id}] Starting inventory collection for region {self.config.region}"
        )

        snapshot = self.collect()
        report_path = self.report_generator.write(snapshot)

        self.logger.info(
            f"[{self.correlation_id}] Inventory for {self.config.region} written to {report_path} "
            f"(took {round(time.time() - start, 2)}s)"
        )
        return report_path
