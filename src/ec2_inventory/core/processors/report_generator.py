#!/usr/bin/env python3
"""JSON report writer for inventory snapshots."""

import json
from pathlib import Path

from ec2_inventory.core.constants import OUTPUT_FILE_PREFIX, OUTPUT_FILE_SUFFIX, JSON_INDENT
from ec2_inventory.core.models import InventorySnapshot
from ec2_inventory.utils.logger import setup_logger


class JSONReportGenerator:
    """Writes a snapshot to aws-inventory-<region>.json, overwriting any previous file."""

    def __init__(self, output_dir: str = "."):
        """Initialize the JSON report generator."""
        self.output_dir = output_dir
        self.logger = setup_logger(__name__, "report_generator.log", console=False)

    @staticmethod
    def filename_for(region: str) -> str:
        return f"{OUTPUT_FILE_PREFIX}{region}{OUTPUT_FILE_SUFFIX}"

    def output_path(self, region: str) -> Path:
        return Path(self.output_dir) / self.filename_for(region)

    def write(self, snapshot: InventorySnapshot) -> Path:
        """Serialize the snapshot and write it. OSError propagates to the caller."""
        output_path = self.output_path(snapshot.region)
        Path(self.output_dir).mkdir(parents=True, exist_ok=True)

        content = json.dumps(snapshot.to_dict(), indent=JSON_INDENT, ensure_ascii=False)
        output_path.write_text(content, encoding="utf-8")

        self.logger.info(f"JSON report generated: {output_path} {snapshot.resource_counts}")
        return output_path
