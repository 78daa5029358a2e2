#!/usr/bin/env python3
"""Resource collectors and the concurrent inventory aggregator."""

import time
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Sequence

from ec2_inventory.core.aws.ec2 import EC2Manager
from ec2_inventory.core.models import (
    InstanceRecord,
    NetworkRecord,
    SubnetRecord,
    InterfaceRecord,
    VolumeRecord,
    InventorySnapshot,
    utc_timestamp,
)
from ec2_inventory.utils.logger import setup_logger


@dataclass(frozen=True)
class ResourceCollector:
    """One describe call plus the mapping of its items into records.

    Attributes:
        key: Snapshot key the results are stored under
        fetch: Callable issuing the describe call on an EC2Manager
        mapper: Callable turning one provider item into a record
    """

    key: str
    fetch: Callable[[EC2Manager], List[Dict[str, Any]]]
    mapper: Callable[[Dict[str, Any]], Any]

    def collect(self, ec2: EC2Manager) -> List[Dict[str, Any]]:
        """Fetch and map, preserving the provider's order. Errors propagate."""
        return [self.mapper(item).to_dict() for item in self.fetch(ec2)]


COLLECTORS = (
    ResourceCollector("instances", EC2Manager.describe_instances, InstanceRecord.from_aws_instance),
    ResourceCollector("vpcs", EC2Manager.describe_vpcs, NetworkRecord.from_aws_vpc),
    ResourceCollector("subnets", EC2Manager.describe_subnets, SubnetRecord.from_aws_subnet),
    ResourceCollector(
        "networkInterfaces",
        EC2Manager.describe_network_interfaces,
        InterfaceRecord.from_aws_interface,
    ),
    ResourceCollector("volumes", EC2Manager.describe_volumes, VolumeRecord.from_aws_volume),
)


class InventoryAggregator:
    """Runs every collector concurrently and joins them into one snapshot.

    The join is all-or-nothing: the first collector failure is re-raised
    unchanged and no snapshot is built. Collectors already running are left
    to finish; ones not yet started are cancelled.
    """

    def __init__(
        self,
        ec2: EC2Manager,
        collectors: Sequence[ResourceCollector] = COLLECTORS,
        max_workers: Optional[int] = None,
    ):
        self.ec2 = ec2
        self.collectors = tuple(collectors)
        self.max_workers = max_workers or len(self.collectors) or 1
        self.logger = setup_logger(__name__, "collectors.log", console=False)

    def _run_collector(self, collector: ResourceCollector) -> List[Dict[str, Any]]:
        start = time.time()
        records = collector.collect(self.ec2)
        self.logger.info(
            f"Collected {len(records)} {collector.key} (took {round(time.time() - start, 2)}s)"
        )
        return records

    def collect_all(self) -> Dict[str, List[Dict[str, Any]]]:
        """Run all collectors and return their results keyed by snapshot key."""
        results = {}
        with ThreadPoolExecutor(max_workers=self.max_workers) as pool:
            futures = {
                pool.submit(self._run_collector, collector): collector
                for collector in self.collectors
            }
            for future in as_completed(futures):
                collector = futures[future]
                try:
                    results[collector.key] = future.result()
                except Exception as e:
                    self.logger.error(f"Collector {collector.key} failed: {e}")
                    for pending in futures:
                        pending.cancel()
                    raise
        return results

    def run(self, region: str) -> InventorySnapshot:
        """Collect everything and build the snapshot, timestamped after the join."""
        results = self.collect_all()
        return InventorySnapshot.from_collections(region, results, timestamp=utc_timestamp())
