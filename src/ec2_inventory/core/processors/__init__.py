"""Core processors: collection and reporting."""

from .collectors import COLLECTORS, InventoryAggregator, ResourceCollector
from .report_generator import JSONReportGenerator

__all__ = [
    "COLLECTORS",
    "InventoryAggregator",
    "ResourceCollector",
    "JSONReportGenerator",
]
