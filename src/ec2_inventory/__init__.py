"""EC2 Inventory - snapshot a region's EC2 resources to JSON."""

__version__ = "1.0.0"
