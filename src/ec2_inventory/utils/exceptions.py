"""Exception classes for the EC2 inventory tool.

Provider (botocore) and filesystem errors are not wrapped: they reach the
CLI unchanged and are reported there.
"""


class InventoryError(Exception):
    """Base exception for inventory errors raised by this package."""

    pass


class ConfigurationError(InventoryError):
    """Raised when the run configuration cannot be resolved."""

    def __init__(self, message: str, missing=None):
        super().__init__(message)
        self.missing = list(missing or [])
