"""Pure operations: configuration document and inventory shaping."""

from hostboard.ops.config import get_config
from hostboard.ops.inventory import HostRow, flatten_inventory

__all__ = ["get_config", "HostRow", "flatten_inventory"]
