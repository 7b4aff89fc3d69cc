"""reprsize — tailles en octets lisibles par un humain."""

from reprsize.exceptions import InvalidSize
from reprsize.size import Size
from reprsize.units import BINARY, DECIMAL, Unit, Units

__version__ = "0.1.0"

__all__ = ["BINARY", "DECIMAL", "InvalidSize", "Size", "Unit", "Units"]
