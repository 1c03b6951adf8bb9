"""Package initializer for `vtc_registry`."""

from .client import RegistryClient
from .errors import NotFoundError, ParseError, RegistryError, TransportError
from .records import LicenseeRecord, SearchCriteria

__version__ = "0.1.0"

__all__ = [
    "LicenseeRecord",
    "NotFoundError",
    "ParseError",
    "RegistryClient",
    "RegistryError",
    "SearchCriteria",
    "TransportError",
]
