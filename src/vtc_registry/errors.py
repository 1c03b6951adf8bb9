from __future__ import annotations

from typing import Optional

import requests


# Network, DNS and timeout failures are never wrapped.
TransportError = requests.exceptions.RequestException


class RegistryError(Exception):
    """Base class for errors raised while reading the VTC registry."""


class ParseError(RegistryError):
    """The result page could not be parsed or the label selector is invalid."""


class NotFoundError(RegistryError):
    """The registry has no record matching the query.

    The registry renders misses as ordinary HTML pages, so a non-200 status and
    a page without a company number are reported the same way.
    """

    def __init__(self, message: str = "not found", *, status: Optional[int] = None):
        super().__init__(message)
        self.status = status
