"""
Error types for resolve_mongodb_srv
"""
from typing import Optional


class MongoParseError(Exception):
    """Error thrown when a connection string cannot be resolved."""

    code = "PARSE_ERROR"

    def __init__(self, message: str, code: Optional[str] = None) -> None:
        super().__init__(message)
        self.name = "MongoParseError"
        if code is not None:
            self.code = code


class DnsLookupError(Exception):
    """
    Error raised by a DnsResolver when a lookup fails.

    The code mirrors the resolver error names (ENODATA, ENOTFOUND, ...) so
    any DnsResolver implementation can signal the outcomes the TXT lookup
    tolerates without depending on a particular DNS library.
    """

    code = "EDNS"

    def __init__(self, message: str, code: Optional[str] = None) -> None:
        super().__init__(message)
        self.name = "DnsLookupError"
        if code is not None:
            self.code = code


class DnsNoDataError(DnsLookupError):
    """The domain exists but has no records of the requested type."""

    code = "ENODATA"


class DnsNotFoundError(DnsLookupError):
    """The domain does not exist."""

    code = "ENOTFOUND"
