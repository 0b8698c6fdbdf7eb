"""
Type definitions for resolve_mongodb_srv
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Optional


@dataclass
class SrvRecord:
    """A single SRV answer"""

    target: str
    """Target hostname"""

    port: Optional[int] = None
    """Target port. None means the default port (27017)"""


@dataclass
class DiscoveryReference:
    """A parsed mongodb+srv:// connection string"""

    hostname: str
    """Lookup domain (no port)"""

    userinfo: str = ""
    """Raw 'user:password' portion, empty when absent"""

    path: str = ""
    """Raw path, empty when absent"""

    query: str = ""
    """Raw query string without the leading '?'"""

    fragment: str = ""
    """Raw fragment without the leading '#'"""

    options: list[tuple[str, str]] = field(default_factory=list)
    """Decoded query options in their original order"""

    def has_option(self, key: str) -> bool:
        """Check if a query option is present (exact, case-sensitive key)"""
        return any(k == key for k, _ in self.options)

    def get_option(self, key: str) -> Optional[str]:
        """Get the first value for a query option"""
        for k, value in self.options:
            if k == key:
                return value
        return None


# Options carried by the TXT record, in record order
TxtOptions = list[tuple[str, str]]


class DnsResolver(ABC):
    """DNS capability used for seedlist discovery"""

    @abstractmethod
    async def resolve_srv(self, domain: str) -> list[SrvRecord]:
        """Resolve SRV records for a fully-qualified service name"""
        pass

    @abstractmethod
    async def resolve_txt(self, domain: str) -> list[list[str]]:
        """Resolve TXT records; each record is its list of text segments"""
        pass
