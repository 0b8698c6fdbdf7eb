"""
Configuration utilities for resolve_mongodb_srv
"""
import os
from dataclasses import dataclass
from typing import Optional

from pydantic import BaseModel, Field

from .errors import MongoParseError
from .types import DnsResolver


DIRECT_SCHEME = "mongodb://"
SRV_SCHEME = "mongodb+srv://"

DEFAULT_PORT = 27017
DEFAULT_SRV_SERVICE_NAME = "mongodb"

# Options a TXT record is allowed to set
ALLOWED_TXT_OPTIONS = ("authSource", "replicaSet", "loadBalanced")

# Resolution directives that are consumed and never forwarded
SRV_ONLY_OPTIONS = ("srvServiceName", "srvMaxHosts")

# Resolver error codes that mean "no TXT record"
TOLERATED_TXT_ERROR_CODES = frozenset({"ENODATA", "ENOTFOUND"})


def _env_lifetime() -> float:
    return float(os.getenv("MONGODB_SRV_DNS_LIFETIME", "10.0"))


def _env_nameservers() -> list[str]:
    raw = os.getenv("MONGODB_SRV_DNS_NAMESERVERS", "")
    return [ns.strip() for ns in raw.split(",") if ns.strip()]


class DnsConfig(BaseModel):
    """
    Settings for the default dnspython-backed resolver.

    Environment Variables:
        MONGODB_SRV_DNS_LIFETIME: Total time allowed for one lookup in seconds (default: 10.0)
        MONGODB_SRV_DNS_NAMESERVERS: Comma-separated nameserver addresses (default: system)
    """
    lifetime_seconds: float = Field(default=10.0, gt=0)
    nameservers: list[str] = Field(default_factory=list)

    @classmethod
    def from_env(cls) -> "DnsConfig":
        """Build config from environment variables"""
        return cls(lifetime_seconds=_env_lifetime(), nameservers=_env_nameservers())


@dataclass
class ResolveOptions:
    """Options for resolve_mongodb_srv"""

    dns: Optional[DnsResolver] = None
    """DNS capability. Default: dnspython-backed resolver"""

    dns_config: Optional[DnsConfig] = None
    """Settings for the default resolver. Default: DnsConfig.from_env()"""


def create_resolver_options(
    dns: Optional[DnsResolver] = None,
    dns_config: Optional[DnsConfig] = None,
) -> ResolveOptions:
    """Create resolve options"""
    return ResolveOptions(dns=dns, dns_config=dns_config)


def parse_srv_max_hosts(value: Optional[str]) -> int:
    """Parse the srvMaxHosts option (absent means unlimited)"""
    if value is None:
        return 0
    if not (value.isascii() and value.isdigit()):
        raise MongoParseError(
            f"Invalid value {value!r} for srvMaxHosts (must be a non-negative integer)",
            code="INVALID_SRV_MAX_HOSTS",
        )
    return int(value)
