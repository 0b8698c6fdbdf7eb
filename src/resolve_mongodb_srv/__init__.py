"""
Resolve mongodb+srv:// connection strings to mongodb:// connection strings
using DNS SRV and TXT records (seedlist discovery).
"""
from .types import (
    SrvRecord,
    DiscoveryReference,
    TxtOptions,
    DnsResolver,
)
from .errors import (
    MongoParseError,
    DnsLookupError,
    DnsNoDataError,
    DnsNotFoundError,
)
from .config import (
    DIRECT_SCHEME,
    SRV_SCHEME,
    DEFAULT_PORT,
    DEFAULT_SRV_SERVICE_NAME,
    ALLOWED_TXT_OPTIONS,
    SRV_ONLY_OPTIONS,
    DnsConfig,
    ResolveOptions,
    create_resolver_options,
    parse_srv_max_hosts,
)
from .url import is_direct_url, is_discovery_url, parse_discovery_url, build_direct_url
from .srv import matches_parent_domain, format_host, shuffle, resolve_srv_hosts
from .txt import parse_txt_options, resolve_txt_options
from .merge import merge_options
from .backends import DnsPythonResolver, create_dnspython_resolver
from .resolver import resolve_mongodb_srv, resolve_mongodb_srv_sync


__all__ = [
    # Types
    "SrvRecord",
    "DiscoveryReference",
    "TxtOptions",
    "DnsResolver",
    # Errors
    "MongoParseError",
    "DnsLookupError",
    "DnsNoDataError",
    "DnsNotFoundError",
    # Config
    "DIRECT_SCHEME",
    "SRV_SCHEME",
    "DEFAULT_PORT",
    "DEFAULT_SRV_SERVICE_NAME",
    "ALLOWED_TXT_OPTIONS",
    "SRV_ONLY_OPTIONS",
    "DnsConfig",
    "ResolveOptions",
    "create_resolver_options",
    "parse_srv_max_hosts",
    # URL
    "is_direct_url",
    "is_discovery_url",
    "parse_discovery_url",
    "build_direct_url",
    # SRV
    "matches_parent_domain",
    "format_host",
    "shuffle",
    "resolve_srv_hosts",
    # TXT
    "parse_txt_options",
    "resolve_txt_options",
    # Merge
    "merge_options",
    # Backends
    "DnsPythonResolver",
    "create_dnspython_resolver",
    # Resolver
    "resolve_mongodb_srv",
    "resolve_mongodb_srv_sync",
]


__version__ = "1.0.0"
