"""
Resolution of mongodb+srv:// connection strings
"""
import asyncio
import logging
from typing import Optional

from .backends import create_dnspython_resolver
from .config import (
    DEFAULT_SRV_SERVICE_NAME,
    DnsConfig,
    ResolveOptions,
    parse_srv_max_hosts,
)
from .merge import merge_options
from .srv import resolve_srv_hosts
from .txt import resolve_txt_options
from .types import DnsResolver
from .url import build_direct_url, is_direct_url, parse_discovery_url

logger = logging.getLogger(__name__)


def _get_dns(options: Optional[ResolveOptions]) -> DnsResolver:
    if options and options.dns:
        return options.dns
    config = options.dns_config if options and options.dns_config else DnsConfig.from_env()
    return create_dnspython_resolver(config)


async def resolve_mongodb_srv(uri: str, options: Optional[ResolveOptions] = None) -> str:
    """
    Resolve a mongodb+srv:// URL to a mongodb:// URL

    mongodb:// URLs are returned unchanged without any DNS lookups. For
    mongodb+srv:// URLs the SRV and TXT records of the host are looked up
    concurrently and merged into the URL.

    Example:
        uri = await resolve_mongodb_srv("mongodb+srv://cluster0.example.net/")
        # mongodb://shard-00.example.net,shard-01.example.net/?tls=true

    Args:
        uri: The connection string
        options: Resolve options (DNS capability, default resolver config)

    Returns:
        The mongodb:// connection string

    Raises:
        MongoParseError: If the URL or the DNS records are invalid
        Exception: Errors of the SRV lookup and non-tolerated TXT lookup errors
            propagate unchanged
    """
    if is_direct_url(uri):
        logger.debug("resolve_mongodb_srv: Direct URL, skipping resolution")
        return uri

    reference = parse_discovery_url(uri)
    service_name = reference.get_option("srvServiceName") or DEFAULT_SRV_SERVICE_NAME
    max_hosts = parse_srv_max_hosts(reference.get_option("srvMaxHosts"))
    dns = _get_dns(options)

    logger.debug(f"resolve_mongodb_srv: Resolving {reference.hostname}")
    hosts, txt_options = await asyncio.gather(
        resolve_srv_hosts(
            dns,
            reference.hostname,
            service_name=service_name,
            max_hosts=max_hosts,
        ),
        resolve_txt_options(dns, reference.hostname),
    )

    return build_direct_url(reference, hosts, merge_options(reference, txt_options))


def resolve_mongodb_srv_sync(uri: str, options: Optional[ResolveOptions] = None) -> str:
    """Synchronous version of resolve_mongodb_srv. Must not be called from a running event loop."""
    return asyncio.run(resolve_mongodb_srv(uri, options))
