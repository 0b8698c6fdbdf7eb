"""
SRV lookup, hostname validation and host limiting
"""
import logging
import random
from typing import Sequence, TypeVar

from .config import DEFAULT_PORT, DEFAULT_SRV_SERVICE_NAME
from .errors import MongoParseError
from .types import DnsResolver, SrvRecord

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _parent_suffix(hostname: str) -> str:
    """Drop the first label, returning a '.'-anchored suffix"""
    hostname = hostname.rstrip(".").lower()
    _, dot, rest = hostname.partition(".")
    return f".{rest}" if dot else f".{hostname}"


def matches_parent_domain(srv_address: str, parent_domain: str) -> bool:
    """
    Check that an SRV target lives under the parent domain of the lookup domain.

    Exactly one label is removed from each side, so 'asdf.example.com' matches
    'server.example.com' while 'example.org' and 'asdf.malicious.com' do not.
    """
    return _parent_suffix(srv_address).endswith(_parent_suffix(parent_domain))


def format_host(record: SrvRecord) -> str:
    """Render an SRV answer as 'host' or 'host:port'"""
    port = DEFAULT_PORT if record.port is None else record.port
    if port == DEFAULT_PORT:
        return record.target
    return f"{record.target}:{port}"


def shuffle(sequence: Sequence[T], limit: int = 0) -> list[T]:
    """
    Fisher-Yates shuffle of a copy of sequence, optionally keeping only limit items.

    Only the trailing positions that end up in the kept region are shuffled,
    which is enough for every item to have the same chance of being kept.
    A limit of 0 or len(sequence) shuffles and returns everything.
    """
    items = list(sequence)
    if limit > len(items):
        raise ValueError("Limit must be less than the number of items")
    if not items:
        return items

    keep_all = limit % len(items) == 0
    lower_bound = 1 if keep_all else len(items) - limit

    remaining = len(items)
    while remaining > lower_bound:
        index = random.randrange(remaining)
        remaining -= 1
        items[remaining], items[index] = items[index], items[remaining]

    return items if keep_all else items[lower_bound:]


async def resolve_srv_hosts(
    dns: DnsResolver,
    lookup_domain: str,
    *,
    service_name: str = DEFAULT_SRV_SERVICE_NAME,
    max_hosts: int = 0,
) -> list[str]:
    """
    Resolve the seedlist for a lookup domain

    Args:
        dns: DNS capability
        lookup_domain: Hostname from the mongodb+srv:// URL
        service_name: SRV service label. Default: 'mongodb'
        max_hosts: Keep at most this many randomly chosen hosts (0 = all)

    Returns:
        Formatted host strings

    Raises:
        MongoParseError: If no records are returned or a target is outside the
            parent domain
    """
    srv_name = f"_{service_name}._tcp.{lookup_domain}"
    logger.debug(f"resolve_srv_hosts: Querying SRV {srv_name}")

    records = await dns.resolve_srv(srv_name)
    if not records:
        raise MongoParseError("No addresses found at host", code="NO_ADDRESSES")

    for record in records:
        if not matches_parent_domain(record.target, lookup_domain):
            raise MongoParseError(
                "Server record does not share hostname with parent URI",
                code="HOSTNAME_MISMATCH",
            )

    hosts = [format_host(record) for record in records]

    if max_hosts and max_hosts < len(hosts):
        logger.debug(f"resolve_srv_hosts: Limiting {len(hosts)} hosts to {max_hosts}")
        hosts = shuffle(hosts, max_hosts)

    logger.debug(f"resolve_srv_hosts: Resolved {len(hosts)} host(s) for {lookup_domain}")
    return hosts
