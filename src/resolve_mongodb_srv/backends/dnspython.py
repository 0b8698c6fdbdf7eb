"""
dnspython-backed DNS resolver
"""
import logging
from typing import Optional, Union

import dns.asyncresolver
import dns.resolver

from ..config import DnsConfig
from ..errors import DnsNoDataError, DnsNotFoundError
from ..types import DnsResolver, SrvRecord

logger = logging.getLogger(__name__)


def _decode(text: Union[str, bytes]) -> str:
    if isinstance(text, bytes):
        return text.decode("utf-8")
    return text


class DnsPythonResolver(DnsResolver):
    """
    Default DNS resolver using dns.asyncresolver

    NXDOMAIN is raised as DnsNotFoundError and NoAnswer as DnsNoDataError;
    every other dnspython error propagates unchanged.

    Example:
        resolver = DnsPythonResolver(DnsConfig(lifetime_seconds=5.0))
        records = await resolver.resolve_srv("_mongodb._tcp.cluster0.example.net")
    """

    def __init__(
        self,
        config: Optional[DnsConfig] = None,
        resolver: Optional[dns.asyncresolver.Resolver] = None,
    ) -> None:
        self._config = config or DnsConfig()
        if resolver is None:
            # Skip resolv.conf when nameservers are given explicitly
            resolver = dns.asyncresolver.Resolver(configure=not self._config.nameservers)
        if self._config.nameservers:
            resolver.nameservers = list(self._config.nameservers)
        self._resolver = resolver

    async def _query(self, domain: str, rdtype: str) -> dns.resolver.Answer:
        try:
            return await self._resolver.resolve(
                domain,
                rdtype,
                lifetime=self._config.lifetime_seconds,
            )
        except dns.resolver.NXDOMAIN as e:
            raise DnsNotFoundError(f"query{rdtype} {domain}: domain not found") from e
        except dns.resolver.NoAnswer as e:
            raise DnsNoDataError(f"query{rdtype} {domain}: no {rdtype} records") from e

    async def resolve_srv(self, domain: str) -> list[SrvRecord]:
        """Resolve SRV records"""
        answer = await self._query(domain, "SRV")
        records = [
            SrvRecord(
                target=_decode(rdata.target.to_text(omit_final_dot=True)),
                port=rdata.port,
            )
            for rdata in answer
        ]
        logger.debug(f"DnsPythonResolver.resolve_srv: {domain} -> {len(records)} record(s)")
        return records

    async def resolve_txt(self, domain: str) -> list[list[str]]:
        """Resolve TXT records"""
        answer = await self._query(domain, "TXT")
        records = [[_decode(segment) for segment in rdata.strings] for rdata in answer]
        logger.debug(f"DnsPythonResolver.resolve_txt: {domain} -> {len(records)} record(s)")
        return records


def create_dnspython_resolver(config: Optional[DnsConfig] = None) -> DnsPythonResolver:
    """Create a dnspython-backed resolver"""
    return DnsPythonResolver(config)
