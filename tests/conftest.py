"""Pytest configuration and fixtures for resolve_mongodb_srv tests."""
import asyncio
from typing import Optional

import pytest

from resolve_mongodb_srv import DnsResolver, ResolveOptions, SrvRecord


class FakeDnsResolver(DnsResolver):
    """In-memory DnsResolver that records the names it was asked for."""

    def __init__(self) -> None:
        self.srv_result: list[SrvRecord] = []
        self.srv_error: Optional[Exception] = None
        self.txt_result: list[list[str]] = []
        self.txt_error: Optional[Exception] = None
        self.srv_queries: list[str] = []
        self.txt_queries: list[str] = []

    async def resolve_srv(self, domain: str) -> list[SrvRecord]:
        self.srv_queries.append(domain)
        await asyncio.sleep(0)
        if self.srv_error is not None:
            raise self.srv_error
        return list(self.srv_result)

    async def resolve_txt(self, domain: str) -> list[list[str]]:
        self.txt_queries.append(domain)
        await asyncio.sleep(0)
        if self.txt_error is not None:
            raise self.txt_error
        return [list(record) for record in self.txt_result]


@pytest.fixture
def fake_dns() -> FakeDnsResolver:
    """Create a fake DNS resolver with no records."""
    return FakeDnsResolver()


@pytest.fixture
def options(fake_dns: FakeDnsResolver) -> ResolveOptions:
    """Create resolve options using the fake DNS resolver."""
    return ResolveOptions(dns=fake_dns)
