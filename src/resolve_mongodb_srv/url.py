"""
Connection string classification, parsing and serialization
"""
import logging
from typing import Optional
from urllib.parse import parse_qsl, urlencode, urlsplit

from .config import DIRECT_SCHEME, SRV_SCHEME
from .errors import MongoParseError
from .types import DiscoveryReference

logger = logging.getLogger(__name__)


def is_direct_url(uri: str) -> bool:
    """Check if a connection string already lists its hosts"""
    return uri.startswith(DIRECT_SCHEME)


def is_discovery_url(uri: str) -> bool:
    """Check if a connection string needs SRV/TXT resolution"""
    return uri.startswith(SRV_SCHEME)


def parse_discovery_url(uri: str) -> DiscoveryReference:
    """
    Parse a mongodb+srv:// connection string

    Args:
        uri: The connection string

    Returns:
        The parsed reference

    Raises:
        MongoParseError: If the scheme is unknown, the host is missing or a
            port is present
    """
    if not is_discovery_url(uri):
        raise MongoParseError("Unknown URL scheme", code="UNKNOWN_SCHEME")

    try:
        parts = urlsplit(uri)
        port = parts.port
    except ValueError as e:
        raise MongoParseError(f"Invalid {SRV_SCHEME} URL: {e}", code="INVALID_URI") from e

    if port is not None:
        raise MongoParseError(
            f"{SRV_SCHEME} URL cannot have port number",
            code="PORT_NOT_ALLOWED",
        )

    if not parts.hostname:
        raise MongoParseError(f"{SRV_SCHEME} URL must have a hostname", code="INVALID_URI")

    userinfo, _, _ = parts.netloc.rpartition("@")

    return DiscoveryReference(
        hostname=parts.hostname,
        userinfo=userinfo,
        path=parts.path,
        query=parts.query,
        fragment=parts.fragment,
        options=parse_qsl(parts.query, keep_blank_values=True),
    )


def build_direct_url(
    reference: DiscoveryReference,
    hosts: list[str],
    options: Optional[list[tuple[str, str]]] = None,
) -> str:
    """
    Render a mongodb:// connection string for a resolved reference

    Args:
        reference: The parsed discovery reference
        hosts: Formatted host strings, joined with ',' in place of the host
        options: Merged query options. None keeps the original query verbatim

    Returns:
        The direct connection string
    """
    query = reference.query if options is None else urlencode(options)

    url = DIRECT_SCHEME
    if reference.userinfo:
        url += f"{reference.userinfo}@"
    url += ",".join(hosts)
    url += reference.path or "/"
    if query:
        url += f"?{query}"
    if reference.fragment:
        url += f"#{reference.fragment}"

    logger.debug(f"build_direct_url: Rendered URL with {len(hosts)} host(s)")
    return url
