"""
TXT lookup and option validation
"""
import logging
from typing import Optional
from urllib.parse import parse_qsl

from .config import ALLOWED_TXT_OPTIONS, TOLERATED_TXT_ERROR_CODES
from .errors import MongoParseError
from .types import DnsResolver, TxtOptions

logger = logging.getLogger(__name__)


def _is_tolerated(error: Exception) -> bool:
    return getattr(error, "code", None) in TOLERATED_TXT_ERROR_CODES


def parse_txt_options(record: str) -> TxtOptions:
    """
    Parse and validate the options carried by a TXT record

    Args:
        record: Concatenated record text in query-string syntax

    Returns:
        Options in record order

    Raises:
        MongoParseError: If an option is not allowed, is empty, or loadBalanced
            is neither 'true' nor 'false'
    """
    options = parse_qsl(record, keep_blank_values=True)

    if any(key not in ALLOWED_TXT_OPTIONS for key, _ in options):
        raise MongoParseError(
            f"Text record must only set {', '.join(ALLOWED_TXT_OPTIONS)}",
            code="INVALID_TXT_OPTION",
        )

    if any(value == "" for _, value in options):
        raise MongoParseError(
            "Cannot have empty URI params in DNS TXT Record",
            code="EMPTY_TXT_OPTION",
        )

    load_balanced = dict(options).get("loadBalanced")
    if load_balanced is not None and load_balanced not in ("true", "false"):
        raise MongoParseError(
            f"DNS TXT Record contains invalid value {load_balanced} for loadBalanced "
            "option (allowed: true, false)",
            code="INVALID_LOAD_BALANCED",
        )

    return options


async def resolve_txt_options(dns: DnsResolver, lookup_domain: str) -> TxtOptions:
    """
    Resolve the connection options published in the domain's TXT record

    A missing record (no data / domain not found) yields no options.

    Args:
        dns: DNS capability
        lookup_domain: Hostname from the mongodb+srv:// URL

    Returns:
        Validated options, possibly empty

    Raises:
        MongoParseError: If more than one record exists or the record is invalid
    """
    logger.debug(f"resolve_txt_options: Querying TXT {lookup_domain}")

    records: Optional[list[list[str]]] = None
    try:
        records = await dns.resolve_txt(lookup_domain)
    except Exception as e:
        if not _is_tolerated(e):
            raise
        logger.debug(f"resolve_txt_options: No TXT record for {lookup_domain}")

    if records and len(records) > 1:
        raise MongoParseError("Multiple text records not allowed", code="MULTIPLE_TXT_RECORDS")

    txt_record = "".join(records[0]) if records else ""
    return parse_txt_options(txt_record)
