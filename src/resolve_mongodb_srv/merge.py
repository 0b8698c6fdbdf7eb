"""
Merging of URL options with TXT record options
"""
from typing import Optional

from .config import SRV_ONLY_OPTIONS
from .types import DiscoveryReference, TxtOptions


def _has(options: list[tuple[str, str]], key: str) -> bool:
    return any(k == key for k, _ in options)


def merge_options(
    reference: DiscoveryReference,
    txt_options: TxtOptions,
) -> Optional[list[tuple[str, str]]]:
    """
    Merge TXT options into the URL options

    URL values always win; TXT values only fill keys the URL does not set.
    tls=true is added when neither tls nor ssl is present, and the
    srvServiceName/srvMaxHosts directives are removed.

    Returns:
        The merged options, or None if the URL query is unchanged
    """
    options = list(reference.options)
    changed = False

    for key, value in txt_options:
        if not _has(options, key):
            options.append((key, value))
            changed = True

    if not _has(options, "tls") and not _has(options, "ssl"):
        options.append(("tls", "true"))
        changed = True

    if any(_has(options, key) for key in SRV_ONLY_OPTIONS):
        options = [(k, v) for k, v in options if k not in SRV_ONLY_OPTIONS]
        changed = True

    return options if changed else None
