# imbus/proxies/availability.py

"""
Which proxies can be computed from the tables a dataset holds.

- Feff: always
- Fgear: gear efficiency present and species distribution absent
- Fdist: species distribution present
- Frealised: species distribution and gear efficiency present

Fgear is the simplified gear-corrected proxy; once a species distribution
exists it is superseded by Fdist and Frealised.
"""

import logging
from typing import Iterable, List

from ..constants import FEFF, FGEAR, FDIST, FREALISED, PROXY_NAMES
from ..validation import NoComputableProxyError

logger = logging.getLogger(__name__)


def available_proxies(has_species: bool, has_gear_efficiency: bool) -> List[str]:
    """Return the computable proxies in canonical order."""
    available = [FEFF]
    if has_gear_efficiency and not has_species:
        available.append(FGEAR)
    if has_species:
        available.append(FDIST)
        if has_gear_efficiency:
            available.append(FREALISED)
    return available


def resolve_proxies(requested: Iterable[str], has_species: bool,
                    has_gear_efficiency: bool) -> List[str]:
    """
    Intersect the requested proxies with those computable from the data.

    Parameters
    ----------
    requested : iterable of str
        Proxy names, any of 'Feff', 'Fgear', 'Fdist', 'Frealised'.
    has_species : bool
        Whether species distribution data is present.
    has_gear_efficiency : bool
        Whether gear efficiency data is present.

    Returns
    -------
    list of str
        Resolved proxies in canonical order.

    Raises
    ------
    ValueError
        If a requested name is not a known proxy.
    NoComputableProxyError
        If none of the requested proxies can be computed.
    """
    if isinstance(requested, str):
        requested = [requested]
    requested = list(requested)
    unknown = [name for name in requested if name not in PROXY_NAMES]
    if unknown:
        raise ValueError(f"Unknown proxies {unknown}. Expected some of: {list(PROXY_NAMES)}")

    available = available_proxies(has_species, has_gear_efficiency)
    resolved = [name for name in PROXY_NAMES if name in requested and name in available]
    if not resolved:
        raise NoComputableProxyError(requested, available)

    dropped = [name for name in PROXY_NAMES if name in requested and name not in available]
    if dropped:
        logger.info("Skipping proxies not computable from the available data: %s", dropped)
    return resolved
