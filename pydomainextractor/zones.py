"""Tools for splitting a domain into subdomain part and zone part"""

import threading
from typing import Optional, Tuple

from .extractor import DomainExtractor

_default_extractor: Optional[DomainExtractor] = None
_default_extractor_lock = threading.Lock()


def _get_default_extractor() -> DomainExtractor:
    """Return the process-wide extractor for the bundled suffix list,
    creating it on first use"""
    global _default_extractor
    with _default_extractor_lock:
        if _default_extractor is None:
            _default_extractor = DomainExtractor()
        return _default_extractor


class ZoneSplitter:
    """A utility to split domains into subdomain part and zone part using the
    `Public Suffix List`_

    .. _Public Suffix List: https://publicsuffix.org/

    :param extractor: The :class:`~pydomainextractor.DomainExtractor` to split
                      with. If ``None``, one using the bundled suffix list is
                      shared by all splitters.
    """

    def __init__(self, extractor: Optional[DomainExtractor] = None):
        if extractor is None:
            extractor = _get_default_extractor()
        self._extractor: DomainExtractor = extractor

    def split(self, domain: str) -> Tuple[str, str]:
        """Split a domain name into subdomain part and zone part

        :param domain: The FQDN to split. A trailing period is allowed.
        :return: A tuple with the two parts. The subdomain part may be empty if
                 the FQDN was the root domain of its zone.
        """
        if domain.endswith('.'):
            domain = domain[:-1]
        subdomain, domain, suffix = self._extractor.extract(domain)
        zone = '.'.join(part for part in (domain, suffix) if part != '')
        return (subdomain, zone)
