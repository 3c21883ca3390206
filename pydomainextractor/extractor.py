"""Domain extraction: split a domain into subdomain, domain, and public
suffix"""

import logging
import string
from typing import NamedTuple

from .ruleset import Ruleset, parse_ruleset
from .suffixlist import load_default_suffix_list

log = logging.getLogger('pydomainextractor')

# Only ASCII letters are case-folded; other characters are left as they are
_ASCII_LOWERCASE = str.maketrans(string.ascii_uppercase,
                                 string.ascii_lowercase)


class ExtractResult(NamedTuple):
    """The parts of an extracted domain. Absent parts are empty strings."""

    #: Everything left of the registrable domain, e.g. ``forums.news``
    subdomain: str
    #: The label immediately left of the suffix, e.g. ``cnn``
    domain: str
    #: The public suffix, e.g. ``com`` or ``co.uk``
    suffix: str

    @property
    def registered_domain(self) -> str:
        """The domain label and the suffix, e.g. ``cnn.com``, or an empty
        string if either is missing"""
        if self.domain and self.suffix:
            return f"{self.domain}.{self.suffix}"
        return ''

    @property
    def fqdn(self) -> str:
        """The full domain with all its parts, or an empty string if the
        domain label or suffix is missing"""
        if self.domain and self.suffix:
            return '.'.join(part for part in self if part != '')
        return ''


class DomainExtractor:
    """Splits domains into their parts using the `Public Suffix List`_

    .. _Public Suffix List: https://publicsuffix.org/

    The ruleset is built once, here, and never modified afterward, so a single
    instance may be shared freely between threads.

    :param suffix_list_data: Public Suffix List text. If empty, the list
                             bundled with this package is used.
    """

    def __init__(self, suffix_list_data: str = ''):
        if suffix_list_data == '':
            log.debug("Using bundled public suffix list")
            suffix_list_data = load_default_suffix_list()
        self._ruleset: Ruleset = parse_ruleset(suffix_list_data)

    @classmethod
    def from_ruleset(cls, ruleset: Ruleset) -> 'DomainExtractor':
        """Create a :class:`DomainExtractor` from an already parsed ruleset

        :param ruleset: The :class:`~pydomainextractor.Ruleset` to match
                        against
        """
        extractor = cls.__new__(cls)
        extractor._ruleset = ruleset
        return extractor

    @property
    def ruleset(self) -> Ruleset:
        """The :class:`~pydomainextractor.Ruleset` this extractor matches
        against"""
        return self._ruleset

    def extract(self, domain: str) -> ExtractResult:
        """Extract a domain string into its parts

        Uppercase ASCII letters are lowercased first. No other normalization is
        done, and no input is rejected: malformed domains simply produce empty
        parts.

        :param domain: The domain to extract, e.g. ``www.example.co.uk``
        :return: An :class:`ExtractResult`, e.g.
                 ``ExtractResult(subdomain='www', domain='example',
                 suffix='co.uk')``
        """
        domain = domain.translate(_ASCII_LOWERCASE)
        suffix = self.extract_suffix(domain)

        if suffix == '':
            domain_part = domain
        elif len(suffix) == len(domain):
            domain_part = ''
        else:
            domain_part = domain[:len(domain) - len(suffix) - 1]

        subdomain, _, domain_label = domain_part.rpartition('.')
        return ExtractResult(subdomain, domain_label, suffix)

    def extract_suffix(self, domain: str) -> str:
        """Find the public suffix of an already lowercased domain

        Walks left from the last period for as long as each trailing part is a
        known suffix, then applies wildcard and exception rules to the longest
        one found.

        :param domain: The lowercased domain
        :return: The public suffix, or an empty string if there is none
        """
        known = self._ruleset.known_suffixes

        period = domain.rfind('.')
        if period == -1:
            return domain if domain in known else ''

        suffix = ''
        while True:
            current = domain[period + 1:]
            if current not in known:
                break
            suffix = current
            period = domain.rfind('.', 0, period)
            if period == -1:
                if domain in known:
                    suffix = domain
                break

        if suffix not in self._ruleset.wildcard_bases:
            return suffix

        # Wildcard rule: one more label is part of the suffix, unless an
        # exception rule says otherwise
        leftover = len(domain) - len(suffix) - 1
        if leftover <= 0:
            return suffix
        blacklisted = self._ruleset.blacklisted_suffixes
        period = domain.rfind('.', 0, leftover)
        if period == -1:
            return suffix if domain in blacklisted else domain
        wildcard_suffix = domain[period + 1:]
        if wildcard_suffix in blacklisted:
            return suffix
        return wildcard_suffix
