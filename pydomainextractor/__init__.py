"""pydomainextractor: split domains into subdomain, domain, and public suffix
using the Public Suffix List

    >>> from pydomainextractor import DomainExtractor
    >>> extractor = DomainExtractor()
    >>> extractor.extract('forums.bbc.co.uk')
    ExtractResult(subdomain='forums', domain='bbc', suffix='co.uk')
"""

from .exceptions import DomainExtractorException, RulesetError, ConfigError
from .ruleset import Ruleset, parse_ruleset, to_ascii
from .suffixlist import (PUBLIC_SUFFIX_LIST_URL, load_default_suffix_list,
                         read_suffix_list, fetch_suffix_list,
                         write_suffix_list)
from .extractor import DomainExtractor, ExtractResult
from .zones import ZoneSplitter
