import logging

import pytest

import pydomainextractor


SMALL_SUFFIX_LIST = """\
// A few rules in Public Suffix List format for testing

// ===BEGIN ICANN DOMAINS===
com
uk
co.uk
jp
*.kawasaki.jp
!city.kawasaki.jp
*.ck
!www.ck
cn
公司.cn
// ===END ICANN DOMAINS===
"""


@pytest.fixture
def suffix_list_data():
    """Fixture providing the text of a small suffix list"""
    return SMALL_SUFFIX_LIST


@pytest.fixture
def extractor(suffix_list_data):
    """Fixture creating a :class:`~pydomainextractor.DomainExtractor` from a
    small suffix list"""
    return pydomainextractor.DomainExtractor(suffix_list_data)


@pytest.fixture(scope='session')
def default_extractor():
    """Fixture creating a :class:`~pydomainextractor.DomainExtractor` using
    the bundled suffix list. Shared across the session since parsing the full
    list takes a moment."""
    return pydomainextractor.DomainExtractor()


@pytest.fixture
def extractor_factory():
    """Fixture creating a factory for extractors from a list of rules"""
    def factory(*rules):
        return pydomainextractor.DomainExtractor('\n'.join(rules))
    return factory


@pytest.fixture
def clean_logger():
    """Remove any handlers the test adds to the pydomainextractor logger"""
    log = logging.getLogger('pydomainextractor')
    handlers = list(log.handlers)
    level = log.level
    yield log
    for handler in log.handlers:
        if handler not in handlers:
            handler.close()
    log.handlers = handlers
    log.setLevel(level)
