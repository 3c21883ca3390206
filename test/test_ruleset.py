"""Tests for suffix list parsing"""
import logging

import pytest

import pydomainextractor
from pydomainextractor.ruleset import Ruleset, parse_ruleset, to_ascii


def test_plain_rules():
    """Test plain rules are known suffixes and nothing else"""
    ruleset = parse_ruleset("com\nco.uk\n")
    assert ruleset.known_suffixes == {'com', 'co.uk'}
    assert ruleset.wildcard_bases == set()
    assert ruleset.blacklisted_suffixes == set()


def test_comments_and_blank_lines_skipped():
    """Test comment lines, lines containing //, and blank lines are
    skipped"""
    ruleset = parse_ruleset("// comment\n\ncom\norg // trailing comment\n")
    assert ruleset.known_suffixes == {'com'}


def test_wildcard_rule():
    """Test a wildcard rule registers its base as known and as a wildcard"""
    ruleset = parse_ruleset("*.ck\n*.kawasaki.jp\n")
    assert ruleset.known_suffixes == {'ck', 'kawasaki.jp'}
    assert ruleset.wildcard_bases == {'ck', 'kawasaki.jp'}
    assert ruleset.blacklisted_suffixes == set()


def test_exception_rule():
    """Test an exception rule is only registered as blacklisted"""
    ruleset = parse_ruleset("!www.ck\n")
    assert ruleset.known_suffixes == set()
    assert ruleset.wildcard_bases == set()
    assert ruleset.blacklisted_suffixes == {'www.ck'}


def test_unicode_rule_registered_twice():
    """Test a Unicode rule is registered in both Unicode and ASCII form"""
    ruleset = parse_ruleset("公司.cn\n")
    assert ruleset.known_suffixes == {'公司.cn', 'xn--55qx5d.cn'}


def test_unicode_wildcard_rule():
    """Test a Unicode wildcard base is known in both forms but the wildcard
    is only registered in its original form"""
    ruleset = parse_ruleset("*.公司.cn\n")
    assert ruleset.known_suffixes == {'公司.cn', 'xn--55qx5d.cn'}
    assert ruleset.wildcard_bases == {'公司.cn'}


@pytest.mark.parametrize('line', [
    'a' * 64 + '.com',
    '☃.com',
    'foo..com',
])
def test_unconvertible_rule_kept(caplog, line):
    """Test a rule that cannot be converted to ASCII is still registered in
    its original form, and the failure is logged"""
    with caplog.at_level(logging.DEBUG, logger='pydomainextractor'):
        ruleset = parse_ruleset(line)
    assert ruleset.known_suffixes == {line}
    assert "Cannot convert label" in caplog.text


def test_uppercase_rule_gets_lowercase_duplicate():
    """Test an uppercase rule is also registered lowercased, so extracted
    (lowercased) domains can match it"""
    ruleset = parse_ruleset("CO.UK\nÉCOLE.FR\n")
    assert ruleset.known_suffixes == {'CO.UK', 'co.uk',
                                      'ÉCOLE.FR', 'xn--cole-9oa.fr'}

    extractor = pydomainextractor.DomainExtractor.from_ruleset(ruleset)
    assert (extractor.extract('www.example.co.uk') ==
            ('www', 'example', 'co.uk'))


def test_crlf_line_endings():
    """Test Windows line endings don't end up in the suffixes"""
    ruleset = parse_ruleset("com\r\n*.ck\r\n!www.ck\r\n")
    assert ruleset.known_suffixes == {'com', 'ck'}
    assert ruleset.wildcard_bases == {'ck'}
    assert ruleset.blacklisted_suffixes == {'www.ck'}


def test_malformed_lines_are_plain_rules():
    """Test lines that aren't comments, wildcards, or exceptions are taken
    as plain rules without complaint"""
    ruleset = parse_ruleset("foo*bar\n.leading\n")
    assert 'foo*bar' in ruleset.known_suffixes
    assert '.leading' in ruleset.known_suffixes


def test_empty_text():
    """Test parsing nothing produces an empty ruleset"""
    assert parse_ruleset('') == Ruleset()


def test_parse_logs_summary(caplog):
    """Test parsing logs the size of the result"""
    with caplog.at_level(logging.DEBUG, logger='pydomainextractor'):
        parse_ruleset("com\n*.ck\n!www.ck\n")
    assert "2 suffixes, 1 wildcards, 1 exceptions" in caplog.text


def test_ruleset_sets_immutable():
    """Test the ruleset's sets can't be modified"""
    ruleset = parse_ruleset("com\n")
    assert isinstance(ruleset.known_suffixes, frozenset)
    assert isinstance(ruleset.wildcard_bases, frozenset)
    assert isinstance(ruleset.blacklisted_suffixes, frozenset)
    with pytest.raises(AttributeError):
        ruleset.known_suffixes = frozenset()


def test_ruleset_equality():
    """Test rulesets compare and hash by contents"""
    a = parse_ruleset("com\n*.ck\n")
    b = Ruleset(['com', 'ck'], ['ck'])
    assert a == b
    assert hash(a) == hash(b)
    assert a != parse_ruleset("com\n")


def test_ruleset_repr():
    assert (repr(parse_ruleset("com\n*.ck\n!www.ck\n")) ==
            "<Ruleset: 2 suffixes, 1 wildcards, 1 exceptions>")


class TestToASCII:
    def test_ascii_unchanged(self):
        assert to_ascii('co.uk') == 'co.uk'

    def test_ascii_lowercased(self):
        assert to_ascii('CO.UK') == 'co.uk'
        assert to_ascii('ÉCOLE.FR') == 'xn--cole-9oa.fr'

    def test_unicode_converted(self):
        assert to_ascii('公司.cn') == 'xn--55qx5d.cn'

    def test_empty_label(self):
        assert to_ascii('foo..com') is None
        assert to_ascii('') is None

    def test_label_too_long(self):
        assert to_ascii('a' * 64) is None

    def test_disallowed_codepoint(self):
        assert to_ascii('☃') is None


def test_bundled_list_parses():
    """Test the bundled list produces a ruleset with the expected rules"""
    ruleset = parse_ruleset(pydomainextractor.load_default_suffix_list())
    assert 'com' in ruleset.known_suffixes
    assert 'co.uk' in ruleset.known_suffixes
    assert 'xn--55qx5d.cn' in ruleset.known_suffixes
    assert 'ck' in ruleset.wildcard_bases
    assert 'www.ck' in ruleset.blacklisted_suffixes
