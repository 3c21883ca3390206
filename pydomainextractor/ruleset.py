"""Public Suffix List parsing: turns PSL text into a :class:`Ruleset`"""

# PSL line format, as far as this parser cares:
#
#   // comment            skipped (so is any line containing "//")
#   com                   plain rule
#   *.ck                  wildcard rule: any one label left of "ck" is a suffix
#   !www.ck               exception rule: "www.ck" is not a suffix after all
#
# Plain and wildcard rules are registered in their original form and, when
# the name converts, in IDNA ASCII form too.

import logging
from typing import FrozenSet, Iterable, Optional, Set

import dns.exception
import dns.name

log = logging.getLogger('pydomainextractor')

#: IDNA 2008 with UTS #46 mapping, non-transitional processing. ASCII labels
#: are mapped too, so uppercase rules get a lowercase duplicate.
IDNA_CODEC = dns.name.IDNA_2008_UTS_46


class Ruleset:
    """A parsed Public Suffix List. Immutable once constructed.

    :param known_suffixes: Suffixes that are public (``com``, ``co.uk``, and
                           the bases of wildcard rules)
    :param wildcard_bases: Bases of wildcard rules (``ck`` for ``*.ck``)
    :param blacklisted_suffixes: Exception rules without the ``!``
                                 (``www.ck`` for ``!www.ck``)
    """

    __slots__ = ('_known_suffixes', '_wildcard_bases',
                 '_blacklisted_suffixes')

    def __init__(self,
                 known_suffixes: Iterable[str] = (),
                 wildcard_bases: Iterable[str] = (),
                 blacklisted_suffixes: Iterable[str] = ()):
        self._known_suffixes: FrozenSet[str] = frozenset(known_suffixes)
        self._wildcard_bases: FrozenSet[str] = frozenset(wildcard_bases)
        self._blacklisted_suffixes: FrozenSet[str] = frozenset(
            blacklisted_suffixes
        )

    @property
    def known_suffixes(self) -> FrozenSet[str]:
        return self._known_suffixes

    @property
    def wildcard_bases(self) -> FrozenSet[str]:
        return self._wildcard_bases

    @property
    def blacklisted_suffixes(self) -> FrozenSet[str]:
        return self._blacklisted_suffixes

    def __eq__(self, other):
        if not isinstance(other, Ruleset):
            return NotImplemented
        return (self._known_suffixes == other._known_suffixes and
                self._wildcard_bases == other._wildcard_bases and
                self._blacklisted_suffixes == other._blacklisted_suffixes)

    def __hash__(self):
        return hash((self._known_suffixes, self._wildcard_bases,
                     self._blacklisted_suffixes))

    def __repr__(self):
        return (f"<Ruleset: {len(self._known_suffixes)} suffixes, "
                f"{len(self._wildcard_bases)} wildcards, "
                f"{len(self._blacklisted_suffixes)} exceptions>")


def to_ascii(name: str) -> Optional[str]:
    """Convert a dotted name to its ASCII-compatible encoding, one label at a
    time

    :param name: The name to convert, e.g. ``公司.cn``
    :return: The converted name, e.g. ``xn--55qx5d.cn``, or ``None`` if any
             label is empty or cannot be converted
    """
    ascii_labels = []
    for label in name.split('.'):
        if label == '':
            log.debug("Cannot convert label '' of '%s' to ASCII: empty label",
                      name)
            return None
        try:
            ascii_label = IDNA_CODEC.encode(label)
        except dns.exception.DNSException as e:
            log.debug("Cannot convert label '%s' of '%s' to ASCII: %s",
                      label, name, e)
            return None
        ascii_labels.append(ascii_label.decode('ascii'))
    return '.'.join(ascii_labels)


def parse_ruleset(text: str) -> Ruleset:
    """Parse Public Suffix List text into a :class:`Ruleset`

    Any text is accepted. Lines that are not comments, exception rules, or
    wildcard rules are taken as plain suffixes.

    :param text: The suffix list contents
    :return: The parsed ruleset
    """
    known_suffixes: Set[str] = set()
    wildcard_bases: Set[str] = set()
    blacklisted_suffixes: Set[str] = set()

    for line in text.splitlines():
        if line == '' or '//' in line:
            continue

        if line.startswith('!'):
            blacklisted_suffixes.add(line[1:])
            continue

        if line.startswith('*.'):
            line = line[2:]
            wildcard_bases.add(line)

        ascii_line = to_ascii(line)
        if ascii_line is not None:
            known_suffixes.add(ascii_line)
        known_suffixes.add(line)

    ruleset = Ruleset(known_suffixes, wildcard_bases, blacklisted_suffixes)
    log.debug("Parsed suffix list: %d suffixes, %d wildcards, %d exceptions",
              len(ruleset.known_suffixes), len(ruleset.wildcard_bases),
              len(ruleset.blacklisted_suffixes))
    return ruleset
