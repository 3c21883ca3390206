import argparse
import json
import logging
import logging.handlers
import sys

from . import configuration, suffixlist
from .exceptions import ConfigError, RulesetError
from .extractor import DomainExtractor


def parse_args(argv):
    """Parse command line arguments

    :param argv: Either ``None`` or a list of arguments
    :returns: a :class:`argparse.Namespace` containing the parsed arguments
    """
    parser = argparse.ArgumentParser(
        prog="pydomainextractor",
        description="Split domains into subdomain, domain, and public suffix "
                    "using the Public Suffix List",
        epilog="With no DOMAIN arguments, domains are read from stdin, one "
               "per line",
    )
    parser.add_argument("domains", metavar="DOMAIN", nargs="*",
                        help="Domain to split")
    parser.add_argument("-c", "--configfile",
                        help="Path to the config file")
    parser.add_argument("-l", "--suffix-list",
                        help="Path to a public suffix list to use instead of "
                             "the bundled one")
    parser.add_argument("-j", "--json", action="store_true",
                        help="Print one JSON object per domain")
    parser.add_argument("-d", "--debug-logs", action="store_true",
                        help="Increase verbosity of logging significantly")
    parser.add_argument("-s", "--stderr", action="store_true",
                        help="Log to stderr instead of syslog or file")
    parser.add_argument("--update", metavar="PATH",
                        help="Download the current public suffix list to PATH "
                             "and exit")
    return parser.parse_args(argv)


def setup_logging(conf, debug):
    """Attach a handler to the ``pydomainextractor`` logger according to the
    configuration

    :param conf: The :class:`~pydomainextractor.configuration.Config`
    :param debug: Whether to log at DEBUG level instead of INFO
    :returns: the configured logger
    """
    if conf.logfile == 'syslog':
        log_handler = logging.handlers.SysLogHandler()
    elif conf.logfile == 'stderr':
        log_handler = logging.StreamHandler()
    else:
        log_handler = logging.FileHandler(conf.logfile)
    log = logging.getLogger('pydomainextractor')
    log.addHandler(log_handler)

    if debug:
        log.setLevel(logging.DEBUG)
    else:
        log.setLevel(logging.INFO)
    return log


def _iter_domains(args):
    """Yield the domains to split: the arguments, or lines of stdin"""
    if args.domains:
        yield from args.domains
        return
    for line in sys.stdin:
        line = line.rstrip('\r\n')
        if line != '':
            yield line


def main(argv=None):
    """Main entry point when run as a standalone program

    :param argv: List of arguments. If ``None``, read :data:`sys.argv`.
    """
    args = parse_args(argv)
    try:
        if args.configfile is None:
            conf = configuration.default_config()
        else:
            conf = configuration.read_config_from_path(args.configfile)
    except ConfigError as e:
        print("Config error:", e, file=sys.stderr)
        sys.exit(2)

    if args.stderr:
        conf.logfile = 'stderr'
    if args.suffix_list is not None:
        conf.suffix_list = args.suffix_list
    if args.json:
        conf.format = 'json'

    log = setup_logging(conf, args.debug_logs)

    if args.update is not None:
        try:
            text = suffixlist.fetch_suffix_list()
            suffixlist.write_suffix_list(args.update, text)
        except RulesetError:
            log.critical("Could not update the public suffix list.")
            sys.exit(1)
        return

    if conf.suffix_list is None:
        suffix_list_data = ''
    else:
        try:
            suffix_list_data = suffixlist.read_suffix_list(conf.suffix_list)
        except RulesetError:
            log.critical("Could not load the public suffix list.")
            sys.exit(1)
    extractor = DomainExtractor(suffix_list_data)

    for domain in _iter_domains(args):
        result = extractor.extract(domain)
        if conf.format == 'json':
            print(json.dumps(result._asdict()))
        else:
            print('\t'.join(result))
