"""pydomainextractor configuration parsing"""

# Config file format:
#
# [pydomainextractor]
# suffix_list = /path/to/public_suffix_list.dat
# logfile = stderr
# format = text
#
# Every option is optional.

import configparser
import os.path
import pathlib
from typing import Dict, Optional, TextIO, Union

from .exceptions import ConfigError


SECTION = 'pydomainextractor'

DEFAULT_LOGFILE = 'stderr'

OUTPUT_FORMATS = ('text', 'json')


class Config:
    """pydomainextractor configuration data

    :param main: Options from the ``[pydomainextractor]`` section
    :raises ConfigError: if an option is unknown or has an invalid value
    """

    def __init__(self, main: Dict[str, str]):
        main = dict(main)

        #: Path to the suffix list to use, or ``None`` for the bundled list
        self.suffix_list: Optional[str] = main.pop('suffix_list', '') or None

        #: ``stderr``, ``syslog``, or the path of a file to log to
        self.logfile: str = main.pop('logfile', '') or DEFAULT_LOGFILE

        #: Output format for the command line tool: ``text`` or ``json``
        self.format: str = main.pop('format', '') or OUTPUT_FORMATS[0]

        if main:
            raise ConfigError("Unknown config option(s): %s" %
                              ', '.join(sorted(main)))
        self._validate()

    def _validate(self):
        """Check option values

        :raises ConfigError: if any value is invalid
        """
        if (self.suffix_list is not None and
                not os.path.isabs(self.suffix_list)):
            raise ConfigError("Config option 'suffix_list' cannot be a "
                              "relative path")
        if self.format not in OUTPUT_FORMATS:
            raise ConfigError("Config option 'format' must be one of %s, not "
                              "%s" % (', '.join(OUTPUT_FORMATS), self.format))


def _process_config(config: configparser.ConfigParser) -> Config:
    """Process the given :class:`~configparser.ConfigParser` into a
    :class:`Config`

    :param config: The configuration to process
    :raises ConfigError: if the configuration is invalid
    :returns: the processed and validated configuration
    """
    # Note: ConfigParser already handles catching duplicate sections and
    #   duplicate keys

    main: Dict[str, str] = dict()

    for section in config.sections():
        if section == SECTION:
            main.update(config[section])
        else:
            raise ConfigError("Config section %s is not a %s section" %
                              (section, SECTION))

    return Config(main)


def read_config_from_path(filename: Union[str, pathlib.Path]) -> Config:
    """Read configuration from the named file or :class:`~pathlib.Path`

    :param filename: Filename or path to read from
    :raises ConfigError: if the config file cannot be read or is invalid
    :return: A :class:`Config`
    """
    try:
        with open(filename, 'r') as f:
            return read_config(f)
    except OSError as e:
        raise ConfigError("Could not read config file %s: %s" %
                          (filename, e.strerror)) from e


def read_config(configfile: TextIO) -> Config:
    """Read configuration in from the named file

    :param configfile: Filelike object to read the config from
    :raises ConfigError: if the config file cannot be read or is invalid
    :return: A :class:`Config`
    """
    config = configparser.ConfigParser(interpolation=None)
    try:
        config.read_file(configfile)
    except configparser.Error as e:
        raise ConfigError("Error in config file: %s" % e) from e
    except OSError as e:
        raise ConfigError("Could not read config file: %s" %
                          e.strerror) from e

    return _process_config(config)


def default_config() -> Config:
    """Return the configuration used when no config file is given"""
    return Config(dict())
