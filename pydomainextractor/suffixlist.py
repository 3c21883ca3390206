"""Sources of Public Suffix List text: the bundled copy, local files, and
publicsuffix.org"""

import functools
import importlib.metadata
import importlib.resources
import logging
import os
import os.path
import shutil
import tempfile
from typing import Union

import requests

from .exceptions import RulesetError

log = logging.getLogger('pydomainextractor')

USER_AGENT = (f"pydomainextractor/"
              f"{importlib.metadata.version('pydomainextractor')}")

#: Where the authoritative copy of the list is published
PUBLIC_SUFFIX_LIST_URL = 'https://publicsuffix.org/list/public_suffix_list.dat'

_BUNDLED_LIST = 'data/public_suffix_list.dat'


@functools.lru_cache(maxsize=1)
def load_default_suffix_list() -> str:
    """Return the text of the Public Suffix List bundled with this package.
    The file is only read once per process."""
    resource = importlib.resources.files(__package__).joinpath(_BUNDLED_LIST)
    return resource.read_text(encoding='utf-8')


def read_suffix_list(path: Union[str, os.PathLike]) -> str:
    """Read a Public Suffix List from a file

    :param path: Path to the file, which must be UTF-8 encoded
    :raises RulesetError: if the file cannot be read or decoded
    :return: The contents of the file
    """
    try:
        with open(path, 'r', encoding='utf-8') as f:
            text = f.read()
    except OSError as e:
        log.error("Could not read suffix list %s: %s", path, e.strerror)
        raise RulesetError(f"Could not read suffix list {path}: "
                           f"{e.strerror}") from e
    except UnicodeDecodeError as e:
        log.error("Suffix list %s is not valid UTF-8: %s", path, e)
        raise RulesetError(f"Suffix list {path} is not valid UTF-8") from e
    log.debug("Read suffix list from %s", path)
    return text


def fetch_suffix_list(url: str = PUBLIC_SUFFIX_LIST_URL,
                      timeout: float = 30) -> str:
    """Download the current Public Suffix List

    :param url: Where to fetch the list from
    :param timeout: Seconds to wait for the server before giving up
    :raises RulesetError: if the list cannot be fetched or comes back empty
    :return: The text of the list
    """
    log.info("Fetching public suffix list from %s", url)
    try:
        response = requests.get(url,
                                headers={'User-Agent': USER_AGENT},
                                timeout=timeout)
    except requests.exceptions.RequestException as e:
        log.error("Could not fetch suffix list from %s: %s", url, e)
        raise RulesetError(f"Could not fetch suffix list from {url}") from e

    try:
        response.raise_for_status()
    except requests.exceptions.HTTPError as e:
        log.error("Received HTTP %d when fetching suffix list from %s",
                  response.status_code, url)
        raise RulesetError(f"Got HTTP {response.status_code} when fetching "
                           f"suffix list from {url}") from e

    # publicsuffix.org serves the list without a charset
    response.encoding = 'utf-8'
    text = response.text
    if text.strip() == '':
        log.error("Suffix list fetched from %s is empty", url)
        raise RulesetError(f"Suffix list fetched from {url} is empty")
    return text


def _copy_mode(path, tmp_path):
    """Give the temporary file the mode of the file it replaces, or the mode a
    newly created file would get. mkstemp always creates files as 0600."""
    if os.path.exists(path):
        shutil.copymode(path, tmp_path)
    else:
        umask = os.umask(0)
        os.umask(umask)
        os.chmod(tmp_path, 0o666 & ~umask)


def write_suffix_list(path: Union[str, os.PathLike], text: str) -> None:
    """Write a Public Suffix List to a file, replacing it atomically

    :param path: Path to write to
    :param text: The list contents
    :raises RulesetError: if the file cannot be written
    """
    directory = os.path.dirname(os.path.abspath(path))
    try:
        fd, tmp_path = tempfile.mkstemp(dir=directory, prefix='.psl-')
        try:
            with open(fd, 'w', encoding='utf-8') as f:
                f.write(text)
            _copy_mode(path, tmp_path)
            os.replace(tmp_path, path)
        except OSError:
            os.unlink(tmp_path)
            raise
    except OSError as e:
        log.error("Could not write suffix list %s: %s", path, e.strerror)
        raise RulesetError(f"Could not write suffix list {path}: "
                           f"{e.strerror}") from e
    log.info("Wrote suffix list to %s", path)
