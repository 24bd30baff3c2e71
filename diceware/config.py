"""Passphrase generation settings and the optional YAML defaults file

Sample defaults file:

    words: 8
    special: true
    list: fr
"""
import logging
from dataclasses import dataclass
from typing import Union

import yaml

from diceware.embedded import EmbeddedList

log = logging.getLogger(__name__)

DEFAULT_FIELDS = {
    'words': int,
    'special': bool,
    'list': str,
    'file': str,
}


@dataclass(frozen=True)
class Config:
    """What to generate and from which list. Use with_filename or with_embedded to make one."""
    word_list: Union[EmbeddedList, str]
    words: int
    with_special_char: bool = False

    @classmethod
    def with_filename(cls, filename, words, with_special_char=False):
        return cls(filename, words, with_special_char)

    @classmethod
    def with_embedded(cls, word_list, words, with_special_char=False):
        return cls(word_list, words, with_special_char)

    @property
    def is_embedded(self):
        return isinstance(self.word_list, EmbeddedList)


def from_options(words, file=None, list_name=None, special=False):
    """Build a Config from loose options. A file takes precedence over a named list."""
    if file is not None:
        return Config.with_filename(file, words, special)
    return Config.with_embedded(EmbeddedList.from_name(list_name or 'en'), words, special)


def load_defaults(filename):
    """Read CLI defaults from a YAML file

    Args:
        filename: str location of the YAML file

    Returns:
        dict with a subset of the keys in DEFAULT_FIELDS
    """
    with open(filename, 'r') as f:
        doc = yaml.safe_load(f)

    if doc is None:
        return {}
    if not isinstance(doc, dict):
        raise ValueError('{}: defaults must be a mapping'.format(filename))

    for key, value in doc.items():
        if key not in DEFAULT_FIELDS:
            raise ValueError('{}: unknown key {}'.format(filename, key))
        expected = DEFAULT_FIELDS[key]
        # bool is an int subclass, so words: true has to be rejected explicitly
        if not isinstance(value, expected) or (expected is int and isinstance(value, bool)):
            raise ValueError('{}: {} must be {}'.format(filename, key, expected.__name__))

    if 'list' in doc:
        EmbeddedList.from_name(doc['list'])

    log.debug('Loaded defaults %s from %s', doc, filename)
    return doc
