"""Make passphrases from a validated word list

Unlike rolling dice by hand, the special character isn't limited to the first
six characters of the first six words: any insertion point in any word is
equally likely.
"""
import logging
import secrets

import regex

from diceware.errors import NoWords
from diceware.embedded import load_embedded
from diceware.wordlist import read_wordlist_file

log = logging.getLogger(__name__)

SPECIAL_CHARS = '~!#$%^&*()-=+[]\\{}:;"\'<>?/0123456789'


def generate(word_list, words, with_special_char=False, rng=None):
    """Draw words uniformly, with replacement, and join them with spaces

    Args:
        word_list: sequence of str, already validated
        words: int, number of words in the passphrase
        with_special_char: bool, insert one char from SPECIAL_CHARS somewhere
        rng: random.Random-like obj, defaults to a fresh SystemRandom

    Returns:
        str passphrase
    """
    if words < 0:
        raise ValueError('Number of words must be >= 0')
    if words == 0:
        raise NoWords()

    if rng is None:
        rng = secrets.SystemRandom()

    password = [rng.choice(word_list) for _ in range(words)]

    if with_special_char:
        i = rng.randrange(len(password))
        # split on grapheme clusters so a base letter keeps its combining marks
        graphemes = regex.findall(r'\X', password[i])
        pos = rng.randint(0, len(graphemes))  # both ends included
        password[i] = ''.join(graphemes[:pos]) + rng.choice(SPECIAL_CHARS) + ''.join(graphemes[pos:])

    return ' '.join(password)


def load_word_list(config):
    """Get the validated word list a Config points at"""
    if config.is_embedded:
        return load_embedded(config.word_list)
    return read_wordlist_file(config.word_list)


def make_passphrase(config, rng=None):
    """Load and validate the configured list, then generate a passphrase

    Args:
        config: Config obj
        rng: random.Random-like obj, see generate

    Returns:
        str passphrase
    """
    if config.words < 1:
        raise NoWords()

    word_list = load_word_list(config)
    log.debug('Generating %d words (special char: %s)', config.words, config.with_special_char)
    return generate(word_list, config.words, config.with_special_char, rng=rng)
