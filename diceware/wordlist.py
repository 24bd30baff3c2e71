"""Read and validate Diceware word lists

A legal list has exactly 7776 (6**5) unique entries, one per possible roll of
five dice. Lists are checked every time they are used, embedded ones included.
"""
import re
import logging

from diceware.errors import InvalidLength, DuplicateWord, EmptyWord, WordListFileError

log = logging.getLogger(__name__)

WORDLIST_LENGTH = 6 ** 5

DICE_INDEX_REGEX = re.compile(r'^[1-6]{5}\s+(.*)$')
PGP_HEADER = '-----BEGIN PGP SIGNED MESSAGE-----'


def parse_lines(raw_text, skip_blank=False, dice_indexed=False):
    """Split raw text into (line number, entry) pairs

    Args:
        raw_text: str, one word per line
        skip_blank: bool, drop blank lines instead of keeping them as empty entries
        dice_indexed: bool, only look at lines that start with 5 integers from 1-6,
            taking the word after the dice rolls. Everything else (PGP armor, comments) is ignored.

    Returns:
        list of (int, str) tuples, line numbers count from 1
    """
    entries = []
    for i, line in enumerate(raw_text.splitlines(), start=1):
        if dice_indexed:
            match = DICE_INDEX_REGEX.match(line)
            if match:
                # rest of the line, may be empty or hold several tokens
                entries.append((i, match.group(1).strip()))
            continue

        word = line.strip()
        if not word and skip_blank:
            continue
        entries.append((i, word))

    return entries


def validate(raw_text, skip_blank=False, dice_indexed=False):
    """Check that raw text is a legal word list and return its words in order

    Stops at the first problem found: length, then empty entries, then duplicates.

    Args:
        raw_text: str, see parse_lines
        skip_blank: bool, see parse_lines
        dice_indexed: bool, see parse_lines

    Returns:
        tuple of 7776 str
    """
    entries = parse_lines(raw_text, skip_blank=skip_blank, dice_indexed=dice_indexed)

    if len(entries) != WORDLIST_LENGTH:
        raise InvalidLength(len(entries))

    seen = set()
    for line, word in entries:
        if not word:
            raise EmptyWord(line)
        if word in seen:
            raise DuplicateWord(word)
        seen.add(word)

    log.debug('Validated word list of %d words', len(entries))
    return tuple(word for _, word in entries)


def is_dice_indexed(filename, raw_text):
    """Guess whether a file uses the signed .asc format"""
    return filename.endswith('.asc') or raw_text.lstrip().startswith(PGP_HEADER)


def read_wordlist_file(filename, skip_blank=False):
    """Read and validate a word list file

    Args:
        filename: str location of the word list, UTF-8
        skip_blank: bool, see parse_lines

    Returns:
        tuple of 7776 str
    """
    log.debug('Reading word list from %s', filename)
    try:
        with open(filename, 'r', encoding='utf-8') as f:
            raw_text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise WordListFileError(filename, e) from e

    return validate(raw_text, skip_blank=skip_blank, dice_indexed=is_dice_indexed(filename, raw_text))
