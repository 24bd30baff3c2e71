"""Errors raised while loading word lists and making passphrases"""


class DicewareError(Exception):
    """Base class for everything this package raises on bad input"""


class WordListError(DicewareError):
    """The word list is not a legal Diceware list"""


class InvalidLength(WordListError):
    def __init__(self, found):
        super().__init__('Word list: invalid length ({})'.format(found))
        self.found = found


class DuplicateWord(WordListError):
    def __init__(self, word):
        super().__init__('Word list: {}: duplicate word'.format(word))
        self.word = word


class EmptyWord(WordListError):
    def __init__(self, line):
        super().__init__('Word list: empty word on line {}'.format(line))
        self.line = line


class NoWords(DicewareError):
    def __init__(self):
        super().__init__('No words to generate')


class WordListFileError(DicewareError):
    """Word list file couldn't be read

    Args:
        filename: str path that was being read
        cause: the underlying OSError or UnicodeDecodeError
    """

    def __init__(self, filename, cause):
        super().__init__(getattr(cause, 'strerror', None) or str(cause))
        self.filename = filename
        self.cause = cause
