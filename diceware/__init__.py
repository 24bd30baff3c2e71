"""Diceware passphrase generator"""
from diceware.config import Config
from diceware.embedded import EmbeddedList
from diceware.errors import (DicewareError, WordListError, InvalidLength, DuplicateWord, EmptyWord, NoWords,
                             WordListFileError)
from diceware.passphrase import SPECIAL_CHARS, generate, make_passphrase
from diceware.wordlist import WORDLIST_LENGTH, validate
