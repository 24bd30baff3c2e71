import random
from itertools import product
from unittest import TestCase, skipUnless
from unittest.mock import patch

from diceware.config import Config
from diceware.embedded import EmbeddedList, available, load_embedded
from diceware.errors import InvalidLength, DuplicateWord
from diceware.passphrase import make_passphrase
from diceware.wordlist import WORDLIST_LENGTH

WORDS = [''.join(p) for p in product('abcdef', repeat=5)]
ROLLS = [''.join(p) for p in product('123456', repeat=5)]


def signed_list(words):
    body = '\n'.join('{}\t{}'.format(roll, word) for roll, word in zip(ROLLS, words))
    return '-----BEGIN PGP SIGNED MESSAGE-----\nHash: SHA1\n\n' + body + '\n-----BEGIN PGP SIGNATURE-----\n'


class EmbeddedListTest(TestCase):
    def test_from_name(self):
        self.assertIs(EmbeddedList.EN, EmbeddedList.from_name('en'))
        self.assertIs(EmbeddedList.FR, EmbeddedList.from_name('FR'))

    def test_from_name_unknown(self):
        with self.assertRaisesRegex(ValueError, 'Unknown embedded word list: de'):
            EmbeddedList.from_name('de')

    def test_from_name_not_a_string(self):
        with self.assertRaises(ValueError):
            EmbeddedList.from_name(7)

    def test_resources(self):
        self.assertEqual('diceware.wordlist.asc', EmbeddedList.EN.resource.name)
        self.assertEqual('diceware-fr.wordlist.asc', EmbeddedList.FR.resource.name)

    def test_available(self):
        for word_list in available():
            self.assertIsInstance(word_list, EmbeddedList)


class LoadEmbeddedTest(TestCase):
    @skipUnless(EmbeddedList.EN in available(), 'English word list not installed')
    def test_english(self):
        words = load_embedded(EmbeddedList.EN)
        self.assertEqual(WORDLIST_LENGTH, len(words))
        self.assertEqual(WORDLIST_LENGTH, len(set(words)))

    @skipUnless(EmbeddedList.FR in available(), 'French word list not installed')
    def test_french(self):
        words = load_embedded(EmbeddedList.FR)
        self.assertEqual(WORDLIST_LENGTH, len(words))


@patch('diceware.embedded.read_embedded')
class CheckEmbeddedTest(TestCase):
    def test_signed_list_validates(self, read_embedded):
        read_embedded.return_value = signed_list(WORDS)
        self.assertEqual(tuple(WORDS), load_embedded(EmbeddedList.FR))
        read_embedded.assert_called_once_with(EmbeddedList.FR)

    def test_short_list_rejected(self, read_embedded):
        read_embedded.return_value = signed_list(WORDS[:-1])
        with self.assertRaises(InvalidLength) as cm:
            load_embedded(EmbeddedList.EN)
        self.assertEqual(7775, cm.exception.found)

    def test_duplicate_rejected(self, read_embedded):
        words = list(WORDS)
        words[100] = words[42]
        read_embedded.return_value = signed_list(words)
        with self.assertRaises(DuplicateWord):
            load_embedded(EmbeddedList.EN)

    def test_make_passphrase(self, read_embedded):
        read_embedded.return_value = signed_list(WORDS)
        passphrase = make_passphrase(Config.with_embedded(EmbeddedList.EN, 7), rng=random.Random(7))
        tokens = passphrase.split(' ')
        self.assertEqual(7, len(tokens))
        for token in tokens:
            self.assertIn(token, WORDS)

    def test_checked_on_every_use(self, read_embedded):
        read_embedded.return_value = signed_list(WORDS)
        make_passphrase(Config.with_embedded(EmbeddedList.EN, 2))
        read_embedded.return_value = signed_list(WORDS[:-1])
        with self.assertRaises(InvalidLength):
            make_passphrase(Config.with_embedded(EmbeddedList.EN, 2))
