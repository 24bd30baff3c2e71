"""Word lists bundled with the package

The payloads are the signed .asc files installed under diceware/wordlists/.
They go through the same validation as any external list.
"""
import enum
import logging
from importlib import resources

from diceware.wordlist import validate

log = logging.getLogger(__name__)


class EmbeddedList(enum.Enum):
    # The original English Diceware word list.
    EN = 'diceware.wordlist.asc'
    # Matthieu Weber's French word list, with Église spelled Eglise.
    FR = 'diceware-fr.wordlist.asc'

    @classmethod
    def from_name(cls, name):
        """Look up a list by its language tag, e.g. 'en' or 'FR'"""
        try:
            return cls[name.upper()]
        except (KeyError, AttributeError):
            raise ValueError('Unknown embedded word list: {}'.format(name)) from None

    @property
    def resource(self):
        return resources.files('diceware').joinpath('wordlists').joinpath(self.value)


def read_embedded(word_list):
    """Raw text of an embedded list. A missing resource means a broken install."""
    return word_list.resource.read_text(encoding='utf-8')


def load_embedded(word_list):
    """Read and validate an embedded list

    Args:
        word_list: EmbeddedList member

    Returns:
        tuple of 7776 str
    """
    log.debug('Loading embedded word list %s', word_list.name)
    return validate(read_embedded(word_list), dice_indexed=True)


def available():
    """Embedded lists whose resources are installed"""
    return [word_list for word_list in EmbeddedList if word_list.resource.is_file()]
