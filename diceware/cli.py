"""Generate a Diceware passphrase from the command line"""
import sys
import logging
import argparse

import yaml

from diceware.config import from_options, load_defaults
from diceware.errors import DicewareError, WordListFileError
from diceware.passphrase import make_passphrase

log = logging.getLogger(__name__)


def make_parser():
    parser = argparse.ArgumentParser(prog='diceware', description='Generate diceware passphrase')
    parser.add_argument('words', type=int, nargs='?', help='Number of words in passphrase')
    lists = parser.add_mutually_exclusive_group()
    lists.add_argument('-f', '--file', help='Use a diceware word list file')
    lists.add_argument('--en', dest='list_name', action='store_const', const='en',
                       help='Use the English embedded word list (default)')
    lists.add_argument('--fr', dest='list_name', action='store_const', const='fr',
                       help='Use the French embedded word list')
    parser.add_argument('-s', '--with-special-char', action='store_true', default=None,
                        help='Add a special character to the passphrase')
    parser.add_argument('-c', '--config', help='YAML file with default options')
    parser.add_argument('-v', '--verbose', action='store_true', help='Log debugging information')
    return parser


def main(argv=None):
    parser = make_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format='%(levelname)s : %(asctime)s : %(name)s : %(message)s')

    defaults = {}
    if args.config is not None:
        try:
            defaults = load_defaults(args.config)
        except (OSError, ValueError, yaml.YAMLError) as e:
            parser.error(str(e))

    words = args.words if args.words is not None else defaults.get('words')
    if words is None:
        parser.error('the number of words is required')

    # Flags on the command line beat the defaults file, and any explicit list beats a default file
    file = args.file
    list_name = args.list_name
    if file is None and list_name is None:
        file = defaults.get('file')
        list_name = defaults.get('list')
    special = args.with_special_char if args.with_special_char is not None else defaults.get('special', False)

    try:
        config = from_options(words, file=file, list_name=list_name, special=special)
        log.debug('Using %s', config)
        passphrase = make_passphrase(config)
    except WordListFileError as e:
        print('Error: {}: {}'.format(e.filename, e), file=sys.stderr)
        return 1
    except DicewareError as e:
        print('Error: {}'.format(e), file=sys.stderr)
        return 1
    except OSError as e:  # embedded list missing from the install
        print('Error: {}'.format(e), file=sys.stderr)
        return 1

    print(passphrase)
    return 0


if __name__ == '__main__':
    sys.exit(main())
