import logging
import argparse
import configparser
from pathlib import Path

from . import __version__, pwgen, wordlist
from .errors import PassgenError, ConfigError
from .ui import PassgenUI

DATA_DIR = Path('~/.passgen')
CONFIG_SECTION = 'passgen'


class Config:

    """Defaults for command line options, read from INI file.

    Example::

        [passgen]
        words = 5
        separator = .
        capitalize = yes

    """

    int_keys = ('words', 'length')
    bool_keys = ('capitalize', 'number', 'symbol', 'clipboard')
    str_keys = ('separator', 'wordlist', 'short_wordlist')

    def __init__(self, config_file=None):
        self.words = pwgen.NUM_WORDS
        self.separator = pwgen.SEPARATOR
        self.length = 0
        self.capitalize = False
        self.number = False
        self.symbol = False
        self.clipboard = False
        self.wordlist = None
        self.short_wordlist = None
        if config_file is not None:
            self.load(config_file)

    def load(self, config_file):
        config_file = Path(config_file).expanduser()
        config = configparser.ConfigParser(interpolation=None)
        try:
            config.read(config_file, encoding='utf-8')
        except (configparser.Error, UnicodeDecodeError) as e:
            raise ConfigError(f"invalid config {str(config_file)!r}: {e}") from e
        for section in config.sections():
            if section != CONFIG_SECTION:
                print(f"WARNING: unknown section {section!r} in config {str(config_file)!r}")
                continue
            section = config[section]
            for key in section:
                try:
                    if key in self.int_keys:
                        setattr(self, key, section.getint(key))
                    elif key in self.bool_keys:
                        setattr(self, key, section.getboolean(key))
                    elif key in self.str_keys:
                        setattr(self, key, section.get(key))
                    else:
                        print(f"WARNING: unknown key [{section.name!r}] {key!r} "
                              f"in config {str(config_file)!r}")
                except ValueError as e:
                    raise ConfigError(f"invalid value for {key!r} "
                                      f"in config {str(config_file)!r}: {e}") from e

    def merge_args(self, args) -> dict:
        """Command line args take precedence over config file."""
        return {key: getattr(self, key) if getattr(args, key) is None else getattr(args, key)
                for key in self.int_keys + self.bool_keys + self.str_keys}


def run_stats(ui, opts):
    words, short_words = wordlist.load_catalogs(opts['wordlist'], opts['short_wordlist'])
    ui.show_stats("words", wordlist.word_stats(words))
    print()
    ui.show_stats("short words", wordlist.word_stats(short_words))


def run_pwgen(ui, opts):
    words, short_words = wordlist.load_catalogs(opts['wordlist'], opts['short_wordlist'])
    request = pwgen.GenerationRequest(
        word_count=opts['words'],
        separator=opts['separator'],
        length=opts['length'],
        capitalize=opts['capitalize'],
        number=opts['number'],
        symbol=opts['symbol'],
    )
    password = pwgen.generate_password(request, words, short_words)
    ui.show_password(password)
    if opts['clipboard']:
        ui.copy_password(password)


def parse_args(argv=None):
    """Process command line args."""
    ap = argparse.ArgumentParser(prog="passgen",
                                 description="Generate XKCD-style password from random words.",
                                 formatter_class=argparse.RawTextHelpFormatter)

    # Options default to None, so that config file value can be used instead
    ap.add_argument('-w', '--words', dest='words', type=int,
                    help=f"number of words in the password (default: {pwgen.NUM_WORDS})")
    ap.add_argument('-s', '--separator', dest='separator',
                    help=f"separator between words (default: {pwgen.SEPARATOR!r})")
    ap.add_argument('-l', '--length', dest='length', type=int,
                    help="total length of the password, without number and symbol\n"
                         "(default: 0 = any length)")
    ap.add_argument('-c', '--capitalize', action='store_true', default=None,
                    help="capitalize the first letter of each word")
    ap.add_argument('-n', '--number', action='store_true', default=None,
                    help="add a random number at the end")
    ap.add_argument('-y', '--symbol', action='store_true', default=None,
                    help="add a non-word symbol at the end")
    ap.add_argument('-b', '--clipboard', action='store_true', default=None,
                    help="copy the password to the clipboard")
    ap.add_argument('-v', '--version', action='version',
                    version=f"%(prog)s {__version__}")
    ap.add_argument('--stats', action='store_true',
                    help="show statistics of the word lists and exit")
    ap.add_argument('--wordlist', dest='wordlist',
                    help="file with words, one per line (default: bundled)")
    ap.add_argument('--short-wordlist', dest='short_wordlist',
                    help="file with words of 1-2 letters (default: bundled)")
    ap.add_argument('--config', dest='config_file',
                    default=DATA_DIR / 'passgen.conf',
                    help="config file (default: %(default)s)")
    ap.add_argument('--debug', action='store_true',
                    help="print debug messages")
    ap.add_argument('--log-file', dest='log_file',
                    help="write debug messages to this file")

    return ap.parse_args(args=argv)


def main(argv=None):
    """Main program

    :param argv: Used in tests. Default is sys.argv
    :return: Exit code

    """
    args = parse_args(argv)
    if args.debug or args.log_file:
        logging.basicConfig(filename=args.log_file, level='DEBUG')
    ui = PassgenUI()
    try:
        opts = Config(args.config_file).merge_args(args)
        if args.stats:
            run_stats(ui, opts)
        else:
            run_pwgen(ui, opts)
    except PassgenError as e:
        ui.error(e)
        return 1
    return 0
