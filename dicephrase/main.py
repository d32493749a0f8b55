import sys
import logging
import argparse
import configparser
from pathlib import Path

import pyperclip

from . import generator
from .errors import DicephraseError, ConfigurationError
from .wordlist import WordList, load_wordlist_text

DATA_DIR = Path('~/.dicephrase')


def unquote(value: str) -> str:
    """Remove one pair of surrounding double quotes.

    Quotes allow leading/trailing spaces in config values.

    """
    if len(value) >= 2 and value[0] == value[-1] == '"':
        return value[1:-1]
    return value


def positive_int(value) -> int:
    """Argument type: integer, at least 1"""
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


class Config:

    """Settings from config file, with built-in defaults."""

    def __init__(self, config_file=None):
        self.words = generator.DEFAULT_WORD_COUNT
        self.separator = generator.DEFAULT_SEPARATOR
        self.wordlist = None
        self.max_attempts = generator.MAX_ATTEMPTS
        self.permissive = False
        if config_file is not None:
            self.load(config_file)

    def load(self, config_file):
        config_file = Path(config_file).expanduser()
        logging.getLogger(__name__).debug("Loading config %r", str(config_file))
        config = configparser.ConfigParser(interpolation=None)
        config.read(config_file, encoding='utf-8')
        for section in config.sections():
            if section != 'dicephrase':
                print(f"WARNING: unknown section {section!r} in config {str(config_file)!r}",
                      file=sys.stderr)
                continue
            section = config[section]
            try:
                for key in section:
                    if key == 'words':
                        self.words = section.getint(key)
                    elif key == 'separator':
                        self.separator = unquote(section[key])
                    elif key == 'wordlist':
                        self.wordlist = Path(section[key]).expanduser()
                    elif key == 'max_attempts':
                        self.max_attempts = section.getint(key)
                    elif key == 'permissive':
                        self.permissive = section.getboolean(key)
                    else:
                        print(f"WARNING: unknown key [{section.name!r}] {key!r} "
                              f"in config {str(config_file)!r}", file=sys.stderr)
            except ValueError as e:
                raise ConfigurationError(
                    f"bad value in config {str(config_file)!r}: {e}") from e

    def override(self, **kwargs):
        """Replace settings by those given (not None) on command line."""
        for key, value in kwargs.items():
            if value is not None:
                setattr(self, key, value)


def _copy(text):
    """Wraps copy-to-clipboard function to allow overriding."""
    pyperclip.copy(text)


def run_generate(config_file, count, copy, entropy, **overrides):
    cfg = Config(config_file)
    cfg.override(**overrides)
    text, name = load_wordlist_text(cfg.wordlist)
    if entropy:
        wordlist = WordList.parse(text, name=name, permissive=cfg.permissive)
        print(f"Entropy: {wordlist.entropy_bits(cfg.words):.1f} bits "
              f"({len(wordlist)} words in {name})", file=sys.stderr)
    for _ in range(1 if copy else count):
        passphrase = generator.generate_passphrase(
            text, cfg.separator, cfg.words, name=name,
            max_attempts=cfg.max_attempts, permissive=cfg.permissive)
        if copy:
            _copy(passphrase)
            print("Copied to clipboard.")
        else:
            print(passphrase)


def parse_args(argv=None):
    """Process command line args."""
    ap = argparse.ArgumentParser(prog="dicephrase",
                                 description="Diceware passphrase generator",
                                 formatter_class=argparse.RawTextHelpFormatter)
    ap.set_defaults(func=run_generate)
    ap.add_argument('-w', '--words', dest='words', type=int,
                    help=f"number of words, at least {generator.MIN_WORD_COUNT} "
                         f"(default: {generator.DEFAULT_WORD_COUNT})")
    ap.add_argument('-s', '--sep', dest='separator',
                    help="separator between words, must not be alphanumeric "
                         "nor a word in the wordlist (default: space)")
    ap.add_argument('-l', '--wordlist', '--wl', dest='wordlist',
                    help="wordlist file (default: EFF large wordlist, "
                         "downloaded on first use)")
    ap.add_argument('-n', dest='count', type=positive_int, default=1,
                    help="number of passphrases to generate (default: %(default)s)")
    ap.add_argument('-c', '--copy', action='store_true',
                    help="copy the passphrase to clipboard instead of printing")
    ap.add_argument('-e', '--entropy', action='store_true',
                    help="print entropy estimate to stderr")
    ap.add_argument('--max-attempts', dest='max_attempts', type=int,
                    help=f"give up after this many too short passphrases "
                         f"(default: {generator.MAX_ATTEMPTS})")
    lookup_grp = ap.add_mutually_exclusive_group()
    lookup_grp.add_argument('--permissive', dest='permissive', action='store_const', const=True,
                            help="find word by ID anywhere on the line (legacy lookup)")
    lookup_grp.add_argument('--strict', dest='permissive', action='store_const', const=False,
                            help="find word by ID in the first column (default)")
    ap.add_argument('--config', dest='config_file',
                    default=DATA_DIR / 'dicephrase.conf',
                    help="config file (default: %(default)s)")
    ap.add_argument('-v', '--verbose', action='store_true',
                    help="print debug messages")
    return ap.parse_args(args=argv)


def main(argv=None):
    """Main program

    :param argv: Used in tests. Default is sys.argv
    :return: Exit status
    """
    args = parse_args(argv)
    if args.verbose:
        logging.basicConfig(level='DEBUG')
    delattr(args, 'verbose')
    run_func = args.func
    delattr(args, 'func')
    try:
        run_func(**vars(args))
    except DicephraseError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0
