# generate_passphrase
# (diceware passphrase generator)
#

import re
import logging

from .die import Die
from .errors import (ConfigurationError, EntropySourceError,
                     WordNotFoundError, RegenerationExhaustedError)
from .wordlist import WordList

# One die roll per digit of a word identifier
NUM_DIE_ROLLS = 5

# Minimum number of words for a secure passphrase (as of March 5, 2014)
# See: https://diceware.blogspot.com/2014/03/time-to-add-word.html
MIN_WORD_COUNT = 6
DEFAULT_WORD_COUNT = MIN_WORD_COUNT
DEFAULT_SEPARATOR = ' '

# Passphrase must be longer than this (i.e. at least 18 characters)
# See: http://world.std.com/~reinhold/dicewarefaq.html#14characters
MIN_CHARS = 17

# Regenerate at most this many times when the passphrase is too short
MAX_ATTEMPTS = 100

# Letters and digits, any script (but not underscore)
ALNUM = re.compile(r'[^\W_]')

log = logging.getLogger(__name__)


def random_id(die: Die, num_rolls: int = NUM_DIE_ROLLS) -> str:
    """Roll the die `num_rolls` times, return the digits as word identifier."""
    digits = []
    for i in range(num_rolls):
        try:
            digits.append(str(die.roll()))
        except EntropySourceError as e:
            raise EntropySourceError(
                f"cannot generate digit {i + 1} of {num_rolls} "
                f"of word ID: {e}") from e
    return ''.join(digits)


def random_word(wordlist: WordList, die: Die) -> str:
    try:
        word_id = random_id(die)
    except EntropySourceError as e:
        raise EntropySourceError(
            f"cannot choose random word with wordlist {wordlist.name}: {e}") from e
    word = wordlist.lookup(word_id)
    if word is None:
        raise WordNotFoundError(word_id, wordlist.name)
    return word


def meets_length_requirement(passphrase: str) -> bool:
    return len(passphrase) > MIN_CHARS


def check_params(wordlist: WordList, separator: str, word_count: int,
                 max_attempts: int = MAX_ATTEMPTS):
    """Reject insecure or ambiguous parameters.

    The separator must not be mistaken for (part of) a word, see:
    http://world.std.com/~reinhold/dicewarefaq.html#spaces

    Letters and digits of any script are rejected, not only ASCII ones
    (POSIX `[[:alnum:]]`), so "é" or "²" can't be a separator either.

    :raises ConfigurationError: on the first violated condition

    """
    if separator == '':
        raise ConfigurationError("separator cannot be an empty string")
    if separator in wordlist:
        raise ConfigurationError(f"separator {separator!r} cannot be a word "
                                 f"in the wordlist {wordlist.name}")
    if ALNUM.search(separator):
        raise ConfigurationError(f"separator {separator!r} cannot contain "
                                 f"alphanumeric characters")
    if word_count < MIN_WORD_COUNT:
        raise ConfigurationError(f"word count requested is {word_count}; "
                                 f"must be over {MIN_WORD_COUNT} words")
    if max_attempts < 1:
        raise ConfigurationError(f"max attempts is {max_attempts}; "
                                 f"must be at least 1")


class PassphraseBuilder:

    """Compose a passphrase from random words of `wordlist`.

    The parameters are checked before the die is rolled for the first time.
    A passphrase not longer than `MIN_CHARS` is thrown away and a new one
    generated from scratch, up to `max_attempts` times.

    """

    def __init__(self, wordlist: WordList,
                 separator: str = DEFAULT_SEPARATOR,
                 word_count: int = DEFAULT_WORD_COUNT,
                 max_attempts: int = MAX_ATTEMPTS,
                 die: Die = None):
        self.wordlist = wordlist
        self.separator = separator
        self.word_count = word_count
        self.max_attempts = max_attempts
        self.attempts = 0
        self._die = die

    def build(self) -> str:
        check_params(self.wordlist, self.separator, self.word_count,
                     self.max_attempts)
        die = self._die or Die()
        self.attempts = 0
        while self.attempts < self.max_attempts:
            self.attempts += 1
            words = [random_word(self.wordlist, die)
                     for _ in range(self.word_count)]
            passphrase = self.separator.join(words)
            if meets_length_requirement(passphrase):
                return passphrase
            log.debug("Attempt %d: passphrase too short (%d chars), regenerating",
                      self.attempts, len(passphrase))
        raise RegenerationExhaustedError(self.attempts, MIN_CHARS)


def generate_passphrase(wordlist_content: str,
                        separator: str = DEFAULT_SEPARATOR,
                        word_count: int = DEFAULT_WORD_COUNT,
                        name: str = '<string>',
                        max_attempts: int = MAX_ATTEMPTS,
                        permissive: bool = False,
                        die: Die = None) -> str:
    """Generate random diceware passphrase.

    :param wordlist_content: Text of the word list, lines "<id> <word>"
    :param separator: Put this between words, must not be alphanumeric
    :param word_count: Number of words, at least `MIN_WORD_COUNT`
    :param name: Identifies the word list in error messages
    :param max_attempts: Give up after this many too short passphrases
    :param permissive: Legacy lookup, see `WordList`
    :param die: Source of dice rolls, default is a secure six-sided `Die`
    :returns: The passphrase.

    """
    wordlist = WordList.parse(wordlist_content, name=name, permissive=permissive)
    builder = PassphraseBuilder(wordlist, separator, word_count,
                                max_attempts=max_attempts, die=die)
    return builder.build()
