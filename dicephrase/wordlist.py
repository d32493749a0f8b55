# WordList, load_wordlist_text
# (diceware word list parsing, lookup and loading)
#

import re
import math
import logging
from pathlib import Path

from .errors import SourceUnavailableError

# Default list, downloaded once and cached
# See: https://www.eff.org/deeplinks/2016/07/new-wordlists-random-passphrases
WORDLIST_CACHE_PATH = Path('~/.dicephrase/eff_large_wordlist.txt').expanduser()
WORDLIST_WEB_URL = 'https://www.eff.org/files/2016/07/18/eff_large_wordlist.txt'

# A digit followed by whitespace somewhere on the line.
# PGP armor, headers and blank lines don't match.
ENTRY_LINE = re.compile(r'\d\s')

log = logging.getLogger(__name__)


class WordList:

    """Diceware word list: mapping of identifiers ("16655") to words.

    In strict mode (default), `lookup` matches the identifier against the
    first field of each entry. In permissive mode it returns the first
    entry whose line contains the identifier anywhere, for parity with
    tools that scan the raw text.

    """

    def __init__(self, entries=(), name='<string>', permissive=False):
        self.name = name
        self.permissive = permissive
        self._lines = []        # (line, word) in file order
        self._words_by_id = {}
        self._words = set()
        for line, word_id, word in entries:
            self._lines.append((line, word))
            self._words_by_id.setdefault(word_id, word)
            self._words.add(word)

    @classmethod
    def parse(cls, text: str, name='<string>', permissive=False) -> 'WordList':
        return cls(cls._iter_entries(text), name=name, permissive=permissive)

    @staticmethod
    def _iter_entries(text):
        for line in text.splitlines():
            if not ENTRY_LINE.search(line):
                continue
            fields = line.split()
            if len(fields) < 2:
                continue
            yield line, fields[0], fields[1].strip()

    def __len__(self):
        return len(self._words_by_id)

    def __contains__(self, word):
        return word in self._words

    def __repr__(self):
        return f"<WordList {self.name!r}, {len(self)} words>"

    def lookup(self, word_id: str):
        """Find word by its identifier. Returns None if there is none."""
        if not self.permissive:
            return self._words_by_id.get(word_id)
        for line, word in self._lines:
            if word_id in line:
                return word
        return None

    def entropy_bits(self, word_count: int) -> float:
        """Entropy of a passphrase of `word_count` words from this list."""
        if len(self) == 0:
            return 0.0
        return word_count * math.log2(len(self))


def _read_text(path: Path) -> str:
    with open(path, 'r', encoding='utf-8') as f:
        return f.read()


def load_wordlist_text(path=None) -> tuple:
    """Load word list content.

    :param path: Explicit word list file. Default is the EFF large
                 word list, downloaded on first use.
    :returns: Tuple (text, name), name identifies the source in messages.

    """
    if path is not None:
        path = Path(path).expanduser()
        try:
            return _read_text(path), str(path)
        except (OSError, UnicodeDecodeError) as e:
            raise SourceUnavailableError(
                f"cannot read wordlist file {str(path)}: {e}") from e
    # Try cached downloaded list
    try:
        text = _read_text(WORDLIST_CACHE_PATH)
        log.debug("Using cached wordlist %s", WORDLIST_CACHE_PATH)
        return text, str(WORDLIST_CACHE_PATH)
    except FileNotFoundError:
        pass
    except UnicodeDecodeError:
        log.debug("Cached wordlist %s is corrupted", WORDLIST_CACHE_PATH)
    except OSError as e:
        raise SourceUnavailableError(
            f"cannot read cached wordlist {str(WORDLIST_CACHE_PATH)}: {e}") from e
    # Try web download
    import urllib.request
    log.debug("Downloading wordlist %s", WORDLIST_WEB_URL)
    try:
        with urllib.request.urlopen(WORDLIST_WEB_URL) as f:
            content = f.read()
        text = content.decode('utf-8')
    except (OSError, UnicodeDecodeError) as e:
        raise SourceUnavailableError(
            f"cannot download wordlist {WORDLIST_WEB_URL}: {e}") from e
    _write_cache(content)
    return text, str(WORDLIST_CACHE_PATH)


def _write_cache(content: bytes):
    """Write `content` to temporary file, then move it over the cache file."""
    cache_tmp = WORDLIST_CACHE_PATH.with_suffix(WORDLIST_CACHE_PATH.suffix + '.tmp')
    try:
        WORDLIST_CACHE_PATH.parent.mkdir(0o700, parents=True, exist_ok=True)
        with open(cache_tmp, 'wb') as f:
            f.write(content)
        cache_tmp.replace(WORDLIST_CACHE_PATH)
    except OSError as e:
        if cache_tmp.is_file():
            cache_tmp.unlink()
        raise SourceUnavailableError(
            f"cannot write cached wordlist {str(WORDLIST_CACHE_PATH)}: {e}") from e
