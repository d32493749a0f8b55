import itertools

import pytest


def all_ids():
    return (''.join(digits) for digits in itertools.product('123456', repeat=5))


def make_word(i):
    """Distinct three-letter word for index `i`, e.g. 0 -> 'aaa'"""
    letters = []
    for _ in range(3):
        i, r = divmod(i, 26)
        letters.append(chr(ord('a') + r))
    return ''.join(reversed(letters))


@pytest.fixture()
def wordlist_text():
    """Complete 7776 word list, wrapped in PGP armor like the published diceware list."""
    lines = ["-----BEGIN PGP SIGNED MESSAGE-----",
             "Hash: SHA1",
             ""]
    for i, word_id in enumerate(all_ids()):
        if word_id == '66665':
            word = '?'
        elif word_id == '66666':
            word = '??'
        else:
            word = make_word(i)
        lines.append(f"{word_id}\t{word}")
    lines += ["",
              "-----BEGIN PGP SIGNATURE-----",
              "iEYEARECAAYFAk3q2YYACgkQ",
              "-----END PGP SIGNATURE-----"]
    return '\n'.join(lines) + '\n'


@pytest.fixture()
def wordlist_file(tmp_path, wordlist_text):
    path = tmp_path / 'test.wordlist.asc'
    path.write_text(wordlist_text, encoding='utf-8')
    return path
