from .errors import (DicephraseError, ConfigurationError, SourceUnavailableError,
                     EntropySourceError, WordNotFoundError, RegenerationExhaustedError)
from .generator import generate_passphrase, PassphraseBuilder
from .wordlist import WordList, load_wordlist_text
