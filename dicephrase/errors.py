# DicephraseError and friends
# (raised to the caller with context, never logged by the generator)
#


class DicephraseError(Exception):

    """Base for all errors reported by dicephrase."""


class ConfigurationError(DicephraseError):

    """Rejected separator, word count or attempt limit.

    Raised before any entropy is consumed.

    """


class SourceUnavailableError(DicephraseError):

    """Word list content could not be obtained."""


class EntropySourceError(DicephraseError):

    """The secure random number generator failed. Not retried."""


class WordNotFoundError(DicephraseError):

    def __init__(self, word_id: str, source: str):
        DicephraseError.__init__(
            self, f"cannot find word with the ID {word_id} in wordlist {source}")
        self.word_id = word_id
        self.source = source


class RegenerationExhaustedError(DicephraseError):

    def __init__(self, attempts: int, min_chars: int):
        DicephraseError.__init__(
            self, f"no passphrase longer than {min_chars} characters "
                  f"after {attempts} attempts")
        self.attempts = attempts
