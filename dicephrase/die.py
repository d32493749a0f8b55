# Die
# (virtual die backed by a secure random source)
#

from . import backend
from .errors import EntropySourceError


class Die:

    """A fair die with faces `min_roll` .. `max_roll`.

    Every roll is drawn by rejection sampling, never by modulo reduction,
    so each face has exactly the same probability.

    """

    def __init__(self, min_roll: int = 1, max_roll: int = 6, randombytes=None):
        if not 1 <= min_roll <= max_roll:
            raise ValueError(f"invalid die faces: {min_roll}..{max_roll}")
        self.min_roll = min_roll
        self.max_roll = max_roll
        self._randombytes = randombytes or backend.randombytes

    def __repr__(self):
        return f"Die({self.min_roll}, {self.max_roll})"

    def roll(self) -> int:
        """Roll the die once."""
        while True:
            value = self._randbelow(self.max_roll + 1)
            if value >= self.min_roll:
                return value

    def _randbelow(self, n: int) -> int:
        """Uniform integer in [0, n)"""
        k = n.bit_length()
        num_bytes = (k + 7) // 8
        while True:
            data = self._random_bytes(num_bytes)
            r = int.from_bytes(data, 'big') >> (num_bytes * 8 - k)
            if r < n:
                return r

    def _random_bytes(self, num_bytes: int) -> bytes:
        try:
            data = self._randombytes(num_bytes)
        except (OSError, RuntimeError) as e:
            raise EntropySourceError(f"cannot source enough entropy: {e}") from e
        if len(data) != num_bytes:
            raise EntropySourceError(
                f"cannot source enough entropy: got {len(data)} of {num_bytes} bytes")
        return data
