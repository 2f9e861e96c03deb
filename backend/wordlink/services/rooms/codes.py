import random
import string
from typing import Container, Optional

ALPHABET = string.ascii_uppercase + string.digits


class CodeGenerator:
    """Generate short, uppercase room codes unique among active rooms.

    After ``max_attempts`` collisions at the current length the code widens by
    one character, so generation always terminates even when the short code
    space is nearly full.
    """

    def __init__(self, length: int = 4, max_attempts: int = 100, rng: Optional[random.Random] = None):
        if length < 1:
            raise ValueError('length must be positive')
        if max_attempts < 1:
            raise ValueError('max_attempts must be positive')
        self.length = length
        self.max_attempts = max_attempts
        self._rng = rng or random.Random()

    def generate(self, existing_codes: Container[str]) -> str:
        length = self.length
        while True:
            for _ in range(self.max_attempts):
                code = ''.join(self._rng.choices(ALPHABET, k=length))
                if code not in existing_codes:
                    return code
            length += 1
