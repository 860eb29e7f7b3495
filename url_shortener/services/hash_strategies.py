"""
Alias (short hash) generation strategies for URL shortener.
Uses Strategy Pattern to allow different generation algorithms.

Every strategy takes the long URL and returns a candidate string; the
shortener truncates it to the configured alias length, whatever the source.
"""

import base64
import hashlib
import random
import re
import secrets
import string
import time
from abc import ABC, abstractmethod
from typing import Callable


NON_ALPHA = re.compile(r"[^a-z]", re.IGNORECASE)


class HashGenerator(ABC):
    """Abstract base class for alias generation strategies"""

    @abstractmethod
    def generate(self, long_url: str) -> str:
        """
        Generate a candidate alias.

        Args:
            long_url: The URL being shortened

        Returns:
            Candidate string; may be longer than the alias length
        """
        pass

    def __call__(self, long_url: str) -> str:
        return self.generate(long_url)


class Sha512HashGenerator(HashGenerator):
    """
    Default strategy.

    Hashes the URL together with a nonce, so two calls with the same URL
    almost never return the same candidate (collision retry relies on it):
    1. sha512(long_url + nonce) as hex
    2. base64 of the hex text
    3. drop every non-letter

    That leaves ~100 letters per round. If a round ever produces fewer than
    min_length letters, it hashes again with a new nonce.
    """

    def __init__(self, min_length: int = 6):
        self.min_length = min_length

    def generate(self, long_url: str) -> str:
        letters = ""
        while len(letters) < self.min_length:
            digest = hashlib.sha512(f"{long_url}{self._nonce()}".encode("utf-8")).hexdigest()
            encoded = base64.b64encode(digest.encode("ascii")).decode("ascii")
            letters += NON_ALPHA.sub("", encoded)
        return letters

    @staticmethod
    def _nonce() -> str:
        return f"{time.time_ns()}.{secrets.token_hex(8)}"


class RandomHashGenerator(HashGenerator):
    """
    Random letters, ignores the URL.

    Pros: Simple, unpredictable
    Cons: No relation to the input at all
    """

    def __init__(self, length: int = 6):
        self.length = length
        self.characters = string.ascii_letters

    def generate(self, long_url: str) -> str:
        return ''.join(random.choice(self.characters) for _ in range(self.length))


class CallableHashGenerator(HashGenerator):
    """Adapts a user supplied function `(long_url) -> str` to the strategy interface"""

    def __init__(self, func: Callable[[str], str]):
        self.func = func

    def generate(self, long_url: str) -> str:
        return self.func(long_url)
