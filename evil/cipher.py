"""
Ciphers

Message transforms used when the villain shares plans with his sidekick.
The villain only relies on ``transform(secret, key)`` being a pure function
of its inputs; ShiftCipher is a toy, not cryptography.
"""

from __future__ import annotations

import string
from typing import Protocol, runtime_checkable

ALPHABET_SIZE = len(string.ascii_lowercase)


@runtime_checkable
class Cipher(Protocol):
    """Turns a secret into ciphertext with a shared key."""

    def transform(self, secret: str, key: str) -> str: ...


class ShiftCipher:
    """Shifts ASCII letters by an offset derived from the key.

    Non-letters pass through untouched and case is preserved. An empty key
    (or one whose offset is a multiple of 26) leaves the text unchanged.
    """

    @staticmethod
    def offset(key: str) -> int:
        return sum(ord(c) for c in key) % ALPHABET_SIZE

    def transform(self, secret: str, key: str) -> str:
        return self._shift(secret, self.offset(key))

    def reverse(self, ciphertext: str, key: str) -> str:
        """Undo transform() for the same key."""
        return self._shift(ciphertext, -self.offset(key))

    @staticmethod
    def _shift(text: str, offset: int) -> str:
        shifted = []
        for char in text:
            if char in string.ascii_lowercase:
                base = ord("a")
            elif char in string.ascii_uppercase:
                base = ord("A")
            else:
                shifted.append(char)
                continue
            shifted.append(chr(base + (ord(char) - base + offset) % ALPHABET_SIZE))
        return "".join(shifted)
