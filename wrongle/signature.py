from __future__ import annotations
from typing import Iterable
import numpy as np

ALPHABET = "abcdefghijklmnopqrstuvwxyz"
ALPHABET_SIZE = len(ALPHABET)
WORD_LENGTH = 5

# Ten most frequent letters across the standard Wordle guess list.
DEFAULT_REFERENCE_LETTERS = "seaoriltnu"

class Signature(int):
    """
    Bitmask of a word's unique letters.

    Bit i is set when letter chr(ord('a') + i) occurs in the word, so
    "slate", "steal" and "tales" all map to the same Signature. Equality,
    hashing and ordering are those of the underlying integer.
    """

    __slots__ = ()

    @classmethod
    def from_word(cls, word: str) -> "Signature":
        # Stripped under -O; callers validate words before they get here.
        assert len(word) == WORD_LENGTH and all(c in ALPHABET for c in word), f"not a 5-letter a-z word: {word!r}"
        mask = 0
        for c in word:
            mask |= 1 << (ord(c) - 97)
        return cls(mask)

    @classmethod
    def from_letters(cls, letters: str) -> "Signature":
        mask = 0
        for c in letters:
            mask |= 1 << (ord(c) - 97)
        return cls(mask)

    @classmethod
    def from_mask(cls, mask: int) -> "Signature":
        return cls(mask)

    @property
    def mask(self) -> int:
        return int(self)

    def disjoint(self, other: int) -> bool:
        return self & other == 0

    def union(self, other: int) -> "Signature":
        return Signature(int(self) | int(other))

    def intersection(self, other: int) -> "Signature":
        return Signature(int(self) & int(other))

    def letter_count(self) -> int:
        return bin(self).count("1")

    def letters(self) -> str:
        return "".join(c for i, c in enumerate(ALPHABET) if self >> i & 1)

    def __repr__(self) -> str:
        return f"Signature({int(self):026b})"

def reference_mask(guesses: Iterable[str], size: int = 10) -> Signature:
    """
    Union of the `size` most frequent letters across the unique guess words.

    Letters are counted with multiplicity inside each word; ties go to the
    earlier letter of the alphabet.
    """
    unique = sorted(set(guesses))
    if not unique:
        return Signature.from_letters(DEFAULT_REFERENCE_LETTERS[:size])

    codes = np.frombuffer("".join(unique).encode("ascii"), dtype=np.uint8) - ord("a")
    counts = np.bincount(codes, minlength=ALPHABET_SIZE)

    # stable sort on the negated counts keeps alphabetical order among ties
    ranked = np.argsort(-counts, kind="stable")[:size]
    return Signature.from_letters("".join(ALPHABET[i] for i in ranked if counts[i] > 0))
