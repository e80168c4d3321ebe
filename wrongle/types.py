from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Tuple
from .signature import Signature

Word = str
Guesses = Tuple[Word, Word, Word, Word, Word, Word]

GUESS_COUNT = 6

class InvariantError(RuntimeError):
    """
    A packing refers to a signature that the word lists do not contain.

    Unreachable when packings and realizations are built from the same
    vocabularies; raised so a mismatch fails loudly instead of dropping rows.
    """

def _canonical(items: tuple) -> tuple:
    if any(a > b for a, b in zip(items, items[1:])):
        return tuple(sorted(items))
    return tuple(items)

@dataclass(frozen=True)
class Packing:
    """One answer signature plus six pairwise-disjoint guess signatures."""

    answer: Signature
    guesses: Tuple[Signature, ...]

    def __post_init__(self) -> None:
        if len(self.guesses) != GUESS_COUNT:
            raise ValueError(f"Expected {GUESS_COUNT} guesses, got {len(self.guesses)}.")
        object.__setattr__(self, "answer", Signature(self.answer))
        object.__setattr__(self, "guesses", _canonical(tuple(Signature(g) for g in self.guesses)))

    def signatures(self) -> Tuple[Signature, ...]:
        return (self.answer,) + self.guesses

    def to_dict(self) -> Dict[str, Any]:
        return {
            "answer": self.answer.letters(),
            "guesses": [g.letters() for g in self.guesses],
        }

@dataclass(frozen=True)
class Solution:
    answer: Word
    guesses: Guesses

    def __post_init__(self) -> None:
        if len(self.guesses) != GUESS_COUNT:
            raise ValueError(f"Expected {GUESS_COUNT} guesses, got {len(self.guesses)}.")
        object.__setattr__(self, "guesses", _canonical(tuple(self.guesses)))

    def to_dict(self) -> Dict[str, Any]:
        return {"answer": self.answer, "guesses": list(self.guesses)}
