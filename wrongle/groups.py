from __future__ import annotations
from typing import Iterable, List, NamedTuple, Sequence, Tuple
import numpy as np
from .signature import Signature

class Triple(NamedTuple):
    signatures: Tuple[int, int, int]
    mask: int

def compile_signatures(answers: Iterable[str], guesses: Iterable[str]) -> Tuple[Tuple[Signature, ...], Tuple[Signature, ...]]:
    # Anagrams collapse to one entry; from here on only membership matters.
    answer_signatures = tuple(sorted({Signature.from_word(w) for w in answers}))
    guess_signatures = tuple(sorted({Signature.from_word(w) for w in guesses}))
    return answer_signatures, guess_signatures

def compatible_guesses(answer: int, guess_signatures: Sequence[int]) -> List[int]:
    # A guess sharing any letter with the answer can never be part of its packing.
    return [g for g in guess_signatures if g & answer == 0]

def find_triples_for_answer(answer: int, guess_signatures: Sequence[int]) -> List[Triple]:
    """
    Enumerate all pairwise-disjoint triples i < j < k among the guesses
    compatible with `answer`.

    Pairs (i, j) that share a letter are dropped before any k is looked at;
    k is then tested against ci | cj with a single AND. Both steps run as
    numpy filters over the remaining candidates.
    """
    candidates = np.array(compatible_guesses(answer, guess_signatures), dtype=np.int64)
    triples: List[Triple] = []

    for i in range(len(candidates) - 2):
        ci = int(candidates[i])
        rest = candidates[i + 1:]
        partners = rest[(rest & ci) == 0]

        for jpos in range(len(partners) - 1):
            cj = int(partners[jpos])
            pair = ci | cj
            # partners are already disjoint from ci, so only the k filter remains
            tail = partners[jpos + 1:]
            for ck in tail[(tail & pair) == 0].tolist():
                triples.append(Triple((ci, cj, ck), pair | ck))

    return triples
