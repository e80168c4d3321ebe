from __future__ import annotations
import logging
from typing import Dict, List, Sequence, Set, Tuple
import numpy as np
from .groups import Triple, find_triples_for_answer
from .signature import DEFAULT_REFERENCE_LETTERS, Signature
from .types import Packing

logger = logging.getLogger(__name__)

Bins = Dict[int, List[Triple]]

DEFAULT_REFERENCE = Signature.from_letters(DEFAULT_REFERENCE_LETTERS)

# Rows of the left bin compared per numpy block in scan_and_merge.
BLOCK_ROWS = 1024

# Compare-and-swap pairs merging two ascending runs of three into six.
MERGE_NETWORK: Tuple[Tuple[int, int], ...] = (
    (0, 3), (1, 4), (2, 5),
    (1, 3), (2, 4),
    (2, 3),
    (1, 2), (4, 5),
    (3, 4),
)

def merge_sorted_triples(t1: Sequence[int], t2: Sequence[int]) -> List[int]:
    s = [t1[0], t1[1], t1[2], t2[0], t2[1], t2[2]]
    for i, j in MERGE_NETWORK:
        if s[i] > s[j]:
            s[i], s[j] = s[j], s[i]
    return s

def partition_triples(triples: Sequence[Triple], reference: int = DEFAULT_REFERENCE) -> Bins:
    """
    Group triples by key = reference & triple.mask.

    Disjoint triples always have disjoint keys, so a pair of bins whose
    keys overlap holds no disjoint triple pair. The converse does not hold.
    """
    bins: Bins = {}
    for t in triples:
        bins.setdefault(reference & t.mask, []).append(t)
    return bins

def _bin_masks(triples: List[Triple]) -> np.ndarray:
    return np.fromiter((t.mask for t in triples), dtype=np.int64, count=len(triples))

def scan_and_merge(bins: Bins, answer: int) -> Set[Packing]:
    """
    Combine triples from every admissible pair of bins into packings.

    Each unordered pair of bins (a bin with itself included) is skipped when
    the keys intersect; otherwise the full masks of the cross product are
    checked and every disjoint pair is merged into a sorted packing.
    """
    keys = list(bins)
    masks = {key: _bin_masks(bins[key]) for key in keys}
    packings: Set[Packing] = set()
    compared = 0

    for pos, key1 in enumerate(keys):
        triples1, masks1 = bins[key1], masks[key1]
        for key2 in keys[pos:]:
            if key1 & key2:
                continue
            triples2, masks2 = bins[key2], masks[key2]
            compared += len(triples1) * len(triples2)

            for start in range(0, len(triples1), BLOCK_ROWS):
                block = masks1[start:start + BLOCK_ROWS]
                rows, cols = np.nonzero((block[:, None] & masks2[None, :]) == 0)
                for x, y in zip(rows.tolist(), cols.tolist()):
                    guesses = merge_sorted_triples(triples1[start + x].signatures, triples2[y].signatures)
                    packings.add(Packing(answer, guesses))

    logger.debug("answer %s: %d bins, %d triple pairs verified, %d packings", Signature(answer).letters(), len(keys), compared, len(packings))
    return packings

def pack_for_answer(guess_signatures: Sequence[int], answer: int, reference: int = DEFAULT_REFERENCE) -> Set[Packing]:
    triples = find_triples_for_answer(answer, guess_signatures)
    if len(triples) < 2:
        return set()
    bins = partition_triples(triples, reference)
    return scan_and_merge(bins, answer)
