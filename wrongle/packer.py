from __future__ import annotations
import concurrent.futures
import logging
from functools import partial
from typing import Iterable, Iterator, Optional, Sequence, Set
from tqdm import tqdm
from .groups import compile_signatures
from .search import DEFAULT_REFERENCE, pack_for_answer
from .types import Packing

logger = logging.getLogger(__name__)

def map_tasks(func, items: Sequence, workers: Optional[int] = None, chunksize: int = 1) -> Iterator:
    # In this process when workers == 1, on a process pool otherwise.
    if workers == 1 or len(items) <= 1:
        yield from map(func, items)
        return
    with concurrent.futures.ProcessPoolExecutor(max_workers=workers) as executor:
        yield from executor.map(func, items, chunksize=chunksize)

def pack(
    answers: Iterable[str],
    guesses: Iterable[str],
    reference: int = DEFAULT_REFERENCE,
    workers: Optional[int] = None,
    progress: bool = False,
) -> Set[Packing]:
    """
    Find every packing of one answer and six guesses with no shared letter.

    One task per distinct answer signature; per-answer results are merged
    by set union.
    """
    answer_signatures, guess_signatures = compile_signatures(answers, guesses)
    logger.info("Packing %d answer signatures against %d guess signatures", len(answer_signatures), len(guess_signatures))

    func = partial(pack_for_answer, guess_signatures, reference=reference)
    results = map_tasks(func, answer_signatures, workers=workers)
    if progress:
        results = tqdm(results, total=len(answer_signatures), desc="Packing", unit="answer")

    packings: Set[Packing] = set()
    for found in results:
        packings.update(found)

    logger.info("Found %d packings", len(packings))
    return packings
