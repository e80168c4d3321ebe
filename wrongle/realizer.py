from __future__ import annotations
import logging
import math
from functools import partial
from itertools import product
from typing import Collection, Dict, Iterable, List, Optional, Set, Tuple
from tqdm import tqdm
from .packer import map_tasks
from .signature import Signature
from .types import InvariantError, Packing, Solution, Word

logger = logging.getLogger(__name__)

Realizations = Dict[Signature, List[Word]]

def group_by_signature(words: Iterable[Word]) -> Realizations:
    groups: Realizations = {}
    for w in words:
        group = groups.setdefault(Signature.from_word(w), [])
        if w not in group:
            group.append(w)
    return groups

def compile_realizations(answers: Iterable[Word], guesses: Iterable[Word]) -> Tuple[Realizations, Realizations]:
    return group_by_signature(answers), group_by_signature(guesses)

def _groups_for(answer_groups: Realizations, guess_groups: Realizations, packing: Packing) -> List[List[Word]]:
    try:
        return [answer_groups[packing.answer]] + [guess_groups[g] for g in packing.guesses]
    except KeyError as e:
        missing = Signature(e.args[0]).letters()
        raise InvariantError(f"Packing refers to letters {missing!r} that no word in the given lists has.") from e

def realization_count(answer_groups: Realizations, guess_groups: Realizations, packing: Packing) -> int:
    # Before deduplication.
    return math.prod(len(g) for g in _groups_for(answer_groups, guess_groups, packing))

def realize_packing(answer_groups: Realizations, guess_groups: Realizations, packing: Packing) -> Set[Solution]:
    """
    Every word-level solution a packing stands for: the Cartesian product of
    its seven anagram groups, with guesses sorted.
    """
    groups = _groups_for(answer_groups, guess_groups, packing)
    return {Solution(words[0], words[1:]) for words in product(*groups)}

def realize(
    answers: Collection[Word],
    guesses: Collection[Word],
    packings: Collection[Packing],
    workers: Optional[int] = None,
    progress: bool = False,
) -> Set[Solution]:
    answer_groups, guess_groups = compile_realizations(answers, guesses)
    ordered = sorted(packings, key=lambda p: p.signatures())
    logger.info("Realizing %d packings", len(ordered))

    func = partial(realize_packing, answer_groups, guess_groups)
    chunksize = max(1, len(ordered) // 256)
    results = map_tasks(func, ordered, workers=workers, chunksize=chunksize)
    if progress:
        results = tqdm(results, total=len(ordered), desc="Realizing", unit="packing")

    solutions: Set[Solution] = set()
    for found in results:
        solutions.update(found)

    logger.info("Realized %d solutions", len(solutions))
    return solutions
