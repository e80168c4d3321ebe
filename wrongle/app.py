from __future__ import annotations
from dataclasses import dataclass
from time import perf_counter
from typing import Any, Dict, List, Optional
from .io_utils import parse_words, validate_words
from .packer import pack
from .realizer import realize
from .signature import DEFAULT_REFERENCE_LETTERS, Signature, reference_mask

@dataclass
class SolveParams:
    workers: Optional[int] = None
    reference: str = DEFAULT_REFERENCE_LETTERS
    auto_reference: bool = False
    include_packings: bool = False
    progress: bool = False
    limit: Optional[int] = None

def normalize_words(words: List[str]) -> List[str]:
    return parse_words("\n".join(words))

def solve_wordle(answers: List[str], guesses: List[str], params: SolveParams) -> Dict[str, Any]:
    # Core solver entrypoint for BOTH CLI and Web

    answers = normalize_words(answers)
    guesses = normalize_words(guesses)

    if params.workers is not None and params.workers < 1:
        return {"ok": False, "error": f"workers: expected a positive integer, got {params.workers}"}

    for name, words in (("answers", answers), ("guesses", guesses)):
        ok, msg = validate_words(words)
        if not ok:
            return {"ok": False, "error": f"{name}: {msg}"}

    if params.auto_reference:
        reference = reference_mask(guesses)
    else:
        letters = params.reference.lower()
        if not letters or not all("a" <= c <= "z" for c in letters):
            return {"ok": False, "error": f"reference: expected letters a-z, got {params.reference!r}"}
        reference = Signature.from_letters(letters)

    t0 = perf_counter()
    packings = pack(answers, guesses, reference=reference, workers=params.workers, progress=params.progress)
    t1 = perf_counter()
    solutions = realize(answers, guesses, packings, workers=params.workers, progress=params.progress)
    t2 = perf_counter()

    ordered = sorted(solutions, key=lambda s: (s.answer, s.guesses))
    if params.limit is not None:
        ordered = ordered[: params.limit]

    # Build response
    resp: Dict[str, Any] = {
        "ok": True,
        "params": {
            "workers": params.workers,
            "reference": reference.letters(),
            "auto_reference": params.auto_reference,
            "limit": params.limit,
        },
        "stats": {
            "answers": len(answers),
            "guesses": len(guesses),
            "packings": len(packings),
            "solutions": len(solutions),
            "pack_seconds": round(t1 - t0, 3),
            "realize_seconds": round(t2 - t1, 3),
        },
        "solutions": [s.to_dict() for s in ordered],
    }

    if params.include_packings:
        resp["packings"] = [p.to_dict() for p in sorted(packings, key=lambda p: p.signatures())]
    return resp
