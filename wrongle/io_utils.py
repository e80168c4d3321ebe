from __future__ import annotations
import re
from pathlib import Path
from typing import List, Tuple
from .signature import WORD_LENGTH

_word_re = re.compile(rf"[a-z]{{{WORD_LENGTH}}}")

def parse_words(text: str) -> List[str]:
    """
    Parse a word list from raw text
    Rules:
    - Words are separated by newlines, commas or whitespace
    - Quotes around words are dropped (JSON-ish lists paste fine)
    - Normalize by stripping and lowercasing
    - Blank entries are skipped; duplicates are kept
    """
    words: List[str] = []
    for p in re.split(r"[\s,]+", text.strip()):
        p = p.strip().strip("\"'[]").lower()
        if not p:
            continue
        words.append(p)
    return words

def load_words(path: str | Path) -> List[str]:
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Word list file not found: {path}")
    return parse_words(path.read_text(encoding="utf-8"))

def validate_words(words: List[str]) -> Tuple[bool, str]:
    if not words:
        return False, "Word list is empty."

    bad = [w for w in words if not _word_re.fullmatch(w)]
    if bad:
        shown = ", ".join(repr(w) for w in sorted(set(bad))[:10])
        return False, f"Expected {WORD_LENGTH}-letter words using a-z only, got {len(bad)} invalid: {shown}"
    return True, ""
