import pytest

# Seven mutually disjoint letter groups covering a-z:
#   abcd | efgh | ijkl | mnop | qrst | uvw | xyz
# Anagram group sizes are 2, 2, 1, 3, 1, 1, 2, so one packing realizes 24 ways.
ANSWERS = ["abcda", "badca", "aeiou"]
GUESSES = [
    "efghe", "hgfee",
    "ijkli",
    "mnopm", "pomnm", "nmopm",
    "qrstq",
    "uvwuu",
    "xyzxx", "zyxxx",
    "ejmqu",  # compatible with abcda, overlaps five of the groups
    "aeiou",  # shares letters with abcda
]


@pytest.fixture
def answers() -> list[str]:
    return list(ANSWERS)


@pytest.fixture
def guesses() -> list[str]:
    return list(GUESSES)
