import random
from itertools import combinations, permutations

import pytest

from wrongle.groups import compatible_guesses, compile_signatures, find_triples_for_answer
from wrongle.packer import pack
from wrongle.search import DEFAULT_REFERENCE, merge_sorted_triples, pack_for_answer, partition_triples, scan_and_merge
from wrongle.signature import Signature, reference_mask
from wrongle.types import Packing

EXPECTED = Packing(
    Signature.from_letters("abcd"),
    tuple(Signature.from_letters(g) for g in ["efgh", "ijkl", "mnop", "qrst", "uvw", "xyz"]),
)


def test_compile_signatures_dedups_and_sorts(answers, guesses) -> None:
    answer_sigs, guess_sigs = compile_signatures(answers, guesses)
    assert len(answer_sigs) == 2
    assert len(guess_sigs) == 8
    assert list(guess_sigs) == sorted(guess_sigs)


def test_compatible_guesses_drop_shared_letters(guesses) -> None:
    _, guess_sigs = compile_signatures([], guesses)
    answer = Signature.from_word("abcda")
    compatible = compatible_guesses(answer, guess_sigs)
    assert Signature.from_word("aeiou") not in compatible
    assert len(compatible) == 7


def test_triples_are_pairwise_disjoint(guesses) -> None:
    _, guess_sigs = compile_signatures([], guesses)
    triples = find_triples_for_answer(Signature.from_word("abcda"), guess_sigs)

    # any three of the six disjoint groups; "ejmqu" has only one compatible partner
    assert len(triples) == 20
    for t in triples:
        a, b, c = t.signatures
        assert a < b < c
        assert a & b == 0 and a & c == 0 and b & c == 0
        assert t.mask == a | b | c


def test_merge_network_sorts_every_split() -> None:
    values = [3, 17, 40, 41, 500, 9000]
    for left in combinations(values, 3):
        right = tuple(v for v in values if v not in left)
        assert merge_sorted_triples(left, right) == values
        assert merge_sorted_triples(right, left) == values


def test_partition_keys_of_disjoint_triples_are_disjoint(guesses) -> None:
    _, guess_sigs = compile_signatures([], guesses)
    triples = find_triples_for_answer(Signature.from_word("abcda"), guess_sigs)
    bins = partition_triples(triples, DEFAULT_REFERENCE)

    assert sum(len(b) for b in bins.values()) == len(triples)
    for key, members in bins.items():
        assert all(DEFAULT_REFERENCE & t.mask == key for t in members)
    for t1, t2 in combinations(triples, 2):
        if t1.mask & t2.mask == 0:
            assert (DEFAULT_REFERENCE & t1.mask) & (DEFAULT_REFERENCE & t2.mask) == 0


def test_single_packing_scenario(answers, guesses) -> None:
    packings = pack(answers, guesses, workers=1)
    assert packings == {EXPECTED}


def test_every_packing_is_pairwise_disjoint(answers, guesses) -> None:
    for packing in pack(answers, guesses, workers=1):
        sigs = packing.signatures()
        assert len(sigs) == 7
        for a, b in combinations(sigs, 2):
            assert a.disjoint(b)


def test_answer_without_six_disjoint_guesses_yields_nothing(guesses) -> None:
    _, guess_sigs = compile_signatures([], guesses)
    assert pack_for_answer(guess_sigs, Signature.from_word("aeiou")) == set()
    assert pack(["aeiou"], guesses, workers=1) == set()


def test_five_disjoint_guesses_are_not_enough() -> None:
    guesses = ["efghe", "ijkli", "mnopm", "qrstq", "uvwuu"]
    assert pack(["abcda"], guesses, workers=1) == set()


def test_packing_is_permutation_invariant() -> None:
    seen = {Packing(EXPECTED.answer, perm) for perm in permutations(EXPECTED.guesses)}
    assert seen == {EXPECTED}
    assert Packing(EXPECTED.answer, EXPECTED.guesses[::-1]).guesses == EXPECTED.guesses


def test_packing_requires_six_guesses() -> None:
    with pytest.raises(ValueError):
        Packing(EXPECTED.answer, EXPECTED.guesses[:5])


def test_bin_order_does_not_matter(guesses) -> None:
    _, guess_sigs = compile_signatures([], guesses)
    answer = Signature.from_word("abcda")
    bins = partition_triples(find_triples_for_answer(answer, guess_sigs))
    reversed_bins = dict(reversed(list(bins.items())))
    assert scan_and_merge(bins, answer) == scan_and_merge(reversed_bins, answer) == {EXPECTED}


def test_reference_choice_does_not_change_result(answers, guesses) -> None:
    baseline = pack(answers, guesses, workers=1)
    for reference in [reference_mask(guesses), Signature.from_letters("aeiou"), Signature(0)]:
        assert pack(answers, guesses, reference=reference, workers=1) == baseline


def test_input_order_and_pool_do_not_matter(answers, guesses) -> None:
    shuffled = list(guesses)
    random.Random(7).shuffle(shuffled)
    baseline = pack(answers, guesses, workers=1)
    assert pack(list(reversed(answers)), shuffled, workers=1) == baseline
    assert pack(answers, guesses + guesses, workers=2) == baseline


def brute_force_packings(answers, guesses) -> set:
    answer_sigs, guess_sigs = compile_signatures(answers, guesses)
    found = set()

    def extend(answer, chosen, used, start) -> None:
        if len(chosen) == 6:
            found.add(Packing(answer, chosen))
            return
        for pos in range(start, len(guess_sigs)):
            g = guess_sigs[pos]
            if g & used == 0:
                extend(answer, chosen + [g], used | g, pos + 1)

    for answer in answer_sigs:
        extend(answer, [], int(answer), 0)
    return found


def random_words(rng: random.Random, count: int) -> list:
    alphabet = "abcdefghijklmnopqrstuvwxyz"
    words = []
    for _ in range(count):
        letters = rng.sample(alphabet, rng.randint(2, 4))
        chars = letters + [rng.choice(letters) for _ in range(5 - len(letters))]
        rng.shuffle(chars)
        words.append("".join(chars))
    return words


def test_pack_matches_brute_force_on_random_vocabularies() -> None:
    rng = random.Random(2024)
    sizes = []
    largest_bin = 0

    for _ in range(25):
        answers = random_words(rng, 6)
        guesses = random_words(rng, 60)
        expected = brute_force_packings(answers, guesses)
        sizes.append(len(expected))

        for reference in [DEFAULT_REFERENCE, reference_mask(guesses), Signature(0)]:
            found = pack(answers, guesses, reference=reference, workers=1)
            assert found == expected
            for packing in found:
                for a, b in combinations(packing.signatures(), 2):
                    assert a.disjoint(b)

        _, guess_sigs = compile_signatures([], guesses)
        for answer in compile_signatures(answers, [])[0]:
            bins = partition_triples(find_triples_for_answer(answer, guess_sigs))
            largest_bin = max([largest_bin] + [len(b) for b in bins.values()])

    # the vocabularies are dense enough to exercise multi-packing answers and crowded bins
    assert max(sizes) > 1
    assert largest_bin > 1
