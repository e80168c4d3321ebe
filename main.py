from __future__ import annotations
import argparse
import json
import logging
import sys
from pathlib import Path
from wrongle.app import SolveParams, solve_wordle
from wrongle.io_utils import load_words
from wrongle.signature import DEFAULT_REFERENCE_LETTERS

def setup_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

def positive_int(value: str) -> int:
    n = int(value)
    if n < 1:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value}")
    return n

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Find every optimally bad Wordle game: six guesses sharing no letter with the answer or each other.")
    parser.add_argument("--answers", type=str, required=True, help="Path to the answer word list (one word per line).")
    parser.add_argument("--guesses", type=str, required=True, help="Path to the guess word list (one word per line).")
    parser.add_argument("--workers", type=positive_int, default=None, help="Worker processes (1 = run in this process; default: all CPUs).")
    parser.add_argument("--reference", type=str, default=DEFAULT_REFERENCE_LETTERS, help="Letters used to bin triples while packing.")
    parser.add_argument("--auto-reference", action="store_true", help="Derive the binning letters from the guess list instead.")
    parser.add_argument("--output", type=str, help="Write the solutions as JSON to this path.")
    parser.add_argument("--packings", action="store_true", help="Include letter-set packings in JSON output.")
    parser.add_argument("--json", action="store_true", help="Print JSON output.")
    parser.add_argument("--progress", action="store_true", help="Show progress bars.")
    parser.add_argument("--debug", action="store_true", help="Print debug diagnostics.")
    return parser

def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.debug)

    try:
        answers = load_words(args.answers)
        guesses = load_words(args.guesses)
    except FileNotFoundError as e:
        print(f"Input error: {e}")
        return 1

    if args.debug:
        print(f"Answers (count={len(answers)}), guesses (count={len(guesses)})")

    params = SolveParams(
        workers=args.workers,
        reference=args.reference,
        auto_reference=args.auto_reference,
        include_packings=args.packings,
        progress=args.progress,
    )
    result = solve_wordle(answers, guesses, params)

    if not result["ok"]:
        print(f"Input error: {result['error']}")
        print("Tip: word lists need five-letter words, a-z only, one per line.")
        return 1

    stats = result["stats"]
    if args.output:
        Path(args.output).write_text(json.dumps(result["solutions"]), encoding="utf-8")

    # JSON
    if args.json:
        print(json.dumps(result, indent=2))
        return 0

    # Default output
    print(f"There are {stats['solutions']} (optimally bad) wordle solutions.")

    if args.debug:
        print(f"Reference letters: {result['params']['reference']}")
        print(f"Packings: {stats['packings']}")
        print(f"Packing completed in {stats['pack_seconds']:.3f} seconds")
        print(f"Realizing completed in {stats['realize_seconds']:.3f} seconds")
        for s in result["solutions"][:5]:
            print(f"  {s['answer']}: {', '.join(s['guesses'])}")
    return 0

if __name__ == "__main__":
    sys.exit(main())
