"""Script to parse a file of recipe ingredient lines into shopping-list items.

Run with: uv run python scripts/parse_file.py ingredients.txt
Read from stdin: cat ingredients.txt | uv run python scripts/parse_file.py -
JSON output: uv run python scripts/parse_file.py ingredients.txt --json
"""

import argparse
import json
import sys

from shoplist.config import get_settings
from shoplist.parse import parse_ingredients_concurrently, split_raw_text


def read_text(path: str) -> str:
    """Read the input file, or stdin when path is "-"."""
    if path == "-":
        return sys.stdin.read()
    with open(path, encoding="utf-8") as f:
        return f.read()


def main():
    parser = argparse.ArgumentParser(description="Parse ingredient lines into quantity and item")
    parser.add_argument("path", help="Text file with one ingredient per line, or - for stdin")
    parser.add_argument("--json", "-j", action="store_true", help="Print results as JSON")
    parser.add_argument(
        "--workers",
        "-w",
        type=int,
        default=get_settings().parser_max_workers,
        help="Number of parser threads",
    )

    args = parser.parse_args()

    lines = split_raw_text(read_text(args.path))
    results = parse_ingredients_concurrently(lines, max_workers=args.workers)

    if args.json:
        print(json.dumps([result.to_dict() for result in results], indent=2))
        return

    print(f"\n{'QUANTITY':<16} | ITEM")
    print("-" * 60)
    for result in results:
        print(f"{result.quantity:<16} | {result.item}")
    print(f"\n({len(results)} of {len(lines)} lines kept)\n")


if __name__ == "__main__":
    main()
