"""
Command line driver for b3jones.

Enumerates every canonical braid up to a length bound, prints summary
statistics and reports the last canonical length at which some Jones
polynomial has a non-zero coefficient at a given exponent.

Usage:
    b3jones --max-length 12
    python -m b3jones --max-length 8 --workers 4 --output results.json
"""

import argparse
import sys
from typing import List, Optional

from .burau import find_duplicate_braids
from .config import EnumerationConfig
from .enumerator import BraidJonesEnumerator


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Jones polynomials of all canonical 3-strand braids up to a length"
    )
    parser.add_argument("--max-length", type=int, default=10,
                        help="Upper limit on canonical braid length (default: 10)")
    parser.add_argument("--workers", type=int, default=1,
                        help="Worker processes per generation (default: 1, 0 = CPU count)")
    parser.add_argument("--exponent", type=int, default=0,
                        help="Exponent whose coefficient is scanned (default: 0)")
    parser.add_argument("--truncated-parity", action="store_true",
                        help="Use the truncating-remainder writhe sign")
    parser.add_argument("--output", type=str, default=None,
                        help="Save records and statistics to this JSON file")
    parser.add_argument("--list", action="store_true",
                        help="Print every braid with its Jones polynomial")
    parser.add_argument("--audit", type=int, default=None, metavar="LENGTH",
                        help="Report canonical braids up to LENGTH that are equal in B_3")
    parser.add_argument("--quiet", action="store_true",
                        help="Reduce output verbosity")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    try:
        config = EnumerationConfig(
            max_length=args.max_length,
            num_workers=args.workers or None,
            truncated_parity=args.truncated_parity,
            zero_exponent=args.exponent,
            verbose=not args.quiet,
        )
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    result = BraidJonesEnumerator(config).run()

    if args.list:
        for r in result.records:
            print(f"{str(r.braid):<40} {r.jones}")

    if not args.quiet:
        print(result.summary())
    print(f"Total braids: {len(result)}")
    print(f"Last zero-index change braid len: {result.last_nonzero_length(config.zero_exponent)}")

    if args.audit is not None:
        duplicates = find_duplicate_braids(args.audit)
        print(f"Equal canonical braids up to length {args.audit}: {len(duplicates)}")
        for first, second in duplicates:
            print(f"  {first}  ==  {second}")

    if args.output:
        result.save(args.output)
        print(f"\nResults saved to: {args.output}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
