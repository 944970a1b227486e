"""
Breadth-first enumeration of B_3 with memoized bracket data.

The driver keeps two channels of state:
- the frontier: full BraidData (five brackets and writhe) for every
  canonical braid of the current length, which is all that is needed
  to extend by one more twist;
- the records: the reduced (braid, Jones polynomial) pair for every
  braid visited so far, in enumeration order.

After generation g+1 is built, generation g's BraidData is dropped.
The loop is iterative, so the call stack does not grow with n.

A generation can optionally be expanded by a process pool. Each
braid's children depend only on that braid, executor.map keeps the
parent order, and the next generation is assembled after all workers
return.

Usage:
    from b3jones.enumerator import enumerate_braid_jones
    records = enumerate_braid_jones(6)
    for r in records:
        print(r.braid, r.jones)
"""

import json
import time
from concurrent.futures import ProcessPoolExecutor
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import numpy as np

from .bracket import BraidData, BraidJones
from .config import EnumerationConfig


@dataclass
class EnumerationResult:
    """Records of an enumeration run with statistics."""
    records: List[BraidJones] = field(default_factory=list)
    generation_sizes: List[int] = field(default_factory=list)
    stats: Dict[str, Any] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.records)

    def cumulative_counts(self) -> List[int]:
        """Number of records after each generation."""
        return [int(c) for c in np.cumsum(self.generation_sizes)]

    def branching_factors(self) -> List[float]:
        """Ratio of consecutive generation sizes."""
        sizes = np.asarray(self.generation_sizes, dtype=float)
        if len(sizes) < 2:
            return []
        return [float(r) for r in sizes[1:] / sizes[:-1]]

    def records_of_length(self, length: int) -> List[BraidJones]:
        """Records of braids with exactly the given canonical length."""
        if length < 0 or length >= len(self.generation_sizes):
            return []
        start = sum(self.generation_sizes[:length])
        return self.records[start:start + self.generation_sizes[length]]

    def last_nonzero_length(self, exp: int = 0) -> int:
        """
        Largest canonical length whose Jones polynomial has a non-zero
        coefficient at t^exp, or -1 if no record has one.
        """
        last = -1
        for r in self.records:
            if r.jones.get_coef(exp) != 0:
                last = r.braid.canonical_len()
        return last

    def summary(self) -> str:
        """Human-readable summary of counts, branching and timing."""
        lines = [
            "=" * 60,
            "Braid Jones Enumeration",
            "=" * 60,
            f"Max length: {len(self.generation_sizes) - 1}",
            f"Total braids: {len(self.records)}",
        ]
        for length, size in enumerate(self.generation_sizes):
            lines.append(f"  length {length:3d}: {size}")
        factors = self.branching_factors()
        if factors:
            lines.append(f"Mean branching factor: {np.mean(factors):.3f}")
        if "total_time" in self.stats:
            lines.append(f"Total time: {self.stats['total_time']:.3f}s")
        return "\n".join(lines)

    def to_dict(self) -> Dict[str, Any]:
        """JSON-ready dict: braids as integer codes, polynomials as term lists."""
        return {
            "generation_sizes": list(self.generation_sizes),
            "stats": self.stats,
            "records": [
                {
                    "braid": r.braid.to_int_list(),
                    "jones": [[k, v] for k, v in r.jones.terms()],
                }
                for r in self.records
            ],
        }

    def save(self, filepath: str) -> None:
        """Save records and statistics to a JSON file."""
        with open(filepath, 'w') as f:
            json.dump(self.to_dict(), f, indent=2)


def _expand(item) -> List[BraidData]:
    # Module level so worker processes can unpickle it.
    data, truncated_parity = item
    return data.descendants(truncated_parity)


class BraidJonesEnumerator:
    """
    Computes the Jones polynomial of every canonical braid up to a length.

    Each step expands the frontier one twist further through
    BraidData.descendants(), which costs a fixed number of polynomial
    operations per braid instead of a state sum over its crossings.
    """

    def __init__(self, config: Optional[EnumerationConfig] = None, **options):
        """
        Initialize the enumerator.

        Args:
            config: Run configuration (defaults to EnumerationConfig())
            **options: Field overrides applied to a fresh EnumerationConfig
                when config is not given
        """
        if config is None:
            config = EnumerationConfig(**options)
        elif options:
            raise ValueError("Pass either a config or keyword options, not both")
        self.config = config
        self.stats: Dict[str, Any] = {}

    def run(self, n: Optional[int] = None) -> EnumerationResult:
        """
        Enumerate every canonical braid of length 0..n.

        Args:
            n: Maximal canonical length (defaults to config.max_length)

        Returns:
            EnumerationResult with records ordered by length, then by
            parent order, then by generator order.
        """
        if n is None:
            n = self.config.max_length
        if not isinstance(n, int) or isinstance(n, bool) or n < 0:
            raise ValueError(f"Braid length bound must be a non-negative int, got {n!r}")

        truncated = self.config.truncated_parity
        start_time = time.time()
        self.stats = {
            'max_length': n,
            'config': dict(self.config.to_dict(), max_length=n),
            'generation_times': [],
            'peak_frontier': 1,
            'pool_started_at': None,
        }

        frontier = [BraidData.identity_braid(truncated)]
        result = EnumerationResult(
            records=[d.reduced() for d in frontier],
            generation_sizes=[1],
            stats=self.stats,
        )

        # Frontiers only grow, so once one reaches the threshold every later one does.
        length = 0
        while length < n and not self._wants_pool(frontier):
            length += 1
            frontier = self._advance(length, frontier, result, None)

        if length < n:
            self.stats['pool_started_at'] = length + 1
            with ProcessPoolExecutor(max_workers=self.config.num_workers) as executor:
                while length < n:
                    length += 1
                    frontier = self._advance(length, frontier, result, executor)

        self.stats['total_braids'] = len(result.records)
        self.stats['total_time'] = time.time() - start_time
        return result

    def _wants_pool(self, frontier: List[BraidData]) -> bool:
        """Whether this frontier is large enough for the process pool."""
        return self.config.parallel and len(frontier) >= self.config.parallel_threshold

    def _advance(self, length: int, frontier: List[BraidData], result: EnumerationResult,
                 executor: Optional[ProcessPoolExecutor]) -> List[BraidData]:
        """Build generation `length` from the previous frontier and record it."""
        gen_start = time.time()
        frontier = self._expand_generation(frontier, executor)
        result.records.extend(d.reduced() for d in frontier)
        result.generation_sizes.append(len(frontier))

        elapsed = time.time() - gen_start
        self.stats['generation_times'].append(elapsed)
        self.stats['peak_frontier'] = max(self.stats['peak_frontier'], len(frontier))
        if self.config.verbose:
            print(f"Length {length}: {len(frontier)} braids "
                  f"({len(result.records)} total, {elapsed:.3f}s)")
        return frontier

    def _expand_generation(self, frontier: List[BraidData],
                           executor: Optional[ProcessPoolExecutor]) -> List[BraidData]:
        truncated = self.config.truncated_parity
        if executor is None or len(frontier) < self.config.parallel_threshold:
            return [child for data in frontier for child in data.descendants(truncated)]

        chunksize = max(1, len(frontier) // (self.config.num_workers * 4))
        items = ((data, truncated) for data in frontier)
        children: List[BraidData] = []
        for batch in executor.map(_expand, items, chunksize=chunksize):
            children.extend(batch)
        return children


def enumerate_braid_jones(n: int, **options) -> List[BraidJones]:
    """
    (braid, Jones polynomial) for every canonical braid of length 0..n.

    Args:
        n: Maximal canonical braid length
        **options: EnumerationConfig fields (num_workers, truncated_parity, ...)

    Returns:
        Records in enumeration order
    """
    if "max_length" in options:
        raise ValueError("Pass the length bound as n, not as max_length")
    return BraidJonesEnumerator(EnumerationConfig(max_length=n, **options)).run(n).records


enumerate_braids = enumerate_braid_jones
