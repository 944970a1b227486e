"""
Run configuration for b3jones.
"""

import os
from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional


@dataclass
class EnumerationConfig:
    """
    Parameters of a braid enumeration run.

    Attributes:
        max_length: Upper limit on canonical braid length
        num_workers: Worker processes per generation (1 = sequential,
            None = CPU count)
        parallel_threshold: Frontiers smaller than this are expanded sequentially
        truncated_parity: Reproduce the truncating-remainder writhe sign
            (wrong for odd negative writhe) instead of (-1)^writhe
        zero_exponent: Exponent scanned by EnumerationResult.last_nonzero_length
        verbose: Print progress information
    """
    max_length: int = 10
    num_workers: Optional[int] = 1
    parallel_threshold: int = 256
    truncated_parity: bool = False
    zero_exponent: int = 0
    verbose: bool = False

    def __post_init__(self):
        if not isinstance(self.max_length, int) or isinstance(self.max_length, bool):
            raise ValueError(f"max_length must be an int, got {self.max_length!r}")
        if self.max_length < 0:
            raise ValueError(f"max_length must be non-negative, got {self.max_length}")
        if self.num_workers is None:
            self.num_workers = os.cpu_count() or 1
        if self.num_workers < 1:
            raise ValueError(f"num_workers must be at least 1, got {self.num_workers}")
        if self.parallel_threshold < 1:
            raise ValueError(f"parallel_threshold must be at least 1, got {self.parallel_threshold}")

    @property
    def parallel(self) -> bool:
        """Whether generations may be handed to a process pool."""
        return self.num_workers > 1

    def to_dict(self) -> Dict[str, Any]:
        """Plain dict of every field."""
        return asdict(self)
