"""
Reduced Burau representation of B_3.

The reduced Burau representation is faithful on three strands, so two
words give the same 2x2 matrix over Z[t, t^-1] exactly when they are
the same group element. This gives an independent check that the
canonical words produced by Braid.descendants() are pairwise distinct.

    A    -> [[-t, 1], [0, 1]]        A⁻¹ -> [[-t^-1, t^-1], [0, 1]]
    B    -> [[1, 0], [t, -t]]        B⁻¹ -> [[1, 0], [1, -t^-1]]
"""

from dataclasses import dataclass
from typing import Dict, List, Tuple

from .braid import Braid, Twist, canonical_braids
from .poly import LaurentPoly


@dataclass(frozen=True)
class BurauMatrix:
    """2x2 matrix with LaurentPoly entries, row major."""
    entries: Tuple[Tuple[LaurentPoly, LaurentPoly], Tuple[LaurentPoly, LaurentPoly]]

    @classmethod
    def identity(cls) -> 'BurauMatrix':
        one, zero = LaurentPoly.number(1), LaurentPoly.zero()
        return cls(((one, zero), (zero.copy(), one.copy())))

    def __matmul__(self, other: 'BurauMatrix') -> 'BurauMatrix':
        (a, b), (c, d) = self.entries
        (e, f), (g, h) = other.entries
        return BurauMatrix((
            (a * e + b * g, a * f + b * h),
            (c * e + d * g, c * f + d * h),
        ))

    def key(self) -> Tuple:
        """Hashable canonical form (non-zero terms of every entry)."""
        return tuple(tuple(entry.terms()) for row in self.entries for entry in row)

    def __hash__(self) -> int:
        return hash(self.key())


def _generator_matrices() -> Dict[Twist, BurauMatrix]:
    t = LaurentPoly.identity()
    t_inv = LaurentPoly.inverse_identity()
    one = LaurentPoly.number(1)
    zero = LaurentPoly.zero()
    return {
        Twist.A: BurauMatrix(((-t, one), (zero, one))),
        Twist.A_INV: BurauMatrix(((-t_inv, t_inv), (zero, one))),
        Twist.B: BurauMatrix(((one, zero), (t, -t))),
        Twist.B_INV: BurauMatrix(((one, zero), (one, -t_inv))),
    }


def burau_matrix(braid: Braid) -> BurauMatrix:
    """Image of a braid word under the reduced Burau representation."""
    generators = _generator_matrices()
    result = BurauMatrix.identity()
    for twist in braid:
        result = result @ generators[twist]
    return result


def find_duplicate_braids(max_length: int) -> List[Tuple[Braid, Braid]]:
    """
    Pairs of canonical braids of length <= max_length that are the
    same group element. An empty list means the canonical form is
    unique up to that length.
    """
    seen: Dict[Tuple, Braid] = {}
    duplicates: List[Tuple[Braid, Braid]] = []
    for length in range(max_length + 1):
        for braid in canonical_braids(length):
            key = burau_matrix(braid).key()
            if key in seen:
                duplicates.append((seen[key], braid))
            else:
                seen[key] = braid
    return duplicates
