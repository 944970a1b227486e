"""
Braid words on three strands for b3jones.

The braid group B_3 has generators σ_1 (A) and σ_2 (B) with the
single relation
    A B A = B A B
plus free cancellation of a generator against its inverse.

Braid.descendants() enumerates a canonical form: each group element
is produced exactly once, by refusing to append a twist when the
current word ends with a suffix that would make the result equal to
a shorter word or to the other side of the braid relation.
"""

from dataclasses import dataclass
from typing import Iterator, List, Optional, Sequence, Tuple
from enum import Enum


class Twist(Enum):
    """
    A single twist (an atom of braiding) on three strands.

    A twists the first two strands with a forward slash, B the last
    two. A_INV and B_INV are their inverses. The value is the signed
    integer code of the generator (±1 for A, ±2 for B).
    """
    A = 1
    B = 2
    A_INV = -1
    B_INV = -2

    @property
    def index(self) -> int:
        """Which strands are involved (1 for strands 1-2, 2 for strands 2-3)."""
        return abs(self.value)

    @property
    def sign(self) -> int:
        """+1 for a positive crossing, -1 for a negative one."""
        return 1 if self.value > 0 else -1

    def inverse(self) -> 'Twist':
        """The twist that undoes this one."""
        return Twist(-self.value)

    def to_int(self) -> int:
        """Signed integer code (1, 2, -1, -2)."""
        return self.value

    @classmethod
    def from_int(cls, val: int) -> 'Twist':
        """Twist for a signed integer code; ValueError for anything else."""
        try:
            return cls(val)
        except ValueError:
            raise ValueError(f"Twist code must be one of 1, 2, -1, -2, got {val!r}") from None

    def __str__(self) -> str:
        return _SYMBOLS[self]


_SYMBOLS = {
    Twist.A: "A",
    Twist.B: "B",
    Twist.A_INV: "A⁻¹",
    Twist.B_INV: "B⁻¹",
}

A, B, A_INV, B_INV = Twist.A, Twist.B, Twist.A_INV, Twist.B_INV

# For every twist, the suffixes after which appending it is not canonical.
#   A:     A⁻¹ A = 1;  B⁻¹ A B A = B⁻¹ B A B = A B
#   B:     B⁻¹ B = 1;  B A B = A B A (keep the 2nd);  A⁻¹ B⁻¹ A⁻¹ B = B⁻¹ A⁻¹
#   A⁻¹:   A A⁻¹ = 1;  B A⁻¹ B⁻¹ A⁻¹ = B B⁻¹ A⁻¹ B⁻¹ = A⁻¹ B⁻¹
#   B⁻¹:   B B⁻¹ = 1;  B⁻¹ A⁻¹ B⁻¹ = A⁻¹ B⁻¹ A⁻¹ (keep the 2nd);  A B A B⁻¹ = B A
EXCLUDED_SUFFIXES: Tuple[Tuple[Twist, Tuple[Tuple[Twist, ...], ...]], ...] = (
    (A, ((A_INV,), (B_INV, A, B))),
    (B, ((B_INV,), (B, A), (A_INV, B_INV, A_INV))),
    (A_INV, ((A,), (B, A_INV, B_INV))),
    (B_INV, ((B,), (B_INV, A_INV), (A, B, A))),
)


@dataclass(frozen=True)
class Braid:
    """
    A braid (a sequence of twists) on three strands.

    Braids are immutable; append() and descendants() return new
    braids. Equality is equality of words, not of group elements.
    """
    twists: Tuple[Twist, ...] = ()

    @classmethod
    def identity(cls) -> 'Braid':
        """The identity of the braid group (no twists)."""
        return cls(())

    @classmethod
    def from_int_list(cls, word: Sequence[int]) -> 'Braid':
        """Create a braid from signed generator codes, e.g. [1, -2, 1]."""
        return cls(tuple(Twist.from_int(w) for w in word))

    def to_int_list(self) -> List[int]:
        """Signed generator codes, the inverse of from_int_list."""
        return [t.to_int() for t in self.twists]

    def canonical_len(self) -> int:
        """Number of twists in the word."""
        return len(self.twists)

    def last_twist(self) -> Optional[Twist]:
        """Final twist, or None for the identity."""
        return self.twists[-1] if self.twists else None

    def ends_with(self, ending: Sequence[Twist]) -> bool:
        m = len(ending)
        if m > len(self.twists):
            return False
        return m == 0 or self.twists[-m:] == tuple(ending)

    def append(self, twist: Twist) -> 'Braid':
        """New braid with twist added at the end."""
        return Braid(self.twists + (twist,))

    def writhe(self) -> int:
        """Signed crossing count."""
        return sum(t.sign for t in self.twists)

    def inverse(self) -> 'Braid':
        """Group inverse: reversed word with every twist inverted."""
        return Braid(tuple(t.inverse() for t in reversed(self.twists)))

    def mirror(self) -> 'Braid':
        """Flip every crossing (A <-> A⁻¹, B <-> B⁻¹) keeping the order."""
        return Braid(tuple(t.inverse() for t in self.twists))

    def free_reduce(self) -> 'Braid':
        """Cancel adjacent inverse pairs (free group reduction only)."""
        reduced: List[Twist] = []
        for t in self.twists:
            if reduced and reduced[-1] == t.inverse():
                reduced.pop()
            else:
                reduced.append(t)
        return Braid(tuple(reduced))

    def allows(self, twist: Twist) -> bool:
        """Whether appending twist keeps the word canonical."""
        for candidate, suffixes in EXCLUDED_SUFFIXES:
            if candidate is twist:
                return not any(self.ends_with(s) for s in suffixes)
        return True

    def descendants(self) -> List['Braid']:
        """
        Canonical braids obtained by adding a single twist to the end.

        Children come in the fixed order A, B, A⁻¹, B⁻¹. A child is left
        out when the current word ends with one of its EXCLUDED_SUFFIXES.
        """
        return [self.append(twist) for twist, _ in EXCLUDED_SUFFIXES if self.allows(twist)]

    def __len__(self) -> int:
        return len(self.twists)

    def __iter__(self) -> Iterator[Twist]:
        return iter(self.twists)

    def __str__(self) -> str:
        if not self.twists:
            return "ε"
        return " ".join(str(t) for t in self.twists)


def canonical_braids(length: int) -> List[Braid]:
    """All canonical braids of exactly the given length, in enumeration order."""
    if length < 0:
        raise ValueError(f"Braid length must be non-negative, got {length}")
    layer = [Braid.identity()]
    for _ in range(length):
        layer = [child for braid in layer for child in braid.descendants()]
    return layer


def count_canonical_braids(length: int) -> int:
    """Number of canonical braids of exactly the given length."""
    return len(canonical_braids(length))
