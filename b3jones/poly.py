"""
Laurent polynomial arithmetic for b3jones.

Provides a sparse one-variable Laurent polynomial P(t) with exact
integer coefficients. Exponents may be negative. The coefficient map
is a plain dict (exponent -> coefficient); an explicitly stored zero
is legal and compares equal to an absent exponent.

All binary operators build new polynomials. In-place operators
(+=, -=, *=) mutate only the left operand, so two bracket records
never end up sharing the same coefficient map.
"""

from typing import Dict, Iterator, List, Optional, Tuple, Union

import numpy as np


class LaurentPoly:
    """
    Laurent polynomial in one variable (t) with integer coefficients.

    Example:
        >>> p = LaurentPoly.from_dict({-2: -1, 2: -1})
        >>> str(p * p)
        'P(t) = 1 * t^-4  +  2 * t^0  +  1 * t^4'
    """

    __slots__ = ("coef_map",)

    def __init__(self, coef_map: Optional[Dict[int, int]] = None):
        self.coef_map: Dict[int, int] = dict(coef_map) if coef_map else {}

    # Constructors

    @classmethod
    def zero(cls) -> 'LaurentPoly':
        """P(t) = 0."""
        return cls()

    @classmethod
    def number(cls, num: int) -> 'LaurentPoly':
        """P(t) = num."""
        return cls({0: num})

    constant = number

    @classmethod
    def identity(cls) -> 'LaurentPoly':
        """P(t) = t."""
        return cls({1: 1})

    @classmethod
    def inverse_identity(cls) -> 'LaurentPoly':
        """P(t) = t^-1."""
        return cls({-1: 1})

    @classmethod
    def monomial(cls, exp: int, coef: int = 1) -> 'LaurentPoly':
        """P(t) = coef * t^exp."""
        return cls({exp: coef})

    @classmethod
    def from_dict(cls, mapping: Dict[int, int]) -> 'LaurentPoly':
        """Build from an exponent -> coefficient mapping."""
        return cls({int(k): int(v) for k, v in mapping.items()})

    @classmethod
    def from_terms(cls, terms) -> 'LaurentPoly':
        """Build from an iterable of (exponent, coefficient) pairs, summing repeats."""
        res = cls()
        for exp, coef in terms:
            exp = int(exp)
            res.coef_map[exp] = res.coef_map.get(exp, 0) + int(coef)
        return res

    def copy(self) -> 'LaurentPoly':
        """Independent copy with its own coefficient map."""
        return LaurentPoly(self.coef_map)

    # Coefficient access

    def get_coef(self, exp: int) -> int:
        """Coefficient in front of t^exp (0 when absent)."""
        return self.coef_map.get(exp, 0)

    def set_coef(self, exp: int, coef: int) -> None:
        """Overwrite the coefficient in front of t^exp. Zero is stored as is."""
        self.coef_map[exp] = coef

    get_coefficient = get_coef
    set_coefficient = set_coef

    def terms(self) -> List[Tuple[int, int]]:
        """Non-zero (exponent, coefficient) pairs, ascending by exponent."""
        return sorted((k, v) for k, v in self.coef_map.items() if v != 0)

    def is_zero(self) -> bool:
        """True when every stored coefficient is 0."""
        return all(v == 0 for v in self.coef_map.values())

    def degree_span(self) -> Optional[Tuple[int, int]]:
        """(lowest, highest) exponent with a non-zero coefficient, or None for 0."""
        exps = [k for k, v in self.coef_map.items() if v != 0]
        if not exps:
            return None
        return min(exps), max(exps)

    def to_array(self) -> Tuple[int, np.ndarray]:
        """
        Dense coefficient vector.

        Returns:
            (offset, coefs) where coefs[i] is the coefficient of t^(offset + i).
            The zero polynomial gives (0, empty array).
        """
        span = self.degree_span()
        if span is None:
            return 0, np.zeros(0, dtype=np.int64)
        low, high = span
        coefs = np.zeros(high - low + 1, dtype=np.int64)
        for k, v in self.coef_map.items():
            if v != 0:
                coefs[k - low] = v
        return low, coefs

    @classmethod
    def from_array(cls, offset: int, coefs) -> 'LaurentPoly':
        """Inverse of to_array (zero entries are skipped)."""
        return cls({offset + i: int(c) for i, c in enumerate(coefs) if c != 0})

    # Algebra

    def add(self, other: 'LaurentPoly') -> 'LaurentPoly':
        """Sum as a new polynomial."""
        res = self.copy()
        res += other
        return res

    def sub(self, other: 'LaurentPoly') -> 'LaurentPoly':
        """Difference as a new polynomial."""
        res = self.copy()
        res -= other
        return res

    def neg(self) -> 'LaurentPoly':
        """Negation as a new polynomial."""
        return LaurentPoly({k: -v for k, v in self.coef_map.items()})

    def scale(self, factor: int) -> 'LaurentPoly':
        """Multiply every coefficient by an integer."""
        return LaurentPoly({k: v * factor for k, v in self.coef_map.items()})

    def mul(self, other: 'LaurentPoly') -> 'LaurentPoly':
        """Convolution product."""
        res: Dict[int, int] = {}
        for k1, v1 in self.coef_map.items():
            for k2, v2 in other.coef_map.items():
                ind = k1 + k2
                res[ind] = res.get(ind, 0) + v1 * v2
        return LaurentPoly(res)

    def shift(self, power: int) -> 'LaurentPoly':
        """Multiply by t^power."""
        return LaurentPoly({k + power: v for k, v in self.coef_map.items()})

    def mirror(self) -> 'LaurentPoly':
        """Mirror polynomial M(t) = P(t^-1)."""
        return LaurentPoly({-k: v for k, v in self.coef_map.items()})

    def __iadd__(self, other: 'LaurentPoly') -> 'LaurentPoly':
        if not isinstance(other, LaurentPoly):
            return NotImplemented
        for k, v in other.coef_map.items():
            self.coef_map[k] = self.coef_map.get(k, 0) + v
        return self

    def __isub__(self, other: 'LaurentPoly') -> 'LaurentPoly':
        if not isinstance(other, LaurentPoly):
            return NotImplemented
        for k, v in other.coef_map.items():
            self.coef_map[k] = self.coef_map.get(k, 0) - v
        return self

    def __imul__(self, other: Union['LaurentPoly', int]) -> 'LaurentPoly':
        if isinstance(other, LaurentPoly):
            self.coef_map = self.mul(other).coef_map
        elif isinstance(other, int):
            for k in self.coef_map:
                self.coef_map[k] *= other
        else:
            return NotImplemented
        return self

    def __add__(self, other: 'LaurentPoly') -> 'LaurentPoly':
        if not isinstance(other, LaurentPoly):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: 'LaurentPoly') -> 'LaurentPoly':
        if not isinstance(other, LaurentPoly):
            return NotImplemented
        return self.sub(other)

    def __neg__(self) -> 'LaurentPoly':
        return self.neg()

    def __mul__(self, other: Union['LaurentPoly', int]) -> 'LaurentPoly':
        if isinstance(other, LaurentPoly):
            return self.mul(other)
        if isinstance(other, int):
            return self.scale(other)
        return NotImplemented

    def __rmul__(self, other: int) -> 'LaurentPoly':
        if isinstance(other, int):
            return self.scale(other)
        return NotImplemented

    # Comparison

    def __eq__(self, other: object) -> bool:
        # Absent exponents count as zero on both sides.
        if not isinstance(other, LaurentPoly):
            return NotImplemented
        for k, v in self.coef_map.items():
            if v != other.coef_map.get(k, 0):
                return False
        for k, v in other.coef_map.items():
            if v != self.coef_map.get(k, 0):
                return False
        return True

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    # Mutable in place, so not hashable. Use tuple(p.terms()) as a key.
    __hash__ = None

    def __iter__(self) -> Iterator[Tuple[int, int]]:
        return iter(self.terms())

    def __str__(self) -> str:
        return "P(t) = " + "  +  ".join(f"{v} * t^{k}" for k, v in self.terms())

    def __repr__(self) -> str:
        return f"LaurentPoly({self.coef_map})"
