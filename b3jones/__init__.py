"""
b3jones: Jones polynomials for the 3-strand braid group

Computes, for every element of B_3 up to a bounded canonical word
length, the Jones polynomial of the braid closure. Instead of a state
sum per diagram, each braid carries five Kauffman brackets (for five
ways of closing three strands) and the brackets of a braid extended by
one twist follow from a fixed linear recurrence.

COMPONENTS:
- LaurentPoly: sparse Laurent polynomials with integer coefficients
- Braid / Twist: canonical braid words via suffix exclusion rules
- BraidData: the five-bracket recurrence and the writhe correction
- BraidJonesEnumerator: breadth-first driver keeping only the frontier
- burau_matrix / find_duplicate_braids: faithful-representation audit
"""

from .poly import LaurentPoly
from .braid import Braid, Twist, canonical_braids, count_canonical_braids
from .bracket import BraidData, BraidJones, calc_jones, kauffman_unknot, writhe_sign
from .config import EnumerationConfig
from .enumerator import (
    BraidJonesEnumerator,
    EnumerationResult,
    enumerate_braid_jones,
    enumerate_braids,
)
from .burau import BurauMatrix, burau_matrix, find_duplicate_braids

__version__ = "1.0.0"
__all__ = [
    # Polynomials
    "LaurentPoly",
    # Braids
    "Braid",
    "Twist",
    "canonical_braids",
    "count_canonical_braids",
    # Bracket recurrence
    "BraidData",
    "BraidJones",
    "calc_jones",
    "kauffman_unknot",
    "writhe_sign",
    # Enumeration
    "EnumerationConfig",
    "BraidJonesEnumerator",
    "EnumerationResult",
    "enumerate_braid_jones",
    "enumerate_braids",
    # Audit
    "BurauMatrix",
    "burau_matrix",
    "find_duplicate_braids",
]
