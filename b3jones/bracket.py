"""
Kauffman bracket recurrence for three-strand braids.

Closing a 3-strand braid can be done in five ways (A to E-type
joinings of the strand endpoints). The A-type joining is the usual
braid closure; the other four are auxiliary closures with extra
joining arcs. Smoothing the last crossing of a braid turns each of the
five closures of the braid into a combination of closures of the
shorter braid, so the five brackets of a child follow from the five
brackets of its parent:

    <β σ> = t <β> + t^-1 <β smoothed>

with t and t^-1 exchanged for negative crossings. A smoothing that
closes an extra loop multiplies by the unknot bracket U = -t^-2 - t^2.

The Jones polynomial of the closure is
    V = (-1)^w t^(-3w) <β>_A
where w is the writhe.
"""

from dataclasses import dataclass
from typing import List

from .braid import Braid, Twist
from .poly import LaurentPoly


def kauffman_unknot() -> LaurentPoly:
    """Kauffman bracket for the unknot: -(t^-2 + t^2)."""
    res = LaurentPoly.zero()
    res.set_coef(-2, -1)
    res.set_coef(2, -1)
    return res


def writhe_sign(writhe: int, truncated_parity: bool = False) -> int:
    """
    Sign of the writhe correction term.

    The default is (-1)^writhe. With truncated_parity the sign is
    1 - 2 * rem(writhe, 2) where the remainder keeps the sign of the
    dividend, which yields 3 instead of -1 for odd negative writhe.
    """
    if truncated_parity:
        rem = abs(writhe) % 2
        if writhe < 0:
            rem = -rem
        return 1 - 2 * rem
    return 1 - 2 * (writhe % 2)


def calc_jones(kauffman: LaurentPoly, writhe: int, truncated_parity: bool = False) -> LaurentPoly:
    """Jones polynomial from the A-type Kauffman bracket and the writhe."""
    writhe_poly = LaurentPoly.zero()
    writhe_poly.set_coef(-3 * writhe, writhe_sign(writhe, truncated_parity))
    return kauffman * writhe_poly


def _step(forward: LaurentPoly, direct: LaurentPoly, smoothed: LaurentPoly) -> LaurentPoly:
    return forward * direct + forward.mirror() * smoothed


@dataclass
class BraidJones:
    """Reduced record: a canonical braid and the Jones polynomial of its closure."""
    braid: Braid
    jones: LaurentPoly


@dataclass
class BraidData:
    """
    Data used to extend a braid by one twist.

    Attributes:
        braid: The element of the braid group the data belongs to
        kauffman_a: Bracket of the A-type joining (the braid closure)
        kauffman_b: Bracket of the B-type joining
        kauffman_c: Bracket of the C-type joining
        kauffman_d: Bracket of the D-type joining
        kauffman_e: Bracket of the E-type joining
        writhe: Writhe of the A-type closure
        jones: Jones polynomial of the A-type closure
    """
    braid: Braid
    kauffman_a: LaurentPoly
    kauffman_b: LaurentPoly
    kauffman_c: LaurentPoly
    kauffman_d: LaurentPoly
    kauffman_e: LaurentPoly
    writhe: int
    jones: LaurentPoly

    @classmethod
    def identity_braid(cls, truncated_parity: bool = False) -> 'BraidData':
        """Data for the identity element (three untwisted strands)."""
        unknot_1 = kauffman_unknot()
        unknot_2 = unknot_1 * unknot_1
        unknot_3 = unknot_2 * unknot_1

        return cls(
            braid=Braid.identity(),
            # A-type joining gives 3 unknots, B/C-type 2, D/E-type 1.
            kauffman_a=unknot_3,
            kauffman_b=unknot_2,
            kauffman_c=unknot_2.copy(),
            kauffman_d=unknot_1,
            kauffman_e=unknot_1.copy(),
            writhe=0,
            jones=calc_jones(unknot_3, 0, truncated_parity),
        )

    @classmethod
    def from_braid(cls, braid: Braid, truncated_parity: bool = False) -> 'BraidData':
        """Fold the recurrence over any word, canonical or not."""
        data = cls.identity_braid(truncated_parity)
        for twist in braid:
            data = data.child(twist, truncated_parity)
        return data

    def child(self, twist: Twist, truncated_parity: bool = False) -> 'BraidData':
        """Data for self.braid followed by twist. Every polynomial is freshly built."""
        unknot = kauffman_unknot()
        t = LaurentPoly.identity() if twist.sign > 0 else LaurentPoly.inverse_identity()
        a, b, c, d, e = (self.kauffman_a, self.kauffman_b, self.kauffman_c,
                         self.kauffman_d, self.kauffman_e)

        if twist.index == 1:
            kauffman_a = _step(t, a, b)
            kauffman_b = _step(t, b, b * unknot)
            kauffman_c = _step(t, c, d)
            kauffman_d = _step(t, d, d * unknot)
            kauffman_e = _step(t, e, b)
        else:
            kauffman_a = _step(t, a, c)
            kauffman_b = _step(t, b, e)
            kauffman_c = _step(t, c, c * unknot)
            kauffman_d = _step(t, d, c)
            kauffman_e = _step(t, e, e * unknot)

        writhe = self.writhe + twist.sign
        return BraidData(
            braid=self.braid.append(twist),
            kauffman_a=kauffman_a,
            kauffman_b=kauffman_b,
            kauffman_c=kauffman_c,
            kauffman_d=kauffman_d,
            kauffman_e=kauffman_e,
            writhe=writhe,
            jones=calc_jones(kauffman_a, writhe, truncated_parity),
        )

    def descendants(self, truncated_parity: bool = False) -> List['BraidData']:
        """Data for every canonical descendant of self.braid, in generator order."""
        return [self.child(braid.last_twist(), truncated_parity)
                for braid in self.braid.descendants()]

    def brackets(self):
        """The five brackets, A-type first."""
        return (self.kauffman_a, self.kauffman_b, self.kauffman_c,
                self.kauffman_d, self.kauffman_e)

    def reduced(self) -> BraidJones:
        """Drop everything but the braid and its Jones polynomial."""
        return BraidJones(braid=self.braid, jones=self.jones.copy())
