"""
quotient rings: residue classes modulo an element of a Euclidean ring, and modulo a polynomial ideal
"""

from sympy.polys.domains import ZZ

from grobnerAlg.Buchberger.reduction import Reducer
from grobnerAlg.errors import ArithmeticFailure, InvalidArgument
from grobnerAlg.euclidean.euclid import inverse_mod


class ResidueClass:
    """
    The class of value in ring / (modulus), represented by its remainder modulo modulus.

    Example:
        >>> ResidueClass(8, 15) == ResidueClass(23, 15)
        True
    """

    def __init__(self, value, modulus, ring=ZZ):
        self.ring = ring
        self.modulus = ring.convert(modulus)
        if ring.is_zero(self.modulus):
            raise ArithmeticFailure("residue classes modulo zero")
        self.value = ring.rem(ring.convert(value), self.modulus)

    def representative(self):
        return self.value

    def _check(self, other) -> "ResidueClass":
        if not isinstance(other, ResidueClass):
            return ResidueClass(other, self.modulus, self.ring)
        if other.ring != self.ring or other.modulus != self.modulus:
            raise ArithmeticFailure(f"residue classes modulo {self.modulus} and {other.modulus} do not mix")
        return other

    def __add__(self, other):
        other = self._check(other)
        return ResidueClass(self.ring.add(self.value, other.value), self.modulus, self.ring)

    __radd__ = __add__

    def __neg__(self):
        return ResidueClass(self.ring.sub(self.ring.zero, self.value), self.modulus, self.ring)

    def __sub__(self, other):
        other = self._check(other)
        return ResidueClass(self.ring.sub(self.value, other.value), self.modulus, self.ring)

    def __rsub__(self, other):
        return self._check(other) - self

    def __mul__(self, other):
        other = self._check(other)
        return ResidueClass(self.ring.mul(self.value, other.value), self.modulus, self.ring)

    __rmul__ = __mul__

    def inverse(self) -> "ResidueClass":
        """Multiplicative inverse, ArithmeticFailure unless the value is coprime to the modulus."""
        return ResidueClass(inverse_mod(self.value, self.modulus, self.ring), self.modulus, self.ring)

    def __eq__(self, other):
        if not isinstance(other, ResidueClass):
            return NotImplemented
        return self.ring == other.ring and self.modulus == other.modulus and self.value == other.value

    def __hash__(self):
        return hash((self.value, self.modulus))

    def __repr__(self):
        return f"{self.value} mod {self.modulus}"


class PolynomialResidue:
    """
    The class of a polynomial modulo the ideal generated by a Groebner basis.

    The representative is the normal form with respect to basis, which is unique because basis is a
    Groebner basis under order.
    """

    def __init__(self, poly, basis, order, tolerance: float | None = None):
        self.basis = tuple(basis)
        self.order = order
        self.tolerance = tolerance
        self._reducer = Reducer(self.basis, order, tolerance)
        self.poly = self._reducer(poly)

    def representative(self):
        return self.poly

    def _new(self, poly) -> "PolynomialResidue":
        return PolynomialResidue(poly, self.basis, self.order, self.tolerance)

    def _check(self, other):
        if isinstance(other, PolynomialResidue):
            if other.basis != self.basis or other.order != self.order:
                raise InvalidArgument("residues modulo different ideals do not mix")
            return other.poly
        return other

    def __add__(self, other):
        return self._new(self.poly + self._check(other))

    __radd__ = __add__

    def __neg__(self):
        return self._new(-self.poly)

    def __sub__(self, other):
        return self._new(self.poly - self._check(other))

    def __rsub__(self, other):
        return self._new(self._check(other) - self.poly)

    def __mul__(self, other):
        return self._new(self.poly * self._check(other))

    __rmul__ = __mul__

    def __eq__(self, other):
        if not isinstance(other, PolynomialResidue):
            return NotImplemented
        return self.basis == other.basis and self.order == other.order and self.poly == other.poly

    def __hash__(self):
        return hash((self.poly, self.basis))

    def __repr__(self):
        return f"{self.poly} mod <{', '.join(str(g) for g in self.basis)}>"
