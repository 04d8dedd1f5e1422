"""
polynomials over a sympy coefficient domain, and multinomials stored as dense coefficient tensors
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping

import numpy as np
from sympy.polys.domains import QQ
from sympy.polys.domains.domain import Domain
from sympy.polys.polyerrors import CoercionFailed

from grobnerAlg.errors import InvalidArgument
from grobnerAlg.polynomials.coefficients import inverse
from grobnerAlg.polynomials.monomial import as_monomial, check_arity, monomial_mul, total_degree, unit_monomial
from grobnerAlg.types import Coefficient, Monomial, Term


class Polynomial(ABC):
    """
    A finite mapping from monomials to nonzero coefficients of a sympy domain.

    Polynomials are immutable: arithmetic always returns new polynomials. Subclasses store
    the coefficients, this class derives everything else from the occurring terms.
    """

    domain: Domain

    @property
    @abstractmethod
    def nvars(self) -> int:
        ...

    @abstractmethod
    def _term_dict(self) -> dict[Monomial, Coefficient]:
        ...

    @classmethod
    @abstractmethod
    def from_terms(cls, terms: Mapping[Monomial, Coefficient] | Iterable[Term], nvars: int,
                   domain: Domain = QQ) -> "Polynomial":
        ...

    @abstractmethod
    def _add(self, other: "Polynomial") -> "Polynomial":
        ...

    @abstractmethod
    def _mul(self, other: "Polynomial") -> "Polynomial":
        ...

    @abstractmethod
    def mul_term(self, monomial: Monomial, coefficient: Coefficient) -> "Polynomial":
        """Return coefficient * X^monomial * self."""

    # terms

    def terms(self) -> list[Term]:
        return list(self._term_dict().items())

    def monomials(self) -> list[Monomial]:
        """The occurring monomials, i.e. those with a nonzero coefficient."""
        return list(self._term_dict())

    def coefficients(self) -> list[Coefficient]:
        return list(self._term_dict().values())

    def coefficient(self, monomial: Monomial) -> Coefficient:
        monomial = tuple(monomial)
        check_arity(monomial, unit_monomial(self.nvars))
        return self._term_dict().get(monomial, self.domain.zero)

    def __len__(self) -> int:
        return len(self._term_dict())

    @property
    def degree(self) -> int:
        """Maximal total degree of the occurring monomials, -1 for the zero polynomial."""
        return max((total_degree(m) for m in self._term_dict()), default=-1)

    def is_zero(self, tolerance: float | None = None) -> bool:
        if tolerance is None:
            return not self._term_dict()
        return all(abs(c) <= tolerance for c in self._term_dict().values())

    def __bool__(self) -> bool:
        return not self.is_zero()

    # leading terms

    def leading_monomial(self, order) -> Monomial:
        if self.is_zero():
            raise InvalidArgument("zero polynomial has no leading monomial")
        return order.max(self._term_dict())

    def leading_coefficient(self, order) -> Coefficient:
        return self._term_dict()[self.leading_monomial(order)]

    def leading_term(self, order) -> Term:
        lm = self.leading_monomial(order)
        return lm, self._term_dict()[lm]

    def monic(self, order) -> "Polynomial":
        """Return self divided by its leading coefficient."""
        if self.is_zero():
            return self
        return self.scale(inverse(self.domain, self.leading_coefficient(order)))

    # construction helpers

    def zero(self) -> "Polynomial":
        return self.from_terms({}, self.nvars, self.domain)

    def one(self) -> "Polynomial":
        return self.from_terms({unit_monomial(self.nvars): self.domain.one}, self.nvars, self.domain)

    def constant(self, c: Coefficient) -> "Polynomial":
        return self.from_terms({unit_monomial(self.nvars): c}, self.nvars, self.domain)

    def without(self, monomial: Monomial) -> "Polynomial":
        """Return self with the term at monomial removed."""
        monomial = tuple(monomial)
        terms = {m: c for m, c in self._term_dict().items() if m != monomial}
        return self.from_terms(terms, self.nvars, self.domain)

    def chop(self, tolerance: float | None) -> "Polynomial":
        """Drop the coefficients whose absolute value is within tolerance."""
        if tolerance is None:
            return self
        terms = {m: c for m, c in self._term_dict().items() if abs(c) > tolerance}
        if len(terms) == len(self):
            return self
        return self.from_terms(terms, self.nvars, self.domain)

    def set_domain(self, domain: Domain) -> "Polynomial":
        terms = {m: domain.convert_from(c, self.domain) for m, c in self._term_dict().items()}
        return self.from_terms(terms, self.nvars, domain)

    def scale(self, c: Coefficient) -> "Polynomial":
        c = self.domain.convert(c)
        if self.domain.is_zero(c):
            return self.zero()
        return self.mul_term(unit_monomial(self.nvars), c)

    # arithmetic

    def _coerce(self, other) -> "Polynomial":
        if isinstance(other, Polynomial):
            if other.nvars != self.nvars:
                raise InvalidArgument(f"cannot combine polynomials of different polynomial rings with "
                                      f"{self.nvars} and {other.nvars} variables")
            if other.domain != self.domain:
                raise InvalidArgument(f"cannot combine polynomials over {self.domain} and {other.domain}, "
                                      "use set_domain first")
            if not isinstance(other, type(self)):
                other = type(self).from_terms(other._term_dict(), self.nvars, self.domain)
            return other
        try:
            return self.constant(self.domain.convert(other))
        except CoercionFailed:
            return NotImplemented

    def __add__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        return self._add(other)

    __radd__ = __add__

    def __neg__(self) -> "Polynomial":
        return self.from_terms({m: -c for m, c in self._term_dict().items()}, self.nvars, self.domain)

    def __pos__(self) -> "Polynomial":
        return self

    def _sub(self, other: "Polynomial") -> "Polynomial":
        return self._add(-other)

    def __sub__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        return self._sub(other)

    def __rsub__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        return other._sub(self)

    def __mul__(self, other):
        if not isinstance(other, Polynomial):
            try:
                return self.scale(other)
            except CoercionFailed:
                return NotImplemented
        other = self._coerce(other)
        if self.is_zero() or other.is_zero():
            return self.zero()
        return self._mul(other)

    __rmul__ = __mul__

    def __pow__(self, k: int) -> "Polynomial":
        if not isinstance(k, int) or k < 0:
            raise InvalidArgument(f"polynomials only have nonnegative integer powers, got {k!r}")
        result, base = self.one(), self
        while k:
            if k & 1:
                result = result * base
            base = base * base
            k >>= 1
        return result

    def evaluate(self, point) -> Coefficient:
        """Evaluate at a point given as one value per variable."""
        point = tuple(point)
        if len(point) != self.nvars:
            raise InvalidArgument(f"expected {self.nvars} values, got {len(point)}")
        result = self.domain.zero
        for m, c in self._term_dict().items():
            value = c
            for x, e in zip(point, m):
                if e:
                    value = value * x ** e
            result = result + value
        return result

    # comparison

    def __eq__(self, other) -> bool:
        if isinstance(other, Polynomial):
            return self.nvars == other.nvars and self._term_dict() == other._term_dict()
        try:
            c = self.domain.convert(other)
        except CoercionFailed:
            return NotImplemented
        if self.domain.is_zero(c):
            return self.is_zero()
        return self._term_dict() == {unit_monomial(self.nvars): c}

    def __ne__(self, other) -> bool:
        eq = self.__eq__(other)
        return eq if eq is NotImplemented else not eq

    def __hash__(self) -> int:
        terms = self._term_dict()
        # constants compare equal to their coefficient, so they hash like it
        if not terms:
            return hash(self.domain.zero)
        if len(terms) == 1 and unit_monomial(self.nvars) in terms:
            return hash(terms[unit_monomial(self.nvars)])
        return hash((self.nvars, frozenset(terms.items())))

    def _variable_names(self) -> list[str]:
        if self.nvars == 1:
            return ['X']
        return [f'X{i}' for i in range(self.nvars)]

    def __str__(self) -> str:
        if self.is_zero():
            return '0'
        names = self._variable_names()
        parts = []
        for m, c in sorted(self._term_dict().items(), reverse=True):
            powers = [n if e == 1 else f"{n}^{e}" for n, e in zip(names, m) if e]
            coeff = str(c)
            if powers and (coeff.startswith("-") or " " in coeff):
                coeff = f"({coeff})"
            if not powers:
                parts.append(coeff)
            elif c == self.domain.one:
                parts.append("*".join(powers))
            else:
                parts.append("*".join([coeff] + powers))
        return " + ".join(parts)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self}, {self.domain})"


def _frompyfunc(f, tensor: np.ndarray) -> np.ndarray:
    return np.asarray(np.frompyfunc(f, 1, 1)(tensor), dtype=object).reshape(tensor.shape)


def zero_tensor(shape: tuple[int, ...], domain: Domain) -> np.ndarray:
    tensor = np.empty(shape, dtype=object)
    tensor.fill(domain.zero)
    return tensor


def _occurring(tensor: np.ndarray, domain: Domain) -> tuple[np.ndarray, ...]:
    """Indices of the nonzero entries, one index array per axis."""
    return np.nonzero(np.asarray(tensor != domain.zero, dtype=bool))


def _trimmed(tensor: np.ndarray, occurring: tuple[np.ndarray, ...]) -> np.ndarray:
    if occurring[0].size == 0:
        return np.empty((0,) * tensor.ndim, dtype=object)
    shape = tuple(int(axis.max()) + 1 for axis in occurring)
    if shape == tensor.shape:
        return tensor
    return tensor[tuple(slice(0, s) for s in shape)]


def trim_tensor(tensor: np.ndarray, domain: Domain) -> np.ndarray:
    """Trim every axis of a coefficient tensor to its highest occurring exponent."""
    return _trimmed(tensor, _occurring(tensor, domain))


class Multinomial(Polynomial):
    """
    A polynomial in nvars >= 1 variables whose coefficients live in a dense tensor.

    The coefficient of X0^e0 * ... * Xn-1^en-1 is tensor[e0, ..., en-1]. The tensor is trimmed to
    the highest occurring exponent on every axis and is read-only.

    Example:
        >>> Multinomial([[0, 1], [1, 0]], QQ)  # X0 + X1
    """

    def __init__(self, coefficients, domain: Domain = QQ):
        self.domain = domain
        try:
            tensor = np.array(coefficients, dtype=object)
        except ValueError as e:
            raise InvalidArgument(f"coefficients of degenerate shape: {coefficients!r}") from e
        if tensor.ndim == 0:
            raise InvalidArgument("multinomial coefficients must be given as a tensor of rank >= 1")
        try:
            tensor = _frompyfunc(domain.convert, tensor)
        except CoercionFailed as e:
            raise InvalidArgument(f"coefficients of degenerate shape or not in {domain}: {coefficients!r}") from e
        self._set_tensor(tensor)

    @classmethod
    def _from_tensor(cls, tensor: np.ndarray, domain: Domain) -> "Multinomial":
        """Wrap a fresh tensor whose entries are already elements of domain."""
        poly = cls.__new__(cls)
        poly.domain = domain
        poly._set_tensor(tensor)
        return poly

    def _set_tensor(self, tensor: np.ndarray):
        occurring = _occurring(tensor, self.domain)
        self._tensor = _trimmed(tensor, occurring)
        self._tensor.flags.writeable = False
        self._terms = {
            tuple(int(e) for e in index): self._tensor[index]
            for index in zip(*occurring)
        }

    @classmethod
    def from_terms(cls, terms, nvars: int, domain: Domain = QQ) -> "Multinomial":
        items = list(terms.items() if isinstance(terms, Mapping) else terms)
        monomials = [as_monomial(m) for m, _ in items]
        for m in monomials:
            if len(m) != nvars:
                raise InvalidArgument(f"monomial {m} does not have {nvars} variables")
        shape = tuple(max((m[i] for m in monomials), default=-1) + 1 for i in range(nvars))
        tensor = zero_tensor(shape, domain)
        try:
            for m, (_, c) in zip(monomials, items):
                tensor[m] = tensor[m] + domain.convert(c)
        except CoercionFailed as e:
            raise InvalidArgument(f"coefficients not in {domain}: {items!r}") from e
        return cls._from_tensor(tensor, domain)

    @classmethod
    def variable(cls, index: int, nvars: int, domain: Domain = QQ) -> "Multinomial":
        if not 0 <= index < nvars:
            raise InvalidArgument(f"invalid variable index {index} for {nvars} variables")
        monomial = tuple(int(i == index) for i in range(nvars))
        return cls.from_terms({monomial: domain.one}, nvars, domain)

    @classmethod
    def variables(cls, nvars: int, domain: Domain = QQ) -> list["Multinomial"]:
        return [cls.variable(i, nvars, domain) for i in range(nvars)]

    @property
    def nvars(self) -> int:
        return self._tensor.ndim

    @property
    def tensor(self) -> np.ndarray:
        return self._tensor

    @property
    def degrees(self) -> tuple[int, ...]:
        """The degree in each single variable."""
        return tuple(s - 1 for s in self._tensor.shape)

    def _term_dict(self):
        return self._terms

    def _region(self) -> tuple[slice, ...]:
        return tuple(slice(0, s) for s in self._tensor.shape)

    def _padded(self, other: "Multinomial") -> np.ndarray:
        """A writable copy of self's tensor, enlarged to cover other's."""
        shape = tuple(max(a, b) for a, b in zip(self._tensor.shape, other._tensor.shape))
        result = zero_tensor(shape, self.domain)
        result[self._region()] = self._tensor
        return result

    def _add(self, other):
        result = self._padded(other)
        result[other._region()] += other._tensor
        return Multinomial._from_tensor(result, self.domain)

    def _sub(self, other):
        result = self._padded(other)
        result[other._region()] -= other._tensor
        return Multinomial._from_tensor(result, self.domain)

    def _scaled(self, c: Coefficient) -> np.ndarray:
        return _frompyfunc(lambda x: c * x, self._tensor)

    def _mul(self, other):
        # shift and scale the whole tensor of other by every nonzero term of self
        shape = tuple(a + b - 1 for a, b in zip(self._tensor.shape, other._tensor.shape))
        result = zero_tensor(shape, self.domain)
        for m, c in self._terms.items():
            region = tuple(slice(e, e + s) for e, s in zip(m, other._tensor.shape))
            result[region] += other._scaled(c)
        return Multinomial._from_tensor(result, self.domain)

    def mul_term(self, monomial, coefficient):
        monomial = as_monomial(monomial)
        check_arity(monomial, unit_monomial(self.nvars))
        coefficient = self.domain.convert(coefficient)
        if self.is_zero() or self.domain.is_zero(coefficient):
            return self.zero()
        shape = tuple(e + s for e, s in zip(monomial, self._tensor.shape))
        result = zero_tensor(shape, self.domain)
        for m, c in self._terms.items():
            result[monomial_mul(m, monomial)] = coefficient * c
        return Multinomial._from_tensor(result, self.domain)

    def __neg__(self):
        return Multinomial._from_tensor(-self._tensor, self.domain)

    def __getitem__(self, monomial) -> Coefficient:
        return self.coefficient(monomial)
