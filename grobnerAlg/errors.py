"""
exception taxonomy shared by the polynomial, euclidean and Buchberger modules
"""


class AlgebraError(Exception):
    """Base class of every error raised by grobnerAlg."""


class InvalidArgument(AlgebraError, ValueError):
    """Mismatched arities or variable counts, degenerate shapes, zero polynomials without a leading term."""


class IncomparableArguments(InvalidArgument):
    """Raised by the induced polynomial order when neither polynomial decides the comparison."""


class ArithmeticFailure(AlgebraError, ArithmeticError):
    """gcd(0, 0), non-coprime moduli, division by zero and other non-invertible divisions."""


class UnsupportedOperation(AlgebraError, NotImplementedError):
    """Operations that are explicitly not implemented, e.g. the gcd of more than two elements."""


class ConcurrentModificationError(AlgebraError, RuntimeError):
    """A PolynomialBuilder was modified while one of its iterators was still live."""
