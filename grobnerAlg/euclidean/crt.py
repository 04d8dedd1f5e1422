"""
Chinese remainder theorem over Euclidean rings
"""

import logging
from collections.abc import Sequence

from sympy.polys.domains import ZZ

from grobnerAlg.errors import InvalidArgument
from grobnerAlg.euclidean.euclid import inverse_mod
from grobnerAlg.euclidean.quotient import ResidueClass

logger = logging.getLogger(__name__)


def chinese_remainder(x: Sequence, m: Sequence, ring=ZZ) -> ResidueClass:
    """
    Solve the simultaneous congruences y == x[i] (mod m[i]).

    Args:
    - x: the residues.
    - m: pairwise coprime moduli, one per residue.
    - ring: the Euclidean ring of residues and moduli.

    Returns:
    - the unique solution as a residue class modulo the product of the moduli.

    Raises ArithmeticFailure when the moduli are not pairwise coprime.
    """
    x = [ring.convert(xi) for xi in x]
    m = [ring.convert(mi) for mi in m]
    if len(x) != len(m):
        raise InvalidArgument(f"{len(x)} residues but {len(m)} moduli")
    if not x:
        raise InvalidArgument("no congruences to solve")

    result = x[0]
    modulus = ring.one
    for i in range(1, len(x)):
        modulus = ring.mul(modulus, m[i - 1])
        c = inverse_mod(modulus, m[i], ring)
        s = ring.rem(ring.mul(ring.sub(x[i], result), c), m[i])
        result = ring.add(result, ring.mul(s, modulus))
        logger.debug("congruence %d: %s mod %s", i, result, ring.mul(modulus, m[i]))

    return ResidueClass(result, ring.mul(modulus, m[-1]), ring)
