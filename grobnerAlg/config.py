from dataclasses import dataclass


@dataclass(frozen=True)
class GroebnerConfig:
    """
    Options of a Groebner basis computation.

    Args:
    - tolerance: absolute tolerance of the zero test for inexact coefficients (e.g. sympy's RR).
      None means exact zero tests, which exact coefficient rings must use.
    - product_criterion: skip critical pairs whose leading monomials are coprime.
    - monic: normalize the reduced basis to leading coefficient one (field coefficients only).
    - check: verify after the computation that the result is a Groebner basis of the input.
    """
    tolerance: float | None = None
    product_criterion: bool = False
    monic: bool = True
    check: bool = False
