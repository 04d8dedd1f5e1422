from typing import Any

Monomial = tuple[int, ...]
Coefficient = Any
Term = tuple[Monomial, Coefficient]
CriticalPair = tuple[int, int]
