from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from fractions import Fraction
from typing import Any

import numpy as np

from ..errors import InvariantViolation


@dataclass(frozen=True)
class Scalar:
    """Numeric capability the geometry is generic over.

    ``cast`` converts user input (floats, ints, decimal strings) into the
    scalar type; ``eps`` is the absolute tolerance used for every boundary
    decision.
    """

    name: str
    cast: Callable[[Any], Any]
    eps: Any

    def approx_eq(self, a: Any, b: Any) -> bool:
        return abs(a - b) <= self.eps

    def ge(self, a: Any, b: Any) -> bool:
        return a > b or self.approx_eq(a, b)

    def le(self, a: Any, b: Any) -> bool:
        return a < b or self.approx_eq(a, b)

    def compare(self, a: Any, b: Any) -> int:
        """Strict three-way comparison; raises when the pair has no order (NaN)."""
        if a < b:
            return -1
        if a > b:
            return 1
        if a == b:
            return 0
        raise InvariantViolation(f"cannot order {self.name} values {a!r} and {b!r}")

    @property
    def zero(self) -> Any:
        return self.cast(0)

    @property
    def two(self) -> Any:
        return self.cast(2)


FLOAT64 = Scalar("float64", np.float64, np.float64(1e-10))
FLOAT32 = Scalar("float32", np.float32, np.float32(1e-5))
LONGDOUBLE = Scalar("longdouble", np.longdouble, np.longdouble(1e-13))
FRACTION = Scalar("fraction", Fraction, Fraction(0))

SCALARS: dict[str, Scalar] = {s.name: s for s in (FLOAT64, FLOAT32, LONGDOUBLE, FRACTION)}


def get_scalar(name: str) -> Scalar:
    try:
        return SCALARS[name]
    except KeyError:
        raise ValueError(
            f"unknown scalar type {name!r}; expected one of {sorted(SCALARS)}"
        ) from None
