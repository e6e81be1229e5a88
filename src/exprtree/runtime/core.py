from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, get_args

from ..frontend.literals import format_decimal
from ..writer import TraceWriter

OverflowMode = Literal["widen", "wrap", "saturate", "checked"]


class IntegerOverflowError(ArithmeticError):
    """A value does not fit the configured integer width."""


@dataclass(frozen=True, slots=True)
class IntegerPolicy:
    """How literals and intermediate results are fitted to ``bits``.

    ``widen`` keeps exact Python ints and ignores ``bits``. The other modes
    treat values as signed two's-complement integers of ``bits`` width.
    """

    overflow: OverflowMode = "widen"
    bits: int = 64

    def __post_init__(self) -> None:
        if self.overflow not in get_args(OverflowMode):
            raise ValueError(
                f"unknown overflow mode {self.overflow!r}, "
                f"expected one of {list(get_args(OverflowMode))}"
            )
        if isinstance(self.bits, bool) or not isinstance(self.bits, int) or self.bits < 1:
            raise ValueError(f"bits must be a positive integer, got {self.bits!r}")

    @property
    def min_value(self) -> int:
        return -(1 << (self.bits - 1))

    @property
    def max_value(self) -> int:
        return (1 << (self.bits - 1)) - 1

    def fit(self, value: int) -> int:
        if self.overflow == "widen":
            return value

        if self.min_value <= value <= self.max_value:
            return value

        if self.overflow == "wrap":
            modulus = 1 << self.bits
            return (value - self.min_value) % modulus + self.min_value

        if self.overflow == "saturate":
            return self.max_value if value > self.max_value else self.min_value

        raise IntegerOverflowError(
            f"{format_decimal(value)} does not fit in a signed {self.bits}-bit integer"
        )


@dataclass
class RuntimeContext:
    writer: TraceWriter = field(default_factory=TraceWriter)
    integers: IntegerPolicy = field(default_factory=IntegerPolicy)
