"""
Currency value type.

Amounts are persisted as integer minor units (cents) so arithmetic stays
exact. ``Money`` is the only place that converts between cents and the
decimal dollar amounts users type and read.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP, InvalidOperation
from typing import Union

CENTS_PER_UNIT = 100
CURRENCY_SYMBOL = "$"

Number = Union[Decimal, int, str]


@dataclass(frozen=True, order=True)
class Money:
    cents: int

    def __post_init__(self):
        if isinstance(self.cents, bool) or not isinstance(self.cents, int):
            raise TypeError(f"Money requires integer minor units, got {self.cents!r}")

    @classmethod
    def zero(cls) -> "Money":
        return cls(0)

    @classmethod
    def from_minor_units(cls, cents: int) -> "Money":
        return cls(int(cents))

    @classmethod
    def from_major_units(cls, amount: Number) -> "Money":
        """Build from a dollar amount, rounding half-up to the nearest cent."""
        try:
            value = Decimal(str(amount))
        except InvalidOperation:
            raise ValueError(f"Invalid amount: {amount!r}")
        if not value.is_finite():
            raise ValueError(f"Invalid amount: {amount!r}")
        try:
            cents = (value * CENTS_PER_UNIT).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
        except InvalidOperation:
            raise ValueError(f"Amount out of range: {amount!r}")
        return cls(int(cents))

    def to_minor_units(self) -> int:
        return self.cents

    @property
    def amount(self) -> Decimal:
        return (Decimal(self.cents) / CENTS_PER_UNIT).quantize(Decimal("0.01"))

    def format(self) -> str:
        sign = "-" if self.cents < 0 else ""
        return f"{sign}{CURRENCY_SYMBOL}{abs(self.amount):,.2f}"

    def __add__(self, other: "Money") -> "Money":
        if not isinstance(other, Money):
            return NotImplemented
        return Money(self.cents + other.cents)

    def __str__(self) -> str:
        return self.format()
