"""Configured calculator over ``BigInt``.

``BigInt`` arithmetic mutates its accumulator.  The calculator wraps it
in value semantics: every operation works on a clone of its first
operand and returns the result, leaving the arguments untouched.
Operands may be ``BigInt`` values or decimal literals.

The modes chosen in ``ArithmeticConfig`` are applied to every call.
"""
from __future__ import annotations

from dataclasses import dataclass, field

from bigint import BigInt
from modes import ArithmeticConfig


@dataclass(frozen=True)
class Calculator:
    config: ArithmeticConfig = field(default_factory=ArithmeticConfig)

    # -- internal helpers ---------------------------------------------------

    @staticmethod
    def _own(value: BigInt | str) -> BigInt:
        """A BigInt the caller may mutate freely."""
        if isinstance(value, BigInt):
            return value.clone()
        return BigInt.new(value)

    @staticmethod
    def _view(value: BigInt | str) -> BigInt:
        if isinstance(value, BigInt):
            return value
        return BigInt.new(value)

    # -- construction -------------------------------------------------------

    def parse(self, text: str) -> BigInt:
        return BigInt.new(text)

    # -- comparison ---------------------------------------------------------

    def eq(self, a: BigInt | str, b: BigInt | str) -> bool:
        return self._view(a).eq(self._view(b))

    def gt(self, a: BigInt | str, b: BigInt | str) -> bool:
        return self._view(a).gt(self._view(b))

    def ge(self, a: BigInt | str, b: BigInt | str) -> bool:
        return self._view(a).ge(self._view(b))

    # -- public operations --------------------------------------------------

    def add(self, a: BigInt | str, b: BigInt | str) -> BigInt:
        result = self._own(a)
        result.add(self._view(b))
        return result

    def sub(self, a: BigInt | str, b: BigInt | str) -> BigInt:
        """Subtraction; raises NegativeResultError when b > a."""
        result = self._own(a)
        result.sub(self._view(b), zero_mode=self.config.zero_subtrahend)
        return result

    def mul(self, a: BigInt | str, b: BigInt | str) -> BigInt:
        result = self._own(a)
        result.mul(self._view(b), mode=self.config.mul_mode)
        return result

    def pow(self, a: BigInt | str, b: BigInt | str) -> BigInt:
        result = self._own(a)
        result.pow(
            self._view(b),
            mode=self.config.pow_mode,
            mul_mode=self.config.mul_mode,
        )
        return result
