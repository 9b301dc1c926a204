"""Arbitrary-precision non-negative decimal integers.

A ``BigInt`` keeps one decimal digit per cell in a ``bytearray``, least
significant digit first (index 0 is the ones digit).  Values are not
required to be normalized: high-end zero cells are allowed and every
comparison looks only at the *effective length*, the number of cells
left after discarding them.

An integer whose buffer is empty is *invalid*.  Parsing a bad literal
produces one and so does ``release()``.  Comparisons involving an
invalid integer return False; arithmetic on one raises
``InvalidOperandError``.

Arithmetic mutates the accumulator in place::

    a = BigInt.new("100")
    a.sub(BigInt.new("99"))
    a.print()        # 1
"""
from __future__ import annotations

import sys
from typing import Iterable, TextIO

from modes import MulMode, PowMode, ZeroSubtrahendMode


_DIGITS = frozenset("0123456789")


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------

class ContractViolation(ValueError):
    """An operation was called outside its precondition."""


class InvalidOperandError(ContractViolation):
    """Arithmetic was attempted on an invalid (released or unparsed) integer."""


class NegativeResultError(ContractViolation):
    """Subtraction would produce a negative value."""


# ---------------------------------------------------------------------------
# The integer
# ---------------------------------------------------------------------------

class BigInt:
    """A mutable, little-endian decimal integer."""

    __slots__ = ("_cells",)
    __hash__ = None  # mutable

    def __init__(self, cells: Iterable[int] = ()) -> None:
        buf = bytearray(cells)
        for d in buf:
            if d > 9:
                raise ValueError(f"cell value {d} is not a decimal digit")
        self._cells = buf

    # -- construction -------------------------------------------------------

    @classmethod
    def new(cls, text: str) -> BigInt:
        """Parse a decimal literal.

        Returns the invalid integer for the empty string or for any
        character outside ``'0'..'9'``.  Signs, whitespace, underscores
        and base prefixes are all rejected.
        """
        num = cls()
        if not text or not all(ch in _DIGITS for ch in text):
            return num
        num._cells = bytearray(ord(ch) - 48 for ch in reversed(text))
        return num

    def clone(self) -> BigInt:
        """Deep copy, padding included."""
        num = type(self)()
        num._cells = bytearray(self._cells)
        return num

    __copy__ = clone

    def __deepcopy__(self, memo: dict) -> BigInt:
        return self.clone()

    def release(self) -> None:
        """Drop the buffer, leaving the invalid integer.  Idempotent."""
        self._cells = bytearray()

    # -- inspection ---------------------------------------------------------

    @property
    def length(self) -> int:
        return len(self._cells)

    @property
    def digits(self) -> tuple[int, ...]:
        """The cells, least significant first."""
        return tuple(self._cells)

    @property
    def effective_length(self) -> int:
        return len(self._cells.rstrip(b"\x00"))

    @property
    def is_valid(self) -> bool:
        return bool(self._cells)

    @property
    def is_zero(self) -> bool:
        return self.is_valid and self.effective_length == 0

    # -- sizing -------------------------------------------------------------

    def resize(self, length: int) -> None:
        """Change the number of cells.

        Growing appends zero cells at the high end, so the value is kept.
        Shrinking keeps the most-significant ``length`` cells and drops
        the low ones; it only preserves the value when the dropped cells
        are zero.  ``resize(0)`` releases.
        """
        if length < 0:
            raise ValueError(f"length must be >= 0, got {length}")
        old = len(self._cells)
        if length == old:
            return
        if length == 0:
            self.release()
        elif length > old:
            self._cells.extend(bytes(length - old))
        else:
            del self._cells[:old - length]

    def grow(self, length: int) -> None:
        """Zero-pad the high end up to ``length`` cells."""
        if length < len(self._cells):
            raise ValueError(
                f"cannot grow {len(self._cells)} cells down to {length}"
            )
        self.resize(length)

    def trim(self) -> None:
        """Drop high-end zero cells, keeping at least one cell."""
        end = max(self.effective_length, 1)
        del self._cells[end:]

    # -- comparison ---------------------------------------------------------

    def eq(self, other: BigInt) -> bool:
        if not (self.is_valid and other.is_valid):
            return False
        a_end, b_end = self.effective_length, other.effective_length
        if a_end != b_end:
            return False
        return self._cells[:a_end] == other._cells[:b_end]

    def gt(self, other: BigInt) -> bool:
        if not (self.is_valid and other.is_valid):
            return False
        a_end, b_end = self.effective_length, other.effective_length
        if a_end != b_end:
            return a_end > b_end
        a, b = self._cells, other._cells
        for i in range(a_end - 1, -1, -1):
            if a[i] != b[i]:
                return a[i] > b[i]
        return False

    def ge(self, other: BigInt) -> bool:
        return self.eq(other) or self.gt(other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BigInt):
            return NotImplemented
        return self.eq(other)

    def __gt__(self, other: BigInt) -> bool:
        if not isinstance(other, BigInt):
            return NotImplemented
        return self.gt(other)

    def __ge__(self, other: BigInt) -> bool:
        if not isinstance(other, BigInt):
            return NotImplemented
        return self.ge(other)

    def __lt__(self, other: BigInt) -> bool:
        if not isinstance(other, BigInt):
            return NotImplemented
        return other.gt(self)

    def __le__(self, other: BigInt) -> bool:
        if not isinstance(other, BigInt):
            return NotImplemented
        return other.ge(self)

    # -- arithmetic ---------------------------------------------------------

    def add(self, other: BigInt) -> None:
        """In-place carry-propagating addition."""
        _require_valid(self, other)
        acc, summand = self._cells, other._cells
        n = len(summand)
        if n > len(acc):
            acc.extend(bytes(n - len(acc)))

        carry = 0
        i = 0
        # Cells past the summand only change while a carry is pending.
        while i < n or carry:
            if i == len(acc):
                acc.append(0)
            s = carry + acc[i] + (summand[i] if i < n else 0)
            acc[i] = s % 10
            carry = s // 10
            i += 1

    def sub(
        self,
        other: BigInt,
        *,
        zero_mode: ZeroSubtrahendMode = ZeroSubtrahendMode.COMPLEMENT_TEN,
    ) -> None:
        """In-place subtraction by adding the ten's complement.

        Raises ``NegativeResultError`` when ``other`` is larger; the
        accumulator is left untouched in that case.
        """
        _require_valid(self, other)
        if not self.ge(other):
            raise NegativeResultError(f"{self} - {other} would be negative")

        if self.eq(other):
            self._cells = bytearray(b"\x00")
            return

        if other.is_zero and zero_mode is ZeroSubtrahendMode.SHORT_CIRCUIT:
            return

        width = len(self._cells)
        complement = _tens_complement(other._cells)
        if complement is None:
            # The complement of zero at the accumulator's width is
            # 10 ** width: a one just past the top cell.
            complement = bytearray(width)
            complement.append(1)
        elif len(complement) < width:
            complement.extend(b"\x09" * (width - len(complement)))

        self.add(BigInt._wrap(complement))
        # a >= b guarantees a carry out of the top cell; discard it.
        del self._cells[-1]
        self.trim()

    def mul(self, other: BigInt, *, mode: MulMode = MulMode.SCHOOLBOOK) -> None:
        """In-place multiplication."""
        _require_valid(self, other)
        if other.is_zero:
            self._cells = bytearray(b"\x00")
            return
        if self.is_zero:
            return

        if mode is MulMode.REPEATED_ADDITION:
            base = self.clone()
            counter = other.clone()
            one = BigInt.new("1")
            while counter.gt(one):
                self.add(base)
                counter.sub(one)
        else:
            self._cells = _long_multiply(self._cells, other._cells)

    def pow(
        self,
        other: BigInt,
        *,
        mode: PowMode = PowMode.SQUARING,
        mul_mode: MulMode = MulMode.SCHOOLBOOK,
    ) -> None:
        """In-place exponentiation.  ``0 ** 0`` is 1."""
        _require_valid(self, other)
        if other.is_zero:
            self._cells = bytearray(b"\x01")
            return

        if mode is PowMode.REPEATED_MULTIPLICATION:
            base = self.clone()
            counter = other.clone()
            one = BigInt.new("1")
            while counter.gt(one):
                self.mul(base, mode=mul_mode)
                counter.sub(one)
            return

        base = self.clone()
        exponent = other.clone()
        exponent.trim()
        result = BigInt.new("1")
        while True:
            if _halve(exponent._cells):
                result.mul(base, mode=mul_mode)
            exponent.trim()
            if exponent.is_zero:
                break
            base.mul(base, mode=mul_mode)
        self._cells = result._cells

    # -- formatting ---------------------------------------------------------

    def print(self, file: TextIO | None = None) -> None:
        """Write the decimal digits and a newline (stdout by default)."""
        out = sys.stdout if file is None else file
        out.write(str(self) + "\n")

    def __str__(self) -> str:
        if not self._cells:
            return ""
        end = max(self.effective_length, 1)
        return "".join(str(d) for d in reversed(self._cells[:end]))

    def __repr__(self) -> str:
        if not self._cells:
            return f"{type(self).__name__}()"
        text = "".join(str(d) for d in reversed(self._cells))
        return f"{type(self).__name__}.new({text!r})"

    # -- internal -----------------------------------------------------------

    @classmethod
    def _wrap(cls, cells: bytearray) -> BigInt:
        num = cls()
        num._cells = cells
        return num


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _require_valid(*operands: BigInt) -> None:
    for num in operands:
        if not num.is_valid:
            raise InvalidOperandError("arithmetic on an invalid integer")


def _tens_complement(cells: bytearray) -> bytearray | None:
    """Ten's complement relative to ``len(cells)``, or None for zero.

    Low zero cells stay zero, the first nonzero cell ``d`` becomes
    ``10 - d`` and every cell above it becomes ``9 - d``.
    """
    out = bytearray(cells)
    seen_nonzero = False
    for i, d in enumerate(out):
        if seen_nonzero:
            out[i] = 9 - d
        elif d:
            out[i] = 10 - d
            seen_nonzero = True
    return out if seen_nonzero else None


def _long_multiply(a: bytearray, b: bytearray) -> bytearray:
    """Schoolbook product of two little-endian digit buffers."""
    a = a.rstrip(b"\x00")
    b = b.rstrip(b"\x00")
    out = [0] * (len(a) + len(b))
    for i, db in enumerate(b):
        if not db:
            continue
        carry = 0
        for j, da in enumerate(a):
            t = out[i + j] + da * db + carry
            out[i + j] = t % 10
            carry = t // 10
        k = i + len(a)
        while carry:
            t = out[k] + carry
            out[k] = t % 10
            carry = t // 10
            k += 1
    cells = bytearray(out).rstrip(b"\x00")
    return cells or bytearray(b"\x00")


def _halve(cells: bytearray) -> int:
    """Divide a little-endian digit buffer by two in place; return the remainder."""
    remainder = 0
    for i in range(len(cells) - 1, -1, -1):
        value = remainder * 10 + cells[i]
        cells[i] = value // 2
        remainder = value % 2
    return remainder
