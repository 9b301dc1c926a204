"""Contract layer: the properties every calculator must satisfy.

A Contract is an ordered list of named Properties.  Each Property
carries a predicate taking the ``Calculator`` under test followed by
one or more decimal literals (possibly zero-padded).  Predicates say
WHAT must hold; the factory decides which literals to feed them.

Where a predicate checks a numeric result it compares against Python's
own ``int`` parsed from the same literal.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable

from bigint import BigInt
from calculator import Calculator


# ---------------------------------------------------------------------------
# Core contract primitives
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Property:
    """A single verifiable property of a calculator."""

    name: str
    description: str
    predicate: Callable[..., bool]

    def check(self, *args: Any) -> bool:
        return self.predicate(*args)


@dataclass
class Contract:
    """An ordered collection of properties for one area of behaviour."""

    name: str
    properties: list[Property] = field(default_factory=list)

    def add(self, prop: Property) -> None:
        self.properties.append(prop)

    def __iter__(self):
        return iter(self.properties)

    def __len__(self):
        return len(self.properties)


# ---------------------------------------------------------------------------
# Helpers used inside predicates
# ---------------------------------------------------------------------------

# Largest exponent the pow oracle check will evaluate.
MAX_ORACLE_EXPONENT = 12


def natural(text: str) -> str:
    """The literal without leading zeros ("0" for any all-zero literal)."""
    return text.lstrip("0") or "0"


def matches(result: BigInt, expected: int) -> bool:
    return str(result) == str(expected)


def _clone_is_independent(calc: Calculator, a: str) -> bool:
    x = calc.parse(a)
    y = x.clone()
    before = x.digits
    y.add(BigInt.new("7"))
    if x.digits != before:
        return False
    snapshot = y.digits
    x.mul(BigInt.new("3"))
    x.release()
    return y.digits == snapshot


def _pad_then_trim(calc: Calculator, a: str) -> bool:
    x = calc.parse(a)
    k = x.effective_length
    x.grow(x.length + 3)
    x.trim()
    return x.length == max(k, 1) and matches(x, int(a))


# ---------------------------------------------------------------------------
# Contract builders
# ---------------------------------------------------------------------------

def representation_contract() -> Contract:
    contract = Contract(name="representation")

    contract.add(Property(
        name="print_round_trip",
        description="str(new(s)) is s without leading zeros, or '0'",
        predicate=lambda calc, a: str(calc.parse(a)) == natural(a),
    ))

    contract.add(Property(
        name="clone_independence",
        description="Mutating a clone never touches the source, and vice versa",
        predicate=_clone_is_independent,
    ))

    contract.add(Property(
        name="pad_trim_round_trip",
        description="Growing then trimming keeps the value at effective length",
        predicate=_pad_then_trim,
    ))

    return contract


def comparison_contract() -> Contract:
    contract = Contract(name="comparison")

    contract.add(Property(
        name="padding_insensitive_eq",
        description="eq ignores leading-zero padding",
        predicate=lambda calc, a: calc.eq(a, "000" + a),
    ))

    contract.add(Property(
        name="antisymmetry",
        description="gt(a, b) and gt(b, a) never both hold",
        predicate=lambda calc, a, b: not (calc.gt(a, b) and calc.gt(b, a)),
    ))

    contract.add(Property(
        name="ge_is_eq_or_gt",
        description="ge(a, b) == eq(a, b) or gt(a, b)",
        predicate=lambda calc, a, b: (
            calc.ge(a, b) == (calc.eq(a, b) or calc.gt(a, b))
        ),
    ))

    contract.add(Property(
        name="irreflexive_gt",
        description="gt(a, a) is false",
        predicate=lambda calc, a: not calc.gt(a, a),
    ))

    contract.add(Property(
        name="invalid_never_equal",
        description="eq with an invalid operand is false",
        predicate=lambda calc, a: (
            not calc.eq(a, "") and not calc.eq("", a) and not calc.eq("", "")
        ),
    ))

    contract.add(Property(
        name="agrees_with_int",
        description="eq and gt match Python int ordering",
        predicate=lambda calc, a, b: (
            calc.eq(a, b) == (int(a) == int(b))
            and calc.gt(a, b) == (int(a) > int(b))
        ),
    ))

    return contract


def addition_contract() -> Contract:
    contract = Contract(name="addition")

    contract.add(Property(
        name="identity",
        description="a + 0 == a for every representation of zero",
        predicate=lambda calc, a: (
            calc.eq(calc.add(a, "0"), a) and calc.eq(calc.add(a, "0000"), a)
        ),
    ))

    contract.add(Property(
        name="commutativity",
        description="a + b == b + a",
        predicate=lambda calc, a, b: calc.eq(calc.add(a, b), calc.add(b, a)),
    ))

    contract.add(Property(
        name="agrees_with_int",
        description="a + b matches Python int",
        predicate=lambda calc, a, b: matches(calc.add(a, b), int(a) + int(b)),
    ))

    return contract


def subtraction_contract() -> Contract:
    contract = Contract(name="subtraction")

    contract.add(Property(
        name="inverts_addition",
        description="(a + b) - b == a",
        predicate=lambda calc, a, b: calc.eq(calc.sub(calc.add(a, b), b), a),
    ))

    contract.add(Property(
        name="self_inverse",
        description="a - a == 0",
        predicate=lambda calc, a: calc.sub(a, a).is_zero,
    ))

    contract.add(Property(
        name="identity",
        description="a - 0 == a",
        predicate=lambda calc, a: calc.eq(calc.sub(a, "0"), a),
    ))

    contract.add(Property(
        name="agrees_with_int",
        description="a - b matches Python int whenever a >= b",
        predicate=lambda calc, a, b: (
            int(a) < int(b) or matches(calc.sub(a, b), int(a) - int(b))
        ),
    ))

    return contract


def multiplication_contract() -> Contract:
    contract = Contract(name="multiplication")

    contract.add(Property(
        name="zero",
        description="a * 0 == 0",
        predicate=lambda calc, a: calc.mul(a, "0").is_zero,
    ))

    contract.add(Property(
        name="identity",
        description="a * 1 == a",
        predicate=lambda calc, a: calc.eq(calc.mul(a, "1"), a),
    ))

    contract.add(Property(
        name="commutativity",
        description="a * b == b * a",
        predicate=lambda calc, a, b: calc.eq(calc.mul(a, b), calc.mul(b, a)),
    ))

    contract.add(Property(
        name="agrees_with_int",
        description="a * b matches Python int",
        predicate=lambda calc, a, b: matches(calc.mul(a, b), int(a) * int(b)),
    ))

    return contract


def exponentiation_contract() -> Contract:
    contract = Contract(name="exponentiation")

    contract.add(Property(
        name="zero_exponent",
        description="a ** 0 == 1, including 0 ** 0",
        predicate=lambda calc, a: matches(calc.pow(a, "0"), 1),
    ))

    contract.add(Property(
        name="unit_exponent",
        description="a ** 1 == a",
        predicate=lambda calc, a: calc.eq(calc.pow(a, "1"), a),
    ))

    contract.add(Property(
        name="agrees_with_int",
        description="a ** b matches Python int  [small exponents only]",
        predicate=lambda calc, a, b: (
            int(b) > MAX_ORACLE_EXPONENT
            or matches(calc.pow(a, b), int(a) ** int(b))
        ),
    ))

    return contract


def all_contracts() -> list[Contract]:
    return [
        representation_contract(),
        comparison_contract(),
        addition_contract(),
        subtraction_contract(),
        multiplication_contract(),
        exponentiation_contract(),
    ]
