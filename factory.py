"""The verifying factory.

The factory does not just construct calculators, it checks them
against every contract before handing them out.

Flow:
  1. Caller asks for a calculator with a given ArithmeticConfig.
  2. Factory builds it.
  3. Factory runs every contract over the literals of a DigitBounds.
  4. All properties hold  -> return the calculator.
     Any property fails   -> raise VerificationError with the report.

Small domains are swept exhaustively; larger ones are checked on their
edge literals plus a seeded random sample.
"""
from __future__ import annotations

import inspect
import itertools
import logging
import random
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from bigint import ContractViolation
from calculator import Calculator
from contract import Contract, Property, all_contracts
from modes import TINY, ArithmeticConfig, DigitBounds

logger = logging.getLogger(__name__)


@dataclass
class VerificationResult:
    """Outcome of verifying one property."""

    property_name: str
    passed: bool
    counterexample: tuple | None = None
    tests_run: int = 0

    def __repr__(self) -> str:
        status = "PASS" if self.passed else "FAIL"
        ce = f"  counterexample={self.counterexample}" if self.counterexample else ""
        return f"[{status}] {self.property_name} ({self.tests_run} tests){ce}"


@dataclass
class VerificationReport:
    """Aggregate result of verifying one contract."""

    contract_name: str
    results: list[VerificationResult] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return all(r.passed for r in self.results)

    def summary(self) -> str:
        lines = [f"--- {self.contract_name} ---"]
        for r in self.results:
            lines.append(f"  {r}")
        status = "ALL PASSED" if self.passed else "FAILED"
        lines.append(f"  => {status}")
        return "\n".join(lines)


class VerificationError(Exception):
    """Raised when a calculator fails one of its contracts."""

    def __init__(self, report: VerificationReport):
        self.report = report
        super().__init__(f"Verification failed:\n{report.summary()}")


# ---------------------------------------------------------------------------
# The factory
# ---------------------------------------------------------------------------

class ArithmeticFactory:
    """Produces Calculator instances that have passed every contract."""

    EXHAUSTIVE_THRESHOLD = 64   # max literal count for a brute-force sweep
    SAMPLE_COUNT = 300
    SAMPLE_SEED = 20240101

    @classmethod
    def create(
        cls,
        config: ArithmeticConfig | Mapping[str, Any] | None = None,
        bounds: DigitBounds = TINY,
        contracts: list[Contract] | None = None,
    ) -> Calculator:
        """Build, verify, and return a Calculator."""
        if config is None:
            config = ArithmeticConfig()
        elif not isinstance(config, ArithmeticConfig):
            config = ArithmeticConfig.model_validate(config)

        calc = Calculator(config=config)
        cls._verify_all(calc, bounds, contracts or all_contracts())
        return calc

    # -- internal ---------------------------------------------------------

    @classmethod
    def _verify_all(
        cls, calc: Calculator, bounds: DigitBounds, contracts: list[Contract]
    ) -> None:
        for contract in contracts:
            report = cls._verify_contract(contract, calc, bounds)
            if not report.passed:
                logger.warning("contract %s failed:\n%s",
                               contract.name, report.summary())
                raise VerificationError(report)
            logger.debug("contract %s passed (%d properties)",
                         contract.name, len(contract))

    @classmethod
    def _verify_contract(
        cls, contract: Contract, calc: Calculator, bounds: DigitBounds
    ) -> VerificationReport:
        report = VerificationReport(contract_name=contract.name)
        for prop in contract:
            report.results.append(cls._verify_property(prop, calc, bounds))
        return report

    @classmethod
    def _verify_property(
        cls, prop: Property, calc: Calculator, bounds: DigitBounds
    ) -> VerificationResult:
        arity = _predicate_arity(prop)
        if bounds.width <= cls.EXHAUSTIVE_THRESHOLD:
            combos = itertools.product(list(bounds.all_literals()), repeat=arity)
        else:
            combos = _generate_samples(
                bounds, arity, cls.SAMPLE_COUNT, random.Random(cls.SAMPLE_SEED)
            )

        tests_run = 0
        for combo in combos:
            tests_run += 1
            try:
                ok = prop.check(calc, *combo)
            except ContractViolation:
                # e.g. a - b with b > a; outside the property's domain
                continue
            if not ok:
                return VerificationResult(
                    property_name=prop.name,
                    passed=False,
                    counterexample=combo,
                    tests_run=tests_run,
                )

        return VerificationResult(
            property_name=prop.name,
            passed=True,
            tests_run=tests_run,
        )


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _predicate_arity(prop: Property) -> int:
    """Number of literal arguments a predicate takes (the calculator excluded)."""
    sig = inspect.signature(prop.predicate)
    return len(sig.parameters) - 1


def _generate_samples(
    bounds: DigitBounds, arity: int, count: int, rng: random.Random
) -> list[tuple[str, ...]]:
    """Edge-literal combinations followed by random fill."""
    samples = list(itertools.product(bounds.edge_literals(), repeat=arity))
    while len(samples) < count:
        samples.append(tuple(bounds.random_literal(rng) for _ in range(arity)))
    return samples
