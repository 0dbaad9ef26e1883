"""
Minimal DNF synthesis for a single Boolean function.

This module drives the Quine-McCluskey pipeline: seed minterms, consensus
rounds down to prime implicants, then a cover of the Quine table. The cover
is chosen either greedily (the classical hand method, the default) or
exactly as a weighted MaxSAT problem.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional

from pysat.examples.rc2 import RC2
from pysat.formula import WCNF

from .function import TruthVector
from .quine_mccluskey import Cube, QuineTable, greedy_cover, prime_implicants
from .truth_tables import PRACTICAL_ARITY_LIMIT, variable_names

logger = logging.getLogger(__name__)


@dataclass
class CostBreakdown:
    """Gate input cost of a two-level AND/OR realization of a cover."""

    and_inputs: int      # Inputs to AND gates (multi-literal terms only)
    or_inputs: int       # Inputs to the OR gate (one per term)
    num_and_gates: int   # Number of AND gates (multi-literal terms)

    @property
    def total(self) -> int:
        """Total gate inputs (AND + OR)."""
        return self.and_inputs + self.or_inputs


@dataclass
class MinimizationResult:
    """Result of minimizing one function."""

    cost: int
    implicants: list[Cube]
    method: str
    expression: str
    prime_implicants: list[Cube] = field(default_factory=list)
    cost_breakdown: CostBreakdown = None

    @property
    def num_terms(self) -> int:
        return len(self.implicants)


def term_cost(impl: Cube) -> int:
    """
    Gate inputs a single term adds to the circuit.

    Single literals are direct wires, so only terms with two or more
    literals pay for an AND gate; every term pays one OR input.
    """
    and_cost = impl.num_literals if impl.num_literals >= 2 else 0
    return and_cost + 1


class MinimalDNFSolver:
    """
    Minimal DNF solver for one TruthVector.

    Uses:
    1. Quine-McCluskey consensus rounds for the prime implicants
    2. Greedy cover of the Quine table for the baseline
    3. MaxSAT optimization for a minimum-cost cover
    """

    def __init__(self, function: TruthVector, max_cubes: Optional[int] = None):
        if function.arity > PRACTICAL_ARITY_LIMIT:
            logger.warning(
                "Minimizing a %d-ary function; above %d variables the prime "
                "implicant search may not finish in reasonable time",
                function.arity, PRACTICAL_ARITY_LIMIT,
            )

        self.function = function
        self.n_vars = function.arity
        self.max_cubes = max_cubes
        self.minterms = [Cube.from_minterm(m, self.n_vars) for m in function.minterms()]
        self.prime_implicants: list[Cube] = []

    def _compute_cost_breakdown(self, selected: list[Cube]) -> CostBreakdown:
        and_inputs = 0
        num_and_gates = 0

        for impl in selected:
            if impl.num_literals >= 2:
                and_inputs += impl.num_literals
                num_and_gates += 1

        return CostBreakdown(
            and_inputs=and_inputs,
            or_inputs=len(selected),
            num_and_gates=num_and_gates,
        )

    def _build_result(self, selected: list[Cube], method: str) -> MinimizationResult:
        names = variable_names(self.n_vars)
        terms = [impl.to_expr_str(names) for impl in selected]
        cost_breakdown = self._compute_cost_breakdown(selected)

        return MinimizationResult(
            cost=cost_breakdown.total,
            implicants=selected,
            method=method,
            expression=" v ".join(terms) if terms else "0",
            prime_implicants=list(self.prime_implicants),
            cost_breakdown=cost_breakdown,
        )

    def constant_result(self) -> Optional[MinimizationResult]:
        """
        Short-circuit for constant functions.

        Returns the empty cover for 0 and the universal cube for 1, or None
        if the function is not constant.
        """
        if not self.minterms:
            return self._build_result([], "constant")
        if len(self.minterms) == len(self.function):
            return self._build_result([Cube.universal(self.n_vars)], "constant")
        return None

    def generate_prime_implicants(self) -> list[Cube]:
        """Run the consensus rounds over the function's minterms."""
        self.prime_implicants = prime_implicants(self.minterms, self.max_cubes)
        logger.debug(
            "%s: %d minterms, %d prime implicants",
            self.function.value, len(self.minterms), len(self.prime_implicants),
        )
        return self.prime_implicants

    def greedy_baseline(self) -> MinimizationResult:
        """Cover the Quine table greedily (fewest-marks column, most-ones row)."""
        if not self.prime_implicants:
            self.generate_prime_implicants()

        table = QuineTable(self.prime_implicants, self.minterms)
        selected = greedy_cover(table)

        return self._build_result(selected, "greedy")

    def maxsat_optimize(self) -> MinimizationResult:
        """
        Minimum-cost cover of the Quine table as weighted MaxSAT.

        - Hard clauses: every minterm is covered by a selected prime
        - Soft clauses: each selected prime costs its gate inputs
        """
        if not self.prime_implicants:
            self.generate_prime_implicants()

        wcnf = WCNF()

        # Variable mapping: implicant index -> SAT variable (1-indexed)
        impl_vars = {i: i + 1 for i in range(len(self.prime_implicants))}

        for minterm in self.minterms:
            covering = [
                impl_vars[i]
                for i, impl in enumerate(self.prime_implicants)
                if impl.precedes(minterm)
            ]
            if not covering:
                raise RuntimeError(f"No implicant covers {minterm!r}")
            wcnf.append(covering)

        for i, impl in enumerate(self.prime_implicants):
            wcnf.append([-impl_vars[i]], weight=term_cost(impl))

        with RC2(wcnf) as solver:
            model = solver.compute()
            if model is None:
                raise RuntimeError("MaxSAT solver found no solution")

            chosen = set(lit for lit in model if lit > 0)
            selected = [
                impl
                for i, impl in enumerate(self.prime_implicants)
                if impl_vars[i] in chosen
            ]

        return self._build_result(selected, "maxsat")

    def solve(self, use_exact: bool = False) -> MinimizationResult:
        """
        Minimize the function.

        Args:
            use_exact: Choose the cover with MaxSAT instead of greedily
        """
        result = self.constant_result()
        if result is not None:
            return result

        if use_exact:
            return self.maxsat_optimize()
        return self.greedy_baseline()

    def print_result(self, result: MinimizationResult):
        """Pretty-print a minimization result."""
        print(f"Function:  {self.function.value}")
        print(f"Method:    {result.method}")
        print(f"Primes:    {len(result.prime_implicants)}")
        print(f"Terms:     {result.num_terms}")
        print(f"Cost:      {result.cost} gate inputs")
        if result.cost_breakdown is not None:
            print(f"  AND inputs: {result.cost_breakdown.and_inputs}")
            print(f"  OR inputs:  {result.cost_breakdown.or_inputs}")
        print(f"MDNF:      {result.expression}")


def minimize(
    function: TruthVector,
    exact: bool = False,
    max_cubes: Optional[int] = None,
) -> MinimizationResult:
    """Minimal DNF of a function; see MinimalDNFSolver."""
    return MinimalDNFSolver(function, max_cubes=max_cubes).solve(use_exact=exact)


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)

    solver = MinimalDNFSolver(TruthVector.from_string("0001011101111111"))
    solver.print_result(solver.solve())
    print()
    solver.print_result(solver.solve(use_exact=True))
