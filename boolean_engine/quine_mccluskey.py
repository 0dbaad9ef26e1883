"""
Pure Python implementation of the Quine-McCluskey algorithm.

Phase one merges adjacent cubes until a fixpoint, leaving the prime
implicants. Phase two relates those primes to the original minterms in a
Quine table and picks a cover greedily, the way the table is reduced by
hand: take the hardest column, cover it with the widest row, strike out
everything that row covers, repeat.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence

from .errors import BudgetExceededError, InvalidArityError
from .truth_tables import VARIABLES_ALPHABET

logger = logging.getLogger(__name__)


class Trit(Enum):
    """Value of one cube position."""

    FALSE = 0
    TRUE = 1
    UNSET = 2  # don't care


@dataclass(frozen=True)
class Cube:
    """
    A ternary implicant: one Trit per variable (variable A first).

    Equality and hashing are structural over the whole tuple, so equal cubes
    produced by different merges collapse in sets and dict keys.
    """

    values: tuple[Trit, ...]

    @classmethod
    def from_minterm(cls, minterm: int, n_vars: int) -> "Cube":
        """Fully determined cube of one truth table row."""
        return cls(tuple(
            Trit.TRUE if (minterm >> (n_vars - 1 - i)) & 1 else Trit.FALSE
            for i in range(n_vars)
        ))

    @classmethod
    def universal(cls, n_vars: int) -> "Cube":
        """The cube with every position don't care (the constant 1)."""
        return cls((Trit.UNSET,) * n_vars)

    @property
    def num_literals(self) -> int:
        """Count the number of determined positions (literals in the term)."""
        return sum(1 for v in self.values if v is not Trit.UNSET)

    @property
    def ones_count(self) -> int:
        """Count the positions determined TRUE."""
        return sum(1 for v in self.values if v is Trit.TRUE)

    @property
    def is_minterm(self) -> bool:
        return Trit.UNSET not in self.values

    def _check_length(self, other: "Cube"):
        if len(self.values) != len(other.values):
            raise InvalidArityError(
                f"Cubes of length {len(self.values)} and {len(other.values)} cannot be compared"
            )

    def precedes(self, other: "Cube") -> bool:
        """True if other agrees with every position this cube determines."""
        self._check_length(other)
        return all(
            a is Trit.UNSET or a is b
            for a, b in zip(self.values, other.values)
        )

    def can_merge(self, other: "Cube") -> bool:
        """
        Check the Quine-McCluskey adjacency condition.

        Both cubes must have the same don't care positions and differ in
        exactly one determined position.
        """
        self._check_length(other)
        diff = 0
        for a, b in zip(self.values, other.values):
            if a is b:
                continue
            if a is Trit.UNSET or b is Trit.UNSET:
                return False
            diff += 1
            if diff > 1:
                return False
        return diff == 1

    def merge(self, other: "Cube") -> "Cube":
        """Return the cube with the single differing position set to UNSET."""
        if not self.can_merge(other):
            raise ValueError(f"{self!r} and {other!r} are not adjacent")
        return Cube(tuple(
            a if a is b else Trit.UNSET
            for a, b in zip(self.values, other.values)
        ))

    def covers(self, minterm: int) -> bool:
        """Check if this cube covers a given truth table row."""
        n = len(self.values)
        for i, v in enumerate(self.values):
            if v is Trit.UNSET:
                continue
            bit = (minterm >> (n - 1 - i)) & 1
            if bit != v.value:
                return False
        return True

    def to_expr_str(self, var_names: Optional[Sequence[str]] = None) -> str:
        """Convert to a product term such as "!AC"; the universal cube is "1"."""
        if var_names is None:
            var_names = VARIABLES_ALPHABET
        if len(var_names) < len(self.values):
            raise InvalidArityError(
                f"{len(self.values)} variables but only {len(var_names)} names"
            )

        literals = []
        for name, v in zip(var_names, self.values):
            if v is Trit.TRUE:
                literals.append(name)
            elif v is Trit.FALSE:
                literals.append(f"!{name}")

        return "".join(literals) if literals else "1"

    def __len__(self):
        return len(self.values)

    def __repr__(self):
        pattern = "".join("-" if v is Trit.UNSET else str(v.value) for v in self.values)
        return f"Cube({pattern})"


def check_cover_arity(implicants: Sequence[Cube], n_vars: int):
    """Raise InvalidArityError unless every cube has n_vars positions."""
    for impl in implicants:
        if len(impl) != n_vars:
            raise InvalidArityError(
                f"{impl!r} has {len(impl)} variables, expected {n_vars}"
            )


def prime_implicants(
    minterms: Sequence[Cube],
    max_cubes: Optional[int] = None,
) -> list[Cube]:
    """
    Run the consensus rounds and return every prime implicant.

    Each round tries every unordered pair of the current generation. Merge
    results form the next generation (deduplicated, in discovery order);
    cubes that merged with nobody are prime. Stops at the first round
    without merges.

    Args:
        minterms: Seed cubes, normally the function's minterms
        max_cubes: Upper bound on the number of cubes generated over all
            rounds; BudgetExceededError is raised once it is passed

    Returns:
        Prime implicants, earlier rounds first
    """
    current = list(dict.fromkeys(minterms))
    generated = len(current)
    if max_cubes is not None and generated > max_cubes:
        raise BudgetExceededError(f"{generated} seed cubes exceed the budget of {max_cubes}")

    primes = []
    round_no = 0

    while current:
        next_gen = {}
        used = set()

        for i, cube1 in enumerate(current):
            for cube2 in current[i + 1:]:
                if not cube1.can_merge(cube2):
                    continue
                merged = cube1.merge(cube2)
                if merged not in next_gen:
                    next_gen[merged] = None
                    generated += 1
                    if max_cubes is not None and generated > max_cubes:
                        raise BudgetExceededError(
                            f"Generated more than {max_cubes} cubes in round {round_no}"
                        )
                used.add(cube1)
                used.add(cube2)

        survivors = [cube for cube in current if cube not in used]
        primes.extend(survivors)

        logger.debug(
            "round %d: %d cubes, %d merged, %d prime",
            round_no, len(current), len(next_gen), len(survivors),
        )

        current = list(next_gen)
        round_no += 1

    return primes


class QuineTable:
    """
    Covering table between prime implicants (rows) and minterms (columns).

    Cell (row, column) is set when the row precedes the column. Columns are
    struck out in place as the cover grows; rows are never removed.
    """

    def __init__(self, rows: Sequence[Cube], columns: Sequence[Cube]):
        self.rows = list(rows)
        self.columns = list(columns)
        self.cells: dict[Cube, set[Cube]] = {
            row: {col for col in self.columns if row.precedes(col)}
            for row in self.rows
        }

    def covering_rows(self, column: Cube) -> list[Cube]:
        """Rows with a mark in the column, in scan order."""
        return [row for row in self.rows if column in self.cells[row]]

    def column_count(self, column: Cube) -> int:
        return sum(1 for row in self.rows if column in self.cells[row])

    def remove_columns(self, row: Cube):
        """Strike out every remaining column the row covers."""
        covered = self.cells[row]
        self.columns = [col for col in self.columns if col not in covered]

    def __bool__(self):
        return bool(self.columns)


def greedy_cover(table: QuineTable) -> list[Cube]:
    """
    Greedy set cover of a Quine table.

    Repeatedly picks the remaining column with the fewest marks, then the
    covering row with the most TRUE positions (first in scan order on ties
    at both steps), adds that row to the cover and strikes out its columns.
    The result is not guaranteed to be a minimum cover.

    Returns:
        Selected implicants in selection order
    """
    selected = []

    while table:
        column = min(table.columns, key=table.column_count)
        candidates = table.covering_rows(column)

        if not candidates:
            raise RuntimeError(f"Cannot cover: {table.columns[:5]}...")

        best = max(candidates, key=lambda row: row.ones_count)
        selected.append(best)
        table.remove_columns(best)

    return selected


def print_prime_implicants(primes: list[Cube]):
    """Debug helper to print all prime implicants."""
    print(f"Prime implicants ({len(primes)}):")
    for p in sorted(primes, key=lambda x: x.num_literals):
        print(f"  {p.to_expr_str():8} ({p.num_literals} lit)")
