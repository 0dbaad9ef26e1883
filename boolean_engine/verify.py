"""
Verification of minimization results.

Ensures a DNF cover reproduces its function on every row of the truth table.
"""

from typing import Sequence, Union

from .function import TruthVector
from .quine_mccluskey import Cube, check_cover_arity
from .solver import MinimizationResult
from .truth_tables import minterm_to_bits


def evaluate_implicant(impl: Cube, minterm: int) -> bool:
    """Evaluate a product term on one truth table row."""
    return impl.covers(minterm)


def evaluate_sop(implicants: Sequence[Cube], minterm: int) -> bool:
    """Evaluate a sum-of-products on one row (OR of AND terms)."""
    return any(evaluate_implicant(impl, minterm) for impl in implicants)


def cover_to_vector(implicants: Sequence[Cube], n_vars: int) -> TruthVector:
    """Rebuild the truth vector a cover describes."""
    implicants = list(implicants)
    check_cover_arity(implicants, n_vars)
    return TruthVector.from_bits(
        evaluate_sop(implicants, m) for m in range(1 << n_vars)
    )


def verify_result(
    function: TruthVector,
    result: Union[MinimizationResult, Sequence[Cube]],
) -> tuple[bool, list[str]]:
    """
    Verify that a cover produces the function's value on all rows.

    Args:
        function: The minimized function
        result: Its minimization result, or a bare cover

    Returns:
        Tuple of (all_correct, list of error messages)

    Raises:
        InvalidArityError: A cube does not have one position per variable
    """
    implicants = list(result.implicants if isinstance(result, MinimizationResult) else result)
    check_cover_arity(implicants, function.arity)
    errors = []

    for minterm, expected in enumerate(function):
        actual = evaluate_sop(implicants, minterm)
        if actual != expected:
            bits = "".join(str(int(b)) for b in minterm_to_bits(minterm, function.arity))
            errors.append(f"Row {minterm} ({bits}): expected {int(expected)}, got {int(actual)}")

    return len(errors) == 0, errors


def print_truth_table_comparison(function: TruthVector, result: MinimizationResult) -> bool:
    """Print truth table comparing expected vs actual outputs."""
    check_cover_arity(result.implicants, function.arity)
    print("Truth Table Verification")
    print("=" * 40)
    print(f"{'Row':>5} | {'Input':>8} | Expected | Actual | Match")
    print("-" * 40)

    all_match = True

    for minterm, expected in enumerate(function):
        bits = "".join(str(int(b)) for b in minterm_to_bits(minterm, function.arity))
        actual = evaluate_sop(result.implicants, minterm)
        match_str = "." if actual == expected else "X"
        if actual != expected:
            all_match = False
        print(f"{minterm:>5} | {bits:>8} | {int(expected):>8} | {int(actual):>6} | {match_str}")

    print("-" * 40)
    print(f"All correct: {all_match}")
    return all_match
