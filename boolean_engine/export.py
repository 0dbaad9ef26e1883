"""
Export Boolean functions to their textual normal forms.

Notation: "!" negates a variable, juxtaposition is AND, " v " is OR,
" * " joins CNF clauses and " + " is XOR in the Zhegalkin polynomial.
"""

from typing import Sequence, Union

from .function import TruthVector
from .quine_mccluskey import Cube, check_cover_arity
from .solver import MinimizationResult, minimize
from .truth_tables import minterm_to_bits, variable_names

DISJUNCTION = " v "
CONJUNCTION = " * "
XOR = " + "


def to_pdnf(function: TruthVector) -> str:
    """
    Perfect disjunctive normal form: one full conjunction per true row.

    Returns "0" for the constant zero function.
    """
    names = variable_names(function.arity)
    terms = [
        Cube.from_minterm(m, function.arity).to_expr_str(names)
        for m in function.minterms()
    ]
    return DISJUNCTION.join(terms) if terms else "0"


def to_pcnf(function: TruthVector) -> str:
    """
    Perfect conjunctive normal form: one full clause per false row.

    Returns "1" for the constant one function.
    """
    names = variable_names(function.arity)
    clauses = []

    for i, bit in enumerate(function):
        if bit:
            continue
        literals = [
            f"!{name}" if value else name
            for name, value in zip(names, minterm_to_bits(i, function.arity))
        ]
        clauses.append(f"({DISJUNCTION.join(literals)})")

    return CONJUNCTION.join(clauses) if clauses else "1"


def to_mdnf(source: Union[TruthVector, MinimizationResult, Sequence[Cube]]) -> str:
    """
    Minimal disjunctive normal form.

    Accepts a function (minimized greedily on the spot), a minimization
    result or a cover. An empty cover is "0", the universal cube is "1".
    """
    if isinstance(source, TruthVector):
        source = minimize(source)
    if isinstance(source, MinimizationResult):
        return source.expression

    cover = list(source)
    if not cover:
        return "0"
    n_vars = len(cover[0])
    check_cover_arity(cover, n_vars)
    names = variable_names(n_vars)
    return DISJUNCTION.join(impl.to_expr_str(names) for impl in cover)


def to_zhegalkin(function: TruthVector) -> str:
    """
    Zhegalkin polynomial (algebraic normal form), monomials in row order.

    The constant term is written "1"; constant functions give "0" or "1".
    """
    names = variable_names(function.arity)
    n = function.arity
    monomials = []

    for i, coefficient in enumerate(function.zhegalkin_coefficients()):
        if not coefficient:
            continue
        variables = [
            name
            for name, bit in zip(names, minterm_to_bits(i, n))
            if bit
        ]
        monomials.append("".join(variables) if variables else "1")

    return XOR.join(monomials) if monomials else "0"


def to_equations(function: TruthVector, result: MinimizationResult = None) -> str:
    """
    Export every normal form of a function as a readable report.

    Args:
        function: The function to describe
        result: A minimization result to report; computed greedily if omitted

    Returns:
        Human-readable Boolean equations
    """
    if result is None:
        result = minimize(function)

    lines = []
    lines.append(f"f = {function.value}  ({function.arity} variables)")
    lines.append(f"Method: {result.method}")
    lines.append(f"Total gate inputs: {result.cost}")
    lines.append("")
    lines.append(f"  PDNF      = {to_pdnf(function)}")
    lines.append(f"  PCNF      = {to_pcnf(function)}")
    lines.append(f"  MDNF      = {result.expression}")
    lines.append(f"  Zhegalkin = {to_zhegalkin(function)}")

    return "\n".join(lines)
