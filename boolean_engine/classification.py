"""
Membership of a Boolean function in Post's five closed classes.

    T0  preserves zero      f(0...0) = 0
    T1  preserves one       f(1...1) = 1
    Ts  self-dual           f(x) != f(~x) for every x
    Tm  monotone            x <= y (bitwise) implies f(x) <= f(y)
    Tl  linear (affine)     Zhegalkin polynomial has degree <= 1
"""

from typing import NamedTuple

from .function import TruthVector

POST_CLASS_NAMES = ("T0", "T1", "Ts", "Tm", "Tl")


class PostClasses(NamedTuple):
    """One row of a Post table, in T0, T1, Ts, Tm, Tl order."""

    t0: bool
    t1: bool
    ts: bool
    tm: bool
    tl: bool


def is_t0(f: TruthVector) -> bool:
    return not f[0]


def is_t1(f: TruthVector) -> bool:
    return f[len(f) - 1]


def is_self_dual(f: TruthVector) -> bool:
    """
    Row i and row (2**n - 1 - i) are complementary assignments, and the
    relation is symmetric, so only the second half of the rows is scanned.
    """
    size = len(f)
    for i in range(size // 2, size):
        if f[i] == f[size - 1 - i]:
            return False
    return True


def is_monotone(f: TruthVector) -> bool:
    """
    Check that no submask i of j has f(i) = 1 and f(j) = 0.

    The submask order is the transitive closure of single-bit steps, so
    testing each j against the rows one bit below it is enough.
    """
    n = f.arity
    for j in range(len(f)):
        if f[j]:
            continue
        for k in range(n):
            bit = 1 << k
            if j & bit and f[j ^ bit]:
                return False
    return True


def is_linear(f: TruthVector) -> bool:
    """True if every nonzero Zhegalkin coefficient is a constant or a single variable."""
    return all(
        bin(i).count("1") <= 1
        for i, coefficient in enumerate(f.zhegalkin_coefficients())
        if coefficient
    )


def classify(f: TruthVector) -> PostClasses:
    """Compute all five class memberships of a function."""
    return PostClasses(
        t0=is_t0(f),
        t1=is_t1(f),
        ts=is_self_dual(f),
        tm=is_monotone(f),
        tl=is_linear(f),
    )
