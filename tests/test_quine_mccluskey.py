import pytest

from boolean_engine import (
    BudgetExceededError,
    Cube,
    InvalidArityError,
    QuineTable,
    Trit,
    greedy_cover,
    prime_implicants,
)

_TRITS = {"0": Trit.FALSE, "1": Trit.TRUE, "-": Trit.UNSET}


def cube(pattern):
    return Cube(tuple(_TRITS[ch] for ch in pattern))


def seeds(minterms, n_vars):
    return [Cube.from_minterm(m, n_vars) for m in minterms]


def test_from_minterm():
    assert Cube.from_minterm(5, 3) == cube("101")
    assert Cube.from_minterm(0, 2) == cube("00")
    assert repr(Cube.from_minterm(6, 3)) == "Cube(110)"


def test_universal_cube():
    u = Cube.universal(3)
    assert u == cube("---")
    assert u.num_literals == 0
    assert not u.is_minterm


def test_structural_equality_and_hash():
    a = cube("1-0")
    b = Cube.from_minterm(4, 3).merge(Cube.from_minterm(6, 3))
    assert a == b
    assert hash(a) == hash(b)
    assert len({a, b, cube("1-1")}) == 2


def test_ones_count_and_literals():
    assert cube("1-1").ones_count == 2
    assert cube("0-0").ones_count == 0
    assert cube("1-0").num_literals == 2
    assert cube("110").is_minterm


@pytest.mark.parametrize("a,b,expected", [
    ("1-0", "110", True),
    ("1-0", "100", True),
    ("1-0", "111", False),
    ("---", "010", True),
    ("1-0", "1-0", True),
    ("1-0", "--0", False),
    ("01", "01", True),
])
def test_precedes(a, b, expected):
    assert cube(a).precedes(cube(b)) is expected


@pytest.mark.parametrize("a,b,expected", [
    ("100", "110", True),
    ("100", "111", False),
    ("1-0", "100", False),
    ("1-0", "0-0", True),
    ("1-0", "1-0", False),
    ("-01", "-11", True),
    ("-01", "1-1", False),
])
def test_can_merge(a, b, expected):
    assert cube(a).can_merge(cube(b)) is expected
    assert cube(b).can_merge(cube(a)) is expected


def test_merge():
    assert cube("100").merge(cube("110")) == cube("1-0")
    assert cube("1-0").merge(cube("0-0")) == cube("--0")


def test_merge_requires_adjacency():
    with pytest.raises(ValueError):
        cube("100").merge(cube("111"))


def test_length_mismatch():
    with pytest.raises(InvalidArityError):
        cube("10").precedes(cube("100"))
    with pytest.raises(InvalidArityError):
        cube("10").can_merge(cube("100"))


def test_covers():
    c = cube("1-0")
    assert [m for m in range(8) if c.covers(m)] == [4, 6]
    assert all(Cube.universal(2).covers(m) for m in range(4))


def test_to_expr_str():
    assert cube("1-0").to_expr_str() == "A!C"
    assert cube("01").to_expr_str() == "!AB"
    assert cube("--").to_expr_str() == "1"
    assert cube("10").to_expr_str(["x", "y"]) == "x!y"
    with pytest.raises(InvalidArityError):
        cube("101").to_expr_str(["x", "y"])


def test_prime_implicants_collapse_to_universal():
    assert prime_implicants(seeds([0, 1, 2, 3], 2)) == [cube("--")]


def test_prime_implicants_without_adjacent_minterms():
    assert prime_implicants(seeds([1, 2], 2)) == [cube("01"), cube("10")]


def test_prime_implicants_mixed_rounds():
    # f = A v BC: minterm 3 (011) only merges once
    primes = prime_implicants(seeds([3, 4, 5, 6, 7], 3))
    assert set(primes) == {cube("-11"), cube("1--")}


def test_prime_implicants_cyclic_function():
    primes = prime_implicants(seeds([0, 1, 2, 5, 6, 7], 3))
    assert primes == [
        cube("00-"), cube("0-0"), cube("-01"),
        cube("-10"), cube("1-1"), cube("11-"),
    ]


def test_prime_implicants_deduplicate_seeds():
    assert prime_implicants(seeds([1, 1, 2], 2)) == [cube("01"), cube("10")]


def test_prime_implicants_empty():
    assert prime_implicants([]) == []


def test_budget_on_seeds():
    with pytest.raises(BudgetExceededError):
        prime_implicants(seeds([0, 1, 2, 3], 2), max_cubes=3)


def test_budget_during_rounds():
    with pytest.raises(BudgetExceededError):
        prime_implicants(seeds([0, 1, 2, 3], 2), max_cubes=5)
    # 4 seeds + 4 pairs + 1 universal cube
    assert prime_implicants(seeds([0, 1, 2, 3], 2), max_cubes=9) == [cube("--")]


def test_quine_table():
    rows = [cube("-1"), cube("1-")]
    columns = seeds([1, 2, 3], 2)
    table = QuineTable(rows, columns)

    assert table.column_count(cube("11")) == 2
    assert table.covering_rows(cube("01")) == [cube("-1")]

    table.remove_columns(cube("-1"))
    assert table.columns == [cube("10")]
    assert table

    table.remove_columns(cube("1-"))
    assert not table


def test_greedy_cover_prefers_scarce_columns_and_more_ones():
    columns = seeds([0, 1, 2, 5, 6, 7], 3)
    table = QuineTable(prime_implicants(columns), columns)
    assert greedy_cover(table) == [cube("00-"), cube("-10"), cube("1-1")]
    assert not table


def test_greedy_cover_picks_essential_first():
    columns = seeds([1, 2, 3], 2)
    table = QuineTable([cube("-1"), cube("1-")], columns)
    assert greedy_cover(table) == [cube("-1"), cube("1-")]


def test_greedy_cover_fails_on_uncoverable_column():
    table = QuineTable([cube("1-")], seeds([1, 2], 2))
    with pytest.raises(RuntimeError):
        greedy_cover(table)
