import pytest

from boolean_engine import (
    PostClasses,
    TruthVector,
    classify,
    is_functionally_complete,
    missing_classes,
    post_table,
)

AND = TruthVector.from_string("0001")
OR = TruthVector.from_string("0111")
XOR = TruthVector.from_string("0110")
NOT = TruthVector.from_string("10")
NAND = TruthVector.from_string("1110")
NOR = TruthVector.from_string("1000")
ONE = TruthVector.from_string("11")


def test_post_table_rows():
    table = post_table([AND, NOT])
    assert table == [classify(AND), classify(NOT)]
    assert [list(row) for row in table] == [
        [True, True, False, True, False],
        [False, False, True, False, True],
    ]


def test_single_sheffer_functions_are_complete():
    assert is_functionally_complete([NAND])
    assert is_functionally_complete([NOR])


def test_and_or_is_not_complete():
    assert not is_functionally_complete([AND, OR])
    assert missing_classes([AND, OR]) == ["T0", "T1", "Tm"]


def test_classic_bases():
    assert is_functionally_complete([AND, NOT])
    assert is_functionally_complete([AND, XOR, ONE])
    assert not is_functionally_complete([XOR, NOT])
    assert missing_classes([XOR, NOT]) == ["Tl"]


def test_accepts_precomputed_rows():
    rows = post_table([AND, OR])
    assert not is_functionally_complete(rows)
    outsider = PostClasses(t0=False, t1=False, ts=False, tm=False, tl=False)
    assert is_functionally_complete(rows + [outsider])


def test_mixed_arities():
    majority = TruthVector.from_string("00010111")
    assert not is_functionally_complete([majority, AND])
    assert is_functionally_complete([majority, NOT, TruthVector.from_string("00")])


def test_empty_set_is_not_complete():
    assert not is_functionally_complete([])
    assert missing_classes([]) == ["T0", "T1", "Ts", "Tm", "Tl"]


def test_accepts_boolean_matrix():
    matrix = [list(row) for row in post_table([NAND])]
    assert is_functionally_complete(matrix)

    matrix = [list(row) for row in post_table([AND, OR])]
    assert not is_functionally_complete(matrix)
    assert missing_classes(matrix) == ["T0", "T1", "Tm"]


def test_matrix_rows_need_five_entries():
    with pytest.raises(ValueError):
        is_functionally_complete([[True, False, True]])
