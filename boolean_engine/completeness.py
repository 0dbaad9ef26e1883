"""
Post's criterion for functional completeness.

A set of Boolean functions is complete iff, for each of the five closed
classes, at least one function of the set lies outside that class.
"""

from typing import Iterable, Sequence, Union

from .classification import POST_CLASS_NAMES, PostClasses, classify
from .function import TruthVector


def post_table(functions: Iterable[TruthVector]) -> list[PostClasses]:
    """Rows = functions, columns = T0, T1, Ts, Tm, Tl."""
    return [classify(f) for f in functions]


def _as_row(item) -> PostClasses:
    if isinstance(item, TruthVector):
        return classify(item)
    row = tuple(bool(value) for value in item)
    if len(row) != len(POST_CLASS_NAMES):
        raise ValueError(
            f"A Post table row has {len(POST_CLASS_NAMES)} entries, got {len(row)}"
        )
    return PostClasses(*row)


def _as_table(items: Iterable[Union[TruthVector, Sequence[bool]]]) -> list[PostClasses]:
    return [_as_row(item) for item in items]


def missing_classes(items: Iterable[Union[TruthVector, Sequence[bool]]]) -> list[str]:
    """
    Names of the classes that contain every function of the set.

    Accepts truth vectors or already computed Post table rows: PostClasses
    or any five booleans, such as the rows of a list of lists. A complete
    set has no missing classes.
    """
    table = _as_table(items)
    return [
        name
        for column, name in enumerate(POST_CLASS_NAMES)
        if all(row[column] for row in table)
    ]


def is_functionally_complete(items: Iterable[Union[TruthVector, Sequence[bool]]]) -> bool:
    """True if no Post class contains the whole set. The empty set is not complete."""
    table = _as_table(items)
    if not table:
        return False
    return not missing_classes(table)
