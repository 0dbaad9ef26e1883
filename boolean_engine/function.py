"""
Truth vector representation of an n-ary Boolean function.

A TruthVector holds the function's value column: 2**n booleans where row i
is the big-endian binary expansion of i over the variables (see
truth_tables). Vectors are immutable and hashable.
"""

from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

from .errors import IllFormedInputError, InvalidArityError, OutOfRangeError
from .truth_tables import MAX_BINARY_WIDTH, bits_to_minterm, minterm_to_bits


def _is_power_of_two(length: int) -> bool:
    return length > 0 and length & (length - 1) == 0


@dataclass(frozen=True)
class TruthVector:
    """
    Value column of a Boolean function of n >= 1 variables.

    Build instances with from_bits / from_string / from_int; those normalize
    their input. The plain constructor only accepts an already valid
    sequence whose length is a power of two and at least 2; it is stored
    as a tuple of bools.
    """

    bits: tuple[bool, ...]

    def __post_init__(self):
        object.__setattr__(self, "bits", tuple(bool(bit) for bit in self.bits))
        if len(self.bits) < 2 or not _is_power_of_two(len(self.bits)):
            raise InvalidArityError(
                f"Truth vector length must be a power of two >= 2, got {len(self.bits)}"
            )

    @classmethod
    def from_bits(cls, bits: Iterable) -> "TruthVector":
        """
        Build a vector from any iterable of truthy values.

        A single bit is duplicated (a constant of one variable); any other
        length that is not a power of two is left-padded with False.
        """
        values = [bool(bit) for bit in bits]
        if not values:
            raise InvalidArityError("Cannot build a Boolean function from no bits")

        if len(values) == 1:
            values.append(values[0])
        while not _is_power_of_two(len(values)):
            values.insert(0, False)

        return cls(tuple(values))

    @classmethod
    def from_string(cls, text: str) -> "TruthVector":
        """Build a vector from a string such as "0110"."""
        bad = sorted({ch for ch in text if ch not in "01"})
        if bad:
            raise IllFormedInputError(
                f"Bit string may only contain '0' and '1', found {bad!r}"
            )
        return cls.from_bits(ch == "1" for ch in text)

    @classmethod
    def from_int(cls, number: int, arity: Optional[int] = None) -> "TruthVector":
        """
        Build a vector from the binary digits of an integer (MSB first).

        Without arity the digits are taken as they are and padded. With
        arity the vector is exactly 2**arity wide, so arity is limited to
        log2(MAX_BINARY_WIDTH).
        """
        if arity is None:
            width = max(number.bit_length(), 1)
        else:
            if arity < 1:
                raise InvalidArityError(f"Arity must be at least 1, got {arity}")
            width = 1 << arity
            if width > MAX_BINARY_WIDTH:
                raise OutOfRangeError(
                    f"A {arity}-ary vector needs {width} bits, "
                    f"more than {MAX_BINARY_WIDTH}"
                )
        return cls.from_bits(minterm_to_bits(number, width))

    @property
    def arity(self) -> int:
        """Number of variables (CountOfVariables)."""
        return len(self.bits).bit_length() - 1

    @property
    def value(self) -> str:
        """The value column as a "0"/"1" string."""
        return "".join("1" if bit else "0" for bit in self.bits)

    @property
    def weight(self) -> int:
        """Number of rows where the function is true."""
        return sum(self.bits)

    @property
    def is_balanced(self) -> bool:
        """True if the vector holds as many ones as zeros."""
        return 2 * self.weight == len(self.bits)

    @property
    def is_constant(self) -> bool:
        return all(self.bits) or not any(self.bits)

    @property
    def degree(self) -> int:
        """Algebraic degree: the largest monomial in the Zhegalkin polynomial."""
        return max(
            (bin(i).count("1") for i, c in enumerate(self.zhegalkin_coefficients()) if c),
            default=0,
        )

    def get(self, assignment: Sequence) -> bool:
        """Evaluate the function on one assignment of its variables (A first)."""
        if len(assignment) != self.arity:
            raise InvalidArityError(
                f"Assignment has {len(assignment)} values, function has {self.arity} variables"
            )
        return self.bits[bits_to_minterm(assignment)]

    def minterms(self) -> list[int]:
        """Row indices where the function is true."""
        return [i for i, bit in enumerate(self.bits) if bit]

    def truth_table(self) -> list[tuple[bool, ...]]:
        """Rows of (assignment..., value) in enumeration order."""
        n = self.arity
        return [minterm_to_bits(i, n) + (bit,) for i, bit in enumerate(self.bits)]

    def zhegalkin_coefficients(self) -> tuple[bool, ...]:
        """
        Coefficients of the Zhegalkin (algebraic normal form) polynomial.

        Coefficient i belongs to the conjunction of the variables whose bits
        are set in i. It is the first entry of row i of the XOR difference
        triangle, i.e. the XOR of f(j) over every submask j of i; the
        butterfly below computes all of them in n passes.
        """
        coefficients = list(self.bits)
        step = 1
        while step < len(coefficients):
            for block in range(0, len(coefficients), step << 1):
                for k in range(block, block + step):
                    coefficients[k + step] ^= coefficients[k]
            step <<= 1
        return tuple(coefficients)

    def distance(self, other: "TruthVector") -> int:
        """Hamming distance between two value columns of equal length."""
        if len(self.bits) != len(other.bits):
            raise InvalidArityError(
                f"Cannot compare a {self.arity}-ary and a {other.arity}-ary function"
            )
        return sum(a != b for a, b in zip(self.bits, other.bits))

    def distance_to_set(self, others: Iterable["TruthVector"]) -> int:
        """Smallest distance from this function to any function in others."""
        distances = [self.distance(other) for other in others]
        if not distances:
            raise ValueError("Distance to an empty set of functions is undefined")
        return min(distances)

    def __len__(self):
        return len(self.bits)

    def __getitem__(self, index: int) -> bool:
        return self.bits[index]

    def __iter__(self):
        return iter(self.bits)

    def __str__(self):
        return self.value


def set_distance(first: Iterable[TruthVector], second: Iterable[TruthVector]) -> int:
    """
    Distance between two sets of functions: the smallest distance over all
    pairs taking one function from each set.
    """
    second = list(second)
    distances = [f.distance_to_set(second) for f in first]
    if not distances:
        raise ValueError("Distance to an empty set of functions is undefined")
    return min(distances)
