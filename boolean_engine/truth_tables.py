"""
Variable naming and binary expansion helpers for truth tables.

Row i of a truth table is the big-endian binary expansion of i over the
function's variables:

    A B C | row
    0 0 0 |  0
    0 0 1 |  1
    ...
    1 1 1 |  7

Variable k is named VARIABLES_ALPHABET[k] and is the (n - 1 - k)-th bit.
"""

from .errors import InvalidArityError, OutOfRangeError

# Fixed, process-wide variable alphabet (MSB first)
VARIABLES_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"

# Widest binary expansion accepted by minterm_to_bits / from_int
MAX_BINARY_WIDTH = 32

# Above this arity minimization may blow up; callers get a warning
PRACTICAL_ARITY_LIMIT = 20


def minterm_to_bits(minterm: int, width: int) -> tuple[bool, ...]:
    """Convert a row index to its big-endian bits (MSB = variable A)."""
    if width < 0 or width > MAX_BINARY_WIDTH:
        raise OutOfRangeError(
            f"Binary width must be within 0..{MAX_BINARY_WIDTH}, got {width}"
        )
    if minterm < 0 or minterm >= (1 << width):
        raise OutOfRangeError(f"{minterm} does not fit in {width} bits")

    return tuple(bool((minterm >> (width - 1 - i)) & 1) for i in range(width))


def bits_to_minterm(bits) -> int:
    """Convert a big-endian bit sequence back to its row index."""
    minterm = 0
    for bit in bits:
        minterm = (minterm << 1) | (1 if bit else 0)
    return minterm


def variable_names(n_vars: int) -> list[str]:
    """Return the alphabet prefix naming an n-ary function's variables."""
    if n_vars < 1:
        raise InvalidArityError(f"Arity must be at least 1, got {n_vars}")
    if n_vars > len(VARIABLES_ALPHABET):
        raise InvalidArityError(
            f"Only {len(VARIABLES_ALPHABET)} variables can be named, got {n_vars}"
        )
    return list(VARIABLES_ALPHABET[:n_vars])


def print_truth_table(function):
    """Print the complete truth table of a TruthVector."""
    names = variable_names(function.arity)

    print(f"Truth table of {function.value}")
    print("=" * (4 * len(names) + 8))
    print(" ".join(f"{name:>3}" for name in names) + " |  f")
    print("-" * (4 * len(names) + 8))

    for row in function.truth_table():
        *assignment, value = row
        cells = " ".join(f"{int(bit):>3}" for bit in assignment)
        print(f"{cells} |  {int(value)}")
