"""Boolean function engine: Post classification and Quine-McCluskey minimization."""

from .errors import (
    BooleanFunctionError,
    InvalidArityError,
    OutOfRangeError,
    IllFormedInputError,
    BudgetExceededError,
)
from .function import TruthVector, set_distance
from .truth_tables import VARIABLES_ALPHABET, PRACTICAL_ARITY_LIMIT
from .quine_mccluskey import Trit, Cube, QuineTable, prime_implicants, greedy_cover
from .classification import PostClasses, POST_CLASS_NAMES, classify
from .completeness import post_table, is_functionally_complete, missing_classes
from .solver import MinimalDNFSolver, MinimizationResult, CostBreakdown, minimize
from .export import to_pdnf, to_pcnf, to_mdnf, to_zhegalkin, to_equations
from .verify import verify_result

__all__ = [
    "BooleanFunctionError",
    "InvalidArityError",
    "OutOfRangeError",
    "IllFormedInputError",
    "BudgetExceededError",
    "TruthVector",
    "set_distance",
    "VARIABLES_ALPHABET",
    "PRACTICAL_ARITY_LIMIT",
    "Trit",
    "Cube",
    "QuineTable",
    "prime_implicants",
    "greedy_cover",
    "PostClasses",
    "POST_CLASS_NAMES",
    "classify",
    "post_table",
    "is_functionally_complete",
    "missing_classes",
    "MinimalDNFSolver",
    "MinimizationResult",
    "CostBreakdown",
    "minimize",
    "to_pdnf",
    "to_pcnf",
    "to_mdnf",
    "to_zhegalkin",
    "to_equations",
    "verify_result",
]
__version__ = "0.1.0"
