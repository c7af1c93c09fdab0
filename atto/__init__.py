# Core type aliases for Atto's data model.
# Runtime values are plain Python objects plus two small types of our own:
#   null  -> Nil (singleton, also the empty list / list terminator)
#   bools -> bool
#   nums  -> int
#   text  -> str
#   lists -> chains of Pair ending in Nil
#
# Naming guidance:
# - AttoValue: use in evaluator/runtime code to denote evaluated values.
# - Expression: use in reader/evaluator code to denote parsed nodes.

from typing import Any

# Runtime value alias (Nil | bool | int | str | Pair)
AttoValue = Any
# Parsed node alias (Literal | Variable | Call)
Expression = Any

__version__ = "0.3.0"
