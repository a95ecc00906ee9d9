# Core type aliases for Jam's data model.
# Integers are plain Python ints; every other value is one of the classes in
# jam.types (BoolConstant, EmptyList, Cons, Closure, PrimFun).
#
# Naming guidance:
# - JamAST:   use in reader/evaluator code for parsed program nodes.
# - JamValue: use in evaluator/runtime code for evaluated values.

from typing import Any

# Runtime value alias
JamValue = Any
# Parsed program node alias
JamAST = Any
