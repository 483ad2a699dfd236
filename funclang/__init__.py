# Core type aliases for FuncLang.
# Expressions are plain s-expressions produced by the reader: Python lists for
# forms, Symbol for names, and float/bool/str for literals.
# Runtime values reuse float/bool/str for numbers, booleans and strings; the
# remaining variants live in funclang.types.
#
# Naming guidance:
# - Expression: use in reader/printer/syntax code to denote source forms.
# - Value:      use in evaluator/runtime code (see funclang.types.Value).

from typing import Any, Callable

# Source form alias
Expression = Any

# Evaluator function type handed to special forms
EvaluatorFn = Callable[..., Any]
