"""Runtime value variants for FuncLang.

Numbers, booleans and strings are plain float, bool and str; the remaining
variants are the classes re-exported here. `Value` names the closed union.
"""

from typing import Union

from funclang.types.symbol import Symbol
from funclang.types.null import Null, NullType, Unit, UnitType
from funclang.types.pair import Pair, from_sequence
from funclang.types.dynamic_error import DynamicError
from funclang.types.abstract_value import (
    AbstractToken,
    AbstractValue,
    BOOLEAN_TOKENS,
    ERROR_TOKENS,
    NUMBER_TOKENS,
)
from funclang.types.environment import Environment, ExtendEnv, GlobalEnv
from funclang.types.closure import Closure

Value = Union[float, bool, str, UnitType, NullType, Pair, Closure, DynamicError, AbstractValue]

__all__ = [
    "AbstractToken",
    "AbstractValue",
    "BOOLEAN_TOKENS",
    "Closure",
    "DynamicError",
    "Environment",
    "ERROR_TOKENS",
    "ExtendEnv",
    "GlobalEnv",
    "NUMBER_TOKENS",
    "Null",
    "NullType",
    "Pair",
    "Symbol",
    "Unit",
    "UnitType",
    "Value",
    "from_sequence",
]
