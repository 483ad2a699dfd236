"""Structural equality and ordering over concrete values.

An abstract value, at the top or nested inside a pair, is never equal to
anything and orders through the -1 fallback.
"""

from __future__ import annotations

from typing import Any

from funclang.types import NullType, Pair


def equal_value(v1: Any, v2: Any) -> bool:
    match v1, v2:
        case bool(), bool():
            return v1 == v2
        case float(), float():
            return v1 == v2
        case str(), str():
            return v1 == v2
        case Pair(), Pair():
            return equal_value(v1.first, v2.first) and equal_value(v1.second, v2.second)
        case NullType(), NullType():
            return True
    return False


def compare_value(v1: Any, v2: Any) -> int:
    """-1, 0 or 1. Unrelated kinds fall back to -1."""
    if equal_value(v1, v2):
        return 0
    match v1, v2:
        case float(), float():
            return (v1 > v2) - (v1 < v2)
        case str(), str():
            return (v1 > v2) - (v1 < v2)
        case Pair(), Pair():
            l1, l2 = v1.is_list(), v2.is_list()
            if l1 and l2:
                s1, s2 = v1.size(), v2.size()
                return (s1 > s2) - (s1 < s2)
            if not l1 and not l2:
                return 0
        case Pair(), NullType():
            return 1
        case NullType(), Pair():
            return -1
    return -1
