from __future__ import annotations

import logging

from funclang import Expression, EvaluatorFn
from funclang.config import resolve_read_path
from funclang.printer import format_value
from funclang.types import DynamicError, Environment, Value

logger = logging.getLogger(__name__)


def read_form(tail: list[Expression], env: Environment, evaluate_fn: EvaluatorFn) -> Value:
    """
    (read file-name)
    Returns the text of the file, searched for under the read roots.
    """
    file_name = evaluate_fn(tail[0], env)
    if not isinstance(file_name, str):
        return DynamicError(f"read expects a file name, got {format_value(file_name)}")
    path = resolve_read_path(file_name, env.root().read_roots)
    logger.debug("read %s", path)
    try:
        return path.read_text(encoding="utf-8")
    except OSError as e:
        return DynamicError(f"Cannot read {file_name}: {e.strerror or e}")
    except UnicodeDecodeError as e:
        return DynamicError(f"Cannot read {file_name}: not UTF-8 text ({e.reason})")
