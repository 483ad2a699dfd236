from __future__ import annotations

from dataclasses import dataclass, field

from funclang import Expression


@dataclass
class Program:
    """Top-level definitions followed by an optional main expression."""
    definitions: list[Expression] = field(default_factory=list)
    main: Expression | None = None
