"""Base node class for the pugjsx tree."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Node:
    """Base class for all tree nodes.

    Nodes carry the source location reported by pug-parser so errors can
    point back at the template. The compiler never reads them otherwise.
    Nodes are immutable; compilation only ever builds filtered copies.

    """

    line: int | None = None
    column: int | None = None
    filename: str | None = None

    @property
    def location(self) -> str | None:
        """Human-readable ``file:line:column`` for error messages."""
        if self.line is None:
            return self.filename
        loc = f"{self.filename or '<template>'}:{self.line}"
        if self.column is not None:
            loc += f":{self.column}"
        return loc
