"""Directive analysis for pugjsx.

Pure functions that recognize Vue directives on tag attributes and parse
their payloads into structured results. The compiler consumes these results;
nothing here produces output text.
"""

from pugjsx.analysis.directives import (
    Conditional,
    Directive,
    Iteration,
    Slot,
    classify_directive,
    find_structural_directive,
    is_slot_holder,
    parse_iteration,
    strip_quotes,
    tag_slot_attr,
)

__all__ = [
    "Conditional",
    "Directive",
    "Iteration",
    "Slot",
    "classify_directive",
    "find_structural_directive",
    "is_slot_holder",
    "parse_iteration",
    "strip_quotes",
    "tag_slot_attr",
]
