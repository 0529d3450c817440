"""Directive classification.

Maps a tag attribute to one of the structural directive kinds:

    v-if="cond"                 -> Conditional(expr="cond")
    v-for="(item, i) in items"  -> Iteration(variable="item, i", iterable="items")
    v-slot:name="props"         -> Slot(name="name", args="props")

Classification is total over recognized names; any other name handed to
`classify_directive` raises `UnknownDirectiveError`.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from pugjsx.config import DEFAULT_CONFIG, TranspileConfig
from pugjsx.exceptions import InvalidDirectiveError, UnknownDirectiveError
from pugjsx.nodes import Attr, Tag

# One matching pair of quotes around the whole value
_QUOTED = re.compile(r"^(['\"])(.*)\1$", re.DOTALL)

# Tried in order; the parenthesized form must win for "(item, i) in items"
_ITERATION_PATTERNS = (
    re.compile(r"^\((.+)\) in (.+)$", re.DOTALL),
    re.compile(r"^(.+) in (.+)$", re.DOTALL),
)

_ITERATION_HINT = 'v-for expects "item in items" or "(item, index) in items"'


@dataclass(frozen=True, slots=True)
class Conditional:
    """v-if: render only when ``expr`` is truthy."""

    expr: str


@dataclass(frozen=True, slots=True)
class Iteration:
    """v-for: render once per element of ``iterable`` bound to ``variable``."""

    variable: str
    iterable: str


@dataclass(frozen=True, slots=True)
class Slot:
    """v-slot:name: named scoped slot content.

    ``name`` is either a static slot name or a bracketed dynamic expression
    such as ``[`item.${item.id}`]``.
    """

    name: str
    args: str = ""

    @property
    def is_dynamic(self) -> bool:
        return len(self.name) >= 2 and self.name.startswith("[") and self.name.endswith("]")

    @property
    def key_expr(self) -> str:
        """Slot name as an object-key expression."""
        if self.is_dynamic:
            return self.name[1:-1]
        return f'"{self.name}"'


Directive = Conditional | Iteration | Slot


def strip_quotes(value: str) -> str:
    """Remove one matching pair of surrounding quotes, if present.

    Example:
        >>> strip_quotes("'item'")
        'item'
        >>> strip_quotes("item")
        'item'
    """
    m = _QUOTED.match(value)
    return m.group(2) if m else value


def _require_string(attr: Attr, tag: Tag | None) -> str:
    if isinstance(attr.val, bool):
        raise InvalidDirectiveError(attr.name, attr.val, node=tag or attr)
    return attr.val


def parse_iteration(attr: Attr, tag: Tag | None = None) -> Iteration:
    """Parse a v-for value into its loop variable and iterable."""
    raw = _require_string(attr, tag)
    value = strip_quotes(raw)
    for pattern in _ITERATION_PATTERNS:
        m = pattern.match(value)
        if m:
            return Iteration(variable=m.group(1), iterable=m.group(2))
    raise InvalidDirectiveError(attr.name, raw, node=tag or attr, suggestion=_ITERATION_HINT)


def classify_directive(
    attr: Attr,
    tag: Tag | None = None,
    config: TranspileConfig = DEFAULT_CONFIG,
) -> Directive:
    """Classify a structural directive attribute.

    Args:
        attr: The directive attribute.
        tag: Owning tag, used for error locations.
        config: Directive spellings.

    Raises:
        UnknownDirectiveError: Name is not v-if, v-for or v-slot:<name>.
        InvalidDirectiveError: Value is missing or unparsable.
    """
    if attr.name.startswith(f"{config.slot_directive}:"):
        name = attr.name[len(config.slot_directive) + 1 :]
        args = "" if isinstance(attr.val, bool) else strip_quotes(attr.val)
        return Slot(name=name, args=args)
    if attr.name == config.if_directive:
        return Conditional(expr=strip_quotes(_require_string(attr, tag)))
    if attr.name == config.for_directive:
        return parse_iteration(attr, tag)
    raise UnknownDirectiveError(attr.name, node=tag or attr)


def find_structural_directive(tag: Tag, config: TranspileConfig = DEFAULT_CONFIG) -> Attr | None:
    """Return the element-level directive attribute to resolve first.

    v-if takes priority over v-for; slots are resolved by the parent.
    """
    return tag.find_attr(config.if_directive) or tag.find_attr(config.for_directive)


def is_slot_holder(node: object, config: TranspileConfig = DEFAULT_CONFIG) -> bool:
    """True for child tags that supply named slot content to their parent."""
    return isinstance(node, Tag) and tag_slot_attr(node, config) is not None


def tag_slot_attr(tag: Tag, config: TranspileConfig = DEFAULT_CONFIG) -> Attr | None:
    return tag.find_attr_prefix(config.slot_directive)
