"""Markup nodes: blocks, tags, text and attributes."""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from pugjsx.nodes.base import Node


@dataclass(frozen=True, slots=True, kw_only=True)
class Attr(Node):
    """Tag attribute: tag(name="val") or tag(name)

    ``val`` is the raw attribute expression as written (quotes included),
    or a bool for valueless / explicitly disabled attributes.
    """

    name: str
    val: str | bool = True


@dataclass(frozen=True, slots=True, kw_only=True)
class Block(Node):
    """Ordered sequence of child nodes. The document root is a Block."""

    nodes: tuple[Node, ...] = ()


@dataclass(frozen=True, slots=True, kw_only=True)
class Text(Node):
    """Literal text: | some text"""

    val: str


@dataclass(frozen=True, slots=True, kw_only=True)
class Tag(Node):
    """Element with a name, attributes and a child block."""

    name: str
    attrs: tuple[Attr, ...] = ()
    block: Block = field(default_factory=Block)

    def find_attr(self, name: str) -> Attr | None:
        """Return the first attribute called ``name``, if any."""
        for attr in self.attrs:
            if attr.name == name:
                return attr
        return None

    def find_attr_prefix(self, prefix: str) -> Attr | None:
        """Return the first attribute whose name starts with ``prefix``."""
        for attr in self.attrs:
            if attr.name.startswith(prefix):
                return attr
        return None

    def without_attrs(self, *names: str) -> Tag:
        """Return a copy of this tag with the named attributes removed."""
        return replace(self, attrs=tuple(a for a in self.attrs if a.name not in names))
