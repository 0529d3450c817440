"""pugjsx tree nodes.

The tree mirrors the subset of pug-parser's AST the compiler consumes:

    Block(nodes=[Tag | Text, ...])
    Tag(name, attrs=[Attr(name, val), ...], block=Block)
    Text(val)

All nodes are frozen dataclasses.
"""

from pugjsx.nodes.base import Node
from pugjsx.nodes.loader import dump_tree, load_file, load_tree
from pugjsx.nodes.markup import Attr, Block, Tag, Text

__all__ = [
    "Attr",
    "Block",
    "Node",
    "Tag",
    "Text",
    "dump_tree",
    "load_file",
    "load_tree",
]
