"""Load pug-parser JSON output into pugjsx nodes.

pug-parser (``parse(lex(src))``) produces a JSON tree of the form::

    {"type": "Block", "nodes": [
        {"type": "Tag", "name": "tag", "attrs": [{"name": "v-if", "val": "\\"ok\\""}],
         "block": {"type": "Block", "nodes": [{"type": "Text", "val": "text"}]}}
    ]}

Only ``type``, ``name``, ``attrs``, ``val``, ``block`` and ``nodes`` are
read; ``line``, ``column`` and ``filename`` are kept for error messages.
Every other pug-parser field is ignored.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pugjsx.exceptions import MalformedTreeError
from pugjsx.nodes.base import Node
from pugjsx.nodes.markup import Attr, Block, Tag, Text

logger = logging.getLogger(__name__)


def _location(data: Mapping[str, Any]) -> dict[str, Any]:
    return {
        "line": data.get("line"),
        "column": data.get("column"),
        "filename": data.get("filename"),
    }


def _require(data: Mapping[str, Any], key: str, node_type: str) -> Any:
    if key not in data:
        raise MalformedTreeError(node_type, node=Node(**_location(data)), reason=f"missing {key!r}")
    return data[key]


def _load_attr(data: Mapping[str, Any]) -> Attr:
    if not isinstance(data, Mapping):
        raise MalformedTreeError(type(data).__name__, reason="attribute must be an object")
    return Attr(name=_require(data, "name", "Attr"), val=data.get("val", True), **_location(data))


def _load_block(data: Mapping[str, Any]) -> Block:
    return Block(nodes=tuple(_load_node(child) for child in data.get("nodes", ())), **_location(data))


def _load_tag(data: Mapping[str, Any]) -> Tag:
    block = data.get("block") or {"type": "Block", "nodes": []}
    return Tag(
        name=_require(data, "name", "Tag"),
        attrs=tuple(_load_attr(a) for a in data.get("attrs", ())),
        block=_load_block(block),
        **_location(data),
    )


def _load_text(data: Mapping[str, Any]) -> Text:
    return Text(val=data.get("val", ""), **_location(data))


_LOADERS = {
    "Block": _load_block,
    "Tag": _load_tag,
    "Text": _load_text,
}


def _load_node(data: Any) -> Node:
    if not isinstance(data, Mapping):
        raise MalformedTreeError(type(data).__name__)
    node_type = data.get("type")
    loader = _LOADERS.get(node_type)
    if loader is None:
        raise MalformedTreeError(str(node_type), node=Node(**_location(data)))
    return loader(data)


def load_tree(data: Mapping[str, Any] | str) -> Block:
    """Build a node tree from pug-parser output.

    Args:
        data: Decoded JSON mapping, or the JSON text itself.

    Returns:
        Root Block.

    Raises:
        MalformedTreeError: The root is not a Block, or a node type other
            than Block, Tag or Text appears anywhere in the tree.
        json.JSONDecodeError: ``data`` is text that is not valid JSON.
    """
    if isinstance(data, str):
        data = json.loads(data)
    root = _load_node(data)
    if not isinstance(root, Block):
        raise MalformedTreeError(type(root).__name__, node=root)
    return root


def load_file(path: str | Path, encoding: str = "utf-8") -> Block:
    """Load a pug-parser JSON AST from ``path``."""
    path = Path(path)
    logger.debug("Loading tree from %s", path)
    return load_tree(path.read_text(encoding))


def _dump_node(node: Node) -> dict[str, Any]:
    if isinstance(node, Block):
        return {"type": "Block", "nodes": [_dump_node(n) for n in node.nodes]}
    if isinstance(node, Tag):
        return {
            "type": "Tag",
            "name": node.name,
            "attrs": [{"name": a.name, "val": a.val} for a in node.attrs],
            "block": _dump_node(node.block),
        }
    if isinstance(node, Text):
        return {"type": "Text", "val": node.val}
    raise MalformedTreeError(type(node).__name__, node=node)


def dump_tree(root: Block, indent: int | None = 2) -> str:
    """Serialize a tree back to pug-parser-shaped JSON (locations dropped)."""
    return json.dumps(_dump_node(root), indent=indent)
