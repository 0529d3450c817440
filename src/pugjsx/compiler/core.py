"""pugjsx Compiler Core — main Compiler class.

The Compiler walks a pug tree depth-first and emits JSX-like text. It uses a
mixin-based design: attribute, text and directive compilation each live in
their own module and are combined here.

Design Principles:
1. **Read-only input**: directive expansion re-emits filtered copies of a Tag
2. **O(1) dispatch**: dict-based node type → handler lookup
3. **Fail fast**: the first invalid node aborts the compile, no partial output

Element emission:

    some-tag(:a="x")
      template(v-slot:s)
        | slot
      | text

    <SomeTag a={x} scopedSlots={{"s": () => (<template>slot</template>),}}>text</SomeTag>

"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from pugjsx.analysis.directives import find_structural_directive, is_slot_holder, tag_slot_attr
from pugjsx.compiler.attributes import AttributeCompilationMixin
from pugjsx.compiler.directives import DirectiveCompilationMixin
from pugjsx.compiler.text import TextCompilationMixin
from pugjsx.config import DEFAULT_CONFIG, TranspileConfig
from pugjsx.exceptions import MalformedTreeError
from pugjsx.nodes import Block, Tag

if TYPE_CHECKING:
    from pugjsx.nodes import Node

logger = logging.getLogger(__name__)


def pascal_case(name: str) -> str:
    """Convert a kebab-case tag name to PascalCase.

    Names without a hyphen are returned unchanged.

    Example:
        >>> pascal_case("some-tag")
        'SomeTag'
        >>> pascal_case("tag")
        'tag'
    """
    if "-" not in name:
        return name
    return "".join(part[:1].upper() + part[1:] for part in name.split("-"))


class Compiler(
    AttributeCompilationMixin,
    DirectiveCompilationMixin,
    TextCompilationMixin,
):
    """Compile a pug tree to a JSX-like string.

    A Compiler holds only its configuration, so one instance can be reused
    across compiles and threads.

    Attributes:
        _config: Directive spellings and output names
        _node_dispatch: Node class name → handler

    Example:
            >>> from pugjsx import Compiler
            >>> from pugjsx.nodes import Block, Tag, Text
            >>> tree = Block(nodes=(Tag(name="tag", block=Block(nodes=(Text(val="{{ var }}"),))),))
            >>> Compiler().compile(tree)
            '<tag>{ var }</tag>'

    """

    __slots__ = ("_config", "_node_dispatch")

    def __init__(self, config: TranspileConfig | None = None):
        self._config = config or DEFAULT_CONFIG
        self._node_dispatch: dict[str, Callable[[Node], str]] = {
            "Block": self._compile_block,
            "Tag": self._compile_tag,
            "Text": self._compile_text,
        }

    @property
    def config(self) -> TranspileConfig:
        return self._config

    def compile(self, node: Node) -> str:
        """Compile a tree (usually the root Block) to output text.

        Raises:
            MalformedTreeError: A node is not a Block, Tag or Text.
            UnknownDirectiveError: A slot holder uses an unsupported directive.
            InvalidDirectiveError: v-if / v-for without a usable value.
            InvalidBindingError: A bound attribute value is not quoted.
        """
        return self._compile_node(node)

    def _compile_node(self, node: Node) -> str:
        # Subclasses of Block, Tag and Text dispatch like their base
        for cls in type(node).__mro__:
            handler = self._node_dispatch.get(cls.__name__)
            if handler is not None:
                return handler(node)
        raise MalformedTreeError(type(node).__name__, node=node)

    def _compile_block(self, node: Block) -> str:
        return "".join(self._compile_node(child) for child in node.nodes)

    def _compile_tag(self, node: Tag) -> str:
        """Compile a tag, expanding v-if / v-for first when present."""
        directive = find_structural_directive(node, self._config)
        if directive is not None:
            return self._compile_directive(node, directive)
        return self._compile_element(node)

    def _compile_element(self, node: Tag) -> str:
        name = pascal_case(node.name)
        parts = [f"<{name}"]

        if node.attrs:
            attrs = self._compile_attrs(node.attrs, node)
            if attrs:
                parts.append(f" {attrs}")

        slots = [child for child in node.block.nodes if is_slot_holder(child, self._config)]
        children = [child for child in node.block.nodes if not is_slot_holder(child, self._config)]

        if slots:
            entries = "".join(
                self._compile_directive(slot, tag_slot_attr(slot, self._config)) for slot in slots
            )
            parts.append(f" {self._config.slots_prop}={{{{{entries}}}}}")

        if children:
            body = self._compile_block(Block(nodes=tuple(children)))
            parts.append(f">{body}</{name}>")
        else:
            parts.append(" />")

        return "".join(parts)
