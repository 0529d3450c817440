"""Directive compilation for the pugjsx compiler.

Provides mixin for expanding the structural Vue directives:

    tag(v-if="ok")               -> {ok && <tag />}
    tag(v-for="x in xs")         -> {xs.map((x) => (<tag />))}
    template(v-slot:name="p")    -> "name": (p) => (<template />),

Each expansion re-emits the element with the consumed directive removed.
When v-if and v-for share an element, v-if is resolved first and the v-for
output lands inside it: {ok && {xs.map((x) => (<tag />))}}.

Uses inline TYPE_CHECKING declarations for host attributes.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pugjsx.analysis.directives import (
    Conditional,
    Iteration,
    Slot,
    classify_directive,
    parse_iteration,
)

if TYPE_CHECKING:
    from pugjsx.config import TranspileConfig
    from pugjsx.nodes import Attr, Tag

logger = logging.getLogger(__name__)


class DirectiveCompilationMixin:
    """Mixin for compiling v-if, v-for and v-slot."""

    # ─────────────────────────────────────────────────────────────────────────
    # Host attributes and cross-mixin dependencies (type-check only)
    # ─────────────────────────────────────────────────────────────────────────
    if TYPE_CHECKING:
        _config: TranspileConfig

        # From Compiler core
        def _compile_tag(self, node: Tag) -> str: ...

    def _compile_directive(self, node: Tag, attr: Attr) -> str:
        """Expand the directive ``attr`` found on ``node``."""
        directive = classify_directive(attr, node, self._config)
        logger.debug("Resolving %s on <%s>", attr.name, node.name)
        if isinstance(directive, Slot):
            return self._compile_slot(node, attr, directive)
        if isinstance(directive, Conditional):
            return self._compile_conditional(node, attr, directive)
        return self._compile_iteration(node, attr, directive)

    def _compile_conditional(self, node: Tag, attr: Attr, directive: Conditional) -> str:
        body = self._compile_tag(node.without_attrs(attr.name))
        return f"{{{directive.expr} && {body}}}"

    def _compile_iteration(self, node: Tag, attr: Attr, directive: Iteration) -> str:
        body = self._compile_tag(node.without_attrs(attr.name))
        return f"{{{directive.iterable}.map(({directive.variable}) => ({body}))}}"

    def _compile_slot(self, node: Tag, attr: Attr, directive: Slot) -> str:
        """Compile a slot holder into an entry of the scopedSlots object.

        A slot holder that also iterates spreads one entry per item:
            ...(items.reduce((acc, item) => {acc[key] = (args) => (<el />); return acc}, {})),
        """
        for_attr = node.find_attr(self._config.for_directive)
        if for_attr is not None:
            loop = parse_iteration(for_attr, node)
            body = self._compile_tag(node.without_attrs(attr.name, for_attr.name))
            return (
                f"...({loop.iterable}.reduce((acc, {loop.variable}) => "
                f"{{acc[{directive.key_expr}] = ({directive.args}) => ({body}); return acc}}, {{}})),"
            )

        body = self._compile_tag(node.without_attrs(attr.name))
        return f'"{directive.name}": ({directive.args}) => ({body}),'
