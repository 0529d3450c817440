"""Attribute compilation for the pugjsx compiler.

Provides mixin for compiling tag attributes into JSX attribute syntax.

Merge policy:
    Plain string attributes that share a name are merged into one, values
    joined by a space in encounter order (``tag.a(class="b")`` gives
    ``class="a b"``). Bindings, events, directives and boolean attributes are
    never merged and are emitted first, in their original order.

Uses inline TYPE_CHECKING declarations for host attributes.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

from pugjsx.analysis.directives import strip_quotes
from pugjsx.exceptions import InvalidBindingError

if TYPE_CHECKING:
    from pugjsx.config import TranspileConfig
    from pugjsx.nodes import Attr, Tag

logger = logging.getLogger(__name__)


class AttributeCompilationMixin:
    """Mixin for compiling tag attributes."""

    # ─────────────────────────────────────────────────────────────────────────
    # Host attributes (type-check only)
    # ─────────────────────────────────────────────────────────────────────────
    if TYPE_CHECKING:
        _config: TranspileConfig

    def _is_mergeable(self, attr: Attr) -> bool:
        return not isinstance(attr.val, bool) and not attr.name.startswith(
            self._config.unmergeable_prefixes
        )

    def _merge_attrs(self, attrs: Sequence[Attr]) -> tuple[list[Attr], dict[str, str]]:
        """Split attributes into unmergeable ones and merged plain values.

        Returns the unmergeable attributes in original order, and a mapping
        of name to quote-stripped, space-joined value ordered by first
        appearance.
        """
        unmergeable: list[Attr] = []
        merged: dict[str, list[str]] = {}
        for attr in attrs:
            if not self._is_mergeable(attr):
                unmergeable.append(attr)
                continue
            merged.setdefault(attr.name, []).append(strip_quotes(attr.val))

        for name, values in merged.items():
            if len(values) > 1:
                logger.debug("Merging %d %r attributes", len(values), name)
        return unmergeable, {name: " ".join(values) for name, values in merged.items()}

    def _compile_attrs(self, attrs: Sequence[Attr], tag: Tag | None = None) -> str:
        """Compile an attribute list to a space-separated JSX fragment."""
        unmergeable, merged = self._merge_attrs(attrs)
        parts = [self._compile_attr(attr, tag) for attr in unmergeable]
        parts.extend(f'{name}="{value}"' for name, value in merged.items())
        return " ".join(parts)

    def _compile_attr(self, attr: Attr, tag: Tag | None = None) -> str:
        """Compile a single attribute.

        Priority:
            tag(attr)              -> attr
            tag(attr=false)        -> attr={false}
            tag(v-model="x")       -> value={x} oninput={(x) => x.value = x }
            tag(:attr="x")         -> attr={x}
            tag(@click="fn")       -> onclick={fn}
            tag(attr="x")          -> attr="x"
        """
        config = self._config
        name, val = attr.name, attr.val

        if val is True:
            return name
        if val is False:
            return f"{name}={{false}}"

        if name == config.model_directive:
            target = strip_quotes(val)
            return f"value={{{target}}} oninput={{(x) => {target}.value = x }}"

        prefix = _matched_prefix(name, config.bind_prefixes)
        if prefix is not None:
            expr = strip_quotes(val)
            if expr == val or not expr:
                raise InvalidBindingError(name, val, node=tag or attr)
            bound = name[len(prefix) :].replace(".", config.modifier_placeholder)
            return f"{bound}={{{expr}}}"

        prefix = _matched_prefix(name, config.event_prefixes)
        if prefix is not None:
            event = name[len(prefix) :]
            return f"{config.event_handler_prefix}{event}={{{strip_quotes(val)}}}"

        return f'{name}="{strip_quotes(val)}"'


def _matched_prefix(name: str, prefixes: Sequence[str]) -> str | None:
    # Longest first so "v-bind:" is not shadowed by a shorter prefix
    for prefix in sorted(prefixes, key=len, reverse=True):
        if name.startswith(prefix):
            return prefix
    return None
