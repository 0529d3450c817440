"""Compiler configuration.

All directive spellings the compiler recognizes live here so an embedding
tool can adapt them without subclassing the compiler.

Example:
    >>> from pugjsx import Compiler, TranspileConfig
    >>> config = TranspileConfig(modifier_placeholder="$")
    >>> Compiler(config=config)

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class TranspileConfig:
    """Directive spellings and output names.

    Attributes:
        directive_prefix: Prefix shared by every Vue directive (``v-``).
        bind_prefix: Shorthand attribute-binding prefix (``:``).
        event_prefix: Shorthand event-binding prefix (``@``).
        model_directive: Two-way binding directive name.
        if_directive: Conditional rendering directive name.
        for_directive: List rendering directive name.
        slot_directive: Named slot directive; the slot name follows a colon.
        modifier_placeholder: Replacement for ``.`` in bound attribute names.
            Modifiers are not interpreted; the placeholder keeps them visible.
        slots_prop: Prop that receives the scoped slot object.
        event_handler_prefix: Prefix for compiled event attributes.
        long_form_bindings: Also accept ``v-bind:name`` and ``v-on:name``.
    """

    directive_prefix: str = "v-"
    bind_prefix: str = ":"
    event_prefix: str = "@"
    model_directive: str = "v-model"
    if_directive: str = "v-if"
    for_directive: str = "v-for"
    slot_directive: str = "v-slot"
    modifier_placeholder: str = "_TODO_"
    slots_prop: str = "scopedSlots"
    event_handler_prefix: str = "on"
    long_form_bindings: bool = True

    @property
    def bind_prefixes(self) -> tuple[str, ...]:
        if self.long_form_bindings:
            return (self.bind_prefix, f"{self.directive_prefix}bind:")
        return (self.bind_prefix,)

    @property
    def event_prefixes(self) -> tuple[str, ...]:
        if self.long_form_bindings:
            return (self.event_prefix, f"{self.directive_prefix}on:")
        return (self.event_prefix,)

    @property
    def unmergeable_prefixes(self) -> tuple[str, ...]:
        return (self.bind_prefix, self.event_prefix, self.directive_prefix)


DEFAULT_CONFIG = TranspileConfig()
