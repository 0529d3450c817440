"""Exceptions for the pugjsx compiler.

Exception Hierarchy:
TranspileError (base)
├── MalformedTreeError      # Node is not a Block, Tag or Text
├── UnknownDirectiveError   # v-* attribute routed to the resolver but not recognized
├── InvalidDirectiveError   # v-if / v-for with a boolean or unparsable value
└── InvalidBindingError     # :attr whose value is not a quoted string literal

Compilation is all-or-nothing: the first error aborts the whole compile and
no partial output is produced.

Example:
    ```
    P-DIR-002: Invalid v-for expression: "item of"
      --> page.pug:4:5
      Hint: v-for expects "item in items" or "(item, index) in items"
      Docs: https://pugjsx.readthedocs.io/en/latest/errors.html#p-dir-002
    ```

"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from pugjsx import terminal

if TYPE_CHECKING:
    from pugjsx.nodes import Node

_DOCS_BASE = "https://pugjsx.readthedocs.io/en/latest/errors.html"


class ErrorCode(Enum):
    """Searchable error codes for compile errors.

    Format: P-{CATEGORY}-{NUMBER}
    Categories: TRE (tree), DIR (directive), BND (binding)
    """

    MALFORMED_TREE = "P-TRE-001"
    UNKNOWN_DIRECTIVE = "P-DIR-001"
    INVALID_DIRECTIVE = "P-DIR-002"
    INVALID_BINDING = "P-BND-001"

    @property
    def docs_url(self) -> str:
        """Documentation URL for this error code."""
        return f"{_DOCS_BASE}#{self.value.lower()}"

    @property
    def category(self) -> str:
        """Error category (e.g., 'tree', 'directive', 'binding')."""
        prefix = self.value.split("-")[1]
        return {
            "TRE": "tree",
            "DIR": "directive",
            "BND": "binding",
        }.get(prefix, "unknown")


class TranspileError(Exception):
    """Base exception for all pugjsx compile errors.

    Attributes:
        message: Error description without location.
        node: Tree node the error was raised for, when known.
        suggestion: Optional actionable hint.
        code: ErrorCode identifying the failure.
    """

    code: ErrorCode | None = None

    def __init__(
        self,
        message: str,
        *,
        node: Node | None = None,
        suggestion: str | None = None,
    ):
        self.message = message
        self.node = node
        self.suggestion = suggestion
        super().__init__(self._format_message())

    @property
    def location(self) -> str | None:
        return getattr(self.node, "location", None)

    def _format_message(self) -> str:
        if self.location:
            return f"{self.message} ({self.location})"
        return self.message

    def format_compact(self) -> str:
        """Format the error as a traceback-free terminal diagnostic.

        Format::

            P-BND-001: Invalid binding value for ':href': url
              --> page.pug:3:9
              Hint: Quote the bound expression: :href="url"
              Docs: https://pugjsx.readthedocs.io/en/latest/errors.html#p-bnd-001
        """
        code_prefix = f"{terminal.error_code(self.code.value)}: " if self.code else ""
        parts = [f"{code_prefix}{self.message}"]
        if self.location:
            parts.append(f"  {terminal.dim_text('-->')} {terminal.location(self.location)}")
        if self.suggestion:
            parts.append(f"  {terminal.hint('Hint:')} {self.suggestion}")
        if self.code:
            parts.append(f"  Docs: {terminal.docs_url(self.code.docs_url)}")
        return "\n".join(parts)


class MalformedTreeError(TranspileError):
    """A node is none of Block, Tag or Text.

    Raised by the compiler for foreign objects in the tree and by the loader
    for pug-parser node types the compiler does not handle (Code, Mixin, ...).
    """

    code = ErrorCode.MALFORMED_TREE

    def __init__(self, node_type: str, *, node: Node | None = None, reason: str | None = None):
        self.node_type = node_type
        self.reason = reason
        message = f"Unknown node type: {node_type!r}"
        if reason:
            message = f"Malformed {node_type!r} node: {reason}"
        super().__init__(
            message,
            node=node,
            suggestion=None if reason else "Only Block, Tag and Text nodes can be compiled",
        )


class UnknownDirectiveError(TranspileError):
    """A directive attribute matched the directive prefix but no known kind."""

    code = ErrorCode.UNKNOWN_DIRECTIVE

    def __init__(self, directive: str, *, node: Node | None = None):
        self.directive = directive
        super().__init__(
            f"Unknown vue directive: {directive}",
            node=node,
            suggestion="Supported directives are v-if, v-for and v-slot:<name>",
        )


class InvalidDirectiveError(TranspileError):
    """A v-if / v-for value is a boolean flag or does not parse."""

    code = ErrorCode.INVALID_DIRECTIVE

    def __init__(
        self,
        directive: str,
        value: str | bool,
        *,
        node: Node | None = None,
        suggestion: str | None = None,
    ):
        self.directive = directive
        self.value = value
        if isinstance(value, bool):
            message = f"Invalid {directive}: a value is required"
        else:
            message = f"Invalid {directive} expression: {value}"
        super().__init__(message, node=node, suggestion=suggestion)


class InvalidBindingError(TranspileError):
    """A bound attribute's value is not a quoted string literal."""

    code = ErrorCode.INVALID_BINDING

    def __init__(self, attribute: str, value: str, *, node: Node | None = None):
        self.attribute = attribute
        self.value = value
        super().__init__(
            f"Invalid binding value for {attribute!r}: {value}",
            node=node,
            suggestion=f'Quote the bound expression: {attribute}="{value}"',
        )
