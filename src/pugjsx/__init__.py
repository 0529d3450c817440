"""pugjsx — compile Vue-flavored Pug templates to JSX-like text.

Takes the tree pug-parser builds from a template and emits a single JSX-like
string, resolving the Vue directives along the way.

Quickstart:
    >>> from pugjsx import transpile
    >>> from pugjsx.nodes import Attr, Block, Tag, Text
    >>> tree = Block(nodes=(
    ...     Tag(name="tag", attrs=(Attr(name="v-if", val='"condition"'),),
    ...         block=Block(nodes=(Text(val="text"),))),
    ... ))
    >>> transpile(tree)
    '{condition && <tag>text</tag>}'

From pug-parser JSON:
    >>> from pugjsx import load_file, transpile
    >>> transpile(load_file("target.json"))

Architecture:
Pug source → pug-lexer → pug-parser → JSON AST → load_tree → Compiler → text

Supported syntax:
- `tag(v-if="cond")` → `{cond && <tag />}`
- `tag(v-for="x in xs")` → `{xs.map((x) => (<tag />))}`
- `tag(:attr="x")`, `tag(v-bind:attr="x")` → `<tag attr={x} />`
- `tag(@click="fn")`, `tag(v-on:click="fn")` → `<tag onclick={fn} />`
- `tag(v-model="x")` → `<tag value={x} oninput={(x) => x.value = x } />`
- `template(v-slot:name="props")` children → `scopedSlots={{"name": (props) => (...),}}`
- `some-tag` → `<SomeTag />`; `{{ expr }}` text → `{ expr }`

Errors:
Compilation is all-or-nothing. Every failure raises a `TranspileError`
subclass carrying an `ErrorCode`; `format_compact()` renders it for a terminal.

"""

from __future__ import annotations

from pugjsx.compiler import Compiler
from pugjsx.config import DEFAULT_CONFIG, TranspileConfig
from pugjsx.exceptions import (
    ErrorCode,
    InvalidBindingError,
    InvalidDirectiveError,
    MalformedTreeError,
    TranspileError,
    UnknownDirectiveError,
)
from pugjsx.nodes import Attr, Block, Node, Tag, Text, load_file, load_tree

__version__ = "0.1.0"


def transpile(root: Node, config: TranspileConfig | None = None) -> str:
    """Compile a pug tree to JSX-like text with a fresh Compiler."""
    return Compiler(config).compile(root)


__all__ = [
    "DEFAULT_CONFIG",
    "Attr",
    "Block",
    "Compiler",
    "ErrorCode",
    "InvalidBindingError",
    "InvalidDirectiveError",
    "MalformedTreeError",
    "Node",
    "Tag",
    "Text",
    "TranspileConfig",
    "TranspileError",
    "UnknownDirectiveError",
    "__version__",
    "load_file",
    "load_tree",
    "transpile",
]
