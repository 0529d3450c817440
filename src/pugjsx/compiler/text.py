"""Text node compilation for the pugjsx compiler.

Provides mixin for compiling Text nodes.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pugjsx.nodes import Text

# The whole node must start with {{ and end with }}; anything around them is left alone
_INTERPOLATION = re.compile(r"\{\{(.+)\}\}", re.DOTALL)


class TextCompilationMixin:
    """Mixin for compiling text nodes."""

    def _compile_text(self, node: Text) -> str:
        """Compile a text node.

        ``{{ expr }}`` becomes ``{ expr }`` with the inner text untouched;
        anything else is emitted verbatim.
        """
        m = _INTERPOLATION.fullmatch(node.val)
        if m:
            return f"{{{m.group(1)}}}"
        return node.val
