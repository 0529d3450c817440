"""pugjsx compiler - pug tree to JSX-like text."""

from pugjsx.compiler.core import Compiler, pascal_case

__all__ = ["Compiler", "pascal_case"]
