# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
tinyc: a tiny compiler from Lisp-style call expressions to C-style calls.

  (add 2 (subtract 4 2))   →   add(2, subtract(4, 2));

The CLI entrypoint is `tinyc.driver:main` (`python -m tinyc`).
"""

from .driver import CompileResult, compile_source, emit, try_compile

__all__ = ["CompileResult", "compile_source", "emit", "try_compile"]
