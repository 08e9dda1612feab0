# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Stage 2 package: code generation from the C AST.
"""

from .codegen import generate

__all__ = ["generate"]
