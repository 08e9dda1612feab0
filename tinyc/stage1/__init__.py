# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Stage 1 package: C-like target AST, generic traversal and the AST → C AST
transformer.

Public API:
  - target node classes (module `c_nodes`)
  - traverse: visitor-driven pre-order walk over the source AST
  - transform: source Program → target Program
"""

from . import c_nodes
from .traverse import traverse, Visitor, VisitFn
from .transform import transform

__all__ = ["c_nodes", "traverse", "Visitor", "VisitFn", "transform"]
