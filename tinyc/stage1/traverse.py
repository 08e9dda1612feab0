# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Generic depth-first, pre-order walk over the source AST.

A visitor maps a source node class to a callback:

  callback(node, parent, context) -> new_context | None

The callback runs before the node's children are visited. Whatever it returns
(unless None) becomes the context handed to that node's children; otherwise
the children inherit the node's own context. Context is threaded through the
walk as an argument, so the tree itself is never written to. The walk keeps
its own stack of pending nodes, so nesting depth is not bounded by the
interpreter recursion limit.

Descent is fixed per node type (Program.body, CallExpression.params, leaves
have no children). Any other node type fails loudly with TraversalError
before its callback runs.
"""

from __future__ import annotations

from typing import Any, Callable, List, Mapping, Optional, Sequence, Tuple, Type

from tinyc.core.errors import TraversalError
from tinyc.stage0 import ast

VisitFn = Callable[[ast.Node, Optional[ast.Node], Any], Any]
Visitor = Mapping[Type[ast.Node], VisitFn]


def _children(node: ast.Node) -> Sequence[ast.Node]:
	if isinstance(node, ast.Program):
		return node.body
	if isinstance(node, ast.CallExpression):
		return node.params
	if isinstance(node, (ast.NumberLiteral, ast.StringLiteral)):
		return ()
	raise TraversalError(type(node).__name__)


def traverse(root: ast.Node, visitor: Visitor, context: Any = None) -> None:
	"""Walk `root` pre-order, invoking visitor callbacks with threaded context."""
	# Pending (node, parent, context) triples; the next node to visit is last.
	pending: List[Tuple[ast.Node, Optional[ast.Node], Any]] = [(root, None, context)]
	while pending:
		node, parent, ctx = pending.pop()
		# Node type is checked before any callback runs.
		children = _children(node)
		callback = visitor.get(type(node))
		child_ctx = ctx
		if callback is not None:
			result = callback(node, parent, ctx)
			if result is not None:
				child_ctx = result
		for child in reversed(children):
			pending.append((child, node, child_ctx))


__all__ = ["traverse", "Visitor", "VisitFn"]
