# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
C AST → text.

Rendering rules:
  Program              statements joined by newlines (no trailing newline)
  ExpressionStatement  `<expr>;`
  CallExpression       `callee(arg, arg)`
  Identifier           name
  NumberLiteral        value verbatim
  StringLiteral        `"value"` (embedded quotes are not escaped)

Rendering works off an explicit stack of pending items (nodes still to expand
and text already decided), so deeply nested calls do not recurse.
"""

from __future__ import annotations

from typing import List, Sequence, Union

from tinyc.core.errors import GenError
from tinyc.stage1 import c_nodes as C

_Item = Union[C.CNode, str]


def _interleave(nodes: Sequence[C.CNode], sep: str) -> List[_Item]:
	items: List[_Item] = []
	for idx, node in enumerate(nodes):
		if idx:
			items.append(sep)
		items.append(node)
	return items


def _expand(node: C.CNode) -> List[_Item]:
	"""One rendering step: the node's output as text pieces and child nodes, in order."""
	if isinstance(node, C.Program):
		return _interleave(node.body, "\n")
	if isinstance(node, C.ExpressionStatement):
		return [node.expression, ";"]
	if isinstance(node, C.CallExpression):
		return [node.callee, "(", *_interleave(node.arguments, ", "), ")"]
	if isinstance(node, C.Identifier):
		return [node.name]
	if isinstance(node, C.NumberLiteral):
		return [node.value]
	if isinstance(node, C.StringLiteral):
		return [f'"{node.value}"']
	raise GenError(type(node).__name__)


def generate(node: C.CNode) -> str:
	parts: List[str] = []
	pending: List[_Item] = [node]
	while pending:
		item = pending.pop()
		if isinstance(item, str):
			parts.append(item)
		else:
			pending.extend(reversed(_expand(item)))
	return "".join(parts)


__all__ = ["generate"]
