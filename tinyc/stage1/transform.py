# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Source AST → C AST.

Drives `traverse` with a visitor whose context is the current append target:
the list that the replacement of the visited node goes into. Each call node
hands its own `arguments` list down as the target for its children, so the
build state lives in the walk rather than on the source nodes.
"""

from __future__ import annotations

from typing import List, Optional

from tinyc.stage0 import ast
from . import c_nodes as C
from .traverse import Visitor, traverse


def _on_number(node: ast.NumberLiteral, parent: Optional[ast.Node], target: list) -> None:
	target.append(C.NumberLiteral(node.value))


def _on_string(node: ast.StringLiteral, parent: Optional[ast.Node], target: list) -> None:
	target.append(C.StringLiteral(node.value))


def _on_call(node: ast.CallExpression, parent: Optional[ast.Node], target: list) -> list:
	call = C.CallExpression(callee=C.Identifier(node.name), arguments=[])
	# Only calls that are not arguments of another call become statements.
	if isinstance(parent, ast.CallExpression):
		target.append(call)
	else:
		target.append(C.ExpressionStatement(expression=call))
	return call.arguments


_VISITOR: Visitor = {
	ast.NumberLiteral: _on_number,
	ast.StringLiteral: _on_string,
	ast.CallExpression: _on_call,
}


def transform(program: ast.Program) -> C.Program:
	"""Build a fresh C AST for `program`; the input tree is left untouched."""
	body: List[object] = []
	traverse(program, _VISITOR, body)
	return C.Program(body=body)


__all__ = ["transform"]
