# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
C-like target AST.

Pipeline placement:
  AST (tinyc/stage0/ast.py) → C AST (this file) → text (tinyc/stage2/codegen.py)

Built only by the transformer. Calls carry an explicit `Identifier` callee;
top-level calls are wrapped in `ExpressionStatement`, nested argument calls
are not.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Union


class CNode:
	"""Base class for all target nodes."""
	pass


@dataclass
class Identifier(CNode):
	name: str


@dataclass
class NumberLiteral(CNode):
	value: str


@dataclass
class StringLiteral(CNode):
	value: str


@dataclass
class CallExpression(CNode):
	"""`callee(arg, ...)`."""
	callee: Identifier
	arguments: List["CExpr"] = field(default_factory=list)


@dataclass
class ExpressionStatement(CNode):
	"""A call in statement position; renders with a trailing `;`."""
	expression: CallExpression


@dataclass
class Program(CNode):
	body: List[Union[ExpressionStatement, "CExpr"]] = field(default_factory=list)


CExpr = Union[CallExpression, NumberLiteral, StringLiteral]


__all__ = [
	"CNode",
	"CExpr",
	"Identifier",
	"NumberLiteral",
	"StringLiteral",
	"CallExpression",
	"ExpressionStatement",
	"Program",
]
