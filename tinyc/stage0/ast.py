# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Source AST produced by the parser.

Pipeline placement:
  tokens → AST (this file) → C AST (tinyc/stage1/c_nodes.py) → text

The tree mirrors the surface syntax minus lexical detail (whitespace and the
literal parentheses). Literal values keep their raw text; nothing is
converted to Python numbers.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Union

from tinyc.core.span import Span


class Node:
	"""Base class for all source AST nodes."""
	pass


@dataclass
class NumberLiteral(Node):
	"""Number literal; `value` is the digit run as written."""
	value: str
	loc: Optional[Span] = field(default=None, compare=False, repr=False)


@dataclass
class StringLiteral(Node):
	"""String literal; `value` excludes the surrounding quotes."""
	value: str
	loc: Optional[Span] = field(default=None, compare=False, repr=False)


@dataclass
class CallExpression(Node):
	"""`(name param...)`; params may be empty."""
	name: str
	params: List["Expr"] = field(default_factory=list)
	loc: Optional[Span] = field(default=None, compare=False, repr=False)


@dataclass
class Program(Node):
	"""Root node: the top-level forms in source order."""
	body: List["Expr"] = field(default_factory=list)
	loc: Optional[Span] = field(default=None, compare=False, repr=False)


Expr = Union[CallExpression, NumberLiteral, StringLiteral]


__all__ = ["Node", "Expr", "Program", "CallExpression", "NumberLiteral", "StringLiteral"]
