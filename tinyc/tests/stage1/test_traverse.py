# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Generic traversal tests: visit order, parent passing, context threading and
the fail-loud path for unknown nodes.
"""

from __future__ import annotations

from dataclasses import dataclass

import pytest

from tinyc.core.errors import TraversalError
from tinyc.stage0 import CallExpression, Node, NumberLiteral, Program, StringLiteral, parse_source
from tinyc.stage1 import traverse


def _record_all(log: list):
	def rec(node, parent, ctx):
		label = getattr(node, "name", None) or getattr(node, "value", None) or type(node).__name__
		parent_label = None if parent is None else (getattr(parent, "name", None) or type(parent).__name__)
		log.append((label, parent_label))

	return {Program: rec, CallExpression: rec, NumberLiteral: rec, StringLiteral: rec}


def test_preorder_visit_with_parents():
	log: list = []
	traverse(parse_source('(add 2 (sub "x" 4)) (nop)'), _record_all(log))
	assert log == [
		("Program", None),
		("add", "Program"),
		("2", "add"),
		("sub", "add"),
		("x", "sub"),
		("4", "sub"),
		("nop", "Program"),
	]


def test_missing_callbacks_still_descend():
	seen: list[str] = []
	visitor = {NumberLiteral: lambda node, parent, ctx: seen.append(node.value)}
	traverse(parse_source("(a 1 (b 2 (c 3)))"), visitor)
	assert seen == ["1", "2", "3"]


def test_context_is_inherited_and_overridden():
	depths: dict[str, int] = {}

	def on_call(node, parent, depth):
		depths[node.name] = depth
		return depth + 1

	def on_number(node, parent, depth):
		depths[node.value] = depth

	traverse(parse_source("(a 1 (b 2) 3)"), {CallExpression: on_call, NumberLiteral: on_number}, 0)
	assert depths == {"a": 0, "1": 1, "b": 1, "2": 2, "3": 1}


def test_none_return_keeps_parent_context():
	seen: list = []
	traverse(
		parse_source("(a 1)"),
		{CallExpression: lambda n, p, c: None, NumberLiteral: lambda n, p, c: seen.append(c)},
		"root",
	)
	assert seen == ["root"]


def test_unknown_node_type_fails_loudly():
	@dataclass
	class Bogus(Node):
		pass

	with pytest.raises(TraversalError) as exc_info:
		traverse(Program(body=[Bogus()]), {})
	assert exc_info.value.tag == "Bogus"


def test_unknown_node_type_fails_before_its_callback():
	@dataclass
	class Stray(Node):
		pass

	fired: list = []
	with pytest.raises(TraversalError):
		traverse(Program(body=[Stray()]), {Stray: lambda n, p, c: fired.append(n)})
	assert fired == []


def test_deep_nesting_walks_without_recursion_limit():
	depth = 5000
	depths: list[int] = []

	def on_call(node, parent, d):
		depths.append(d)
		return d + 1

	traverse(parse_source("(f " * depth + ")" * depth), {CallExpression: on_call}, 0)
	assert depths == list(range(depth))
