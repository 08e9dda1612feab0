# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
End-to-end pipeline tests through `compile_source` / `try_compile` / `emit`.
"""

from __future__ import annotations

import json

import pytest

from tinyc import compile_source, emit, try_compile
from tinyc.core.errors import LexError, NestingTooDeepError, ParseError, UnexpectedEndOfInputError
from tinyc.driver import REFERENCE_INPUT
from tinyc.stage0 import parse_source
from tinyc.stage1 import transform
from tinyc.stage2 import generate


def test_reference_input():
	assert compile_source(REFERENCE_INPUT) == "add(2, subtract(4, 2));"


def test_zero_argument_call():
	assert compile_source("(foo)") == "foo();"


def test_nested_calls_are_not_double_wrapped():
	out = compile_source("(add 2 (subtract 4 2))")
	assert out.count(";") == 1
	assert "subtract(4, 2)" in out
	assert "subtract(4, 2);" not in out


def test_sibling_top_level_forms_wrapped_independently():
	assert compile_source("(foo)(bar)") == "foo();\nbar();"


def test_strings_and_whitespace():
	src = '(print\n\t"hello world"\n\t(concat "a" "b") 10)'
	assert compile_source(src) == 'print("hello world", concat("a", "b"), 10);'


@pytest.mark.parametrize(
	"source",
	[
		"(a)",
		"(a 1 2 3)",
		"(a (b (c (d))))",
		'(a "x" (b 1) "y") (c) (d (e 2))',
	],
)
def test_statement_count_and_depth_preserved(source: str):
	out = compile_source(source)
	top_level = len(parse_source(source).body)
	assert out.count(";") == top_level
	assert len(out.splitlines()) == top_level
	max_depth = depth = 0
	for ch in source:
		if ch == "(":
			depth += 1
			max_depth = max(max_depth, depth)
		elif ch == ")":
			depth -= 1
	out_depth = depth = 0
	for ch in out:
		if ch == "(":
			depth += 1
			out_depth = max(out_depth, depth)
		elif ch == ")":
			depth -= 1
	assert out_depth == max_depth


def test_transform_then_generate_is_deterministic():
	program = parse_source('(add 2 (subtract 4 2)) (log "done")')
	assert generate(transform(program)) == generate(transform(program))


def test_missing_name_is_parse_error():
	with pytest.raises(ParseError):
		compile_source("(2 3)")


def test_unrecognized_character_is_lex_error():
	with pytest.raises(LexError) as exc_info:
		compile_source("(add 2 #)")
	assert exc_info.value.char == "#"


def test_try_compile_success():
	result = try_compile("(foo)")
	assert result.ok
	assert result.output == "foo();"
	assert result.diagnostics == []


def test_try_compile_reports_exactly_one_diagnostic():
	result = try_compile("(add 2 #) (2 3)", file="bad.lisp")
	assert not result.ok
	assert result.output is None
	assert len(result.diagnostics) == 1
	diag = result.diagnostics[0]
	assert diag.phase == "lexer"
	assert diag.code == "E0101"
	assert diag.span.file == "bad.lisp"
	assert (diag.span.line, diag.span.column) == (1, 8)
	assert diag.format().startswith("bad.lisp:1:8: lexer error:")


def test_try_compile_end_of_input_points_past_source():
	result = try_compile("(add 1")
	diag = result.diagnostics[0]
	assert diag.phase == "parser"
	assert diag.code == UnexpectedEndOfInputError.code
	assert diag.span.offset == len("(add 1")


def test_emit_stages():
	tokens = json.loads(emit("(f 1)", "tokens"))
	assert tokens == [
		{"type": "paren", "value": "("},
		{"type": "name", "value": "f"},
		{"type": "number", "value": "1"},
		{"type": "paren", "value": ")"},
	]
	assert json.loads(emit("(f 1)", "ast")) == {
		"type": "Program",
		"body": [
			{
				"type": "CallExpression",
				"name": "f",
				"params": [{"type": "NumberLiteral", "value": "1"}],
			}
		],
	}
	assert json.loads(emit("(f 1)", "c-ast")) == {
		"type": "Program",
		"body": [
			{
				"type": "ExpressionStatement",
				"expression": {
					"type": "CallExpression",
					"callee": {"type": "Identifier", "name": "f"},
					"arguments": [{"type": "NumberLiteral", "value": "1"}],
				},
			}
		],
	}
	assert emit("(f 1)", "c") == "f(1);"


def test_emit_rejects_unknown_stage():
	with pytest.raises(ValueError):
		emit("(f)", "llvm")


def test_deeply_nested_input_compiles():
	depth = 5000
	source = "(f " * depth + ")" * depth
	assert compile_source(source) == "f(" * depth + ")" * depth + ";"
	result = try_compile(source)
	assert result.ok
	assert result.output.count(";") == 1


def test_deeply_nested_error_is_a_diagnostic():
	result = try_compile("(f " * 3000)
	assert not result.ok
	assert result.diagnostics[0].phase == "parser"


def test_json_dump_of_too_deep_tree_is_structured_error():
	source = "(f " * 5000 + ")" * 5000
	with pytest.raises(NestingTooDeepError) as exc_info:
		emit(source, "ast")
	assert exc_info.value.stage == "ast"
	assert exc_info.value.to_diagnostic().phase == "driver"
