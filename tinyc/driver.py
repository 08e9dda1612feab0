# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
tinyc driver: runs the full pipeline and hosts the CLI.

  text → tokenize → parse → transform → generate → text

`compile_source` raises the first CompileError; `try_compile` returns a
CompileResult carrying either the output or exactly one Diagnostic.
"""

from __future__ import annotations

import argparse
import json
import sys
from dataclasses import dataclass, field, fields, is_dataclass
from pathlib import Path
from typing import List, Optional

from tinyc.core.diagnostics import Diagnostic
from tinyc.core.errors import CompileError, NestingTooDeepError
from tinyc.core.span import Span
from tinyc.stage0 import parse, tokenize
from tinyc.stage0.tokens import Token
from tinyc.stage1 import transform
from tinyc.stage2 import generate

# Input compiled when the CLI is given neither a file nor an expression.
REFERENCE_INPUT = "(add 2 (subtract 4 2))"

EMIT_STAGES = ("tokens", "ast", "c-ast", "c")


@dataclass
class CompileResult:
	"""Outcome of `try_compile`: output on success, one diagnostic on failure."""

	output: Optional[str] = None
	diagnostics: List[Diagnostic] = field(default_factory=list)

	@property
	def ok(self) -> bool:
		return not self.diagnostics


def compile_source(source: str, file: Optional[str] = None) -> str:
	"""Compile `source` to C-like text, raising the first CompileError."""
	tokens = tokenize(source, file)
	program = parse(tokens, end_span=Span.from_offset(source, len(source), file))
	return generate(transform(program))


def try_compile(source: str, file: Optional[str] = None) -> CompileResult:
	try:
		return CompileResult(output=compile_source(source, file))
	except CompileError as err:
		return CompileResult(diagnostics=[err.to_diagnostic(file)])


def _token_to_json(token: Token) -> dict:
	return {"type": token.kind.value, "value": token.text}


def _node_to_json(value: object) -> object:
	"""Render a source/target tree as nested dicts tagged with `type`."""
	if isinstance(value, list):
		return [_node_to_json(item) for item in value]
	if is_dataclass(value):
		out: dict = {"type": type(value).__name__}
		for f in fields(value):
			if f.name == "loc":
				continue
			out[f.name] = _node_to_json(getattr(value, f.name))
		return out
	return value


def _dump_tree(tree: object, stage: str) -> str:
	# Both the dict conversion and json.dumps recurse per nesting level.
	try:
		return json.dumps(_node_to_json(tree), indent=2)
	except RecursionError:
		raise NestingTooDeepError(stage) from None


def emit(source: str, stage: str = "c", file: Optional[str] = None) -> str:
	"""
	Run the pipeline up to `stage` and render that stage's result.

	`tokens`, `ast` and `c-ast` render as indented JSON; `c` is the generated
	code itself.
	"""
	if stage not in EMIT_STAGES:
		raise ValueError(f"unknown emit stage {stage!r}; expected one of {', '.join(EMIT_STAGES)}")
	tokens = tokenize(source, file)
	if stage == "tokens":
		return json.dumps([_token_to_json(t) for t in tokens], indent=2)
	program = parse(tokens, end_span=Span.from_offset(source, len(source), file))
	if stage == "ast":
		return _dump_tree(program, stage)
	c_program = transform(program)
	if stage == "c-ast":
		return _dump_tree(c_program, stage)
	return generate(c_program)


def _read_input(args: argparse.Namespace) -> tuple[str, Optional[str]]:
	if args.expr is not None:
		return args.expr, None
	if args.source is None:
		return REFERENCE_INPUT, None
	if str(args.source) == "-":
		return sys.stdin.read(), "<stdin>"
	return args.source.read_text(), str(args.source)


def main(argv: list[str] | None = None) -> int:
	"""
	Minimal CLI: compiles one source (file, stdin, -e expression, or the
	built-in reference input) and prints the requested stage.

	With --json, prints {exit_code, output, diagnostics}; otherwise the result
	goes to stdout and diagnostics go to stderr.
	"""
	parser = argparse.ArgumentParser(prog="tinyc", description="tinyc: Lisp-style calls -> C-style calls")
	parser.add_argument("source", type=Path, nargs="?", help="Source file ('-' for stdin)")
	parser.add_argument("-e", "--expr", type=str, help="Compile the given source text instead of a file")
	parser.add_argument("-o", "--output", type=Path, help="Write the result to this path instead of stdout")
	parser.add_argument(
		"--emit",
		choices=EMIT_STAGES,
		default="c",
		help="Pipeline stage to print: tokens, ast, c-ast (JSON) or c (generated code, default)",
	)
	parser.add_argument(
		"--json",
		action="store_true",
		help="Emit result and diagnostics as JSON (phase/message/severity/file/line/column)",
	)
	parser.add_argument("-v", "--verbose", action="store_true", help="Echo compile progress to stderr")
	args = parser.parse_args(argv)

	if args.source is not None and args.expr is not None:
		parser.error("give either a source file or --expr, not both")

	try:
		source, file = _read_input(args)
	except OSError as exc:
		return _report_failure(
			Diagnostic(message=f"cannot read source: {exc}", phase="driver", span=Span(file=str(args.source))),
			as_json=args.json,
		)

	if args.verbose:
		print("Compiling...", file=sys.stderr)
		print(f"Input:  {source}", file=sys.stderr)

	try:
		output = emit(source, args.emit, file)
	except CompileError as err:
		return _report_failure(err.to_diagnostic(file), as_json=args.json)

	if args.verbose:
		print(f"Output: {output}", file=sys.stderr)

	if args.output is not None:
		args.output.write_text(output + "\n")
	if args.json:
		print(json.dumps({"exit_code": 0, "output": output, "diagnostics": []}))
	elif args.output is None:
		print(output)
	return 0


def _report_failure(diag: Diagnostic, *, as_json: bool) -> int:
	if as_json:
		print(json.dumps({"exit_code": 1, "output": None, "diagnostics": [diag.to_json()]}))
	else:
		print(diag.format(), file=sys.stderr)
	return 1


__all__ = ["REFERENCE_INPUT", "EMIT_STAGES", "CompileResult", "compile_source", "try_compile", "emit", "main"]
