# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Compile error hierarchy.

One family per pipeline stage. Every error is fatal: the stage that detects it
raises immediately and nothing downstream runs. The driver turns the raised
error into a single `Diagnostic`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from .diagnostics import Diagnostic
from .span import Span

if TYPE_CHECKING:
	from tinyc.stage0.tokens import Token


class CompileError(Exception):
	"""Base class for all pipeline failures."""

	phase: str = "compile"
	code: str = "E0000"

	def __init__(self, message: str, span: Optional[Span] = None) -> None:
		super().__init__(message)
		self.message = message
		self.span = span if span is not None else Span()

	def to_diagnostic(self, file: Optional[str] = None) -> Diagnostic:
		return Diagnostic(
			message=self.message,
			code=self.code,
			phase=self.phase,
			span=self.span.with_file(file),
		)


# Lexer

class LexError(CompileError):
	phase = "lexer"
	code = "E0100"


class UnrecognizedCharacterError(LexError):
	"""The current character matches none of the recognized classes."""

	code = "E0101"

	def __init__(self, char: str, position: int, span: Optional[Span] = None) -> None:
		super().__init__(f"unrecognized character {char!r} at position {position}", span)
		self.char = char
		self.position = position


class UnterminatedStringError(LexError):
	"""A string literal ran off the end of the input without a closing quote."""

	code = "E0102"

	def __init__(self, position: int, span: Optional[Span] = None) -> None:
		super().__init__(f"unterminated string literal starting at position {position}", span)
		self.position = position


# Parser

class ParseError(CompileError):
	phase = "parser"
	code = "E0200"


class UnexpectedTokenError(ParseError):
	"""The token at the cursor cannot start (or continue) a valid construct."""

	code = "E0201"

	def __init__(self, token: "Token", position: int, expected: Optional[str] = None) -> None:
		message = f"unexpected {token.kind.value} token {token.text!r} at token {position}"
		if expected:
			message += f" (expected {expected})"
		super().__init__(message, token.span)
		self.token = token
		self.position = position
		self.expected = expected


class UnexpectedEndOfInputError(ParseError):
	"""The token stream ended while a construct was still open."""

	code = "E0202"

	def __init__(self, expected: Optional[str] = None, span: Optional[Span] = None) -> None:
		message = "unexpected end of input"
		if expected:
			message += f" (expected {expected})"
		super().__init__(message, span)
		self.expected = expected


# Tree walkers

class TraversalError(CompileError):
	"""The traversal reached a node type it does not know how to descend into."""

	phase = "transform"
	code = "E0300"

	def __init__(self, tag: str) -> None:
		super().__init__(f"unknown node type during traversal: {tag}")
		self.tag = tag


class GenError(CompileError):
	"""The generator reached a node type it cannot render."""

	phase = "codegen"
	code = "E0400"

	def __init__(self, tag: str) -> None:
		super().__init__(f"unknown node type during code generation: {tag}")
		self.tag = tag


# Driver

class NestingTooDeepError(CompileError):
	"""A tree is nested too deeply to render as a JSON stage dump."""

	phase = "driver"
	code = "E0500"

	def __init__(self, stage: str) -> None:
		super().__init__(f"{stage} is nested too deeply to render as JSON")
		self.stage = stage


__all__ = [
	"CompileError",
	"LexError",
	"UnrecognizedCharacterError",
	"UnterminatedStringError",
	"ParseError",
	"UnexpectedTokenError",
	"UnexpectedEndOfInputError",
	"TraversalError",
	"GenError",
	"NestingTooDeepError",
]
