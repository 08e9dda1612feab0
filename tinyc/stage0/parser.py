# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Parser: tokens → source AST.

One token of lookahead over a shared cursor. Nested calls are tracked on an
explicit stack of open calls rather than by recursion. Grammar:

  program := expr*
  expr    := NUMBER | STRING | "(" NAME expr* ")"

Top-level forms may follow one another: `(foo)(bar)` is a program with two
calls in its body.
"""

from __future__ import annotations

from typing import List, Optional, Sequence

from tinyc.core.errors import UnexpectedEndOfInputError, UnexpectedTokenError
from tinyc.core.span import Span
from . import ast
from .lexer import tokenize
from .tokens import Token, TokenKind


class Parser:
	"""
	Token-stream parser.

	A parser instance owns its cursor; create one per token list (the module
	level `parse` does this for callers).
	"""

	def __init__(self, tokens: Sequence[Token], end_span: Optional[Span] = None) -> None:
		self._tokens = tokens
		self._current = 0
		# Location reported for end-of-input errors (just past the last token).
		self._end_span = end_span if end_span is not None else Span()

	def parse_program(self) -> ast.Program:
		body: List[ast.Expr] = []
		# Calls whose closing paren has not been seen yet, innermost last.
		open_calls: List[ast.CallExpression] = []
		while open_calls or self._current < len(self._tokens):
			if open_calls:
				token = self._peek('")"')
				if token.is_close:
					self._advance()
					open_calls.pop()
					continue
				target = open_calls[-1].params
			else:
				token = self._peek("an expression")
				target = body
			node = self._start_expr(token)
			target.append(node)
			if isinstance(node, ast.CallExpression):
				open_calls.append(node)
		loc = self._tokens[0].span if self._tokens else None
		return ast.Program(body=body, loc=loc)

	def _peek(self, expected: str) -> Token:
		if self._current >= len(self._tokens):
			raise UnexpectedEndOfInputError(expected=expected, span=self._end_span)
		return self._tokens[self._current]

	def _advance(self) -> Token:
		token = self._tokens[self._current]
		self._current += 1
		return token

	def _start_expr(self, token: Token) -> ast.Expr:
		"""
		Consume the tokens that open an expression at the cursor.

		Literals are complete once consumed; a call is returned with empty
		params and stays open until its ")" is reached.
		"""
		if token.kind is TokenKind.NUMBER:
			self._advance()
			return ast.NumberLiteral(token.text, loc=token.span)

		if token.kind is TokenKind.STRING:
			self._advance()
			return ast.StringLiteral(token.text, loc=token.span)

		if token.is_open:
			self._advance()
			name_token = self._peek("a call name")
			if name_token.kind is not TokenKind.NAME:
				raise UnexpectedTokenError(name_token, self._current, expected="a call name")
			self._advance()
			return ast.CallExpression(name=name_token.text, params=[], loc=token.span)

		raise UnexpectedTokenError(token, self._current, expected="an expression")


def parse(tokens: Sequence[Token], end_span: Optional[Span] = None) -> ast.Program:
	"""Parse a token list into a `Program`."""
	return Parser(tokens, end_span=end_span).parse_program()


def parse_source(source: str, file: Optional[str] = None) -> ast.Program:
	"""Convenience: tokenize and parse `source` in one step."""
	return parse(tokenize(source, file), end_span=Span.from_offset(source, len(source), file))


__all__ = ["Parser", "parse", "parse_source"]
