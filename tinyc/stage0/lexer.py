# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Lexer: source text → flat token list.

Single forward-only cursor. At each position the current character is
classified and a maximal run is consumed:

  "(" / ")"   → PAREN
  whitespace  → skipped
  [0-9]+      → NUMBER
  "..."       → STRING (no escapes; quotes are not part of the text)
  [a-zA-Z]+   → NAME

Anything else is a LexError. The first error aborts the scan.
"""

from __future__ import annotations

import re
from typing import List, Optional

from tinyc.core.errors import UnrecognizedCharacterError, UnterminatedStringError
from tinyc.core.span import Span
from .tokens import Token, TokenKind

_WHITESPACE_RE = re.compile(r"\s")
_DIGIT_RE = re.compile(r"[0-9]")
_LETTER_RE = re.compile(r"[a-zA-Z]")


def tokenize(source: str, file: Optional[str] = None) -> List[Token]:
	"""Scan `source` into tokens in source order."""
	tokens: List[Token] = []
	current = 0
	length = len(source)
	# Line bookkeeping advances with the cursor; spans never rescan the prefix.
	line = 1
	line_start = 0

	def span_at(offset: int) -> Span:
		return Span(file=file, offset=offset, line=line, column=offset - line_start + 1)

	def take_run(start: int, pattern: re.Pattern[str]) -> int:
		end = start
		while end < length and pattern.match(source[end]):
			end += 1
		return end

	while current < length:
		char = source[current]

		if char == "(" or char == ")":
			tokens.append(Token(TokenKind.PAREN, char, span_at(current)))
			current += 1
			continue

		if _WHITESPACE_RE.match(char):
			if char == "\n":
				line += 1
				line_start = current + 1
			current += 1
			continue

		if _DIGIT_RE.match(char):
			end = take_run(current, _DIGIT_RE)
			tokens.append(Token(TokenKind.NUMBER, source[current:end], span_at(current)))
			current = end
			continue

		if char == '"':
			close = source.find('"', current + 1)
			if close == -1:
				raise UnterminatedStringError(current, span_at(current))
			tokens.append(Token(TokenKind.STRING, source[current + 1 : close], span_at(current)))
			newlines = source.count("\n", current + 1, close)
			if newlines:
				line += newlines
				line_start = source.rfind("\n", current + 1, close) + 1
			current = close + 1
			continue

		if _LETTER_RE.match(char):
			end = take_run(current, _LETTER_RE)
			tokens.append(Token(TokenKind.NAME, source[current:end], span_at(current)))
			current = end
			continue

		raise UnrecognizedCharacterError(char, current, span_at(current))

	return tokens


__all__ = ["tokenize"]
