# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Lexical tokens produced by the lexer and consumed by the parser.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from tinyc.core.span import Span


class TokenKind(Enum):
	"""Token classes of the surface language."""
	PAREN = "paren"    # "(" or ")"
	NUMBER = "number"  # [0-9]+
	STRING = "string"  # "..." (quotes stripped)
	NAME = "name"      # [a-zA-Z]+


@dataclass(frozen=True)
class Token:
	"""A classified lexeme with its raw text."""
	kind: TokenKind
	text: str
	span: Span = field(default_factory=Span, compare=False, repr=False)

	@property
	def is_open(self) -> bool:
		return self.kind is TokenKind.PAREN and self.text == "("

	@property
	def is_close(self) -> bool:
		return self.kind is TokenKind.PAREN and self.text == ")"


__all__ = ["TokenKind", "Token"]
