# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Shared core types for the tinyc pipeline: source spans, diagnostics and the
compile error hierarchy.
"""

from .span import Span
from .diagnostics import Diagnostic
from .errors import (
	CompileError,
	LexError,
	UnrecognizedCharacterError,
	UnterminatedStringError,
	ParseError,
	UnexpectedTokenError,
	UnexpectedEndOfInputError,
	TraversalError,
	GenError,
	NestingTooDeepError,
)

__all__ = [
	"Span",
	"Diagnostic",
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
