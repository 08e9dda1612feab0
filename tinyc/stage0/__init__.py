# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Stage 0 package: tokens, lexer, source AST and parser.

Pipeline placement:
  stage0 (text → tokens → AST) → stage1 (AST → C AST) → stage2 (C AST → text)
"""

from .tokens import Token, TokenKind
from .lexer import tokenize
from .ast import Node, Expr, Program, CallExpression, NumberLiteral, StringLiteral
from .parser import Parser, parse, parse_source

__all__ = [
	"Token",
	"TokenKind",
	"tokenize",
	"Node",
	"Expr",
	"Program",
	"CallExpression",
	"NumberLiteral",
	"StringLiteral",
	"Parser",
	"parse",
	"parse_source",
]
