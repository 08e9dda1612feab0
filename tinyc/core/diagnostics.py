# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Common diagnostic structure reported by the driver.

Pipeline stages raise `CompileError`s; the driver converts the first one into a
`Diagnostic` so CLI/JSON output has a single structured shape.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .span import Span


@dataclass
class Diagnostic:
	"""Represents a compiler diagnostic (error/warning/etc.)."""

	message: str
	code: str | None = None
	# Pipeline phase that produced the diagnostic (lexer/parser/transform/codegen).
	phase: str | None = None
	severity: str = "error"
	span: Span = field(default_factory=Span)  # Span() denotes unknown location.
	notes: list[str] = field(default_factory=list)

	def __post_init__(self) -> None:
		if self.span is None:  # type: ignore[unreachable]
			self.span = Span()

	def to_json(self) -> dict:
		"""Render to a JSON-friendly dict (phase/message/severity/file/line/column)."""
		return {
			"phase": self.phase,
			"code": self.code,
			"message": self.message,
			"severity": self.severity,
			"file": self.span.file,
			"line": self.span.line,
			"column": self.span.column,
			"notes": list(self.notes),
		}

	def format(self) -> str:
		"""Human-readable one-line rendering: `file:line:column: phase error: message`."""
		where = self.span.file or "<input>"
		if self.span.is_known():
			where = f"{where}:{self.span.line}:{self.span.column}"
		label = f"{self.phase} {self.severity}" if self.phase else self.severity
		text = f"{where}: {label}: {self.message}"
		for note in self.notes:
			text += f"\n  note: {note}"
		return text


__all__ = ["Diagnostic"]
