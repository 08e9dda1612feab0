# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Lightweight source span representation used by tokens, AST nodes and
diagnostics.

Offsets are 0-based character indices into the source string; line and column
are 1-based, matching what editors print.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Span:
	"""Represents a source location (best-effort file/offset/line/column)."""

	file: Optional[str] = None
	offset: Optional[int] = None
	line: Optional[int] = None
	column: Optional[int] = None

	@classmethod
	def from_offset(cls, source: str, offset: int, file: Optional[str] = None) -> "Span":
		"""
		Construct a Span for `offset` within `source`.

		Offsets past the end of the source are clamped for line/column purposes
		(end-of-input errors point just past the last character).
		"""
		clamped = max(0, min(offset, len(source)))
		line = source.count("\n", 0, clamped) + 1
		line_start = source.rfind("\n", 0, clamped) + 1
		return cls(file=file, offset=offset, line=line, column=clamped - line_start + 1)

	def with_file(self, file: Optional[str]) -> "Span":
		if file is None or self.file is not None:
			return self
		return Span(file=file, offset=self.offset, line=self.line, column=self.column)

	def is_known(self) -> bool:
		return self.line is not None


__all__ = ["Span"]
