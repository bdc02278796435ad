# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Source positions and ranges shared by the statement tree and diagnostics.

Indexing convention (fixed for every parser adapter feeding this package):
  - lines are 1-based,
  - columns are 0-based,
  - range ends are exclusive (`end.column` is one past the last character).

`Span` is the diagnostic-facing view: a best-effort file/line/column record
that can be built from a `SourceRange`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence


@dataclass(frozen=True, order=True)
class SourcePosition:
	line: int
	column: int = 0


@dataclass(frozen=True)
class SourceRange:
	start: SourcePosition
	end: SourcePosition

	@classmethod
	def lines(cls, start_line: int, end_line: int | None = None) -> "SourceRange":
		"""Range covering whole lines `start_line..end_line` (columns left at 0)."""
		if end_line is None:
			end_line = start_line
		return cls(SourcePosition(start_line, 0), SourcePosition(end_line, 0))

	def slice(self, source_lines: Sequence[str]) -> str:
		"""
		Return the exact source text covered by this range.

		`source_lines` is the file split on newlines. Multi-line ranges are
		joined back with `\\n`. Out-of-bounds lines yield an empty string.
		"""
		first = self.start.line - 1
		last = self.end.line - 1
		if first < 0 or last >= len(source_lines) or last < first:
			return ""
		if first == last:
			return source_lines[first][self.start.column : self.end.column]
		parts = [source_lines[first][self.start.column :]]
		parts.extend(source_lines[first + 1 : last])
		parts.append(source_lines[last][: self.end.column])
		return "\n".join(parts)


@dataclass(frozen=True)
class Span:
	"""Represents a source span (best-effort file/line/column)."""

	file: Optional[str] = None
	line: Optional[int] = None
	column: Optional[int] = None
	end_line: Optional[int] = None
	end_column: Optional[int] = None

	@classmethod
	def from_range(cls, rng: SourceRange | None, file: str | None = None) -> "Span":
		if rng is None:
			return cls(file=file)
		return cls(
			file=file,
			line=rng.start.line,
			column=rng.start.column,
			end_line=rng.end.line,
			end_column=rng.end.column,
		)

	def __str__(self) -> str:
		loc = f"{self.line if self.line is not None else '?'}:{self.column if self.column is not None else '?'}"
		return f"{self.file}:{loc}" if self.file else loc


__all__ = ["SourcePosition", "SourceRange", "Span"]
