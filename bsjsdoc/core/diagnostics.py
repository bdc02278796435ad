# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Common diagnostic structure for the conversion stages.

Nothing in the converter is fatal except a parser failure, so diagnostics
are informational: they record tags that could not be reconciled, duplicate
tags that were dropped and similar best-effort decisions.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .span import Span


@dataclass
class Diagnostic:
	"""Represents a conversion diagnostic (warning/note)."""

	message: str
	code: str | None = None
	# Stage that produced the diagnostic (`reconcile`, `render`).
	phase: str | None = None
	severity: str = "warning"
	span: Span = field(default_factory=Span)  # Source location (Span() denotes unknown).
	notes: list[str] = field(default_factory=list)

	def __post_init__(self) -> None:
		if self.span is None:  # type: ignore[unreachable]
			self.span = Span()

	def format(self) -> str:
		"""Render as `file:line:col: severity: message`."""
		return f"{self.span}: {self.severity}: {self.message}"


def diag_to_json(diag: Diagnostic) -> dict:
	return {
		"phase": diag.phase,
		"code": diag.code,
		"message": diag.message,
		"severity": diag.severity,
		"file": diag.span.file,
		"line": diag.span.line,
		"column": diag.span.column,
		"notes": list(diag.notes),
	}


__all__ = ["Diagnostic", "diag_to_json"]
