# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Statement classifier.

Partitions one scope's sibling statements into the four groups the renderer
cares about. No recursion: nested bodies are classified when the renderer
descends into them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List

from bsjsdoc.stage0.ast import (
	ClassStmt,
	CommentStmt,
	FunctionStmt,
	NamespaceStmt,
	Stmt,
	StmtKind,
)


@dataclass
class Classified:
	comments: List[CommentStmt] = field(default_factory=list)
	# Free functions and class methods alike.
	functions: List[FunctionStmt] = field(default_factory=list)
	classes: List[ClassStmt] = field(default_factory=list)
	namespaces: List[NamespaceStmt] = field(default_factory=list)

	def is_empty(self) -> bool:
		return not (self.comments or self.functions or self.classes or self.namespaces)

	def declarations(self) -> List[Stmt]:
		"""Functions, classes and namespaces merged back into source order."""
		decls: List[Stmt] = [*self.functions, *self.classes, *self.namespaces]
		decls.sort(key=lambda s: s.range.start)
		return decls


def classify(statements: Iterable[Stmt]) -> Classified:
	out = Classified()
	for stmt in statements:
		kind = stmt.kind
		if kind is StmtKind.COMMENT:
			out.comments.append(stmt)  # type: ignore[arg-type]
		elif kind is StmtKind.FUNCTION or kind is StmtKind.METHOD:
			out.functions.append(stmt)  # type: ignore[arg-type]
		elif kind is StmtKind.CLASS:
			out.classes.append(stmt)  # type: ignore[arg-type]
		elif kind is StmtKind.NAMESPACE:
			out.namespaces.append(stmt)  # type: ignore[arg-type]
		elif kind is StmtKind.FIELD or kind is StmtKind.OTHER:
			continue
		else:
			raise AssertionError(f"unhandled statement kind {kind!r}")
	return out


__all__ = ["Classified", "classify"]
