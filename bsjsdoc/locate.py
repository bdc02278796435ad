# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Comment locator: pairs a declaration with the comment that documents it.

A comment documents a declaration when it ends on the line right above the
declaration's effective start (its first annotation, if any), or when it
ends on the declaration's own start line (trailing comment). The first
match in source order wins.
"""

from __future__ import annotations

from typing import Optional, Sequence

from bsjsdoc.stage0.ast import CommentStmt, Stmt


def effective_start_line(decl: Stmt) -> int:
	annotations = getattr(decl, "annotations", None)
	if annotations:
		return annotations[0].range.start.line
	return decl.range.start.line


def documents(comment: CommentStmt, decl: Stmt) -> bool:
	end_line = comment.range.end.line
	if end_line + 1 == effective_start_line(decl):
		return True
	return end_line == decl.range.start.line


def find_comment(comments: Sequence[CommentStmt], decl: Stmt) -> Optional[CommentStmt]:
	for comment in comments:
		if documents(comment, decl):
			return comment
	return None


__all__ = ["effective_start_line", "documents", "find_comment"]
